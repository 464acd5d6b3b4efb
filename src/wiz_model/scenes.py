"""Scene catalog.

Scenes are ambient lighting presets addressed by a stable numeric id or by
their display name. The catalog is fixed; ``Rhythm`` (1000) sits outside the
contiguous 1-32 band and is a legal scene.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import IntEnum
from types import MappingProxyType
from typing import Self

from wiz_model.const import SCENE_ID_RANGE_DESC
from wiz_model.exceptions import SceneIDError, SceneNameError

__all__ = [
    "DIMMABLE_WHITE_SCENE_IDS",
    "SCENES",
    "TUNABLE_WHITE_SCENE_IDS",
    "Scene",
    "dimmable_white_scenes",
    "scene_names",
    "tunable_white_scenes",
]


class Scene(IntEnum):
    OCEAN = 1
    ROMANCE = 2
    SUNSET = 3
    PARTY = 4
    FIREPLACE = 5
    COZY = 6
    FOREST = 7
    PASTEL_COLORS = 8
    WAKE_UP = 9
    BEDTIME = 10
    WARM_WHITE = 11
    DAYLIGHT = 12
    COOL_WHITE = 13
    NIGHT_LIGHT = 14
    FOCUS = 15
    RELAX = 16
    TRUE_COLORS = 17
    TV_TIME = 18
    PLANTGROWTH = 19
    SPRING = 20
    SUMMER = 21
    FALL = 22
    DEEPDIVE = 23
    JUNGLE = 24
    MOJITO = 25
    CLUB = 26
    CHRISTMAS = 27
    HALLOWEEN = 28
    CANDLELIGHT = 29
    GOLDEN_WHITE = 30
    PULSE = 31
    STEAMPUNK = 32
    RHYTHM = 1000

    @property
    def display_name(self) -> str:
        """Return the catalog name of this scene."""
        return _NAMES_BY_ID[self.value]

    @classmethod
    def from_id(cls, scene_id: int) -> Self:
        """Resolve a scene by numeric id.

        Raises:
            SceneIDError: if the id is not one of 1-32 or 1000
        """
        # bool is an int subclass; True must not resolve to Ocean
        if isinstance(scene_id, int) and not isinstance(scene_id, bool) and scene_id in _NAMES_BY_ID:
            return cls(scene_id)
        raise SceneIDError(
            given_id=scene_id,
            details=f"Scene ID out of range. Expected {SCENE_ID_RANGE_DESC}",
        )

    @classmethod
    def from_name(cls, name: str) -> Self:
        """Resolve a scene by exact display name (case and whitespace sensitive).

        Raises:
            SceneNameError: if no scene has that display name
        """
        scene_id = SCENES.get(name)
        if scene_id is None:
            raise SceneNameError(given_name=name, details="Scene name not found.")
        return cls.from_id(scene_id)


# Scene display name to numeric id
SCENES: MappingProxyType[str, int] = MappingProxyType(
    {
        "Ocean": 1,
        "Romance": 2,
        "Sunset": 3,
        "Party": 4,
        "Fireplace": 5,
        "Cozy": 6,
        "Forest": 7,
        "Pastel Colors": 8,
        "Wake up": 9,
        "Bedtime": 10,
        "Warm White": 11,
        "Daylight": 12,
        "Cool white": 13,
        "Night light": 14,
        "Focus": 15,
        "Relax": 16,
        "True colors": 17,
        "TV time": 18,
        "Plantgrowth": 19,
        "Spring": 20,
        "Summer": 21,
        "Fall": 22,
        "Deepdive": 23,
        "Jungle": 24,
        "Mojito": 25,
        "Club": 26,
        "Christmas": 27,
        "Halloween": 28,
        "Candlelight": 29,
        "Golden white": 30,
        "Pulse": 31,
        "Steampunk": 32,
        "Rhythm": 1000,
    }
)
_NAMES_BY_ID: MappingProxyType[int, str] = MappingProxyType({v: k for k, v in SCENES.items()})

# Order is significant: UI layers present the scenes in this order
TUNABLE_WHITE_SCENE_IDS: tuple[int, ...] = (6, 9, 10, 11, 12, 13, 14, 15, 16, 18, 29, 30, 31, 32)
DIMMABLE_WHITE_SCENE_IDS: tuple[int, ...] = (9, 10, 13, 14, 29, 30, 31, 32)


def _get_scenes_list(scene_ids: Iterable[int]) -> list[Scene]:
    return [Scene.from_id(scene_id) for scene_id in scene_ids]


def tunable_white_scenes() -> list[Scene]:
    """Scenes usable by tunable white bulbs, in catalog presentation order."""
    return _get_scenes_list(TUNABLE_WHITE_SCENE_IDS)


def dimmable_white_scenes() -> list[Scene]:
    """Scenes usable by dimmable white bulbs, in catalog presentation order."""
    return _get_scenes_list(DIMMABLE_WHITE_SCENE_IDS)


def scene_names() -> list[str]:
    """Display names of every scene, ordered by id."""
    return [scene.display_name for scene in Scene]
