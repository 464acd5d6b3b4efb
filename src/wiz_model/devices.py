"""Device taxonomy.

A ``Device`` is either a ``Socket`` or a ``Bulb``; bulbs come in three
variants. The concrete class is the type tag, so a device's outer kind,
its variant and ``get_type()`` can never disagree. ``Device.new`` is the
single construction path, and patches rebuild through it.
"""

from __future__ import annotations

from enum import StrEnum
from types import MappingProxyType
from typing import Any, ClassVar

from typing_extensions import override

from pydantic import BaseModel, ConfigDict

from wiz_model.scenes import Scene, dimmable_white_scenes, tunable_white_scenes
from wiz_model.structs import DeviceDescriptor, DeviceFeatures

__all__ = [
    "DEFAULT_FEATURES",
    "Bulb",
    "Device",
    "DeviceDefinition",
    "DeviceType",
    "DimmableWhiteBulb",
    "RgbBulb",
    "Socket",
    "TunableWhiteBulb",
]


class DeviceType(StrEnum):
    BULB_TW = "bulb_tw"
    BULB_DW = "bulb_dw"
    BULB_RGB = "bulb_rgb"
    SOCKET = "socket"


# Features a device type has when nothing else is known
DEFAULT_FEATURES: MappingProxyType[DeviceType, DeviceFeatures] = MappingProxyType(
    {
        DeviceType.BULB_TW: DeviceFeatures(
            hue=False,
            color_temp=True,
            effects=True,
            dimming=True,
            dual_head=False,
        ),
        DeviceType.BULB_DW: DeviceFeatures(
            hue=False,
            color_temp=False,
            effects=False,
            dimming=True,
            dual_head=False,
        ),
        DeviceType.BULB_RGB: DeviceFeatures(
            hue=True,
            color_temp=True,
            effects=True,
            dimming=True,
            dual_head=False,
        ),
        DeviceType.SOCKET: DeviceFeatures(
            hue=False,
            color_temp=False,
            effects=False,
            dimming=False,
            dual_head=False,
        ),
    }
)


class DeviceDefinition(BaseModel):
    """The features and descriptor carried by every device."""

    model_config = ConfigDict(frozen=True)

    features: DeviceFeatures
    descriptor: DeviceDescriptor


class Device(BaseModel):
    """A classified device.

    Do not instantiate variants directly; use ``Device.new`` or
    ``Device.from_descriptor``.
    """

    model_config = ConfigDict(frozen=True)

    device_type: ClassVar[DeviceType]
    type_label: ClassVar[str]

    definition: DeviceDefinition

    @override
    def model_post_init(self, context: Any, /) -> None:
        if not hasattr(type(self), "device_type"):
            msg = f"{type(self).__name__} has no device type; build devices with Device.new"
            raise TypeError(msg)

    @classmethod
    def new(
        cls,
        device_type: DeviceType,
        features: DeviceFeatures | None = None,
        descriptor: DeviceDescriptor | None = None,
    ) -> Device:
        """Build a device of ``device_type``.

        Missing features fall back to the defaults for the type; a missing
        descriptor becomes an all-unknown descriptor.
        """
        try:
            variant = _VARIANTS[DeviceType(device_type)]
        except ValueError:
            msg = f"Unknown device type: {device_type!r}"
            raise ValueError(msg) from None

        return variant(
            definition=DeviceDefinition(
                features=features if features is not None else DEFAULT_FEATURES[variant.device_type],
                descriptor=descriptor if descriptor is not None else DeviceDescriptor(),
            )
        )

    @classmethod
    def from_descriptor(cls, descriptor: DeviceDescriptor) -> Device:
        """Classify a raw descriptor. See ``wiz_model.classification``."""
        # Import here to avoid circular dependency
        from wiz_model.classification import from_descriptor  # noqa: PLC0415

        return from_descriptor(descriptor)

    def get_type(self) -> DeviceType:
        return self.device_type

    def get_definition(self) -> DeviceDefinition:
        return self.definition

    @property
    def features(self) -> DeviceFeatures:
        return self.definition.features

    @property
    def descriptor(self) -> DeviceDescriptor:
        return self.definition.descriptor

    @property
    def is_bulb(self) -> bool:
        return isinstance(self, Bulb)

    def patch_features(self, features: BaseModel) -> Device:
        """Return a copy of this device with the feature overlay applied."""
        definition = self.get_definition()
        return Device.new(
            self.get_type(),
            definition.features.apply_options(features),
            definition.descriptor,
        )

    def patch_descriptor(self, descriptor: BaseModel) -> Device:
        """Return a copy of this device with the descriptor overlay applied."""
        definition = self.get_definition()
        return Device.new(
            self.get_type(),
            definition.features,
            definition.descriptor.apply_options(descriptor),
        )

    def supported_scenes(self) -> list[Scene]:
        """Scenes this device's capability class can play."""
        return []

    @property
    def model_string(self) -> str:
        """Return the type label plus whatever the descriptor tells us."""
        descriptor = self.descriptor
        parts: list[str] = []
        if descriptor.module_name:
            parts.append(descriptor.module_name)
        if descriptor.color_temp:
            parts.append(f"{descriptor.color_temp.min_temp}-{descriptor.color_temp.max_temp}K")
        if descriptor.firmware_version:
            parts.append(f"fw {descriptor.firmware_version}")
        if not parts:
            return self.type_label
        return f"{self.type_label} [{' '.join(parts)}]"


class Socket(Device):
    device_type = DeviceType.SOCKET
    type_label = "Socket"


class Bulb(Device):
    """Base for the bulb variants."""


class TunableWhiteBulb(Bulb):
    device_type = DeviceType.BULB_TW
    type_label = "Tunable White Bulb"

    def supported_scenes(self) -> list[Scene]:
        return tunable_white_scenes()


class DimmableWhiteBulb(Bulb):
    device_type = DeviceType.BULB_DW
    type_label = "Dimmable White Bulb"

    def supported_scenes(self) -> list[Scene]:
        return dimmable_white_scenes()


class RgbBulb(Bulb):
    device_type = DeviceType.BULB_RGB
    type_label = "RGB Bulb"

    def supported_scenes(self) -> list[Scene]:
        return list(Scene)


_VARIANTS: MappingProxyType[DeviceType, type[Device]] = MappingProxyType(
    {
        DeviceType.BULB_TW: TunableWhiteBulb,
        DeviceType.BULB_DW: DimmableWhiteBulb,
        DeviceType.BULB_RGB: RgbBulb,
        DeviceType.SOCKET: Socket,
    }
)
