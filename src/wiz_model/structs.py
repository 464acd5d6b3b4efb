"""Feature and descriptor value objects and their optional overlays.

Value objects are frozen pydantic models. Each has a generated "Optional"
counterpart with every field defaulting to None; ``apply_options`` merges an
overlay into a base value and returns a new value.
"""

from __future__ import annotations

from typing import Annotated, Any, Self, TypeVar

from pydantic import BaseModel, ConfigDict, Field, create_model

__all__ = [
    "ColorTempSpace",
    "DeviceDescriptor",
    "DeviceFeatures",
    "OptionalDeviceDescriptor",
    "OptionalDeviceFeatures",
    "apply_options",
    "make_overlay",
]

U16 = Annotated[int, Field(ge=0, le=0xFFFF)]

ModelT = TypeVar("ModelT", bound=BaseModel)


class ColorTempSpace(BaseModel):
    """Supported color temperature range in Kelvin.

    min_temp <= max_temp is expected but not enforced.
    """

    model_config = ConfigDict(frozen=True)

    min_temp: U16
    max_temp: U16


class _Patchable(BaseModel):
    model_config = ConfigDict(frozen=True)

    def apply_options(self, overlay: BaseModel) -> Self:
        return apply_options(self, overlay)


class DeviceFeatures(_Patchable):
    hue: bool
    color_temp: bool
    effects: bool
    dimming: bool
    dual_head: bool


class DeviceDescriptor(_Patchable):
    """Metadata reported by a device. None means unknown, not zero."""

    module_name: str | None = None
    color_temp: ColorTempSpace | None = None
    firmware_version: str | None = None
    white_channels: U16 | None = None
    white_to_color_ratio: U16 | None = None
    type_id_index: Annotated[int, Field(ge=0)] | None = None


def make_overlay(model: type[ModelT]) -> type[BaseModel]:
    """Build the optional counterpart of a value object model.

    The overlay has the same field names as ``model``; each field accepts the
    base type or None and defaults to None.
    """
    fields: dict[str, Any] = {
        name: (info.annotation | None, None) for name, info in model.model_fields.items()
    }
    overlay = create_model(
        f"Optional{model.__name__}",
        __config__=ConfigDict(frozen=True, extra="forbid"),
        __module__=model.__module__,
        **fields,
    )
    overlay.__overlay_of__ = model  # type: ignore[attr-defined]
    return overlay


def apply_options(base: ModelT, overlay: BaseModel) -> ModelT:
    """Return ``base`` with every field that is present in ``overlay`` replaced.

    A field is present when its overlay value is not None. No validation is
    performed on the replaced values.

    Raises:
        TypeError: if ``overlay`` was not generated for ``type(base)``
    """
    overlay_of = getattr(type(overlay), "__overlay_of__", None)
    if overlay_of is not type(base):
        msg = f"{type(overlay).__name__} is not an overlay of {type(base).__name__}"
        raise TypeError(msg)

    changes = {
        name: value
        for name in type(overlay).model_fields
        if (value := getattr(overlay, name)) is not None
    }
    if not changes:
        return base
    return base.model_copy(update=changes)


OptionalDeviceFeatures = make_overlay(DeviceFeatures)
OptionalDeviceDescriptor = make_overlay(DeviceDescriptor)
