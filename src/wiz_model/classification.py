"""Resolve a typed ``Device`` from a raw ``DeviceDescriptor``.

Resolution order:
1. Module name: the second ``_``-separated token is the identifier. Tags are
   tested top to bottom against ``IDENTIFIER_RULES``; the first contained tag
   wins. Identifiers with no type tag stay dimmable white and only infer
   head count (``DH`` / ``SH``).
2. Type ID index (only without a module name): looked up in
   ``KNOWN_TYPE_IDS``; such devices are assumed to support effects.
3. Neither: the dimmable white seed stands.

Finally the descriptor's color temperature range is overlaid. RGB and tunable
white bulbs must have one.
"""

from __future__ import annotations

from wiz_model.const import DEVICE_OPTS
from wiz_model.correlation import correlation_context
from wiz_model.devices import Device, DeviceType
from wiz_model.exceptions import DeviceColorTempParseError, DeviceTypeParseError
from wiz_model.instrumentation import timed
from wiz_model.logging_abstraction import get_logger
from wiz_model.structs import DeviceDescriptor, OptionalDeviceDescriptor, OptionalDeviceFeatures

__all__ = [
    "COLOR_TEMP_REQUIRED",
    "IDENTIFIER_RULES",
    "KNOWN_TYPE_IDS",
    "from_descriptor",
]

logger = get_logger(__name__)

# Evaluated in order; an identifier may contain several tags
IDENTIFIER_RULES: tuple[tuple[str, DeviceType], ...] = (
    (DEVICE_OPTS.rgb, DeviceType.BULB_RGB),
    (DEVICE_OPTS.tunable_white, DeviceType.BULB_TW),
    (DEVICE_OPTS.socket, DeviceType.SOCKET),
)

# Device types for descriptors that identify themselves by index
KNOWN_TYPE_IDS: tuple[DeviceType, ...] = (DeviceType.BULB_DW,)

COLOR_TEMP_REQUIRED: frozenset[DeviceType] = frozenset({DeviceType.BULB_RGB, DeviceType.BULB_TW})


def _identifier_from_module_name(module_name: str, descriptor: DeviceDescriptor) -> str:
    tokens = module_name.split("_")
    if len(tokens) < 2:  # noqa: PLR2004
        logger.warning(
            "Module name %r has no identifier token",
            module_name,
            extra={"module_name": module_name},
        )
        raise DeviceTypeParseError(
            data=descriptor,
            details="Failed to find an identifier in the descriptor.",
        )
    return tokens[1]


def _classify_identifier(identifier: str, seed: Device) -> Device:
    for tag, device_type in IDENTIFIER_RULES:
        if tag in identifier:
            logger.debug(
                "Identifier %r matched tag %r",
                identifier,
                tag,
                extra={"identifier": identifier, "tag": tag, "device_type": device_type},
            )
            return Device.new(device_type)

    effects = DEVICE_OPTS.dual_head in identifier or DEVICE_OPTS.single_head in identifier
    dual_head = DEVICE_OPTS.dual_head in identifier
    logger.debug(
        "Identifier %r has no type tag, keeping %s",
        identifier,
        seed.get_type(),
        extra={"identifier": identifier, "effects": effects, "dual_head": dual_head},
    )
    return seed.patch_features(OptionalDeviceFeatures(effects=effects, dual_head=dual_head))


def _classify_type_id_index(type_id_index: int, descriptor: DeviceDescriptor) -> Device:
    if not 0 <= type_id_index < len(KNOWN_TYPE_IDS):
        logger.warning(
            "Type ID index %s is not a known type",
            type_id_index,
            extra={"type_id_index": type_id_index, "known_type_ids": len(KNOWN_TYPE_IDS)},
        )
        raise DeviceTypeParseError(
            data=descriptor,
            details="Failed finding a known type ID in the descriptor",
        )

    device_type = KNOWN_TYPE_IDS[type_id_index]
    logger.debug(
        "Type ID index %s resolved to %s",
        type_id_index,
        device_type,
        extra={"type_id_index": type_id_index, "device_type": device_type},
    )
    return Device.new(device_type).patch_features(OptionalDeviceFeatures(effects=True))


@timed("classify_descriptor")
def from_descriptor(descriptor: DeviceDescriptor) -> Device:
    """Classify a descriptor into a device and validate it.

    Raises:
        DeviceTypeParseError: module name without an identifier token, or an
            unknown type ID index. Carries the original descriptor.
        DeviceColorTempParseError: an RGB or tunable white result without a
            color temperature range. Carries the resolved device's descriptor.
    """
    with correlation_context():
        device = Device.new(DeviceType.BULB_DW)

        if descriptor.module_name is not None:
            identifier = _identifier_from_module_name(descriptor.module_name, descriptor)
            device = _classify_identifier(identifier, device)
        elif descriptor.type_id_index is not None:
            device = _classify_type_id_index(descriptor.type_id_index, descriptor)
        else:
            logger.debug("Descriptor has no module name or type ID, defaulting to %s", device.get_type())

        if descriptor.color_temp is not None:
            device = device.patch_descriptor(OptionalDeviceDescriptor(color_temp=descriptor.color_temp))
        elif device.get_type() in COLOR_TEMP_REQUIRED:
            logger.warning(
                "%s descriptor is missing a color temperature range",
                device.type_label,
                extra={"device_type": device.get_type(), "module_name": descriptor.module_name},
            )
            raise DeviceColorTempParseError(
                data=device.get_definition().descriptor,
                details="Bulb type should include color temp data in the descriptor.",
            )

        logger.debug(
            "Classified descriptor as %s",
            device.model_string,
            extra={"device_type": device.get_type(), "features": device.features.model_dump()},
        )
        return device
