"""Custom exception types for scene lookup and device classification.

Errors raise exceptions instead of returning None. Every exception carries
the offending input so a caller can explain the failure without re-deriving
it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from wiz_model.structs import DeviceDescriptor

__all__ = [
    "DeviceColorTempParseError",
    "DeviceParseError",
    "DeviceTypeParseError",
    "SceneError",
    "SceneIDError",
    "SceneNameError",
    "WizModelError",
]


class WizModelError(Exception):
    """Base exception for all device model errors.

    Attributes:
        details: Human readable explanation of the failure
    """

    def __init__(self, message: str, details: str):
        self.details = details
        super().__init__(message)


class SceneError(WizModelError):
    """Scene catalog lookup failed."""


class SceneIDError(SceneError):
    """Scene ID is not part of the catalog.

    Attributes:
        given_id: The id that was looked up
        details: Explanation including the valid range
    """

    def __init__(self, given_id: object, details: str):
        self.given_id = given_id
        super().__init__(f"Scene ID error: {details} (given: {given_id!r})", details)


class SceneNameError(SceneError):
    """Scene name is not part of the catalog.

    Attributes:
        given_name: The name that was looked up, verbatim
        details: Explanation of the failure
    """

    def __init__(self, given_name: str, details: str):
        self.given_name = given_name
        super().__init__(f"Scene name error: {details} (given: {given_name!r})", details)


class DeviceParseError(WizModelError):
    """A descriptor could not be resolved into a device.

    Attributes:
        data: Descriptor that was being resolved
        details: Explanation of the failure
    """

    def __init__(self, kind: str, data: DeviceDescriptor, details: str):
        self.data = data
        super().__init__(f"{kind}: {details} (descriptor: {data!r})", details)


class DeviceTypeParseError(DeviceParseError):
    """Device type could not be determined.

    Raised when:
    - A module name has no second underscore-delimited token
    - A type ID index is outside the known type table

    ``data`` is the original descriptor passed in by the caller.
    """

    def __init__(self, data: DeviceDescriptor, details: str):
        super().__init__("Device type parse error", data, details)


class DeviceColorTempParseError(DeviceParseError):
    """A bulb that requires a color temperature range did not get one.

    ``data`` is the resolved device's descriptor, not the caller's input.
    """

    def __init__(self, data: DeviceDescriptor, details: str):
        super().__init__("Device color temp parse error", data, details)
