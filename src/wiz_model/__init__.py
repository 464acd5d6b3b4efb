"""Device classification and scene catalog for WiZ-style smart lighting.

Public API:
- Scene catalog (Scene, tunable_white_scenes, dimmable_white_scenes)
- Value objects and overlays (DeviceFeatures, DeviceDescriptor, ColorTempSpace)
- Device taxonomy (Device, DeviceType and the variants)
- Classification (from_descriptor)
"""

import logging

__version__ = "0.1.0"

# Silent unless the application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

from wiz_model.classification import KNOWN_TYPE_IDS, from_descriptor
from wiz_model.const import DEVICE_OPTS
from wiz_model.devices import (
    Bulb,
    Device,
    DeviceDefinition,
    DeviceType,
    DimmableWhiteBulb,
    RgbBulb,
    Socket,
    TunableWhiteBulb,
)
from wiz_model.exceptions import (
    DeviceColorTempParseError,
    DeviceParseError,
    DeviceTypeParseError,
    SceneError,
    SceneIDError,
    SceneNameError,
    WizModelError,
)
from wiz_model.logging_abstraction import configure_logging
from wiz_model.scenes import Scene, dimmable_white_scenes, scene_names, tunable_white_scenes
from wiz_model.structs import (
    ColorTempSpace,
    DeviceDescriptor,
    DeviceFeatures,
    OptionalDeviceDescriptor,
    OptionalDeviceFeatures,
    apply_options,
)

__all__ = [
    "DEVICE_OPTS",
    "KNOWN_TYPE_IDS",
    # Scenes
    "Scene",
    "dimmable_white_scenes",
    "scene_names",
    "tunable_white_scenes",
    # Value objects
    "ColorTempSpace",
    "DeviceDescriptor",
    "DeviceFeatures",
    "OptionalDeviceDescriptor",
    "OptionalDeviceFeatures",
    "apply_options",
    # Devices
    "Bulb",
    "Device",
    "DeviceDefinition",
    "DeviceType",
    "DimmableWhiteBulb",
    "RgbBulb",
    "Socket",
    "TunableWhiteBulb",
    "from_descriptor",
    # Errors
    "DeviceColorTempParseError",
    "DeviceParseError",
    "DeviceTypeParseError",
    "SceneError",
    "SceneIDError",
    "SceneNameError",
    "WizModelError",
    # Logging
    "configure_logging",
]
