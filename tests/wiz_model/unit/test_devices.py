"""Unit tests for the device taxonomy.

Tests construction defaults, type/variant agreement, patching, and the
scene and summary helpers.
"""

import pytest
from pydantic import ValidationError

from wiz_model.devices import (
    DEFAULT_FEATURES,
    Bulb,
    Device,
    DeviceDefinition,
    DeviceType,
    DimmableWhiteBulb,
    RgbBulb,
    Socket,
    TunableWhiteBulb,
)
from wiz_model.scenes import Scene, dimmable_white_scenes, tunable_white_scenes
from wiz_model.structs import (
    ColorTempSpace,
    DeviceDescriptor,
    DeviceFeatures,
    OptionalDeviceDescriptor,
    OptionalDeviceFeatures,
)

# Expected (hue, color_temp, effects, dimming, dual_head) per type
EXPECTED_DEFAULTS = {
    DeviceType.BULB_TW: (False, True, True, True, False),
    DeviceType.BULB_DW: (False, False, False, True, False),
    DeviceType.BULB_RGB: (True, True, True, True, False),
    DeviceType.SOCKET: (False, False, False, False, False),
}
EXPECTED_VARIANTS = {
    DeviceType.BULB_TW: TunableWhiteBulb,
    DeviceType.BULB_DW: DimmableWhiteBulb,
    DeviceType.BULB_RGB: RgbBulb,
    DeviceType.SOCKET: Socket,
}


def _feature_tuple(features: DeviceFeatures) -> tuple[bool, ...]:
    return (features.hue, features.color_temp, features.effects, features.dimming, features.dual_head)


class TestDeviceNew:
    """Tests for Device.new."""

    @pytest.mark.parametrize("device_type", list(DeviceType))
    def test_default_features(self, device_type):
        """Test each type gets its default feature table."""
        device = Device.new(device_type)

        assert _feature_tuple(device.features) == EXPECTED_DEFAULTS[device_type]
        assert device.get_type() == device_type

    @pytest.mark.parametrize("device_type", list(DeviceType))
    def test_variant_matches_type(self, device_type):
        """Test the concrete class always agrees with get_type."""
        device = Device.new(device_type)

        assert type(device) is EXPECTED_VARIANTS[device_type]
        assert device.is_bulb is (device_type != DeviceType.SOCKET)
        assert isinstance(device, Bulb) is device.is_bulb

    def test_default_descriptor_is_empty(self, any_device):
        """Test a missing descriptor becomes all-unknown."""
        assert any_device.descriptor == DeviceDescriptor()

    def test_explicit_features_and_descriptor(self):
        """Test supplied features and descriptor are used verbatim."""
        features = DeviceFeatures(hue=True, color_temp=False, effects=False, dimming=False, dual_head=True)
        descriptor = DeviceDescriptor(module_name="ESP03_SHRGB1W_01", firmware_version="1.22.0")

        device = Device.new(DeviceType.SOCKET, features, descriptor)

        assert device.get_definition() == DeviceDefinition(features=features, descriptor=descriptor)
        assert device.get_type() == DeviceType.SOCKET

    def test_accepts_type_value(self):
        """Test the string value of a type is accepted."""
        assert Device.new("bulb_rgb").get_type() == DeviceType.BULB_RGB

    def test_unknown_type(self):
        """Test an unknown type is rejected."""
        with pytest.raises(ValueError, match="Unknown device type"):
            Device.new("toaster")

    @pytest.mark.parametrize("base", [Device, Bulb])
    def test_base_classes_cannot_be_built(self, base, dimmable_white_device):
        """Test classes without a device type refuse construction."""
        with pytest.raises(TypeError, match="Device.new"):
            base(definition=dimmable_white_device.get_definition())

    def test_variant_built_directly_has_type(self, dimmable_white_device):
        """Test a concrete variant built by hand still reports its type."""
        bulb = RgbBulb(definition=dimmable_white_device.get_definition())

        assert bulb.get_type() == DeviceType.BULB_RGB

    def test_defaults_are_shared_constants(self):
        """Test new devices do not alter the default table."""
        device = Device.new(DeviceType.BULB_DW).patch_features(OptionalDeviceFeatures(effects=True))

        assert device.features.effects is True
        assert DEFAULT_FEATURES[DeviceType.BULB_DW].effects is False

    def test_device_is_frozen(self, dimmable_white_device):
        """Test a device's definition cannot be replaced in place."""
        with pytest.raises(ValidationError):
            dimmable_white_device.definition = DeviceDefinition(
                features=DEFAULT_FEATURES[DeviceType.SOCKET],
                descriptor=DeviceDescriptor(),
            )


class TestDevicePatching:
    """Tests for patch_features and patch_descriptor."""

    def test_patch_features(self, dimmable_white_device):
        """Test a feature overlay changes only the present fields."""
        patched = dimmable_white_device.patch_features(OptionalDeviceFeatures(effects=True, dual_head=True))

        assert _feature_tuple(patched.features) == (False, False, True, True, True)
        assert patched.descriptor == dimmable_white_device.descriptor

    def test_patch_descriptor(self, dimmable_white_device):
        """Test a descriptor overlay changes only the present fields."""
        patched = dimmable_white_device.patch_descriptor(OptionalDeviceDescriptor(firmware_version="1.21.0"))

        assert patched.descriptor.firmware_version == "1.21.0"
        assert patched.descriptor.module_name is None
        assert patched.features == dimmable_white_device.features

    def test_patch_returns_new_device(self, dimmable_white_device):
        """Test the original device is not changed by a patch."""
        dimmable_white_device.patch_features(OptionalDeviceFeatures(hue=True))

        assert dimmable_white_device.features.hue is False

    def test_empty_overlay_leaves_device_unchanged(self, any_device):
        """Test overlays with nothing present are a no-op."""
        assert any_device.patch_features(OptionalDeviceFeatures()) == any_device
        assert any_device.patch_descriptor(OptionalDeviceDescriptor()) == any_device

    def test_patch_is_idempotent(self, any_device):
        """Test applying an overlay twice equals applying it once."""
        overlay = OptionalDeviceFeatures(hue=True, dimming=False)

        once = any_device.patch_features(overlay)

        assert once.patch_features(overlay) == once

    def test_patch_preserves_type(self, any_device):
        """Test patches never reclassify a device."""
        features = any_device.patch_features(
            OptionalDeviceFeatures(hue=True, color_temp=True, effects=True, dimming=True, dual_head=True)
        )
        descriptor = any_device.patch_descriptor(OptionalDeviceDescriptor(module_name="ESP01_SOCKET_01"))

        assert features.get_type() == any_device.get_type()
        assert descriptor.get_type() == any_device.get_type()
        assert type(features) is type(any_device)

    def test_patch_rejects_wrong_overlay(self, dimmable_white_device):
        """Test a descriptor overlay passed as features is a TypeError."""
        with pytest.raises(TypeError):
            dimmable_white_device.patch_features(OptionalDeviceDescriptor(module_name="x"))


class TestDeviceHelpers:
    """Tests for supported_scenes and model_string."""

    def test_supported_scenes_by_type(self):
        """Test scenes are filtered by capability class."""
        assert Device.new(DeviceType.BULB_RGB).supported_scenes() == list(Scene)
        assert Device.new(DeviceType.BULB_TW).supported_scenes() == tunable_white_scenes()
        assert Device.new(DeviceType.BULB_DW).supported_scenes() == dimmable_white_scenes()
        assert Device.new(DeviceType.SOCKET).supported_scenes() == []

    def test_model_string_without_descriptor(self):
        """Test the summary falls back to the type label."""
        assert Device.new(DeviceType.BULB_RGB).model_string == "RGB Bulb"

    def test_model_string_with_descriptor(self):
        """Test the summary includes name, range and firmware."""
        device = Device.new(
            DeviceType.BULB_TW,
            descriptor=DeviceDescriptor(
                module_name="ESP01_TW_03",
                color_temp=ColorTempSpace(min_temp=2700, max_temp=6500),
                firmware_version="1.21.0",
            ),
        )

        assert device.model_string == "Tunable White Bulb [ESP01_TW_03 2700-6500K fw 1.21.0]"
