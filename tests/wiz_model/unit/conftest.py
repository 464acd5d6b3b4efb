"""Shared fixtures for unit tests.

This module provides reusable descriptors and devices for testing the
classification engine and device taxonomy.
"""

from collections.abc import Callable

import pytest

from wiz_model.devices import Device, DeviceType
from wiz_model.structs import ColorTempSpace, DeviceDescriptor

# Typical tunable range reported by white-spectrum bulbs
MIN_KELVIN = 2700
MAX_KELVIN = 6500


@pytest.fixture
def color_temp() -> ColorTempSpace:
    """Standard 2700-6500K color temperature range."""
    return ColorTempSpace(min_temp=MIN_KELVIN, max_temp=MAX_KELVIN)


@pytest.fixture
def descriptor_factory(color_temp: ColorTempSpace) -> Callable[..., DeviceDescriptor]:
    """Build descriptors for a module name, with the standard range by default."""

    def _make(module_name: str | None = None, with_color_temp: bool = True, **kwargs: object) -> DeviceDescriptor:
        return DeviceDescriptor(
            module_name=module_name,
            color_temp=color_temp if with_color_temp else None,
            **kwargs,
        )

    return _make


@pytest.fixture
def dimmable_white_device() -> Device:
    """Dimmable white bulb with default features and an empty descriptor."""
    return Device.new(DeviceType.BULB_DW)


@pytest.fixture(params=list(DeviceType), ids=lambda t: t.value)
def any_device(request: pytest.FixtureRequest) -> Device:
    """One default device of every type."""
    return Device.new(request.param)
