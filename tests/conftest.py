"""
Shared test configuration and fixtures for wmsoverlay tests.
"""

import itertools

import pytest

from wmsoverlay import MapHost, WMSOverlay


WMS_URL = "http://example.com/geoserver/wms"


def pytest_configure(config):
    """Configure test markers."""
    config.addinivalue_line("markers", "unit: marks unit tests (fast, pure logic)")
    config.addinivalue_line("markers", "property: marks property-based tests")


@pytest.fixture
def ticking_clock():
    """Clock advancing one second per call, starting at 1_700_000_000."""
    ticks = itertools.count(1_700_000_000)
    return lambda: float(next(ticks))


@pytest.fixture
def frozen_clock():
    """Clock that always returns the same instant."""
    return lambda: 1_700_000_000.0


@pytest.fixture
def overlay(ticking_clock):
    """Overlay pointed at a single layer with default options."""
    return WMSOverlay("Topography", WMS_URL, params={"layers": "topo"}, clock=ticking_clock)


@pytest.fixture
def unconfigured_overlay():
    """Overlay without any layer configured."""
    return WMSOverlay("Empty", WMS_URL)


@pytest.fixture
def host():
    """Map host with an empty overlay stack."""
    return MapHost()
