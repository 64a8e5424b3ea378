"""
Shared pytest fixtures for triplecol tests.
"""

import pytest
from pubsub import pub

from triplecol.config import LayoutConfig
from triplecol.geometry import Rect
from triplecol.objects import Tile


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without a host")


@pytest.fixture(autouse=True)
def clean_bus():
    """Drop listeners registered during a test."""
    yield
    pub.unsubAll()


@pytest.fixture
def make_tiles():
    """Factory fixture for creating a list of tiles."""

    def factory(count, **kwargs):
        return [Tile(object_id=i, **kwargs) for i in range(1, count + 1)]

    return factory


@pytest.fixture
def gap_config():
    """Configuration with a 10px gap."""
    return LayoutConfig(tile_layout_gap=10)


@pytest.fixture
def standard_area():
    """Standard 1000x600 area for layout tests."""
    return Rect(0, 0, 1000, 600)


@pytest.fixture
def wide_area():
    """Wide 1200x800 area for layout tests."""
    return Rect(0, 0, 1200, 800)
