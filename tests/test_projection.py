"""
Tests for wmsoverlay.projection.

Covers the Web Mercator tile geometry, including property-based checks over
the valid tile index range.
"""

import math

import pytest
from hypothesis import given, strategies as st
from pydantic import ValidationError as PydanticValidationError

from wmsoverlay.errors import TileGeometryError, ValidationError
from wmsoverlay.projection import (
    CIRCUMFERENCE,
    EARTH_RADIUS_IN_METERS,
    TILE_SIZE,
    project_point,
    resolution,
    tile_bounds,
)
from wmsoverlay.types import CRS

HALF_WORLD = 20037508.3428


@st.composite
def tiles(draw, max_zoom=22):
    zoom = draw(st.integers(min_value=0, max_value=max_zoom))
    n = 2 ** zoom
    x = draw(st.integers(min_value=0, max_value=n - 1))
    y = draw(st.integers(min_value=0, max_value=n - 1))
    return x, y, zoom


@pytest.mark.unit
class TestConstants:
    """Test projection constants."""

    def test_circumference(self):
        assert EARTH_RADIUS_IN_METERS == 6378137
        assert CIRCUMFERENCE == pytest.approx(2 * math.pi * 6378137)
        assert TILE_SIZE == 256

    def test_resolution_at_zoom_zero(self):
        assert resolution(0) == pytest.approx(156543.03392804097)

    def test_resolution_halves_per_zoom(self):
        assert resolution(5) == pytest.approx(resolution(4) / 2)

    def test_project_point_origin(self):
        x, y = project_point(0, 0, resolution(0))
        assert x == pytest.approx(-HALF_WORLD, abs=0.01)
        assert y == pytest.approx(-HALF_WORLD, abs=0.01)


@pytest.mark.unit
class TestTileBounds:
    """Test tile_bounds for known tiles."""

    def test_root_tile_covers_world(self):
        bbox = tile_bounds(0, 0, 0, 256)

        assert bbox.west == pytest.approx(-HALF_WORLD, abs=0.01)
        assert bbox.south == pytest.approx(-HALF_WORLD, abs=0.01)
        assert bbox.east == pytest.approx(HALF_WORLD, abs=0.01)
        assert bbox.north == pytest.approx(HALF_WORLD, abs=0.01)
        assert bbox.crs == CRS.EPSG_3857

    def test_top_left_tile_at_zoom_one(self):
        """Row 0 is the northern row."""
        bbox = tile_bounds(0, 0, 1)

        assert bbox.west == pytest.approx(-HALF_WORLD, abs=0.01)
        assert bbox.east == pytest.approx(0.0, abs=1e-6)
        assert bbox.south == pytest.approx(0.0, abs=1e-6)
        assert bbox.north == pytest.approx(HALF_WORLD, abs=0.01)

    def test_bottom_right_tile_at_zoom_one(self):
        bbox = tile_bounds(1, 1, 1)

        assert bbox.west == pytest.approx(0.0, abs=1e-6)
        assert bbox.east == pytest.approx(HALF_WORLD, abs=0.01)
        assert bbox.south == pytest.approx(-HALF_WORLD, abs=0.01)
        assert bbox.north == pytest.approx(0.0, abs=1e-6)

    def test_tile_size_does_not_change_ground_extent(self):
        """Resolution scales with tile size, so the covered area is the same."""
        small = tile_bounds(3, 5, 4, tile_size=128)
        large = tile_bounds(3, 5, 4, tile_size=512)

        assert small.to_tuple() == pytest.approx(large.to_tuple())

    def test_root_tile_in_geographic_coordinates(self):
        bbox = tile_bounds(0, 0, 0).to_crs(CRS.EPSG_4326)

        assert bbox.crs == CRS.EPSG_4326
        assert bbox.west == pytest.approx(-180.0)
        assert bbox.east == pytest.approx(180.0)
        assert bbox.south == pytest.approx(-85.0511287798, abs=1e-6)
        assert bbox.north == pytest.approx(85.0511287798, abs=1e-6)


@pytest.mark.unit
class TestTileBoundsValidation:
    """Test argument checks."""

    def test_negative_zoom_rejected(self):
        with pytest.raises(ValidationError):
            tile_bounds(0, 0, -1)

    def test_non_positive_tile_size_rejected(self):
        with pytest.raises(ValidationError):
            tile_bounds(0, 0, 0, tile_size=0)

    def test_out_of_range_index_is_lenient_by_default(self):
        bbox = tile_bounds(2, 0, 0)

        assert bbox.west == pytest.approx(3 * HALF_WORLD, abs=0.1)
        assert bbox.east == pytest.approx(5 * HALF_WORLD, abs=0.1)

    @pytest.mark.parametrize("x, y", [(2, 0), (0, 2), (-1, 0), (0, -1)])
    def test_out_of_range_index_rejected_when_strict(self, x, y):
        with pytest.raises(ValidationError):
            tile_bounds(x, y, 1, strict=True)

    def test_degenerate_deep_zoom_tile_raises_package_error(self):
        """Edges that collapse in floating point surface as TileGeometryError."""
        with pytest.raises(TileGeometryError) as exc_info:
            tile_bounds(2 ** 56 - 1, 0, 56)

        assert isinstance(exc_info.value, ValidationError)
        assert isinstance(exc_info.value.cause, PydanticValidationError)

    def test_strict_accepts_valid_index(self):
        assert tile_bounds(1, 1, 1, strict=True).east == pytest.approx(HALF_WORLD, abs=0.01)


@pytest.mark.property
class TestTileBoundsProperties:
    """Property-based tests over the valid tile range."""

    @given(tiles())
    def test_bounds_are_ordered(self, tile):
        x, y, zoom = tile
        bbox = tile_bounds(x, y, zoom)

        assert bbox.west < bbox.east
        assert bbox.south < bbox.north

    @given(tiles())
    def test_bounds_stay_inside_world(self, tile):
        x, y, zoom = tile
        bbox = tile_bounds(x, y, zoom)

        assert bbox.west >= -HALF_WORLD - 0.01
        assert bbox.east <= HALF_WORLD + 0.01
        assert bbox.south >= -HALF_WORLD - 0.01
        assert bbox.north <= HALF_WORLD + 0.01

    @given(tiles(max_zoom=21))
    def test_next_zoom_halves_span(self, tile):
        x, y, zoom = tile
        parent = tile_bounds(x, y, zoom)
        child = tile_bounds(2 * x, 2 * y, zoom + 1)

        assert child.width == pytest.approx(parent.width / 2)
        assert child.height == pytest.approx(parent.height / 2)
        # The top-left child shares the parent's north-west corner.
        assert child.west == pytest.approx(parent.west, abs=1e-3)
        assert child.north == pytest.approx(parent.north, abs=1e-3)

    @given(tiles())
    def test_neighbours_share_edges(self, tile):
        x, y, zoom = tile
        bbox = tile_bounds(x, y, zoom)
        right = tile_bounds(x + 1, y, zoom)
        below = tile_bounds(x, y + 1, zoom)

        assert right.west == pytest.approx(bbox.east, abs=1e-3)
        assert below.north == pytest.approx(bbox.south, abs=1e-3)
