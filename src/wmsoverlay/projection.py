"""
Spherical Web Mercator (EPSG:3857) tile geometry.

Tiles are addressed XYZ-style with the origin at the top-left of the world,
while projected metres grow northwards from the bottom-left, so the row index
is flipped before projecting.
"""

import math
from typing import Tuple

from pydantic import ValidationError as PydanticValidationError

from .errors import TileGeometryError
from .types import BoundingBox, CRS

TILE_SIZE = 256
EARTH_RADIUS_IN_METERS = 6378137
CIRCUMFERENCE = 2 * math.pi * EARTH_RADIUS_IN_METERS


def resolution(zoom: int, tile_size: int = TILE_SIZE) -> float:
    """
    Ground resolution in metres per pixel at the given zoom level.

    Args:
        zoom: Zoom level (0 is a single tile covering the world)
        tile_size: Tile edge length in pixels

    Returns:
        Metres per pixel
    """
    _check_zoom(zoom, tile_size)
    return (CIRCUMFERENCE / tile_size) / 2 ** zoom


def project_point(x: float, y: float, res: float, tile_size: int = TILE_SIZE) -> Tuple[float, float]:
    """Translate a tile-grid corner to Web Mercator metres."""
    return (
        x * tile_size * res - CIRCUMFERENCE / 2.0,
        y * tile_size * res - CIRCUMFERENCE / 2.0,
    )


def tile_bounds(
    tile_x: int,
    tile_y: int,
    zoom: int,
    tile_size: int = TILE_SIZE,
    strict: bool = False,
) -> BoundingBox:
    """
    Return the projected bounds of tile (x, y) at ``zoom``.

    Args:
        tile_x: Tile column
        tile_y: Tile row, counted from the top
        zoom: Zoom level
        tile_size: Tile edge length in pixels
        strict: Reject indices outside ``[0, 2**zoom)`` instead of returning
            a box that lies outside the world

    Returns:
        BoundingBox in EPSG:3857

    Raises:
        TileGeometryError: For a negative zoom, a non-positive tile size, or an
            out-of-range index when ``strict`` is set, or a zoom too deep
            for the tile edges to stay distinct
    """
    _check_zoom(zoom, tile_size)
    n = 2 ** zoom
    if strict and not (0 <= tile_x < n and 0 <= tile_y < n):
        raise TileGeometryError(
            f"Tile ({tile_x}, {tile_y}) is outside the {n}x{n} grid at zoom {zoom}"
        )

    flipped_y = n - tile_y - 1
    res = (CIRCUMFERENCE / tile_size) / n

    west, south = project_point(tile_x, flipped_y, res, tile_size)
    east, north = project_point(tile_x + 1, flipped_y + 1, res, tile_size)

    try:
        return BoundingBox(min_x=west, min_y=south, max_x=east, max_y=north, crs=CRS.EPSG_3857)
    except PydanticValidationError as exc:
        raise TileGeometryError(
            f"Tile ({tile_x}, {tile_y}) at zoom {zoom} has degenerate bounds", cause=exc
        ) from exc


def _check_zoom(zoom: int, tile_size: int) -> None:
    if zoom < 0:
        raise TileGeometryError(f"zoom must be >= 0, got {zoom}")
    if tile_size <= 0:
        raise TileGeometryError(f"tile_size must be positive, got {tile_size}")
