"""wmsoverlay - WMS layers as tiled Web Mercator overlays for slippy maps."""

from ._version import __version__

from .api import create_wms_overlay
from .config import DisplayOptions, ServiceConfig
from .errors import ConfigurationError, TileGeometryError, ValidationError, WmsOverlayError
from .host import MapHost, OverlayList
from .overlay import WMSOverlay
from .projection import CIRCUMFERENCE, EARTH_RADIUS_IN_METERS, TILE_SIZE, project_point, resolution, tile_bounds
from .request import build_getmap_url
from .tile import TileHandle
from .types import BBoxTuple, BoundingBox, CRS, Format, TileCoord
from .typing import HostMap, OverlayStack

__all__ = [
    "__version__",
    "create_wms_overlay",
    "DisplayOptions",
    "ServiceConfig",
    "ConfigurationError",
    "TileGeometryError",
    "ValidationError",
    "WmsOverlayError",
    "MapHost",
    "OverlayList",
    "WMSOverlay",
    "CIRCUMFERENCE",
    "EARTH_RADIUS_IN_METERS",
    "TILE_SIZE",
    "project_point",
    "resolution",
    "tile_bounds",
    "build_getmap_url",
    "TileHandle",
    "BBoxTuple",
    "BoundingBox",
    "CRS",
    "Format",
    "TileCoord",
    "HostMap",
    "OverlayStack",
]
