"""Exceptions raised by wmsoverlay.

An overlay without layers and detaching an overlay that was never attached
are not errors; both are handled quietly by ``WMSOverlay``.
"""

from typing import Optional


class WmsOverlayError(Exception):
    """Base exception; ``cause`` keeps the underlying pydantic error, if any."""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(message)
        self.cause = cause


class ConfigurationError(WmsOverlayError):
    """GetMap parameter or display option overrides rejected at construction."""


class ValidationError(WmsOverlayError):
    """Invalid runtime input, e.g. an opacity outside [0, 1]."""


class TileGeometryError(ValidationError):
    """A tile address that cannot be turned into a projected bounding box.

    Raised for a negative zoom, a non-positive tile size, an out-of-range index
    in strict mode, or a zoom so deep that the tile edges collapse in floating
    point.
    """
