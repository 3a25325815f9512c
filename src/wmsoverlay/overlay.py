"""
WMS overlay controller.

``WMSOverlay`` plays the map-type role a slippy-map viewer expects from an
overlay: the host reads ``tile_size`` once and calls ``get_tile`` for every
visible tile. The overlay keeps every tile it hands out so that later opacity
changes reach tiles already on screen.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Callable, List, Mapping, Optional, Tuple, Union

from pydantic import ValidationError as PydanticValidationError

from .config import DisplayOptions, ServiceConfig
from .errors import ValidationError
from .projection import TILE_SIZE, tile_bounds
from .request import build_getmap_url
from .tile import TileHandle
from .types import TileCoord
from .typing import HostMap, OverlayStack

logger = logging.getLogger(__name__)

Host = Union[HostMap, OverlayStack]


class WMSOverlay:
    """
    Tiled overlay backed by a WMS GetMap endpoint.

    Args:
        name: Display name of the overlay
        url: WMS endpoint, without query string
        params: GetMap parameter overrides (``layers`` is required before
            tiles can be produced)
        options: Display option overrides (``opacity``, ``cache``)
        clock: Source of the current time in seconds, used for cache busting
    """

    def __init__(
        self,
        name: str,
        url: str,
        params: Optional[Mapping[str, Any]] = None,
        options: Optional[Mapping[str, Any]] = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.name = name
        self.url = url
        self.tile_size = TILE_SIZE
        self.params = ServiceConfig.from_overrides(params)
        self.options = DisplayOptions.from_overrides(options)
        # Grows with every produced tile until detach; not deduplicated by coordinate.
        self.tiles: List[TileHandle] = []
        self._clock = clock
        self._last_cache_buster = 0

    def __repr__(self) -> str:
        return f"WMSOverlay(name={self.name!r}, url={self.url!r}, layers={self.params.layers!r})"

    # ------------------------------------------------------------------
    # Tile production
    # ------------------------------------------------------------------
    def produce_tile(self, tile_x: int, tile_y: int, zoom: int) -> TileHandle:
        """
        Build and record the tile at (x, y, zoom).

        Returns:
            The recorded tile, or an unrecorded empty tile if no layer is
            configured yet
        """
        if not self.params.layers:
            logger.warning("[%s] Required param 'layers' is empty", self.name)
            return TileHandle(width=self.tile_size, height=self.tile_size)

        bbox = tile_bounds(tile_x, tile_y, zoom, self.tile_size)
        cache_buster = None if self.options.cache else self._next_cache_buster()
        url = build_getmap_url(self.url, self.params, bbox, cache_buster)

        tile = TileHandle(
            coord=TileCoord(x=tile_x, y=tile_y),
            zoom=zoom,
            width=self.tile_size,
            height=self.tile_size,
            src=url,
            opacity=self.options.opacity,
        )
        self.tiles.append(tile)
        logger.debug("Produced tile %s/%s/%s for %s", zoom, tile_x, tile_y, self.name)
        return tile

    def get_tile(
        self,
        coord: Union[TileCoord, Tuple[int, int]],
        zoom: int,
        owner_document: Any = None,
    ) -> TileHandle:
        """
        Host-facing entry point; ``coord`` may be a ``TileCoord`` or ``(x, y)``.

        ``owner_document`` is the host's document context. It is accepted so
        hosts can call with their usual three arguments, but is not used:
        hosts render the returned handle themselves (see ``TileHandle.to_html``).
        """
        coord = TileCoord.parse(coord)
        return self.produce_tile(coord.x, coord.y, zoom)

    def _next_cache_buster(self) -> int:
        # Epoch milliseconds, bumped so calls within one millisecond still differ.
        stamp = max(int(self._clock() * 1000), self._last_cache_buster + 1)
        self._last_cache_buster = stamp
        return stamp

    # ------------------------------------------------------------------
    # Host lifecycle
    # ------------------------------------------------------------------
    def attach(self, host: Host, index: Optional[int] = None) -> None:
        """
        Add this overlay to a map at the given index, or on top of other
        overlays if index is omitted. Out-of-range indices are clamped.
        """
        stack = _overlay_stack(host)
        if index is not None:
            position = max(0, min(index, stack.get_length()))
            stack.insert_at(position, self)
        else:
            position = stack.get_length()
            stack.push(self)
        logger.debug("Attached %s at overlay index %s", self.name, position)

    def detach(self, host: Host) -> None:
        """Remove this overlay from a map and forget every tile it produced."""
        stack = _overlay_stack(host)
        for i in range(stack.get_length()):
            if stack.get_at(i) is self:
                stack.remove_at(i)
                logger.debug("Detached %s from overlay index %s", self.name, i)
                break

        self.tiles = []

    add_to_map = attach
    remove_from_map = detach

    def set_opacity(self, opacity: float) -> None:
        """
        Change opacity on demand, for rendered tiles and future ones.

        Raises:
            ValidationError: If ``opacity`` is outside [0, 1]
        """
        try:
            self.options.opacity = opacity
        except PydanticValidationError as exc:
            raise ValidationError(f"Invalid opacity {opacity!r}: must be within [0, 1]", cause=exc) from exc

        for tile in self.tiles:
            tile.opacity = self.options.opacity


def _overlay_stack(host: Host) -> OverlayStack:
    stack = getattr(host, "overlay_map_types", None)
    return stack if stack is not None else host
