"""Renderable tile handles produced by the overlay."""

from html import escape
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .types import TileCoord


class TileHandle(BaseModel):
    """
    One rendered tile: a ``width`` x ``height`` container showing ``src``.

    A handle without ``src`` is the empty tile returned when the overlay has
    no layer to request.
    """

    model_config = ConfigDict(validate_assignment=True)

    coord: Optional[TileCoord] = Field(None, description="Tile address, None for the empty tile")
    zoom: Optional[int] = Field(None, description="Zoom level the tile was produced for")
    width: int = Field(..., gt=0, description="Container width in pixels")
    height: int = Field(..., gt=0, description="Container height in pixels")
    src: Optional[str] = Field(None, description="GetMap URL of the tile image")
    opacity: float = Field(default=1.0, ge=0.0, le=1.0, description="Displayed opacity")

    @property
    def is_empty(self) -> bool:
        return self.src is None

    def to_html(self) -> str:
        if self.is_empty:
            return "<div></div>"
        style = f"width:{self.width}px;height:{self.height}px;opacity:{self.opacity}"
        return f'<div style="{style}"><img src="{escape(self.src)}"/></div>'
