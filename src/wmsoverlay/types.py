"""
Type definitions and models shared by the projection engine and the overlay.
"""

from typing import Tuple, Union
from enum import Enum

from pyproj import Transformer
from pydantic import BaseModel, Field, model_validator


class CRS(str, Enum):
    """Coordinate Reference Systems understood by the overlay."""
    EPSG_4326 = "EPSG:4326"
    EPSG_3857 = "EPSG:3857"

    @classmethod
    def from_epsg(cls, crs: Union[str, int]) -> "CRS":
        """
        Create CRS from EPSG code.
        
        Args:
            crs: EPSG code as string or integer
             - string: "EPSG:3857"
             - integer: 3857
            
        Returns:
            CRS enum
        """
        if isinstance(crs, str):
            if not crs.upper().startswith("EPSG:"):
                raise ValueError(f"Invalid CRS format: {crs}. Expected 'EPSG:<code>' or integer")
            return cls(crs.upper())
        return cls(f"EPSG:{crs}")


class Format(str, Enum):
    """Image formats a WMS GetMap request can ask for."""
    PNG = "image/png"
    JPEG = "image/jpeg"
    GIF = "image/gif"


BBoxTuple = Tuple[float, float, float, float]


class BoundingBox(BaseModel):
    """Bounding box representation (west, south, east, north)."""
    min_x: float = Field(..., description="West edge")
    min_y: float = Field(..., description="South edge")
    max_x: float = Field(..., description="East edge")
    max_y: float = Field(..., description="North edge")
    crs: CRS = Field(default=CRS.EPSG_3857, description="Coordinate Reference System")

    @model_validator(mode='after')
    def validate_coordinates(self):
        """Validate that min coordinates are less than max coordinates."""
        if self.min_x >= self.max_x:
            raise ValueError('min_x must be less than max_x')
        if self.min_y >= self.max_y:
            raise ValueError('min_y must be less than max_y')
        return self

    @property
    def west(self) -> float:
        return self.min_x

    @property
    def south(self) -> float:
        return self.min_y

    @property
    def east(self) -> float:
        return self.max_x

    @property
    def north(self) -> float:
        return self.max_y

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    def to_tuple(self) -> BBoxTuple:
        return (self.min_x, self.min_y, self.max_x, self.max_y)

    def to_wms(self) -> str:
        """Render as the comma separated ``bbox`` value of a GetMap request."""
        return ",".join(repr(float(value)) for value in self.to_tuple())

    def to_crs(self, crs: CRS) -> "BoundingBox":
        """Transform the bounding box to a new CRS."""
        transformer = Transformer.from_crs(self.crs.value, CRS(crs).value, always_xy=True)
        xmin, ymin = transformer.transform(self.min_x, self.min_y)
        xmax, ymax = transformer.transform(self.max_x, self.max_y)
        return BoundingBox(min_x=xmin, min_y=ymin, max_x=xmax, max_y=ymax, crs=crs)


class TileCoord(BaseModel):
    """Integer address of one tile in the XYZ scheme (origin top-left)."""
    x: int = Field(..., description="Tile column")
    y: int = Field(..., description="Tile row, counted from the top")

    @classmethod
    def parse(cls, coord: Union["TileCoord", Tuple[int, int]]) -> "TileCoord":
        """Accept a ``TileCoord`` or an ``(x, y)`` pair."""
        if isinstance(coord, TileCoord):
            return coord
        if isinstance(coord, (tuple, list)) and len(coord) == 2:
            return cls(x=coord[0], y=coord[1])
        raise ValueError(f"Invalid tile coordinate: {coord!r}. Expected TileCoord or (x, y)")
