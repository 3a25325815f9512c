"""Service parameters and display options for a WMS overlay."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from .errors import ConfigurationError
from .projection import TILE_SIZE
from .types import CRS, Format

__all__ = ["ServiceConfig", "DisplayOptions"]


class ServiceConfig(BaseModel):
    """Query parameters of a WMS GetMap request, minus the ``bbox``."""

    model_config = ConfigDict(validate_assignment=True)

    # General
    service: str = Field(default="WMS", description="OGC service type")
    version: str = Field(default="1.1.1", description="WMS protocol version")
    request: str = Field(default="GetMap", description="WMS operation")

    # Image props
    transparent: bool = Field(default=True, description="Request a transparent background")
    format: str = Field(default=Format.PNG.value, description="Output image MIME type")
    width: int = Field(default=TILE_SIZE, description="Image width, fixed to the tile size")
    height: int = Field(default=TILE_SIZE, description="Image height, fixed to the tile size")

    # Spatial Reference System
    srs: str = Field(default=CRS.EPSG_3857.value, description="Spatial reference of the bbox")

    # Style and layers
    styles: str = Field(default="", description="Comma separated style names")
    layers: str = Field(default="", description="Comma separated layer names")

    extra: Dict[str, Any] = Field(
        default_factory=dict, description="Vendor or otherwise unrecognised query parameters"
    )

    @field_validator("format", "srs", mode="before")
    @classmethod
    def enum_value(cls, value: Any) -> Any:
        return value.value if isinstance(value, Enum) else value

    @field_validator("layers", "styles", mode="before")
    @classmethod
    def join_names(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            return ",".join(str(item) for item in value)
        return value

    @field_validator("width", "height")
    @classmethod
    def fixed_tile_size(cls, value: int) -> int:
        if value != TILE_SIZE:
            raise ValueError(f"must equal the tile size ({TILE_SIZE}), got {value}")
        return value

    @classmethod
    def from_overrides(cls, overrides: Optional[Mapping[str, Any]] = None) -> "ServiceConfig":
        """
        Merge caller overrides over the defaults, key by key.

        Recognised WMS parameter names (matched case-insensitively) replace
        the default; anything else is kept verbatim in ``extra``.

        Raises:
            ConfigurationError: If an override has an invalid value
        """
        known: Dict[str, Any] = {}
        extra: Dict[str, Any] = {}
        for key, value in (overrides or {}).items():
            name = key.lower()
            if name in cls.parameter_names():
                known[name] = value
            else:
                extra[key] = value

        try:
            return cls(**known, extra=extra)
        except PydanticValidationError as exc:
            raise ConfigurationError(f"Invalid WMS parameters: {exc}", cause=exc) from exc

    @classmethod
    def parameter_names(cls) -> List[str]:
        return [name for name in cls.model_fields if name != "extra"]

    def query_items(self) -> List[Tuple[str, str]]:
        """Parameters in request order: the standard ones, then extras."""
        items = [(name, getattr(self, name)) for name in self.parameter_names()]
        items.extend(self.extra.items())
        return [(key, _format_value(value)) for key, value in items]


class DisplayOptions(BaseModel):
    """How rendered tiles are displayed and whether their images may be cached."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    opacity: float = Field(default=0.5, ge=0.0, le=1.0, description="Tile opacity")
    cache: bool = Field(
        default=False, description="Allow cached images; when off every request gets a timestamp"
    )

    @classmethod
    def from_overrides(cls, overrides: Optional[Mapping[str, Any]] = None) -> "DisplayOptions":
        """
        Merge caller overrides over the defaults.

        Raises:
            ConfigurationError: For unknown option names or invalid values
        """
        try:
            return cls(**dict(overrides or {}))
        except PydanticValidationError as exc:
            raise ConfigurationError(f"Invalid display options: {exc}", cause=exc) from exc


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (list, tuple)):
        return ",".join(str(item) for item in value)
    return str(value)
