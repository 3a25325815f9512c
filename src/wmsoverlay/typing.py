"""Protocols describing the host map the overlay plugs into."""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class OverlayStack(Protocol):
    """Host-owned ordered sequence of overlay references."""

    def insert_at(self, index: int, overlay: Any) -> None:
        ...

    def push(self, overlay: Any) -> None:
        ...

    def get_length(self) -> int:
        ...

    def get_at(self, index: int) -> Any:
        ...

    def remove_at(self, index: int) -> Any:
        ...


class HostMap(Protocol):
    """A map viewer exposing its overlay stack."""

    overlay_map_types: OverlayStack
