"""
List-backed host map for Python viewers and tests.
"""

from typing import Any, Iterator, List, Optional


class OverlayList:
    """Ordered overlay stack; index 0 is drawn first, the end is on top."""

    def __init__(self, overlays: Optional[List[Any]] = None) -> None:
        self._items: List[Any] = list(overlays or [])

    def insert_at(self, index: int, overlay: Any) -> None:
        self._items.insert(index, overlay)

    def push(self, overlay: Any) -> None:
        self._items.append(overlay)

    def get_length(self) -> int:
        return len(self._items)

    def get_at(self, index: int) -> Any:
        return self._items[index]

    def remove_at(self, index: int) -> Any:
        return self._items.pop(index)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"OverlayList({self._items!r})"


class MapHost:
    """Minimal map owning an overlay stack."""

    def __init__(self) -> None:
        self.overlay_map_types = OverlayList()
