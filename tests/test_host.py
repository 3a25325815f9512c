"""Tests for the list-backed host map."""

import pytest

from wmsoverlay.host import MapHost, OverlayList
from wmsoverlay.typing import OverlayStack


class TestOverlayList:
    """Test OverlayList sequence operations."""

    def test_satisfies_protocol(self):
        assert isinstance(OverlayList(), OverlayStack)

    def test_push_and_get(self):
        stack = OverlayList()
        stack.push("a")
        stack.push("b")

        assert stack.get_length() == 2
        assert stack.get_at(0) == "a"
        assert stack.get_at(1) == "b"

    def test_insert_and_remove(self):
        stack = OverlayList(["a", "c"])
        stack.insert_at(1, "b")

        assert list(stack) == ["a", "b", "c"]
        assert stack.remove_at(0) == "a"
        assert list(stack) == ["b", "c"]

    def test_get_at_out_of_range(self):
        with pytest.raises(IndexError):
            OverlayList().get_at(0)


class TestMapHost:
    """Test MapHost."""

    def test_starts_empty(self):
        host = MapHost()

        assert isinstance(host.overlay_map_types, OverlayList)
        assert len(host.overlay_map_types) == 0
