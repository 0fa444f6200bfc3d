from __future__ import annotations

import pytest

from focusnav.api.navigation import IgnoreRangeMode, NavigationDirection
from focusnav.navigation.elements import ElementArena


def test_arena_allocates_unique_handles() -> None:
    arena = ElementArena()
    first = arena.create(name="first")
    second = arena.create(name="second")
    assert first.handle != second.handle
    assert arena.get(first.handle) is first
    assert arena.require(second.handle) is second
    assert len(arena) == 2


def test_release_invalidates_handle() -> None:
    arena = ElementArena()
    element = arena.create()
    assert arena.release(element.handle) is element
    assert arena.get(element.handle) is None
    assert not arena.contains(element)
    assert arena.release(element.handle) is None
    with pytest.raises(KeyError):
        arena.require(element.handle)


def test_handles_are_not_reused_after_release() -> None:
    arena = ElementArena()
    released = arena.create()
    arena.release(released.handle)
    fresh = arena.create()
    assert fresh.handle != released.handle


def test_arena_defaults_apply_to_new_elements() -> None:
    arena = ElementArena(default_search_width=0.25, default_ignore_range_mode=IgnoreRangeMode.DISABLED)
    element = arena.create(zone="A")
    assert element.ignore_range_mode is IgnoreRangeMode.DISABLED
    for direction in NavigationDirection:
        assert element.search_width(direction) == 0.25
        assert element.is_direction_enabled(direction)
        assert element.fallbacks(direction) == ()
