"""Element arena allocating stable handles for navigable elements."""

from __future__ import annotations

from collections.abc import Iterator

from focusnav.api.navigation import (
    DirectionMode,
    DirectionSettings,
    ElementHandle,
    IgnoreRange,
    IgnoreRangeMode,
    NavigableElement,
)


class ElementArena:
    """Owns element records and hands out integer handles."""

    def __init__(
        self,
        *,
        default_search_width: float = 0.5,
        default_ignore_range_mode: IgnoreRangeMode = IgnoreRangeMode.AUTO_SYNC_TO_SIZE,
    ) -> None:
        self._next_id = 1
        self._elements: dict[ElementHandle, NavigableElement] = {}
        self._default_search_width = default_search_width
        self._default_ignore_range_mode = default_ignore_range_mode

    def create(
        self,
        *,
        zone: str = "",
        name: str = "",
        priority: int = 0,
        direction_mode: DirectionMode = DirectionMode.GLOBAL,
        ignore_range_mode: IgnoreRangeMode | None = None,
        ignore_range: IgnoreRange | None = None,
    ) -> NavigableElement:
        """Allocate a handle and store a new element record."""
        handle = ElementHandle(self._next_id)
        self._next_id += 1
        width = self._default_search_width
        element = NavigableElement(
            handle=handle,
            zone=zone,
            name=name,
            priority=int(priority),
            direction_mode=direction_mode,
            ignore_range_mode=ignore_range_mode or self._default_ignore_range_mode,
            ignore_range=ignore_range or IgnoreRange(),
            up=DirectionSettings(search_width=width),
            down=DirectionSettings(search_width=width),
            left=DirectionSettings(search_width=width),
            right=DirectionSettings(search_width=width),
        )
        self._elements[handle] = element
        return element

    def get(self, handle: ElementHandle) -> NavigableElement | None:
        return self._elements.get(handle)

    def require(self, handle: ElementHandle) -> NavigableElement:
        element = self.get(handle)
        if element is None:
            raise KeyError(f"unknown element handle: {handle.id}")
        return element

    def contains(self, element: NavigableElement) -> bool:
        """Return whether ``element`` is the live record for its handle."""
        return self._elements.get(element.handle) is element

    def release(self, handle: ElementHandle) -> NavigableElement | None:
        """Drop an element record; stale handles resolve to ``None`` afterwards."""
        return self._elements.pop(handle, None)

    def __iter__(self) -> Iterator[NavigableElement]:
        return iter(tuple(self._elements.values()))

    def __len__(self) -> int:
        return len(self._elements)
