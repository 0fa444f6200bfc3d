"""Host adapter implementations."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from focusnav.api.navigation import NavigableElement, NavigationHost, Vec2


@dataclass(frozen=True, slots=True)
class FunctionalHost(NavigationHost):
    """Callable-backed host; missing callables default to a permissive host."""

    position_fn: Callable[[NavigableElement], Vec2]
    select_fn: Callable[[NavigableElement], None] | None = None
    interactable_fn: Callable[[NavigableElement], bool] | None = None
    active_fn: Callable[[NavigableElement], bool] | None = None
    local_axes_fn: Callable[[NavigableElement], tuple[Vec2, Vec2] | None] | None = None

    def get_screen_position(self, element: NavigableElement) -> Vec2:
        return self.position_fn(element)

    def is_interactable(self, element: NavigableElement) -> bool:
        if self.interactable_fn is None:
            return True
        return bool(self.interactable_fn(element))

    def is_active(self, element: NavigableElement) -> bool:
        if self.active_fn is None:
            return True
        return bool(self.active_fn(element))

    def select_focus(self, element: NavigableElement) -> None:
        if self.select_fn is not None:
            self.select_fn(element)

    def get_local_axes(self, element: NavigableElement) -> tuple[Vec2, Vec2] | None:
        if self.local_axes_fn is None:
            return None
        return self.local_axes_fn(element)
