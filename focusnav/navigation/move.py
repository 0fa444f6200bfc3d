"""Move-request routing from host input to focus changes."""

from __future__ import annotations

import logging

from focusnav.api.navigation import MoveOutcome, NavigableElement, NavigationDirection, NavigationHost
from focusnav.api.zones import ZoneRegistry
from focusnav.navigation.elements import ElementArena
from focusnav.navigation.resolver import DirectionalResolver

logger = logging.getLogger(__name__)

_KEY_DIRECTIONS: dict[str, NavigationDirection] = {
    "up": NavigationDirection.UP,
    "arrowup": NavigationDirection.UP,
    "dpad_up": NavigationDirection.UP,
    "w": NavigationDirection.UP,
    "down": NavigationDirection.DOWN,
    "arrowdown": NavigationDirection.DOWN,
    "dpad_down": NavigationDirection.DOWN,
    "s": NavigationDirection.DOWN,
    "left": NavigationDirection.LEFT,
    "arrowleft": NavigationDirection.LEFT,
    "dpad_left": NavigationDirection.LEFT,
    "a": NavigationDirection.LEFT,
    "right": NavigationDirection.RIGHT,
    "arrowright": NavigationDirection.RIGHT,
    "dpad_right": NavigationDirection.RIGHT,
    "d": NavigationDirection.RIGHT,
}


def map_move_key(key: str) -> NavigationDirection | None:
    """Map a host key name to a move direction."""
    return _KEY_DIRECTIONS.get(key.strip().lower())


class MoveRouter:
    """Direct search first, authored fallbacks second, otherwise leave input to the host."""

    def __init__(
        self,
        resolver: DirectionalResolver,
        registry: ZoneRegistry,
        arena: ElementArena,
        host: NavigationHost,
    ) -> None:
        self._resolver = resolver
        self._registry = registry
        self._arena = arena
        self._host = host

    def route_move(self, origin: NavigableElement, direction: NavigationDirection) -> MoveOutcome:
        graph = self._registry.graph
        if graph is None:
            return MoveOutcome(handled=False)
        if not graph.has_zone(origin.zone):
            logger.warning(
                "navigation_origin_zone_unknown",
                extra={"element": origin.label, "zone": origin.zone},
            )
            return MoveOutcome(handled=False)

        target = self._resolver.find_target(origin, direction)
        if not self._is_live(target):
            target = self._resolver.find_fallback(origin, direction)
        if target is None or not self._is_live(target):
            return MoveOutcome(handled=False)

        self._host.select_focus(target)
        return MoveOutcome(handled=True, target=target)

    def route_key(self, origin: NavigableElement, key: str) -> MoveOutcome:
        direction = map_move_key(key)
        if direction is None:
            return MoveOutcome(handled=False)
        return self.route_move(origin, direction)

    def _is_live(self, target: NavigableElement | None) -> bool:
        if target is None or not self._arena.contains(target):
            return False
        return self._registry.is_registered(target) and self._host.is_active(target)
