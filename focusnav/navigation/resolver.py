"""Directional target resolution: cone filter, distance ranking, fallbacks."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from focusnav.api.navigation import (
    DirectionMode,
    IgnoreRangeMode,
    NavigableElement,
    NavigationDirection,
    NavigationHost,
    Vec2,
)
from focusnav.api.zones import ZoneRegistry
from focusnav.navigation.elements import ElementArena
from focusnav.navigation.geometry import (
    Vector,
    as_points,
    as_vector,
    cone_dots,
    local_axis,
    normalized,
    required_cos,
    screen_axis,
    squared_distance,
    squared_distances,
)

logger = logging.getLogger(__name__)


def is_better_target(distance: float, priority: float, best_distance: float, best_priority: float) -> bool:
    """Closer wins; on an exact distance tie the higher priority wins."""
    if distance != best_distance:
        return distance < best_distance
    return priority > best_priority


@dataclass(slots=True)
class _BestTarget:
    element: NavigableElement | None = None
    distance: float = math.inf
    priority: float = -math.inf

    def offer(self, candidate: NavigableElement, distance: float) -> None:
        if is_better_target(distance, candidate.priority, self.distance, self.priority):
            self.element = candidate
            self.distance = distance
            self.priority = candidate.priority


class DirectionalResolver:
    """Answers "given this origin and direction, which element is next?".

    The resolver never changes focus itself; it only reads the registry,
    the arena (for fallback handles) and host-supplied geometry.
    """

    def __init__(
        self,
        registry: ZoneRegistry,
        arena: ElementArena,
        host: NavigationHost,
        *,
        screen_y_down: bool = False,
        trace_enabled: bool = False,
    ) -> None:
        self._registry = registry
        self._arena = arena
        self._host = host
        self._screen_y_down = screen_y_down
        self._trace_enabled = trace_enabled

    def can_navigate_to(self, origin: NavigableElement, target: NavigableElement | None) -> bool:
        """Reachability plus liveness check shared by direct and fallback search.

        Both ends must sit in configured zones, and the target must still be
        registered: disabled or inert elements are never handed out.
        """
        if target is None or target.handle == origin.handle:
            return False
        graph = self._registry.graph
        if graph is None or not graph.has_zone(origin.zone) or not graph.has_zone(target.zone):
            return False
        if not graph.can_navigate(origin.zone, target.zone) or self._registry.zone_of(target) != target.zone:
            return False
        return self._host.is_active(target) and self._host.is_interactable(target)

    def is_searchable(self, origin: NavigableElement, direction: NavigationDirection) -> bool:
        """Return whether ``origin`` may resolve navigation in ``direction`` at all."""
        graph = self._registry.graph
        if graph is None or not graph.has_zone(origin.zone):
            return False
        return origin.settings_for(direction).enabled

    def find_target(
        self,
        origin: NavigableElement,
        direction: NavigationDirection,
    ) -> NavigableElement | None:
        """Return the closest reachable element inside the direction cone."""
        if not self.is_searchable(origin, direction):
            return None
        settings = origin.settings_for(direction)

        candidates = [
            candidate
            for candidate in self._registry.each_reachable(origin.zone)
            if self.can_navigate_to(origin, candidate)
        ]
        if not candidates:
            self._trace(origin, direction, None, pool=0)
            return None

        edge_origin = self.edge_origin(origin, direction)
        direction_vector = self.direction_vector(origin, direction)
        threshold = required_cos(settings.search_width)

        points = as_points([self._host.get_screen_position(candidate) for candidate in candidates])
        dots = cone_dots(direction_vector, edge_origin, points)
        distances = squared_distances(edge_origin, points)

        best = _BestTarget()
        for candidate, dot, distance in zip(candidates, dots, distances):
            if dot <= threshold:
                continue
            best.offer(candidate, float(distance))
        self._trace(origin, direction, best.element, pool=len(candidates))
        return best.element

    def find_fallback(
        self,
        origin: NavigableElement,
        direction: NavigationDirection,
    ) -> NavigableElement | None:
        """Pick the best authored fallback; direction cones do not apply."""
        settings = origin.settings_for(direction)
        if not self.is_searchable(origin, direction) or not settings.fallbacks:
            return None

        edge_origin = self.edge_origin(origin, direction)
        best = _BestTarget()
        for handle in settings.fallbacks:
            candidate = self._arena.get(handle)
            if candidate is None or not self.can_navigate_to(origin, candidate):
                continue
            point = as_vector(self._host.get_screen_position(candidate))
            best.offer(candidate, squared_distance(edge_origin, point))
        return best.element

    def edge_origin(self, origin: NavigableElement, direction: NavigationDirection) -> Vector:
        """Anchor pushed out to the ignore-range edge facing ``direction``."""
        position = as_vector(self._host.get_screen_position(origin))
        if origin.ignore_range_mode is IgnoreRangeMode.DISABLED:
            return position
        margin = origin.ignore_range.margin_for(direction)
        axes = self._local_axes(origin)
        if axes is None:
            return position + screen_axis(direction, y_down=self._screen_y_down) * margin
        return position + local_axis(direction, *axes) * margin

    def direction_vector(self, origin: NavigableElement, direction: NavigationDirection) -> Vector:
        axes = self._local_axes(origin)
        if axes is None:
            return screen_axis(direction, y_down=self._screen_y_down)
        return normalized(local_axis(direction, *axes))

    def _local_axes(self, origin: NavigableElement) -> tuple[Vec2, Vec2] | None:
        if origin.direction_mode is not DirectionMode.LOCAL:
            return None
        return self._host.get_local_axes(origin)

    def _trace(
        self,
        origin: NavigableElement,
        direction: NavigationDirection,
        target: NavigableElement | None,
        *,
        pool: int,
    ) -> None:
        if not self._trace_enabled:
            return
        logger.debug(
            "navigation_target_resolved",
            extra={
                "origin": origin.label,
                "direction": direction.value,
                "target": None if target is None else target.label,
                "pool": pool,
            },
        )
