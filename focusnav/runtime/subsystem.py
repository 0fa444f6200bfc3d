"""Composition of graph, registry, resolver and router into one navigation universe."""

from __future__ import annotations

import logging

from focusnav.api.navigation import (
    DirectionMode,
    ElementHandle,
    IgnoreRange,
    IgnoreRangeMode,
    MoveOutcome,
    NavigableElement,
    NavigationDirection,
    NavigationHost,
)
from focusnav.api.zones import ReachabilityGraph
from focusnav.navigation.elements import ElementArena
from focusnav.navigation.move import MoveRouter
from focusnav.navigation.resolver import DirectionalResolver
from focusnav.runtime.config import NavRuntimeConfig, get_runtime_config
from focusnav.zones.graph import RuntimeReachabilityGraph
from focusnav.zones.registry import RuntimeZoneRegistry
from focusnav.zones.settings_io import load_reachability_settings

logger = logging.getLogger(__name__)


class NavigationSubsystem:
    """Owns every piece of navigation state for one window or screen.

    Several subsystems can live in the same process; nothing here is global.
    """

    def __init__(
        self,
        host: NavigationHost,
        graph: ReachabilityGraph,
        config: NavRuntimeConfig,
    ) -> None:
        self.host = host
        self.config = config
        self.graph = graph
        self.arena = ElementArena(
            default_search_width=config.default_search_width,
            default_ignore_range_mode=config.default_ignore_range_mode,
        )
        self.registry = RuntimeZoneRegistry(graph)
        self.resolver = DirectionalResolver(
            self.registry,
            self.arena,
            host,
            screen_y_down=config.screen_y_down,
            trace_enabled=config.trace_enabled,
        )
        self.router = MoveRouter(self.resolver, self.registry, self.arena, host)
        self._enabled: set[ElementHandle] = set()

    def create_element(
        self,
        *,
        zone: str = "",
        name: str = "",
        priority: int = 0,
        direction_mode: DirectionMode = DirectionMode.GLOBAL,
        ignore_range_mode: IgnoreRangeMode | None = None,
        ignore_range: IgnoreRange | None = None,
        enable: bool = True,
    ) -> NavigableElement:
        """Allocate an element and, by default, register it immediately."""
        element = self.arena.create(
            zone=zone,
            name=name,
            priority=priority,
            direction_mode=direction_mode,
            ignore_range_mode=ignore_range_mode,
            ignore_range=ignore_range,
        )
        if enable:
            self.enable_element(element)
        return element

    def enable_element(self, element: NavigableElement) -> bool:
        self._enabled.add(element.handle)
        registered = self.registry.add(element)
        if not registered:
            self._warn_inert(element)
        return registered

    def disable_element(self, element: NavigableElement) -> bool:
        self._enabled.discard(element.handle)
        return self.registry.remove(element)

    def destroy_element(self, element: NavigableElement) -> None:
        """Unregister and release; stale fallback handles are skipped afterwards."""
        self._enabled.discard(element.handle)
        self.registry.remove(element)
        self.arena.release(element.handle)

    def set_zone(self, element: NavigableElement, zone: str) -> bool:
        """Change zone membership; disabled elements only record the new zone."""
        if element.handle not in self._enabled:
            self.registry.remove(element)
            element.zone = zone
            return False
        registered = self.registry.set_zone(element, zone)
        if not registered:
            self._warn_inert(element)
        return registered

    def reload_graph(self, graph: ReachabilityGraph) -> None:
        """Swap the reachability graph and re-validate every live element."""
        self.graph = graph
        self.registry.bind_graph(graph)
        self._revalidate()

    def remove_zone(self, zone: str) -> bool:
        """Drop a zone from the graph and evict its members from the registry."""
        removed = self.graph.remove_zone(zone)
        if removed:
            self._revalidate()
        return removed

    def _revalidate(self) -> None:
        for element in self.arena:
            if element.handle in self._enabled:
                self.registry.add(element)

    def find_target(self, origin: NavigableElement, direction: NavigationDirection) -> NavigableElement | None:
        return self.resolver.find_target(origin, direction)

    def find_fallback(self, origin: NavigableElement, direction: NavigationDirection) -> NavigableElement | None:
        return self.resolver.find_fallback(origin, direction)

    def move(self, origin: NavigableElement, direction: NavigationDirection) -> MoveOutcome:
        return self.router.route_move(origin, direction)

    def move_key(self, origin: NavigableElement, key: str) -> MoveOutcome:
        return self.router.route_key(origin, key)

    def _warn_inert(self, element: NavigableElement) -> None:
        if not self.config.warn_unknown_zone:
            return
        logger.warning(
            "navigation_element_inert",
            extra={"element": element.label, "zone": element.zone},
        )


def create_navigation_subsystem(
    host: NavigationHost,
    *,
    graph: ReachabilityGraph | None = None,
    config: NavRuntimeConfig | None = None,
) -> NavigationSubsystem:
    """Build a subsystem; the graph comes from settings when not supplied."""
    runtime_config = config if config is not None else get_runtime_config()
    if graph is None:
        if runtime_config.settings_path:
            graph = load_reachability_settings(runtime_config.settings_path)
        else:
            graph = RuntimeReachabilityGraph()
    return NavigationSubsystem(host, graph, runtime_config)
