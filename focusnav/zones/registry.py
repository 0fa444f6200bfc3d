"""Zone membership registry keyed on element handles."""

from __future__ import annotations

import logging
import threading

from focusnav.api.navigation import ElementHandle, NavigableElement
from focusnav.api.zones import ReachabilityGraph, ZoneRegistry
from focusnav.runtime.errors import NavigationConfigurationError

logger = logging.getLogger(__name__)


def _handle_of(element: NavigableElement | ElementHandle) -> ElementHandle:
    if isinstance(element, ElementHandle):
        return element
    return element.handle


class RuntimeZoneRegistry(ZoneRegistry):
    """Forward (zone -> elements) and reverse (element -> zone) indexes.

    Both maps are only touched while holding one re-entrant lock, so a
    resolution pass never observes an element half-way through a zone change.
    """

    def __init__(self, graph: ReachabilityGraph | None = None) -> None:
        self._graph = graph
        self._members: dict[str, dict[ElementHandle, NavigableElement]] = {}
        self._zones: dict[ElementHandle, str] = {}
        self._lock = threading.RLock()

    @property
    def graph(self) -> ReachabilityGraph | None:
        return self._graph

    def bind_graph(self, graph: ReachabilityGraph | None) -> None:
        with self._lock:
            self._graph = graph

    def add(self, element: NavigableElement) -> bool:
        """Register ``element`` under ``element.zone``.

        Elements whose zone is empty or not configured stay out of every
        index; calling ``add`` again after fixing the configuration heals them.
        """
        with self._lock:
            zone = element.zone
            configured = bool(zone) and self._graph is not None and self._graph.has_zone(zone)
            previous = self._zones.get(element.handle)
            if previous is not None and (previous != zone or not configured):
                self._remove_locked(element)
            if not configured:
                logger.debug(
                    "zone_registry_element_inert",
                    extra={"element": element.label, "zone": zone},
                )
                return False
            self._members.setdefault(zone, {})[element.handle] = element
            self._zones[element.handle] = zone
            return True

    def remove(self, element: NavigableElement) -> bool:
        with self._lock:
            return self._remove_locked(element)

    def set_zone(self, element: NavigableElement, zone: str) -> bool:
        with self._lock:
            self._remove_locked(element)
            element.zone = zone
            return self.add(element)

    def each_reachable(self, from_zone: str) -> tuple[NavigableElement, ...]:
        graph = self._graph
        if graph is None:
            raise NavigationConfigurationError("zone registry has no reachability graph bound")
        with self._lock:
            return tuple(
                element
                for zone, members in self._members.items()
                if graph.can_navigate(from_zone, zone)
                for element in members.values()
            )

    def zone_of(self, element: NavigableElement | ElementHandle) -> str | None:
        with self._lock:
            return self._zones.get(_handle_of(element))

    def members(self, zone: str) -> tuple[NavigableElement, ...]:
        with self._lock:
            return tuple(self._members.get(zone, {}).values())

    def is_registered(self, element: NavigableElement | ElementHandle) -> bool:
        with self._lock:
            return _handle_of(element) in self._zones

    def clear(self) -> None:
        with self._lock:
            self._members.clear()
            self._zones.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._zones)

    def _remove_locked(self, element: NavigableElement) -> bool:
        handle = element.handle
        removed = self._discard(element.zone, handle)
        cached_zone = self._zones.pop(handle, None)
        if cached_zone is not None:
            self._discard(cached_zone, handle)
            removed = True
        return removed

    def _discard(self, zone: str, handle: ElementHandle) -> bool:
        if not zone:
            return False
        members = self._members.get(zone)
        if members is None or members.pop(handle, None) is None:
            return False
        if not members:
            del self._members[zone]
        return True
