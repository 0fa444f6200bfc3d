"""Public zone reachability and registry API contracts."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from focusnav.api.navigation import ElementHandle, NavigableElement

ZONE_SEPARATOR = "/"


def parent_zone(name: str) -> str | None:
    """Return the enclosing zone name in a ``Menu/Settings`` style path."""
    head, sep, _ = name.rpartition(ZONE_SEPARATOR)
    if not sep or not head:
        return None
    return head


@dataclass(slots=True)
class ZoneSettings:
    """Configured zone and the zones it may navigate into."""

    name: str
    reachable: list[str] = field(default_factory=list)

    def can_navigate_to(self, target: str) -> bool:
        if not target or not self.name:
            return False
        return target in self.reachable


class ReachabilityGraph(ABC):
    """Directed graph over zone names."""

    @abstractmethod
    def has_zone(self, name: str) -> bool:
        """Return whether a zone is configured."""

    @abstractmethod
    def get_zone(self, name: str) -> ZoneSettings | None:
        """Return the settings record for a configured zone."""

    @abstractmethod
    def add_zone(self, name: str) -> ZoneSettings | None:
        """Configure a zone, returning the existing record when present."""

    @abstractmethod
    def remove_zone(self, name: str) -> bool:
        """Remove a zone and every edge pointing at it."""

    @abstractmethod
    def add_edge(self, from_zone: str, to_zone: str) -> bool:
        """Allow navigation from one configured zone into another."""

    @abstractmethod
    def remove_edge(self, from_zone: str, to_zone: str) -> bool:
        """Drop one configured edge."""

    @abstractmethod
    def zone_names(self) -> tuple[str, ...]:
        """Return configured zone names."""

    @abstractmethod
    def reachable_from(self, name: str) -> tuple[str, ...]:
        """Return configured edge targets of one zone."""

    @abstractmethod
    def can_navigate(self, from_zone: str, to_zone: str) -> bool:
        """Return whether focus may cross from one zone into another."""

    @abstractmethod
    def to_mapping(self) -> dict[str, list[str]]:
        """Return a serializable zone -> reachable-zones mapping."""


class ZoneRegistry(ABC):
    """Live element membership per zone."""

    @property
    @abstractmethod
    def graph(self) -> ReachabilityGraph | None:
        """Reachability graph used to validate and scope membership."""

    @abstractmethod
    def bind_graph(self, graph: ReachabilityGraph | None) -> None:
        """Replace the reachability graph."""

    @abstractmethod
    def add(self, element: NavigableElement) -> bool:
        """Register an element under its current zone."""

    @abstractmethod
    def remove(self, element: NavigableElement) -> bool:
        """Unregister an element from every index."""

    @abstractmethod
    def set_zone(self, element: NavigableElement, zone: str) -> bool:
        """Move an element into another zone."""

    @abstractmethod
    def each_reachable(self, from_zone: str) -> tuple[NavigableElement, ...]:
        """Return elements in every zone reachable from ``from_zone``."""

    @abstractmethod
    def zone_of(self, element: NavigableElement | ElementHandle) -> str | None:
        """Return the zone an element is registered under."""

    @abstractmethod
    def members(self, zone: str) -> tuple[NavigableElement, ...]:
        """Return elements registered under one zone."""

    @abstractmethod
    def is_registered(self, element: NavigableElement | ElementHandle) -> bool:
        """Return whether an element is indexed."""

    @abstractmethod
    def clear(self) -> None:
        """Drop every registration."""

    @abstractmethod
    def __len__(self) -> int:
        """Return the number of registered elements."""


def create_reachability_graph(
    mapping: Mapping[str, Sequence[str]] | None = None,
) -> ReachabilityGraph:
    """Create default reachability-graph implementation."""
    from focusnav.zones.graph import RuntimeReachabilityGraph

    if mapping is None:
        return RuntimeReachabilityGraph()
    return RuntimeReachabilityGraph.from_mapping(mapping)


def create_zone_registry(graph: ReachabilityGraph | None = None) -> ZoneRegistry:
    """Create default zone-registry implementation."""
    from focusnav.zones.registry import RuntimeZoneRegistry

    return RuntimeZoneRegistry(graph)
