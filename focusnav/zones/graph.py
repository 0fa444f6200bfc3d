"""Reachability graph implementation over zone names."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from focusnav.api.zones import ReachabilityGraph, ZoneSettings

logger = logging.getLogger(__name__)


class RuntimeReachabilityGraph(ReachabilityGraph):
    """Zone -> reachable-zones configuration with fail-closed queries."""

    def __init__(self) -> None:
        self._zones: dict[str, ZoneSettings] = {}

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Sequence[str]]) -> RuntimeReachabilityGraph:
        """Build a graph from a zone -> reachable-zones mapping.

        Every key becomes a configured zone before edges are added; edges
        naming a zone that is not a key are dropped with a warning.
        """
        graph = cls()
        for name in mapping:
            graph.add_zone(name)
        for name, targets in mapping.items():
            if not name:
                continue
            for target in targets:
                if target == name:
                    continue
                if not graph.has_zone(target):
                    logger.warning(
                        "reachability_edge_dropped",
                        extra={"from_zone": name, "to_zone": target},
                    )
                    continue
                graph.add_edge(name, target)
        return graph

    def has_zone(self, name: str) -> bool:
        if not name:
            return False
        return name in self._zones

    def get_zone(self, name: str) -> ZoneSettings | None:
        if not name:
            return None
        return self._zones.get(name)

    def add_zone(self, name: str) -> ZoneSettings | None:
        if not name:
            return None
        existing = self._zones.get(name)
        if existing is not None:
            return existing
        settings = ZoneSettings(name=name)
        self._zones[name] = settings
        return settings

    def remove_zone(self, name: str) -> bool:
        if self._zones.pop(name, None) is None:
            return False
        for settings in self._zones.values():
            if name in settings.reachable:
                settings.reachable.remove(name)
        return True

    def add_edge(self, from_zone: str, to_zone: str) -> bool:
        """Add one edge; returns ``False`` when it is implicit or already present."""
        if not from_zone or not to_zone:
            raise ValueError("zone names must not be empty")
        source = self._zones.get(from_zone)
        if source is None:
            raise KeyError(f"unknown zone: {from_zone}")
        if to_zone not in self._zones:
            raise KeyError(f"unknown zone: {to_zone}")
        if from_zone == to_zone or to_zone in source.reachable:
            return False
        source.reachable.append(to_zone)
        return True

    def remove_edge(self, from_zone: str, to_zone: str) -> bool:
        source = self.get_zone(from_zone)
        if source is None or to_zone not in source.reachable:
            return False
        source.reachable.remove(to_zone)
        return True

    def zone_names(self) -> tuple[str, ...]:
        return tuple(self._zones)

    def reachable_from(self, name: str) -> tuple[str, ...]:
        settings = self.get_zone(name)
        if settings is None:
            return ()
        return tuple(settings.reachable)

    def can_navigate(self, from_zone: str, to_zone: str) -> bool:
        if not from_zone or not to_zone:
            return False
        # Self-reachability does not depend on configuration.
        if from_zone == to_zone:
            return True
        source = self._zones.get(from_zone)
        if source is None:
            return False
        return source.can_navigate_to(to_zone)

    def to_mapping(self) -> dict[str, list[str]]:
        return {name: sorted(settings.reachable) for name, settings in self._zones.items()}
