"""Public navigation API contracts."""

from focusnav.api.logging import NavLoggingConfig, configure_logging
from focusnav.api.navigation import (
    DirectionMode,
    DirectionSettings,
    ElementHandle,
    IgnoreRange,
    IgnoreRangeMode,
    MoveOutcome,
    NavigableElement,
    NavigationDirection,
    NavigationHost,
    Vec2,
    clamp01,
    create_functional_host,
)
from focusnav.api.zones import (
    ZONE_SEPARATOR,
    ReachabilityGraph,
    ZoneRegistry,
    ZoneSettings,
    create_reachability_graph,
    create_zone_registry,
    parent_zone,
)

__all__ = [
    "DirectionMode",
    "DirectionSettings",
    "ElementHandle",
    "IgnoreRange",
    "IgnoreRangeMode",
    "MoveOutcome",
    "NavLoggingConfig",
    "NavigableElement",
    "NavigationDirection",
    "NavigationHost",
    "ReachabilityGraph",
    "Vec2",
    "ZONE_SEPARATOR",
    "ZoneRegistry",
    "ZoneSettings",
    "clamp01",
    "configure_logging",
    "create_functional_host",
    "create_reachability_graph",
    "create_zone_registry",
    "parent_zone",
]
