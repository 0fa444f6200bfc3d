"""Zone reachability graph and membership registry."""

from focusnav.zones.graph import RuntimeReachabilityGraph
from focusnav.zones.registry import RuntimeZoneRegistry
from focusnav.zones.settings_io import (
    load_reachability_settings,
    parse_reachability_mapping,
    save_reachability_settings,
)

__all__ = [
    "RuntimeReachabilityGraph",
    "RuntimeZoneRegistry",
    "load_reachability_settings",
    "parse_reachability_mapping",
    "save_reachability_settings",
]
