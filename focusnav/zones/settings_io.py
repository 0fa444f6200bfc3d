"""Reachability settings persistence."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

from focusnav.api.zones import ReachabilityGraph
from focusnav.diagnostics.json_codec import dumps_bytes, loads
from focusnav.runtime.errors import NavigationConfigurationError, log_recoverable
from focusnav.zones.graph import RuntimeReachabilityGraph

logger = logging.getLogger(__name__)


def parse_reachability_mapping(payload: object) -> dict[str, list[str]]:
    """Validate a decoded settings payload as zone -> list of zone names."""
    if not isinstance(payload, Mapping):
        raise NavigationConfigurationError("reachability settings must be a JSON object")
    mapping: dict[str, list[str]] = {}
    for name, targets in payload.items():
        if not isinstance(name, str) or not name:
            raise NavigationConfigurationError(f"invalid zone name: {name!r}")
        if not isinstance(targets, list) or not all(isinstance(item, str) for item in targets):
            raise NavigationConfigurationError(f"zone {name!r} must map to a list of zone names")
        mapping[name] = list(targets)
    return mapping


def load_reachability_settings(path: str | Path) -> ReachabilityGraph:
    """Load a graph from a settings file.

    A missing or unreadable file yields an empty graph so every zone is
    unreachable; malformed content raises ``NavigationConfigurationError``.
    """
    settings_path = Path(path)
    try:
        raw = settings_path.read_bytes()
    except FileNotFoundError:
        logger.warning("reachability_settings_missing", extra={"path": str(settings_path)})
        return RuntimeReachabilityGraph()
    except OSError:
        log_recoverable(
            logger,
            "reachability_settings_unreadable",
            level=logging.WARNING,
            path=str(settings_path),
        )
        return RuntimeReachabilityGraph()

    try:
        payload = loads(raw)
    except ValueError as exc:
        raise NavigationConfigurationError(f"malformed reachability settings: {settings_path}") from exc

    graph = RuntimeReachabilityGraph.from_mapping(parse_reachability_mapping(payload))
    logger.info(
        "reachability_settings_loaded",
        extra={"path": str(settings_path), "zones": len(graph.zone_names())},
    )
    return graph


def save_reachability_settings(graph: ReachabilityGraph, path: str | Path) -> Path:
    """Write the graph as pretty, key-sorted JSON."""
    settings_path = Path(path)
    settings_path.parent.mkdir(parents=True, exist_ok=True)
    settings_path.write_bytes(dumps_bytes(graph.to_mapping(), pretty=True, sort_keys=True))
    return settings_path
