"""Centralized runtime configuration for the navigation subsystem."""

from __future__ import annotations

import os
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Mapping

from focusnav.api.navigation import IgnoreRangeMode, clamp01


@dataclass(frozen=True, slots=True)
class NavRuntimeConfig:
    settings_path: str | None
    screen_y_down: bool
    default_search_width: float
    default_ignore_range_mode: IgnoreRangeMode
    trace_enabled: bool
    warn_unknown_zone: bool
    log_level: str


_RUNTIME_CONFIG: ContextVar[NavRuntimeConfig | None] = ContextVar("focusnav_runtime_config", default=None)


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def _flag(name: str, default: bool, *, env: Mapping[str, str] | None = None) -> bool:
    raw = _raw(name, env=env)
    if raw is None:
        return bool(default)
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return bool(default)


def _float(name: str, default: float, *, env: Mapping[str, str] | None = None) -> float:
    raw = _raw(name, env=env)
    if raw is None:
        return float(default)
    try:
        return float(raw.strip())
    except ValueError:
        return float(default)


def _text(name: str, default: str, *, env: Mapping[str, str] | None = None) -> str:
    raw = _raw(name, env=env)
    if raw is None:
        return str(default)
    value = raw.strip()
    return value if value else str(default)


def _ignore_range_mode(raw: str) -> IgnoreRangeMode:
    value = str(raw).strip().lower().replace("-", "_")
    if value in {"auto", "auto_sync", "auto_sync_to_size"}:
        return IgnoreRangeMode.AUTO_SYNC_TO_SIZE
    if value in {"off", "none", "disabled"}:
        return IgnoreRangeMode.DISABLED
    if value == "manual":
        return IgnoreRangeMode.MANUAL
    return IgnoreRangeMode.AUTO_SYNC_TO_SIZE


def resolve_log_level_name(default: str = "INFO", *, env: Mapping[str, str] | None = None) -> str:
    """Resolve log level with package-prefixed override."""
    value = _raw("FOCUSNAV_LOG_LEVEL", env=env)
    if value is None:
        value = _raw("LOG_LEVEL", env=env)
    if value is None or not value.strip():
        value = default
    return value.strip().upper()


def load_runtime_config(*, env: Mapping[str, str] | None = None) -> NavRuntimeConfig:
    settings_path = _text("FOCUSNAV_SETTINGS_PATH", "", env=env)
    return NavRuntimeConfig(
        settings_path=settings_path or None,
        screen_y_down=_flag("FOCUSNAV_SCREEN_Y_DOWN", False, env=env),
        default_search_width=clamp01(_float("FOCUSNAV_DEFAULT_SEARCH_WIDTH", 0.5, env=env)),
        default_ignore_range_mode=_ignore_range_mode(
            _text("FOCUSNAV_DEFAULT_IGNORE_RANGE_MODE", "auto_sync_to_size", env=env)
        ),
        trace_enabled=_flag("FOCUSNAV_TRACE_ENABLED", False, env=env),
        warn_unknown_zone=_flag("FOCUSNAV_WARN_UNKNOWN_ZONE", True, env=env),
        log_level=resolve_log_level_name(env=env),
    )


def initialize_runtime_config(*, env: Mapping[str, str] | None = None) -> NavRuntimeConfig:
    config = load_runtime_config(env=env)
    _RUNTIME_CONFIG.set(config)
    return config


def set_runtime_config(config: NavRuntimeConfig) -> NavRuntimeConfig:
    _RUNTIME_CONFIG.set(config)
    return config


def get_runtime_config() -> NavRuntimeConfig:
    config = _RUNTIME_CONFIG.get()
    if config is not None:
        return config
    return initialize_runtime_config()


__all__ = [
    "NavRuntimeConfig",
    "get_runtime_config",
    "initialize_runtime_config",
    "load_runtime_config",
    "resolve_log_level_name",
    "set_runtime_config",
]
