"""Navigation runtime configuration, logging and composition."""

from focusnav.runtime.config import (
    NavRuntimeConfig,
    get_runtime_config,
    initialize_runtime_config,
    load_runtime_config,
    resolve_log_level_name,
    set_runtime_config,
)
from focusnav.runtime.errors import NavigationConfigurationError, log_recoverable
from focusnav.runtime.logging import configure_logging, reset_logging, setup_logging

__all__ = [
    "NavRuntimeConfig",
    "NavigationConfigurationError",
    "configure_logging",
    "get_runtime_config",
    "initialize_runtime_config",
    "load_runtime_config",
    "log_recoverable",
    "reset_logging",
    "resolve_log_level_name",
    "set_runtime_config",
    "setup_logging",
]
