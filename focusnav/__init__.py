"""Directional focus navigation across zoned UI elements."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from focusnav.api.navigation import NavigationHost
    from focusnav.runtime.subsystem import NavigationSubsystem


def create(host: "NavigationHost") -> "NavigationSubsystem":
    """Create one navigation subsystem configured from the environment."""
    from focusnav.runtime.config import get_runtime_config
    from focusnav.runtime.logging import setup_logging
    from focusnav.runtime.subsystem import create_navigation_subsystem

    config = get_runtime_config()
    setup_logging(config)
    return create_navigation_subsystem(host, config=config)

__all__ = ["create"]
