"""Shared navigation exception policy helpers."""

from __future__ import annotations

import logging


class NavigationConfigurationError(ValueError):
    """Raised when the navigation subsystem is wired or configured incorrectly."""


def log_recoverable(
    logger: logging.Logger,
    message: str,
    *,
    level: int = logging.DEBUG,
    **fields: object,
) -> None:
    """Emit structured observability for tolerated recoverable exceptions."""
    logger.log(level, message, exc_info=True, extra=fields or None)
