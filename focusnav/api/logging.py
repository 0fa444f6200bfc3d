"""Public navigation logging API."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class NavLoggingConfig:
    """Handler setup for the ``focusnav`` package logger."""

    level_name: str = "INFO"
    log_format: str = "text"  # text|json
    file_path: str | None = None
    # Per-resolution debug records from the resolver.
    trace: bool = False
    propagate: bool = True


def configure_logging(config: NavLoggingConfig) -> None:
    """Configure the ``focusnav`` package logger."""
    from focusnav.runtime.logging import configure_logging as _configure_logging

    _configure_logging(config)
