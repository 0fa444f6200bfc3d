"""Handlers and formatting for the focusnav package logger.

Only the ``focusnav`` logger subtree is touched; the host keeps ownership of
the root logger. Records still propagate to root unless disabled.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from pathlib import Path

from focusnav.api.logging import NavLoggingConfig
from focusnav.diagnostics.json_codec import dumps_text
from focusnav.runtime.config import NavRuntimeConfig, get_runtime_config

PACKAGE_LOGGER = "focusnav"
TRACE_LOGGER = "focusnav.navigation.resolver"

_INSTALLED_HANDLERS: list[logging.Handler] = []

_STANDARD_RECORD_FIELDS = frozenset(
    {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
        "message",
    }
)


class JsonFormatter(logging.Formatter):
    """One JSON object per record; ``extra=`` values land under ``fields``."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "ts": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "event": record.getMessage(),
        }
        fields = {k: v for k, v in record.__dict__.items() if k not in _STANDARD_RECORD_FIELDS}
        if fields:
            payload["fields"] = fields
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return dumps_text(payload, default=str)


def configure_logging(config: NavLoggingConfig) -> logging.Logger:
    """Install one handler on the package logger, replacing an earlier one."""
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    _remove_installed_handlers(package_logger)

    handler: logging.Handler
    if config.file_path:
        file_path = Path(config.file_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(file_path, mode="a", encoding="utf-8", delay=True)
    else:
        handler = logging.StreamHandler()
    handler.setFormatter(_resolve_formatter(config.log_format))
    package_logger.addHandler(handler)
    _INSTALLED_HANDLERS.append(handler)

    package_logger.setLevel(getattr(logging, config.level_name.upper(), logging.INFO))
    package_logger.propagate = config.propagate
    logging.getLogger(TRACE_LOGGER).setLevel(logging.DEBUG if config.trace else logging.NOTSET)
    return package_logger


def setup_logging(config: NavRuntimeConfig | None = None) -> logging.Logger:
    """Configure from runtime config unless the package logger already has handlers."""
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if package_logger.handlers:
        return package_logger
    runtime_config = config if config is not None else get_runtime_config()
    return configure_logging(
        NavLoggingConfig(
            level_name=runtime_config.log_level,
            trace=runtime_config.trace_enabled,
        )
    )


def reset_logging() -> None:
    """Remove installed handlers and restore default logger levels."""
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    _remove_installed_handlers(package_logger)
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True
    logging.getLogger(TRACE_LOGGER).setLevel(logging.NOTSET)


def _remove_installed_handlers(package_logger: logging.Logger) -> None:
    while _INSTALLED_HANDLERS:
        handler = _INSTALLED_HANDLERS.pop()
        package_logger.removeHandler(handler)
        handler.close()


def _resolve_formatter(kind: str) -> logging.Formatter:
    if kind.strip().lower() == "json":
        return JsonFormatter()
    return logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
