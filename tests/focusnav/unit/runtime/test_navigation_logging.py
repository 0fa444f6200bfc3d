from __future__ import annotations

import json
import logging

from focusnav.api.logging import NavLoggingConfig
from focusnav.runtime.logging import (
    PACKAGE_LOGGER,
    TRACE_LOGGER,
    JsonFormatter,
    configure_logging,
    reset_logging,
    setup_logging,
)

from tests.focusnav.conftest import make_config


def test_setup_logging_uses_runtime_config() -> None:
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    try:
        setup_logging(make_config(log_level="DEBUG", trace_enabled=True))
        assert len(package_logger.handlers) == 1
        assert package_logger.level == logging.DEBUG
        assert logging.getLogger(TRACE_LOGGER).level == logging.DEBUG
        assert package_logger.propagate
    finally:
        reset_logging()
    assert package_logger.handlers == []
    assert logging.getLogger(TRACE_LOGGER).level == logging.NOTSET


def test_setup_logging_keeps_existing_handlers() -> None:
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    try:
        first = setup_logging(make_config(log_level="WARNING"))
        installed = list(first.handlers)
        setup_logging(make_config(log_level="DEBUG"))
        assert package_logger.handlers == installed
        assert package_logger.level == logging.WARNING
    finally:
        reset_logging()


def test_configure_logging_replaces_previous_handler_and_leaves_root_alone() -> None:
    root_handlers = list(logging.getLogger().handlers)
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    try:
        configure_logging(NavLoggingConfig(level_name="INFO"))
        configure_logging(NavLoggingConfig(level_name="ERROR", log_format="json", propagate=False))
        assert len(package_logger.handlers) == 1
        assert isinstance(package_logger.handlers[0].formatter, JsonFormatter)
        assert package_logger.level == logging.ERROR
        assert not package_logger.propagate
        assert logging.getLogger().handlers == root_handlers
    finally:
        reset_logging()


def test_file_handler_writes_json_records(tmp_path) -> None:
    path = tmp_path / "logs" / "nav.jsonl"
    try:
        configure_logging(NavLoggingConfig(file_path=str(path), log_format="json", propagate=False))
        logging.getLogger("focusnav.zones.registry").warning("zone_registry_test", extra={"zone": "Menu"})
    finally:
        reset_logging()
    payload = json.loads(path.read_text(encoding="utf-8").strip())
    assert payload["event"] == "zone_registry_test"
    assert payload["fields"] == {"zone": "Menu"}


def test_json_formatter_keeps_extra_fields() -> None:
    record = logging.LogRecord(
        name="focusnav.test",
        level=logging.WARNING,
        pathname=__file__,
        lineno=1,
        msg="navigation_element_inert",
        args=(),
        exc_info=None,
    )
    record.zone = "Ghost"
    record.handle = object()
    payload = json.loads(JsonFormatter().format(record))
    assert payload["level"] == "WARNING"
    assert payload["logger"] == "focusnav.test"
    assert payload["event"] == "navigation_element_inert"
    assert payload["fields"]["zone"] == "Ghost"
    assert payload["fields"]["handle"].startswith("<object")
