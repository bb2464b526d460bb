"""Tests for logging setup and the JSON formatter."""

from __future__ import annotations

import json
import logging
import sys

import pytest

from backend_profiles.config import Settings
from backend_profiles.logging_config import JSONFormatter, configure_logging


@pytest.fixture()
def root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def _record(msg: str, *args: object, exc_info=None) -> logging.LogRecord:
    return logging.LogRecord(
        name="backend_profiles.selector",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=args,
        exc_info=exc_info,
    )


class TestJSONFormatter:
    def test_basic_fields(self) -> None:
        payload = json.loads(JSONFormatter().format(_record("Activated profile '%s'", "redis")))
        assert payload["level"] == "INFO"
        assert payload["logger"] == "backend_profiles.selector"
        assert payload["message"] == "Activated profile 'redis'"
        assert "timestamp" in payload
        assert "exc_info" not in payload

    def test_single_line(self) -> None:
        output = JSONFormatter().format(_record("line one\nline two"))
        assert "\n" not in output

    def test_exception_included(self) -> None:
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            record = _record("failed", exc_info=sys.exc_info())
        payload = json.loads(JSONFormatter().format(record))
        assert "RuntimeError: boom" in payload["exc_info"]


class TestConfigureLogging:
    def test_structured_logging_installs_json_handler(self, root_logger) -> None:
        configure_logging(Settings(structured_logging=True))
        assert len(root_logger.handlers) == 1
        assert isinstance(root_logger.handlers[0].formatter, JSONFormatter)
        assert root_logger.level == logging.INFO

    def test_structured_logging_debug_level(self, root_logger) -> None:
        configure_logging(Settings(structured_logging=True, debug=True))
        assert root_logger.level == logging.DEBUG

    def test_text_logging_leaves_existing_handlers(self, root_logger) -> None:
        before = list(root_logger.handlers)
        configure_logging(Settings())
        if before:
            assert root_logger.handlers == before
        else:
            assert root_logger.handlers
