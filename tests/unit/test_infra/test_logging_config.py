"""Tests for logging configuration and the JSON formatter."""

from __future__ import annotations

import json
import logging
import sys

import pytest

from resource_acl.core.settings import LoggingSettings
from resource_acl.infra.logging import JSONFormatter, configure_logging, setup_logging
from resource_acl.infra.logging import config as logging_config


@pytest.fixture(autouse=True)
def restore_root_logger(monkeypatch):
    """Restore root handlers and level after each test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    monkeypatch.setattr(logging_config, "_LOGGING_INITIALIZED", False)
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.captureWarnings(False)


def _record(msg: str = "hello %s", args=("world",), **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="resource_acl.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=args,
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@pytest.mark.unit
class TestJSONFormatter:
    """Tests for JSONFormatter."""

    def test_default_keys(self):
        data = json.loads(JSONFormatter().format(_record()))

        assert data["level"] == "INFO"
        assert data["logger"] == "resource_acl.test"
        assert data["message"] == "hello world"
        assert data["timestamp"].endswith("Z")

    def test_static_and_extra_fields(self):
        formatter = JSONFormatter(static={"service": "resource-acl"})

        data = json.loads(formatter.format(_record(owner="alice")))

        assert data["service"] == "resource-acl"
        assert data["owner"] == "alice"

    def test_exception_on_one_line(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = _record()
            record.exc_info = sys.exc_info()

        output = JSONFormatter().format(record)

        assert "\n" not in output
        assert "ValueError: boom" in json.loads(output)["exception"]

    def test_custom_keys(self):
        formatter = JSONFormatter(fmt_keys={"msg": "message", "line": "lineno"})

        data = json.loads(formatter.format(_record()))

        assert data["msg"] == "hello world"
        assert data["line"] == 1
        assert "level" not in data


@pytest.mark.unit
class TestConfigureLogging:
    """Tests for configure_logging() and setup_logging()."""

    def test_text_console_handler(self, restore_root_logger):
        configure_logging(log_level="debug")

        assert restore_root_logger.level == logging.DEBUG
        assert len(restore_root_logger.handlers) == 1
        handler = restore_root_logger.handlers[0]
        assert isinstance(handler, logging.StreamHandler)
        assert not isinstance(handler.formatter, JSONFormatter)

    def test_json_handler(self, restore_root_logger):
        configure_logging(json_logs=True)

        assert isinstance(restore_root_logger.handlers[0].formatter, JSONFormatter)

    def test_console_disabled(self, restore_root_logger):
        configure_logging(console_enabled=False)

        assert restore_root_logger.handlers == []

    def test_function_name_in_text_format(self, restore_root_logger):
        configure_logging(include_function_name=True)

        assert "%(funcName)s" in restore_root_logger.handlers[0].formatter._fmt

    def test_setup_logging_runs_once(self, restore_root_logger):
        setup_logging(LoggingSettings(level="WARNING"))
        setup_logging(LoggingSettings(level="DEBUG"))

        assert restore_root_logger.level == logging.WARNING

    def test_setup_logging_force(self, restore_root_logger):
        setup_logging(LoggingSettings(level="WARNING"))
        setup_logging(LoggingSettings(level="WARNING"), force=True, log_level="ERROR")

        assert restore_root_logger.level == logging.ERROR

    def test_setup_logging_from_environment(self, monkeypatch, restore_root_logger):
        monkeypatch.setenv("LOG_LEVEL", "critical")
        monkeypatch.setenv("LOG_JSON_LOGS", "true")

        setup_logging()

        assert restore_root_logger.level == logging.CRITICAL
        assert isinstance(restore_root_logger.handlers[0].formatter, JSONFormatter)
