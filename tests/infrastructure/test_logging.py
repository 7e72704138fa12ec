"""Tests for centralized logging."""

import json
import logging
import pytest
from incident_tracker.infrastructure.logging import (
    DEBUG_DATEFMT,
    DEBUG_FORMAT,
    JSONFormatter,
    LOGGER_NAME,
    configure_logging,
    debug,
    debug_enabled,
    enable_debug,
    format_value,
)


class TestConfigureLogging:
    def test_package_logger_has_own_level(self):
        logger = logging.getLogger(LOGGER_NAME)
        assert logger.level == logging.WARNING

    def test_root_debug_not_inherited(self):
        root = logging.getLogger()
        previous = root.level
        root.setLevel(logging.DEBUG)
        try:
            assert not debug_enabled()
        finally:
            root.setLevel(previous)

    def test_default_level(self):
        configure_logging()
        logger = logging.getLogger(LOGGER_NAME)
        assert logger.level == logging.WARNING
        assert not debug_enabled()

    def test_debug_level(self):
        configure_logging(level=logging.DEBUG)
        assert debug_enabled()

    def test_json_format(self):
        configure_logging(level=logging.INFO, json_format=True)
        logger = logging.getLogger(LOGGER_NAME)
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, JSONFormatter)

    def test_human_format(self):
        configure_logging(level=logging.INFO, json_format=False)
        logger = logging.getLogger(LOGGER_NAME)
        assert len(logger.handlers) == 1
        assert not isinstance(logger.handlers[0].formatter, JSONFormatter)

    def test_replaces_handlers(self):
        configure_logging(level=logging.INFO)
        configure_logging(level=logging.DEBUG)
        logger = logging.getLogger(LOGGER_NAME)
        assert len(logger.handlers) == 1

    def test_enable_debug_keeps_json(self):
        configure_logging(level=logging.INFO, json_format=True)
        enable_debug()
        logger = logging.getLogger(LOGGER_NAME)
        assert debug_enabled()
        assert isinstance(logger.handlers[0].formatter, JSONFormatter)


class TestDebugFormat:
    def test_timestamp_function_and_line(self):
        formatter = logging.Formatter(DEBUG_FORMAT, DEBUG_DATEFMT)
        record = logging.LogRecord(
            name=LOGGER_NAME,
            level=logging.DEBUG,
            pathname="tracker.py",
            lineno=42,
            msg="Running: escalation.pl -check",
            args=(),
            exc_info=None,
            func="get_status",
        )
        output = formatter.format(record)
        assert output.startswith("[")
        assert output.endswith("] get_status(42) > Running: escalation.pl -check")


class TestFormatValue:
    def test_scalar_trailing_newlines_trimmed(self):
        assert format_value("line\n\n") == "line"

    def test_inner_newlines_kept(self):
        assert format_value("a\nb\n") == "a\nb"

    def test_none(self):
        assert format_value(None) == ""

    def test_number(self):
        assert format_value(3) == "3"

    def test_mapping_pretty_printed(self):
        assert format_value({"b": 1, "a": 2}) == "{'a': 2, 'b': 1}"


class TestDebugHelper:
    def test_noop_when_disabled(self, caplog):
        logger = logging.getLogger(LOGGER_NAME)
        logger.setLevel(logging.WARNING)
        debug(logger, "hidden")
        assert not caplog.records

    def test_attributed_to_caller(self, caplog):
        logger = logging.getLogger(LOGGER_NAME)
        with caplog.at_level(logging.DEBUG, logger=LOGGER_NAME):
            debug(logger, "Unexpected error:", "ERROR: boom\n")
        record = caplog.records[-1]
        assert record.getMessage() == "Unexpected error:\nERROR: boom"
        assert record.funcName == "test_attributed_to_caller"

    def test_no_values(self, caplog):
        logger = logging.getLogger(LOGGER_NAME)
        with caplog.at_level(logging.DEBUG, logger=LOGGER_NAME):
            debug(logger)
        assert not caplog.records


class TestJSONFormatter:
    def test_format_basic(self):
        formatter = JSONFormatter()
        record = logging.LogRecord(
            name="test",
            level=logging.INFO,
            pathname="test.py",
            lineno=1,
            msg="hello world",
            args=(),
            exc_info=None,
        )
        output = formatter.format(record)
        data = json.loads(output)
        assert data["message"] == "hello world"
        assert data["level"] == "INFO"
        assert data["logger"] == "test"
        assert data["line"] == 1
        assert "timestamp" in data

    def test_format_with_exception(self):
        formatter = JSONFormatter()
        try:
            raise ValueError("test error")
        except ValueError:
            import sys
            exc_info = sys.exc_info()

        record = logging.LogRecord(
            name="test",
            level=logging.ERROR,
            pathname="test.py",
            lineno=1,
            msg="error occurred",
            args=(),
            exc_info=exc_info,
        )
        output = formatter.format(record)
        data = json.loads(output)
        assert "exception" in data
        assert "ValueError" in data["exception"]
