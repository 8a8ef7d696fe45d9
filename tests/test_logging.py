"""Tests for textdates structured logging."""

import io
import json
import logging
import os
import subprocess
import sys
from datetime import date
from pathlib import Path

import pytest
import structlog

from textdates import parse
from textdates.logging import (
    PACKAGE_LOGGER,
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
    unbind_context,
)

SRC = Path(__file__).resolve().parents[1] / "src"


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo configure_logging after each test."""
    yield
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
    structlog.reset_defaults()
    clear_context()


def _events(stream: io.StringIO) -> list[dict]:
    return [json.loads(line) for line in stream.getvalue().splitlines()]


class TestConfigureLogging:
    """Tests for logging configuration."""

    def test_configure_with_defaults(self):
        """Should configure from settings when no arguments are given."""
        configure_logging(stream=io.StringIO())
        get_logger("textdates.test").info("test message")

    def test_configure_with_text_format(self):
        """Should accept text format for development."""
        stream = io.StringIO()
        configure_logging(level="INFO", format="text", stream=stream)
        get_logger("textdates.test").info("text format message")

        assert "text format message" in stream.getvalue()

    def test_configure_with_json_format(self):
        """Should render structlog events as JSON lines."""
        stream = io.StringIO()
        configure_logging(level="INFO", format="json", stream=stream)
        get_logger("textdates.test").info("json format message", count=3)

        [event] = _events(stream)
        assert event["event"] == "json format message"
        assert event["count"] == 3
        assert event["level"] == "info"

    def test_level_filters(self):
        """Events below the configured level are dropped."""
        stream = io.StringIO()
        configure_logging(level="WARNING", format="json", stream=stream)
        get_logger("textdates.test").info("hidden")

        assert stream.getvalue() == ""

    def test_unknown_level_falls_back_to_info(self):
        """An unknown level name should not raise."""
        configure_logging(level="chatty", stream=io.StringIO())
        assert logging.getLogger(PACKAGE_LOGGER).level == logging.INFO

    def test_root_logger_untouched(self):
        """Only the textdates logger gets a handler."""
        root = logging.getLogger()
        handlers, level = list(root.handlers), root.level

        configure_logging(level="DEBUG", format="json", stream=io.StringIO())

        assert root.handlers == handlers
        assert root.level == level
        assert logging.getLogger(PACKAGE_LOGGER).level == logging.DEBUG

    def test_reconfigure_replaces_handler(self):
        """Configuring twice leaves a single handler."""
        configure_logging(stream=io.StringIO())
        configure_logging(stream=io.StringIO())

        assert len(logging.getLogger(PACKAGE_LOGGER).handlers) == 1


class TestLibraryLogging:
    """Tests for the log events textdates emits."""

    def test_import_configures_nothing(self):
        """Importing and using the package leaves the host's logging alone."""
        code = (
            "import logging, textdates\n"
            "textdates.parse('tomorrow')\n"
            "root = logging.getLogger()\n"
            "print(root.level, len(root.handlers))\n"
        )
        env = dict(os.environ)
        env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(SRC), env.get("PYTHONPATH")]))

        result = subprocess.run(
            [sys.executable, "-c", code],
            capture_output=True,
            text=True,
            env=env,
            check=True,
        )

        assert result.stdout.split() == [str(logging.WARNING), "0"]
        assert result.stderr == ""

    def test_parse_event(self):
        """A parse call logs its token and match counts."""
        stream = io.StringIO()
        configure_logging(level="DEBUG", format="json", stream=stream)

        parse("see you tomorrow", date(2016, 7, 15), now=date(2020, 6, 15))

        [event] = [e for e in _events(stream) if e["event"] == "Parsed text for dates"]
        assert event["tokens"] == 3
        assert event["matches"] == 1
        assert event["reference_date"] == "2016-07-15"
        assert event["logger"] == "textdates.parser"

    def test_silent_below_debug(self):
        """Nothing is written at the default INFO level."""
        stream = io.StringIO()
        configure_logging(level="INFO", format="json", stream=stream)

        parse("see you tomorrow", now=date(2020, 6, 15))

        assert stream.getvalue() == ""


class TestGetLogger:
    """Tests for logger creation."""

    def test_get_logger_with_name(self):
        """Should create logger with specified name."""
        assert get_logger("textdates.engine") is not None

    def test_loggers_are_callable(self):
        """Should return callable logger instances."""
        logger = get_logger()
        assert callable(getattr(logger, "info", None))
        assert callable(getattr(logger, "debug", None))


class TestContextBinding:
    """Tests for context variable binding."""

    def setup_method(self):
        """Clear context before each test."""
        clear_context()

    def test_bound_context_in_parse_events(self):
        """Bound context is added to textdates events."""
        stream = io.StringIO()
        configure_logging(level="DEBUG", format="json", stream=stream)
        bind_context(message_id="msg_42")

        assert parse("tomorrow", date(2016, 7, 15), now=date(2020, 6, 15)) == [date(2016, 7, 16)]
        events = _events(stream)
        assert events
        assert all(event["message_id"] == "msg_42" for event in events)

    def test_unbind_specific_context(self):
        """Should unbind specific context keys."""
        stream = io.StringIO()
        configure_logging(level="INFO", format="json", stream=stream)
        bind_context(message_id="msg_42", temp="value")
        unbind_context("temp")
        get_logger("textdates.test").info("partial unbind")

        [event] = _events(stream)
        assert event["message_id"] == "msg_42"
        assert "temp" not in event
