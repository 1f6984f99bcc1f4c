#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for logging setup."""

import logging
from io import StringIO

import pytest

from norgfmt.logging_utils import configure_logging, resolve_log_level


@pytest.mark.unit
class TestResolveLogLevel:
    """Test level name resolution."""

    @pytest.mark.parametrize(
        "value,expected",
        [(logging.DEBUG, logging.DEBUG), ("warning", logging.WARNING), ("ERROR", logging.ERROR), ("bogus", logging.INFO)],
    )
    def test_resolve(self, value, expected):
        assert resolve_log_level(value) == expected


@pytest.mark.unit
class TestConfigureLogging:
    """Test the handlers installed on the root logger."""

    def test_plain_format(self):
        stream = StringIO()
        root = configure_logging("INFO", stream=stream)

        logging.getLogger("norgfmt.test").info("hello")
        logging.getLogger("norgfmt.test").debug("hidden")

        assert root is logging.getLogger()
        assert root.level == logging.INFO
        assert stream.getvalue() == "INFO: hello\n"

    def test_trace_format(self):
        stream = StringIO()
        configure_logging(logging.DEBUG, trace_mode=True, stream=stream)

        logging.getLogger("norgfmt.test").debug("timed")

        assert "[DEBUG] [norgfmt.test] timed" in stream.getvalue()
        assert stream.getvalue().startswith("[")

    def test_replaces_previous_handlers(self):
        first, second = StringIO(), StringIO()
        configure_logging("INFO", stream=first)
        configure_logging("INFO", stream=second)

        logging.getLogger("norgfmt.test").warning("once")

        assert first.getvalue() == ""
        assert second.getvalue() == "WARNING: once\n"

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "norgfmt.log"
        configure_logging("INFO", log_file=str(log_file), stream=StringIO())

        logging.getLogger("norgfmt.test").warning("to file")

        content = log_file.read_text(encoding="utf-8")
        assert f"INFO: Logging to file: {log_file}" in content
        assert "WARNING: to file" in content

    def test_unopenable_log_file(self, tmp_path):
        stream = StringIO()
        configure_logging("INFO", log_file=str(tmp_path / "missing" / "x.log"), stream=stream)

        assert "Could not open log file" in stream.getvalue()
