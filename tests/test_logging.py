"""Tests for logging helpers."""

import pytest
import structlog
from structlog.testing import capture_logs

from calshift.logging import configure_logging, get_logger, timed_block


class TestLogging:
    """Test configure_logging and timed_block."""

    def test_configure_logging_console(self):
        try:
            configure_logging(level="debug")
            assert structlog.is_configured()
        finally:
            structlog.reset_defaults()

    def test_configure_logging_json(self, capsys):
        try:
            configure_logging(level="INFO", json_output=True)
            get_logger("test").info("hello", answer=42)
            out = capsys.readouterr().out
            assert '"event": "hello"' in out
            assert '"answer": 42' in out
        finally:
            structlog.reset_defaults()

    def test_timed_block(self):
        log = get_logger("test")
        with capture_logs() as logs:
            with timed_block(log, "work", level="info", rows=3):
                pass
        assert logs[0]["event"] == "work"
        assert logs[0]["log_level"] == "info"
        assert logs[0]["rows"] == 3
        assert logs[0]["elapsed_ms"] >= 0

    def test_unknown_level(self):
        with pytest.raises(ValueError, match="Unknown log level"):
            configure_logging(level="chatty")

    def test_timed_block_records_error(self):
        log = get_logger("test")
        with capture_logs() as logs:
            with pytest.raises(KeyError):
                with timed_block(log, "work", rows=3):
                    raise KeyError("rows")
        assert logs[0]["event"] == "work"
        assert logs[0]["error"] == "KeyError"
        assert logs[0]["rows"] == 3

    def test_timed_block_no_error_field_on_success(self):
        with capture_logs() as logs:
            with timed_block(get_logger("test"), "work"):
                pass
        assert "error" not in logs[0]
