"""Tests for structured logging configuration."""

import json
import logging
import logging.handlers

import structlog

from cli.logging_config import _redact_sensitive, redact, setup_logging


class TestLoggingConfig:
    """Test structlog setup modes."""

    def test_console_mode(self, capsys):
        """Console mode uses dev renderer."""
        setup_logging(json_mode=False, level="DEBUG")
        logger = structlog.get_logger()
        logger.info("test_message", key="value")
        captured = capsys.readouterr()
        assert "test_message" in captured.err

    def test_json_mode(self, capsys):
        """JSON mode produces parseable JSON."""
        setup_logging(json_mode=True, level="DEBUG")
        stdlib_logger = logging.getLogger("test_json")
        stdlib_logger.info("json test")
        line = capsys.readouterr().err.strip().splitlines()[-1]
        assert json.loads(line)["event"] == "json test"

    def test_level_filtering(self):
        """Log level filters lower messages."""
        setup_logging(json_mode=False, level="WARNING")
        root = logging.getLogger()
        assert root.level == logging.WARNING

    def test_processor_chain(self):
        setup_logging(json_mode=True, level="DEBUG")
        config = structlog.get_config()
        assert _redact_sensitive in config["processors"]

    def test_default_level_is_warning(self):
        setup_logging()
        root = logging.getLogger()
        assert root.level == logging.WARNING

    def test_log_file_receives_debug(self, tmp_path):
        log_file = tmp_path / "logs" / "mindlog.log"
        setup_logging(level="ERROR", log_file=log_file)

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        file_handlers = [
            h for h in root.handlers if isinstance(h, logging.handlers.RotatingFileHandler)
        ]
        assert len(file_handlers) == 1
        assert log_file.parent.exists()

        logging.getLogger("test_file").debug("to file only")
        file_handlers[0].flush()
        assert "to file only" in log_file.read_text()


class TestRedaction:
    def test_redacts_anthropic_key(self):
        out = redact("key sk-ant-REDACTED")
        assert "abcdefghijklmnop" not in out
        assert "REDACTED" in out

    def test_redacts_google_key(self):
        out = redact("AIzaSyA1234567890abcdefghijklmnop")
        assert "1234567890abcdefghijklmnop" not in out

    def test_redacts_email(self):
        assert redact("contact me@example.com") == "contact REDACTED@email"

    def test_processor_only_touches_strings(self):
        event = {"event": "api_key=abcdefghijkl", "count": 3}
        out = _redact_sensitive(None, None, event)
        assert out["event"] == "api_key=REDACTED"
        assert out["count"] == 3
