"""Tests for logging setup."""

import logging
from logging.handlers import RotatingFileHandler

import structlog

from gofpatterns.config.schemas.logging_schema import LogDestination, LoggingConfig, LogLevel
from gofpatterns.infrastructure.logging.logger import get_logger, setup_logging


class TestLogging:
    """Test cases for setup_logging and get_logger."""

    def test_stderr_destination(self):
        setup_logging(LoggingConfig(level=LogLevel.DEBUG, destination=LogDestination.STDERR))

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], logging.StreamHandler)
        assert not isinstance(root.handlers[0], RotatingFileHandler)

    def test_file_destination_creates_directory(self, tmp_path):
        log_file = tmp_path / "nested" / "app.log"

        setup_logging(LoggingConfig(destination=LogDestination.FILE, file_path=str(log_file)))

        root = logging.getLogger()
        assert any(isinstance(h, RotatingFileHandler) for h in root.handlers)
        assert log_file.parent.is_dir()

    def test_both_destinations(self, tmp_path):
        setup_logging(
            LoggingConfig(destination=LogDestination.BOTH, file_path=str(tmp_path / "app.log"))
        )
        assert len(logging.getLogger().handlers) == 2

    def test_none_destination_installs_null_handler(self):
        setup_logging(LoggingConfig(destination=LogDestination.NONE))

        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0], logging.NullHandler)

    def test_logs_do_not_reach_stdout(self, capsys):
        setup_logging(LoggingConfig(level=LogLevel.DEBUG))

        get_logger("tests").info("hello", key="value")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "event='hello'" in captured.err
        assert "key='value'" in captured.err

    def test_get_logger_configures_structlog(self):
        structlog.reset_defaults()

        get_logger("tests")

        assert structlog.is_configured()
