"""
Tests for logging configuration.
"""

import logging
from logging.handlers import RotatingFileHandler

import pytest
from rich.logging import RichHandler

from html_exporter.utils.logger import configure_logging, get_logger, set_log_level


class TestLogger:
    """Test cases for logger utilities."""

    def test_get_logger(self):
        assert get_logger("html_exporter.test").name == "html_exporter.test"

    def test_get_logger_requires_name(self):
        with pytest.raises(ValueError):
            get_logger("")

    def test_configure_logging_uses_rich(self):
        configure_logging("DEBUG")

        root_logger = logging.getLogger()
        assert root_logger.level == logging.DEBUG
        assert len(root_logger.handlers) == 1
        assert isinstance(root_logger.handlers[0], RichHandler)

    def test_configure_logging_plain(self):
        configure_logging("INFO", use_rich=False)

        handler = logging.getLogger().handlers[0]
        assert isinstance(handler, logging.StreamHandler)
        assert not isinstance(handler, RichHandler)

    def test_configure_logging_with_file(self, tmp_path):
        log_file = tmp_path / "logs" / "exporter.log"

        configure_logging("INFO", log_file=str(log_file))
        logging.getLogger("html_exporter").info("hello")

        handlers = logging.getLogger().handlers
        assert any(isinstance(handler, RotatingFileHandler) for handler in handlers)
        for handler in handlers:
            handler.flush()
        assert "hello" in log_file.read_text()

    def test_invalid_level(self):
        with pytest.raises(ValueError):
            configure_logging("LOUD")

    def test_set_log_level(self):
        configure_logging("INFO")

        set_log_level("ERROR")

        root_logger = logging.getLogger()
        assert root_logger.level == logging.ERROR
        assert all(handler.level == logging.ERROR for handler in root_logger.handlers)
