"""Tests for logger utility."""

import logging
import os
import pytest

from backscanner.config import Settings
from backscanner.errors import BufferSizeExceeded
from backscanner.models.options import ScannerOptions
from backscanner.scanner import BackScanner
from backscanner.utils import logger as logger_module
from backscanner.utils.logger import APP_LOGGER_NAME, get_app_logger, init_app_logger, setup_logger


@pytest.fixture
def fresh_app_logger(monkeypatch):
    """Reset the package logger to its unconfigured state."""
    monkeypatch.setattr(logger_module, "app_logger", None)
    logger = logging.getLogger(APP_LOGGER_NAME)
    saved_handlers = list(logger.handlers)
    saved_level = logger.level
    for handler in saved_handlers:
        logger.removeHandler(handler)
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        if not isinstance(handler, logging.NullHandler):
            handler.close()
    for handler in saved_handlers:
        logger.addHandler(handler)
    logger.setLevel(saved_level)


class TestSetupLogger:
    """SUT: setup_logger"""

    def test_returns_logger(self):
        """Should return a Logger instance."""
        logger = setup_logger("test_logger_returns")
        assert isinstance(logger, logging.Logger)

    def test_with_level(self):
        """Setting DEBUG level should take effect."""
        logger = setup_logger("test_logger_level", log_level="DEBUG")
        assert logger.level == logging.DEBUG

    def test_unknown_level(self):
        """Unknown level names fall back to WARNING."""
        logger = setup_logger("test_logger_unknown", log_level="LOUD")
        assert logger.level == logging.WARNING

    def test_no_duplicate_handlers(self):
        """Calling multiple times should not add duplicate handlers."""
        name = "test_logger_dup"
        logger1 = setup_logger(name)
        handler_count = len(logger1.handlers)
        logger2 = setup_logger(name)
        assert len(logger2.handlers) == handler_count
        assert logger1 is logger2

    def test_log_file(self, test_dir):
        """A file handler is added and its directory created."""
        log_file = os.path.join(test_dir, "logs", "scan.log")
        logger = setup_logger("test_logger_file", log_file=log_file)
        assert len(logger.handlers) == 2
        assert os.path.exists(log_file)
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)


class TestAppLogger:
    """SUT: init_app_logger / get_app_logger"""

    def test_silent_by_default(self, fresh_app_logger):
        """Without init_app_logger only a NullHandler is attached."""
        logger = get_app_logger()
        assert logger is fresh_app_logger
        assert logger.handlers
        assert all(isinstance(h, logging.NullHandler) for h in logger.handlers)

    def test_scanner_adds_no_output_handler(self, fresh_app_logger):
        """Using a scanner and catching its errors writes nothing to the console."""
        scanner = BackScanner(b"x" * 20, 20, ScannerOptions(chunk_size=5, max_buffer_size=10))
        with pytest.raises(BufferSizeExceeded):
            scanner.line()
        assert not any(
            isinstance(h, logging.StreamHandler) and not isinstance(h, logging.NullHandler)
            for h in fresh_app_logger.handlers
        )

    def test_init_from_settings(self, fresh_app_logger):
        """The package logger uses the configured level and gets a console handler."""
        get_app_logger()
        logger = init_app_logger(Settings(_env_file=None, log_level="ERROR"))
        assert logger is fresh_app_logger
        assert logger.level == logging.ERROR
        assert any(type(h) is logging.StreamHandler for h in logger.handlers)
        assert get_app_logger() is logger
