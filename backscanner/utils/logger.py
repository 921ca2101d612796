"""Logging utility.

The package logs to the ``backscanner`` logger and stays silent by default.
Call init_app_logger() to send its records to the console or a file.
"""

import logging
import os
from typing import Optional


APP_LOGGER_NAME = "backscanner"


def setup_logger(
    name: str,
    log_level: str = "WARNING",
    log_file: Optional[str] = None
) -> logging.Logger:
    """
    Set up a logger with console and optional file output.

    Args:
        name: Logger name
        log_level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to log file

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    level = getattr(logging, log_level.upper(), logging.WARNING)
    logger.setLevel(level)

    # Prevent duplicate handlers; the NullHandler from get_app_logger() does not count
    if any(not isinstance(h, logging.NullHandler) for h in logger.handlers):
        return logger

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir, exist_ok=True)

        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


# Package logger, set once init_app_logger() has configured output
app_logger: Optional[logging.Logger] = None


def init_app_logger(settings) -> logging.Logger:
    """
    Send package log records to the console and the configured log file.

    Args:
        settings: Settings instance providing log_level and log_file

    Returns:
        Configured package logger
    """
    global app_logger

    app_logger = setup_logger(
        name=APP_LOGGER_NAME,
        log_level=settings.log_level,
        log_file=settings.log_file
    )

    return app_logger


def get_app_logger() -> logging.Logger:
    """
    Get the package logger.

    Before init_app_logger() is called the logger only has a NullHandler,
    so records reach the application's own handlers and nothing else.
    """
    if app_logger is not None:
        return app_logger

    logger = logging.getLogger(APP_LOGGER_NAME)
    if not logger.handlers:
        logger.addHandler(logging.NullHandler())
    return logger
