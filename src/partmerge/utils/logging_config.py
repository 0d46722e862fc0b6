"""
Logging Configuration Module

This module provides centralized logging configuration for partmerge.
Console logs go to stderr through rich so they never mix with the merge
plan on stdout; an optional rotating file log keeps detailed records.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

# Default logging configuration
DEFAULT_LOG_LEVEL = logging.WARNING
DETAILED_LOG_FORMAT = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "%(filename)s:%(lineno)d - %(funcName)s - %(message)s"
)
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# File rotation settings
DEFAULT_MAX_BYTES = 10 * 1024 * 1024  # 10 MB
DEFAULT_BACKUP_COUNT = 5

ROOT_LOGGER_NAME = "partmerge"


def setup_logging(
    log_level: int | str = DEFAULT_LOG_LEVEL,
    log_file: Path | None = None,
    *,
    console_output: bool = True,
    max_bytes: int = DEFAULT_MAX_BYTES,
    backup_count: int = DEFAULT_BACKUP_COUNT,
) -> logging.Logger:
    """
    Set up logging for the partmerge package.

    Args:
        log_level: Logging level as int or name ('DEBUG', 'INFO', ...)
        log_file: Optional file for detailed, rotated logs
        console_output: Whether to log to the console (stderr)
        max_bytes: Maximum size of log file before rotation
        backup_count: Number of backup files to keep

    Returns:
        Configured package logger
    """
    if isinstance(log_level, str):
        log_level = getattr(logging, log_level.upper(), DEFAULT_LOG_LEVEL)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(log_level)
    cleanup_logging(logger)

    if console_output:
        console_handler = RichHandler(
            console=Console(stderr=True),
            show_time=False,
            show_path=False,
            markup=False,
            rich_tracebacks=True,
        )
        console_handler.setLevel(log_level)
        logger.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        # File always gets everything from DEBUG up
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter(DETAILED_LOG_FORMAT, DEFAULT_DATE_FORMAT),
        )
        logger.addHandler(file_handler)
        logger.setLevel(logging.DEBUG)

    logger.propagate = False
    return logger


def cleanup_logging(logger: logging.Logger | None = None) -> None:
    """
    Close and remove handlers and let records propagate again.

    Args:
        logger: Specific logger to clean up (defaults to the package logger)
    """
    if logger is None:
        logger = logging.getLogger(ROOT_LOGGER_NAME)

    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)
    logger.propagate = True
