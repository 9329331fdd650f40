"""
Logger for XFA attribute conversion.

Handles logger lookup, logging configuration and log levels.
"""

import logging
import sys
from typing import Optional

_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']

DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DEFAULT_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def resolve_level(level: str) -> int:
    if not isinstance(level, str) or level.upper() not in _LEVELS:
        raise ValueError(f"Invalid log level: {level}")
    return getattr(logging, level.upper())


def get_logger(name: str) -> logging.Logger:
    """
    Get logger instance for module.

    Args:
        name: Logger name

    Returns:
        Logger instance
    """
    if not name or not isinstance(name, str):
        raise ValueError("Logger name must be a non-empty string")

    logger = logging.getLogger(name)

    # Set default level if not configured
    if not logger.handlers:
        logger.setLevel(logging.INFO)

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.INFO)
        console_handler.setFormatter(
            logging.Formatter(DEFAULT_FORMAT, datefmt=DEFAULT_DATE_FORMAT)
        )
        logger.addHandler(console_handler)

    return logger


def configure_logging(level: str = "INFO", format_string: Optional[str] = None) -> None:
    """
    Configure root logging with a single console handler.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom format string
    """
    level_value = resolve_level(level)

    root_logger = logging.getLogger()
    root_logger.setLevel(level_value)
    root_logger.handlers.clear()

    formatter = logging.Formatter(format_string or DEFAULT_FORMAT, datefmt=DEFAULT_DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level_value)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)


def set_log_level(level: str) -> None:
    """
    Set log level on the root logger and all of its handlers.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    level_value = resolve_level(level)

    root_logger = logging.getLogger()
    root_logger.setLevel(level_value)
    for handler in root_logger.handlers:
        handler.setLevel(level_value)
