"""
Rich logging for XFA attribute conversion.

Provides colorful console logging using the rich library.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

from .logger import DEFAULT_DATE_FORMAT, DEFAULT_FORMAT, resolve_level


def setup_logging(level: str = "INFO", use_rich: bool = True) -> None:
    """
    Setup logging for the application.

    Args:
        level: Log level
        use_rich: Whether to use rich logging
    """
    level_value = resolve_level(level)

    if use_rich:
        console = Console(stderr=True)
        rich_handler = RichHandler(
            console=console,
            show_time=True,
            show_path=True,
            markup=False,
            rich_tracebacks=True
        )
        rich_handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))

        root_logger = logging.getLogger()
        root_logger.setLevel(level_value)
        root_logger.handlers.clear()
        root_logger.addHandler(rich_handler)
    else:
        logging.basicConfig(
            level=level_value,
            format=DEFAULT_FORMAT,
            datefmt=DEFAULT_DATE_FORMAT,
            force=True
        )

    logging.getLogger(__name__).debug(f"Logging initialized at {level.upper()} level (rich={use_rich})")
