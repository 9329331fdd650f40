"""
Utils module for XFA attribute conversion.

Shared enumerations, compute-once helpers and logging setup.
"""

from .enums import MeasurementUnit
from .cache import cached_class_attribute, clamp
from .logger import get_logger, configure_logging, set_log_level
from .rich_logger import setup_logging

__all__ = [
    "MeasurementUnit",
    "cached_class_attribute",
    "clamp",
    "get_logger",
    "configure_logging",
    "set_log_level",
    "setup_logging",
]
