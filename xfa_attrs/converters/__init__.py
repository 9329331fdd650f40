"""
Converters from raw XFA attribute text to typed values.

Every converter accepts the attribute text or None and degrades to a default
instead of raising.
"""

from .scalars import (
    strip_quotes,
    get_integer,
    get_float,
    get_keyword,
    get_string_option,
)
from .measurement import DIM_CONVERTERS, MEASUREMENT_PATTERN, convert_to_points, get_measurement
from .composite import get_ratio, get_color, get_bbox, get_relevant

__all__ = [
    "strip_quotes",
    "get_integer",
    "get_float",
    "get_keyword",
    "get_string_option",
    "DIM_CONVERTERS",
    "MEASUREMENT_PATTERN",
    "convert_to_points",
    "get_measurement",
    "get_ratio",
    "get_color",
    "get_bbox",
    "get_relevant",
]
