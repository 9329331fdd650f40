"""
xfa_attrs - typed values from XFA template attributes.

Converts raw attribute text into integers, keywords, lengths in points,
ratios, colors, bounding boxes and relevance lists, and defines the
HTMLResult returned by layout code.
"""

from .converters import (
    strip_quotes,
    get_integer,
    get_float,
    get_keyword,
    get_string_option,
    get_measurement,
    convert_to_points,
    get_ratio,
    get_color,
    get_bbox,
    get_relevant,
)
from .engine import HTMLResult
from .models import BBox, Color, Ratio, RelevantEntry
from .utils import MeasurementUnit

__version__ = "0.1.0"

__all__ = [
    "strip_quotes",
    "get_integer",
    "get_float",
    "get_keyword",
    "get_string_option",
    "get_measurement",
    "convert_to_points",
    "get_ratio",
    "get_color",
    "get_bbox",
    "get_relevant",
    "HTMLResult",
    "BBox",
    "Color",
    "Ratio",
    "RelevantEntry",
    "MeasurementUnit",
]
