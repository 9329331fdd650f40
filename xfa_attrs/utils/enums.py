"""Common enumerations used across the XFA attribute converters."""

from __future__ import annotations

from enum import Enum


class MeasurementUnit(str, Enum):
    """Length units accepted in XFA measurement attributes."""

    PT = "pt"
    CM = "cm"
    MM = "mm"
    IN = "in"
    PX = "px"
