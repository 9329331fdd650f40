"""
Measurement converter for XFA length attributes.

Lengths such as ``"2.54cm"`` or ``"1in"`` are normalized to points
(1/72 inch).
"""

from __future__ import annotations

import logging
import math
import re
from typing import Callable, Dict, Optional, Union

from ..utils.enums import MeasurementUnit

logger = logging.getLogger(__name__)

DIM_CONVERTERS: Dict[str, Callable[[float], float]] = {
    MeasurementUnit.PT.value: lambda x: x,
    MeasurementUnit.CM.value: lambda x: (x / 2.54) * 72,
    MeasurementUnit.MM.value: lambda x: (x / (10 * 2.54)) * 72,
    MeasurementUnit.IN.value: lambda x: x * 72,
    MeasurementUnit.PX.value: lambda x: x,
}

# Number followed by whatever unit text trails it.
MEASUREMENT_PATTERN = re.compile(r"([+-]?\d+\.?\d*)(.*)", re.ASCII)

FLOOR_DEFAULT = "0"


def convert_to_points(value: float, unit: Union[str, MeasurementUnit, None]) -> float:
    """
    Convert a numeric length in ``unit`` to points.

    The unit is looked up as written, so ``" in"`` is not ``"in"``.
    Unknown or missing units leave the value unchanged.
    """
    if isinstance(unit, MeasurementUnit):
        unit = unit.value
    converter = DIM_CONVERTERS.get(unit or "")
    if converter is None:
        return value
    return converter(value)


def _parse(text: Optional[str]) -> Optional[float]:
    if not text:
        return None
    match = MEASUREMENT_PATTERN.search(text.strip())
    if not match:
        return None
    value_str, unit = match.groups()
    value = float(value_str)
    if not math.isfinite(value):
        return None
    if value == 0:
        return 0
    return convert_to_points(value, unit)


def get_measurement(value: Optional[str], default: Optional[str] = FLOOR_DEFAULT) -> float:
    """
    Convert a length attribute to points.

    Args:
        value: Raw attribute text, e.g. ``"10mm"``
        default: Length text used when value is missing or unparsable;
            falls back to ``"0"`` itself

    Returns:
        Length in points
    """
    default = default or FLOOR_DEFAULT
    for candidate in (value, default):
        result = _parse(candidate)
        if result is not None:
            return result
        logger.debug(f"Measurement {candidate!r} unparsable, trying next default")
    # Floor default "0"
    return 0
