"""
Scalar attribute converters.

Each converter takes the raw attribute text (or None) and returns either the
parsed value or the caller's default. None of them raise.
"""

from __future__ import annotations

import logging
import math
import re
from typing import Callable, Optional, Sequence

logger = logging.getLogger(__name__)

# Leading numeric literals; trailing text after the number is ignored.
INTEGER_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)
FLOAT_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def parse_leading_int(text: str) -> Optional[int]:
    """Read a base-10 integer at the start of ``text`` (``"12px"`` gives 12)."""
    match = INTEGER_PATTERN.match(text.strip())
    if not match:
        return None
    try:
        return int(match.group(0))
    except ValueError:
        # Digit run longer than the interpreter's int conversion limit.
        return None


def parse_leading_float(text: str) -> Optional[float]:
    """Read a finite decimal number at the start of ``text``."""
    match = FLOAT_PATTERN.match(text.strip())
    if not match:
        return None
    value = float(match.group(0))
    if not math.isfinite(value):
        return None
    return value


def _accept_all(_value) -> bool:
    return True


def strip_quotes(value: str) -> str:
    """
    Remove surrounding quotes from ``value``.

    Only the opening character is checked; the last character is dropped
    whatever it is.
    """
    if value.startswith("'") or value.startswith('"'):
        return value[1:-1]
    return value


def get_integer(data: Optional[str], default_value: int,
                validate: Optional[Callable[[int], bool]] = None) -> int:
    """
    Convert attribute text to an integer.

    Args:
        data: Raw attribute text
        default_value: Returned when data is missing, unparsable or rejected
        validate: Predicate the parsed value must satisfy

    Returns:
        Parsed integer or default_value
    """
    if not data:
        return default_value
    validate = validate or _accept_all
    value = parse_leading_int(data)
    if value is not None and validate(value):
        return value
    logger.debug(f"Integer {data!r} rejected, using default {default_value!r}")
    return default_value


def get_float(data: Optional[str], default_value: float,
              validate: Optional[Callable[[float], bool]] = None) -> float:
    """
    Convert attribute text to a float.

    Args:
        data: Raw attribute text
        default_value: Returned when data is missing, unparsable or rejected
        validate: Predicate the parsed value must satisfy

    Returns:
        Parsed float or default_value
    """
    if not data:
        return default_value
    validate = validate or _accept_all
    value = parse_leading_float(data)
    if value is not None and validate(value):
        return value
    logger.debug(f"Float {data!r} rejected, using default {default_value!r}")
    return default_value


def get_keyword(data: Optional[str], default_value: str,
                validate: Optional[Callable[[str], bool]] = None) -> str:
    """Return the trimmed keyword when validate accepts it, else default_value."""
    if not data:
        return default_value
    validate = validate or _accept_all
    keyword = data.strip()
    if validate(keyword):
        return keyword
    logger.debug(f"Keyword {keyword!r} not allowed, using default {default_value!r}")
    return default_value


def get_string_option(data: Optional[str], options: Sequence[str]) -> Optional[str]:
    """
    Return data if it is one of options, otherwise the first option.

    With no options there is no default to fall back to, so None is returned.
    """
    if not options:
        return None
    return get_keyword(data, options[0], lambda keyword: keyword in options)
