"""
Composite attribute converters.

Ratios, colors, bounding boxes and relevance lists are written as delimited
lists in XFA templates; each converter splits the text and builds the matching
value type from :mod:`xfa_attrs.models`.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from ..models import BBox, Color, Ratio, RelevantEntry, UNSET
from ..utils.cache import clamp
from .measurement import get_measurement
from .scalars import parse_leading_float, parse_leading_int

logger = logging.getLogger(__name__)


def get_ratio(data: Optional[str]) -> Ratio:
    """Parse ``"num:den"``; a lone number gets denominator 1."""
    if not data:
        return Ratio(1, 1)
    parts = [parse_leading_float(part) for part in data.split(":")[:2]]
    ratio = [part for part in parts if part is not None]
    if len(ratio) == 1:
        ratio.append(1)
    if not ratio:
        logger.debug(f"Ratio {data!r} unparsable, using 1:1")
        return Ratio(1, 1)
    return Ratio(ratio[0], ratio[1])


def get_color(data: Optional[str], default: Sequence[int] = (0, 0, 0)) -> Color:
    """
    Parse an ``"r,g,b"`` color.

    Channels are clamped to 0-255 and non-numeric channels become 0. With
    fewer than three channels the default color is returned.
    """
    r, g, b = default
    if not data:
        return Color(r, g, b)

    color = []
    for part in data.split(",")[:3]:
        channel = parse_leading_int(part)
        color.append(0 if channel is None else clamp(channel, 0, 255))

    if len(color) < 3:
        logger.debug(f"Color {data!r} has fewer than 3 channels, using default")
        return Color(r, g, b)
    return Color(*color)


def get_bbox(data: Optional[str]) -> BBox:
    """Parse ``"x,y,width,height"`` lengths; invalid input gives the unset box."""
    if not data:
        return BBox.unset()
    bbox = [get_measurement(part.strip(), str(UNSET)) for part in data.split(",")[:4]]
    if len(bbox) < 4 or bbox[2] < 0 or bbox[3] < 0:
        logger.debug(f"Bounding box {data!r} invalid, using unset box")
        return BBox.unset()
    return BBox(*bbox)


def get_relevant(data: Optional[str]) -> List[RelevantEntry]:
    """Split a ``relevant`` attribute such as ``"-print screen"`` into entries."""
    if not data:
        return []
    entries = []
    for token in data.split():
        excluded = token.startswith("-")
        entries.append(RelevantEntry(excluded=excluded, viewname=token[1:] if excluded else token))
    return entries
