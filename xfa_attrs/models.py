"""

Typed values produced by the composite attribute converters.

All types are immutable; converters build a fresh instance per call.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True, slots=True)
class Ratio:
    """Aspect ratio read from a ``num:den`` attribute."""

    num: float
    den: float

    @property
    def value(self) -> Optional[float]:
        if self.den == 0:
            return None
        return self.num / self.den


@dataclass(frozen=True, slots=True)
class Color:
    """RGB color with integer channels in the 0-255 range."""

    r: int
    g: int
    b: int

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def to_hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    def to_css(self) -> str:
        return f"rgb({self.r}, {self.g}, {self.b})"


UNSET = -1


@dataclass(frozen=True, slots=True)
class BBox:
    """

    Bounding box in points.

    The all ``-1`` box is the sentinel for "no bounding box given".

    """

    x: float
    y: float
    width: float
    height: float

    @classmethod
    def unset(cls) -> "BBox":
        return cls(UNSET, UNSET, UNSET, UNSET)

    @property
    def is_set(self) -> bool:
        return self != BBox.unset()

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.x, self.y, self.width, self.height)


@dataclass(frozen=True, slots=True)
class RelevantEntry:
    """Single token of a ``relevant`` list, e.g. ``-print`` or ``screen``."""

    excluded: bool
    viewname: str

    def matches(self, view: str) -> bool:
        """True when this entry lets content show up in ``view``."""
        return (self.viewname == view) != self.excluded
