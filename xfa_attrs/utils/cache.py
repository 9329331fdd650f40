"""Compute-once helpers shared by the layout value types."""

from __future__ import annotations

from threading import RLock
from typing import Any, Callable, Optional


class cached_class_attribute:
    """
    Class attribute computed on first access and cached on the owner.

    The factory receives the owning class. After the first access the
    descriptor replaces itself with the computed value, so later lookups
    are plain attribute reads returning the same object.
    """

    def __init__(self, factory: Callable[[type], Any]) -> None:
        self.factory = factory
        self.owner: Optional[type] = None
        self.name: Optional[str] = None
        self.__doc__ = factory.__doc__
        self._lock = RLock()

    def __set_name__(self, owner: type, name: str) -> None:
        self.owner = owner
        self.name = name

    def __get__(self, instance: Any, owner: type) -> Any:
        with self._lock:
            current = self.owner.__dict__[self.name]
            if current is not self:
                # Another thread stored the value while we waited.
                return current
            value = self.factory(self.owner)
            setattr(self.owner, self.name, value)
            return value


def clamp(value: float, low: float, high: float) -> float:
    """Clamp value into [low, high]."""
    return min(max(value, low), high)
