"""

Outcome of turning one layout node into an output markup fragment.

A result is one of:

* success: ``success`` is True and ``html`` holds the fragment (``bbox`` is
  optional);
* empty: the shared ``HTMLResult.EMPTY``, nothing to render but no error;
* failure: the shared ``HTMLResult.FAILURE``, or a result whose
  ``break_node`` tells the caller to resume layout at that node.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..models import BBox
from ..utils.cache import cached_class_attribute


@dataclass(frozen=True, slots=True)
class HTMLResult:
    success: bool
    html: Optional[Any] = None
    bbox: Optional[BBox] = None
    break_node: Optional[Any] = None

    @cached_class_attribute
    def FAILURE(cls) -> "HTMLResult":
        """Shared result for a node that cannot be rendered."""
        return cls(False, None, None, None)

    @cached_class_attribute
    def EMPTY(cls) -> "HTMLResult":
        """Shared result for a node with nothing to render."""
        return cls(True, None, None, None)

    @classmethod
    def succeeded(cls, html: Any, bbox: Optional[BBox] = None) -> "HTMLResult":
        return cls(True, html, bbox, None)

    @classmethod
    def break_at(cls, node: Any) -> "HTMLResult":
        """Failure asking the caller to restart layout at ``node``."""
        return cls(False, None, None, node)

    def is_break(self) -> bool:
        return self.break_node is not None
