"""Layout engine value types."""

from .html_result import HTMLResult

__all__ = ["HTMLResult"]
