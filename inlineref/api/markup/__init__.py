"""Markup node model."""

from .MarkupDocument import MarkupDocument
from .MarkupNode import MarkupNode

__all__ = ["MarkupDocument", "MarkupNode"]
