"""Referable domain: persisted targets of reference records."""

from .ReferableStore import ReferableStore, is_managed
from .UriReferable import URI_REFERABLE_TYPE, UriReferable

__all__ = [
    "URI_REFERABLE_TYPE",
    "ReferableStore",
    "UriReferable",
    "is_managed",
]
