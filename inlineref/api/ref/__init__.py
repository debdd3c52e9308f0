"""Reference record domain."""

from ._grammar import (
    CLOSE_TOKEN_PATTERN,
    OPEN_TOKEN_PATTERN,
    REF_ID_MARKER,
    REFERABLE_ID_MARKER,
    REFERABLE_TYPE_MARKER,
    close_token,
    open_token,
)
from .OwnerRef import OwnerRef
from .ReferenceRecord import ReferenceRecord
from .ReferenceStore import ReferenceStore
from .RefKind import RefKind

__all__ = [
    "CLOSE_TOKEN_PATTERN",
    "OPEN_TOKEN_PATTERN",
    "REFERABLE_ID_MARKER",
    "REFERABLE_TYPE_MARKER",
    "REF_ID_MARKER",
    "OwnerRef",
    "RefKind",
    "ReferenceRecord",
    "ReferenceStore",
    "close_token",
    "open_token",
]
