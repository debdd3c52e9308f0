"""Public API for inline reference resolution."""

from .inline import InlineRefRenderer, InlineRefResolver, ResolveResult
from .ref import OwnerRef, ReferenceRecord, ReferenceStore, RefKind
from .referable import ReferableStore, UriReferable

__all__ = [
    "InlineRefRenderer",
    "InlineRefResolver",
    "OwnerRef",
    "RefKind",
    "ReferableStore",
    "ReferenceRecord",
    "ReferenceStore",
    "ResolveResult",
    "UriReferable",
]
