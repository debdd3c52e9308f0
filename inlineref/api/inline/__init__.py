"""Inline reference transforms: editor markup to tokens and back."""

from .._output_schemas.ref import RefRenderOutput, RefResolveOutput, RefShowOutput
from .InlineRefRenderer import InlineRefRenderer
from .InlineRefResolver import InlineRefResolver, ResolveResult

__all__ = [
    "InlineRefRenderer",
    "InlineRefResolver",
    "RefRenderOutput",
    "RefResolveOutput",
    "RefShowOutput",
    "ResolveResult",
]
