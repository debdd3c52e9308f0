"""Output schemas for reference commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema


class RefResolveOutput(BaseOutputSchema):
    """Output schema for ref resolve command."""

    owner: str = Field(..., description="Owner entity and field")
    text: str = Field(..., description="Normalized text with [REF:id] tokens, empty on error")
    touched: list[int] = Field(..., description="Reference identities present in the text")


class RefRenderOutput(BaseOutputSchema):
    """Output schema for ref render command."""

    owner: str = Field(..., description="Owner entity and field")
    html: str = Field(..., description="Rendered markup, empty on error")


class RefShowOutput(BaseOutputSchema):
    """Output schema for ref show command."""

    owner: str = Field(..., description="Owner entity and field")
    count: int = Field(..., description="Number of reference records")
    refs: list[dict[str, Any]] = Field(..., description="Reference records with their referables")
