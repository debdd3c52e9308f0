"""URI referable: a managed target holding a single URI."""

from typing import Literal

from pydantic import BaseModel, Field

URI_REFERABLE_TYPE = "Skyline::ReferableUri"


class UriReferable(BaseModel):
    """Target of a link or image that points at an arbitrary URI.

    Exclusively owned by the reference record that points at it.
    """

    id: int | None = Field(default=None, description="Identity, None until first save")
    type: Literal["Skyline::ReferableUri"] = URI_REFERABLE_TYPE
    uri: str | None = Field(default=None, description="Target URI as written in the markup")

    @property
    def is_new(self) -> bool:
        return self.id is None

    def identity(self) -> tuple[str, int | None]:
        return (self.type, self.id)
