"""Reference record: a typed pointer from a content field to a referable."""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..referable.UriReferable import UriReferable
from ._render import end_markup, start_markup
from .OwnerRef import OwnerRef
from .RefKind import RefKind


class ReferenceRecord(BaseModel):
    """A link or image reference, tagged by `kind`.

    `referable` is the loaded managed target (None for external referable
    types). `previous_referable` is a detached snapshot taken by `retarget`
    and consumed by `ReferenceStore.after_save`; neither is persisted.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: int | None = None
    kind: RefKind
    referable_id: int | None = None
    referable_type: str | None = None
    options: dict[str, str] = Field(default_factory=dict)
    owner: OwnerRef | None = None
    referable: UriReferable | None = Field(default=None, exclude=True)
    previous_referable: UriReferable | None = Field(default=None, exclude=True)

    @field_validator("referable_id", "referable_type", mode="before")
    @classmethod
    def _blank_is_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @property
    def is_new(self) -> bool:
        return self.id is None

    @property
    def target_uri(self) -> str | None:
        if self.referable is None:
            return None
        return self.referable.uri

    def retarget(
        self,
        referable_id: int | str | None,
        referable_type: str | None,
        options: Mapping[str, str],
        owner: OwnerRef | None,
    ) -> None:
        """Point the record at a new referable, attribute set and owner.

        The current referable is snapshotted first so a later save can tell
        whether it was replaced. A second call keeps the first snapshot.
        """
        if self.previous_referable is None and self.referable is not None:
            self.previous_referable = self.referable.model_copy(deep=True)
        self.referable_id = referable_id  # type: ignore[assignment]
        self.referable_type = referable_type
        self.options = dict(options)
        self.owner = owner

    def start_markup(self, include_editor_markers: bool = False, options: Mapping[str, Any] | None = None) -> str:
        return start_markup(self, include_editor_markers, options)

    def end_markup(self) -> str:
        return end_markup(self)
