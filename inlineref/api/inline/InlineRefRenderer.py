"""Reference-token to HTML transform."""

from collections.abc import Mapping
from typing import Any

from ..ref._grammar import CLOSE_TOKEN_PATTERN, OPEN_TOKEN_PATTERN
from ..ref.OwnerRef import OwnerRef
from ..ref.ReferenceStore import ReferenceStore

DEFAULT_OPTIONS: dict[str, Any] = {"nullify": False}


class InlineRefRenderer:
    """Turn `[REF:id]` / `[/REF:id]` tokens back into markup.

    Tokens whose identity is not among the owner's records render as empty
    text; the surrounding text is kept verbatim.
    """

    def __init__(self, store: ReferenceStore):
        self.store = store

    def render(
        self,
        entity: Any,
        field_name: str,
        include_editor_markers: bool = False,
        options: Mapping[str, Any] | None = None,
    ) -> Any:
        """Render the tokens stored in `entity.<field_name>`.

        Returns the raw value unchanged when it is not text.
        """
        value = getattr(entity, field_name, None)
        if not isinstance(value, str):
            return value
        return self.render_text(value, OwnerRef.of(entity, field_name), include_editor_markers, options)

    def render_text(
        self,
        text: str,
        owner: OwnerRef | None,
        include_editor_markers: bool = False,
        options: Mapping[str, Any] | None = None,
    ) -> str:
        render_options = {**DEFAULT_OPTIONS, **(options or {})}
        # An unsaved owner has no records, so every token is dangling
        refs = self.store.records_by_id(owner) if owner is not None else {}

        def _start(match) -> str:
            record = refs.get(int(match.group(1)))
            return record.start_markup(include_editor_markers, render_options) if record else ""

        def _end(match) -> str:
            record = refs.get(int(match.group(1)))
            return record.end_markup() if record else ""

        opened = OPEN_TOKEN_PATTERN.sub(_start, text)
        return CLOSE_TOKEN_PATTERN.sub(_end, opened)
