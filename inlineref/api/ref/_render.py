"""Per-kind rendering contract for reference records."""

from __future__ import annotations

import html
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any

from ._grammar import REF_ID_MARKER, REFERABLE_ID_MARKER, REFERABLE_TYPE_MARKER
from .RefKind import RefKind

if TYPE_CHECKING:
    from .ReferenceRecord import ReferenceRecord


def _attributes(pairs: list[tuple[str, str]]) -> str:
    return "".join(f' {name}="{html.escape(value, quote=True)}"' for name, value in pairs)


def _attribute_pairs(
    record: ReferenceRecord,
    target_attribute: str,
    include_editor_markers: bool,
    options: Mapping[str, Any],
) -> list[tuple[str, str]]:
    pairs: list[tuple[str, str]] = []
    target = record.target_uri
    if target is not None and not options.get("nullify", False):
        pairs.append((target_attribute, target))
    pairs.extend((name, value) for name, value in record.options.items() if name != target_attribute)
    if include_editor_markers:
        pairs.append((REF_ID_MARKER, str(record.id)))
        if record.referable_id is not None:
            pairs.append((REFERABLE_ID_MARKER, str(record.referable_id)))
        if record.referable_type:
            pairs.append((REFERABLE_TYPE_MARKER, record.referable_type))
    return pairs


def _link_start(record: ReferenceRecord, include_editor_markers: bool, options: Mapping[str, Any]) -> str:
    return f"<a{_attributes(_attribute_pairs(record, 'href', include_editor_markers, options))}>"


def _image_start(record: ReferenceRecord, include_editor_markers: bool, options: Mapping[str, Any]) -> str:
    return f"<img{_attributes(_attribute_pairs(record, 'src', include_editor_markers, options))}/>"


_START: dict[RefKind, Callable[[ReferenceRecord, bool, Mapping[str, Any]], str]] = {
    RefKind.LINK: _link_start,
    RefKind.IMAGE: _image_start,
}

# Images are void elements: the open token carries the whole tag
_END: dict[RefKind, str] = {
    RefKind.LINK: "</a>",
    RefKind.IMAGE: "",
}


def start_markup(record: ReferenceRecord, include_editor_markers: bool = False, options: Mapping[str, Any] | None = None) -> str:
    return _START[record.kind](record, include_editor_markers, options or {})


def end_markup(record: ReferenceRecord) -> str:
    return _END[record.kind]
