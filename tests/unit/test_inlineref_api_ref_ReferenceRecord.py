"""Unit tests for inlineref.api.ref.ReferenceRecord (no database)."""

import pytest
from pydantic import ValidationError

from inlineref.api.ref import close_token, open_token
from inlineref.api.ref.OwnerRef import OwnerRef
from inlineref.api.ref.ReferenceRecord import ReferenceRecord
from inlineref.api.ref.RefKind import RefKind
from inlineref.api.referable.UriReferable import URI_REFERABLE_TYPE, UriReferable

OWNER = OwnerRef(entity_id=1, entity_type="Article", field_name="body")


def _link(**kwargs) -> ReferenceRecord:
    defaults = {
        "id": 5,
        "kind": RefKind.LINK,
        "referable_id": 9,
        "referable_type": URI_REFERABLE_TYPE,
        "options": {"class": "ext"},
        "owner": OWNER,
        "referable": UriReferable(id=9, uri="http://example.com"),
    }
    defaults.update(kwargs)
    return ReferenceRecord(**defaults)


def test_tokens():
    assert open_token(12) == "[REF:12]"
    assert close_token(12) == "[/REF:12]"


class TestFields:
    def test_kind_from_string(self):
        assert ReferenceRecord(kind="image").kind is RefKind.IMAGE

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValidationError):
            ReferenceRecord(kind="video")

    def test_blank_referable_fields_become_none(self):
        record = ReferenceRecord(kind=RefKind.LINK, referable_id="  ", referable_type="")
        assert record.referable_id is None
        assert record.referable_type is None

    def test_numeric_referable_id_string_is_coerced(self):
        record = ReferenceRecord(kind=RefKind.LINK)
        record.referable_id = "12"  # type: ignore[assignment]
        assert record.referable_id == 12

    def test_non_numeric_referable_id_rejected(self):
        record = ReferenceRecord(kind=RefKind.LINK)
        with pytest.raises(ValidationError):
            record.referable_id = "abc"  # type: ignore[assignment]

    def test_is_new(self):
        assert ReferenceRecord(kind=RefKind.LINK).is_new
        assert not _link().is_new

    def test_transient_fields_not_dumped(self):
        dumped = _link().model_dump()
        assert "referable" not in dumped
        assert "previous_referable" not in dumped


class TestRetarget:
    def test_snapshots_current_referable(self):
        record = _link()
        record.retarget("", "", {"title": "T"}, OWNER)

        assert record.previous_referable is not None
        assert record.previous_referable.identity() == (URI_REFERABLE_TYPE, 9)
        assert record.referable_id is None
        assert record.referable_type is None
        assert record.options == {"title": "T"}

    def test_snapshot_is_detached(self):
        record = _link()
        record.retarget(9, URI_REFERABLE_TYPE, {}, OWNER)
        record.referable.uri = "http://changed.example"  # type: ignore[union-attr]
        assert record.previous_referable.uri == "http://example.com"  # type: ignore[union-attr]

    def test_first_snapshot_wins(self):
        record = _link()
        record.retarget(9, URI_REFERABLE_TYPE, {}, OWNER)
        record.referable = UriReferable(id=10, uri="/other")
        record.retarget(10, URI_REFERABLE_TYPE, {}, OWNER)
        assert record.previous_referable.id == 9  # type: ignore[union-attr]

    def test_nothing_to_snapshot(self):
        record = ReferenceRecord(kind=RefKind.LINK)
        record.retarget("3", "Skyline::Page", {}, OWNER)
        assert record.previous_referable is None
        assert record.referable_id == 3
        assert record.owner == OWNER


class TestRender:
    def test_link(self):
        record = _link()
        assert record.start_markup() == '<a href="http://example.com" class="ext">'
        assert record.end_markup() == "</a>"

    def test_link_with_markers(self):
        assert _link().start_markup(include_editor_markers=True) == (
            '<a href="http://example.com" class="ext" skyline-ref-id="5" skyline-referable-id="9" '
            'skyline-referable-type="Skyline::ReferableUri">'
        )

    def test_image(self):
        record = _link(kind=RefKind.IMAGE, options={"alt": "Logo"}, referable=UriReferable(id=9, uri="/logo.png"))
        assert record.start_markup() == '<img src="/logo.png" alt="Logo"/>'
        assert record.end_markup() == ""

    def test_nullify_suppresses_target(self):
        assert _link().start_markup(options={"nullify": True}) == '<a class="ext">'
        assert _link().start_markup(options={"nullify": False, "unknown": 1}) == (
            '<a href="http://example.com" class="ext">'
        )

    def test_external_referable_has_no_target(self):
        record = _link(referable_id=3, referable_type="Skyline::Page", referable=None, options={})
        assert record.start_markup() == "<a>"
        assert record.start_markup(include_editor_markers=True) == (
            '<a skyline-ref-id="5" skyline-referable-id="3" skyline-referable-type="Skyline::Page">'
        )

    def test_markers_skip_unset_referable(self):
        record = _link(referable_id=None, referable_type=None, referable=None, options={})
        assert record.start_markup(include_editor_markers=True) == '<a skyline-ref-id="5">'

    def test_values_are_escaped(self):
        record = _link(
            options={"title": 'Say "hi" & <bye>'},
            referable=UriReferable(id=9, uri="/search?a=1&b=2"),
        )
        assert record.start_markup() == (
            '<a href="/search?a=1&amp;b=2" title="Say &quot;hi&quot; &amp; &lt;bye&gt;">'
        )
