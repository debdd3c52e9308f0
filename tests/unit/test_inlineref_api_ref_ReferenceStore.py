"""ReferenceStore persistence and lifecycle hooks against mongomock."""

import pytest
from pydantic import ValidationError

from inlineref.api.ref.OwnerRef import OwnerRef
from inlineref.api.ref.ReferenceRecord import ReferenceRecord
from inlineref.api.ref.RefKind import RefKind
from inlineref.api.referable.UriReferable import URI_REFERABLE_TYPE, UriReferable

pytestmark = pytest.mark.db

OWNER = OwnerRef(entity_id=1, entity_type="Article", field_name="body")
OTHER_OWNER = OwnerRef(entity_id=1, entity_type="Article", field_name="intro")


def _uri_record(uri: str = "http://example.com", kind: RefKind = RefKind.LINK, owner: OwnerRef = OWNER):
    return ReferenceRecord(
        kind=kind,
        referable_type=URI_REFERABLE_TYPE,
        options={"class": "ext"},
        owner=owner,
        referable=UriReferable(uri=uri),
    )


def test_save_persists_record_and_referable(store):
    record = store.save(_uri_record())

    assert record.id == 1
    assert record.referable_id == 1
    assert record.referable_type == URI_REFERABLE_TYPE
    assert store.database.find_one({"_id": 1}) == {
        "_id": 1,
        "kind": "link",
        "referable_id": 1,
        "referable_type": URI_REFERABLE_TYPE,
        "options": [["class", "ext"]],
        "owner_id": 1,
        "owner_type": "Article",
        "field_name": "body",
    }
    assert store.referables.count() == 1


def test_save_without_owner_fails_before_writing(store):
    record = ReferenceRecord(kind=RefKind.LINK, referable_type=URI_REFERABLE_TYPE, referable=UriReferable(uri="/x"))
    with pytest.raises(ValidationError):
        store.save(record)
    assert store.database.count_documents() == 0
    assert store.referables.count() == 0


def test_save_external_referable(store):
    record = store.save(ReferenceRecord(kind=RefKind.LINK, referable_id=4, referable_type="Skyline::Page", owner=OWNER))

    loaded = store.find_by_id_for_owner(RefKind.LINK, record.id, OWNER)
    assert loaded is not None
    assert loaded.referable is None
    assert (loaded.referable_id, loaded.referable_type) == (4, "Skyline::Page")
    assert store.referables.count() == 0


def test_options_round_trip_in_order(store):
    record = _uri_record()
    record.options = {"title": "T", "data-x": "1", "class": "a b"}
    store.save(record)

    loaded = store.find_by_id_for_owner(RefKind.LINK, record.id, OWNER)
    assert list(loaded.options.items()) == [("title", "T"), ("data-x", "1"), ("class", "a b")]  # type: ignore[union-attr]
    assert loaded.referable == UriReferable(id=1, uri="http://example.com")  # type: ignore[union-attr]


def test_queries_are_scoped_to_owner_and_kind(store):
    link = store.save(_uri_record())
    image = store.save(_uri_record("/logo.png", kind=RefKind.IMAGE))
    other = store.save(_uri_record(owner=OTHER_OWNER))

    assert store.ids_for_owner(OWNER) == [link.id, image.id]
    assert [r.id for r in store.find_for_owner(OWNER, kinds=[RefKind.IMAGE])] == [image.id]
    assert sorted(store.records_by_id(OWNER)) == [link.id, image.id]
    assert store.find_by_id_for_owner(RefKind.LINK, image.id, OWNER) is None
    assert store.find_by_id_for_owner(RefKind.LINK, other.id, OWNER) is None
    assert store.find_by_id_for_owner(RefKind.LINK, other.id, OTHER_OWNER) is not None
    assert [r.id for r in store.find_by_ids([image.id, 99])] == [image.id]


def test_claimants(store):
    record = store.save(_uri_record())
    assert store.claimants(URI_REFERABLE_TYPE, record.referable_id) == [record.id]
    assert store.claimants("Skyline::Page", record.referable_id) == []


def test_destroy_cascades_to_uri_referable(store):
    record = store.save(_uri_record())
    store.destroy(record)
    assert store.database.count_documents() == 0
    assert store.referables.count() == 0


def test_destroy_leaves_external_referable_alone(store):
    record = store.save(ReferenceRecord(kind=RefKind.LINK, referable_id=1, referable_type="Skyline::Page", owner=OWNER))
    kept = store.referables.save(UriReferable(uri="/unrelated"))
    assert kept.id == 1

    store.destroy(record)
    assert store.referables.count() == 1


def test_destroy_many_runs_after_destroy_per_record(store):
    first = store.save(_uri_record("/1"))
    second = store.save(_uri_record("/2"))
    third = store.save(_uri_record("/3"))

    destroyed = store.destroy_many([first.id, third.id, 42])

    assert sorted(destroyed) == [first.id, third.id]
    assert store.ids_for_owner(OWNER) == [second.id]
    assert store.referables.reload(URI_REFERABLE_TYPE, first.referable_id) is None
    assert store.referables.reload(URI_REFERABLE_TYPE, third.referable_id) is None
    assert store.referables.reload(URI_REFERABLE_TYPE, second.referable_id) is not None


def test_destroy_many_nothing_found(store):
    assert store.destroy_many([]) == []
    assert store.destroy_many([7]) == []


class TestAfterSave:
    def test_replaced_referable_is_destroyed(self, store):
        record = store.save(_uri_record("/old"))
        old_id = record.referable_id

        record.retarget(None, URI_REFERABLE_TYPE, {}, OWNER)
        record.referable = UriReferable(uri="/new")
        store.save(record)

        assert record.referable_id != old_id
        assert store.referables.reload(URI_REFERABLE_TYPE, old_id) is None
        assert store.referables.count() == 1
        assert record.previous_referable is None

    def test_in_place_update_keeps_referable(self, store):
        record = store.save(_uri_record("/old"))

        record.retarget(record.referable_id, URI_REFERABLE_TYPE, {}, OWNER)
        record.referable.uri = "/new"  # type: ignore[union-attr]
        store.save(record)

        assert store.referables.count() == 1
        assert store.referables.reload(URI_REFERABLE_TYPE, record.referable_id).uri == "/new"  # type: ignore[union-attr]

    def test_switch_to_external_destroys_uri_referable(self, store):
        record = store.save(_uri_record("/old"))
        old_id = record.referable_id

        record.retarget(8, "Skyline::Page", {}, OWNER)
        record.referable = None
        store.save(record)

        assert store.referables.reload(URI_REFERABLE_TYPE, old_id) is None
        assert (record.referable_id, record.referable_type) == (8, "Skyline::Page")

    def test_without_snapshot_nothing_is_destroyed(self, store):
        record = store.save(_uri_record("/old"))
        record.referable = UriReferable(uri="/new")
        store.save(record)
        assert store.referables.count() == 2
