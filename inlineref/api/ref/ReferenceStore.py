"""Persistence boundary for reference records, including their lifecycle hooks."""

import logging
from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..database.Database import Database
from ..referable.ReferableStore import ReferableStore, is_managed
from ..referable.UriReferable import URI_REFERABLE_TYPE
from .OwnerRef import OwnerRef
from .ReferenceRecord import ReferenceRecord
from .RefKind import RefKind

logger = logging.getLogger(__name__)


class _StoredRef(BaseModel):
    """Shape of a persisted reference record; saving validates against it."""

    model_config = ConfigDict(extra="forbid")

    kind: RefKind
    referable_id: int | None
    referable_type: str | None
    options: list[tuple[str, str]]
    owner_id: int | str
    owner_type: str = Field(..., min_length=1)
    field_name: str = Field(..., min_length=1)


class ReferenceStore:
    """Find, save and destroy reference records.

    Saving and destroying run the lifecycle hooks explicitly:

    - `after_save` destroys a URI referable the record no longer points to.
    - `after_destroy` destroys the URI referable the record owned.
    """

    def __init__(self, database: Database, referables: ReferableStore):
        self.database = database
        self.referables = referables

    # Queries

    def ids_for_owner(self, owner: OwnerRef) -> list[int]:
        return [doc["_id"] for doc in self.database.find(owner.query(), {"_id": 1})]

    def find_for_owner(self, owner: OwnerRef, kinds: Iterable[RefKind] = tuple(RefKind)) -> list[ReferenceRecord]:
        query = {**owner.query(), "kind": {"$in": [RefKind(kind).value for kind in kinds]}}
        return [self._from_document(doc) for doc in self.database.find(query)]

    def records_by_id(self, owner: OwnerRef) -> dict[int, ReferenceRecord]:
        """All of the owner's records of every kind, keyed by identity."""
        return {record.id: record for record in self.find_for_owner(owner) if record.id is not None}

    def find_by_id_for_owner(self, kind: RefKind, record_id: int, owner: OwnerRef) -> ReferenceRecord | None:
        doc = self.database.find_one({"_id": record_id, "kind": RefKind(kind).value, **owner.query()})
        return self._from_document(doc) if doc else None

    def find_by_ids(self, record_ids: Iterable[int]) -> list[ReferenceRecord]:
        return [self._from_document(doc) for doc in self.database.find({"_id": {"$in": list(record_ids)}})]

    def claimants(self, referable_type: str, referable_id: int) -> list[int]:
        """Identities of the records pointing at the given referable."""
        query = {"referable_type": referable_type, "referable_id": referable_id}
        return [doc["_id"] for doc in self.database.find(query, {"_id": 1})]

    # Persistence

    def save(self, record: ReferenceRecord) -> ReferenceRecord:
        """Persist the record and its managed referable, then run `after_save`.

        Raises:
            pydantic.ValidationError: If the record has no valid owner or invalid referable fields.
        """
        self._to_document(record)
        if record.referable is not None:
            self.referables.save(record.referable)
            record.referable_id = record.referable.id
            record.referable_type = record.referable.type
        if record.id is None:
            record.id = self.database.next_id()
        self.database.replace_one({"_id": record.id}, self._to_document(record), upsert=True)
        self.after_save(record)
        return record

    def destroy(self, record: ReferenceRecord) -> None:
        if record.id is not None:
            self.database.delete_one({"_id": record.id})
        self.after_destroy(record)

    def destroy_many(self, record_ids: Iterable[int]) -> list[int]:
        """Bulk delete by identity; `after_destroy` still runs for every record."""
        records = self.find_by_ids(record_ids)
        if not records:
            return []
        destroyed = [record.id for record in records if record.id is not None]
        self.database.delete_many({"_id": {"$in": destroyed}})
        for record in records:
            self.after_destroy(record)
        return destroyed

    # Lifecycle hooks

    def after_save(self, record: ReferenceRecord) -> None:
        previous = record.previous_referable
        record.previous_referable = None
        if previous is None:
            return
        current = record.referable
        if current is not None and current.identity() == previous.identity():
            return
        if previous.type == URI_REFERABLE_TYPE:
            logger.debug(f"Ref {record.id} replaced referable {previous.id}; destroying it")
            self.referables.destroy(previous)

    def after_destroy(self, record: ReferenceRecord) -> None:
        if record.referable is not None and record.referable.type == URI_REFERABLE_TYPE:
            self.referables.destroy(record.referable)

    # Documents

    @staticmethod
    def _to_document(record: ReferenceRecord) -> dict[str, Any]:
        owner = record.owner
        stored = _StoredRef.model_validate(
            {
                "kind": record.kind,
                "referable_id": record.referable_id,
                "referable_type": record.referable_type,
                "options": list(record.options.items()),
                "owner_id": owner.entity_id if owner else None,
                "owner_type": owner.entity_type if owner else None,
                "field_name": owner.field_name if owner else None,
            }
        )
        doc = stored.model_dump(mode="json")
        doc["_id"] = record.id
        return doc

    def _from_document(self, doc: dict[str, Any]) -> ReferenceRecord:
        referable_type = doc.get("referable_type")
        referable = None
        if is_managed(referable_type):
            referable = self.referables.reload(referable_type, doc.get("referable_id"))
        return ReferenceRecord(
            id=doc["_id"],
            kind=doc["kind"],
            referable_id=doc.get("referable_id"),
            referable_type=referable_type,
            options={str(name): str(value) for name, value in doc.get("options") or []},
            owner=OwnerRef(entity_id=doc["owner_id"], entity_type=doc["owner_type"], field_name=doc["field_name"]),
            referable=referable,
        )
