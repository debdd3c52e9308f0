"""Persistence boundary for managed referables."""

import logging
from typing import Any

from ..database.Database import Database
from .UriReferable import URI_REFERABLE_TYPE, UriReferable

logger = logging.getLogger(__name__)

# Registry: managed referable variants (ONLY place they are enumerated).
# Referable types not listed here are external and never loaded or destroyed.
_REFERABLE_REGISTRY: dict[str, type[UriReferable]] = {
    URI_REFERABLE_TYPE: UriReferable,
}


def is_managed(referable_type: str | None) -> bool:
    return referable_type in _REFERABLE_REGISTRY


def referable_class(referable_type: str) -> type[UriReferable]:
    try:
        return _REFERABLE_REGISTRY[referable_type]
    except KeyError:
        raise ValueError(f"Unmanaged referable type: {referable_type!r}") from None


class ReferableStore:
    """Create, update, reload and destroy referables in one collection."""

    def __init__(self, database: Database):
        self.database = database

    def new(self, referable_type: str) -> UriReferable:
        return referable_class(referable_type)()

    def reload(self, referable_type: str, referable_id: int | None) -> UriReferable | None:
        """Load the stored state of a referable, or None when it does not exist."""
        if referable_id is None or not is_managed(referable_type):
            return None
        doc = self.database.find_one({"_id": referable_id, "type": referable_type})
        if doc is None:
            return None
        return self._from_document(doc)

    def save(self, referable: UriReferable) -> UriReferable:
        """Insert a new referable or replace the stored one; returns it with its id set."""
        if referable.is_new:
            referable.id = self.database.next_id()
            self.database.insert_one(self._to_document(referable))
            logger.debug(f"Created referable {referable.type} id: {referable.id}")
        else:
            self.database.replace_one({"_id": referable.id}, self._to_document(referable), upsert=True)
        return referable

    def destroy(self, referable: UriReferable) -> bool:
        if referable.is_new:
            return False
        deleted = self.database.delete_one({"_id": referable.id, "type": referable.type})
        logger.debug(f"Destroyed referable {referable.type} id: {referable.id}")
        return deleted > 0

    def count(self) -> int:
        return self.database.count_documents({})

    @staticmethod
    def _to_document(referable: UriReferable) -> dict[str, Any]:
        doc = referable.model_dump(exclude={"id"})
        doc["_id"] = referable.id
        return doc

    @staticmethod
    def _from_document(doc: dict[str, Any]) -> UriReferable:
        fields = {key: value for key, value in doc.items() if key != "_id"}
        return referable_class(doc["type"]).model_validate({"id": doc["_id"], **fields})
