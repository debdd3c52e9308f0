"""Collection operations shared by the pymongo-compatible backends."""

from typing import Any

from pymongo import ReturnDocument
from pymongo.collection import Collection

from ._AbstractBackend import _AbstractBackend

COUNTERS_COLLECTION = "_counters"


class _CollectionBackend(_AbstractBackend):
    """Pass-through to a pymongo (or mongomock) collection.

    Subclasses open `self._client` and `self._collection` in `__enter__`.
    """

    database_name: str
    collection_name: str
    _client: Any
    _collection: Collection | None

    def count_documents(self, filter: dict[str, Any] | None = None) -> int:
        return self._collection.count_documents(filter or {})  # type: ignore[union-attr]

    def find_one(self, filter: dict[str, Any], projection: dict[str, Any] | None = None) -> dict[str, Any] | None:
        return self._collection.find_one(filter, projection)  # type: ignore[union-attr]

    def find(self, filter: dict[str, Any] | None = None, projection: dict[str, Any] | None = None) -> Any:
        return self._collection.find(filter or {}, projection)  # type: ignore[union-attr]

    def insert_one(self, document: dict[str, Any]) -> Any:
        return self._collection.insert_one(document).inserted_id  # type: ignore[union-attr]

    def replace_one(self, filter: dict[str, Any], document: dict[str, Any], upsert: bool = False) -> None:
        self._collection.replace_one(filter, document, upsert=upsert)  # type: ignore[union-attr]

    def delete_one(self, filter: dict[str, Any]) -> int:
        return self._collection.delete_one(filter).deleted_count  # type: ignore[union-attr]

    def delete_many(self, filter: dict[str, Any]) -> int:
        return self._collection.delete_many(filter).deleted_count  # type: ignore[union-attr]

    def next_sequence(self) -> int:
        counters = self._client[self.database_name][COUNTERS_COLLECTION]
        doc = counters.find_one_and_update(
            {"_id": self.collection_name},
            {"$inc": {"seq": 1}},
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )
        return int(doc["seq"])
