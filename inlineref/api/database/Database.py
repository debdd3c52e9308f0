"""Database public API."""

import importlib
from typing import Any

from ._AbstractBackend import _AbstractBackend
from .DatabaseConfig import _BACKEND_REGISTRY, DatabaseConfig


class Database:
    """Public API for one collection of the configured database.

    Use as a context manager; every operation requires an open handle.

    Example:
        ```python
        with Database(config.database, "refs") as refs:
            refs.find({"owner_type": "Article"})
        ```
    """

    def __init__(self, database_config: DatabaseConfig, database_name: str):
        self.database_config = database_config
        self.prefix = database_config.prefix
        self.database_name = database_name
        self._impl: _AbstractBackend | None = None

    def __enter__(self):
        backend_type = self.database_config.type
        if backend_type not in _BACKEND_REGISTRY:
            raise ValueError(f"Unsupported backend type: {backend_type!r} (supported: {list(_BACKEND_REGISTRY.keys())})")

        module = importlib.import_module(f"{__package__}._{backend_type}._Impl")
        # The prefix is the MongoDB database, our database name is the collection
        self._impl = module._Impl(self.database_config, self.prefix, self.database_name)
        self._impl.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self._impl:
            return self._impl.__exit__(exc_type, exc_val, exc_tb)
        return False

    @property
    def impl(self) -> _AbstractBackend:
        if self._impl is None:
            raise RuntimeError("Collection not initialized. Use as context manager first.")
        return self._impl

    def count_documents(self, filter: dict[str, Any] | None = None) -> int:
        return self.impl.count_documents(filter)

    def find_one(self, filter: dict[str, Any], projection: dict[str, Any] | None = None) -> dict[str, Any] | None:
        return self.impl.find_one(filter, projection)

    def find(self, filter: dict[str, Any] | None = None, projection: dict[str, Any] | None = None) -> Any:
        return self.impl.find(filter, projection)

    def insert_one(self, document: dict[str, Any]) -> Any:
        return self.impl.insert_one(document)

    def replace_one(self, filter: dict[str, Any], document: dict[str, Any], upsert: bool = False) -> None:
        self.impl.replace_one(filter, document, upsert)

    def delete_one(self, filter: dict[str, Any]) -> int:
        return self.impl.delete_one(filter)

    def delete_many(self, filter: dict[str, Any]) -> int:
        return self.impl.delete_many(filter)

    def next_id(self) -> int:
        """Allocate the next integer `_id` for this collection."""
        return self.impl.next_sequence()
