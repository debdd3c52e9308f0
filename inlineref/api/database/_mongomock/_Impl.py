"""Mock MongoDB collection implementation using mongomock."""

import mongomock

from .._CollectionBackend import _CollectionBackend
from ..DatabaseConfig import DatabaseConfig
from ._client import _get_mongomock_client
from ._Data import _Data


class _Impl(_CollectionBackend):
    def __init__(self, database_config: DatabaseConfig, database_name: str, collection_name: str):
        if not isinstance(database_config.data, _Data):
            raise ValueError("MongoMock config data is required")
        self.database_name = database_name
        self.collection_name = collection_name
        self._client: mongomock.MongoClient | None = None
        self._collection = None

    def __enter__(self):
        self._client = _get_mongomock_client()
        self._collection = self._client[self.database_name][self.collection_name]
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        # The shared client stays open; only the collection handle is dropped.
        self._collection = None
        return False
