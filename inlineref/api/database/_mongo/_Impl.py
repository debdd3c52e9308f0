"""MongoDB collection implementation."""

from typing import Any

from pymongo import MongoClient

from .._CollectionBackend import _CollectionBackend
from ..DatabaseConfig import DatabaseConfig
from ._Data import _Data as _DatabaseConfigData


class _Impl(_CollectionBackend):
    def __init__(self, database_config: DatabaseConfig, database_name: str, collection_name: str):
        """Initialize MongoDB implementation.

        `database_name` is the MongoDB database (the configured prefix) and
        `collection_name` the collection inside it.
        """
        if not isinstance(database_config.data, _DatabaseConfigData):
            raise ValueError("MongoDB config data is required")
        self.uri = database_config.data.uri
        self.timeout_ms = database_config.data.server_selection_timeout_ms
        self.database_name = database_name
        self.collection_name = collection_name
        self._client: MongoClient[Any] | None = None
        self._collection = None

    def __enter__(self):
        self._client = MongoClient(self.uri, serverSelectionTimeoutMS=self.timeout_ms)
        self._client.server_info()  # Test connection
        self._collection = self._client[self.database_name][self.collection_name]
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self._client:
            self._client.close()
        self._collection = None
        return False
