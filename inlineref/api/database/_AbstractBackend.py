"""Abstract base class for database collection implementations."""

from abc import ABC, abstractmethod
from typing import Any


class _AbstractBackend(ABC):
    @abstractmethod
    def __enter__(self):
        pass

    @abstractmethod
    def __exit__(self, exc_type, exc_val, exc_tb):
        pass

    @abstractmethod
    def count_documents(self, filter: dict[str, Any] | None = None) -> int:
        pass

    @abstractmethod
    def find_one(self, filter: dict[str, Any], projection: dict[str, Any] | None = None) -> dict[str, Any] | None:
        pass

    @abstractmethod
    def find(self, filter: dict[str, Any] | None = None, projection: dict[str, Any] | None = None) -> Any:
        pass

    @abstractmethod
    def insert_one(self, document: dict[str, Any]) -> Any:
        pass

    @abstractmethod
    def replace_one(self, filter: dict[str, Any], document: dict[str, Any], upsert: bool = False) -> None:
        pass

    @abstractmethod
    def delete_one(self, filter: dict[str, Any]) -> int:
        pass

    @abstractmethod
    def delete_many(self, filter: dict[str, Any]) -> int:
        pass

    @abstractmethod
    def next_sequence(self) -> int:
        """Allocate the next integer identity for this collection.

        Sequences live in the shared `_counters` collection, one document per
        collection name, and are incremented atomically.
        """
        pass
