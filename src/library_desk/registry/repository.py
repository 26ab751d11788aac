"""
Registry base class and error hierarchy for the Library Desk.

Registries are the in-memory data stores behind the circulation desk. Each
one maps a unique key to a Pydantic model and owns its records for the
lifetime of the process:

1. **Single Owner**: a registry is created by, and only reachable through,
   one ``CirculationDesk``
2. **Insert Only**: records are added and mutated, never removed
3. **Typed Errors**: lookups and inserts raise ``LibraryError`` subclasses so
   callers can report failures without inspecting messages
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Generic, TypeVar

from pydantic import BaseModel

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=BaseModel)


class LibraryError(Exception):
    """Base exception for every failed desk operation."""


class NotFoundError(LibraryError):
    """Raised when an entity is not found."""


class BookNotFoundError(NotFoundError):
    """Raised when no book is registered under an ISBN."""

    def __init__(self, isbn: str):
        super().__init__(f"Book {isbn} not found")
        self.isbn = isbn


class MemberNotFoundError(NotFoundError):
    """Raised when no member is registered under an ID."""

    def __init__(self, member_id: str):
        super().__init__(f"Member {member_id} not found")
        self.member_id = member_id


class DuplicateError(LibraryError):
    """Raised when attempting to create a duplicate entity."""

    def __init__(self, entity: str, key: str):
        super().__init__(f"{entity} {key} already exists")
        self.entity = entity
        self.key = key


class BaseRegistry(ABC, Generic[ModelType]):
    """
    Abstract base registry providing keyed storage.

    Records are kept in insertion order, so listings come back in the order
    entities were added.
    """

    #: Entity name used in error messages and logs
    entity_name: str = "Entity"

    def __init__(self) -> None:
        self._records: dict[str, ModelType] = {}

    @abstractmethod
    def key_of(self, record: ModelType) -> str:
        """Return the unique key of a record."""

    @abstractmethod
    def not_found(self, key: str) -> NotFoundError:
        """Build the error raised when ``key`` is unknown."""

    def _insert(self, record: ModelType) -> ModelType:
        """
        Store a new record.

        Raises:
            DuplicateError: If a record with the same key exists
        """
        key = self.key_of(record)
        if key in self._records:
            raise DuplicateError(self.entity_name, key)
        self._records[key] = record
        logger.debug("Inserted %s %s", self.entity_name, key)
        return record

    def lookup(self, key: str) -> ModelType:
        """
        Get a record by key.

        Raises:
            NotFoundError: If the key is unknown
        """
        try:
            return self._records[key]
        except KeyError:
            raise self.not_found(key) from None

    def list_all(self) -> list[ModelType]:
        """All records in insertion order."""
        return list(self._records.values())

    def __contains__(self, key: object) -> bool:
        return key in self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[ModelType]:
        return iter(self._records.values())
