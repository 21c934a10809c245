"""Document store contracts shared by every store implementation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, AsyncIterator, Mapping, Protocol

from .query import Filter, Update

Document = dict[str, Any]


class DocumentStoreError(Exception):
    """Raised for any failure reported by the underlying store."""


class DocumentNotFoundError(DocumentStoreError):
    """Raised by ``find_one`` when no document matches the filter."""

    def __init__(self, message: str = "no documents in result") -> None:
        super().__init__(message)


@dataclass(frozen=True, slots=True)
class InsertResult:
    acknowledged: bool = True


@dataclass(frozen=True, slots=True)
class UpdateResult:
    matched_count: int
    modified_count: int


@dataclass(frozen=True, slots=True)
class DeleteResult:
    deleted_count: int


class DocumentCursor(Protocol):
    """Server-side iterator over a multi-document query; must be closed."""

    def __aiter__(self) -> AsyncIterator[Document]:
        ...

    async def close(self) -> None:
        ...


class DocumentCollection(Protocol):
    async def insert_one(self, document: Mapping[str, Any]) -> InsertResult:
        ...

    async def find_one(self, flt: Filter) -> Document:
        ...

    async def update_one(self, flt: Filter, update: Update) -> UpdateResult:
        ...

    async def delete_one(self, flt: Filter) -> DeleteResult:
        ...

    async def find(self, flt: Filter) -> DocumentCursor:
        ...


class DocumentStore(Protocol):
    def collection(self, database: str, name: str) -> DocumentCollection:
        ...

    async def connect(self) -> None:
        ...

    async def close(self) -> None:
        ...


__all__ = [
    "DeleteResult",
    "Document",
    "DocumentCollection",
    "DocumentCursor",
    "DocumentNotFoundError",
    "DocumentStore",
    "DocumentStoreError",
    "InsertResult",
    "UpdateResult",
]
