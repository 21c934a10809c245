"""In-process document store used for tests and local experiments."""

from __future__ import annotations

import copy
from typing import Any, AsyncIterator, Mapping

from .base import (
    DeleteResult,
    Document,
    DocumentNotFoundError,
    DocumentStoreError,
    InsertResult,
    UpdateResult,
)
from .query import Filter, Update


class MemoryCursor:
    def __init__(self, documents: list[Document]) -> None:
        self._documents = documents
        self.closed = False

    async def __aiter__(self) -> AsyncIterator[Document]:
        for document in self._documents:
            if self.closed:
                raise DocumentStoreError("cursor is closed")
            yield copy.deepcopy(document)

    async def close(self) -> None:
        self.closed = True


class MemoryCollection:
    def __init__(self) -> None:
        self._documents: list[Document] = []

    def __len__(self) -> int:
        return len(self._documents)

    def _first(self, flt: Filter) -> Document | None:
        for document in self._documents:
            if flt.matches(document):
                return document
        return None

    async def insert_one(self, document: Mapping[str, Any]) -> InsertResult:
        self._documents.append(copy.deepcopy(dict(document)))
        return InsertResult()

    async def find_one(self, flt: Filter) -> Document:
        document = self._first(flt)
        if document is None:
            raise DocumentNotFoundError()
        return copy.deepcopy(document)

    async def update_one(self, flt: Filter, update: Update) -> UpdateResult:
        document = self._first(flt)
        if document is None:
            return UpdateResult(matched_count=0, modified_count=0)
        updated = update.apply(document)
        if updated == document:
            return UpdateResult(matched_count=1, modified_count=0)
        document.clear()
        document.update(copy.deepcopy(updated))
        return UpdateResult(matched_count=1, modified_count=1)

    async def delete_one(self, flt: Filter) -> DeleteResult:
        document = self._first(flt)
        if document is None:
            return DeleteResult(deleted_count=0)
        self._documents.remove(document)
        return DeleteResult(deleted_count=1)

    async def find(self, flt: Filter) -> MemoryCursor:
        return MemoryCursor([document for document in self._documents if flt.matches(document)])


class MemoryDocumentStore:
    """Keeps documents in insertion order per (database, collection)."""

    def __init__(self) -> None:
        self._collections: dict[tuple[str, str], MemoryCollection] = {}

    def collection(self, database: str, name: str) -> MemoryCollection:
        key = (database, name)
        if key not in self._collections:
            self._collections[key] = MemoryCollection()
        return self._collections[key]

    async def connect(self) -> None:
        return None

    async def close(self) -> None:
        return None
