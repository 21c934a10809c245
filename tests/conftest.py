from __future__ import annotations

from typing import Any, AsyncIterator, Mapping

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from template_service.core.config import Settings
from template_service.core.container import ApplicationContainer
from template_service.infrastructure.documents import (
    DocumentStoreError,
    Filter,
    MemoryDocumentStore,
    Update,
)
from template_service.main import create_app


@pytest.fixture
def settings() -> Settings:
    return Settings(environment="test")


@pytest.fixture
def store() -> MemoryDocumentStore:
    return MemoryDocumentStore()


@pytest.fixture
def container(settings: Settings, store: MemoryDocumentStore) -> ApplicationContainer:
    return ApplicationContainer(settings=settings, store=store)


@pytest.fixture
def app(settings: Settings, container: ApplicationContainer) -> FastAPI:
    return create_app(settings, container)


@pytest.fixture
def client(app: FastAPI):
    with TestClient(app) as test_client:
        yield test_client


class FaultyCursor:
    """Cursor that yields ``documents`` and then fails if ``fail_reading`` is set."""

    def __init__(self, documents: list[dict[str, Any]], fail_reading: bool) -> None:
        self.documents = documents
        self.fail_reading = fail_reading
        self.closed = False

    async def __aiter__(self) -> AsyncIterator[dict[str, Any]]:
        for document in self.documents:
            yield document
        if self.fail_reading:
            raise DocumentStoreError("connection reset")

    async def close(self) -> None:
        self.closed = True


class FaultyCollection:
    def __init__(self, *, failing: set[str] | None = None, documents: list[dict[str, Any]] | None = None) -> None:
        self.failing = failing or set()
        self.documents = documents or []
        self.calls: list[str] = []
        self.cursors: list[FaultyCursor] = []

    def _maybe_fail(self, operation: str) -> None:
        self.calls.append(operation)
        if operation in self.failing:
            raise DocumentStoreError(f"{operation} unavailable")

    async def insert_one(self, document: Mapping[str, Any]):
        self._maybe_fail("insert_one")

    async def find_one(self, flt: Filter):
        self._maybe_fail("find_one")
        return self.documents[0]

    async def update_one(self, flt: Filter, update: Update):
        self._maybe_fail("update_one")

    async def delete_one(self, flt: Filter):
        self._maybe_fail("delete_one")

    async def find(self, flt: Filter) -> FaultyCursor:
        self._maybe_fail("find")
        cursor = FaultyCursor(self.documents, fail_reading="read" in self.failing)
        self.cursors.append(cursor)
        return cursor


class FaultyStore:
    def __init__(self, collection: FaultyCollection) -> None:
        self._collection = collection

    def collection(self, database: str, name: str) -> FaultyCollection:
        return self._collection

    async def connect(self) -> None:
        return None

    async def close(self) -> None:
        return None
