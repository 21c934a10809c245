import asyncio

import pytest

from template_service.infrastructure.documents import (
    DocumentNotFoundError,
    Filter,
    MemoryDocumentStore,
    Update,
)


def test_collections_are_namespaced_by_database() -> None:
    store = MemoryDocumentStore()

    async def scenario() -> None:
        await store.collection("one", "things").insert_one({"id": "x"})
        with pytest.raises(DocumentNotFoundError):
            await store.collection("two", "things").find_one(Filter.eq("id", "x"))

    asyncio.run(scenario())
    assert store.collection("one", "things") is store.collection("one", "things")


def test_update_reports_matched_and_modified() -> None:
    collection = MemoryDocumentStore().collection("db", "c")

    async def scenario():
        await collection.insert_one({"id": "x", "items": [1]})
        changed = await collection.update_one(Filter.eq("id", "x"), Update.set(items=[2]))
        unchanged = await collection.update_one(Filter.eq("id", "x"), Update.set(items=[2]))
        missing = await collection.update_one(Filter.eq("id", "y"), Update.set(items=[2]))
        return changed, unchanged, missing

    changed, unchanged, missing = asyncio.run(scenario())

    assert (changed.matched_count, changed.modified_count) == (1, 1)
    assert (unchanged.matched_count, unchanged.modified_count) == (1, 0)
    assert (missing.matched_count, missing.modified_count) == (0, 0)


def test_returned_documents_are_copies() -> None:
    collection = MemoryDocumentStore().collection("db", "c")

    async def scenario():
        await collection.insert_one({"id": "x", "items": [1]})
        found = await collection.find_one(Filter.eq("id", "x"))
        found["items"].append(99)
        return await collection.find_one(Filter.eq("id", "x"))

    assert asyncio.run(scenario())["items"] == [1]


def test_cursor_yields_in_insertion_order() -> None:
    collection = MemoryDocumentStore().collection("db", "c")

    async def scenario():
        for key in ("b", "a", "c"):
            await collection.insert_one({"id": key})
        cursor = await collection.find(Filter.all())
        try:
            return [document["id"] async for document in cursor]
        finally:
            await cursor.close()

    assert asyncio.run(scenario()) == ["b", "a", "c"]
