"""Document store abstraction with SQL and in-memory implementations."""

from .base import (
    DeleteResult,
    Document,
    DocumentCollection,
    DocumentCursor,
    DocumentNotFoundError,
    DocumentStore,
    DocumentStoreError,
    InsertResult,
    UpdateResult,
)
from .memory import MemoryDocumentStore
from .query import Filter, Update
from .sql import SqlDocumentStore

__all__ = [
    "DeleteResult",
    "Document",
    "DocumentCollection",
    "DocumentCursor",
    "DocumentNotFoundError",
    "DocumentStore",
    "DocumentStoreError",
    "Filter",
    "InsertResult",
    "MemoryDocumentStore",
    "SqlDocumentStore",
    "Update",
    "UpdateResult",
]
