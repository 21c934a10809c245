"""Document store persisted in a relational database through SQLAlchemy.

Every document lives in the ``documents`` table as a JSON body, namespaced by
``(database, collection)``. Equality filters compile to JSON path comparisons
so lookups never load whole collections into memory.
"""

from __future__ import annotations

import logging
from typing import Any, AsyncIterator, Mapping

from sqlalchemy import ColumnElement, delete, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, AsyncResult

from template_service.infrastructure.database import StoredDocument, init_db

from .base import (
    DeleteResult,
    Document,
    DocumentNotFoundError,
    DocumentStoreError,
    InsertResult,
    UpdateResult,
)
from .query import Filter, Update

logger = logging.getLogger(__name__)


def _field_condition(name: str, value: Any) -> ColumnElement[bool]:
    element = StoredDocument.body[name]
    if isinstance(value, bool):
        return element.as_boolean() == value
    if isinstance(value, int):
        return element.as_integer() == value
    if isinstance(value, float):
        return element.as_float() == value
    if isinstance(value, str):
        return element.as_string() == value
    raise DocumentStoreError(f"unsupported filter value for field '{name}': {type(value).__name__}")


class SqlCursor:
    def __init__(self, connection: AsyncConnection, result: AsyncResult) -> None:
        self._connection = connection
        self._result = result
        self._closed = False

    async def __aiter__(self) -> AsyncIterator[Document]:
        try:
            async for row in self._result:
                yield dict(row.body)
        except SQLAlchemyError as exc:
            raise DocumentStoreError(str(exc)) from exc

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        try:
            await self._result.close()
        finally:
            await self._connection.close()


class SqlCollection:
    def __init__(self, engine: AsyncEngine, database: str, name: str) -> None:
        self._engine = engine
        self.database = database
        self.name = name

    def _where(self, flt: Filter) -> list[ColumnElement[bool]]:
        conditions = [
            StoredDocument.database == self.database,
            StoredDocument.collection == self.name,
        ]
        conditions.extend(_field_condition(name, value) for name, value in flt.equals)
        return conditions

    async def insert_one(self, document: Mapping[str, Any]) -> InsertResult:
        stmt = insert(StoredDocument).values(
            database=self.database,
            collection=self.name,
            body=dict(document),
        )
        try:
            async with self._engine.begin() as conn:
                await conn.execute(stmt)
        except SQLAlchemyError as exc:
            raise DocumentStoreError(str(exc)) from exc
        return InsertResult()

    async def find_one(self, flt: Filter) -> Document:
        stmt = select(StoredDocument.body).where(*self._where(flt)).order_by(StoredDocument.id).limit(1)
        try:
            async with self._engine.connect() as conn:
                body = (await conn.execute(stmt)).scalar_one_or_none()
        except SQLAlchemyError as exc:
            raise DocumentStoreError(str(exc)) from exc
        if body is None:
            raise DocumentNotFoundError()
        return dict(body)

    async def update_one(self, flt: Filter, update_: Update) -> UpdateResult:
        stmt = (
            select(StoredDocument.id, StoredDocument.body)
            .where(*self._where(flt))
            .order_by(StoredDocument.id)
            .limit(1)
            .with_for_update()
        )
        try:
            async with self._engine.begin() as conn:
                row = (await conn.execute(stmt)).first()
                if row is None:
                    return UpdateResult(matched_count=0, modified_count=0)
                current = dict(row.body)
                updated = update_.apply(current)
                if updated == current:
                    return UpdateResult(matched_count=1, modified_count=0)
                await conn.execute(
                    update(StoredDocument).where(StoredDocument.id == row.id).values(body=updated)
                )
        except SQLAlchemyError as exc:
            raise DocumentStoreError(str(exc)) from exc
        return UpdateResult(matched_count=1, modified_count=1)

    async def delete_one(self, flt: Filter) -> DeleteResult:
        target = select(StoredDocument.id).where(*self._where(flt)).order_by(StoredDocument.id).limit(1)
        try:
            async with self._engine.begin() as conn:
                document_id = (await conn.execute(target)).scalar_one_or_none()
                if document_id is None:
                    return DeleteResult(deleted_count=0)
                result = await conn.execute(delete(StoredDocument).where(StoredDocument.id == document_id))
        except SQLAlchemyError as exc:
            raise DocumentStoreError(str(exc)) from exc
        return DeleteResult(deleted_count=result.rowcount)

    async def find(self, flt: Filter) -> SqlCursor:
        stmt = select(StoredDocument.body).where(*self._where(flt)).order_by(StoredDocument.id)
        try:
            conn = await self._engine.connect()
        except SQLAlchemyError as exc:
            raise DocumentStoreError(str(exc)) from exc
        try:
            result = await conn.stream(stmt)
        except SQLAlchemyError as exc:
            await conn.close()
            raise DocumentStoreError(str(exc)) from exc
        return SqlCursor(conn, result)


class SqlDocumentStore:
    """Document store backed by an async SQLAlchemy engine."""

    def __init__(self, engine: AsyncEngine, *, create_schema: bool = False) -> None:
        self._engine = engine
        self._create_schema = create_schema

    def collection(self, database: str, name: str) -> SqlCollection:
        return SqlCollection(self._engine, database, name)

    async def connect(self) -> None:
        if self._create_schema:
            logger.info("Creating document tables on %s", self._engine.url.render_as_string(hide_password=True))
            await init_db(self._engine)

    async def close(self) -> None:
        await self._engine.dispose()
