"""Document store implementation for the template repository."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Sequence

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

from template_service.domain.templates import Template, TemplateBackendError, TemplateNotFoundError
from template_service.infrastructure.documents import (
    DocumentNotFoundError,
    DocumentStore,
    DocumentStoreError,
    Filter,
    Update,
)

DATABASE = "template"
COLLECTION = "template"

_items_adapter = TypeAdapter(list[Any])
_timestamp_adapter = TypeAdapter(datetime)


class TemplateFields:
    ID = "id"
    ITEMS = "items"
    CREATED = "created"
    UPDATED = "updated"


class TemplateDocument(BaseModel):
    """Stored shape of a template document."""

    model_config = ConfigDict(extra="ignore")

    id: str
    items: list[Any]
    created: datetime
    updated: datetime

    def to_domain(self) -> Template:
        return Template(id=self.id, items=self.items, created=self.created, updated=self.updated)


def _by_id(template_id: str) -> Filter:
    return Filter.eq(TemplateFields.ID, template_id)


def _decode(document: dict[str, Any]) -> Template:
    return TemplateDocument.model_validate(document).to_domain()


class DocumentTemplateRepository:
    def __init__(self, store: DocumentStore) -> None:
        self._collection = store.collection(DATABASE, COLLECTION)

    async def create(self, *, template_id: str, items: Sequence[Any], created: datetime) -> Template:
        document = TemplateDocument(id=template_id, items=list(items), created=created, updated=created)
        try:
            await self._collection.insert_one(document.model_dump(mode="json"))
        except DocumentStoreError as exc:
            raise TemplateBackendError(f"failed to insert into {DATABASE}.{COLLECTION}-> {exc}") from exc
        return document.to_domain()

    async def get_by_id(self, template_id: str) -> Template:
        try:
            document = await self._collection.find_one(_by_id(template_id))
        except DocumentNotFoundError as exc:
            raise TemplateNotFoundError(f"failed to find document-> {exc}") from exc
        except DocumentStoreError as exc:
            raise TemplateBackendError(f"failed to find document-> {exc}") from exc
        try:
            return _decode(document)
        except ValidationError as exc:
            raise TemplateBackendError(f"failed to find document-> {exc}") from exc

    async def update_items(self, template_id: str, *, items: Sequence[Any], updated: datetime) -> int:
        changes = Update.set(
            **{
                TemplateFields.ITEMS: _items_adapter.dump_python(list(items), mode="json"),
                TemplateFields.UPDATED: _timestamp_adapter.dump_python(updated, mode="json"),
            }
        )
        try:
            result = await self._collection.update_one(_by_id(template_id), changes)
        except DocumentStoreError as exc:
            raise TemplateBackendError(f"failed to update document-> {exc}") from exc
        return result.modified_count

    async def delete(self, template_id: str) -> int:
        try:
            result = await self._collection.delete_one(_by_id(template_id))
        except DocumentStoreError as exc:
            raise TemplateBackendError(f"failed to delete document-> {exc}") from exc
        return result.deleted_count

    async def list_all(self) -> list[Template]:
        try:
            cursor = await self._collection.find(Filter.all())
        except DocumentStoreError as exc:
            raise TemplateBackendError(f"failed to find documents in {DATABASE}.{COLLECTION}-> {exc}") from exc

        templates: list[Template] = []
        try:
            async for document in cursor:
                try:
                    templates.append(_decode(document))
                except ValidationError as exc:
                    raise TemplateBackendError(f"failed to decode document-> {exc}") from exc
        except DocumentStoreError as exc:
            raise TemplateBackendError(f"failed reading documents-> {exc}") from exc
        finally:
            await cursor.close()
        return templates
