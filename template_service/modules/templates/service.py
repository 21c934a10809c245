"""Application service implementing the template RPC operations."""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Sequence

from template_service.domain.templates import (
    Template,
    TemplateBackendError,
    TemplateRepository,
    UnsupportedApiVersionError,
)
from template_service.infrastructure.database.repositories import DocumentTemplateRepository
from template_service.infrastructure.documents import DocumentStore

logger = logging.getLogger(__name__)

API_VERSION = "v1"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _new_template_id() -> str:
    return str(uuid.uuid1())


@dataclass(slots=True)
class TemplateService:
    repository: TemplateRepository
    api_version: str = API_VERSION
    clock: Callable[[], datetime] = field(default=_utcnow)
    id_factory: Callable[[], str] = field(default=_new_template_id)

    @classmethod
    def with_store(cls, store: DocumentStore) -> "TemplateService":
        return cls(DocumentTemplateRepository(store))

    def check_api(self, api: str) -> None:
        """Reject explicit versions other than the implemented one; empty means unspecified."""
        if api and api != self.api_version:
            logger.warning("Rejected request for API version %r", api)
            raise UnsupportedApiVersionError(self.api_version, api)

    async def create_template(self, api: str, items: Sequence[Any]) -> str:
        self.check_api(api)
        template_id = self.id_factory()
        try:
            await self.repository.create(template_id=template_id, items=items, created=self.clock())
        except TemplateBackendError as exc:
            logger.error("Create failed: %s", exc)
            raise
        logger.debug("Created template %s", template_id)
        return template_id

    async def read_template(self, api: str, template_id: str) -> Template:
        self.check_api(api)
        try:
            return await self.repository.get_by_id(template_id)
        except TemplateBackendError as exc:
            logger.error("Read of template %s failed: %s", template_id, exc)
            raise

    async def update_template(self, api: str, template_id: str, items: Sequence[Any]) -> int:
        self.check_api(api)
        try:
            modified = await self.repository.update_items(template_id, items=items, updated=self.clock())
        except TemplateBackendError as exc:
            logger.error("Update of template %s failed: %s", template_id, exc)
            raise
        if not modified:
            logger.info("Update matched no template with id %s", template_id)
        return modified

    async def delete_template(self, api: str, template_id: str) -> int:
        self.check_api(api)
        try:
            return await self.repository.delete(template_id)
        except TemplateBackendError as exc:
            logger.error("Delete of template %s failed: %s", template_id, exc)
            raise

    async def list_templates(self, api: str) -> list[Template]:
        self.check_api(api)
        try:
            return await self.repository.list_all()
        except TemplateBackendError as exc:
            logger.error("List failed: %s", exc)
            raise
