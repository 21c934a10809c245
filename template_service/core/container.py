"""Simple dependency container for wiring core services."""

from __future__ import annotations

from dataclasses import dataclass

from template_service.core.config import Settings
from template_service.infrastructure.database import build_engine
from template_service.infrastructure.documents import DocumentStore, SqlDocumentStore
from template_service.modules.templates import TemplateService


@dataclass(slots=True)
class ApplicationContainer:
    settings: Settings
    store: DocumentStore

    @classmethod
    def from_settings(cls, settings: Settings) -> "ApplicationContainer":
        engine = build_engine(settings.database, debug=settings.debug)
        store = SqlDocumentStore(engine, create_schema=settings.database.create_schema)
        return cls(settings=settings, store=store)

    def template_service(self) -> TemplateService:
        return TemplateService.with_store(self.store)

    async def startup(self) -> None:
        """Open infrastructure singletons (document store, schema)."""
        await self.store.connect()

    async def shutdown(self) -> None:
        await self.store.close()


__all__ = ["ApplicationContainer"]
