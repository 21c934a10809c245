"""Repository protocol for template persistence."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Protocol, Sequence

from .models import Template


class TemplateRepository(Protocol):
    async def create(self, *, template_id: str, items: Sequence[Any], created: datetime) -> Template:
        ...

    async def get_by_id(self, template_id: str) -> Template:
        ...

    async def update_items(self, template_id: str, *, items: Sequence[Any], updated: datetime) -> int:
        ...

    async def delete(self, template_id: str) -> int:
        ...

    async def list_all(self) -> list[Template]:
        ...
