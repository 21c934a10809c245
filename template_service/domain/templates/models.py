"""Domain models for templates."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass(slots=True)
class Template:
    id: str
    items: list[Any] = field(default_factory=list)
    created: datetime | None = None
    updated: datetime | None = None
