"""Async SQLAlchemy engine management."""

from __future__ import annotations

from typing import Any

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from template_service.core.config import DatabaseSettings

from .base import Base


def build_engine(settings: DatabaseSettings, *, debug: bool = False) -> AsyncEngine:
    engine_kwargs: dict[str, Any] = {
        "echo": settings.echo or debug,
    }
    if settings.pool_size is not None:
        engine_kwargs["pool_size"] = settings.pool_size
    if settings.max_overflow is not None:
        engine_kwargs["max_overflow"] = settings.max_overflow

    return create_async_engine(settings.url, **engine_kwargs)


async def init_db(engine: AsyncEngine) -> None:
    """Create database tables in development mode (migrations preferred)."""
    from . import models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
