"""Database infrastructure helpers (engine, models, migrations)."""

from .base import Base
from .models import StoredDocument
from .session import build_engine, init_db

__all__ = ["Base", "StoredDocument", "build_engine", "init_db"]
