"""SQLAlchemy ORM models."""

from sqlalchemy import JSON, Column, DateTime, Index, Integer, String
from sqlalchemy.sql import func

from .base import Base


class StoredDocument(Base):
    __tablename__ = "documents"

    id = Column(Integer, primary_key=True, autoincrement=True)
    database = Column(String(64), nullable=False)
    collection = Column(String(64), nullable=False)
    body = Column(JSON, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    __table_args__ = (Index("ix_documents_namespace", "database", "collection"),)
