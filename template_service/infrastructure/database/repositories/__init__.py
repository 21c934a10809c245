"""Document store backed repository implementations."""

from .template_repository import DocumentTemplateRepository

__all__ = ["DocumentTemplateRepository"]
