"""Public exports for template application services."""

from template_service.domain.templates import (
    TemplateBackendError,
    TemplateError,
    TemplateNotFoundError,
    UnsupportedApiVersionError,
)
from .service import API_VERSION, TemplateService

__all__ = [
    "API_VERSION",
    "TemplateBackendError",
    "TemplateError",
    "TemplateNotFoundError",
    "TemplateService",
    "UnsupportedApiVersionError",
]
