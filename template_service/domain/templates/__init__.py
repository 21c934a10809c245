"""Template domain models, exceptions and repository protocol."""

from .exceptions import (
    TemplateBackendError,
    TemplateError,
    TemplateNotFoundError,
    UnsupportedApiVersionError,
)
from .models import Template
from .repository import TemplateRepository

__all__ = [
    "Template",
    "TemplateBackendError",
    "TemplateError",
    "TemplateNotFoundError",
    "TemplateRepository",
    "UnsupportedApiVersionError",
]
