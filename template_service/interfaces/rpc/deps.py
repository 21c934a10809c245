"""Reusable FastAPI dependencies."""

from fastapi import Request

from template_service.core.container import ApplicationContainer
from template_service.modules.templates import TemplateService


def get_container(request: Request) -> ApplicationContainer:
    return request.app.state.container


def get_template_service(request: Request) -> TemplateService:
    return get_container(request).template_service()


__all__ = ["get_container", "get_template_service"]
