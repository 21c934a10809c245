"""Pydantic request and response messages of the template RPC service."""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class TemplateMessage(BaseModel):
    id: str = ""
    items: list[Any] = Field(default_factory=list)
    created: Optional[datetime] = None
    updated: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class CreateRequest(BaseModel):
    api: str = ""
    template: TemplateMessage = Field(default_factory=TemplateMessage)


class CreateResponse(BaseModel):
    api: str
    id: str


class ReadRequest(BaseModel):
    api: str = ""
    id: str = ""


class ReadResponse(BaseModel):
    api: str
    template: TemplateMessage


class UpdateRequest(BaseModel):
    api: str = ""
    template: TemplateMessage = Field(default_factory=TemplateMessage)


class UpdateResponse(BaseModel):
    api: str
    updated: int


class DeleteRequest(BaseModel):
    api: str = ""
    id: str = ""


class DeleteResponse(BaseModel):
    api: str
    deleted: int


class ListRequest(BaseModel):
    api: str = ""


class ListResponse(BaseModel):
    api: str
    templates: list[TemplateMessage] = Field(default_factory=list)


class RpcErrorResponse(BaseModel):
    code: str
    message: str


__all__ = [
    "CreateRequest",
    "CreateResponse",
    "DeleteRequest",
    "DeleteResponse",
    "ListRequest",
    "ListResponse",
    "ReadRequest",
    "ReadResponse",
    "RpcErrorResponse",
    "TemplateMessage",
    "UpdateRequest",
    "UpdateResponse",
]
