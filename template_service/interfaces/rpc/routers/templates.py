"""Template service RPC methods."""

from fastapi import APIRouter, Depends

from template_service.interfaces.rpc.deps import get_template_service
from template_service.modules.templates import TemplateService
from template_service.schemas import (
    CreateRequest,
    CreateResponse,
    DeleteRequest,
    DeleteResponse,
    ListRequest,
    ListResponse,
    ReadRequest,
    ReadResponse,
    RpcErrorResponse,
    TemplateMessage,
    UpdateRequest,
    UpdateResponse,
)

SERVICE_NAME = "v1.TemplateService"

router = APIRouter(
    responses={
        400: {"model": RpcErrorResponse},
        500: {"model": RpcErrorResponse},
        501: {"model": RpcErrorResponse},
    },
)


@router.post("/Create", response_model=CreateResponse, summary="Create a template")
async def create(payload: CreateRequest, service: TemplateService = Depends(get_template_service)):
    template_id = await service.create_template(payload.api, payload.template.items)
    return CreateResponse(api=service.api_version, id=template_id)


@router.post("/Read", response_model=ReadResponse, summary="Read a template by id")
async def read(payload: ReadRequest, service: TemplateService = Depends(get_template_service)):
    template = await service.read_template(payload.api, payload.id)
    return ReadResponse(api=service.api_version, template=TemplateMessage.model_validate(template))


@router.post("/Update", response_model=UpdateResponse, summary="Replace the items of a template")
async def update(payload: UpdateRequest, service: TemplateService = Depends(get_template_service)):
    modified = await service.update_template(payload.api, payload.template.id, payload.template.items)
    return UpdateResponse(api=service.api_version, updated=modified)


@router.post("/Delete", response_model=DeleteResponse, summary="Delete a template by id")
async def delete(payload: DeleteRequest, service: TemplateService = Depends(get_template_service)):
    deleted = await service.delete_template(payload.api, payload.id)
    return DeleteResponse(api=service.api_version, deleted=deleted)


@router.post("/List", response_model=ListResponse, summary="List every template")
async def list_templates(payload: ListRequest, service: TemplateService = Depends(get_template_service)):
    templates = await service.list_templates(payload.api)
    return ListResponse(
        api=service.api_version,
        templates=[TemplateMessage.model_validate(template) for template in templates],
    )
