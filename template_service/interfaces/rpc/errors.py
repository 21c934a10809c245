"""Mapping of service exceptions onto the RPC status vocabulary."""

from __future__ import annotations

import logging
from enum import Enum

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from template_service.modules.templates import TemplateBackendError, UnsupportedApiVersionError
from template_service.schemas import RpcErrorResponse

logger = logging.getLogger(__name__)

RPC_STATUS_HEADER = "rpc-status"


class RpcCode(str, Enum):
    OK = "OK"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    UNKNOWN = "UNKNOWN"
    UNIMPLEMENTED = "UNIMPLEMENTED"


HTTP_STATUS_BY_CODE: dict[RpcCode, int] = {
    RpcCode.OK: 200,
    RpcCode.INVALID_ARGUMENT: 400,
    RpcCode.UNKNOWN: 500,
    RpcCode.UNIMPLEMENTED: 501,
}


def code_for_status(status_code: int) -> RpcCode:
    for code, http_status in HTTP_STATUS_BY_CODE.items():
        if http_status == status_code:
            return code
    return RpcCode.OK if status_code < 400 else RpcCode.UNKNOWN


def rpc_error(code: RpcCode, message: str) -> JSONResponse:
    body = RpcErrorResponse(code=code.value, message=message)
    return JSONResponse(
        status_code=HTTP_STATUS_BY_CODE[code],
        content=body.model_dump(),
        headers={RPC_STATUS_HEADER: code.value},
    )


async def _unsupported_version(request: Request, exc: UnsupportedApiVersionError) -> JSONResponse:
    return rpc_error(RpcCode.UNIMPLEMENTED, str(exc))


async def _backend_failure(request: Request, exc: TemplateBackendError) -> JSONResponse:
    return rpc_error(RpcCode.UNKNOWN, str(exc))


async def _invalid_request(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
    )
    return rpc_error(RpcCode.INVALID_ARGUMENT, f"invalid request-> {details}")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(UnsupportedApiVersionError, _unsupported_version)
    app.add_exception_handler(TemplateBackendError, _backend_failure)
    app.add_exception_handler(RequestValidationError, _invalid_request)


__all__ = [
    "HTTP_STATUS_BY_CODE",
    "RPC_STATUS_HEADER",
    "RpcCode",
    "code_for_status",
    "register_exception_handlers",
    "rpc_error",
]
