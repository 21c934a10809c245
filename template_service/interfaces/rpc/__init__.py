"""RPC surface of the template service."""

from fastapi import APIRouter

from .errors import RpcCode, register_exception_handlers
from .middleware import RpcLoggingMiddleware
from .routers import templates


def create_rpc_router() -> APIRouter:
    router = APIRouter()
    router.include_router(templates.router, prefix=f"/{templates.SERVICE_NAME}", tags=["templates"])
    return router


__all__ = [
    "RpcCode",
    "RpcLoggingMiddleware",
    "create_rpc_router",
    "register_exception_handlers",
]
