"""Request logging interceptor for RPC calls."""

from __future__ import annotations

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from .errors import RPC_STATUS_HEADER, RpcCode, code_for_status

logger = logging.getLogger(__name__)

_LEVEL_BY_CODE = {
    RpcCode.OK: logging.INFO,
    RpcCode.INVALID_ARGUMENT: logging.INFO,
    RpcCode.UNIMPLEMENTED: logging.WARNING,
    RpcCode.UNKNOWN: logging.ERROR,
}


class RpcLoggingMiddleware(BaseHTTPMiddleware):
    """Logs every call with its method, RPC code and duration."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        started = time.perf_counter()
        method = request.url.path
        try:
            response = await call_next(request)
        except Exception:
            elapsed = (time.perf_counter() - started) * 1000
            logger.exception("finished call method=%s code=%s time_ms=%.3f", method, RpcCode.UNKNOWN.value, elapsed)
            raise

        header = response.headers.get(RPC_STATUS_HEADER)
        try:
            code = RpcCode(header) if header else code_for_status(response.status_code)
        except ValueError:
            code = code_for_status(response.status_code)
        if header is None:
            response.headers[RPC_STATUS_HEADER] = code.value

        elapsed = (time.perf_counter() - started) * 1000
        logger.log(
            _LEVEL_BY_CODE.get(code, logging.INFO),
            "finished call method=%s code=%s time_ms=%.3f",
            method,
            code.value,
            elapsed,
        )
        return response
