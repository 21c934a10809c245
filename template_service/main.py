"""Process entry point: wires settings, logging, the document store and the RPC server."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from contextlib import asynccontextmanager
from typing import Optional, Sequence

from fastapi import FastAPI

from template_service import __version__
from template_service.core.config import Settings, get_settings
from template_service.core.container import ApplicationContainer
from template_service.core.logging import configure_logging
from template_service.interfaces.rpc import RpcLoggingMiddleware, create_rpc_router, register_exception_handlers
from template_service.server import serve

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    container: Optional[ApplicationContainer] = None,
) -> FastAPI:
    settings = settings or get_settings()
    container = container or ApplicationContainer.from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await container.startup()
        try:
            yield
        finally:
            await container.shutdown()

    app = FastAPI(
        title=settings.project_name,
        description="Template CRUD service exposed as RPC methods",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.container = container

    app.add_middleware(RpcLoggingMiddleware)
    register_exception_handlers(app)
    app.include_router(create_rpc_router())
    return app


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the template RPC server.")
    parser.add_argument("--host", help="address to bind (overrides SERVER__HOST)")
    parser.add_argument("--port", type=int, help="TCP port to bind (overrides SERVER__PORT)")
    parser.add_argument("--database-url", help="SQLAlchemy async URL (overrides DATABASE__URL)")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="log level (overrides LOGGING__LEVEL)",
    )
    return parser.parse_args(argv)


def apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    server = settings.server.model_copy(
        update={key: value for key, value in (("host", args.host), ("port", args.port)) if value is not None}
    )
    database = settings.database
    if args.database_url:
        database = database.model_copy(update={"url": args.database_url})
    logging_settings = settings.logging
    if args.log_level:
        logging_settings = logging_settings.model_copy(update={"level": args.log_level})
    return settings.model_copy(update={"server": server, "database": database, "logging": logging_settings})


def main(argv: Optional[Sequence[str]] = None) -> int:
    settings = apply_overrides(get_settings(), parse_args(argv))
    configure_logging(settings)

    try:
        app = create_app(settings)
        asyncio.run(serve(app, settings))
    except SystemExit as exc:
        if exc.code in (0, None):
            return 0
        logger.error("template service failed to start (exit status %s)", exc.code)
        return 1
    except Exception:
        logger.exception("template service terminated with an error")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
