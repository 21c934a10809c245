"""RPC server runtime: binds the listener and stops gracefully on interrupt."""

from __future__ import annotations

import asyncio
import contextlib
import logging
import signal
from typing import Iterator

import uvicorn
from fastapi import FastAPI

from template_service.core.config import Settings

logger = logging.getLogger(__name__)

SHUTDOWN_SIGNALS = (signal.SIGINT, signal.SIGTERM)


class TemplateServer(uvicorn.Server):
    """uvicorn server whose shutdown is driven by an external event."""

    @contextlib.contextmanager
    def capture_signals(self) -> Iterator[None]:
        yield


def install_shutdown_signals(shutdown: asyncio.Event) -> None:
    loop = asyncio.get_running_loop()
    for sig in SHUTDOWN_SIGNALS:
        try:
            loop.add_signal_handler(sig, shutdown.set)
        except NotImplementedError:
            signal.signal(sig, lambda *_: loop.call_soon_threadsafe(shutdown.set))


def build_server(app: FastAPI, settings: Settings) -> TemplateServer:
    config = uvicorn.Config(
        app,
        host=settings.host,
        port=settings.port,
        log_config=None,
        access_log=False,
        lifespan="on",
        timeout_graceful_shutdown=settings.server.graceful_timeout,
    )
    return TemplateServer(config)


async def _stop_when_requested(server: TemplateServer, shutdown: asyncio.Event) -> None:
    await shutdown.wait()
    # uvicorn exposes no startup event and skips its shutdown sequence when told
    # to exit before startup completes
    while not server.started:
        await asyncio.sleep(0.05)
    logger.warning("shutting down RPC server...")
    server.should_exit = True


async def serve(app: FastAPI, settings: Settings, *, shutdown: asyncio.Event | None = None) -> None:
    """Serve until ``shutdown`` is set, then drain in-flight requests and return.

    When no event is given, SIGINT and SIGTERM set one.
    """
    if shutdown is None:
        shutdown = asyncio.Event()
        install_shutdown_signals(shutdown)

    server = build_server(app, settings)
    watcher = asyncio.create_task(_stop_when_requested(server, shutdown))
    logger.info("starting RPC server on %s:%s", settings.host, settings.port)
    try:
        await server.serve()
    finally:
        watcher.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await watcher
    if not server.started:
        raise RuntimeError(f"RPC server failed to start on {settings.host}:{settings.port}")
    logger.info("RPC server stopped")
