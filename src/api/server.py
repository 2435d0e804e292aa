"""FastAPI application factory for the snippets service."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request

from ..logging_setup import configure_logging
from ..mcpserver import ServiceContext, create_server
from ..store import ResourceStore, create_store
from .route import router
from .service import ApiSettings

logger = logging.getLogger("snippets")


def create_app(
    settings: ApiSettings | None = None,
    store: ResourceStore | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application."""

    settings = settings or ApiSettings.from_env()
    configure_logging(settings.log_level)
    store = store if store is not None else create_store(settings.store_config())

    # setup mcp
    mcp_app = create_server(ServiceContext(settings=settings, store=store)).http_app("/")

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        try:
            async with mcp_app.lifespan(app):
                yield
        finally:
            store.close()

    app = FastAPI(
        title="Snippet Store API",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = store
    app.include_router(router)

    @app.middleware("http")
    async def access_log(request: Request, call_next):
        response = await call_next(request)
        logger.info("%s %s [%d]", request.method, request.url.path, response.status_code)
        return response

    # mount mcp
    app.mount("/mcp", mcp_app)

    logger.info(
        "Snippet store ready (backend=%s, key scheme=%s)",
        settings.store_backend,
        settings.key_scheme.value,
    )
    return app


__all__ = ["create_app"]
