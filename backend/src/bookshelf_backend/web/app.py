"""Factory for constructing the web consumer application."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from bookshelf_backend.api.routers import health_router
from bookshelf_backend.observability import setup_logging
from bookshelf_backend.settings import get_settings
from bookshelf_backend.web.client import BooksApiClient, build_http_client
from bookshelf_backend.web.routers import pages_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Open the shared API client for the lifetime of the app."""
    config = get_settings()
    setup_logging(config.log_level, config.log_format)
    app.state.books_client = BooksApiClient(build_http_client(config))
    logger.info("Bookshelf web started against %s", config.api_base_url)
    try:
        yield
    finally:
        app.state.books_client.close()
        logger.info("Bookshelf web shutting down")


def create_web() -> FastAPI:
    """Instantiate and configure the server-rendered consumer."""
    app = FastAPI(title="Bookshelf Web", lifespan=lifespan, docs_url=None, redoc_url=None)
    app.include_router(health_router)
    app.include_router(pages_router)
    return app
