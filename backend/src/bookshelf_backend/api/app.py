"""Factory for constructing the FastAPI application."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bookshelf_backend.api.error_handlers import register_error_handlers
from bookshelf_backend.api.routers import books_router, health_router
from bookshelf_backend.database import build_database_service
from bookshelf_backend.observability import setup_logging
from bookshelf_backend.settings import get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Startup/shutdown lifecycle."""
    config = get_settings()
    setup_logging(config.log_level, config.log_format)
    if config.database_auto_create:
        build_database_service(config.database_url).create_schema()
        logger.info("Database schema ensured")
    logger.info("Bookshelf API started")
    yield
    logger.info("Bookshelf API shutting down")


def create_api() -> FastAPI:
    """Instantiate and configure the FastAPI application."""
    config = get_settings()
    app = FastAPI(title="Bookshelf API", lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)
    app.include_router(health_router)
    app.include_router(books_router)
    return app
