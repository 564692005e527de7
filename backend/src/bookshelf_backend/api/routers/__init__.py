"""Route definitions for public HTTP endpoints."""

from bookshelf_backend.api.routers.books import router as books_router
from bookshelf_backend.api.routers.health import router as health_router

__all__ = ["books_router", "health_router"]
