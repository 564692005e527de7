"""Route definitions for the server-rendered pages."""

from bookshelf_backend.web.routers.books import router as pages_router

__all__ = ["pages_router"]
