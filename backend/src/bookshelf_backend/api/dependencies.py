"""Dependency providers for FastAPI routers."""

from __future__ import annotations

from bookshelf_backend.api.services import BookService

_book_service = BookService()


def get_book_service() -> BookService:
    """Return the shared :class:`BookService` instance."""

    return _book_service


__all__ = ["get_book_service"]
