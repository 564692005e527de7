"""Dependency providers for the web consumer routers."""

from __future__ import annotations

from fastapi import Request

from bookshelf_backend.web.client import BooksApiClient


def get_books_client(request: Request) -> BooksApiClient:
    """Return the API client created during application startup."""

    return request.app.state.books_client


__all__ = ["get_books_client"]
