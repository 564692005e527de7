"""Server-rendered consumer of the book API."""

from bookshelf_backend.web.app import create_web

__all__ = ["create_web"]
