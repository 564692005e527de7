"""Repositories wrapping SQLAlchemy sessions."""

from bookshelf_backend.database.repositories.book import BookRepository

__all__ = ["BookRepository"]
