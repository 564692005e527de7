"""SQLAlchemy schemas backing the persistence layer."""

from bookshelf_backend.database.schemas.book import BookSchema

__all__ = ["BookSchema"]
