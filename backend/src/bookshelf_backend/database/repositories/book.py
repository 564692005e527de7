"""Repository helpers for working with books."""

from collections.abc import Mapping
from typing import Any

from sqlalchemy import select
from sqlalchemy.orm import Session

from bookshelf_backend.database.schemas import BookSchema


class BookRepository:
    """Encapsulates persistence operations for :class:`BookSchema`."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get_all(self) -> list[BookSchema]:
        """Return every stored book ordered by identifier."""
        stmt = select(BookSchema).order_by(BookSchema.id)
        return list(self._session.scalars(stmt))

    def get_by_id(self, book_id: str) -> BookSchema | None:
        """Return book entity by its identifier."""
        return self._session.get(BookSchema, book_id)

    def add(self, book: BookSchema) -> BookSchema:
        """Add new book to database."""
        self._session.add(book)
        self._session.flush()
        self._session.refresh(book)
        return book

    def replace(self, book: BookSchema, values: Mapping[str, Any]) -> BookSchema:
        """Overwrite the descriptive fields of an existing book."""
        for name, value in values.items():
            setattr(book, name, value)
        self._session.flush()
        self._session.refresh(book)
        return book

    def delete(self, book: BookSchema) -> None:
        """Remove book from database."""
        self._session.delete(book)
        self._session.flush()
