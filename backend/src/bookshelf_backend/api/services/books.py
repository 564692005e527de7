"""Book catalogue domain logic.

Every mutating operation follows the same pipeline: reject malformed input
before touching storage, persist through :class:`BookRepository`, and turn
database failures into :class:`PersistenceError` carrying the driver's reason.
Update and delete re-read the entity first so that a missing book is reported
separately from a failed write.
"""

from __future__ import annotations

import logging
import re
from datetime import UTC, datetime
from uuid import uuid4

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from bookshelf_backend.api.models import BookPayload
from bookshelf_backend.database import BookRepository, BookSchema
from bookshelf_backend.database.schemas.book import (
    BOOK_ID_MAX_LENGTH,
    BOOK_TEXT_MAX_LENGTH,
    ISBN_MAX_LENGTH,
)

logger = logging.getLogger(__name__)

DESCRIPTION_MAX_LENGTH = 5_000
EARLIEST_PUBLISHED_YEAR = 0
_ISBN10_PATTERN = re.compile(r"^\d{9}[\dX]$")
_ISBN13_PATTERN = re.compile(r"^\d{13}$")
_BOOK_ID_PATTERN = re.compile(r"^[A-Za-z0-9._~-]+$")


class BookServiceError(Exception):
    """Base class for failures surfaced by :class:`BookService`."""


class BookValidationError(BookServiceError):
    """Raised when a candidate book fails the validation rules."""

    def __init__(self, errors: list[str]) -> None:
        super().__init__("; ".join(errors))
        self.errors = errors


class IdentifierMismatchError(BookServiceError):
    """Raised when the path identifier differs from the body identifier."""

    def __init__(self, path_id: str, body_id: str | None) -> None:
        super().__init__(
            f"Path id {path_id!r} does not match body id {body_id!r}"
        )
        self.path_id = path_id
        self.body_id = body_id


class BookNotFoundError(BookServiceError):
    """Raised when no book is stored under the requested identifier."""

    def __init__(self, book_id: str) -> None:
        super().__init__(book_id)
        self.book_id = book_id


class PersistenceError(BookServiceError):
    """Raised when the database rejects or fails an operation."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def validate_book(payload: BookPayload) -> list[str]:
    """Return field-level error messages for *payload*; empty means valid."""
    errors: list[str] = []

    if payload.id is not None:
        if _is_blank(payload.id):
            errors.append("id must not be empty")
        elif len(payload.id) > BOOK_ID_MAX_LENGTH:
            errors.append(f"id must be at most {BOOK_ID_MAX_LENGTH} characters")
        elif not _BOOK_ID_PATTERN.match(payload.id) or not payload.id.strip("."):
            errors.append(
                "id may only contain letters, digits, '.', '_', '~' and '-'"
            )

    for name in ("title", "author"):
        value = getattr(payload, name)
        if _is_blank(value):
            errors.append(f"{name} must not be empty")
        elif len(value) > BOOK_TEXT_MAX_LENGTH:
            errors.append(f"{name} must be at most {BOOK_TEXT_MAX_LENGTH} characters")

    if payload.isbn is not None:
        digits = payload.isbn.replace("-", "").upper()
        if len(payload.isbn) > ISBN_MAX_LENGTH:
            errors.append(f"isbn must be at most {ISBN_MAX_LENGTH} characters")
        elif not (_ISBN10_PATTERN.match(digits) or _ISBN13_PATTERN.match(digits)):
            errors.append("isbn must contain 10 or 13 digits")

    if payload.published_year is not None:
        latest = datetime.now(UTC).year + 1
        if not EARLIEST_PUBLISHED_YEAR <= payload.published_year <= latest:
            errors.append(
                f"published_year must be between {EARLIEST_PUBLISHED_YEAR} and {latest}"
            )

    if payload.description is not None and len(payload.description) > DESCRIPTION_MAX_LENGTH:
        errors.append(
            f"description must be at most {DESCRIPTION_MAX_LENGTH} characters"
        )

    return list(dict.fromkeys(errors))


class BookService:
    """Coordinates validation and persistence for the book endpoints."""

    def list_books(self, *, session: Session) -> list[BookSchema]:
        repository = BookRepository(session)
        try:
            return repository.get_all()
        except SQLAlchemyError as exc:
            raise self._persistence_failure("list", exc) from exc

    def get_book(self, *, session: Session, book_id: str) -> BookSchema:
        return self._require_book(BookRepository(session), book_id)

    def create_book(self, *, session: Session, payload: BookPayload) -> BookSchema:
        self._ensure_valid(payload)

        repository = BookRepository(session)
        book = BookSchema(
            id=payload.id or uuid4().hex,
            **payload.descriptive_fields(),
        )
        try:
            book = repository.add(book)
        except SQLAlchemyError as exc:
            raise self._persistence_failure("create", exc, book_id=book.id) from exc

        logger.info("Created book %s", book.id, extra={"book_id": book.id})
        return book

    def update_book(
        self, *, session: Session, book_id: str, payload: BookPayload
    ) -> BookSchema:
        """Fully replace the descriptive fields of an existing book."""
        if payload.id != book_id:
            raise IdentifierMismatchError(book_id, payload.id)

        repository = BookRepository(session)
        book = self._require_book(repository, book_id)
        self._ensure_valid(payload)

        try:
            book = repository.replace(book, payload.descriptive_fields())
        except SQLAlchemyError as exc:
            raise self._persistence_failure("update", exc, book_id=book_id) from exc

        logger.info("Updated book %s", book_id, extra={"book_id": book_id})
        return book

    def delete_book(self, *, session: Session, book_id: str) -> BookSchema:
        """Remove a book and return the entity as it was before deletion."""
        repository = BookRepository(session)
        book = self._require_book(repository, book_id)

        try:
            repository.delete(book)
        except SQLAlchemyError as exc:
            raise self._persistence_failure("delete", exc, book_id=book_id) from exc

        logger.info("Deleted book %s", book_id, extra={"book_id": book_id})
        return book

    def _ensure_valid(self, payload: BookPayload) -> None:
        errors = validate_book(payload)
        if errors:
            raise BookValidationError(errors)

    def _require_book(self, repository: BookRepository, book_id: str) -> BookSchema:
        try:
            book = repository.get_by_id(book_id)
        except SQLAlchemyError as exc:
            raise self._persistence_failure("read", exc, book_id=book_id) from exc
        if book is None:
            raise BookNotFoundError(book_id)
        return book

    @staticmethod
    def _persistence_failure(
        operation: str, exc: SQLAlchemyError, *, book_id: str | None = None
    ) -> PersistenceError:
        reason = str(exc.orig) if getattr(exc, "orig", None) is not None else str(exc)
        logger.error(
            "Book %s failed: %s", operation, reason, extra={"book_id": book_id}
        )
        return PersistenceError(reason)
