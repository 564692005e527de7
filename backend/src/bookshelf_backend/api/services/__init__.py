"""Service layer for API-specific business logic."""

from bookshelf_backend.api.services.books import (
    BookNotFoundError,
    BookService,
    BookServiceError,
    BookValidationError,
    IdentifierMismatchError,
    PersistenceError,
    validate_book,
)

__all__ = [
    "BookNotFoundError",
    "BookService",
    "BookServiceError",
    "BookValidationError",
    "IdentifierMismatchError",
    "PersistenceError",
    "validate_book",
]
