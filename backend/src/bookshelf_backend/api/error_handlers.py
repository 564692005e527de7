"""Exception handlers translating service failures into HTTP responses.

Error bodies are plain text: validation messages one per line, the mismatch
message for identifier conflicts, an empty body for missing books and the
database reason for persistence failures.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse

from bookshelf_backend.api.services import (
    BookNotFoundError,
    BookValidationError,
    IdentifierMismatchError,
    PersistenceError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all book service error handlers on the FastAPI app."""

    @app.exception_handler(BookValidationError)
    async def book_validation_error_handler(
        request: Request, exc: BookValidationError
    ) -> PlainTextResponse:
        logger.warning(
            "Rejected book on %s: %s",
            request.url.path,
            exc,
            extra={"path": request.url.path, "error_count": len(exc.errors)},
        )
        return PlainTextResponse(
            "\n".join(exc.errors), status_code=status.HTTP_400_BAD_REQUEST
        )

    @app.exception_handler(IdentifierMismatchError)
    async def identifier_mismatch_handler(
        request: Request, exc: IdentifierMismatchError
    ) -> PlainTextResponse:
        logger.warning(
            "Identifier mismatch on %s: %s",
            request.url.path,
            exc,
            extra={"path": request.url.path},
        )
        return PlainTextResponse(str(exc), status_code=status.HTTP_400_BAD_REQUEST)

    @app.exception_handler(BookNotFoundError)
    async def book_not_found_handler(
        request: Request, exc: BookNotFoundError
    ) -> PlainTextResponse:
        logger.info("Book %s not found", exc.book_id, extra={"book_id": exc.book_id})
        return PlainTextResponse("", status_code=status.HTTP_404_NOT_FOUND)

    @app.exception_handler(PersistenceError)
    async def persistence_error_handler(
        request: Request, exc: PersistenceError
    ) -> PlainTextResponse:
        logger.error(
            "Persistence failure on %s: %s",
            request.url.path,
            exc.reason,
            extra={"path": request.url.path},
        )
        return PlainTextResponse(
            exc.reason, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> PlainTextResponse:
        lines = [
            f"{'.'.join(str(loc) for loc in error['loc'])}: {error['msg']}"
            for error in exc.errors()
        ]
        logger.warning(
            "Malformed request on %s: %s",
            request.url.path,
            lines,
            extra={"path": request.url.path, "error_count": len(lines)},
        )
        return PlainTextResponse(
            "\n".join(lines), status_code=status.HTTP_400_BAD_REQUEST
        )


__all__ = ["register_error_handlers"]
