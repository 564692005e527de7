"""Pydantic models for the book endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class BookPayload(BaseModel):
    """Request body accepted by the create and update endpoints.

    Only the shape is enforced here. Business rules are applied by
    :func:`bookshelf_backend.api.services.validate_book` so that the service
    decides between a rejected and a persisted request.
    """

    id: str | None = None
    title: str | None = None
    author: str | None = None
    isbn: str | None = None
    published_year: int | None = None
    description: str | None = None

    def descriptive_fields(self) -> dict[str, object]:
        """Return the replaceable columns, excluding the identifier."""
        return self.model_dump(exclude={"id"})


class BookResponse(BaseModel):
    """Public representation of a stored book."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    author: str
    isbn: str | None = None
    published_year: int | None = None
    description: str | None = None
    created_at: datetime
    updated_at: datetime
