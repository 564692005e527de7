"""Book database schema."""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from bookshelf_backend.database.base import BaseSchema

BOOK_ID_MAX_LENGTH = 64
BOOK_TEXT_MAX_LENGTH = 255
ISBN_MAX_LENGTH = 17


class BookSchema(BaseSchema):
    """SQLAlchemy model for catalogued books."""

    __tablename__ = "books"

    id: Mapped[str] = mapped_column(String(BOOK_ID_MAX_LENGTH), primary_key=True)
    title: Mapped[str] = mapped_column(String(BOOK_TEXT_MAX_LENGTH), nullable=False)
    author: Mapped[str] = mapped_column(
        String(BOOK_TEXT_MAX_LENGTH), nullable=False, index=True
    )
    isbn: Mapped[str | None] = mapped_column(String(ISBN_MAX_LENGTH), nullable=True)
    published_year: Mapped[int | None] = mapped_column(Integer, nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )
