"""Database schema and repository tests."""

from typing import TYPE_CHECKING, cast

import pytest
from sqlalchemy.exc import IntegrityError

from bookshelf_backend.database import BookRepository, BookSchema, DatabaseService

if TYPE_CHECKING:
    from sqlalchemy import Table


def test_book_schema_uses_string_primary_key() -> None:
    table = cast("Table", BookSchema.__table__)

    assert [column.name for column in table.primary_key.columns] == ["id"]
    assert table.c.id.type.length == 64
    assert table.c.isbn.nullable
    assert not table.c.title.nullable


def test_repository_crud_cycle(database: DatabaseService) -> None:
    with database.session() as session:
        repository = BookRepository(session)
        stored = repository.add(BookSchema(id="b", title="Beta", author="Two"))
        repository.add(BookSchema(id="a", title="Alpha", author="One"))
        assert stored.created_at is not None

    with database.session() as session:
        repository = BookRepository(session)
        assert [book.id for book in repository.get_all()] == ["a", "b"]
        book = repository.get_by_id("a")
        assert book is not None
        repository.replace(book, {"title": "Alpha 2", "isbn": "9780306406157"})

    with database.session() as session:
        repository = BookRepository(session)
        book = repository.get_by_id("a")
        assert book is not None
        assert (book.title, book.isbn) == ("Alpha 2", "9780306406157")
        repository.delete(book)

    with database.session() as session:
        assert BookRepository(session).get_by_id("a") is None


def test_session_scope_rolls_back_on_error(database: DatabaseService) -> None:
    with database.session() as session:
        BookRepository(session).add(BookSchema(id="a", title="Alpha", author="One"))

    with pytest.raises(IntegrityError), database.session() as session:
        repository = BookRepository(session)
        repository.add(BookSchema(id="z", title="Zeta", author="Last"))
        repository.add(BookSchema(id="a", title="Again", author="One"))

    with database.session() as session:
        assert [book.id for book in BookRepository(session).get_all()] == ["a"]
