"""Book CRUD endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from bookshelf_backend.api.dependencies import get_book_service
from bookshelf_backend.api.models import BookPayload, BookResponse
from bookshelf_backend.api.services import BookService
from bookshelf_backend.database import get_session

router = APIRouter(prefix="/books", tags=["books"])


@router.get("/", response_model=list[BookResponse])
def list_books(
    session: Session = Depends(get_session),
    book_service: BookService = Depends(get_book_service),
) -> list[BookResponse]:
    """Return every stored book."""

    books = book_service.list_books(session=session)
    return [BookResponse.model_validate(book) for book in books]


@router.get("/{book_id}", response_model=BookResponse)
def get_book(
    book_id: str,
    session: Session = Depends(get_session),
    book_service: BookService = Depends(get_book_service),
) -> BookResponse:
    """Return a single book by identifier."""

    book = book_service.get_book(session=session, book_id=book_id)
    return BookResponse.model_validate(book)


@router.post("/", response_model=BookResponse)
def create_book(
    payload: BookPayload,
    session: Session = Depends(get_session),
    book_service: BookService = Depends(get_book_service),
) -> BookResponse:
    """Validate and store a new book, echoing the stored entity."""

    book = book_service.create_book(session=session, payload=payload)
    return BookResponse.model_validate(book)


@router.put("/{book_id}", response_model=BookResponse)
def update_book(
    book_id: str,
    payload: BookPayload,
    session: Session = Depends(get_session),
    book_service: BookService = Depends(get_book_service),
) -> BookResponse:
    """Replace an existing book; the body id must match the path id."""

    book = book_service.update_book(session=session, book_id=book_id, payload=payload)
    return BookResponse.model_validate(book)


@router.delete("/{book_id}", response_model=BookResponse)
def delete_book(
    book_id: str,
    session: Session = Depends(get_session),
    book_service: BookService = Depends(get_book_service),
) -> BookResponse:
    """Delete a book and return its last stored state."""

    book = book_service.delete_book(session=session, book_id=book_id)
    return BookResponse.model_validate(book)
