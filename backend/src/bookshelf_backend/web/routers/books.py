"""Server-rendered pages driving the book API over HTTP.

Any response other than 200 from the API is shown as the same not-found
page; the real upstream status only appears in the logs.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from bookshelf_backend.web.client import ApiResult, BooksApiClient
from bookshelf_backend.web.dependencies import get_books_client

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
templates = Jinja2Templates(directory=TEMPLATES_DIR)

router = APIRouter(tags=["web"], default_response_class=HTMLResponse)


def _blank_to_none(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


def _form_to_payload(
    *,
    book_id: str | None,
    title: str,
    author: str,
    isbn: str,
    published_year: str,
    description: str,
) -> dict[str, Any]:
    year = _blank_to_none(published_year)
    return {
        "id": _blank_to_none(book_id),
        "title": title,
        "author": author,
        "isbn": _blank_to_none(isbn),
        # non-numeric input is forwarded as-is so the API rejects it
        "published_year": int(year) if year is not None and year.isdecimal() else year,
        "description": _blank_to_none(description),
    }


def _not_found(request: Request, result: ApiResult) -> HTMLResponse:
    logger.warning(
        "Book API answered %s for %s %s",
        result.status_code,
        request.method,
        request.url.path,
        extra={"status_code": result.status_code, "path": request.url.path},
    )
    return templates.TemplateResponse(
        request, "not_found.html", {}, status_code=status.HTTP_404_NOT_FOUND
    )


def _redirect(request: Request, name: str, **params: str) -> RedirectResponse:
    return RedirectResponse(
        url=str(request.url_for(name, **params)),
        status_code=status.HTTP_303_SEE_OTHER,
    )


@router.get("/", name="book_list")
def list_page(
    request: Request, client: BooksApiClient = Depends(get_books_client)
) -> HTMLResponse:
    result = client.list_books()
    if not result.ok:
        return _not_found(request, result)
    return templates.TemplateResponse(request, "books/list.html", {"books": result.body})


@router.get("/new", name="book_new")
def new_page(request: Request) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "books/form.html",
        {"book": {}, "action": request.url_for("book_create"), "is_new": True},
    )


@router.post("/new", name="book_create", response_model=None)
def create_submit(
    request: Request,
    book_id: str = Form("", alias="id"),
    title: str = Form(""),
    author: str = Form(""),
    isbn: str = Form(""),
    published_year: str = Form(""),
    description: str = Form(""),
    client: BooksApiClient = Depends(get_books_client),
) -> HTMLResponse | RedirectResponse:
    """Forward the create form to the API and open the stored book."""
    payload = _form_to_payload(
        book_id=book_id,
        title=title,
        author=author,
        isbn=isbn,
        published_year=published_year,
        description=description,
    )
    result = client.create_book(payload)
    if not result.ok:
        return _not_found(request, result)
    return _redirect(request, "book_detail", book_id=result.body["id"])


@router.get("/books/{book_id}", name="book_detail")
def detail_page(
    request: Request,
    book_id: str,
    client: BooksApiClient = Depends(get_books_client),
) -> HTMLResponse:
    result = client.get_book(book_id)
    if not result.ok:
        return _not_found(request, result)
    return templates.TemplateResponse(request, "books/detail.html", {"book": result.body})


@router.get("/books/{book_id}/edit", name="book_edit")
def edit_page(
    request: Request,
    book_id: str,
    client: BooksApiClient = Depends(get_books_client),
) -> HTMLResponse:
    result = client.get_book(book_id)
    if not result.ok:
        return _not_found(request, result)
    return templates.TemplateResponse(
        request,
        "books/form.html",
        {
            "book": result.body,
            "action": request.url_for("book_update", book_id=book_id),
            "is_new": False,
        },
    )


@router.post("/books/{book_id}/edit", name="book_update", response_model=None)
def edit_submit(
    request: Request,
    book_id: str,
    title: str = Form(""),
    author: str = Form(""),
    isbn: str = Form(""),
    published_year: str = Form(""),
    description: str = Form(""),
    client: BooksApiClient = Depends(get_books_client),
) -> HTMLResponse | RedirectResponse:
    """Replace the book with the submitted form values."""
    payload = _form_to_payload(
        book_id=book_id,
        title=title,
        author=author,
        isbn=isbn,
        published_year=published_year,
        description=description,
    )
    result = client.update_book(book_id, payload)
    if not result.ok:
        return _not_found(request, result)
    return _redirect(request, "book_detail", book_id=book_id)


@router.post("/books/{book_id}/delete", name="book_delete", response_model=None)
def delete_submit(
    request: Request,
    book_id: str,
    client: BooksApiClient = Depends(get_books_client),
) -> HTMLResponse | RedirectResponse:
    result = client.delete_book(book_id)
    if not result.ok:
        return _not_found(request, result)
    return _redirect(request, "book_list")
