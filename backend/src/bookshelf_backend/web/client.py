"""HTTP client used by the web consumer to reach the book API."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any
from urllib.parse import quote

import httpx
from fastapi import status

from bookshelf_backend.settings import BackendSettings, get_settings

logger = logging.getLogger(__name__)

BOOKS_PATH = "/books"


@dataclass(slots=True)
class ApiResult:
    """Outcome of a single API call."""

    status_code: int
    body: Any = None

    @property
    def ok(self) -> bool:
        """Only a plain 200 counts as success for the consumer."""
        return self.status_code == status.HTTP_200_OK


def build_http_client(settings: BackendSettings | None = None) -> httpx.Client:
    """Create an :class:`httpx.Client` pointed at the configured API."""
    config = settings or get_settings()
    return httpx.Client(
        base_url=config.api_base_url,
        timeout=config.api_timeout_seconds,
    )


class BooksApiClient:
    """Thin wrapper mapping the book endpoints onto :class:`ApiResult` values."""

    def __init__(self, http: httpx.Client) -> None:
        self._http = http

    def list_books(self) -> ApiResult:
        return self._request("GET", f"{BOOKS_PATH}/")

    def get_book(self, book_id: str) -> ApiResult:
        return self._request("GET", self._book_path(book_id))

    def create_book(self, data: dict[str, Any]) -> ApiResult:
        return self._request("POST", f"{BOOKS_PATH}/", json=data)

    def update_book(self, book_id: str, data: dict[str, Any]) -> ApiResult:
        return self._request("PUT", self._book_path(book_id), json=data)

    def delete_book(self, book_id: str) -> ApiResult:
        return self._request("DELETE", self._book_path(book_id))

    def close(self) -> None:
        self._http.close()

    @staticmethod
    def _book_path(book_id: str) -> str:
        return f"{BOOKS_PATH}/{quote(book_id, safe='')}"

    def _request(
        self, method: str, path: str, *, json: dict[str, Any] | None = None
    ) -> ApiResult:
        try:
            response = self._http.request(method, path, json=json)
        except httpx.HTTPError as exc:
            logger.warning("Book API %s %s unreachable: %s", method, path, exc)
            return ApiResult(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE, body=str(exc)
            )

        content_type = response.headers.get("content-type", "")
        if content_type.startswith("application/json"):
            body: Any = response.json()
        else:
            body = response.text
        return ApiResult(status_code=response.status_code, body=body)


__all__ = ["ApiResult", "BooksApiClient", "build_http_client"]
