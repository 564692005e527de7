from __future__ import annotations

import json

import httpx
import pytest

from bookshelf_backend.settings import get_settings
from bookshelf_backend.web.client import ApiResult, BooksApiClient, build_http_client


def _client(handler) -> BooksApiClient:
    transport = httpx.MockTransport(handler)
    return BooksApiClient(httpx.Client(transport=transport, base_url="http://api"))


def test_get_book_parses_json_body() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"id": "a b", "title": "T"})

    result = _client(handler).get_book("a b")

    assert result == ApiResult(status_code=200, body={"id": "a b", "title": "T"})
    assert result.ok
    assert seen[0].method == "GET"
    assert seen[0].url.raw_path == b"/books/a%20b"


def test_create_book_sends_json_payload() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.method == "POST"
        assert request.url.path == "/books/"
        return httpx.Response(200, json=json.loads(request.content))

    result = _client(handler).create_book({"id": "1", "title": "A"})

    assert result.body == {"id": "1", "title": "A"}


@pytest.mark.parametrize("status_code", [201, 400, 404, 500])
def test_non_200_is_not_ok(status_code: int) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, text="nope")

    result = _client(handler).delete_book("1")

    assert not result.ok
    assert result.status_code == status_code
    assert result.body == "nope"


def test_transport_error_becomes_service_unavailable() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    result = _client(handler).list_books()

    assert result.status_code == 503
    assert not result.ok
    assert "connection refused" in result.body


def test_build_http_client_uses_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("API_BASE_URL", "http://books.internal:9000")
    monkeypatch.setenv("API_TIMEOUT_SECONDS", "2.5")
    get_settings.cache_clear()

    with build_http_client() as http:
        assert http.base_url.host == "books.internal"
        assert http.base_url.port == 9000
        assert http.timeout.read == 2.5
