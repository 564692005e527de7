"""Test configuration and fixtures for the backend test suite."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from fastapi.testclient import TestClient

from bookshelf_backend.api import create_api
from bookshelf_backend.database import DatabaseService, get_database
from bookshelf_backend.settings import get_settings

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture(autouse=True)
def _mock_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Ensure settings are loaded with predictable values during tests."""
    monkeypatch.setenv("DATABASE_URL", "sqlite://")
    monkeypatch.setenv("API_BASE_URL", "http://testserver")
    monkeypatch.setenv("LOG_FORMAT", "text")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def database() -> Iterator[DatabaseService]:
    """In-memory SQLite database with the books table created."""
    db = DatabaseService("sqlite://")
    db.create_schema()
    yield db
    db.dispose()


@pytest.fixture
def api_client(database: DatabaseService) -> Iterator[TestClient]:
    app = create_api()
    app.dependency_overrides[get_database] = lambda: database
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
