"""Database connectivity helpers and configuration objects."""

from bookshelf_backend.database.base import BaseSchema
from bookshelf_backend.database.dependencies import (
    build_database_service,
    get_database,
    get_session,
)
from bookshelf_backend.database.repositories import BookRepository
from bookshelf_backend.database.schemas import BookSchema
from bookshelf_backend.database.service import DatabaseService
from bookshelf_backend.settings import BackendSettings, get_settings, settings

__all__ = [
    "BaseSchema",
    "BackendSettings",
    "BookRepository",
    "BookSchema",
    "DatabaseService",
    "build_database_service",
    "get_database",
    "get_session",
    "get_settings",
    "settings",
]
