"""FastAPI dependencies giving the book routes a database session."""

from collections.abc import Iterator
from functools import cache
from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from bookshelf_backend.database.service import DatabaseService
from bookshelf_backend.settings import BackendSettings, get_settings

SettingsDep = Annotated[BackendSettings, Depends(get_settings)]


@cache
def build_database_service(database_url: str) -> DatabaseService:
    """Return the process-wide :class:`DatabaseService` for *database_url*.

    Shared by the request dependency and the API lifespan, which calls
    :meth:`DatabaseService.create_schema` on it when ``database_auto_create``
    is enabled. Tests clear the cache to drop engines between runs.
    """
    return DatabaseService(database_url)


def get_database(settings: SettingsDep) -> DatabaseService:
    """Resolve the books database from the configured URL."""
    return build_database_service(settings.database_url)


def get_session(
    db: Annotated[DatabaseService, Depends(get_database)],
) -> Iterator[Session]:
    """Open one transaction per request; rolled back if the route raises."""
    with db.session() as session:
        yield session
