"""Bookshelf entrypoints for the API and the web consumer."""

from __future__ import annotations

import uvicorn

from bookshelf_backend.api import create_api
from bookshelf_backend.settings import get_settings
from bookshelf_backend.web import create_web

app = create_api()
web_app = create_web()


def _run_uvicorn(target: str, *, host: str, port: int, reload: bool) -> None:
    """Start uvicorn with a consistent configuration."""
    uvicorn.run(target, host=host, port=port, reload=reload)


def run_dev() -> None:
    """Run the development API server with auto-reload."""
    config = get_settings()
    _run_uvicorn(
        "bookshelf_backend.main:app",
        host=config.api_host,
        port=config.api_port,
        reload=True,
    )


def run_prod() -> None:
    """Run the production API server without auto-reload."""
    config = get_settings()
    _run_uvicorn(
        "bookshelf_backend.main:app",
        host=config.api_host,
        port=config.api_port,
        reload=False,
    )


def run_web_dev() -> None:
    """Run the development web consumer with auto-reload."""
    config = get_settings()
    _run_uvicorn(
        "bookshelf_backend.main:web_app",
        host=config.web_host,
        port=config.web_port,
        reload=True,
    )


def run_web_prod() -> None:
    """Run the production web consumer without auto-reload."""
    config = get_settings()
    _run_uvicorn(
        "bookshelf_backend.main:web_app",
        host=config.web_host,
        port=config.web_port,
        reload=False,
    )
