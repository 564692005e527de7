"""Bookshelf backend package wiring and entrypoints."""

from bookshelf_backend.main import run_dev, run_prod, run_web_dev, run_web_prod
from bookshelf_backend.settings import BackendSettings, get_settings, settings

main = run_dev

__all__ = [
    "BackendSettings",
    "get_settings",
    "main",
    "run_dev",
    "run_prod",
    "run_web_dev",
    "run_web_prod",
    "settings",
]
