"""Declarative base shared by the book schema and Alembic."""

from sqlalchemy.orm import DeclarativeBase


class BaseSchema(DeclarativeBase):
    """Base class whose metadata holds every table of the service."""
