"""Alembic environment for the books schema."""

from __future__ import annotations

from logging.config import fileConfig

from alembic import context

from bookshelf_backend.database import BaseSchema, DatabaseService, get_settings

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

# the URL always comes from BackendSettings, never from alembic.ini
database_url = get_settings().database_url
target_metadata = BaseSchema.metadata


def run_migrations_offline() -> None:
    """Emit SQL for the books schema without a live connection."""

    context.configure(
        url=database_url,
        target_metadata=target_metadata,
        literal_binds=True,
        compare_type=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Apply migrations through the same engine setup the API uses."""

    database = DatabaseService(database_url)
    try:
        with database.engine.connect() as connection:
            context.configure(
                connection=connection,
                target_metadata=target_metadata,
                compare_type=True,
            )

            with context.begin_transaction():
                context.run_migrations()
    finally:
        database.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
