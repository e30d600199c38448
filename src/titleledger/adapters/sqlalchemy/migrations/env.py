"""Alembic environment for the ledger tables."""

from __future__ import annotations

import logging
from logging.config import fileConfig
from pathlib import Path
from typing import TYPE_CHECKING

from alembic import context
from sqlalchemy import create_engine, pool

from titleledger.adapters.sqlalchemy.mappings import metadata
from titleledger.config import get_database_config

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection

config = context.config

if config.config_file_name is not None and Path(config.config_file_name).suffix == ".ini":
    fileConfig(config.config_file_name, disable_existing_loggers=False)

log = logging.getLogger("alembic.env")


def _database_url() -> str:
    return config.get_main_option("sqlalchemy.url") or get_database_config().uri


def _migrate(**options: object) -> None:
    context.configure(
        target_metadata=metadata,
        render_as_batch=True,
        compare_type=True,
        **options,
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_offline() -> None:
    """Emit the migration SQL without a database connection."""

    _migrate(url=_database_url(), literal_binds=True)


def run_migrations_online() -> None:
    """Migrate through the caller's connection, or a short-lived engine of our own."""

    connection: Connection | None = config.attributes.get("connection")
    if connection is not None:
        _migrate(connection=connection)
        return

    engine = create_engine(_database_url(), poolclass=pool.NullPool, future=True)
    try:
        with engine.connect() as own_connection:
            _migrate(connection=own_connection)
    finally:
        engine.dispose()


if context.is_offline_mode():
    log.info("Generating ledger migration SQL")
    run_migrations_offline()
else:
    run_migrations_online()
