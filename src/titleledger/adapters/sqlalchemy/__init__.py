"""SQLAlchemy adapter package for titleledger."""

from __future__ import annotations

from .mappings import ledger_history_table, ledger_state_table, metadata
from .store import SqlAlchemyKeyValueStore
from .unit_of_work import (
    SqlAlchemyLedgerUnitOfWork,
    StartupError,
    configured_engine,
    is_started,
    shutdown,
    startup,
)

__all__ = [
    "SqlAlchemyKeyValueStore",
    "SqlAlchemyLedgerUnitOfWork",
    "StartupError",
    "configured_engine",
    "is_started",
    "ledger_history_table",
    "ledger_state_table",
    "metadata",
    "shutdown",
    "startup",
]
