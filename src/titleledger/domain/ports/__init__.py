"""Domain port definitions for adapters."""

from __future__ import annotations

from .codec import RecordCodec
from .store import HistoryEntry, KeyValueStore
from .unit_of_work import (
    LedgerRepositories,
    LedgerUnitOfWork,
    RepositoryCollection,
    UnitOfWork,
)

__all__ = [
    "HistoryEntry",
    "KeyValueStore",
    "LedgerRepositories",
    "LedgerUnitOfWork",
    "RecordCodec",
    "RepositoryCollection",
    "UnitOfWork",
]
