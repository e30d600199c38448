"""Application configuration helpers."""

from __future__ import annotations

from .errors import ConfigurationError
from .ledger import LedgerConfig, get_ledger_config
from .storage import DatabaseConfig, StorageConfig, get_database_config, get_storage_config

__all__ = [
    "ConfigurationError",
    "DatabaseConfig",
    "LedgerConfig",
    "StorageConfig",
    "get_database_config",
    "get_ledger_config",
    "get_storage_config",
]
