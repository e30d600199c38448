"""Location of the ledger database."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final

APP_DIR_NAME: Final[str] = "titleledger"
DEFAULT_DB_FILENAME: Final[str] = "titleledger.db"
DATA_DIR_ENV_VAR: Final[str] = "TITLELEDGER_DATA_DIR"
DATABASE_URI_ENV_VAR: Final[str] = "DATABASE_URI"


@dataclass(frozen=True, slots=True)
class StorageConfig:
    """Directory holding the SQLite ledger file."""

    data_dir: Path
    database_filename: str = DEFAULT_DB_FILENAME

    @property
    def database_file(self) -> Path:
        return self.data_dir.expanduser().resolve() / self.database_filename

    def database_uri(self, *, create_dir: bool = True) -> str:
        path = self.database_file
        if create_dir:
            path.parent.mkdir(parents=True, exist_ok=True)
        return f"sqlite+pysqlite:///{path}"


@dataclass(frozen=True, slots=True)
class DatabaseConfig:
    uri: str


def _platform_data_home() -> Path:
    if os.name == "nt":
        local = os.getenv("LOCALAPPDATA")
        return Path(local) if local else Path.home() / "AppData" / "Local"
    xdg = os.getenv("XDG_DATA_HOME")
    return Path(xdg) if xdg else Path.home() / ".local" / "share"


def get_storage_config() -> StorageConfig:
    configured = os.getenv(DATA_DIR_ENV_VAR)
    data_dir = Path(configured) if configured else _platform_data_home() / APP_DIR_NAME
    return StorageConfig(data_dir=data_dir)


def get_database_config(*, storage: StorageConfig | None = None) -> DatabaseConfig:
    """Return ``DATABASE_URI`` when set, else a SQLite file in the data directory."""

    uri = os.getenv(DATABASE_URI_ENV_VAR)
    if uri:
        return DatabaseConfig(uri=uri)
    return DatabaseConfig(uri=(storage or get_storage_config()).database_uri())
