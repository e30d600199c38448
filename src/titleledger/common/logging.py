"""Root-logger setup for the ledger CLI."""

from __future__ import annotations

import logging
import os

from titleledger.config.errors import ConfigurationError

LOG_LEVEL_ENV_VAR = "TITLELEDGER_LOG_LEVEL"


def get_log_level(default: int = logging.INFO) -> int:
    """Return the level named by ``TITLELEDGER_LOG_LEVEL``, or ``default`` when unset."""

    value = os.getenv(LOG_LEVEL_ENV_VAR)
    if value is None or not value.strip():
        return default
    level = logging.getLevelNamesMapping().get(value.strip().upper())
    if level is None:
        raise ConfigurationError(f"Unknown log level in {LOG_LEVEL_ENV_VAR}: {value}")
    return level


def configure_logging(*, level: int | None = None, force: bool = False) -> None:
    """Send ledger log records to stderr as ``time LEVEL [logger] message``.

    An explicit ``level`` wins over the environment. Without ``force`` an already
    configured root logger is left alone.
    """

    logging.basicConfig(
        level=get_log_level() if level is None else level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
