from __future__ import annotations

from .logging import LOG_LEVEL_ENV_VAR, configure_logging, get_log_level

__all__ = ["LOG_LEVEL_ENV_VAR", "configure_logging", "get_log_level"]
