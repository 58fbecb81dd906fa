"""Ambient settings for minigrep, loaded from the environment.

Only logging is configurable here. Values come from the process environment
first and from a ``.env`` file second. The ``.env`` file is read with
``dotenv_values`` so it never leaks into ``os.environ``.
"""

import logging
import os
from dataclasses import dataclass, field

from dotenv import dotenv_values

logger = logging.getLogger(__name__)

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_dotenv = dotenv_values()


def _getenv(key: str, default: str) -> str:
    """Look up ``key`` in the environment, then in ``.env``."""
    value = os.getenv(key)
    if value is None:
        value = _dotenv.get(key)
    return default if value is None else value


def _get_log_level_env(key: str, default: str = DEFAULT_LOG_LEVEL) -> str:
    """Safely get a logging level name from the environment with validation."""
    value = _getenv(key, default).strip().upper()
    if not isinstance(logging.getLevelName(value), int):
        logger.warning(f"Invalid {key}={value}, using default {default}")
        return default
    return value


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    log_level: str = field(
        default_factory=lambda: _get_log_level_env("MINIGREP_LOG_LEVEL")
    )
    log_format: str = field(
        default_factory=lambda: _getenv("MINIGREP_LOG_FORMAT", DEFAULT_LOG_FORMAT)
    )


settings = Settings()
