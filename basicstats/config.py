"""Runtime settings read from environment variables."""
from __future__ import annotations

import logging
import os

from basicstats.services.errors import ConfigurationError

SERVICE_NAME = "basicstats"
SERVICE_VERSION = "1.0.0"

# Log level for the HTTP service; the CLI falls back to CLI_LOG_LEVEL when unset
LOG_LEVEL_ENV = "BASICSTATS_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"
CLI_LOG_LEVEL = "WARNING"

# Optional ceiling on sample buffer capacity; growth beyond it is an allocation failure
MAX_CAPACITY_ENV = "BASICSTATS_MAX_CAPACITY"


def log_level(default: str = DEFAULT_LOG_LEVEL) -> int:
    name = os.environ.get(LOG_LEVEL_ENV, default).upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ConfigurationError(f"{LOG_LEVEL_ENV}={name!r} is not a logging level")
    return level


def max_capacity() -> int | None:
    raw = os.environ.get(MAX_CAPACITY_ENV, "").strip()
    if not raw:
        return None
    try:
        value = int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{MAX_CAPACITY_ENV}={raw!r} is not an integer") from exc
    if value < 1:
        raise ConfigurationError(f"{MAX_CAPACITY_ENV} must be positive")
    return value
