from __future__ import annotations

"""Runtime defaults and environment overrides."""

import logging
import os
from pathlib import Path


DEFAULT_WORK_MINUTES = 20
DEFAULT_BREAK_MINUTES = 5
FRAME_INTERVAL_MS = 100

HOME_ENV = "POMOTIMER_HOME"
LOG_LEVEL_ENV = "POMOTIMER_LOG_LEVEL"


def data_dir() -> Path:
    """Directory for the settings database and logs; the working directory unless overridden."""
    override = os.getenv(HOME_ENV)
    return Path(override) if override else Path.cwd()


def default_db_path() -> Path:
    return data_dir() / "pomotimer.db"


def log_dir() -> Path:
    return data_dir() / "logs"


def log_level() -> int:
    name = os.getenv(LOG_LEVEL_ENV, "INFO").upper()
    level = getattr(logging, name, logging.INFO)
    return level if isinstance(level, int) else logging.INFO
