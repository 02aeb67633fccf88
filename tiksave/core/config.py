"""
TikSave - Configuration
=======================

Central configuration from environment variables.

Author: حَـــــنَّـــــا
"""

import os
from dataclasses import dataclass
from pathlib import Path


HOME_DIR = Path.home() / ".tiksave"
DATA_DIR = Path(os.getenv("TIKSAVE_DATA_DIR", str(HOME_DIR / "data")))
LOGS_DIR = Path(os.getenv("TIKSAVE_LOGS_DIR", str(HOME_DIR / "logs")))

DATA_DIR.mkdir(parents=True, exist_ok=True)
LOGS_DIR.mkdir(parents=True, exist_ok=True)


def _get_env_int(key: str, default: int) -> int:
    """Get environment variable as int with default."""
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


@dataclass(frozen=True)
class Config:
    """Application configuration from environment variables."""

    # Network timeouts (seconds)
    ENDPOINT_TIMEOUT: int = _get_env_int("TIKSAVE_TIMEOUT", 8)
    HELPER_TIMEOUT: int = _get_env_int("TIKSAVE_HELPER_TIMEOUT", 8)
    SAVE_TIMEOUT: int = _get_env_int("TIKSAVE_SAVE_TIMEOUT", 120)

    # Where saved files land
    DOWNLOAD_DIR: str = os.getenv(
        "TIKSAVE_DOWNLOAD_DIR", str(Path.home() / "Downloads")
    )

    # "Seen before" marker for the first-run demo
    FIRST_RUN_FLAG: str = str(DATA_DIR / "app_initialized")

    # Log timestamps
    TIMEZONE: str = os.getenv("TIKSAVE_TIMEZONE", "UTC")


config = Config()
