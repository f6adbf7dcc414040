"""Centralized configuration loading.

Loads environment variables once and provides a typed Settings object
for the rest of the codebase. The launcher calls get_settings() before
building the window so a local .env is respected.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from dotenv import load_dotenv


# Load .env once at import time
load_dotenv()

DEFAULT_STATE_FILE = "tasks.json"
DEFAULT_TITLE = "Task Tracker"


def _env_path(name: str, default: str) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return Path(default)
    return Path(raw).expanduser()


@dataclass
class Settings:
    # Persistence
    state_path: Path = field(
        default_factory=lambda: _env_path("TASK_TRACKER_STATE_PATH", DEFAULT_STATE_FILE)
    )

    # Window
    window_title: str = field(
        default_factory=lambda: os.getenv("TASK_TRACKER_TITLE", DEFAULT_TITLE)
    )

    # Logging
    log_level: str = field(
        default_factory=lambda: os.getenv("TASK_TRACKER_LOG_LEVEL", "INFO").upper()
    )
    verbose: bool = field(
        default_factory=lambda: os.getenv("TASK_TRACKER_VERBOSE", "0") == "1"
    )


def get_settings() -> Settings:
    """Return a new Settings instance (cheap dataclass construction)."""
    return Settings()
