"""Logging helpers for the GUI.

Avoids configuring global logging in tests.
"""

from __future__ import annotations

import logging

from tracker.utils.logger import GUI_LOGGER

logger = logging.getLogger(GUI_LOGGER)


def log(message: str, level: int = logging.INFO) -> None:
    logger.log(level, message)


def trace(event: str, enabled: bool, **details) -> None:
    """Verbose debug trace, emitted only when ``enabled``."""
    if enabled:
        suffix = f" | {details}" if details else ""
        logger.debug(f"TRACE:{event}{suffix}")
