"""Logging setup for the tracker.

Modules grab a logger with ``get_logger(__name__)`` at import time, which
installs a default console handler. The launcher later calls
``setup_logging`` with the configured level; that call always applies the
level, even when a handler is already in place.
"""
import logging
import os

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
GUI_LOGGER = "tasktracker.gui"


def _level(name: str) -> int:
    return getattr(logging, name.upper(), logging.INFO)


def setup_logging(level: str = "", verbose: bool = False) -> None:
    """Install the console handler (once) and set the root level.

    ``verbose`` lowers the GUI logger to DEBUG so per-tick traces show.
    """
    level = level or os.getenv("TASK_TRACKER_LOG_LEVEL", "INFO")
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format=LOG_FORMAT)
    root.setLevel(_level(level))
    logging.getLogger(GUI_LOGGER).setLevel(logging.DEBUG if verbose else logging.NOTSET)


def get_logger(name: str) -> logging.Logger:
    if not logging.getLogger().handlers:
        setup_logging()
    return logging.getLogger(name)
