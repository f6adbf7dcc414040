"""Shared helpers (logging, formatting)."""
from .logger import get_logger, setup_logging
from .timefmt import format_time

__all__ = ["get_logger", "setup_logging", "format_time"]
