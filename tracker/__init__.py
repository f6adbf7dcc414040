"""
Task Tracker - Desktop Task Timer

Create named tasks, pick one, and let the clock run while you work.
"""

__version__ = "1.0.0"

from .models.schemas import AppState, Task
from .persistence import load_state, save_state

__all__ = [
    "AppState",
    "Task",
    "load_state",
    "save_state",
]
