"""Data schemas and validation."""
from .schemas import AppState, Task, new_task_id

__all__ = [
    "AppState",
    "Task",
    "new_task_id",
]
