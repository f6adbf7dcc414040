"""Task store operations (pure functions over AppState, no I/O).

Every function takes the state as its first argument and mutates it in
place. Persistence and re-rendering are the caller's job.
"""
from typing import Optional

from tracker.models.schemas import AppState, Task


def selected_task(state: AppState) -> Optional[Task]:
    """Return the selected task, or None when nothing valid is selected."""
    idx = state.selected
    if idx is None or not 0 <= idx < len(state.tasks):
        return None
    return state.tasks[idx]


def validate_selection(state: AppState) -> None:
    """Reset a selection that no longer points at a task."""
    if state.selected is not None and selected_task(state) is None:
        state.selected = None


def set_draft(state: AppState, text: str) -> None:
    state.new_task_name = text


def add_task(state: AppState, name: str) -> Optional[Task]:
    """Append a new zero-time task and clear the draft.

    Blank names are ignored and leave the draft untouched.
    """
    if not name or not name.strip():
        return None
    task = Task(name=name, accumulated=0)
    state.tasks.append(task)
    state.new_task_name = ""
    return task


def remove_selected(state: AppState) -> Optional[Task]:
    """Remove the selected task and clear the selection."""
    task = selected_task(state)
    if task is None:
        validate_selection(state)
        return None
    del state.tasks[state.selected]
    state.selected = None
    validate_selection(state)
    return task


def select_by_name(state: AppState, name: str) -> bool:
    """Select the first task called ``name``.

    Returns True when a task matched; the selection is untouched otherwise.
    """
    for idx, task in enumerate(state.tasks):
        if task.name == name:
            state.selected = idx
            return True
    return False


def select_by_id(state: AppState, task_id: str) -> bool:
    for idx, task in enumerate(state.tasks):
        if task.id == task_id:
            state.selected = idx
            return True
    return False


def tick(state: AppState) -> bool:
    """Add one second to the selected task. Returns True if one was counted."""
    task = selected_task(state)
    if task is None:
        return False
    task.accumulated += 1
    return True
