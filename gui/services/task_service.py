"""Task service: the single owner of the tracker state.

Views never touch AppState directly. Each operation applies a store
mutation, writes the state file, then notifies subscribers so they can
re-render. Everything runs on the Tk thread, so no locking is needed.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, List, Optional

from tracker import store
from tracker.models.schemas import AppState, Task
from tracker.persistence import load_state, save_state
from gui.utils.logging import log

Listener = Callable[[AppState], None]


class TaskService:
    def __init__(self, state: AppState, state_path: Path):
        self.state = state
        self.state_path = Path(state_path)
        self.last_save_error: Optional[str] = None
        self._listeners: List[Listener] = []

    @classmethod
    def from_file(cls, state_path: Path) -> "TaskService":
        """Build a service around whatever state is on disk (or a fresh one)."""
        return cls(load_state(state_path), state_path)

    # ------------------------------------------------------------------
    # Subscriptions
    # ------------------------------------------------------------------
    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self.state)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def tasks(self) -> List[Task]:
        return self.state.tasks

    @property
    def selected_task(self) -> Optional[Task]:
        return store.selected_task(self.state)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def set_draft(self, text: str) -> None:
        """Track the entry text; it is written out with the next save."""
        store.set_draft(self.state, text)

    def add_task(self, name: Optional[str] = None) -> Optional[Task]:
        task = store.add_task(self.state, self.state.new_task_name if name is None else name)
        if task is None:
            return None
        log(f"Added task '{task.name}'")
        self._commit()
        return task

    def remove_selected(self) -> Optional[Task]:
        had_selection = self.state.selected is not None
        task = store.remove_selected(self.state)
        if task is None:
            # A stale selection was cleared; write and redraw that too.
            if had_selection:
                self._commit()
            return None
        log(f"Removed task '{task.name}'")
        self._commit()
        return task

    def select_task(self, task_id: str) -> bool:
        if not store.select_by_id(self.state, task_id):
            return False
        log(f"Tracking '{self.selected_task.name}'")
        self._commit()
        return True

    def select_by_name(self, name: str) -> bool:
        if not store.select_by_name(self.state, name):
            return False
        log(f"Tracking '{name}'")
        self._commit()
        return True

    def tick(self) -> bool:
        """Count one second for the selected task.

        The state is saved on every tick while a selection exists, even if
        the selection turned out to be stale.
        """
        if self.state.selected is None:
            return False
        counted = store.tick(self.state)
        self._commit()
        return counted

    def save(self) -> bool:
        ok = save_state(self.state, self.state_path)
        self.last_save_error = None if ok else f"Could not save to {self.state_path}"
        return ok

    def _commit(self) -> None:
        self.save()
        self._notify()
