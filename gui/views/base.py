"""Base class for GUI views.

A view is a ttk.Frame bound to the TaskService. Subclasses lay out their
widgets in ``_build`` and redraw from the state in ``refresh``.
"""

from __future__ import annotations

from tkinter import ttk

from gui.services.task_service import TaskService
from tracker.models.schemas import AppState


class BaseView(ttk.Frame):
    name: str = "base"

    def __init__(self, parent, service: TaskService, **kwargs):
        super().__init__(parent, **kwargs)
        self.service = service
        self._build()

    def _build(self) -> None:  # pragma: no cover - UI code
        raise NotImplementedError

    def refresh(self, state: AppState) -> None:  # pragma: no cover - UI code
        pass
