import tkinter as tk
from tkinter import ttk

from gui.views.base import BaseView


class TaskControlsView(BaseView):
    """New-task entry, Add button and Remove Selected button."""

    name = "controls"

    def _build(self):  # pragma: no cover - UI code
        self.draft_var = tk.StringVar(value=self.service.state.new_task_name)
        self.draft_var.trace_add("write", self._on_draft_changed)

        input_row = ttk.Frame(self)
        input_row.pack(fill=tk.X)

        self.entry = ttk.Entry(input_row, textvariable=self.draft_var, width=32)
        self.entry.pack(side=tk.LEFT, padx=(0, 6))
        self.entry.bind("<Return>", lambda _event: self._on_add())

        ttk.Button(input_row, text="Add Task", command=self._on_add).pack(side=tk.LEFT)

        self.remove_btn = ttk.Button(self, text="Remove Selected Task", command=self._on_remove)
        self.remove_btn.pack(anchor="w", pady=(8, 0))

        self.refresh(self.service.state)

    def on_show(self):  # pragma: no cover - UI code
        self.entry.focus_set()

    def refresh(self, state):  # pragma: no cover - UI code
        if self.draft_var.get() != state.new_task_name:
            self.draft_var.set(state.new_task_name)
        self.remove_btn.state(["!disabled"] if self.service.selected_task else ["disabled"])

    # ------------------- Internal helpers ----------------------------
    def _on_draft_changed(self, *_args):  # pragma: no cover - UI code
        self.service.set_draft(self.draft_var.get())

    def _on_add(self):  # pragma: no cover - UI code
        if self.service.add_task() is None:
            self.entry.focus_set()

    def _on_remove(self):  # pragma: no cover - UI code
        self.service.remove_selected()
