"""Scrollable list of tasks with their running times.

Rows live in a frame embedded in a canvas so the list can grow past the
window. Rows are rebuilt only when the task sequence changes; a tick just
rewrites the time labels and the selection marker.
"""

import tkinter as tk
from tkinter import ttk
from typing import Dict, List, Optional

from gui.views.base import BaseView
from tracker.utils.timefmt import format_time

NAME_WIDTH = 24
TIME_WIDTH = 10


class _TaskRow:
    def __init__(self, parent, task, on_select):  # pragma: no cover - UI code
        self.task_id = task.id
        self.frame = ttk.Frame(parent, style="Row.TFrame", padding=(6, 3))
        self.marker = ttk.Label(self.frame, text=" ", width=2, style="Row.TLabel")
        self.marker.pack(side=tk.LEFT)
        self.name_label = ttk.Label(self.frame, text=task.name, width=NAME_WIDTH, style="Row.TLabel")
        self.name_label.pack(side=tk.LEFT)
        self.time_var = tk.StringVar(value=format_time(task.accumulated))
        self.time_label = ttk.Label(self.frame, textvariable=self.time_var, width=TIME_WIDTH,
                                    style="Time.TLabel")
        self.time_label.pack(side=tk.LEFT, padx=(0, 10))
        self.select_btn = ttk.Button(self.frame, text="Select", command=lambda: on_select(self.task_id))
        self.select_btn.pack(side=tk.LEFT)

    def update(self, task, selected: bool):  # pragma: no cover - UI code
        self.time_var.set(format_time(task.accumulated))
        self.frame.configure(style="SelectedRow.TFrame" if selected else "Row.TFrame")
        label_style = "SelectedRow.TLabel" if selected else "Row.TLabel"
        self.marker.configure(text="▶" if selected else " ", style=label_style)
        self.name_label.configure(style=label_style)
        self.time_label.configure(style="SelectedTime.TLabel" if selected else "Time.TLabel")


class TaskListView(BaseView):
    name = "tasks"

    def _build(self):  # pragma: no cover - UI code
        self.rows: Dict[str, _TaskRow] = {}
        self._row_order: Optional[List[str]] = None

        header = ttk.Frame(self)
        header.pack(fill=tk.X, pady=(0, 4))
        ttk.Label(header, text="Task", width=NAME_WIDTH + 2, style="Muted.TLabel").pack(side=tk.LEFT)
        ttk.Label(header, text="Time", width=TIME_WIDTH, style="Muted.TLabel").pack(side=tk.LEFT)

        body = ttk.Frame(self)
        body.pack(fill=tk.BOTH, expand=True)

        self.canvas = tk.Canvas(body, highlightthickness=0, borderwidth=0)
        scrollbar = ttk.Scrollbar(body, orient=tk.VERTICAL, command=self.canvas.yview)
        self.canvas.configure(yscrollcommand=scrollbar.set)
        scrollbar.pack(side=tk.RIGHT, fill=tk.Y)
        self.canvas.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)

        self.rows_container = ttk.Frame(self.canvas)
        self.canvas_window = self.canvas.create_window((0, 0), window=self.rows_container, anchor="nw")
        self.rows_container.bind("<Configure>", self._on_rows_configure)
        self.canvas.bind("<Configure>", self._on_canvas_configure)

        self.empty_label = ttk.Label(self.rows_container, text="No tasks yet. Add one above.",
                                     style="Muted.TLabel")

        self.refresh(self.service.state)

    def refresh(self, state):  # pragma: no cover - UI code
        self.canvas.configure(background=self.winfo_toplevel().cget("bg"))
        order = [t.id for t in state.tasks]
        if order != self._row_order:
            self._rebuild(state)
        selected = self.service.selected_task
        for task in state.tasks:
            self.rows[task.id].update(task, selected is not None and task.id == selected.id)

    def _rebuild(self, state):  # pragma: no cover - UI code
        for row in self.rows.values():
            row.frame.destroy()
        self.rows = {}
        for task in state.tasks:
            row = _TaskRow(self.rows_container, task, self.service.select_task)
            row.frame.pack(fill=tk.X, pady=1)
            self.rows[task.id] = row
        self._row_order = [t.id for t in state.tasks]
        if state.tasks:
            self.empty_label.pack_forget()
        else:
            self.empty_label.pack(anchor="w", pady=8)

    def _on_rows_configure(self, _event):  # pragma: no cover - UI code
        self.canvas.configure(scrollregion=self.canvas.bbox("all"))

    def _on_canvas_configure(self, event):  # pragma: no cover - UI code
        self.canvas.itemconfig(self.canvas_window, width=event.width)
