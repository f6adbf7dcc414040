import tkinter as tk
from tkinter import ttk

from tracker.utils.timefmt import format_time


class StatusBar(ttk.Frame):
    """
    Status bar along the bottom of the window.

    Displays: the task currently being tracked (with its running time)
    and, on the right, the last save error if the state file could not
    be written.
    """

    def __init__(self, parent, service):
        super().__init__(parent, padding=(6, 3))
        self.service = service

        # Tracking message (left side)
        self.message_var = tk.StringVar(value="")
        ttk.Label(self, textvariable=self.message_var, style="Muted.TLabel").pack(side=tk.LEFT)

        # Save error (right side)
        self.error_var = tk.StringVar(value="")
        ttk.Label(self, textvariable=self.error_var, style="Error.TLabel").pack(side=tk.RIGHT)

        self.update_status()

    def update_status(self, _state=None):
        """Refresh status bar from the service."""
        task = self.service.selected_task
        if task is None:
            self.message_var.set("No task selected")
        else:
            self.message_var.set(f"Tracking: {task.name} ({format_time(task.accumulated)})")
        self.error_var.set(self.service.last_save_error or "")
