"""Main GUI application object.

Wires the TaskService, the views and the one-second Ticker into a single
Tk window. ``main()`` is the process entry point.
"""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Optional

from gui.components.status_bar import StatusBar
from gui.services.task_service import TaskService
from gui.theme import DEFAULT_THEME, Theme
from gui.utils.logging import log, trace
from gui.utils.ticker import Ticker
from gui.views.controls import TaskControlsView
from gui.views.task_list import TaskListView
from tracker.config import Settings, get_settings
from tracker.utils.logger import get_logger, setup_logging

logger = get_logger(__name__)


class TaskTrackerApp:
    """The tracker window."""

    def __init__(self, root: tk.Tk, service: TaskService, settings: Settings,
                 theme: Theme = DEFAULT_THEME):
        self.root = root
        self.service = service
        self.settings = settings

        self.root.title(settings.window_title)
        self.root.geometry("460x520")
        self.root.minsize(380, 300)

        self.style = ttk.Style(self.root)
        theme.apply(self.style, self.root)

        container = ttk.Frame(self.root, padding=12)
        container.pack(fill=tk.BOTH, expand=True)

        self.controls = TaskControlsView(container, service)
        self.controls.pack(fill=tk.X)

        self.task_list = TaskListView(container, service)
        self.task_list.pack(fill=tk.BOTH, expand=True, pady=(12, 0))

        self.status_bar = StatusBar(self.root, service)
        self.status_bar.pack(fill=tk.X, side=tk.BOTTOM)

        for view in (self.controls, self.task_list):
            service.subscribe(view.refresh)
        service.subscribe(self.status_bar.update_status)

        self.ticker = Ticker(self.root, self._on_tick)
        self.root.protocol("WM_DELETE_WINDOW", self._on_close)

        # Start the clock once the window is up and idle.
        self.root.after_idle(self._on_ready)

    def _on_ready(self) -> None:
        self.ticker.start()
        self.controls.on_show()
        log("Timer started")

    def _on_tick(self) -> None:
        counted = self.service.tick()
        task = self.service.selected_task
        trace("tick", self.settings.verbose, counted=counted,
              task=task.name if task else None)

    def _on_close(self) -> None:
        self.ticker.stop()
        self.service.save()
        log("Window closed; state saved")
        self.root.destroy()

    def run(self) -> None:
        """Run the Tk event loop until the window is closed."""
        self.root.mainloop()


def main(settings: Optional[Settings] = None) -> None:
    """Run the GUI application."""
    settings = settings or get_settings()
    setup_logging(settings.log_level, verbose=settings.verbose)

    service = TaskService.from_file(settings.state_path)
    try:
        root = tk.Tk()
    except tk.TclError as e:
        logger.critical("Failed to launch application: %s", e)
        raise SystemExit(f"Failed to launch application: {e}") from e

    app = TaskTrackerApp(root, service, settings)
    app.run()


if __name__ == "__main__":
    main()
