"""
UI Component Smoke Tests.
Tests that views and components can be imported.
Note: Actual Tkinter rendering requires a display, so these tests focus on import/structure.
"""

import pytest

tk = pytest.importorskip("tkinter")


# ===========================================================================
# Theme Tests
# ===========================================================================


class TestTheme:
    """Tests for gui/theme.py."""

    def test_theme_import(self):
        """Verify theme module can be imported."""
        from gui.theme import DEFAULT_THEME, Theme

        assert isinstance(DEFAULT_THEME, Theme)

    def test_theme_is_frozen(self):
        """Themes are shared, so they must not be mutated."""
        from gui.theme import Theme

        theme = Theme()
        with pytest.raises(Exception):
            theme.name = "changed"


# ===========================================================================
# Component / View Tests
# ===========================================================================


class TestViewImports:
    """Tests that all views can be imported without error."""

    def test_status_bar_import(self):
        """Verify StatusBar can be imported."""
        from gui.components.status_bar import StatusBar

        assert StatusBar is not None

    def test_base_view_import(self):
        """Verify BaseView is a ttk frame."""
        from tkinter import ttk

        from gui.views.base import BaseView

        assert issubclass(BaseView, ttk.Frame)

    def test_controls_view_import(self):
        """Verify TaskControlsView can be imported."""
        from gui.views.controls import TaskControlsView

        assert TaskControlsView.name == "controls"

    def test_task_list_view_import(self):
        """Verify TaskListView can be imported."""
        from gui.views.task_list import TaskListView

        assert TaskListView.name == "tasks"


# ===========================================================================
# App Tests
# ===========================================================================


class TestApp:
    """Tests for gui/app.py."""

    def test_app_import(self):
        """Verify the app and its entry point can be imported."""
        from gui.app import TaskTrackerApp, main

        assert TaskTrackerApp is not None
        assert callable(main)

    def test_launch_failure_exits(self, monkeypatch, tmp_path):
        """A Tk that cannot open a display ends the process with a message."""
        import gui.app as app_module
        from tracker.config import Settings

        def no_display():
            raise tk.TclError("no display name and no $DISPLAY environment variable")

        monkeypatch.setattr(app_module.tk, "Tk", no_display)
        settings = Settings(state_path=tmp_path / "tasks.json", window_title="t",
                            log_level="INFO", verbose=False)
        with pytest.raises(SystemExit) as exc:
            app_module.main(settings)
        assert "Failed to launch application" in str(exc.value)
