"""Theme primitives for the tracker window."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    """Base theme definition."""

    name: str = "Default"
    background_color: str = "#1e1e2e"
    surface_color: str = "#313244"
    text_color: str = "#cdd6f4"
    muted_color: str = "#a6adc8"
    accent_color: str = "#89b4fa"
    error_color: str = "#f38ba8"
    font_family: str = "Helvetica"

    def apply(self, style, root) -> None:  # pragma: no cover - UI code
        """Configure ttk styles used by the views."""
        style.theme_use("clam")
        style.configure("TFrame", background=self.background_color)
        style.configure("Row.TFrame", background=self.surface_color)
        style.configure("SelectedRow.TFrame", background=self.accent_color)
        style.configure("TLabel", background=self.background_color, foreground=self.text_color)
        style.configure("Muted.TLabel", background=self.background_color, foreground=self.muted_color)
        style.configure("Error.TLabel", background=self.background_color, foreground=self.error_color)
        style.configure("Row.TLabel", background=self.surface_color, foreground=self.text_color)
        style.configure(
            "SelectedRow.TLabel",
            background=self.accent_color,
            foreground=self.background_color,
            font=(self.font_family, 10, "bold"),
        )
        style.configure("Time.TLabel", background=self.surface_color, foreground=self.text_color,
                        font=("Courier", 11))
        style.configure("SelectedTime.TLabel", background=self.accent_color,
                        foreground=self.background_color, font=("Courier", 11, "bold"))
        style.configure("TButton", padding=6)
        root.configure(bg=self.background_color)


DEFAULT_THEME = Theme()
