"""TUI views for the JSON Diff Viewer."""

from jsondiff.tui.views.diff_screen import DiffScreen

__all__ = ["DiffScreen"]
