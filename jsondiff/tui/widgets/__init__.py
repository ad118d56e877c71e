"""TUI widgets for the JSON Diff Viewer."""

from jsondiff.tui.widgets.json_panel import STYLE_COLORS, JsonPanel, render_lines

__all__ = [
    "JsonPanel",
    "STYLE_COLORS",
    "render_lines",
]
