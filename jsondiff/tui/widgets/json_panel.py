"""
JsonPanel widget for one side of the comparison.

The panel shows either the pretty-printed document or the styled lines of
the last diff. Content longer than the panel scrolls.
"""

from __future__ import annotations

from typing import Iterable

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.widgets import Static

from jsondiff.diff_engine import LineStyle, StyledLine


# Line style to rich style mapping
STYLE_COLORS: dict[LineStyle, str] = {
    LineStyle.UNCHANGED: "green",
    LineStyle.CHANGED: "red",
}


def render_lines(lines: Iterable[StyledLine]) -> Text:
    """Build rich text with one colored row per diff line."""
    text = Text(no_wrap=False)
    for index, line in enumerate(lines):
        if index:
            text.append("\n")
        text.append(line.text, style=STYLE_COLORS[line.style])
    return text


class JsonPanel(VerticalScroll):
    """A bordered, scrollable panel holding one document or one diff column."""

    DEFAULT_CSS = """
    JsonPanel {
        width: 1fr;
        height: 1fr;
        border: solid $primary;
        padding: 0 1;
    }

    JsonPanel.active {
        border: double $accent;
    }

    JsonPanel > .json-content {
        width: 100%;
        height: auto;
    }
    """

    def __init__(self, title: str, **kwargs) -> None:
        """Initialize the panel.

        Args:
            title: Text shown in the top border (e.g. "Left JSON").
            **kwargs: Additional arguments passed to VerticalScroll.
        """
        super().__init__(**kwargs)
        self.border_title = title
        self._content = Static("", classes="json-content", markup=False)

    def compose(self) -> ComposeResult:
        yield self._content

    def show_text(self, text: str) -> None:
        """Show plain document text."""
        self._content.update(Text(text))
        self.scroll_home(animate=False)

    def show_lines(self, lines: Iterable[StyledLine]) -> None:
        """Show diff lines in their colors."""
        self._content.update(render_lines(lines))
        self.scroll_home(animate=False)
