"""
Diff Screen for side-by-side JSON comparison.

Shows the left and right documents in two panels. Each side can be edited
in the external editor; the diff action replaces both panels with the
key-by-key comparison until one of the documents changes again.
"""

from __future__ import annotations

import logging

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.screen import Screen
from textual.widgets import Footer, Header

from jsondiff.data_formats import JsonLoadError
from jsondiff.diff_engine import summarize
from jsondiff.tui.editor import EditorError
from jsondiff.tui.mixins import DualPaneMixin, VimNavigationMixin
from jsondiff.tui.session import LEFT, RIGHT, DiffSession
from jsondiff.tui.widgets import JsonPanel

logger = logging.getLogger(__name__)


class DiffScreen(DualPaneMixin, VimNavigationMixin, Screen):
    """Side-by-side document and diff view.

    The screen renders whatever the session says should be visible; all
    state lives in the DiffSession it was given.
    """

    CSS = """
    DiffScreen {
        layout: vertical;
    }

    #comparison-container {
        height: 1fr;
    }
    """

    BINDINGS = DualPaneMixin.DUAL_PANE_BINDINGS + [
        Binding("q", "quit", "Quit"),
        Binding("a", "edit_left", "Edit Left"),
        Binding("b", "edit_right", "Edit Right"),
        Binding("c", "clear_input", "Clear Input"),
        Binding("d", "diff", "Diff JSON"),
    ]

    def __init__(
        self,
        session: DiffSession,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        """Initialize the DiffScreen.

        Args:
            session: The document slots and diff state to display.
            name: Optional name for the screen.
            id: Optional ID for the screen.
            classes: Optional CSS classes for the screen.
        """
        super().__init__(name=name, id=id, classes=classes)
        self._session = session

    def compose(self) -> ComposeResult:
        """Compose the screen layout with side-by-side panels."""
        yield Header()
        with Horizontal(id="comparison-container"):
            yield JsonPanel("Left JSON", id="left-panel", classes="active")
            yield JsonPanel("Right JSON", id="right-panel", classes="inactive")
        yield Footer()

    def on_mount(self) -> None:
        self.refresh_panels()
        self._focus_active_widget()

    @property
    def session(self) -> DiffSession:
        return self._session

    def refresh_panels(self) -> None:
        """Show the last diff or the documents, depending on the session."""
        left_panel = self.query_one("#left-panel", JsonPanel)
        right_panel = self.query_one("#right-panel", JsonPanel)

        diff = self._session.last_diff
        if self._session.show_diff and diff is not None:
            left_panel.show_lines(diff.left)
            right_panel.show_lines(diff.right)
            self.sub_title = "diff view"
        else:
            left_panel.show_text(self._session.left.display_text)
            right_panel.show_text(self._session.right.display_text)
            self.sub_title = "document view"

    def action_quit(self) -> None:
        """Quit the application."""
        self.app.exit()

    def action_edit_left(self) -> None:
        """Edit the left document in the external editor."""
        self._edit_side(LEFT)

    def action_edit_right(self) -> None:
        """Edit the right document in the external editor."""
        self._edit_side(RIGHT)

    def _edit_side(self, side: str) -> None:
        """Run the editor on one working copy and reload it.

        Editor and parse failures are reported as notifications; the
        previously displayed text stays on screen.
        """
        slot = self._session.slot(side)
        try:
            self.app.edit_file(slot.working_copy.path)
        except EditorError as e:
            logger.warning("Editing %s side failed: %s", side, e)
            self.notify(str(e), title="Editor failed", severity="error")
            return

        try:
            self._session.refresh(side)
        except JsonLoadError as e:
            logger.info("Edited %s side is not valid JSON: %s", side, e)
            self.notify(str(e), title=f"{side.title()} JSON not loaded", severity="warning")
        self.refresh_panels()

    def action_clear_input(self) -> None:
        """Empty both documents."""
        self._session.clear()
        self.refresh_panels()
        self.notify("Cleared both documents")

    def action_diff(self) -> None:
        """Compare the two documents and show the result."""
        try:
            result = self._session.run_diff()
        except JsonLoadError as e:
            logger.info("Diff failed: %s", e)
            self.notify(str(e), title="Diff failed", severity="error")
            return

        self.refresh_panels()
        summary = summarize(result)
        self.notify(f"{summary['changed']} of {summary['total']} lines differ")
