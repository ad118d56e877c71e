"""
Dual Pane Mixin for left/right panel switching functionality.

Provides consistent panel switching behavior for the side-by-side view:
- action_switch_panel(): Toggle between left and right panels
- action_vim_left(): Switch focus to left panel (vim h key)
- action_vim_right(): Switch focus to right panel (vim l key)
- _update_panel_styles(): Update active/inactive CSS classes on panels

Usage:
    # IMPORTANT: DualPaneMixin MUST come before VimNavigationMixin in MRO
    # so that action_vim_left/right (panel switching) takes precedence.
    class MyDualPaneScreen(DualPaneMixin, VimNavigationMixin, Screen):
        BINDINGS = DualPaneMixin.DUAL_PANE_BINDINGS + [...]
"""

from __future__ import annotations

from textual.binding import Binding
from textual.css.query import NoMatches


class DualPaneMixin:
    """Mixin for screens with a #left-panel and a #right-panel.

    Tracks which panel is active, marks it with the "active" CSS class and
    moves focus to it.

    Class Attributes:
        DUAL_PANE_BINDINGS: Vim scrolling (j/k/g/G) plus panel switching.
    """

    DUAL_PANE_BINDINGS = [
        # Vim scrolling (j/k/g/G from VimNavigationMixin)
        Binding("j", "vim_down", "Down", show=False),
        Binding("k", "vim_up", "Up", show=False),
        Binding("g", "vim_top", "Top", show=False),
        Binding("G", "vim_bottom", "Bottom", show=False),
        # Panel switching (h/l vim-style + tab)
        Binding("h", "vim_left", "Left Panel", show=False),
        Binding("l", "vim_right", "Right Panel", show=False),
        Binding("tab", "switch_panel", "Switch Panel", show=False),
    ]

    _active_panel: str = "left"
    """Currently active panel identifier ('left' or 'right')."""

    @property
    def is_left_active(self) -> bool:
        return self._active_panel == "left"

    @property
    def is_right_active(self) -> bool:
        return self._active_panel == "right"

    def action_switch_panel(self) -> None:
        """Toggle between left and right panels."""
        self._active_panel = "right" if self._active_panel == "left" else "left"
        self._update_panel_styles()
        self._focus_active_widget()

    def action_vim_left(self) -> None:
        """Switch to left panel (vim h key)."""
        if self._active_panel != "left":
            self._active_panel = "left"
            self._update_panel_styles()
            self._focus_active_widget()

    def action_vim_right(self) -> None:
        """Switch to right panel (vim l key)."""
        if self._active_panel != "right":
            self._active_panel = "right"
            self._update_panel_styles()
            self._focus_active_widget()

    def _update_panel_styles(self) -> None:
        """Update active/inactive CSS classes on panels.

        Handles missing panels gracefully (e.g. before the screen is composed).
        """
        try:
            left = self.query_one("#left-panel")
            right = self.query_one("#right-panel")
        except NoMatches:
            return

        for panel, is_active in [
            (left, self._active_panel == "left"),
            (right, self._active_panel == "right"),
        ]:
            panel.set_class(is_active, "active")
            panel.set_class(not is_active, "inactive")

    def _focus_active_widget(self) -> None:
        """Focus the active panel."""
        try:
            self.query_one(f"#{self._active_panel}-panel").focus()
        except NoMatches:
            return
