"""
Vim Navigation Mixin for scrolling the focused panel.

Provides j/k/g/G scrolling by delegating to the focused scrollable widget.

Note: h/l bindings for panel switching are defined in DualPaneMixin.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.binding import Binding
from textual.containers import ScrollableContainer

if TYPE_CHECKING:
    from textual.widget import Widget


class VimNavigationMixin:
    """Mixin providing vim-style scrolling keybindings.

    - j/k: Scroll down/up one line
    - g: Jump to the top
    - G: Jump to the bottom

    Usage:
        class MyScreen(VimNavigationMixin, Screen):
            BINDINGS = VimNavigationMixin.VIM_BINDINGS + [...]
    """

    VIM_BINDINGS = [
        Binding("j", "vim_down", "Down", show=False),
        Binding("k", "vim_up", "Up", show=False),
        Binding("g", "vim_top", "Top", show=False),
        Binding("G", "vim_bottom", "Bottom", show=False),
    ]

    def _get_navigable_widget(self) -> Widget | None:
        """Return the focused widget if it can scroll, otherwise None."""
        focused = self.focused
        if isinstance(focused, ScrollableContainer):
            return focused
        return None

    def action_vim_down(self) -> None:
        """Scroll down one line (vim j key)."""
        widget = self._get_navigable_widget()
        if widget is not None:
            widget.scroll_down(animate=False)

    def action_vim_up(self) -> None:
        """Scroll up one line (vim k key)."""
        widget = self._get_navigable_widget()
        if widget is not None:
            widget.scroll_up(animate=False)

    def action_vim_top(self) -> None:
        """Jump to the top (vim g)."""
        widget = self._get_navigable_widget()
        if widget is not None:
            widget.scroll_home(animate=False)

    def action_vim_bottom(self) -> None:
        """Jump to the bottom (vim G)."""
        widget = self._get_navigable_widget()
        if widget is not None:
            widget.scroll_end(animate=False)
