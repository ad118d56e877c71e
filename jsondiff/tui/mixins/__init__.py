"""Mixins for the TUI application."""

from jsondiff.tui.mixins.dual_pane import DualPaneMixin
from jsondiff.tui.mixins.vim_navigation import VimNavigationMixin

__all__ = [
    "DualPaneMixin",
    "VimNavigationMixin",
]
