"""
TUI JSON Diff Viewer.

A Textual-based terminal UI for comparing two JSON documents side by side.

Usage:
    python -m jsondiff.tui.app [-f]

Components:
    - JsonDiffApp: Main application class
    - DiffScreen: Side-by-side document and diff view
    - JsonPanel: Scrollable panel for one side
    - DiffSession: Document slots and last diff result
"""
