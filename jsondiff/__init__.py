"""
JSON Diff Viewer.

A Textual terminal UI that shows two JSON documents side by side and
highlights the top-level keys whose values differ.

Usage:
    json-diff            # start with two empty documents
    json-diff -f         # load ./left.json and ./right.json

Components:
    - jsondiff.data_formats: loading, parsing and pretty-printing JSON
    - jsondiff.diff_engine: key-level comparison into styled lines
    - jsondiff.tui: the terminal application
"""

__version__ = "0.1.0"
