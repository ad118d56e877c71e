"""
Data formats module for reading JSON documents.

Usage:
    from jsondiff.data_formats import load_json, pretty_json

    value = load_json("left.json")
    print(pretty_json(value))
"""

from jsondiff.data_formats.errors import JsonLoadError, ParseError, ReadError
from jsondiff.data_formats.json_loader import (
    compact_json,
    load_json,
    parse_json,
    pretty_json,
    read_document,
    read_pretty,
)

__all__ = [
    # Errors
    "JsonLoadError",
    "ParseError",
    "ReadError",
    # Loading
    "load_json",
    "parse_json",
    "read_document",
    "read_pretty",
    # Serialization
    "compact_json",
    "pretty_json",
]
