"""
JSON document loader.

This module reads a single JSON document from disk and provides the two
text forms the viewer displays: the pretty-printed document shown before a
diff, and the compact single-line form embedded in diff lines.
"""

from __future__ import annotations

import json
import logging
import math
from typing import Any

from jsondiff.data_formats.errors import ParseError, ReadError

logger = logging.getLogger(__name__)

# Indentation used for the document view
PRETTY_INDENT = 2


def _reject_constant(name: str) -> Any:
    """Refuse NaN and Infinity, which json.loads accepts by default."""
    raise ValueError(f"{name} is not valid JSON")


def _parse_finite_float(literal: str) -> float:
    """Refuse numbers too large for a float instead of reading them as infinity."""
    value = float(literal)
    if math.isinf(value):
        raise ValueError(f"number out of range: {literal}")
    return value


def _find_lone_surrogate(value: Any) -> str | None:
    """Return the first string (key or value) holding an unpaired surrogate."""
    stack = [value]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            if any("\ud800" <= char <= "\udfff" for char in item):
                return item
        elif isinstance(item, dict):
            stack.extend(item.keys())
            stack.extend(item.values())
        elif isinstance(item, list):
            stack.extend(item)
    return None


def parse_json(text: str, source: str = "<string>") -> Any:
    """Parse text as a single JSON value.

    Args:
        text: The raw document text.
        source: Label used in error messages (usually the file path).

    Returns:
        The parsed value: None, bool, int, float, str, list or dict.

    Raises:
        ParseError: If the text is not well-formed JSON, holds a number too
            large for a float, or escapes an unpaired UTF-16 surrogate.

    Examples:
        >>> parse_json('{"a": [1, 2]}')
        {'a': [1, 2]}
    """
    try:
        value = json.loads(
            text, parse_constant=_reject_constant, parse_float=_parse_finite_float
        )
    except json.JSONDecodeError as e:
        raise ParseError(source, e.msg, e.lineno, e.colno) from e
    except ValueError as e:
        raise ParseError(source, str(e)) from e

    bad_string = _find_lone_surrogate(value)
    if bad_string is not None:
        raise ParseError(source, f"unpaired surrogate escape in {bad_string!r}")
    return value


def read_document(path: str) -> str:
    """Read a file's full contents as UTF-8 text.

    Raises:
        ReadError: If the file cannot be read.
        ParseError: If the file is not UTF-8 text.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise ParseError(str(path), f"not UTF-8 text ({e.reason})") from e
    except OSError as e:
        raise ReadError(str(path), e) from e


def load_json(path: str) -> Any:
    """Read a file and parse its full contents as JSON.

    Args:
        path: Path to the JSON file.

    Returns:
        The parsed value.

    Raises:
        ReadError: If the file cannot be read.
        ParseError: If the file is not UTF-8 text or not well-formed JSON.
    """
    text = read_document(path)
    value = parse_json(text, source=str(path))
    logger.debug("Loaded %s (%d bytes)", path, len(text))
    return value


def pretty_json(value: Any) -> str:
    """Serialize a value as indented, key-sorted JSON for display.

    Parsing the returned text yields a value equal to the input.
    """
    return json.dumps(value, indent=PRETTY_INDENT, sort_keys=True, ensure_ascii=False)


def compact_json(value: Any) -> str:
    """Serialize a value on a single line with no extra whitespace.

    Examples:
        >>> compact_json({"b": [1, 2], "a": "x"})
        '{"a":"x","b":[1,2]}'
    """
    return json.dumps(
        value, separators=(",", ":"), sort_keys=True, ensure_ascii=False
    )


def read_pretty(path: str) -> str:
    """Load a file and return its pretty-printed text.

    Raises:
        ReadError: If the file cannot be read.
        ParseError: If the file is not well-formed JSON.
    """
    return pretty_json(load_json(path))
