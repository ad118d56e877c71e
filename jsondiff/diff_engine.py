"""
Diff Engine for comparing two JSON documents key by key.

Only the top level is compared. Each key present in either document becomes
one line on each side, so the two columns always stay aligned. Nested
objects and arrays are compared by deep equality and shown in compact form.

Line Styles:
    - unchanged: the key holds the same value on both sides
    - changed: the values differ (a missing key reads as null)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from jsondiff.data_formats.json_loader import compact_json


class LineStyle(Enum):
    """Display emphasis of one rendered line."""

    UNCHANGED = "unchanged"
    CHANGED = "changed"


class HighlightMode(Enum):
    """How a differing line pair is highlighted.

    SYMMETRIC marks both sides of a differing pair as changed.
    ONE_SIDED marks only the right side, leaving the left side in the
    unchanged color.
    """

    SYMMETRIC = "symmetric"
    ONE_SIDED = "one_sided"


@dataclass(frozen=True)
class StyledLine:
    """One line of diff output."""

    text: str
    style: LineStyle


@dataclass(frozen=True)
class DiffResult:
    """Two aligned columns of styled lines.

    Line i of ``left`` and line i of ``right`` always describe the same key
    (or the same whole-value fallback).
    """

    left: tuple[StyledLine, ...] = ()
    right: tuple[StyledLine, ...] = ()

    def __post_init__(self) -> None:
        if len(self.left) != len(self.right):
            raise ValueError(
                f"Unaligned diff: {len(self.left)} left lines, {len(self.right)} right lines"
            )

    def __len__(self) -> int:
        return len(self.left)

    def pairs(self) -> list[tuple[StyledLine, StyledLine]]:
        """Return the (left, right) line pairs in display order."""
        return list(zip(self.left, self.right))


def json_equal(left: Any, right: Any) -> bool:
    """Deep equality over JSON values.

    Mappings compare regardless of key order, arrays element by element.
    Unlike Python's ``==``, ``true`` never equals ``1`` and ``1`` never
    equals ``1.0``, because each of those spells a different JSON value.
    """
    if type(left) is not type(right):
        return False

    if isinstance(left, dict):
        if left.keys() != right.keys():
            return False
        return all(json_equal(left[key], right[key]) for key in left)

    if isinstance(left, list):
        if len(left) != len(right):
            return False
        return all(json_equal(a, b) for a, b in zip(left, right))

    return left == right


def format_entry(key: str, value: Any) -> str:
    """Format one ``key: value`` diff line."""
    return f"{key}: {compact_json(value)}"


def diff_json_values(
    left: Any,
    right: Any,
    mode: HighlightMode = HighlightMode.SYMMETRIC,
) -> DiffResult:
    """
    Compare two JSON values and build the two columns of styled lines.

    When both values are mappings, every key of either side is listed once,
    in ascending key order. A key missing on one side reads as null there.
    Otherwise the whole values are shown as a single line pair.

    Args:
        left: The left document.
        right: The right document.
        mode: Highlighting convention for differing pairs.

    Returns:
        The aligned diff result. Inputs are not modified.

    Examples:
        >>> result = diff_json_values({"a": 1, "b": 2}, {"a": 1, "b": 3, "c": 4})
        >>> [line.text for line in result.right]
        ['a: 1', 'b: 3', 'c: 4']
    """
    if isinstance(left, dict) and isinstance(right, dict):
        return _diff_mappings(left, right, mode)
    return _diff_whole_values(left, right, mode)


def _diff_mappings(
    left: dict[str, Any],
    right: dict[str, Any],
    mode: HighlightMode,
) -> DiffResult:
    """Build one line pair per key of the union of both mappings."""
    left_lines: list[StyledLine] = []
    right_lines: list[StyledLine] = []

    for key in sorted(set(left) | set(right)):
        left_value = left.get(key)
        right_value = right.get(key)

        if json_equal(left_value, right_value):
            line = StyledLine(format_entry(key, left_value), LineStyle.UNCHANGED)
            left_lines.append(line)
            right_lines.append(line)
        else:
            left_lines.append(
                StyledLine(format_entry(key, left_value), _left_changed_style(mode))
            )
            right_lines.append(
                StyledLine(format_entry(key, right_value), LineStyle.CHANGED)
            )

    return DiffResult(tuple(left_lines), tuple(right_lines))


def _diff_whole_values(left: Any, right: Any, mode: HighlightMode) -> DiffResult:
    """Show two non-mapping values as a single line pair."""
    if mode is HighlightMode.ONE_SIDED:
        left_style, right_style = LineStyle.UNCHANGED, LineStyle.CHANGED
    elif json_equal(left, right):
        left_style = right_style = LineStyle.UNCHANGED
    else:
        left_style = right_style = LineStyle.CHANGED

    return DiffResult(
        (StyledLine(compact_json(left), left_style),),
        (StyledLine(compact_json(right), right_style),),
    )


def _left_changed_style(mode: HighlightMode) -> LineStyle:
    if mode is HighlightMode.ONE_SIDED:
        return LineStyle.UNCHANGED
    return LineStyle.CHANGED


def summarize(result: DiffResult) -> dict[str, int]:
    """
    Count line pairs by status.

    A pair counts as changed if either of its lines is styled as changed.

    Args:
        result: The diff result from diff_json_values().

    Returns:
        A dictionary with "total", "unchanged" and "changed" counts.

    Examples:
        >>> summarize(diff_json_values({"a": 1}, {"a": 2}))
        {'total': 1, 'unchanged': 0, 'changed': 1}
    """
    changed = sum(
        1
        for left, right in result.pairs()
        if LineStyle.CHANGED in (left.style, right.style)
    )
    return {
        "total": len(result),
        "unchanged": len(result) - changed,
        "changed": changed,
    }
