"""
Session state for the diff viewer.

Holds the two document slots and the last diff result. Nothing is
recomputed automatically: the app calls refresh() after an edit and
run_diff() when the user asks for a diff.
"""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
from dataclasses import dataclass, field
from pathlib import Path

from jsondiff.data_formats import load_json, parse_json, pretty_json, read_document
from jsondiff.diff_engine import DiffResult, HighlightMode, diff_json_values

logger = logging.getLogger(__name__)

LEFT = "left"
RIGHT = "right"


class WorkingCopy:
    """A file holding one side's document text while the app runs."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def read_text(self) -> str:
        return self.path.read_text(encoding="utf-8")

    def write_text(self, text: str) -> None:
        self.path.write_text(text, encoding="utf-8")

    def clear(self) -> None:
        """Truncate the file to zero bytes."""
        with open(self.path, "w", encoding="utf-8"):
            pass

    def remove(self) -> None:
        self.path.unlink(missing_ok=True)

    def __repr__(self) -> str:
        return f"WorkingCopy({str(self.path)!r})"


@dataclass
class DocumentSlot:
    """One side of the comparison.

    Attributes:
        side: "left" or "right".
        working_copy: The file the editor writes to.
        display_text: Pretty-printed text shown while no diff is displayed.
    """

    side: str
    working_copy: WorkingCopy
    display_text: str = ""

    def refresh(self) -> str:
        """Re-read the working copy and update the display text.

        A working copy that is empty or holds only whitespace shows as an
        empty panel.

        Returns:
            The new display text.

        Raises:
            JsonLoadError: If the file cannot be read or parsed. The previous
                display text is kept.
        """
        path = str(self.working_copy.path)
        text = read_document(path)
        if not text.strip():
            self.display_text = ""
            return self.display_text

        self.display_text = pretty_json(parse_json(text, source=path))
        return self.display_text

    def load_from(self, source: str | Path) -> None:
        """Validate a JSON file and copy it into the working copy.

        Raises:
            JsonLoadError: If the source is missing or malformed. The
                working copy is left untouched.
        """
        value = load_json(str(source))
        shutil.copyfile(source, self.working_copy.path)
        self.display_text = pretty_json(value)
        logger.info("Loaded %s into %s side", source, self.side)

    def clear(self) -> None:
        self.working_copy.clear()
        self.display_text = ""


@dataclass
class DiffSession:
    """Both document slots plus the result of the last diff.

    Attributes:
        left: The left document slot.
        right: The right document slot.
        mode: Highlighting convention passed to the diff engine.
        last_diff: Result of the most recent successful diff, if any.
        show_diff: Whether the panels show the diff or the documents.
    """

    left: DocumentSlot
    right: DocumentSlot
    mode: HighlightMode = HighlightMode.SYMMETRIC
    last_diff: DiffResult | None = None
    show_diff: bool = False
    _temp_dir: str | None = field(default=None, repr=False)

    @classmethod
    def create(
        cls,
        directory: str | Path | None = None,
        mode: HighlightMode = HighlightMode.SYMMETRIC,
    ) -> DiffSession:
        """Allocate two empty working copies.

        Args:
            directory: Where to put the working copies. A fresh temporary
                directory is created (and removed by close()) when omitted.
            mode: Highlighting convention for diffs.
        """
        temp_dir = None
        if directory is None:
            temp_dir = tempfile.mkdtemp(prefix="jsondiff-")
            directory = temp_dir

        slots = []
        for side in (LEFT, RIGHT):
            working_copy = WorkingCopy(os.path.join(directory, f"{side}.json"))
            working_copy.clear()
            slots.append(DocumentSlot(side, working_copy))

        return cls(left=slots[0], right=slots[1], mode=mode, _temp_dir=temp_dir)

    def slot(self, side: str) -> DocumentSlot:
        if side == LEFT:
            return self.left
        if side == RIGHT:
            return self.right
        raise ValueError(f"Unknown side: {side!r}")

    def refresh(self, side: str) -> str:
        """Reload one side after it was edited and go back to document view.

        Raises:
            JsonLoadError: If the working copy is unreadable or malformed.
                The view mode and display text are unchanged.
        """
        text = self.slot(side).refresh()
        self.show_diff = False
        return text

    def clear(self) -> None:
        """Empty both working copies and panels."""
        self.left.clear()
        self.right.clear()
        self.show_diff = False

    def run_diff(self) -> DiffResult:
        """Parse both working copies fresh and compare them.

        Returns:
            The new diff result, also stored as last_diff.

        Raises:
            JsonLoadError: If either side cannot be read or parsed. The
                session state is unchanged.
        """
        left_value = load_json(str(self.left.working_copy.path))
        right_value = load_json(str(self.right.working_copy.path))

        result = diff_json_values(left_value, right_value, self.mode)
        self.last_diff = result
        self.show_diff = True
        logger.debug("Diff computed: %d line pairs", len(result))
        return result

    def close(self) -> None:
        """Remove the working copies (and the temporary directory, if owned)."""
        self.left.working_copy.remove()
        self.right.working_copy.remove()
        if self._temp_dir is not None:
            shutil.rmtree(self._temp_dir, ignore_errors=True)
            self._temp_dir = None
