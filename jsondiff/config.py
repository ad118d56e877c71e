"""Runtime configuration assembled from command-line flags and the environment."""

from __future__ import annotations

from dataclasses import dataclass

from jsondiff.diff_engine import HighlightMode
from jsondiff.tui.editor import DEFAULT_EDITOR

# Fixed file names read in file mode
LEFT_FILE_NAME = "left.json"
RIGHT_FILE_NAME = "right.json"


@dataclass(frozen=True)
class AppConfig:
    """Settings for one run of the viewer.

    Attributes:
        files_mode: Load left.json and right.json from the working directory.
        mode: Highlighting convention for differing lines.
        editor: Editor command line used for the edit actions.
        log_file: Write log records here instead of the Textual console.
        log_level: Name of the logging level.
        left_name: File name read for the left side in file mode.
        right_name: File name read for the right side in file mode.
    """

    files_mode: bool = False
    mode: HighlightMode = HighlightMode.SYMMETRIC
    editor: str = DEFAULT_EDITOR
    log_file: str | None = None
    log_level: str = "WARNING"
    left_name: str = LEFT_FILE_NAME
    right_name: str = RIGHT_FILE_NAME
