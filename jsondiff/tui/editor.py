"""
External editor support.

The edit actions hand a working copy to the user's editor. The app runs the
editor inside ``App.suspend()``, which gives the terminal back to the editor
and restores the UI afterwards, whether or not the editor succeeded.
"""

from __future__ import annotations

import logging
import os
import shlex
import subprocess
from typing import Mapping

logger = logging.getLogger(__name__)

DEFAULT_EDITOR = "vim"


class EditorError(Exception):
    """The editor could not be started or exited with an error."""


def resolve_editor(environ: Mapping[str, str] | None = None) -> str:
    """Pick the editor command: $VISUAL, then $EDITOR, then vim."""
    if environ is None:
        environ = os.environ
    for variable in ("VISUAL", "EDITOR"):
        value = environ.get(variable, "").strip()
        if value:
            return value
    return DEFAULT_EDITOR


def build_editor_command(editor: str, path: str) -> list[str]:
    """Split an editor command line and append the file to edit.

    Examples:
        >>> build_editor_command("code --wait", "/tmp/left.json")
        ['code', '--wait', '/tmp/left.json']
    """
    args = shlex.split(editor)
    if not args:
        raise EditorError("No editor configured")
    return [*args, str(path)]


def run_editor(command: list[str]) -> None:
    """Run the editor and wait for it to exit.

    Args:
        command: The full command, as returned by build_editor_command().

    Raises:
        EditorError: If the executable is missing or exits non-zero.
    """
    logger.info("Running editor: %s", shlex.join(command))
    try:
        completed = subprocess.run(command, check=False)
    except FileNotFoundError as e:
        raise EditorError(f"Editor not found: {command[0]}") from e
    except OSError as e:
        raise EditorError(f"Cannot start editor {command[0]}: {e}") from e

    if completed.returncode != 0:
        raise EditorError(f"{command[0]} exited with status {completed.returncode}")
