"""
Main Textual application for the JSON Diff Viewer.

This is the entry point for the TUI that shows two JSON documents side by
side and highlights the top-level keys whose values differ.

Keys:
    a / b: edit the left / right document in $VISUAL or $EDITOR
    c: clear both documents
    d: diff the documents
    q: quit
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Mapping, Sequence

from textual.app import App, SuspendNotSupported

from jsondiff import __version__
from jsondiff.config import LEFT_FILE_NAME, RIGHT_FILE_NAME, AppConfig
from jsondiff.data_formats import JsonLoadError
from jsondiff.diff_engine import HighlightMode
from jsondiff.logging_config import configure_logging
from jsondiff.tui.editor import EditorError, build_editor_command, resolve_editor, run_editor
from jsondiff.tui.session import DiffSession
from jsondiff.tui.views import DiffScreen

logger = logging.getLogger(__name__)


class JsonDiffApp(App):
    """A Textual app for comparing two JSON documents side by side."""

    TITLE = "JSON Diff"

    CSS = """
    Screen {
        background: $surface;
    }

    Header {
        dock: top;
        background: $primary;
        color: $text;
    }

    Footer {
        dock: bottom;
        height: 1;
        background: $primary-darken-2;
    }
    """

    def __init__(self, session: DiffSession, config: AppConfig | None = None):
        """Initialize the app with a prepared session.

        Args:
            session: Working copies and diff state for both sides.
            config: Runtime settings; defaults are used when omitted.
        """
        super().__init__()
        self.session = session
        self.app_config = config or AppConfig()

    def on_mount(self) -> None:
        """Push the side-by-side screen."""
        self.push_screen(DiffScreen(self.session))

    def edit_file(self, path: str | Path) -> None:
        """Hand a file to the external editor while the UI is suspended.

        The terminal is restored when the editor exits, including when it
        fails to start.

        Raises:
            EditorError: If the editor is missing, fails, or the terminal
                cannot be suspended.
        """
        command = build_editor_command(self.app_config.editor, str(path))
        try:
            with self.suspend():
                run_editor(command)
        except SuspendNotSupported as e:
            raise EditorError("This terminal does not support running an editor") from e


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="json-diff",
        description="Compare two JSON documents side by side in a terminal UI, "
        "highlighting the top-level keys whose values differ.",
    )
    parser.add_argument(
        "-f",
        "--files",
        action="store_true",
        help=f"Load {LEFT_FILE_NAME} and {RIGHT_FILE_NAME} from the current directory",
    )
    parser.add_argument(
        "--one-sided",
        action="store_true",
        help="Highlight only the right side of differing lines",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Write log records to this file (default: Textual devtools console)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def build_config(
    args: argparse.Namespace, environ: Mapping[str, str] | None = None
) -> AppConfig:
    """Combine parsed flags and environment variables into an AppConfig."""
    return AppConfig(
        files_mode=args.files,
        mode=HighlightMode.ONE_SIDED if args.one_sided else HighlightMode.SYMMETRIC,
        editor=resolve_editor(environ),
        log_file=args.log_file,
        log_level=args.log_level,
    )


def load_initial_files(session: DiffSession, config: AppConfig, directory: str = ".") -> None:
    """Copy left.json and right.json into the session's working copies.

    Raises:
        JsonLoadError: If either file is missing or malformed.
    """
    session.left.load_from(os.path.join(directory, config.left_name))
    session.right.load_from(os.path.join(directory, config.right_name))


def main(argv: Sequence[str] | None = None) -> None:
    """Parse arguments and run the application."""
    args = parse_args(argv)
    config = build_config(args)
    configure_logging(config.log_level, config.log_file)

    session = DiffSession.create(mode=config.mode)
    try:
        if config.files_mode:
            try:
                load_initial_files(session, config)
            except JsonLoadError as e:
                print(f"Error: {e}", file=sys.stderr)
                sys.exit(1)

        logger.info("Starting with editor %r, %s highlighting", config.editor, config.mode.value)
        app = JsonDiffApp(session, config)
        app.run()
    finally:
        session.close()


if __name__ == "__main__":
    main()
