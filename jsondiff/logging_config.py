"""Logging setup for the viewer.

The terminal belongs to the UI while the app runs, so records go either to
a log file or to the Textual devtools console (``textual console``).
"""

from __future__ import annotations

import logging

from textual.logging import TextualHandler

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "WARNING", log_file: str | None = None) -> logging.Handler:
    """Attach a single handler to the ``jsondiff`` logger.

    Args:
        level: Logging level name (e.g. "DEBUG").
        log_file: Optional path of a file to append records to.

    Returns:
        The handler that was installed.

    Raises:
        ValueError: If the level name is unknown.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")

    if log_file:
        handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
    else:
        handler = TextualHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger = logging.getLogger("jsondiff")
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
        existing.close()
    logger.addHandler(handler)
    logger.setLevel(numeric_level)
    logger.propagate = False
    return handler
