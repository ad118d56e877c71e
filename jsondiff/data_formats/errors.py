"""Errors raised while loading JSON documents."""

from __future__ import annotations


class JsonLoadError(Exception):
    """Base class for failures to turn a file into a JSON value.

    Attributes:
        path: The file (or source label) that failed to load.
    """

    def __init__(self, path: str, message: str) -> None:
        super().__init__(message)
        self.path = path


class ReadError(JsonLoadError):
    """The file could not be read (missing, permission denied, a directory)."""

    def __init__(self, path: str, error: OSError) -> None:
        reason = error.strerror or str(error)
        super().__init__(path, f"Cannot read {path}: {reason}")
        self.error = error


class ParseError(JsonLoadError):
    """The content is not well-formed JSON.

    Attributes:
        lineno: 1-based line of the error, if known.
        colno: 1-based column of the error, if known.
    """

    def __init__(
        self,
        path: str,
        reason: str,
        lineno: int | None = None,
        colno: int | None = None,
    ) -> None:
        location = f" (line {lineno}, column {colno})" if lineno is not None else ""
        super().__init__(path, f"Invalid JSON in {path}{location}: {reason}")
        self.reason = reason
        self.lineno = lineno
        self.colno = colno
