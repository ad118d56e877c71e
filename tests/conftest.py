"""Pytest configuration and shared fixtures for jsondiff tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Generator

import pytest

from jsondiff.tui.session import DiffSession


@pytest.fixture
def left_document() -> dict[str, Any]:
    """Return the left side of a typical comparison."""
    return {
        "name": "service-a",
        "version": 1,
        "tags": ["web", "api"],
        "limits": {"cpu": 2, "memory": "512Mi"},
        "enabled": True,
    }


@pytest.fixture
def right_document() -> dict[str, Any]:
    """Return the right side of a typical comparison."""
    return {
        "name": "service-a",
        "version": 2,
        "tags": ["web", "api"],
        "limits": {"memory": "1Gi", "cpu": 2},
        "owner": "platform",
        "enabled": True,
    }


@pytest.fixture
def session(tmp_path: Path) -> Generator[DiffSession, None, None]:
    """Return a session whose working copies live in tmp_path."""
    workdir = tmp_path / "work"
    workdir.mkdir()
    diff_session = DiffSession.create(directory=workdir)
    yield diff_session
    diff_session.close()

