"""Tests for the viewer state in jsondiff/tui/session.py."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from jsondiff.data_formats import ParseError, ReadError
from jsondiff.diff_engine import HighlightMode, LineStyle
from jsondiff.tui.session import LEFT, RIGHT, DiffSession, WorkingCopy


class TestWorkingCopy:
    """Tests for WorkingCopy."""

    def test_write_and_read(self, tmp_path):
        """Text written to the working copy reads back unchanged."""
        working_copy = WorkingCopy(tmp_path / "w.json")
        working_copy.write_text('{"a": 1}')
        assert working_copy.read_text() == '{"a": 1}'

    def test_clear_truncates(self, tmp_path):
        """clear() leaves an existing, empty file."""
        working_copy = WorkingCopy(tmp_path / "w.json")
        working_copy.write_text("[1, 2]")
        working_copy.clear()
        assert working_copy.path.exists()
        assert working_copy.read_text() == ""

    def test_remove_is_idempotent(self, tmp_path):
        """Removing a missing working copy is not an error."""
        working_copy = WorkingCopy(tmp_path / "w.json")
        working_copy.write_text("1")
        working_copy.remove()
        working_copy.remove()
        assert not working_copy.path.exists()


class TestDiffSessionCreate:
    """Tests for DiffSession.create() and close()."""

    def test_creates_empty_working_copies(self, session):
        """Both working copies exist and are empty."""
        for side in (LEFT, RIGHT):
            slot = session.slot(side)
            assert slot.working_copy.path.exists()
            assert slot.working_copy.read_text() == ""
            assert slot.display_text == ""
        assert session.left.working_copy.path != session.right.working_copy.path

    def test_initial_state(self, session):
        """No diff is shown before one is requested."""
        assert session.last_diff is None
        assert session.show_diff is False
        assert session.mode is HighlightMode.SYMMETRIC

    def test_temporary_directory_removed_on_close(self):
        """A session that owns its directory removes it on close."""
        diff_session = DiffSession.create()
        directory = diff_session.left.working_copy.path.parent
        assert directory.is_dir()
        diff_session.close()
        assert not directory.exists()

    def test_given_directory_kept_on_close(self, tmp_path):
        """Only the working copies are removed from a caller's directory."""
        diff_session = DiffSession.create(directory=tmp_path)
        diff_session.close()
        assert tmp_path.is_dir()
        assert list(tmp_path.iterdir()) == []

    def test_unknown_side(self, session):
        """Only 'left' and 'right' are valid sides."""
        with pytest.raises(ValueError):
            session.slot("middle")


class TestDocumentRefresh:
    """Tests for reloading a side after it was edited."""

    def test_refresh_pretty_prints(self, session):
        """The display text is the pretty-printed working copy."""
        session.left.working_copy.write_text('{"b":1,"a":2}')
        assert session.refresh(LEFT) == '{\n  "a": 2,\n  "b": 1\n}'
        assert session.left.display_text == '{\n  "a": 2,\n  "b": 1\n}'

    def test_empty_working_copy_shows_nothing(self, session):
        """An empty working copy is shown as an empty panel."""
        session.left.working_copy.write_text("[1]")
        session.refresh(LEFT)
        session.left.working_copy.clear()
        assert session.refresh(LEFT) == ""

    @pytest.mark.parametrize("text", ["\n", "  \n\t"])
    def test_blank_working_copy_shows_nothing(self, session, text):
        """A working copy holding only whitespace is shown as an empty panel."""
        session.left.working_copy.write_text('{"a": 1}')
        session.refresh(LEFT)
        session.left.working_copy.write_text(text)
        assert session.refresh(LEFT) == ""
        assert session.left.display_text == ""

    def test_blank_working_copy_cannot_be_diffed(self, session):
        """Diffing a blank side is still a parse error."""
        session.left.working_copy.write_text("  \n")
        session.right.working_copy.write_text("{}")
        with pytest.raises(ParseError):
            session.run_diff()

    def test_parse_error_keeps_previous_text(self, session):
        """Invalid JSON raises and leaves the previous display text."""
        session.right.working_copy.write_text('{"a": 1}')
        session.refresh(RIGHT)
        previous = session.right.display_text

        session.right.working_copy.write_text("{not json")
        with pytest.raises(ParseError):
            session.refresh(RIGHT)
        assert session.right.display_text == previous

    def test_refresh_returns_to_document_view(self, session):
        """Editing a side hides the diff until the next diff request."""
        session.left.working_copy.write_text('{"a": 1}')
        session.right.working_copy.write_text('{"a": 2}')
        session.run_diff()
        assert session.show_diff

        session.left.working_copy.write_text('{"a": 3}')
        session.refresh(LEFT)
        assert session.show_diff is False
        assert session.last_diff is not None

    def test_failed_refresh_keeps_diff_view(self, session):
        """A failed reload does not change what is shown."""
        session.left.working_copy.write_text('{"a": 1}')
        session.right.working_copy.write_text('{"a": 1}')
        session.run_diff()

        session.left.working_copy.write_text("[")
        with pytest.raises(ParseError):
            session.refresh(LEFT)
        assert session.show_diff is True


class TestLoadFrom:
    """Tests for DocumentSlot.load_from()."""

    def test_copies_source(self, session, tmp_path):
        """A valid source is copied byte for byte."""
        source = tmp_path / "left.json"
        source.write_text('{ "z": [1, 2] }', encoding="utf-8")
        session.left.load_from(source)
        assert session.left.working_copy.read_text() == '{ "z": [1, 2] }'
        assert session.left.display_text == '{\n  "z": [\n    1,\n    2\n  ]\n}'

    def test_missing_source(self, session, tmp_path):
        """A missing source raises ReadError and copies nothing."""
        with pytest.raises(ReadError):
            session.left.load_from(tmp_path / "nope.json")
        assert session.left.working_copy.read_text() == ""

    def test_malformed_source(self, session, tmp_path):
        """A malformed source raises ParseError and copies nothing."""
        source = tmp_path / "right.json"
        source.write_text("{oops")
        with pytest.raises(ParseError):
            session.right.load_from(source)
        assert session.right.working_copy.read_text() == ""


class TestRunDiff:
    """Tests for DiffSession.run_diff()."""

    def test_diff_reads_working_copies(self, session, left_document, right_document):
        """Both sides are parsed from disk and compared."""
        session.left.working_copy.write_text(json.dumps(left_document))
        session.right.working_copy.write_text(json.dumps(right_document))

        result = session.run_diff()
        assert session.last_diff is result
        assert session.show_diff is True
        assert len(result) == len(set(left_document) | set(right_document))

    def test_diff_sees_external_changes(self, session):
        """Each diff works on a fresh snapshot of the files."""
        session.left.working_copy.write_text('{"a": 1}')
        session.right.working_copy.write_text('{"a": 1}')
        first = session.run_diff()
        assert first.right[0].style is LineStyle.UNCHANGED

        session.right.working_copy.write_text('{"a": 2}')
        second = session.run_diff()
        assert second.right[0].text == "a: 2"
        assert second.right[0].style is LineStyle.CHANGED

    def test_diff_uses_session_mode(self, tmp_path):
        """The session's highlight mode is passed to the engine."""
        diff_session = DiffSession.create(directory=tmp_path, mode=HighlightMode.ONE_SIDED)
        diff_session.left.working_copy.write_text('{"a": 1}')
        diff_session.right.working_copy.write_text('{"a": 2}')
        result = diff_session.run_diff()
        assert result.left[0].style is LineStyle.UNCHANGED
        assert result.right[0].style is LineStyle.CHANGED

    def test_parse_error_leaves_state(self, session):
        """A failed diff keeps the previous result and view."""
        session.left.working_copy.write_text('{"a": 1}')
        session.right.working_copy.write_text('{"a": 1}')
        previous = session.run_diff()

        session.right.working_copy.write_text("{not json")
        with pytest.raises(ParseError):
            session.run_diff()
        assert session.last_diff is previous
        assert session.show_diff is True

    def test_empty_documents_cannot_be_diffed(self, session):
        """Empty working copies are reported, not diffed as empty."""
        with pytest.raises(ParseError):
            session.run_diff()
        assert session.last_diff is None
        assert session.show_diff is False

    def test_missing_working_copy(self, session):
        """A deleted working copy raises ReadError."""
        session.left.working_copy.remove()
        with pytest.raises(ReadError):
            session.run_diff()


class TestClear:
    """Tests for DiffSession.clear()."""

    def test_clear_empties_both_sides(self, session):
        """Both files and both panels are emptied."""
        for side in (LEFT, RIGHT):
            session.slot(side).working_copy.write_text("[1]")
            session.refresh(side)
        session.run_diff()

        session.clear()
        for side in (LEFT, RIGHT):
            slot = session.slot(side)
            assert slot.working_copy.read_text() == ""
            assert slot.display_text == ""
        assert session.show_diff is False

    def test_clear_keeps_files(self, session):
        """Working copies still exist after clearing."""
        session.clear()
        assert Path(session.left.working_copy.path).exists()
        assert Path(session.right.working_copy.path).exists()
