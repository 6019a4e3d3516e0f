"""Tests for the path editor state machine."""

from __future__ import annotations

import pytest

from pathedit.editor.session import PathEditor
from pathedit.models.editor import EditOutcome
from tests.conftest import MIXED_CASE_PATH, QUADRATIC_PATH


def _point(editor: PathEditor, pid: str):
    return next(p for p in editor.points if p.id == pid)


class TestInitialState:
    def test_default_template(self):
        editor = PathEditor()
        assert editor.canonical == QUADRATIC_PATH
        assert editor.pending == QUADRATIC_PATH
        assert [p.id for p in editor.points] == ["pt-0-m", "pt-1-q1", "pt-1-q-end"]
        assert editor.is_valid
        assert not editor.is_closed
        assert editor.append_kind == "Q"
        assert editor.is_relative is False

    def test_initial_text_is_formatted(self):
        editor = PathEditor("M0 0L10 10")
        assert editor.canonical == "M 0,0 L 10,10"

    def test_invalid_initial_text(self):
        editor = PathEditor("X 1,1")
        assert editor.canonical == ""
        assert editor.pending == "X 1,1"
        assert editor.points == []
        assert not editor.is_valid

    def test_precision(self):
        assert PathEditor("M 0.123,0", precision=2).canonical == "M 0.12,0"

    def test_unknown_append_kind(self):
        with pytest.raises(ValueError):
            PathEditor(QUADRATIC_PATH, append_kind="Z")


class TestValidate:
    def test_invalid_pending_is_kept(self, editor):
        points_before = list(editor.points)
        editor.pending = "X 10,10"

        assert editor.validate() is EditOutcome.REJECTED
        assert editor.pending == "X 10,10"
        assert editor.canonical == QUADRATIC_PATH
        assert editor.points == points_before
        assert not editor.is_valid

    def test_invalid_pending_keeps_closed_state(self):
        """A rejected edit that drops the Z leaves the closed canonical path closed."""
        editor = PathEditor("M 0,0 L 10,10 Z")
        editor.pending = "M 0,0 L 10,"

        assert editor.validate() is EditOutcome.REJECTED
        assert editor.is_closed
        assert editor.canonical == "M 0,0 L 10,10 Z"

    def test_valid_pending_is_promoted(self, editor):
        """Validation promotes the formatted text but leaves pending as typed."""
        editor.pending = "M0 0L5 5"

        assert editor.validate() is EditOutcome.APPLIED
        assert editor.canonical == "M 0,0 L 5,5"
        assert editor.pending == "M0 0L5 5"
        assert [p.id for p in editor.points] == ["pt-0-m", "pt-1-end"]
        assert editor.is_valid

    def test_same_text_is_unchanged(self, editor):
        assert editor.validate() is EditOutcome.UNCHANGED

    @pytest.mark.parametrize("text", ["", "   "])
    def test_empty_text_is_rejected(self, editor, text):
        editor.pending = text
        assert editor.validate() is EditOutcome.REJECTED
        assert editor.canonical == QUADRATIC_PATH
        assert not editor.is_valid

    def test_recovers_after_fix(self, editor):
        editor.pending = "M 0,0 L"
        editor.validate()
        editor.pending = "M 0,0 L 1,1"
        assert editor.validate() is EditOutcome.APPLIED
        assert editor.is_valid

    def test_load_path(self, editor):
        assert editor.load_path("M 1,1 z") is EditOutcome.APPLIED
        assert editor.canonical == "M 1,1 z"
        assert editor.is_closed


class TestAppendSegment:
    @pytest.mark.parametrize(
        ("kind", "segment"),
        [
            ("M", "M 350,200"),
            ("L", "L 350,200"),
            ("H", "H 350"),
            ("V", "V 250"),
            ("C", "C 320,150 340,150 350,200"),
            ("S", "S 320,150 350,200"),
            ("Q", "Q 325,150 350,200"),
            ("T", "T 320,150"),
            ("A", "A 50,50 0 0 1 350,200"),
        ],
    )
    def test_absolute_defaults(self, editor, kind, segment):
        assert editor.append_segment(kind, relative=False) is EditOutcome.APPLIED
        assert editor.canonical == f"{QUADRATIC_PATH} {segment}"
        assert editor.pending == editor.canonical

    @pytest.mark.parametrize(
        ("kind", "segment"),
        [
            ("l", "l 50,0"),
            ("H", "h 50"),
            ("V", "v 50"),
            ("C", "c 20,-50 40,-50 50,0"),
            ("A", "a 50,50 0 0 1 50,0"),
        ],
    )
    def test_relative_defaults(self, editor, kind, segment):
        editor.append_segment(kind, relative=True)
        assert editor.canonical == f"{QUADRATIC_PATH} {segment}"

    def test_uses_editor_controls(self, editor):
        editor.is_relative = True
        editor.append_segment()
        assert editor.canonical == MIXED_CASE_PATH
        assert [p.id for p in editor.points][-2:] == ["pt-2-q1", "pt-2-q-end"]

    def test_follows_last_absolute_point(self, mixed_editor):
        mixed_editor.append_segment("L", relative=False)
        assert mixed_editor.canonical.endswith("L 400,200")

    def test_invalid_pending_is_appended_but_not_promoted(self, editor):
        """Appending to broken text still extends pending and marks it invalid."""
        editor.pending = "X 1,1"

        assert editor.append_segment("Q", relative=False) is EditOutcome.REJECTED
        assert editor.pending == "X 1,1 Q 125,50 150,100"
        assert editor.canonical == QUADRATIC_PATH
        assert not editor.is_valid

    def test_move_on_empty_path(self):
        editor = PathEditor("")
        assert editor.append_segment("M") is EditOutcome.APPLIED
        assert editor.canonical == "M 150,100"
        assert editor.is_valid

    def test_close_is_not_appendable(self, editor):
        """Z is toggled by close_path; appending it is rejected without raising."""
        assert editor.append_segment("Z") is EditOutcome.REJECTED
        assert editor.pending == QUADRATIC_PATH
        assert editor.canonical == QUADRATIC_PATH
        assert editor.is_valid


class TestClosePath:
    def test_close(self):
        editor = PathEditor("M 0,0 L 10,10")
        assert editor.close_path(True) is EditOutcome.APPLIED
        assert editor.canonical == "M 0,0 L 10,10 Z"
        assert editor.pending == editor.canonical
        assert editor.is_closed

    def test_close_twice_is_unchanged(self):
        editor = PathEditor("M 0,0 L 10,10")
        editor.close_path(True)
        assert editor.close_path(True) is EditOutcome.UNCHANGED
        assert editor.canonical == "M 0,0 L 10,10 Z"

    def test_open(self):
        editor = PathEditor("M 0,0 L 10,10 z")
        assert editor.close_path(False) is EditOutcome.APPLIED
        assert editor.canonical == "M 0,0 L 10,10"
        assert not editor.is_closed

    def test_open_path_stays_open(self):
        editor = PathEditor("M 0,0 L 10,10")
        assert editor.close_path(False) is EditOutcome.UNCHANGED

    def test_empty_canonical(self):
        assert PathEditor("").close_path(True) is EditOutcome.UNCHANGED


class TestRoundValues:
    def test_rounds_to_integers(self):
        editor = PathEditor("M 100.6,200.4 L 10.9,10.1")
        assert editor.round_values() is EditOutcome.APPLIED
        assert editor.canonical == "M 101,200 L 11,10"
        assert editor.pending == "M 101,200 L 11,10"
        assert (_point(editor, "pt-0-m").x, _point(editor, "pt-0-m").y) == (101, 200)

    def test_halves_round_up(self):
        """Halves round toward positive infinity, including negative values."""
        editor = PathEditor("m 0.5,0.5 l 1.5,-1.5")
        editor.round_values()
        assert editor.canonical == "m 1,1 l 2,-1"

    def test_arc_flags_untouched(self):
        editor = PathEditor("M 0.4,0.6 A 10.5,10.4 0 1 0 20.5,-0.5")
        editor.round_values()
        assert editor.canonical == "M 0,1 A 11,10 0 1 0 21,0"

    def test_rounds_pending_text(self, editor):
        editor.pending = "M 0.2,0.2 L 3.7,3.7"
        editor.round_values()
        assert editor.canonical == "M 0,0 L 4,4"

    def test_integer_path_is_unchanged(self):
        assert PathEditor("M 1,1 L 2,2").round_values() is EditOutcome.UNCHANGED

    def test_unparseable_pending_leaves_state(self, editor):
        editor.pending = "M 1.5,"
        assert editor.round_values() is EditOutcome.REJECTED
        assert editor.pending == "M 1.5,"
        assert editor.canonical == QUADRATIC_PATH
        assert editor.is_valid

    @pytest.mark.parametrize("text", ["", "   "])
    def test_blank_pending_keeps_path(self, text):
        """Clearing the text and rounding must not wipe the last valid path."""
        editor = PathEditor("M 0,0 L 10,10")
        editor.pending = text

        assert editor.round_values() is EditOutcome.REJECTED
        assert editor.canonical == "M 0,0 L 10,10"
        assert editor.pending == text
        assert [p.id for p in editor.points] == ["pt-0-m", "pt-1-end"]


class TestDrag:
    def test_relative_control_drag(self, mixed_editor):
        assert mixed_editor.move_point("pt-2-q1", 330, 140) is EditOutcome.APPLIED
        expected = "M 100,200 Q 200,100 300,200 q 30,-60 50,0"
        assert mixed_editor.canonical == expected
        assert mixed_editor.pending == expected
        assert (_point(mixed_editor, "pt-2-q1").x, _point(mixed_editor, "pt-2-q1").y) == (330, 140)

    def test_in_place_move_then_commit(self, editor):
        point = _point(editor, "pt-1-q-end")
        point.x = 320
        point.y = 210
        assert editor.update_points_after_drag("pt-1-q-end") is EditOutcome.APPLIED
        assert editor.canonical == "M 100,200 Q 200,100 320,210"

    def test_drag_keeps_close(self):
        editor = PathEditor("M 0,0 L 10,10 Z")
        editor.move_point("pt-1-end", 20, 20)
        assert editor.canonical == "M 0,0 L 20,20 Z"
        assert editor.is_closed

    def test_drop_on_same_spot(self, editor):
        assert editor.move_point("pt-1-q1", 200, 100) is EditOutcome.UNCHANGED

    def test_unknown_point(self, editor):
        assert editor.move_point("pt-7-end", 1, 1) is EditOutcome.UNCHANGED
        assert editor.canonical == QUADRATIC_PATH

    def test_drag_on_empty_path(self):
        """With no canonical path there is nothing to commit and validity is untouched."""
        editor = PathEditor("")
        assert editor.update_points_after_drag("pt-0-m") is EditOutcome.UNCHANGED
        assert editor.canonical == ""
        assert not editor.is_valid


class TestTemplatesAndSnapshots:
    def test_load_template(self, editor):
        assert editor.load_template("cubic-1") is EditOutcome.APPLIED
        assert editor.canonical == "M 100,200 C 150,100 250,100 300,200"
        assert editor.pending == editor.canonical
        assert len(editor.points) == 4

    def test_unknown_template(self, editor):
        with pytest.raises(KeyError):
            editor.load_template("nope")

    def test_snapshot(self, mixed_editor):
        snap = mixed_editor.snapshot()
        assert snap.canonical == MIXED_CASE_PATH
        assert snap.is_closed is False
        assert len(snap.points) == 5
        snap.points[0].x = 999
        assert mixed_editor.points[0].x == 100

    def test_from_snapshot_keeps_moved_points(self, mixed_editor):
        """Points moved in a snapshot are committed by the restored editor."""
        snap = mixed_editor.snapshot()
        for p in snap.points:
            if p.id == "pt-2-q1":
                p.x, p.y = 330, 140

        restored = PathEditor.from_snapshot(snap)
        restored.update_points_after_drag("pt-2-q1")
        assert restored.canonical == "M 100,200 Q 200,100 300,200 q 30,-60 50,0"

    def test_from_snapshot_keeps_pending(self, editor):
        editor.pending = "X 1"
        editor.validate()
        restored = PathEditor.from_snapshot(editor.snapshot())
        assert restored.pending == "X 1"
        assert restored.canonical == QUADRATIC_PATH
        assert not restored.is_valid
