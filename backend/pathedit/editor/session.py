"""Path editor state machine.

Owns the canonical text, the pending text, the draggable points and the
append controls, and exposes the operations a canvas client drives:

- ``validate``: promote pending text once it parses
- ``append_segment``: add a default segment of a chosen kind
- ``close_path``: add or strip the trailing close command
- ``round_values``: round every number to an integer
- ``update_points_after_drag``: commit a moved point back to text

``is_closed`` is always read from the canonical text, never stored. Each
operation returns an ``EditOutcome``; none of them raises on bad path data.
"""

from __future__ import annotations

import logging

from pathedit.config import settings
from pathedit.editor.append import default_segment
from pathedit.editor.templates import get_template
from pathedit.models.editor import EditorSnapshot, EditOutcome
from pathedit.models.points import Point
from pathedit.path.absolutizer import last_point
from pathedit.path.breakdown import CommandBreakdown, describe_commands
from pathedit.path.commands import APPENDABLE_KINDS, round_command
from pathedit.path.parser import parse_path, try_parse_path
from pathedit.path.patcher import patch_path
from pathedit.path.points import points_from_commands
from pathedit.path.serializer import (
    format_command,
    format_commands,
    format_path_string,
    is_closed_path,
    with_close,
    without_close,
)

logger = logging.getLogger(__name__)


class PathEditor:
    """Keeps path text and draggable points in sync for one path."""

    def __init__(
        self,
        initial_path: str | None = None,
        *,
        precision: int | None = None,
        append_kind: str | None = None,
        is_relative: bool = False,
    ) -> None:
        self.precision = settings.number_precision if precision is None else precision
        self.append_kind = (append_kind or settings.default_append_kind).upper()
        if self.append_kind not in APPENDABLE_KINDS:
            raise ValueError(f"Cannot append command kind {self.append_kind!r}")
        self.is_relative = is_relative

        self.canonical = ""
        self.pending = ""
        self.points: list[Point] = []
        self.is_valid = True

        if initial_path is None:
            initial_path = get_template(settings.default_template).path_data
        self.load_path(initial_path)

    @property
    def is_closed(self) -> bool:
        return is_closed_path(self.canonical)

    def _promote(self, text: str, *, mirror_pending: bool = True) -> None:
        # Points are derived before any field is written so the transition
        # is all or nothing.
        points = points_from_commands(parse_path(text))
        self.canonical = text
        if mirror_pending:
            self.pending = text
        self.points = points
        self.is_valid = True

    def validate(self) -> EditOutcome:
        """Promote the pending text to canonical if it parses.

        On failure the pending text is kept verbatim and only ``is_valid``
        changes. Empty or whitespace-only text is always invalid.
        """
        if not self.pending.strip():
            self.is_valid = False
            return EditOutcome.REJECTED

        commands = try_parse_path(self.pending)
        if commands is None:
            self.is_valid = False
            return EditOutcome.REJECTED

        formatted = format_commands(commands, self.precision)
        previous = self.canonical
        self._promote(formatted, mirror_pending=False)
        return EditOutcome.APPLIED if formatted != previous else EditOutcome.UNCHANGED

    def load_path(self, text: str) -> EditOutcome:
        """Replace the pending text with *text* and validate it."""
        self.pending = text
        return self.validate()

    def load_template(self, template_id: str) -> EditOutcome:
        """Load a built-in template into both canonical and pending text."""
        template = get_template(template_id)
        self._promote(format_path_string(template.path_data, self.precision))
        logger.debug("Loaded template %s", template_id)
        return EditOutcome.APPLIED

    def append_segment(self, kind: str | None = None, relative: bool | None = None) -> EditOutcome:
        """Append a default segment of *kind* after the last absolute point.

        The result always lands in the pending text; it is promoted only if
        the combined text parses. A kind outside ``APPENDABLE_KINDS`` (such
        as Z, which ``close_path`` owns) is ``REJECTED`` with no change.
        """
        kind = (kind or self.append_kind).upper()
        if kind not in APPENDABLE_KINDS:
            logger.debug("Append skipped: %r is not an appendable kind", kind)
            return EditOutcome.REJECTED
        relative = self.is_relative if relative is None else relative

        commands = try_parse_path(self.pending)
        last = last_point(commands) if commands else None
        segment = default_segment(kind, last, relative)

        combined = f"{self.pending.strip()} {format_command(segment, self.precision)}".strip()
        self.pending = format_path_string(combined, self.precision)

        if try_parse_path(self.pending) is None:
            self.is_valid = False
            return EditOutcome.REJECTED

        self._promote(self.pending)
        return EditOutcome.APPLIED

    def close_path(self, closed: bool) -> EditOutcome:
        """Add or strip the trailing close command on the canonical text."""
        text = self.canonical.strip()
        if not text:
            return EditOutcome.UNCHANGED

        text = with_close(text) if closed else without_close(text)
        formatted = format_path_string(text, self.precision)
        if formatted == self.canonical and formatted == self.pending:
            return EditOutcome.UNCHANGED

        self._promote(formatted)
        return EditOutcome.APPLIED

    def round_values(self) -> EditOutcome:
        """Round every numeric parameter of the pending text to an integer.

        Arc flags are untouched. If the pending text is blank or does not
        parse, nothing changes and ``REJECTED`` is returned.
        """
        if not self.pending.strip():
            logger.debug("Round skipped: pending text is empty")
            return EditOutcome.REJECTED

        commands = try_parse_path(self.pending)
        if commands is None:
            logger.debug("Round skipped: pending text does not parse")
            return EditOutcome.REJECTED

        rounded = format_commands([round_command(cmd) for cmd in commands], self.precision)
        previous = (self.canonical, self.pending)
        self._promote(rounded)
        return EditOutcome.UNCHANGED if previous == (rounded, rounded) else EditOutcome.APPLIED

    def update_points_after_drag(self, changed_id: str) -> EditOutcome:
        """Commit the in-place move of point *changed_id* back to text."""
        if not self.canonical.strip():
            return EditOutcome.UNCHANGED

        text = patch_path(changed_id, self.canonical, self.points, self.is_closed, self.precision)
        if not text.strip() or try_parse_path(text) is None:
            logger.warning("Drag of %s produced unparseable text; keeping current path", changed_id)
            return EditOutcome.REJECTED

        previous = self.canonical
        self._promote(text)
        return EditOutcome.APPLIED if text != previous else EditOutcome.UNCHANGED

    def move_point(self, point_id: str, x: float, y: float) -> EditOutcome:
        """Move one point and commit it, as a completed drag gesture would."""
        point = next((p for p in self.points if p.id == point_id), None)
        if point is None:
            return EditOutcome.UNCHANGED
        point.x = x
        point.y = y
        return self.update_points_after_drag(point_id)

    def breakdown(self) -> list[CommandBreakdown]:
        return describe_commands(self.canonical)

    def snapshot(self) -> EditorSnapshot:
        return EditorSnapshot(
            canonical=self.canonical,
            pending=self.pending,
            points=[p.model_copy() for p in self.points],
            append_kind=self.append_kind,
            is_relative=self.is_relative,
            is_valid=self.is_valid,
            is_closed=self.is_closed,
        )

    @classmethod
    def from_snapshot(cls, snap: EditorSnapshot, *, precision: int | None = None) -> PathEditor:
        """Rebuild an editor from a snapshot, keeping its (possibly moved) points."""
        editor = cls(
            snap.canonical,
            precision=precision,
            append_kind=snap.append_kind,
            is_relative=snap.is_relative,
        )
        editor.pending = snap.pending
        editor.is_valid = snap.is_valid
        if snap.points:
            editor.points = [p.model_copy() for p in snap.points]
        return editor
