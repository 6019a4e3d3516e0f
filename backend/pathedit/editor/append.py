"""Default segments for the append control.

A new segment is placed at fixed per-kind offsets from the last absolute
point. Relative segments carry the same geometry written as deltas.
"""

from __future__ import annotations

from pathedit.path.absolutizer import Vec
from pathedit.path.commands import (
    APPENDABLE_KINDS,
    ArcTo,
    Command,
    CubicTo,
    HorizontalTo,
    LineTo,
    MoveTo,
    QuadraticTo,
    SmoothCubicTo,
    SmoothQuadraticTo,
    VerticalTo,
)

# Where a segment starts when the path has no commands yet.
EMPTY_PATH_START: Vec = (100.0, 100.0)

DEFAULT_ARC_RADIUS = 50.0


def default_segment(kind: str, last: Vec | None, relative: bool) -> Command:
    """Build the default command of *kind* following *last*.

    When *last* is None the segment is positioned from ``EMPTY_PATH_START``
    and, having nothing to be relative to, uses no delta offset.
    """
    kind = kind.upper()
    if kind not in APPENDABLE_KINDS:
        raise ValueError(f"Cannot append command kind {kind!r}")

    x, y = last if last is not None else EMPTY_PATH_START
    ox, oy = last if (relative and last is not None) else (0.0, 0.0)

    def at(dx: float, dy: float) -> tuple[float, float]:
        return x + dx - ox, y + dy - oy

    if kind == "M":
        return MoveTo(*at(50, 0), relative=relative)
    if kind == "L":
        return LineTo(*at(50, 0), relative=relative)
    if kind == "H":
        return HorizontalTo(at(50, 0)[0], relative=relative)
    if kind == "V":
        return VerticalTo(at(0, 50)[1], relative=relative)
    if kind == "C":
        return CubicTo(*at(20, -50), *at(40, -50), *at(50, 0), relative=relative)
    if kind == "S":
        return SmoothCubicTo(*at(20, -50), *at(50, 0), relative=relative)
    if kind == "T":
        return SmoothQuadraticTo(*at(20, -50), relative=relative)
    if kind == "A":
        return ArcTo(
            DEFAULT_ARC_RADIUS, DEFAULT_ARC_RADIUS, 0.0, False, True, *at(50, 0), relative=relative
        )
    return QuadraticTo(*at(25, -50), *at(50, 0), relative=relative)
