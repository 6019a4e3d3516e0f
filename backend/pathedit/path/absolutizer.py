"""Relative to absolute coordinate resolution.

Walks the command list accumulating the current point. The result is used
for geometry only and is never serialized back: doing so would throw away
the relative/absolute choice the author made per command.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from pathedit.path.commands import (
    ArcTo,
    ClosePath,
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

Vec = tuple[float, float]

ORIGIN: Vec = (0.0, 0.0)


@dataclass(frozen=True)
class AbsoluteSegment:
    """One command resolved to absolute space.

    ``start`` is the current point before the command, ``end`` the current
    point after it. For H/V the missing axis is filled in on ``end``.
    """

    command: Command
    start: Vec
    end: Vec


def _to_absolute(cmd: Command, current: Vec, subpath_start: Vec) -> tuple[Command, Vec]:
    cx, cy = current if cmd.relative else ORIGIN

    if isinstance(cmd, (MoveTo, LineTo, SmoothQuadraticTo)):
        absolute = dataclasses.replace(cmd, x=cmd.x + cx, y=cmd.y + cy, relative=False)
        return absolute, (absolute.x, absolute.y)
    if isinstance(cmd, HorizontalTo):
        absolute = dataclasses.replace(cmd, x=cmd.x + cx, relative=False)
        return absolute, (absolute.x, current[1])
    if isinstance(cmd, VerticalTo):
        absolute = dataclasses.replace(cmd, y=cmd.y + cy, relative=False)
        return absolute, (current[0], absolute.y)
    if isinstance(cmd, CubicTo):
        absolute = dataclasses.replace(
            cmd,
            x1=cmd.x1 + cx,
            y1=cmd.y1 + cy,
            x2=cmd.x2 + cx,
            y2=cmd.y2 + cy,
            x=cmd.x + cx,
            y=cmd.y + cy,
            relative=False,
        )
        return absolute, (absolute.x, absolute.y)
    if isinstance(cmd, SmoothCubicTo):
        absolute = dataclasses.replace(
            cmd, x2=cmd.x2 + cx, y2=cmd.y2 + cy, x=cmd.x + cx, y=cmd.y + cy, relative=False
        )
        return absolute, (absolute.x, absolute.y)
    if isinstance(cmd, QuadraticTo):
        absolute = dataclasses.replace(
            cmd, x1=cmd.x1 + cx, y1=cmd.y1 + cy, x=cmd.x + cx, y=cmd.y + cy, relative=False
        )
        return absolute, (absolute.x, absolute.y)
    if isinstance(cmd, ArcTo):
        absolute = dataclasses.replace(cmd, x=cmd.x + cx, y=cmd.y + cy, relative=False)
        return absolute, (absolute.x, absolute.y)
    if isinstance(cmd, ClosePath):
        return dataclasses.replace(cmd, relative=False), subpath_start
    raise TypeError(f"Unsupported path command: {cmd!r}")


def absolutize(commands: list[Command]) -> list[AbsoluteSegment]:
    """Resolve *commands* to absolute space, one segment per command."""
    segments: list[AbsoluteSegment] = []
    current: Vec = ORIGIN
    subpath_start: Vec = ORIGIN

    for cmd in commands:
        absolute, end = _to_absolute(cmd, current, subpath_start)
        segments.append(AbsoluteSegment(command=absolute, start=current, end=end))
        if isinstance(cmd, MoveTo):
            subpath_start = end
        current = end

    return segments


def last_point(commands: list[Command]) -> Vec | None:
    """Absolute current point after the final command, or None for an empty path."""
    if not commands:
        return None
    return absolutize(commands)[-1].end
