"""Full path rebuild from the current point list.

Every command is re-derived from the points it owns. Relative commands get
deltas measured from the previous command's *pre-edit* absolute endpoint, so
one batch of moves resolves against a single consistent snapshot instead of
compounding through values recomputed mid-pass.
"""

from __future__ import annotations

import dataclasses
import logging

from pathedit.models.points import Point
from pathedit.path.absolutizer import Vec, absolutize
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
from pathedit.path.parser import ParseError, parse_path
from pathedit.path.points import group_points, point_slots
from pathedit.path.serializer import DEFAULT_PRECISION, format_commands, with_close

logger = logging.getLogger(__name__)


def owns_expected_points(cmd: Command, owned: dict[str, Point]) -> bool:
    """True when *owned* holds exactly the point tags *cmd*'s kind exposes."""
    return set(owned) == {slot.tag for slot in point_slots(cmd)}


def rebuild_command(cmd: Command, owned: dict[str, Point], origin: Vec) -> Command:
    """Re-derive *cmd*'s parameters from its points.

    *origin* is the absolute current point before the command; relative
    commands are written as deltas from it. Arc radii, rotation and flags
    are carried over unchanged.
    """
    ox, oy = origin if cmd.relative else (0.0, 0.0)

    def at(tag: str) -> tuple[float, float]:
        p = owned[tag]
        return p.x - ox, p.y - oy

    if isinstance(cmd, MoveTo):
        x, y = at("m")
        return dataclasses.replace(cmd, x=x, y=y)
    if isinstance(cmd, (LineTo, SmoothQuadraticTo)):
        x, y = at("end")
        return dataclasses.replace(cmd, x=x, y=y)
    if isinstance(cmd, HorizontalTo):
        return dataclasses.replace(cmd, x=at("end")[0])
    if isinstance(cmd, VerticalTo):
        return dataclasses.replace(cmd, y=at("end")[1])
    if isinstance(cmd, QuadraticTo):
        (x1, y1), (x, y) = at("q1"), at("q-end")
        return dataclasses.replace(cmd, x1=x1, y1=y1, x=x, y=y)
    if isinstance(cmd, CubicTo):
        (x1, y1), (x2, y2), (x, y) = at("c1"), at("c2"), at("c-end")
        return dataclasses.replace(cmd, x1=x1, y1=y1, x2=x2, y2=y2, x=x, y=y)
    if isinstance(cmd, SmoothCubicTo):
        (x2, y2), (x, y) = at("s2"), at("s-end")
        return dataclasses.replace(cmd, x2=x2, y2=y2, x=x, y=y)
    if isinstance(cmd, ArcTo):
        x, y = at("a-end")
        return dataclasses.replace(cmd, x=x, y=y)
    if isinstance(cmd, ClosePath):
        return cmd
    raise TypeError(f"Unsupported path command: {cmd!r}")


def rebuild_path(
    canonical: str,
    points: list[Point],
    is_closed: bool,
    precision: int = DEFAULT_PRECISION,
) -> str:
    """Regenerate the whole path text from *points*.

    Commands whose points are missing or incomplete are kept as they were.
    Never raises: unparseable *canonical* text comes back trimmed.
    """
    try:
        commands = parse_path(canonical)
    except ParseError as e:
        logger.warning("Cannot rebuild path from unparseable text: %s", e)
        return canonical.strip()

    segments = absolutize(commands)
    owned_by_index = group_points(points)

    rebuilt: list[Command] = []
    for i, (cmd, seg) in enumerate(zip(commands, segments)):
        owned = owned_by_index.get(i, {})
        if owns_expected_points(cmd, owned):
            rebuilt.append(rebuild_command(cmd, owned, seg.start))
        else:
            rebuilt.append(cmd)

    text = format_commands(rebuilt, precision)
    if is_closed:
        text = with_close(text)
    return text
