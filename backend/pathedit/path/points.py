"""Point extraction: absolute segments to labelled, uniquely identified points.

Each command kind contributes a fixed set of point slots, so ids are unique
and two extractions over the same commands always agree. Arcs expose only
their endpoint; radii, rotation and flags are not draggable.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from pathedit.models.points import Point, PointRole
from pathedit.path.absolutizer import AbsoluteSegment, absolutize
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

_POINT_ID_RE = re.compile(r"^pt-(\d+)-([a-z0-9-]+)$")


@dataclass(frozen=True)
class PointSlot:
    tag: str
    role: PointRole
    label: str
    # Command fields holding the coordinates; None means the segment endpoint.
    fields: tuple[str, str] | None = None


_START = PointSlot("m", PointRole.ANCHOR, "Start")
_END = PointSlot("end", PointRole.ANCHOR, "End")

_POINT_LAYOUT: dict[type, tuple[PointSlot, ...]] = {
    MoveTo: (_START,),
    LineTo: (_END,),
    HorizontalTo: (_END,),
    VerticalTo: (_END,),
    SmoothQuadraticTo: (_END,),
    QuadraticTo: (
        PointSlot("q1", PointRole.CONTROL1, "Control", ("x1", "y1")),
        PointSlot("q-end", PointRole.ANCHOR, "End"),
    ),
    CubicTo: (
        PointSlot("c1", PointRole.CONTROL1, "Control 1", ("x1", "y1")),
        PointSlot("c2", PointRole.CONTROL2, "Control 2", ("x2", "y2")),
        PointSlot("c-end", PointRole.ANCHOR, "End"),
    ),
    SmoothCubicTo: (
        PointSlot("s2", PointRole.CONTROL2, "Control 2", ("x2", "y2")),
        PointSlot("s-end", PointRole.ANCHOR, "End"),
    ),
    ArcTo: (PointSlot("a-end", PointRole.ANCHOR, "End"),),
    ClosePath: (),
}


def point_slots(cmd: Command) -> tuple[PointSlot, ...]:
    """The fixed point layout for *cmd*'s kind."""
    try:
        return _POINT_LAYOUT[type(cmd)]
    except KeyError:
        raise TypeError(f"Unsupported path command: {cmd!r}") from None


def point_id(command_index: int, tag: str) -> str:
    return f"pt-{command_index}-{tag}"


def parse_point_id(pid: str) -> tuple[int, str] | None:
    """Split a point id into (command_index, tag), or None if it is malformed."""
    m = _POINT_ID_RE.match(pid)
    if m is None:
        return None
    return int(m.group(1)), m.group(2)


def extract_points(segments: list[AbsoluteSegment]) -> list[Point]:
    """Flat point list for the canvas, in command order."""
    points: list[Point] = []
    for i, seg in enumerate(segments):
        for slot in point_slots(seg.command):
            if slot.fields is None:
                x, y = seg.end
            else:
                x = getattr(seg.command, slot.fields[0])
                y = getattr(seg.command, slot.fields[1])
            points.append(
                Point(
                    id=point_id(i, slot.tag),
                    x=x,
                    y=y,
                    label=slot.label,
                    command_index=i,
                    role=slot.role,
                )
            )
    return points


def points_from_commands(commands: list[Command]) -> list[Point]:
    return extract_points(absolutize(commands))


def group_points(points: list[Point]) -> dict[int, dict[str, Point]]:
    """Index points by owning command and tag, using the id scheme."""
    owned: dict[int, dict[str, Point]] = {}
    for p in points:
        parsed = parse_point_id(p.id)
        if parsed is None:
            continue
        index, tag = parsed
        owned.setdefault(index, {})[tag] = p
    return owned
