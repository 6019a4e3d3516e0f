"""Human-readable breakdown of path data, one row per command."""

from __future__ import annotations

from dataclasses import dataclass, field

from pathedit.path.commands import param_names, param_values
from pathedit.path.parser import try_parse_path


@dataclass(frozen=True)
class CommandInfo:
    name: str
    params: tuple[str, ...]
    description: str


COMMAND_INFO: dict[str, CommandInfo] = {
    "M": CommandInfo("Move To", ("x", "y"), "Move the pen to (x, y) without drawing."),
    "L": CommandInfo("Line To", ("x", "y"), "Draw a straight line to (x, y)."),
    "H": CommandInfo("Horizontal Line To", ("x",), "Draw a horizontal line to x."),
    "V": CommandInfo("Vertical Line To", ("y",), "Draw a vertical line to y."),
    "C": CommandInfo(
        "Cubic Bézier",
        ("x1", "y1", "x2", "y2", "x", "y"),
        "Draw a cubic Bézier curve using (x1, y1) and (x2, y2) as control points, ending at (x, y).",
    ),
    "S": CommandInfo(
        "Smooth Cubic Bézier",
        ("x2", "y2", "x", "y"),
        "Draw a smooth cubic Bézier curve using (x2, y2) as control, ending at (x, y).",
    ),
    "Q": CommandInfo(
        "Quadratic Bézier",
        ("x1", "y1", "x", "y"),
        "Draw a quadratic Bézier curve using (x1, y1) as control point, ending at (x, y).",
    ),
    "T": CommandInfo(
        "Smooth Quadratic Bézier", ("x", "y"), "Draw a smooth quadratic Bézier curve ending at (x, y)."
    ),
    "A": CommandInfo(
        "Arc",
        ("rx", "ry", "rotation", "large_arc", "sweep", "x", "y"),
        "Draw an elliptical arc.",
    ),
    "Z": CommandInfo("Close Path", (), "Close the path."),
}


@dataclass
class CommandBreakdown:
    index: int
    letter: str
    name: str
    description: str
    relative: bool
    params: list[tuple[str, float | bool]] = field(default_factory=list)


def describe_commands(text: str) -> list[CommandBreakdown]:
    """Break *text* down per command. Unparseable text yields an empty list."""
    commands = try_parse_path(text)
    if commands is None:
        return []

    rows: list[CommandBreakdown] = []
    for i, cmd in enumerate(commands):
        info = COMMAND_INFO[cmd.code]
        rows.append(
            CommandBreakdown(
                index=i,
                letter=cmd.letter,
                name=info.name,
                description=info.description,
                relative=cmd.relative,
                params=list(zip(param_names(cmd), param_values(cmd))),
            )
        )
    return rows
