"""Canonical path text from commands.

Canonical form: one space between the letter and its first parameter group,
coordinate pairs as ``x,y``, scalar parameters (H/V values, arc rotation and
flags) space separated, numbers trimmed to ``precision`` fractional digits.
``format_commands(parse_path(s))`` is a fixed point: formatting its own output
reproduces it byte for byte.
"""

from __future__ import annotations

import math
import re

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

DEFAULT_PRECISION = 6

_TRAILING_CLOSE_RE = re.compile(r"[zZ]\s*$")
_TRAILING_CLOSES_RE = re.compile(r"(?:\s*[zZ])+\s*$")


def format_number(value: float, precision: int = DEFAULT_PRECISION) -> str:
    """Fixed-point text with trailing zeros and a dangling point removed."""
    if not math.isfinite(value):
        return "0"
    text = f"{value:.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        return "0"
    return text


def _pair(x: float, y: float, precision: int) -> str:
    return f"{format_number(x, precision)},{format_number(y, precision)}"


def _params(cmd: Command, precision: int) -> list[str]:
    if isinstance(cmd, (MoveTo, LineTo, SmoothQuadraticTo)):
        return [_pair(cmd.x, cmd.y, precision)]
    if isinstance(cmd, HorizontalTo):
        return [format_number(cmd.x, precision)]
    if isinstance(cmd, VerticalTo):
        return [format_number(cmd.y, precision)]
    if isinstance(cmd, QuadraticTo):
        return [_pair(cmd.x1, cmd.y1, precision), _pair(cmd.x, cmd.y, precision)]
    if isinstance(cmd, CubicTo):
        return [
            _pair(cmd.x1, cmd.y1, precision),
            _pair(cmd.x2, cmd.y2, precision),
            _pair(cmd.x, cmd.y, precision),
        ]
    if isinstance(cmd, SmoothCubicTo):
        return [_pair(cmd.x2, cmd.y2, precision), _pair(cmd.x, cmd.y, precision)]
    if isinstance(cmd, ArcTo):
        return [
            _pair(cmd.rx, cmd.ry, precision),
            format_number(cmd.rotation, precision),
            "1" if cmd.large_arc else "0",
            "1" if cmd.sweep else "0",
            _pair(cmd.x, cmd.y, precision),
        ]
    if isinstance(cmd, ClosePath):
        return []
    raise TypeError(f"Unsupported path command: {cmd!r}")


def format_command(cmd: Command, precision: int = DEFAULT_PRECISION) -> str:
    """Canonical text of a single command, letter case preserved."""
    return " ".join([cmd.letter, *_params(cmd, precision)])


def format_commands(commands: list[Command], precision: int = DEFAULT_PRECISION) -> str:
    return " ".join(format_command(cmd, precision) for cmd in commands)


def format_path_string(text: str, precision: int = DEFAULT_PRECISION) -> str:
    """Reformat *text* canonically. Unparseable text is only trimmed; never raises."""
    try:
        commands = parse_path(text)
    except ParseError:
        return text.strip()
    return format_commands(commands, precision)


def is_closed_path(text: str) -> bool:
    """True when *text* ends with a close command."""
    return _TRAILING_CLOSE_RE.search(text.strip()) is not None


def with_close(text: str) -> str:
    text = text.strip()
    if not text or is_closed_path(text):
        return text
    return f"{text} Z"


def without_close(text: str) -> str:
    return _TRAILING_CLOSES_RE.sub("", text.strip()).strip()
