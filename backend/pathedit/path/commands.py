"""Path command types.

One frozen dataclass per command kind. ``relative`` records the letter case
exactly as it was authored; it is never inferred from the coordinates.
``signature`` drives the parser: ``n`` is a number, ``f`` an arc flag.
"""

from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass
from typing import ClassVar, Union


class _CommandBase:
    code: ClassVar[str]
    signature: ClassVar[str]
    relative: bool

    @property
    def letter(self) -> str:
        """The command letter in the case it was written."""
        return self.code.lower() if self.relative else self.code


@dataclass(frozen=True)
class MoveTo(_CommandBase):
    code: ClassVar[str] = "M"
    signature: ClassVar[str] = "nn"

    x: float
    y: float
    relative: bool = False


@dataclass(frozen=True)
class LineTo(_CommandBase):
    code: ClassVar[str] = "L"
    signature: ClassVar[str] = "nn"

    x: float
    y: float
    relative: bool = False


@dataclass(frozen=True)
class HorizontalTo(_CommandBase):
    code: ClassVar[str] = "H"
    signature: ClassVar[str] = "n"

    x: float
    relative: bool = False


@dataclass(frozen=True)
class VerticalTo(_CommandBase):
    code: ClassVar[str] = "V"
    signature: ClassVar[str] = "n"

    y: float
    relative: bool = False


@dataclass(frozen=True)
class CubicTo(_CommandBase):
    code: ClassVar[str] = "C"
    signature: ClassVar[str] = "nnnnnn"

    x1: float
    y1: float
    x2: float
    y2: float
    x: float
    y: float
    relative: bool = False


@dataclass(frozen=True)
class SmoothCubicTo(_CommandBase):
    code: ClassVar[str] = "S"
    signature: ClassVar[str] = "nnnn"

    x2: float
    y2: float
    x: float
    y: float
    relative: bool = False


@dataclass(frozen=True)
class QuadraticTo(_CommandBase):
    code: ClassVar[str] = "Q"
    signature: ClassVar[str] = "nnnn"

    x1: float
    y1: float
    x: float
    y: float
    relative: bool = False


@dataclass(frozen=True)
class SmoothQuadraticTo(_CommandBase):
    code: ClassVar[str] = "T"
    signature: ClassVar[str] = "nn"

    x: float
    y: float
    relative: bool = False


@dataclass(frozen=True)
class ArcTo(_CommandBase):
    code: ClassVar[str] = "A"
    signature: ClassVar[str] = "nnnffnn"

    rx: float
    ry: float
    rotation: float
    large_arc: bool
    sweep: bool
    x: float
    y: float
    relative: bool = False


@dataclass(frozen=True)
class ClosePath(_CommandBase):
    code: ClassVar[str] = "Z"
    signature: ClassVar[str] = ""

    relative: bool = False


Command = Union[
    MoveTo,
    LineTo,
    HorizontalTo,
    VerticalTo,
    CubicTo,
    SmoothCubicTo,
    QuadraticTo,
    SmoothQuadraticTo,
    ArcTo,
    ClosePath,
]

COMMAND_TYPES: dict[str, type[Command]] = {
    cls.code: cls
    for cls in (
        MoveTo,
        LineTo,
        HorizontalTo,
        VerticalTo,
        CubicTo,
        SmoothCubicTo,
        QuadraticTo,
        SmoothQuadraticTo,
        ArcTo,
        ClosePath,
    )
}

# Z is toggled through close_path, never appended directly.
APPENDABLE_KINDS: tuple[str, ...] = ("M", "L", "H", "V", "C", "S", "Q", "T", "A")


def param_names(cmd: Command) -> tuple[str, ...]:
    """Parameter field names of *cmd* in text order."""
    return tuple(f.name for f in dataclasses.fields(cmd) if f.name != "relative")


def param_values(cmd: Command) -> tuple[float | bool, ...]:
    return tuple(getattr(cmd, name) for name in param_names(cmd))


def round_half_up(value: float) -> float:
    return float(math.floor(value + 0.5))


def round_command(cmd: Command) -> Command:
    """Round every numeric parameter to an integer. Arc flags are left alone."""
    changes = {
        name: round_half_up(value)
        for name, value in zip(param_names(cmd), param_values(cmd))
        if not isinstance(value, bool)
    }
    return dataclasses.replace(cmd, **changes)
