"""Path data parser: raw text to an ordered list of commands.

Accepts whitespace and/or comma separators, numbers written back to back
(``10-5``), compact arc flags (``a5 5 0 011 0``) and implicit repetition
(extra coordinate groups after a letter repeat that command; after a move
they become line commands of the same case).

Parsing is all or nothing: any malformed token raises ``ParseError`` and no
partial command list is ever returned.
"""

from __future__ import annotations

import logging
import math
import re

from pathedit.path.commands import COMMAND_TYPES, Command, LineTo, MoveTo

logger = logging.getLogger(__name__)

_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_WSP = " \t\n\r\f"


class ParseError(ValueError):
    """Malformed path data: unknown letter, wrong parameter count, bad number."""

    def __init__(self, message: str, position: int) -> None:
        self.message = message
        self.position = position
        super().__init__(f"{message} at position {position}")


class _Scanner:
    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> str:
        return self.text[self.pos]

    def skip_wsp(self) -> None:
        while not self.at_end() and self.peek() in _WSP:
            self.pos += 1

    def skip_comma_wsp(self) -> bool:
        """Skip one separator. Returns True when a comma was consumed."""
        self.skip_wsp()
        if not self.at_end() and self.peek() == ",":
            self.pos += 1
            self.skip_wsp()
            return True
        return False

    def at_number(self) -> bool:
        return _NUMBER_RE.match(self.text, self.pos) is not None

    def read_number(self) -> float:
        m = _NUMBER_RE.match(self.text, self.pos)
        if m is None:
            raise ParseError("expected a number", self.pos)
        value = float(m.group(0))
        if not math.isfinite(value):
            raise ParseError("number out of range", self.pos)
        self.pos = m.end()
        return value

    def read_flag(self) -> bool:
        if self.at_end() or self.peek() not in "01":
            raise ParseError("expected an arc flag (0 or 1)", self.pos)
        flag = self.peek() == "1"
        self.pos += 1
        return flag


def _read_group(scanner: _Scanner, cls: type[Command], relative: bool) -> Command:
    values: list[float | bool] = []
    for i, kind in enumerate(cls.signature):
        if i > 0:
            scanner.skip_comma_wsp()
        values.append(scanner.read_flag() if kind == "f" else scanner.read_number())
    return cls(*values, relative=relative)


def parse_path(text: str) -> list[Command]:
    """Parse path data into commands, preserving each command's letter case.

    Raises:
        ParseError: if any part of *text* is malformed.
    """
    scanner = _Scanner(text)
    commands: list[Command] = []

    scanner.skip_wsp()
    while not scanner.at_end():
        letter = scanner.peek()
        cls = COMMAND_TYPES.get(letter.upper())
        if cls is None:
            raise ParseError(f"unknown command {letter!r}", scanner.pos)
        if not commands and cls is not MoveTo:
            raise ParseError("path data must start with a move command", scanner.pos)
        scanner.pos += 1
        relative = letter.islower()

        if not cls.signature:
            commands.append(cls(relative=relative))
            scanner.skip_wsp()
            continue

        scanner.skip_wsp()
        commands.append(_read_group(scanner, cls, relative))

        repeat_cls = LineTo if cls is MoveTo else cls
        while True:
            had_comma = scanner.skip_comma_wsp()
            if scanner.at_number():
                commands.append(_read_group(scanner, repeat_cls, relative))
            elif had_comma:
                raise ParseError("unexpected comma", scanner.pos)
            else:
                break

    return commands


def try_parse_path(text: str) -> list[Command] | None:
    """Parse *text*, returning None instead of raising on malformed input."""
    try:
        return parse_path(text)
    except ParseError as e:
        logger.debug("Path data rejected: %s", e)
        return None
