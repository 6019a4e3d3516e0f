"""Targeted segment patcher: rewrites only the command that owns a moved point.

The canonical text is split at command-letter boundaries and only the owning
segment is replaced, so untouched segments stay byte-identical. Whenever the
patch is not applicable (malformed id, incomplete points, segment count
mismatch, result that no longer parses) the full rebuilder is used instead.
"""

from __future__ import annotations

import logging
import re

from pathedit.models.points import Point
from pathedit.path.absolutizer import absolutize
from pathedit.path.parser import ParseError, parse_path
from pathedit.path.points import group_points, parse_point_id
from pathedit.path.rebuilder import owns_expected_points, rebuild_command, rebuild_path
from pathedit.path.serializer import DEFAULT_PRECISION, format_command, with_close

logger = logging.getLogger(__name__)

_SEGMENT_RE = re.compile(r"[MmLlHhVvCcSsQqTtAaZz][^MmLlHhVvCcSsQqTtAaZz]*")


def split_segments(text: str) -> list[str]:
    """Command-sized slices of *text*, each trimmed of surrounding whitespace."""
    return [m.group(0).strip() for m in _SEGMENT_RE.finditer(text)]


def _try_patch(
    changed_id: str,
    canonical: str,
    points: list[Point],
    is_closed: bool,
    precision: int,
) -> str | None:
    parsed_id = parse_point_id(changed_id)
    if parsed_id is None:
        return None
    index, tag = parsed_id

    commands = parse_path(canonical)
    if index >= len(commands):
        return None

    cmd = commands[index]
    owned = group_points(points).get(index, {})
    if tag not in owned or not owns_expected_points(cmd, owned):
        return None

    segments = split_segments(canonical)
    if len(segments) != len(commands):
        return None

    origin = absolutize(commands)[index].start
    segments[index] = format_command(rebuild_command(cmd, owned, origin), precision)

    text = " ".join(segments)
    if is_closed:
        text = with_close(text)

    # The patched text must still parse before it may replace the canonical one.
    parse_path(text)
    return text


def patch_path(
    changed_id: str,
    canonical: str,
    points: list[Point],
    is_closed: bool,
    precision: int = DEFAULT_PRECISION,
) -> str:
    """Commit one moved point back to text, touching only its own segment."""
    try:
        patched = _try_patch(changed_id, canonical, points, is_closed, precision)
    except ParseError as e:
        logger.info("Segment patch for %s failed (%s); rebuilding full path", changed_id, e)
        patched = None
    else:
        if patched is None:
            logger.info("Segment patch not applicable for %s; rebuilding full path", changed_id)

    if patched is None:
        return rebuild_path(canonical, points, is_closed, precision)
    return patched
