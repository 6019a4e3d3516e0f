"""Path data codec: parse, absolutize, extract points, format, patch."""

from pathedit.path.absolutizer import AbsoluteSegment, absolutize
from pathedit.path.parser import ParseError, parse_path
from pathedit.path.patcher import patch_path
from pathedit.path.points import extract_points, points_from_commands
from pathedit.path.rebuilder import rebuild_path
from pathedit.path.serializer import format_commands, format_path_string

__all__ = [
    "AbsoluteSegment",
    "absolutize",
    "ParseError",
    "parse_path",
    "patch_path",
    "extract_points",
    "points_from_commands",
    "rebuild_path",
    "format_commands",
    "format_path_string",
]
