"""Path editor state machine and its supporting defaults."""

from pathedit.editor.session import PathEditor
from pathedit.editor.templates import DEFAULT_TEMPLATE_ID, TEMPLATES, PathTemplate, get_template

__all__ = [
    "PathEditor",
    "DEFAULT_TEMPLATE_ID",
    "TEMPLATES",
    "PathTemplate",
    "get_template",
]
