"""Editor state models exchanged with the canvas client."""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field

from pathedit.models.points import Point

AppendKind = Literal["M", "L", "H", "V", "C", "S", "Q", "T", "A"]


class EditOutcome(str, Enum):
    """Result of an editor operation; callers decide whether to surface it."""

    APPLIED = "applied"
    REJECTED = "rejected"
    UNCHANGED = "unchanged"


class EditorSnapshot(BaseModel):
    """Plain-value copy of one editor's state."""

    canonical: str = Field(default="", description="Last formatted path text known to parse")
    pending: str = Field(default="", description="Raw text being edited, possibly invalid")
    points: list[Point] = Field(default_factory=list)
    append_kind: AppendKind = "Q"
    is_relative: bool = False
    is_valid: bool = True
    # Always re-derived from canonical; ignored on input.
    is_closed: bool = False
