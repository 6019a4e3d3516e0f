"""Draggable point model shared by the editor core and the canvas client."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class PointRole(str, Enum):
    ANCHOR = "anchor"
    CONTROL1 = "control1"
    CONTROL2 = "control2"


class Point(BaseModel):
    """A point the canvas can drag.

    ``id`` is ``pt-<command_index>-<tag>``; clients treat it as an opaque key
    that is stable for one generation of the point list. Points are mutated
    in place during a drag and committed back through the segment patcher.
    """

    id: str = Field(..., description="Opaque key, e.g. pt-2-q1")
    x: float
    y: float
    label: str = ""
    command_index: int = Field(..., ge=0)
    role: PointRole = PointRole.ANCHOR
