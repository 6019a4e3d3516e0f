"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from pathedit.models.editor import AppendKind, EditorSnapshot


class EditorRequest(BaseModel):
    state: EditorSnapshot = Field(..., description="Editor state as last returned to the client")


class AppendRequest(EditorRequest):
    kind: AppendKind | None = Field(default=None, description="Defaults to state.append_kind")
    relative: bool | None = Field(default=None, description="Defaults to state.is_relative")


class CloseRequest(EditorRequest):
    closed: bool = Field(..., description="Whether the path should end with a close command")


class DragRequest(EditorRequest):
    point_id: str = Field(..., description="Id of the dragged point, e.g. pt-1-q1")
    x: float = Field(..., description="Drop x coordinate in path space")
    y: float = Field(..., description="Drop y coordinate in path space")


class TemplateLoadRequest(BaseModel):
    template_id: str
    append_kind: AppendKind = "Q"
    is_relative: bool = False


class PathTextRequest(BaseModel):
    path: str = Field(..., description="Raw path data")
