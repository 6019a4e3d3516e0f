"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from pathedit.models.editor import EditorSnapshot, EditOutcome


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    command_kinds: int = 0


class EditorResponse(BaseModel):
    state: EditorSnapshot
    outcome: EditOutcome


class TemplateResponse(BaseModel):
    id: str
    title: str
    description: str
    path_data: str


class BreakdownParam(BaseModel):
    name: str
    value: bool | float


class BreakdownRow(BaseModel):
    index: int
    letter: str
    name: str
    description: str
    relative: bool
    params: list[BreakdownParam] = Field(default_factory=list)


class BreakdownResponse(BaseModel):
    valid: bool
    commands: list[BreakdownRow] = Field(default_factory=list)


class FormatResponse(BaseModel):
    path: str
    valid: bool
    is_closed: bool = False
