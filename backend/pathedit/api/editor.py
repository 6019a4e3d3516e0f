"""POST /api/editor/* -- stateless editor operations for a canvas client.

Each request carries the editor snapshot the client last received; the
response returns the next snapshot together with the operation outcome.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from pathedit.config import Settings
from pathedit.dependencies import get_settings
from pathedit.editor.session import PathEditor
from pathedit.models.editor import EditorSnapshot, EditOutcome
from pathedit.models.requests import (
    AppendRequest,
    CloseRequest,
    DragRequest,
    EditorRequest,
    PathTextRequest,
    TemplateLoadRequest,
)
from pathedit.models.responses import (
    BreakdownParam,
    BreakdownResponse,
    BreakdownRow,
    EditorResponse,
    FormatResponse,
)
from pathedit.path.breakdown import describe_commands
from pathedit.path.parser import try_parse_path
from pathedit.path.serializer import format_path_string, is_closed_path

router = APIRouter(prefix="/editor")
logger = logging.getLogger(__name__)


def _open(state: EditorSnapshot, cfg: Settings) -> PathEditor:
    return PathEditor.from_snapshot(state, precision=cfg.number_precision)


def _reply(editor: PathEditor, outcome: EditOutcome) -> EditorResponse:
    return EditorResponse(state=editor.snapshot(), outcome=outcome)


@router.post("/validate", response_model=EditorResponse)
async def validate(req: EditorRequest, cfg: Settings = Depends(get_settings)) -> EditorResponse:
    editor = _open(req.state, cfg)
    return _reply(editor, editor.validate())


@router.post("/append", response_model=EditorResponse)
async def append(req: AppendRequest, cfg: Settings = Depends(get_settings)) -> EditorResponse:
    editor = _open(req.state, cfg)
    return _reply(editor, editor.append_segment(req.kind, req.relative))


@router.post("/close", response_model=EditorResponse)
async def close(req: CloseRequest, cfg: Settings = Depends(get_settings)) -> EditorResponse:
    editor = _open(req.state, cfg)
    return _reply(editor, editor.close_path(req.closed))


@router.post("/round", response_model=EditorResponse)
async def round_values(req: EditorRequest, cfg: Settings = Depends(get_settings)) -> EditorResponse:
    editor = _open(req.state, cfg)
    return _reply(editor, editor.round_values())


@router.post("/drag", response_model=EditorResponse)
async def drag(req: DragRequest, cfg: Settings = Depends(get_settings)) -> EditorResponse:
    editor = _open(req.state, cfg)
    outcome = editor.move_point(req.point_id, req.x, req.y)
    if outcome is EditOutcome.UNCHANGED:
        logger.debug("Drag of %s left the path unchanged", req.point_id)
    return _reply(editor, outcome)


@router.post("/load-template", response_model=EditorResponse)
async def load_template(
    req: TemplateLoadRequest, cfg: Settings = Depends(get_settings)
) -> EditorResponse:
    editor = PathEditor(
        "",
        precision=cfg.number_precision,
        append_kind=req.append_kind,
        is_relative=req.is_relative,
    )
    try:
        outcome = editor.load_template(req.template_id)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Unknown template: {req.template_id}") from None
    return _reply(editor, outcome)


@router.post("/breakdown", response_model=BreakdownResponse)
async def breakdown(req: PathTextRequest) -> BreakdownResponse:
    rows = describe_commands(req.path)
    return BreakdownResponse(
        valid=try_parse_path(req.path) is not None,
        commands=[
            BreakdownRow(
                index=row.index,
                letter=row.letter,
                name=row.name,
                description=row.description,
                relative=row.relative,
                params=[BreakdownParam(name=name, value=value) for name, value in row.params],
            )
            for row in rows
        ],
    )


@router.post("/format", response_model=FormatResponse)
async def format_path(req: PathTextRequest, cfg: Settings = Depends(get_settings)) -> FormatResponse:
    formatted = format_path_string(req.path, cfg.number_precision)
    return FormatResponse(
        path=formatted,
        valid=try_parse_path(req.path) is not None,
        is_closed=is_closed_path(formatted),
    )
