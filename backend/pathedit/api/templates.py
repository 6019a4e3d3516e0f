"""GET /api/templates -- built-in path templates."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from pathedit.editor.templates import TEMPLATES, PathTemplate, get_template
from pathedit.models.responses import TemplateResponse

router = APIRouter(prefix="/templates")


def _to_response(template: PathTemplate) -> TemplateResponse:
    return TemplateResponse(
        id=template.id,
        title=template.title,
        description=template.description,
        path_data=template.path_data,
    )


@router.get("", response_model=list[TemplateResponse])
async def list_templates() -> list[TemplateResponse]:
    return [_to_response(t) for t in TEMPLATES]


@router.get("/{template_id}", response_model=TemplateResponse)
async def read_template(template_id: str) -> TemplateResponse:
    try:
        return _to_response(get_template(template_id))
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Unknown template: {template_id}") from None
