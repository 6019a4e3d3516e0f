"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from pathedit.models.responses import HealthResponse
from pathedit.path.commands import COMMAND_TYPES

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version="0.1.0",
        command_kinds=len(COMMAND_TYPES),
    )
