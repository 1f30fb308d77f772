"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from lookalike.api.deps import CompositorDep
from lookalike.engine.compositor import Compositor
from lookalike.models.responses import HealthResponse

router = APIRouter()

VERSION = "0.1.0"


@router.get("/health", response_model=HealthResponse)
async def health(compositor: Compositor = CompositorDep) -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=VERSION,
        parts_registered=compositor.registry.count,
    )
