"""Master API router, mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from lookalike.api import avatar, health, match

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(avatar.router)
api_router.include_router(match.router)
