"""Health check endpoint."""
from __future__ import annotations

from fastapi import APIRouter

from ..core.config import settings

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/")
def healthcheck() -> dict[str, str | int]:
    return {
        "status": "ok",
        "service": settings.app_name,
        "max_batch_size": settings.max_batch_size,
    }
