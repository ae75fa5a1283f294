"""FastAPI application bootstrap."""
from __future__ import annotations

from fastapi import FastAPI

from .core.config import settings
from .core.logging import register_middleware, setup_logging
from .routers import health, risk

setup_logging(settings.log_level.upper())

app = FastAPI(title="vitalrisk API", version="0.1.0")

register_middleware(app)

app.include_router(health.router)
app.include_router(risk.router)


@app.get("/")
def root() -> dict[str, str]:
    return {"message": "vitalrisk API", "health": "/health"}
