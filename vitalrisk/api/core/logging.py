"""Logging helpers for the vitalrisk service."""
from __future__ import annotations

import logging
import re
import time
from typing import Callable

from fastapi import FastAPI, Request

_RE_SENSITIVE = re.compile(r"(\b\d{3}-\d{2}-\d{4}\b|\(?\b\d{3}\)?[ .-]\d{3}[ .-]\d{4}\b)")


class PHIRedactor(logging.Filter):
    """Filter that redacts SSN and phone-number shaped identifiers from log records.

    Patient ids reach the log as formatting arguments, so the rendered message
    is checked rather than the template alone.
    """

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: D401
        if not isinstance(record.msg, str):
            return True
        try:
            message = record.getMessage()
        except (TypeError, ValueError):
            # malformed arguments are reported by the handler
            return True
        redacted = _RE_SENSITIVE.sub("[REDACTED]", message)
        if redacted != message:
            record.msg = redacted
            record.args = ()
        return True


def setup_logging(level: int | str = logging.INFO) -> None:
    """Configure global logging handlers."""

    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    for handler in logging.getLogger().handlers:
        handler.addFilter(PHIRedactor())
    logging.getLogger("uvicorn.access").addFilter(PHIRedactor())


async def timing_middleware(request: Request, call_next: Callable):
    """Log HTTP request duration."""

    start = time.perf_counter()
    response = await call_next(request)
    duration_ms = (time.perf_counter() - start) * 1000
    logging.getLogger("vitalrisk.request").info(
        "%s %s completed in %.2f ms", request.method, request.url.path, duration_ms
    )
    return response


def register_middleware(app: FastAPI) -> None:
    app.middleware("http")(timing_middleware)
