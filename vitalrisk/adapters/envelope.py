"""Unwrap the patient list from inconsistently shaped vendor responses."""

from __future__ import annotations

from typing import Any, List, Mapping, Tuple

__all__ = ["extract_patients"]

_ENVELOPE_PATHS: Tuple[Tuple[str, ...], ...] = (
    ("patients",),
    ("data",),
    ("items",),
    ("result", "patients"),
)


def extract_patients(payload: Any) -> List[Any]:
    """Return the patient records in *payload*, or an empty list.

    Accepts a bare list or one of the known envelopes; the first envelope
    holding a list wins.
    """

    if isinstance(payload, list):
        return payload
    for path in _ENVELOPE_PATHS:
        current = payload
        for key in path:
            current = current.get(key) if isinstance(current, Mapping) else None
        if isinstance(current, list):
            return current
    return []
