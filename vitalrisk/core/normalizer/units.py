"""Numeric coercion helpers for vendor-supplied vital signs."""

from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Tuple

__all__ = ["parse_bp_string", "round_half_away", "to_number"]

_BP_RE = re.compile(r"^\s*(\d{2,3})\s*[/-]\s*(\d{2,3})\s*$", re.ASCII)
_UNIT_RE = re.compile(r"mmhg\s*$")


def to_number(value: Any) -> float | None:
    """Return *value* as a finite number, or ``None`` when it is not one.

    Numbers pass through; strings are accepted when they trim to a finite
    numeric literal written in ASCII. Integers too large for a
    float, booleans, containers and anything else count as absent.
    """

    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            finite = math.isfinite(value)
        except OverflowError:
            return None
        return value if finite else None
    if isinstance(value, str):
        trimmed = value.strip()
        if not trimmed or "_" in trimmed or not trimmed.isascii():
            return None
        try:
            number = float(trimmed)
        except ValueError:
            return None
        return number if math.isfinite(number) else None
    return None


def parse_bp_string(value: str) -> Tuple[int | None, int | None]:
    """Parse readings such as ``"120/80"``, ``"120 - 80"`` or ``"120/80 mmHg"``."""

    cleaned = _UNIT_RE.sub("", value.strip().lower()).strip()
    match = _BP_RE.match(cleaned)
    if not match:
        return None, None
    return int(match.group(1)), int(match.group(2))


def round_half_away(value: float) -> int:
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
