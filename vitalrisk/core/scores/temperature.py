"""Temperature rubric in degrees Fahrenheit."""

from __future__ import annotations

from .registry import RubricResult, register


def temp_risk_points(temp_f: float) -> RubricResult:
    if temp_f >= 101.0:
        return RubricResult(2, ("temp ≥ 101.0°F (high fever)",))
    if temp_f >= 99.6:
        return RubricResult(1, ("temp 99.6–100.9°F (low fever)",))
    return RubricResult(0, ("temp ≤ 99.5°F (normal)",))


@register("temp", "Temperature")
def compute(vitals) -> RubricResult:
    return temp_risk_points(vitals.temperature_f)
