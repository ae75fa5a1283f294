"""Blood pressure rubric.

Normal (<120 and <80): 1, Elevated (120-129 and <80): 2,
Stage 1 (130-139 or 80-89): 3, Stage 2 (>=140 or >=90): 4.
When systolic and diastolic disagree the higher stage is scored.
"""

from __future__ import annotations

from typing import Tuple

from .registry import RubricResult, register


def _systolic_stage(systolic: int) -> Tuple[int, str]:
    if systolic >= 140:
        return 4, "systolic ≥ 140 (stage 2)"
    if systolic >= 130:
        return 3, "systolic 130–139 (stage 1)"
    if systolic >= 120:
        return 2, "systolic 120–129 (elevated)"
    return 1, "systolic < 120 (normal)"


def _diastolic_stage(diastolic: int) -> Tuple[int, str]:
    if diastolic >= 90:
        return 4, "diastolic ≥ 90 (stage 2)"
    if diastolic >= 80:
        return 3, "diastolic 80–89 (stage 1)"
    return 1, "diastolic < 80 (normal/elevated condition)"


def bp_risk_points(systolic: int, diastolic: int) -> RubricResult:
    sys_points, sys_reason = _systolic_stage(systolic)
    dia_points, dia_reason = _diastolic_stage(diastolic)
    points = max(sys_points, dia_points)
    reasons = [sys_reason, dia_reason]

    # Elevated needs both axes at once, so it is floored separately.
    if 120 <= systolic <= 129 and diastolic < 80:
        points = max(points, 2)
        reasons.append("meets elevated combo (120–129 AND <80)")
    return RubricResult(points, tuple(reasons))


@register("bp", "Blood Pressure")
def compute(vitals) -> RubricResult:
    return bp_risk_points(vitals.systolic, vitals.diastolic)
