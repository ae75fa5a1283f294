"""Age rubric.

Under 40 and 40-65 are separate bands in the clinical rubric but both score
one point; only patients older than 65 score higher.
"""

from __future__ import annotations

from .registry import RubricResult, register


def age_risk_points(age: int) -> RubricResult:
    if age > 65:
        return RubricResult(2, ("age > 65",))
    return RubricResult(1, ("age ≤ 65",))


@register("age", "Age")
def compute(vitals) -> RubricResult:
    return age_risk_points(vitals.age)
