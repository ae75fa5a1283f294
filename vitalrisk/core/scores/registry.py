"""Category registry composing the per-vital risk rubrics."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Tuple

from ...schemas.risk import CategoryScore, RiskResult
from ...schemas.vitals import PatientVitals

FEVER_THRESHOLD_F = 99.6
CATEGORY_ORDER: Tuple[str, ...] = ("age", "temp", "bp")


@dataclass(frozen=True)
class RubricResult:
    points: int
    reasons: Tuple[str, ...]


CategoryFunc = Callable[[PatientVitals], RubricResult]

_REGISTRY: Dict[str, Tuple[str, CategoryFunc]] = {}


def register(key: str, label: str) -> Callable[[CategoryFunc], CategoryFunc]:
    def decorator(func: CategoryFunc) -> CategoryFunc:
        _REGISTRY[key] = (label, func)
        return func

    return decorator


def score_patient(vitals: PatientVitals) -> RiskResult:
    """Score every category for *vitals* and total the points."""

    categories: List[CategoryScore] = []
    for key in CATEGORY_ORDER:
        label, func = _REGISTRY[key]
        result = func(vitals)
        categories.append(
            CategoryScore(key=key, label=label, score=result.points, reasons=list(result.reasons))
        )
    return RiskResult(
        id=vitals.id,
        total_risk=sum(category.score for category in categories),
        categories=categories,
        fever=vitals.temperature_f >= FEVER_THRESHOLD_F,
    )
