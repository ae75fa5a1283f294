"""Risk rubrics and the scorer that combines them."""

from . import age, blood_pressure, temperature  # noqa: F401
from .age import age_risk_points
from .blood_pressure import bp_risk_points
from .registry import RubricResult, score_patient
from .temperature import temp_risk_points

__all__ = [
    "RubricResult",
    "age_risk_points",
    "bp_risk_points",
    "score_patient",
    "temp_risk_points",
]
