"""Typed contracts shared by the core pipeline and its boundaries."""

from .risk import AnalysisOutput, CategoryScore, RiskResult
from .submission import AssessmentSubmission
from .vitals import DataQualityIssue, PatientVitals, RawPatientRecord

__all__ = [
    "AnalysisOutput",
    "AssessmentSubmission",
    "CategoryScore",
    "DataQualityIssue",
    "PatientVitals",
    "RawPatientRecord",
    "RiskResult",
]
