"""Schemas describing scored patients and batch analysis results."""

from __future__ import annotations

from typing import List

from pydantic import Field, field_validator

from .common import StrictModel
from .vitals import DataQualityIssue


class CategoryScore(StrictModel):
    key: str
    label: str
    score: int = Field(ge=0)
    reasons: List[str] = Field(min_length=1)


class RiskResult(StrictModel):
    id: str
    total_risk: int
    categories: List[CategoryScore]
    fever: bool

    @field_validator("categories")
    @classmethod
    def _three_categories(cls, value: List[CategoryScore]) -> List[CategoryScore]:
        if [category.key for category in value] != ["age", "temp", "bp"]:
            raise ValueError("categories must be age, temp, bp in that order")
        return value


class AnalysisOutput(StrictModel):
    high_risk_ids: List[str]
    fever_ids: List[str]
    data_quality_issue_ids: List[str]
    data_quality_issues: List[DataQualityIssue]
    scored: List[RiskResult]
