"""Batch analysis: normalize, score and derive the alert lists."""

from __future__ import annotations

import logging
from typing import Iterable, List

from ..schemas.risk import AnalysisOutput, RiskResult
from ..schemas.vitals import DataQualityIssue, RawPatientRecord
from .normalizer import normalize_patient
from .scores import score_patient

__all__ = ["HIGH_RISK_THRESHOLD", "analyze"]

logger = logging.getLogger(__name__)

HIGH_RISK_THRESHOLD = 4


def analyze(records: Iterable[RawPatientRecord]) -> AnalysisOutput:
    """Analyze a batch of raw patient records.

    Records that fail normalization are reported as data-quality issues and
    kept out of both alert lists. Every list follows input order and ids are
    never deduplicated.
    """

    issues: List[DataQualityIssue] = []
    scored: List[RiskResult] = []

    for record in records:
        outcome = normalize_patient(record)
        if isinstance(outcome, DataQualityIssue):
            issues.append(outcome)
            continue
        scored.append(score_patient(outcome))

    output = AnalysisOutput(
        high_risk_ids=[result.id for result in scored if result.total_risk >= HIGH_RISK_THRESHOLD],
        fever_ids=[result.id for result in scored if result.fever],
        data_quality_issue_ids=[issue.id for issue in issues],
        data_quality_issues=issues,
        scored=scored,
    )
    logger.debug(
        "Analyzed %d records: %d scored, %d high risk, %d fever, %d data quality issues",
        len(scored) + len(issues),
        len(scored),
        len(output.high_risk_ids),
        len(output.fever_ids),
        len(issues),
    )
    return output
