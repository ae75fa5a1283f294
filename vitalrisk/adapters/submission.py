"""Build the outbound assessment payload from an analysis result."""

from __future__ import annotations

from typing import Dict, List

from ..schemas.risk import AnalysisOutput
from ..schemas.submission import AssessmentSubmission


def to_submission(output: AnalysisOutput) -> AssessmentSubmission:
    return AssessmentSubmission(
        high_risk_patients=list(output.high_risk_ids),
        fever_patients=list(output.fever_ids),
        data_quality_issues=list(output.data_quality_issue_ids),
    )


def submission_counts(submission: AssessmentSubmission) -> Dict[str, int]:
    data: Dict[str, List[str]] = submission.model_dump()
    return {key: len(values) for key, values in data.items()}
