"""API endpoints for batch risk analysis."""
from __future__ import annotations

import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Body, HTTPException
from pydantic import BaseModel, ValidationError

from ...adapters.envelope import extract_patients
from ...adapters.submission import submission_counts, to_submission
from ...core.analyze import analyze
from ...schemas.risk import RiskResult
from ...schemas.submission import AssessmentSubmission
from ...schemas.vitals import DataQualityIssue
from ..core.config import settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/risk", tags=["risk"])


class RiskResponse(BaseModel):
    alerts: AssessmentSubmission
    data_quality_details: List[DataQualityIssue]
    scored_patients: List[RiskResult]


class SubmissionCheck(BaseModel):
    payload: AssessmentSubmission
    counts: Dict[str, int]


@router.post("/", response_model=RiskResponse)
def analyze_batch(payload: Any = Body(...)) -> RiskResponse:
    records = extract_patients(payload)
    if len(records) > settings.max_batch_size:
        raise HTTPException(
            status_code=413,
            detail=f"Batch of {len(records)} records exceeds limit of {settings.max_batch_size}",
        )
    result = analyze(records)
    logger.info(
        "Risk analysis: %d scored, %d data quality issues",
        len(result.scored),
        len(result.data_quality_issues),
    )
    return RiskResponse(
        alerts=to_submission(result),
        data_quality_details=result.data_quality_issues,
        scored_patients=result.scored,
    )


@router.post("/submission/validate", response_model=SubmissionCheck)
def validate_submission(payload: Any = Body(...)) -> SubmissionCheck:
    try:
        submission = AssessmentSubmission.model_validate(payload)
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail="Invalid payload format") from exc
    return SubmissionCheck(payload=submission, counts=submission_counts(submission))
