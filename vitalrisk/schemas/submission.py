"""Schema of the outbound assessment submission payload."""

from __future__ import annotations

from typing import List

from pydantic import ConfigDict

from .common import StrictModel


class AssessmentSubmission(StrictModel):
    """Alert lists in the exact shape accepted by the submission endpoint.

    Lists are validated strictly: a string, mapping or null in place of an
    array is rejected rather than coerced.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, strict=True)

    high_risk_patients: List[str]
    fever_patients: List[str]
    data_quality_issues: List[str]
