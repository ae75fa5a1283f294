"""Schemas for raw and normalized patient vitals."""

from __future__ import annotations

from typing import Any, List, Mapping

from pydantic import Field

from .common import StrictModel

RawPatientRecord = Mapping[str, Any]


class PatientVitals(StrictModel):
    id: str
    age: int = Field(ge=0, le=125)
    temperature_f: float = Field(ge=80, le=115)
    systolic: int = Field(ge=50, le=260)
    diastolic: int = Field(ge=30, le=160)


class DataQualityIssue(StrictModel):
    """A record excluded from scoring, with one reason per failed check."""

    id: str
    reasons: List[str] = Field(min_length=1)
