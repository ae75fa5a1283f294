"""Validate resolved vitals and split records into trusted or excluded."""

from __future__ import annotations

import logging
from typing import Any, List, Union

from ...schemas.vitals import DataQualityIssue, PatientVitals
from .fields import lookup
from .units import parse_bp_string, round_half_away, to_number

__all__ = ["normalize_patient"]

logger = logging.getLogger(__name__)

AGE_RANGE = (0, 125)
TEMPERATURE_F_RANGE = (80, 115)
SYSTOLIC_RANGE = (50, 260)
DIASTOLIC_RANGE = (30, 160)


def _within(value: float, bounds: tuple[float, float]) -> bool:
    low, high = bounds
    return low <= value <= high


def _record_id(record: Any) -> str:
    value = lookup(record, "id")
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    try:
        return str(value)
    except ValueError:
        # int too long for the str conversion limit
        return ""


def normalize_patient(record: Any) -> Union[PatientVitals, DataQualityIssue]:
    """Return trusted vitals for *record*, or the reasons it cannot be scored.

    Every check runs, so a record missing all of its vitals reports age,
    temperature and blood pressure problems together, in that order.
    """

    reasons: List[str] = []

    age = to_number(lookup(record, "age"))
    if age is None:
        reasons.append("missing/malformed age")
    elif not _within(age, AGE_RANGE):
        reasons.append("age out of range")

    temperature_f = to_number(lookup(record, "temperature"))
    if temperature_f is None:
        reasons.append("missing/malformed temperatureF")
    elif not _within(temperature_f, TEMPERATURE_F_RANGE):
        reasons.append("temperature out of range")

    systolic = to_number(lookup(record, "systolic"))
    diastolic = to_number(lookup(record, "diastolic"))
    if systolic is None or diastolic is None:
        reading = lookup(record, "bp")
        if isinstance(reading, str):
            parsed_systolic, parsed_diastolic = parse_bp_string(reading)
            if systolic is None:
                systolic = parsed_systolic
            if diastolic is None:
                diastolic = parsed_diastolic

    if systolic is None or diastolic is None:
        reasons.append("missing/malformed BP")
    else:
        if not _within(systolic, SYSTOLIC_RANGE):
            reasons.append("systolic out of range")
        if not _within(diastolic, DIASTOLIC_RANGE):
            reasons.append("diastolic out of range")

    patient_id = _record_id(record)
    if reasons:
        logger.debug("Excluding patient %r from scoring: %s", patient_id, "; ".join(reasons))
        return DataQualityIssue(id=patient_id, reasons=reasons)

    return PatientVitals(
        id=patient_id,
        age=round_half_away(age),
        temperature_f=temperature_f,
        systolic=round_half_away(systolic),
        diastolic=round_half_away(diastolic),
    )
