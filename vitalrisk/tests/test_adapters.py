from __future__ import annotations

import pytest

from vitalrisk import analyze
from vitalrisk.adapters.envelope import extract_patients
from vitalrisk.adapters.submission import submission_counts, to_submission


@pytest.mark.parametrize(
    "payload, expected",
    [
        ([{"id": "a"}], [{"id": "a"}]),
        ({"patients": [1], "data": [2]}, [1]),
        ({"patients": "oops", "data": [2]}, [2]),
        ({"items": [3]}, [3]),
        ({"result": {"patients": [4]}}, [4]),
        ({"result": [5]}, []),
        ({}, []),
        (None, []),
        (42, []),
        ("patients", []),
    ],
)
def test_extract_patients(payload, expected):
    assert extract_patients(payload) == expected


def test_to_submission_mirrors_alert_lists():
    output = analyze(
        [
            {"id": "a", "age": 70, "temperatureF": 101.5, "bp": "150/95"},
            {"id": "b", "age": 30, "temperatureF": 99.7, "bp": "110/70"},
            {"id": "c"},
        ]
    )
    submission = to_submission(output)
    assert submission.high_risk_patients == ["a"]
    assert submission.fever_patients == ["a", "b"]
    assert submission.data_quality_issues == ["c"]
    assert submission_counts(submission) == {
        "high_risk_patients": 1,
        "fever_patients": 2,
        "data_quality_issues": 1,
    }
