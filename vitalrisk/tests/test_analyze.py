from __future__ import annotations

from vitalrisk import analyze

SAMPLE = [
    {"id": "a", "age": 70, "temperatureF": 101.5, "bp": "150/95"},
    {"id": "b", "age": 30, "temperatureF": 98.0, "bpSystolic": 110, "bpDiastolic": 70},
    {"id": "c", "age": 50, "temperatureF": 99.0},
]


def test_end_to_end_sample():
    output = analyze(SAMPLE)
    assert output.high_risk_ids == ["a"]
    assert output.fever_ids == ["a"]
    assert output.data_quality_issue_ids == ["c"]
    assert output.data_quality_issues[0].reasons == ["missing/malformed BP"]
    assert [r.id for r in output.scored] == ["a", "b"]
    assert output.scored[0].total_risk == 8
    assert output.scored[1].total_risk == 2


def test_analyze_is_repeatable():
    assert analyze(SAMPLE) == analyze(SAMPLE)
    assert analyze(SAMPLE).model_dump_json() == analyze(SAMPLE).model_dump_json()


def test_empty_batch():
    output = analyze([])
    assert output.scored == []
    assert output.high_risk_ids == output.fever_ids == output.data_quality_issue_ids == []


def test_order_is_input_order_without_excluded_records():
    records = [
        {"id": "p3", "age": 80, "temperatureF": 100.0, "bp": "145/92"},
        {"id": "bad1"},
        {"id": "p1", "age": 20, "temperatureF": 102.0, "bp": "118/70"},
        {"id": "p2", "age": 67, "temperatureF": 99.8, "bp": "122/78"},
        None,
    ]
    output = analyze(records)
    assert [r.id for r in output.scored] == ["p3", "p1", "p2"]
    assert output.high_risk_ids == ["p3", "p1", "p2"]
    assert output.fever_ids == ["p3", "p1", "p2"]
    assert output.data_quality_issue_ids == ["bad1", ""]


def test_ids_are_not_deduplicated():
    record = {"id": "dup", "age": 70, "temperatureF": 101.5, "bp": "150/95"}
    output = analyze([record, record, {"id": "dup"}])
    assert output.high_risk_ids == ["dup", "dup"]
    assert output.fever_ids == ["dup", "dup"]
    assert output.data_quality_issue_ids == ["dup"]


def test_accepts_any_iterable():
    output = analyze(record for record in SAMPLE)
    assert [r.id for r in output.scored] == ["a", "b"]
