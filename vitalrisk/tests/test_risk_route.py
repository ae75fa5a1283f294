from fastapi.testclient import TestClient

from vitalrisk.api.main import app
from vitalrisk.api.routers import risk as risk_module

client = TestClient(app)

PATIENTS = [
    {"patient_id": "DEMO001", "age": 70, "temperature": 101.5, "blood_pressure": "150/95"},
    {"patient_id": "DEMO002", "age": "30", "temperature": "98.0", "blood_pressure": "110/70"},
    {"patient_id": "DEMO003", "age": 50, "temperature": 99.0, "blood_pressure": "N/A"},
]


def test_root_and_health():
    assert client.get("/").json()["health"] == "/health"
    response = client.get("/health/")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_analyze_bare_list():
    response = client.post("/api/risk/", json=PATIENTS)
    assert response.status_code == 200
    data = response.json()
    assert data["alerts"] == {
        "high_risk_patients": ["DEMO001"],
        "fever_patients": ["DEMO001"],
        "data_quality_issues": ["DEMO003"],
    }
    assert data["data_quality_details"] == [{"id": "DEMO003", "reasons": ["missing/malformed BP"]}]
    assert [p["id"] for p in data["scored_patients"]] == ["DEMO001", "DEMO002"]
    assert data["scored_patients"][0]["total_risk"] == 8


def test_analyze_unwraps_envelopes():
    for body in ({"data": PATIENTS}, {"result": {"patients": PATIENTS}}):
        response = client.post("/api/risk/", json=body)
        assert response.status_code == 200
        assert response.json()["alerts"]["high_risk_patients"] == ["DEMO001"]


def test_unknown_envelope_is_empty_batch():
    response = client.post("/api/risk/", json={"unexpected": PATIENTS})
    assert response.status_code == 200
    assert response.json()["scored_patients"] == []


def test_batch_limit(monkeypatch):
    monkeypatch.setattr(risk_module.settings, "max_batch_size", 2)
    response = client.post("/api/risk/", json=PATIENTS)
    assert response.status_code == 413


def test_validate_submission():
    payload = {"high_risk_patients": ["a"], "fever_patients": ["a", "b"], "data_quality_issues": []}
    response = client.post("/api/risk/submission/validate", json=payload)
    assert response.status_code == 200
    data = response.json()
    assert data["payload"] == payload
    assert data["counts"] == {"high_risk_patients": 1, "fever_patients": 2, "data_quality_issues": 0}


def test_validate_submission_rejects_non_arrays():
    payload = {"high_risk_patients": "a", "fever_patients": [], "data_quality_issues": []}
    response = client.post("/api/risk/submission/validate", json=payload)
    assert response.status_code == 422
    assert response.json()["detail"] == "Invalid payload format"

    response = client.post("/api/risk/submission/validate", json={"fever_patients": []})
    assert response.status_code == 422
