import copy

from fastapi.testclient import TestClient

from service.core.sample_payloads import (
    SAMPLE_CONSTRUCTION_REQUEST,
    SAMPLE_MIGRANT_REQUEST,
    SAMPLE_REQUEST,
)
from service.main import app

client = TestClient(app)


def test_health():
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_rates_lists_selectors():
    body = client.get("/rates").json()
    assert [rc["label"] for rc in body["risk_classes"]][0] == "Sangat Rendah"
    assert len(body["risk_classes"]) == 5
    assert [p["duration_months"] for p in body["migrant_packages"]] == [24, 12, 6]
    assert body["construction_tiers"][-1]["upper_bound"] is None
    assert body["scholarship_schedule"]["undergraduate"] == 12_000_000


def test_simulate_exposes_scholarship_schedule():
    body = client.post("/simulate", json=SAMPLE_REQUEST).json()
    assert body["scenarios"]["work_death"]["scholarship_schedule"]["senior_high"] == 3_000_000


def test_simulate_salaried_sample():
    r = client.post("/simulate", json=SAMPLE_REQUEST)
    assert r.status_code == 200
    body = r.json()
    assert body["monthly"]["old_age_savings_monthly"] == 285_000
    assert body["monthly"]["pension_monthly"] == 150_000
    assert body["scenarios"]["job_loss"]["cash_benefit"] == 18_000_000
    assert body["scenarios"]["natural_death"]["scholarship"] == 174_000_000
    assert body["projections"]["pension"]["principal"] == 9_000_000


def test_simulate_construction_sample():
    body = client.post("/simulate", json=SAMPLE_CONSTRUCTION_REQUEST).json()
    assert body["monthly"]["payer_pay"] == 1_150_000
    assert body["monthly"]["tier_breakdown"][0]["work_accident_amount"] == 210_000
    assert body["projections"]["pension"] is None
    assert body["scenarios"]["work_death"]["death_compensation"] == 144_000_000


def test_simulate_migrant_sample():
    body = client.post("/simulate", json=SAMPLE_MIGRANT_REQUEST).json()
    assert body["monthly"]["mandatory_package_total"] == 307_500
    assert body["monthly"]["worker_pay"] == 60_000
    assert body["scenarios"]["contribution_only"]["worker_total"] == 1_387_500


def test_bad_numbers_are_coerced_not_rejected():
    payload = copy.deepcopy(SAMPLE_REQUEST)
    payload["wage"]["base_salary"] = "not a number"
    payload["tenure_months"] = -5
    r = client.post("/simulate", json=payload)
    assert r.status_code == 200
    body = r.json()
    assert body["inputs"]["base_salary"] == 0
    assert body["inputs"]["tenure_months"] == 0
    assert body["scenarios"]["job_loss"]["reason"] == "insufficient_tenure"


def test_fractional_numbers_round_half_up_like_the_engine():
    payload = copy.deepcopy(SAMPLE_REQUEST)
    payload["tenure_months"] = 18.5
    payload["wage"]["fixed_allowance"] = 2.5
    body = client.post("/simulate", json=payload).json()
    assert body["inputs"]["tenure_months"] == 19
    assert body["inputs"]["fixed_allowance"] == 3


def test_out_of_range_risk_class_rejected_at_boundary():
    payload = copy.deepcopy(SAMPLE_REQUEST)
    payload["risk_class_index"] = 7
    assert client.post("/simulate", json=payload).status_code == 422


def test_unknown_segment_rejected():
    payload = copy.deepcopy(SAMPLE_REQUEST)
    payload["segment"] = "retired"
    assert client.post("/simulate", json=payload).status_code == 422
