import pytest

from calculator import benefits
from calculator.benefits import scholarship_amount
from calculator.schemas import ParticipantInputs, Segment
from calculator.simulator import run_simulation


def simulate(**kwargs):
    defaults = dict(
        segment=Segment.SALARIED,
        base_salary=4_000_000,
        fixed_allowance=1_000_000,
        tenure_months=60,
        annual_yield_percent=5.5,
        dependent_count=2,
    )
    defaults.update(kwargs)
    return run_simulation(ParticipantInputs(**defaults))


def test_scholarship_tiers():
    assert scholarship_amount(0) == 0
    assert scholarship_amount(1) == 87_000_000
    assert scholarship_amount(2) == 174_000_000
    assert scholarship_amount(1) * 2 == scholarship_amount(2)


@pytest.mark.parametrize("tenure", [0, 12, 35])
def test_natural_death_scholarship_needs_36_months(tenure):
    sc = simulate(tenure_months=tenure)["scenarios"]
    assert sc["natural_death"]["scholarship"] == 0
    assert sc["natural_death"]["scholarship_eligible"] is False
    assert sc["natural_death"]["note"] == benefits.SCHOLARSHIP_TENURE_TOO_SHORT
    # work-accident scholarship ignores tenure
    assert sc["work_death"]["scholarship"] == 174_000_000


def test_natural_death_totals():
    out = simulate(tenure_months=36, dependent_count=1)
    death = out["scenarios"]["natural_death"]
    assert death["lump_sum"] == 42_000_000
    assert death["scholarship"] == 87_000_000
    assert death["old_age_savings_balance"] == out["projections"]["old_age_savings"]["future_value"]
    assert death["pension_balance"] == out["projections"]["pension"]["future_value"]
    assert death["total"] == 42_000_000 + 87_000_000 + death["old_age_savings_balance"] + death["pension_balance"]


def test_natural_death_without_dependents():
    death = simulate(dependent_count=0)["scenarios"]["natural_death"]
    assert death["scholarship"] == 0
    assert death["note"] == benefits.NO_DEPENDENTS


def test_death_scenarios_carry_scholarship_schedule():
    sc = simulate(tenure_months=6)["scenarios"]
    for name in ("natural_death", "work_death"):
        schedule = sc[name]["scholarship_schedule"]
        assert schedule["kindergarten_primary"] == 1_500_000
        assert schedule["undergraduate"] == 12_000_000
    # the schedule is informational and shown even when the scholarship is withheld
    assert sc["natural_death"]["scholarship"] == 0


def test_work_death_uses_benefit_wage():
    death = simulate()["scenarios"]["work_death"]
    assert death["death_compensation"] == 48 * 5_000_000
    assert death["lump_sum"] == 240_000_000 + 12_000_000 + 10_000_000


def test_construction_work_death_uses_average_wage_not_contract():
    out = simulate(segment=Segment.CONSTRUCTION, contract_value=600_000_000, average_wage=3_000_000)
    death = out["scenarios"]["work_death"]
    assert death["death_compensation"] == 144_000_000
    assert death["old_age_savings_balance"] == 0
    assert death["pension_balance"] == 0


def test_illness_is_informational():
    sick = simulate()["scenarios"]["illness"]
    assert sick["medical_coverage_unlimited"] is True
    assert sick["wage_replacement_monthly"] == 5_000_000
    assert sick["wage_replacement_full_months"] == 12
    assert sick["wage_replacement_after_monthly"] == 2_500_000
    assert sick["transport_ceiling"] == 5_000_000


def test_job_loss_example():
    out = simulate()
    loss = out["scenarios"]["job_loss"]
    assert loss["eligible"] is True
    assert loss["reason"] == benefits.ELIGIBLE
    assert loss["cash_benefit"] == 18_000_000
    assert loss["total"] == 18_000_000 + out["projections"]["old_age_savings"]["future_value"]


def test_job_loss_wage_base_is_capped():
    loss = simulate(base_salary=9_000_000)["scenarios"]["job_loss"]
    assert loss["wage_base"] == 5_000_000
    assert loss["cash_benefit"] == 18_000_000


def test_job_loss_cash_rounded_once():
    loss = simulate(base_salary=1_234_567, fixed_allowance=0, tenure_months=24)["scenarios"]["job_loss"]
    # 0.6 * 1_234_567 * 6 = 4_444_441.2
    assert loss["cash_benefit"] == 4_444_441
    assert loss["monthly_cash"] == 740_740


def test_job_loss_eligible_at_exactly_12_months():
    loss = simulate(tenure_months=12)["scenarios"]["job_loss"]
    assert loss["eligible"] is True
    assert loss["cash_benefit"] == 18_000_000


def test_job_loss_needs_12_months():
    loss = simulate(tenure_months=11)["scenarios"]["job_loss"]
    assert loss["cash_benefit"] == 0
    assert loss["reason"] == benefits.INSUFFICIENT_TENURE


@pytest.mark.parametrize("segment", [Segment.INDEPENDENT, Segment.CONSTRUCTION, Segment.MIGRANT])
def test_job_loss_salaried_only(segment):
    loss = simulate(segment=segment, reported_income=5_000_000, average_wage=5_000_000)["scenarios"]["job_loss"]
    assert loss["cash_benefit"] == 0
    assert loss["eligible"] is False
    assert loss["reason"] == benefits.SEGMENT_NOT_COVERED


def test_retirement_periodic_pension_from_180_months():
    ret = simulate(tenure_months=180)["scenarios"]["retirement"]
    assert ret["pension_mode"] == "periodic"
    assert ret["jp_monthly"] == 750_000
    assert ret["jp_lump_sum"] == 0
    assert [s["beneficiary"] for s in ret["survivor_succession"]] == ["participant", "spouse", "children"]


def test_retirement_pension_uses_cap():
    ret = simulate(tenure_months=240, base_salary=20_000_000, fixed_allowance=0)["scenarios"]["retirement"]
    assert ret["jp_monthly"] == 2_109_480


def test_retirement_lump_sum_below_180_months():
    out = simulate(tenure_months=179)
    ret = out["scenarios"]["retirement"]
    assert ret["pension_mode"] == "lump_sum"
    assert ret["jp_monthly"] == 0
    assert ret["jp_lump_sum"] == out["projections"]["pension"]["future_value"]
    assert ret["jp_lump_sum"] > 0


def test_retirement_no_pension_outside_salaried():
    out = simulate(segment=Segment.INDEPENDENT, reported_income=2_000_000, tenure_months=240)
    ret = out["scenarios"]["retirement"]
    assert ret["pension_eligible"] is False
    assert ret["jp_monthly"] == 0
    assert ret["jp_lump_sum"] == 0
    assert ret["note"] == benefits.SEGMENT_NOT_COVERED
    assert ret["old_age_savings_enrolled"] is False
    assert ret["old_age_savings_note"] == benefits.NOT_ENROLLED


def test_retirement_partial_withdrawal_after_ten_years():
    ret = simulate(tenure_months=120)["scenarios"]["retirement"]
    balance = ret["old_age_savings_balance"]
    assert ret["partial_withdrawal"]["eligible"] is True
    assert abs(ret["partial_withdrawal"]["housing"] - balance * 0.3) <= 0.5
    assert simulate(tenure_months=119)["scenarios"]["retirement"]["partial_withdrawal"]["eligible"] is False


def test_contribution_only_totals():
    only = simulate()["scenarios"]["contribution_only"]
    assert only["worker_total"] == 150_000 * 60
    assert only["payer_total"] == 312_000 * 60
    assert only["total"] == only["worker_total"] + only["payer_total"]


def test_contribution_only_migrant_uses_accumulated_total():
    out = simulate(
        segment=Segment.MIGRANT,
        package_index=1,
        tenure_months=18,
        reported_income=3_000_000,
        old_age_savings_opt_in=True,
    )
    only = out["scenarios"]["contribution_only"]
    assert only["worker_total"] == out["monthly"]["accumulated_total"] == 1_387_500
    assert only["payer_total"] is None


def test_housing_facilities_gate():
    assert simulate(tenure_months=12)["housing_facilities"]["eligible"] is True
    assert simulate(tenure_months=6)["housing_facilities"]["reason"] == benefits.INSUFFICIENT_TENURE
    construction = simulate(segment=Segment.CONSTRUCTION, contract_value=100_000_000)
    assert construction["housing_facilities"]["reason"] == benefits.NOT_ENROLLED
