"""Benefit payouts for the six risk scenarios.

Every scenario is an independent hypothetical view of the same inputs, so all
six are computed on every pass and the caller picks what to show. Ineligible
participants get zero-valued figures plus a reason code, never an exception.
"""
from decimal import Decimal
from typing import Any, Dict, Optional

from .contributions import benefit_base_wage, participates_in_old_age_savings, pension_wage_cap
from .rates import (
    ILLNESS_FULL_WAGE_MONTHS,
    ILLNESS_REDUCED_WAGE_RATE,
    JHT_PARTIAL_HOUSING_RATE,
    JHT_PARTIAL_MIN_TENURE,
    JHT_PARTIAL_OTHER_RATE,
    JKK_DEATH_WAGE_MULTIPLIER,
    JKK_FUNERAL_ALLOWANCE,
    JKK_PERIODIC_BENEFIT,
    JKM_DEATH_GRANT,
    JKM_FUNERAL_ALLOWANCE,
    JKM_PERIODIC_BENEFIT,
    JKM_SCHOLARSHIP_MIN_TENURE,
    JKP_BENEFIT_MONTHS,
    JKP_BENEFIT_RATE,
    JKP_MIN_TENURE,
    JKP_WAGE_CAP,
    JP_ACCRUAL_RATE,
    JP_MIN_TENURE,
    JP_SURVIVOR_CHILD_AGE_LIMIT,
    JP_SURVIVOR_CHILDREN_MAX,
    MLT_CEILINGS,
    MLT_MIN_TENURE,
    SCHOLARSHIP_ANNUAL_BY_LEVEL,
    SCHOLARSHIP_MAX,
    SCHOLARSHIP_MAX_CHILDREN,
    TRANSPORT_CEILING,
    TRANSPORT_CEILINGS,
)
from .schemas import ParticipantInputs, Segment
from .utils import to_rupiah

# note / reason codes
SCHOLARSHIP_INCLUDED = "scholarship_included"
NO_DEPENDENTS = "no_dependents"
SCHOLARSHIP_TENURE_TOO_SHORT = "scholarship_tenure_below_minimum"
ELIGIBLE = "eligible"
SEGMENT_NOT_COVERED = "segment_not_covered"
INSUFFICIENT_TENURE = "insufficient_tenure"
NOT_ENROLLED = "old_age_savings_not_enrolled"
PENSION_PERIODIC = "pension_periodic"
PENSION_LUMP_SUM = "pension_lump_sum"


def scholarship_amount(dependent_count: int) -> int:
    children = max(0, min(dependent_count, SCHOLARSHIP_MAX_CHILDREN))
    return SCHOLARSHIP_MAX * children // SCHOLARSHIP_MAX_CHILDREN


def _balance(projection: Optional[Dict[str, Any]]) -> int:
    return projection["future_value"] if projection else 0


def _balances(inputs: ParticipantInputs, projections: Dict[str, Any]) -> Dict[str, int]:
    jht = _balance(projections["old_age_savings"]) if participates_in_old_age_savings(inputs) else 0
    jp = _balance(projections.get("pension")) if inputs.segment == Segment.SALARIED else 0
    return {"old_age_savings_balance": jht, "pension_balance": jp}


def natural_death(inputs: ParticipantInputs, projections: Dict[str, Any]) -> Dict[str, Any]:
    lump_sum = JKM_DEATH_GRANT + JKM_PERIODIC_BENEFIT + JKM_FUNERAL_ALLOWANCE
    eligible = inputs.tenure_months >= JKM_SCHOLARSHIP_MIN_TENURE
    scholarship = scholarship_amount(inputs.dependent_count) if eligible else 0
    if not eligible:
        note = SCHOLARSHIP_TENURE_TOO_SHORT
    elif inputs.dependent_count == 0:
        note = NO_DEPENDENTS
    else:
        note = SCHOLARSHIP_INCLUDED
    balances = _balances(inputs, projections)
    return {
        "scenario": "natural_death",
        "death_grant": JKM_DEATH_GRANT,
        "periodic_benefit": JKM_PERIODIC_BENEFIT,
        "funeral_allowance": JKM_FUNERAL_ALLOWANCE,
        "lump_sum": lump_sum,
        "scholarship_eligible": eligible,
        "scholarship": scholarship,
        "scholarship_schedule": dict(SCHOLARSHIP_ANNUAL_BY_LEVEL),
        **balances,
        "total": lump_sum + scholarship + sum(balances.values()),
        "note": note,
    }


def work_death(inputs: ParticipantInputs, projections: Dict[str, Any]) -> Dict[str, Any]:
    # work-accident scholarship has no minimum tenure
    compensation = JKK_DEATH_WAGE_MULTIPLIER * benefit_base_wage(inputs)
    lump_sum = compensation + JKK_PERIODIC_BENEFIT + JKK_FUNERAL_ALLOWANCE
    scholarship = scholarship_amount(inputs.dependent_count)
    balances = _balances(inputs, projections)
    return {
        "scenario": "work_death",
        "death_compensation": compensation,
        "periodic_benefit": JKK_PERIODIC_BENEFIT,
        "funeral_allowance": JKK_FUNERAL_ALLOWANCE,
        "lump_sum": lump_sum,
        "scholarship": scholarship,
        "scholarship_schedule": dict(SCHOLARSHIP_ANNUAL_BY_LEVEL),
        **balances,
        "total": lump_sum + scholarship + sum(balances.values()),
        "note": SCHOLARSHIP_INCLUDED if scholarship else NO_DEPENDENTS,
    }


def illness(inputs: ParticipantInputs) -> Dict[str, Any]:
    wage = benefit_base_wage(inputs)
    return {
        "scenario": "illness",
        "medical_coverage_unlimited": True,
        "wage_replacement_monthly": wage,
        "wage_replacement_full_months": ILLNESS_FULL_WAGE_MONTHS,
        "wage_replacement_after_monthly": to_rupiah(wage * ILLNESS_REDUCED_WAGE_RATE),
        "transport_ceiling": TRANSPORT_CEILING,
        "transport_ceilings": dict(TRANSPORT_CEILINGS),
    }


def job_loss(inputs: ParticipantInputs, projections: Dict[str, Any]) -> Dict[str, Any]:
    wage_base = min(benefit_base_wage(inputs), JKP_WAGE_CAP)
    if inputs.segment != Segment.SALARIED:
        reason = SEGMENT_NOT_COVERED
    elif inputs.tenure_months < JKP_MIN_TENURE:
        reason = INSUFFICIENT_TENURE
    else:
        reason = ELIGIBLE
    eligible = reason == ELIGIBLE
    monthly_cash = to_rupiah(wage_base * JKP_BENEFIT_RATE) if eligible else 0
    cash = to_rupiah(wage_base * JKP_BENEFIT_RATE * JKP_BENEFIT_MONTHS) if eligible else 0
    jht = _balances(inputs, projections)["old_age_savings_balance"]
    return {
        "scenario": "job_loss",
        "eligible": eligible,
        "reason": reason,
        "wage_base": wage_base,
        "monthly_cash": monthly_cash,
        "benefit_months": JKP_BENEFIT_MONTHS,
        "cash_benefit": cash,
        "old_age_savings_balance": jht,
        "total": cash + jht,
    }


def _partial_withdrawal(inputs: ParticipantInputs, balance: int) -> Dict[str, Any]:
    eligible = balance > 0 and inputs.tenure_months >= JHT_PARTIAL_MIN_TENURE
    return {
        "eligible": eligible,
        "housing": to_rupiah(balance * JHT_PARTIAL_HOUSING_RATE) if eligible else 0,
        "other": to_rupiah(balance * JHT_PARTIAL_OTHER_RATE) if eligible else 0,
    }


def retirement(inputs: ParticipantInputs, projections: Dict[str, Any]) -> Dict[str, Any]:
    enrolled = participates_in_old_age_savings(inputs)
    balances = _balances(inputs, projections)
    jht = balances["old_age_savings_balance"]

    jp_monthly = 0
    jp_lump_sum = 0
    succession = []
    if inputs.segment != Segment.SALARIED:
        mode = "none"
        note = SEGMENT_NOT_COVERED
    elif inputs.tenure_months >= JP_MIN_TENURE:
        mode = "periodic"
        note = PENSION_PERIODIC
        tenure_years = Decimal(inputs.tenure_months) / 12
        wage = min(benefit_base_wage(inputs), pension_wage_cap(inputs))
        jp_monthly = to_rupiah(JP_ACCRUAL_RATE * tenure_years * wage)
        succession = [
            {"beneficiary": "participant", "until": "death"},
            {"beneficiary": "spouse", "until": "death or remarriage"},
            {
                "beneficiary": "children",
                "max_count": JP_SURVIVOR_CHILDREN_MAX,
                "until": f"age {JP_SURVIVOR_CHILD_AGE_LIMIT}, employment or marriage",
            },
        ]
    else:
        mode = "lump_sum"
        note = PENSION_LUMP_SUM
        jp_lump_sum = balances["pension_balance"]

    return {
        "scenario": "retirement",
        "old_age_savings_enrolled": enrolled,
        "old_age_savings_balance": jht,
        "old_age_savings_note": None if enrolled else NOT_ENROLLED,
        "partial_withdrawal": _partial_withdrawal(inputs, jht),
        "pension_eligible": inputs.segment == Segment.SALARIED,
        "pension_mode": mode,
        "jp_monthly": jp_monthly,
        "jp_lump_sum": jp_lump_sum,
        "survivor_succession": succession,
        "note": note,
    }


def contribution_only(inputs: ParticipantInputs, monthly: Dict[str, Any]) -> Dict[str, Any]:
    tenure = inputs.tenure_months
    payer_total = monthly["payer_pay"] * tenure if monthly["payer_pay"] is not None else None
    if inputs.segment == Segment.MIGRANT:
        worker_total = monthly["accumulated_total"]
    else:
        worker_total = monthly["worker_pay"] * tenure
    return {
        "scenario": "contribution_only",
        "monthly": monthly,
        "tenure_months": tenure,
        "worker_total": worker_total,
        "payer_total": payer_total,
        "total": worker_total + (payer_total or 0),
    }


def housing_facilities(inputs: ParticipantInputs) -> Dict[str, Any]:
    if not participates_in_old_age_savings(inputs):
        reason = NOT_ENROLLED
    elif inputs.tenure_months < MLT_MIN_TENURE:
        reason = INSUFFICIENT_TENURE
    else:
        reason = ELIGIBLE
    return {
        "eligible": reason == ELIGIBLE,
        "reason": reason,
        "ceilings": dict(MLT_CEILINGS),
    }


def evaluate_benefits(
    inputs: ParticipantInputs,
    monthly: Dict[str, Any],
    projections: Dict[str, Any],
) -> Dict[str, Dict[str, Any]]:
    return {
        "natural_death": natural_death(inputs, projections),
        "work_death": work_death(inputs, projections),
        "illness": illness(inputs),
        "job_loss": job_loss(inputs, projections),
        "retirement": retirement(inputs, projections),
        "contribution_only": contribution_only(inputs, monthly),
    }
