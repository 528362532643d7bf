from typing import Any, Callable, Dict, List, Optional

from .rates import (
    CONSTRUCTION_TIERS,
    DEFAULT_JP_MAX_WAGE,
    INDEPENDENT_JKK_FLOOR,
    INDEPENDENT_JKK_RATE,
    INDEPENDENT_JKM_FEE,
    JHT_EMPLOYER_RATE,
    JHT_WORKER_RATE,
    JKM_RATE,
    JP_EMPLOYER_RATE,
    JP_WORKER_RATE,
    PMI_EXTENSION_FEE,
    PMI_PRE_PLACEMENT_FEE,
    VOLUNTARY_JHT_RATE,
    migrant_package,
    risk_class,
)
from .schemas import ParticipantInputs, Segment
from .tiers import apply_progressive_tiers
from .utils import percent, to_rupiah


def benefit_base_wage(inputs: ParticipantInputs) -> int:
    """Wage used for benefit payouts; not always the contribution base."""
    if inputs.segment == Segment.SALARIED:
        return inputs.base_salary + inputs.fixed_allowance
    if inputs.segment == Segment.CONSTRUCTION:
        return inputs.average_wage
    return inputs.reported_income


def pension_wage_cap(inputs: ParticipantInputs) -> int:
    return inputs.pension_cap_override or DEFAULT_JP_MAX_WAGE


def _item(code: str, name: str, split: str, amount: int, formula: str) -> Dict[str, Any]:
    return {"code": code, "name": name, "split": split, "amount": amount, "formula": formula}


def _result(
    segment: Segment,
    worker_pay: int,
    payer_pay: Optional[int],
    items: List[Dict[str, Any]],
    old_age_savings_monthly: int = 0,
    pension_monthly: int = 0,
    **extra: Any,
) -> Dict[str, Any]:
    result = {
        "segment": segment.value,
        "worker_pay": worker_pay,
        "payer_pay": payer_pay,
        "items": items,
        "tier_breakdown": [],
        "old_age_savings_monthly": old_age_savings_monthly,
        "pension_monthly": pension_monthly,
        "pension_wage_capped": False,
        "mandatory_package_total": None,
        "accumulated_total": None,
    }
    result.update(extra)
    return result


def salaried_contribution(inputs: ParticipantInputs) -> Dict[str, Any]:
    wage = benefit_base_wage(inputs)
    risk = risk_class(inputs.risk_class_index)
    cap = pension_wage_cap(inputs)

    jkk = to_rupiah(wage * risk.rate)
    jkm = to_rupiah(wage * JKM_RATE)
    jht_employer = to_rupiah(wage * JHT_EMPLOYER_RATE)
    jht_worker = to_rupiah(wage * JHT_WORKER_RATE)

    # hard clamp, not a tier
    capped = wage > cap
    jp_base = min(wage, cap)
    jp_employer = to_rupiah(jp_base * JP_EMPLOYER_RATE)
    jp_worker = to_rupiah(jp_base * JP_WORKER_RATE)

    jht_total = jht_employer + jht_worker
    jp_total = jp_employer + jp_worker
    items = [
        _item(
            "jkk",
            f"JKK work accident ({risk.label})",
            f"employer pays in full ({percent(risk.rate)})",
            jkk,
            f"employer: {wage} x {percent(risk.rate)}",
        ),
        _item("jkm", "JKM death", f"employer pays in full ({percent(JKM_RATE)})", jkm, f"employer: {wage} x {percent(JKM_RATE)}"),
        _item(
            "jht",
            "JHT old-age savings",
            f"{percent(JHT_EMPLOYER_RATE)} employer, {percent(JHT_WORKER_RATE)} worker",
            jht_total,
            f"worker: {jht_worker} ({percent(JHT_WORKER_RATE)}) + employer: {jht_employer} ({percent(JHT_EMPLOYER_RATE)})",
        ),
        _item(
            "jp",
            "JP pension",
            f"{percent(JP_EMPLOYER_RATE)} employer, {percent(JP_WORKER_RATE)} worker",
            jp_total,
            f"worker: {jp_worker} ({percent(JP_WORKER_RATE)}) + employer: {jp_employer} ({percent(JP_EMPLOYER_RATE)})"
            + (f" (capped at {cap})" if capped else ""),
        ),
        _item("jkp", "JKP job-loss", "government subsidy", 0, "no wage deduction (subsidy and JKK recomposition)"),
    ]
    return _result(
        Segment.SALARIED,
        worker_pay=jht_worker + jp_worker,
        payer_pay=jkk + jkm + jht_employer + jp_employer,
        items=items,
        old_age_savings_monthly=jht_total,
        pension_monthly=jp_total,
        pension_wage_capped=capped,
    )


def independent_contribution(inputs: ParticipantInputs) -> Dict[str, Any]:
    income = inputs.reported_income
    jkk = max(to_rupiah(income * INDEPENDENT_JKK_RATE), INDEPENDENT_JKK_FLOOR)
    jkm = INDEPENDENT_JKM_FEE
    items = [
        _item(
            "jkk",
            "JKK work accident",
            f"self-paid {percent(INDEPENDENT_JKK_RATE)}",
            jkk,
            f"{income} x {percent(INDEPENDENT_JKK_RATE)} (minimum {INDEPENDENT_JKK_FLOOR})",
        ),
        _item("jkm", "JKM death", "self-paid flat fee", jkm, f"flat {INDEPENDENT_JKM_FEE}"),
    ]
    jht = 0
    if inputs.old_age_savings_opt_in:
        jht = to_rupiah(income * VOLUNTARY_JHT_RATE)
        items.append(
            _item(
                "jht",
                "JHT old-age savings",
                f"self-paid {percent(VOLUNTARY_JHT_RATE)}",
                jht,
                f"{income} x {percent(VOLUNTARY_JHT_RATE)} (voluntary)",
            )
        )
    return _result(
        Segment.INDEPENDENT,
        worker_pay=jkk + jkm + jht,
        payer_pay=None,
        items=items,
        old_age_savings_monthly=jht,
    )


def construction_contribution(inputs: ParticipantInputs) -> Dict[str, Any]:
    tiers = apply_progressive_tiers(inputs.contract_value, CONSTRUCTION_TIERS)
    jkk = tiers["total_work_accident"]
    jkm = tiers["total_death"]
    items = [
        _item("jkk", "JKK construction (progressive)", "contractor, tiered", jkk, "marginal rate per contract-value tier"),
        _item("jkm", "JKM construction (progressive)", "contractor, tiered", jkm, "marginal rate per contract-value tier"),
    ]
    return _result(
        Segment.CONSTRUCTION,
        worker_pay=0,
        payer_pay=jkk + jkm,
        items=items,
        tier_breakdown=tiers["breakdown"],
    )


def migrant_contribution(inputs: ParticipantInputs) -> Dict[str, Any]:
    package = migrant_package(inputs.package_index)
    tenure = inputs.tenure_months

    mandatory = PMI_PRE_PLACEMENT_FEE + package.price
    formula = f"pre-placement {PMI_PRE_PLACEMENT_FEE} + {package.label} {package.price}"
    extended_months = max(tenure - package.duration_months, 0)
    if extended_months:
        mandatory += extended_months * PMI_EXTENSION_FEE
        formula += f" + extension {extended_months} months x {PMI_EXTENSION_FEE}"

    items = [_item("pmi_package", "PMI package (mandatory)", "contract package plus extension", mandatory, formula)]
    jht = 0
    if inputs.old_age_savings_opt_in:
        jht = to_rupiah(inputs.reported_income * VOLUNTARY_JHT_RATE)
        items.append(
            _item(
                "jht",
                "JHT old-age savings (voluntary)",
                f"self-paid {percent(VOLUNTARY_JHT_RATE)}",
                jht,
                f"{inputs.reported_income} x {percent(VOLUNTARY_JHT_RATE)}",
            )
        )
    return _result(
        Segment.MIGRANT,
        worker_pay=jht,
        payer_pay=None,
        items=items,
        old_age_savings_monthly=jht,
        mandatory_package_total=mandatory,
        accumulated_total=mandatory + jht * tenure,
    )


CONTRIBUTION_CALCULATORS: Dict[Segment, Callable[[ParticipantInputs], Dict[str, Any]]] = {
    Segment.SALARIED: salaried_contribution,
    Segment.INDEPENDENT: independent_contribution,
    Segment.CONSTRUCTION: construction_contribution,
    Segment.MIGRANT: migrant_contribution,
}


def calculate_contribution(inputs: ParticipantInputs) -> Dict[str, Any]:
    return CONTRIBUTION_CALCULATORS[Segment(inputs.segment)](inputs)


def participates_in_old_age_savings(inputs: ParticipantInputs) -> bool:
    if inputs.segment == Segment.SALARIED:
        return True
    if inputs.segment in (Segment.INDEPENDENT, Segment.MIGRANT):
        return inputs.old_age_savings_opt_in
    return False
