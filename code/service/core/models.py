import math
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

from calculator.schemas import Segment
from calculator.utils import to_decimal, to_rupiah


def _coerce_number(value: Any) -> Any:
    """Non-numeric, negative or non-finite input becomes zero instead of a 422."""
    if value is None or isinstance(value, bool):
        return 0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0
    if not math.isfinite(number) or number < 0:
        return 0
    return number


def _rupiah(value: Any) -> int:
    # same half-up rule as the engine, so 18.5 is 19 on both paths
    return to_rupiah(to_decimal(_coerce_number(value)))


class WageInputs(BaseModel):
    base_salary: int = 0
    fixed_allowance: int = 0
    reported_income: int = 0
    contract_value: int = 0
    average_wage: int = 0
    package_index: int = Field(default=0, ge=0, le=2)

    @field_validator(
        "base_salary", "fixed_allowance", "reported_income", "contract_value", "average_wage", mode="before"
    )
    @classmethod
    def _money(cls, value: Any) -> int:
        return _rupiah(value)


class OptIns(BaseModel):
    old_age_savings: bool = False


class SimulationRequest(BaseModel):
    segment: Segment
    wage: WageInputs = WageInputs()
    tenure_months: int = 0
    annual_yield_percent: float = 0.0
    risk_class_index: int = Field(default=0, ge=0, le=4)
    dependent_count: int = 0
    opt_ins: OptIns = OptIns()
    pension_cap_override: Optional[int] = None

    @field_validator("tenure_months", "dependent_count", mode="before")
    @classmethod
    def _count(cls, value: Any) -> int:
        return _rupiah(value)

    @field_validator("annual_yield_percent", mode="before")
    @classmethod
    def _yield(cls, value: Any) -> float:
        return float(_coerce_number(value))

    @field_validator("pension_cap_override", mode="before")
    @classmethod
    def _cap(cls, value: Any) -> Optional[int]:
        if value is None or value == "":
            return None
        return _rupiah(value)


class LineItem(BaseModel):
    code: str
    name: str
    split: str
    amount: int
    formula: str


class TierBreakdown(BaseModel):
    tier_label: str
    portion: int
    work_accident_amount: int
    death_amount: int


class MonthlyContribution(BaseModel):
    segment: Segment
    worker_pay: int
    payer_pay: Optional[int]
    items: List[LineItem]
    tier_breakdown: List[TierBreakdown]
    old_age_savings_monthly: int
    pension_monthly: int
    pension_wage_capped: bool
    mandatory_package_total: Optional[int]
    accumulated_total: Optional[int]


class ProjectedBalance(BaseModel):
    monthly_contribution: int
    months: int
    annual_yield_percent: float
    principal: int
    future_value: int
    interest: int


class Projections(BaseModel):
    old_age_savings: ProjectedBalance
    pension: Optional[ProjectedBalance] = None


class NaturalDeath(BaseModel):
    scenario: Literal["natural_death"]
    death_grant: int
    periodic_benefit: int
    funeral_allowance: int
    lump_sum: int
    scholarship_eligible: bool
    scholarship: int
    scholarship_schedule: Dict[str, int]
    old_age_savings_balance: int
    pension_balance: int
    total: int
    note: str


class WorkDeath(BaseModel):
    scenario: Literal["work_death"]
    death_compensation: int
    periodic_benefit: int
    funeral_allowance: int
    lump_sum: int
    scholarship: int
    scholarship_schedule: Dict[str, int]
    old_age_savings_balance: int
    pension_balance: int
    total: int
    note: str


class Illness(BaseModel):
    scenario: Literal["illness"]
    medical_coverage_unlimited: bool
    wage_replacement_monthly: int
    wage_replacement_full_months: int
    wage_replacement_after_monthly: int
    transport_ceiling: int
    transport_ceilings: Dict[str, int]


class JobLoss(BaseModel):
    scenario: Literal["job_loss"]
    eligible: bool
    reason: str
    wage_base: int
    monthly_cash: int
    benefit_months: int
    cash_benefit: int
    old_age_savings_balance: int
    total: int


class PartialWithdrawal(BaseModel):
    eligible: bool
    housing: int
    other: int


class Retirement(BaseModel):
    scenario: Literal["retirement"]
    old_age_savings_enrolled: bool
    old_age_savings_balance: int
    old_age_savings_note: Optional[str]
    partial_withdrawal: PartialWithdrawal
    pension_eligible: bool
    pension_mode: Literal["periodic", "lump_sum", "none"]
    jp_monthly: int
    jp_lump_sum: int
    survivor_succession: List[Dict[str, Any]]
    note: str


class ContributionOnly(BaseModel):
    scenario: Literal["contribution_only"]
    monthly: MonthlyContribution
    tenure_months: int
    worker_total: int
    payer_total: Optional[int]
    total: int


class Scenarios(BaseModel):
    natural_death: NaturalDeath
    work_death: WorkDeath
    illness: Illness
    job_loss: JobLoss
    retirement: Retirement
    contribution_only: ContributionOnly


class HousingFacilities(BaseModel):
    eligible: bool
    reason: str
    ceilings: Dict[str, int]


class SimulationResponse(BaseModel):
    monthly: MonthlyContribution
    projections: Projections
    scenarios: Scenarios
    housing_facilities: HousingFacilities
    inputs: Dict[str, Any]
