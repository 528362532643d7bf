from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Segment(str, Enum):
    SALARIED = "salaried"
    INDEPENDENT = "independent"
    CONSTRUCTION = "construction"
    MIGRANT = "migrant"


# Outputs are plain dicts; dataclasses used for inputs only.
@dataclass(frozen=True)
class ParticipantInputs:
    segment: Segment
    base_salary: int = 0
    fixed_allowance: int = 0
    reported_income: int = 0
    contract_value: int = 0
    average_wage: int = 0
    package_index: int = 0
    tenure_months: int = 0
    annual_yield_percent: float = 0.0
    risk_class_index: int = 0
    dependent_count: int = 0
    old_age_savings_opt_in: bool = False
    pension_cap_override: Optional[int] = None
