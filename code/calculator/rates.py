"""Statutory rates, caps and tier boundaries (PP 44/2015 and later amendments).

A regulatory change is an edit to this table, never to a formula.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Optional, Tuple


class ConfigurationGap(LookupError):
    """Raised when a caller asks for a table entry that does not exist."""


@dataclass(frozen=True)
class RiskClass:
    label: str
    rate: Decimal
    description: str


@dataclass(frozen=True)
class MigrantPackage:
    label: str
    price: int
    duration_months: int


@dataclass(frozen=True)
class ProgressiveTier:
    label: str
    upper_bound: Optional[int]  # None means unbounded
    work_accident_rate: Decimal
    death_rate: Decimal


JKK_RISK_CLASSES: Tuple[RiskClass, ...] = (
    RiskClass(
        "Sangat Rendah",
        Decimal("0.0024"),
        "Indoor work with minimal physical risk: banking, insurance, business services, garment, administration.",
    ),
    RiskClass(
        "Rendah",
        Decimal("0.0054"),
        "Light field or factory work: agriculture, livestock, inland fishery, retail trade, food and beverage.",
    ),
    RiskClass(
        "Sedang",
        Decimal("0.0089"),
        "Mid-scale processing and plantations: rubber, sugar, coffee, textiles, metal goods, printing.",
    ),
    RiskClass(
        "Tinggi",
        Decimal("0.0127"),
        "Heavy physical work and transport: building construction, land/sea/air transport, base metals, chemicals.",
    ),
    RiskClass(
        "Sangat Tinggi",
        Decimal("0.0174"),
        "Hazardous work: oil, gas, coal and ore mining, forest logging, quarrying.",
    ),
)

# Salaried (Penerima Upah)
JKM_RATE = Decimal("0.003")
JHT_EMPLOYER_RATE = Decimal("0.037")
JHT_WORKER_RATE = Decimal("0.02")
JP_EMPLOYER_RATE = Decimal("0.02")
JP_WORKER_RATE = Decimal("0.01")
DEFAULT_JP_MAX_WAGE = 10_547_400

# Independent (Bukan Penerima Upah)
INDEPENDENT_JKK_RATE = Decimal("0.01")
INDEPENDENT_JKK_FLOOR = 10_000
INDEPENDENT_JKM_FEE = 6_800
VOLUNTARY_JHT_RATE = Decimal("0.02")

# Migrant workers (PMI)
PMI_PRE_PLACEMENT_FEE = 37_500
PMI_EXTENSION_FEE = 13_500
PMI_PACKAGES: Tuple[MigrantPackage, ...] = (
    MigrantPackage("Paket 24 Bulan", 332_500, 24),
    MigrantPackage("Paket 12 Bulan", 189_000, 12),
    MigrantPackage("Paket 6 Bulan", 108_000, 6),
)

# Construction services (Jasa Konstruksi), marginal rates per contract-value band
CONSTRUCTION_TIERS: Tuple[ProgressiveTier, ...] = (
    ProgressiveTier("up to 100M", 100_000_000, Decimal("0.0021"), Decimal("0.0003")),
    ProgressiveTier("100M to 500M", 500_000_000, Decimal("0.0017"), Decimal("0.0002")),
    ProgressiveTier("500M to 1B", 1_000_000_000, Decimal("0.0013"), Decimal("0.0002")),
    ProgressiveTier("1B to 5B", 5_000_000_000, Decimal("0.0011"), Decimal("0.0001")),
    ProgressiveTier("above 5B", None, Decimal("0.0009"), Decimal("0.0001")),
)

# Death (JKM)
JKM_DEATH_GRANT = 20_000_000
JKM_PERIODIC_BENEFIT = 12_000_000
JKM_FUNERAL_ALLOWANCE = 10_000_000
JKM_SCHOLARSHIP_MIN_TENURE = 36

# Work accident (JKK)
JKK_DEATH_WAGE_MULTIPLIER = 48
JKK_PERIODIC_BENEFIT = 12_000_000
JKK_FUNERAL_ALLOWANCE = 10_000_000
ILLNESS_FULL_WAGE_MONTHS = 12
ILLNESS_REDUCED_WAGE_RATE = Decimal("0.5")
TRANSPORT_CEILINGS: Dict[str, int] = {
    "land": 5_000_000,
    "sea": 2_000_000,
    "air": 10_000_000,
}
TRANSPORT_CEILING = TRANSPORT_CEILINGS["land"]

# Scholarship, shared by JKK and JKM
SCHOLARSHIP_MAX = 174_000_000
SCHOLARSHIP_MAX_CHILDREN = 2
SCHOLARSHIP_ANNUAL_BY_LEVEL: Dict[str, int] = {
    "kindergarten_primary": 1_500_000,
    "junior_high": 2_000_000,
    "senior_high": 3_000_000,
    "undergraduate": 12_000_000,
}

# Job loss (JKP)
JKP_WAGE_CAP = 5_000_000
JKP_BENEFIT_RATE = Decimal("0.6")
JKP_BENEFIT_MONTHS = 6
JKP_MIN_TENURE = 12

# Pension (JP)
JP_MIN_TENURE = 180
JP_ACCRUAL_RATE = Decimal("0.01")
JP_SURVIVOR_CHILDREN_MAX = 2
JP_SURVIVOR_CHILD_AGE_LIMIT = 23

# Old-age savings (JHT) partial withdrawal
JHT_PARTIAL_MIN_TENURE = 120
JHT_PARTIAL_HOUSING_RATE = Decimal("0.3")
JHT_PARTIAL_OTHER_RATE = Decimal("0.1")

# Additional housing services (MLT)
MLT_MIN_TENURE = 12
MLT_CEILINGS: Dict[str, int] = {
    "down_payment_loan": 150_000_000,
    "mortgage": 500_000_000,
    "renovation_loan": 200_000_000,
}

MAX_TENURE_MONTHS = 600
MAX_ANNUAL_YIELD_PERCENT = 10.0


def _lookup(table: tuple, index: int, name: str):
    if not isinstance(index, int) or isinstance(index, bool) or not 0 <= index < len(table):
        raise ConfigurationGap(f"{name} index {index!r} outside [0, {len(table) - 1}]")
    return table[index]


def risk_class(index: int) -> RiskClass:
    return _lookup(JKK_RISK_CLASSES, index, "risk class")


def migrant_package(index: int) -> MigrantPackage:
    return _lookup(PMI_PACKAGES, index, "migrant package")


def rate_table() -> Dict[str, object]:
    """Serialisable view of the table for selectors in a presentation layer."""
    return {
        "risk_classes": [
            {"index": i, "label": rc.label, "rate": float(rc.rate), "description": rc.description}
            for i, rc in enumerate(JKK_RISK_CLASSES)
        ],
        "migrant_packages": [
            {"index": i, "label": p.label, "price": p.price, "duration_months": p.duration_months}
            for i, p in enumerate(PMI_PACKAGES)
        ],
        "construction_tiers": [
            {
                "label": t.label,
                "upper_bound": t.upper_bound,
                "work_accident_rate": float(t.work_accident_rate),
                "death_rate": float(t.death_rate),
            }
            for t in CONSTRUCTION_TIERS
        ],
        "pension_wage_cap": DEFAULT_JP_MAX_WAGE,
        "job_loss_wage_cap": JKP_WAGE_CAP,
        "migrant_pre_placement_fee": PMI_PRE_PLACEMENT_FEE,
        "migrant_extension_fee": PMI_EXTENSION_FEE,
        "scholarship_schedule": dict(SCHOLARSHIP_ANNUAL_BY_LEVEL),
    }
