from decimal import Decimal
from typing import Any, Dict

from .utils import to_decimal, to_rupiah


def compute_future_value(monthly_contribution: Any, months: int, annual_yield_percent: Any) -> Decimal:
    """Future value of an ordinary annuity compounded monthly."""
    if months <= 0:
        return Decimal(0)
    payment = to_decimal(monthly_contribution)
    r = to_decimal(annual_yield_percent) / 100 / 12
    if r == 0:
        return payment * months
    return payment * (((1 + r) ** months) - 1) / r


def project_balance(monthly_contribution: int, months: int, annual_yield_percent: float) -> Dict[str, Any]:
    # future_value >= principal whenever yield >= 0, so interest is never negative
    months = max(months, 0)
    principal = monthly_contribution * months
    future_value = to_rupiah(compute_future_value(monthly_contribution, months, annual_yield_percent))
    return {
        "monthly_contribution": monthly_contribution,
        "months": months,
        "annual_yield_percent": float(annual_yield_percent),
        "principal": principal,
        "future_value": future_value,
        "interest": future_value - principal,
    }
