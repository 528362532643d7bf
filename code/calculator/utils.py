import logging
import math
from dataclasses import replace
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Optional

from .rates import MAX_ANNUAL_YIELD_PERCENT, MAX_TENURE_MONTHS, SCHOLARSHIP_MAX_CHILDREN
from .schemas import ParticipantInputs

logger = logging.getLogger(__name__)

_MONEY_FIELDS = ("base_salary", "fixed_allowance", "reported_income", "contract_value", "average_wage")


def clamp(value, lo, hi):
    return max(lo, min(value, hi))


def to_decimal(value: Any) -> Decimal:
    """Coerce to a finite, non-negative Decimal; anything else becomes zero."""
    if value is None or isinstance(value, bool):
        return Decimal(0)
    try:
        number = Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError):
        return Decimal(0)
    if not number.is_finite() or number < 0:
        return Decimal(0)
    return number


def to_rupiah(value: Decimal) -> int:
    return int(Decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def percent(rate: Decimal) -> str:
    return f"{(rate * 100).normalize():f}%"


def _whole(value: Any) -> int:
    return to_rupiah(to_decimal(value))


def _finite_float(value: Any) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    return number if math.isfinite(number) else 0.0


def sanitize_inputs(inputs: ParticipantInputs) -> ParticipantInputs:
    """Clamp every numeric input into its valid range.

    This is a what-if estimator, so bad numbers are replaced rather than
    rejected. Each substitution is logged. Table indices are left alone:
    an out-of-range index is a caller bug and fails at lookup time.
    """
    changes = {}
    for name in _MONEY_FIELDS:
        raw = getattr(inputs, name)
        cleaned = _whole(raw)
        if raw != cleaned:
            changes[name] = cleaned

    tenure = clamp(_whole(inputs.tenure_months), 0, MAX_TENURE_MONTHS)
    if tenure != inputs.tenure_months:
        changes["tenure_months"] = tenure

    yield_percent = clamp(_finite_float(inputs.annual_yield_percent), 0.0, MAX_ANNUAL_YIELD_PERCENT)
    if yield_percent != inputs.annual_yield_percent:
        changes["annual_yield_percent"] = yield_percent

    dependents = clamp(_whole(inputs.dependent_count), 0, SCHOLARSHIP_MAX_CHILDREN)
    if dependents != inputs.dependent_count:
        changes["dependent_count"] = dependents

    cap: Optional[int] = inputs.pension_cap_override
    if cap is not None:
        cleaned_cap = _whole(cap)
        # a non-positive cap cannot be a real override
        cleaned_cap = cleaned_cap if cleaned_cap > 0 else None
        if cleaned_cap != cap:
            changes["pension_cap_override"] = cleaned_cap

    if not changes:
        return inputs
    for name, value in changes.items():
        logger.warning("Clamped %s from %r to %r", name, getattr(inputs, name), value)
    return replace(inputs, **changes)
