from decimal import Decimal
from typing import Any, Dict, List, Sequence

from .rates import ProgressiveTier
from .utils import to_decimal, to_rupiah


def apply_progressive_tiers(value: Any, tiers: Sequence[ProgressiveTier]) -> Dict[str, Any]:
    """Apply each tier's marginal rates to the slice of `value` inside that tier.

    A tier only ever sees the amount above the previous tier's bound, never the
    full value. Returns rounded totals for both rates and a breakdown of the
    tiers that received a non-zero slice.
    """
    amount = to_decimal(value)
    total_work_accident = Decimal(0)
    total_death = Decimal(0)
    breakdown: List[Dict[str, Any]] = []

    lower = Decimal(0)
    for position, tier in enumerate(tiers):
        if tier.upper_bound is None and position != len(tiers) - 1:
            raise ValueError("only the last tier may be unbounded")
        if tier.upper_bound is not None and tier.upper_bound <= lower:
            raise ValueError(f"tier {tier.label!r} is not above the previous bound")

        upper = amount if tier.upper_bound is None else min(amount, Decimal(tier.upper_bound))
        portion = max(upper - lower, Decimal(0))
        if portion > 0:
            work_accident = portion * tier.work_accident_rate
            death = portion * tier.death_rate
            total_work_accident += work_accident
            total_death += death
            breakdown.append(
                {
                    "tier_label": tier.label,
                    "portion": to_rupiah(portion),
                    "work_accident_amount": to_rupiah(work_accident),
                    "death_amount": to_rupiah(death),
                }
            )
        if tier.upper_bound is None:
            break
        lower = Decimal(tier.upper_bound)

    return {
        "total_work_accident": to_rupiah(total_work_accident),
        "total_death": to_rupiah(total_death),
        "breakdown": breakdown,
    }
