import logging
from dataclasses import asdict
from typing import Any, Dict

from .benefits import evaluate_benefits, housing_facilities
from .contributions import calculate_contribution
from .projection import project_balance
from .schemas import ParticipantInputs, Segment
from .utils import sanitize_inputs

logger = logging.getLogger(__name__)


def _project(inputs: ParticipantInputs, monthly: Dict[str, Any]) -> Dict[str, Any]:
    tenure = inputs.tenure_months
    rate = inputs.annual_yield_percent
    pension = None
    if inputs.segment == Segment.SALARIED:
        pension = project_balance(monthly["pension_monthly"], tenure, rate)
    return {
        "old_age_savings": project_balance(monthly["old_age_savings_monthly"], tenure, rate),
        "pension": pension,
    }


def run_simulation(inputs: ParticipantInputs) -> Dict[str, Any]:
    """Recompute contributions, projections and all benefit scenarios.

    Pure function of `inputs`; nothing is carried between calls.
    Returns:
      {
        "inputs": {...},            # the sanitised record actually used
        "monthly": {...},
        "projections": {"old_age_savings": {...}, "pension": {...} | None},
        "scenarios": {"natural_death": {...}, ..., "contribution_only": {...}},
        "housing_facilities": {...},
      }
    """
    sim = sanitize_inputs(inputs)
    monthly = calculate_contribution(sim)
    projections = _project(sim, monthly)
    scenarios = evaluate_benefits(sim, monthly, projections)

    logger.debug(
        "Simulated %s: worker_pay=%s payer_pay=%s jht_balance=%s",
        Segment(sim.segment).value,
        monthly["worker_pay"],
        monthly["payer_pay"],
        projections["old_age_savings"]["future_value"],
    )

    record = asdict(sim)
    record["segment"] = Segment(sim.segment).value
    return {
        "inputs": record,
        "monthly": monthly,
        "projections": projections,
        "scenarios": scenarios,
        "housing_facilities": housing_facilities(sim),
    }
