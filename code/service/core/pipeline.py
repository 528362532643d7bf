import logging

from calculator.schemas import ParticipantInputs
from calculator.simulator import run_simulation

from .models import SimulationRequest, SimulationResponse

logger = logging.getLogger(__name__)


def build_inputs(payload: SimulationRequest) -> ParticipantInputs:
    wage = payload.wage
    return ParticipantInputs(
        segment=payload.segment,
        base_salary=wage.base_salary,
        fixed_allowance=wage.fixed_allowance,
        reported_income=wage.reported_income,
        contract_value=wage.contract_value,
        average_wage=wage.average_wage,
        package_index=wage.package_index,
        tenure_months=payload.tenure_months,
        annual_yield_percent=payload.annual_yield_percent,
        risk_class_index=payload.risk_class_index,
        dependent_count=payload.dependent_count,
        old_age_savings_opt_in=payload.opt_ins.old_age_savings,
        pension_cap_override=payload.pension_cap_override,
    )


def run_analysis(payload: SimulationRequest) -> SimulationResponse:
    inputs = build_inputs(payload)
    result = run_simulation(inputs)
    logger.info(
        "Simulation for %s over %s months: total monthly worker pay %s",
        result["inputs"]["segment"],
        result["inputs"]["tenure_months"],
        result["monthly"]["worker_pay"],
    )
    return SimulationResponse(**result)
