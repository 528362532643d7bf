SAMPLE_REQUEST = {
    "segment": "salaried",
    "wage": {
        "base_salary": 4000000,
        "fixed_allowance": 1000000,
    },
    "tenure_months": 60,
    "annual_yield_percent": 5.5,
    "risk_class_index": 0,
    "dependent_count": 2,
    "opt_ins": {"old_age_savings": False},
}

SAMPLE_CONSTRUCTION_REQUEST = {
    "segment": "construction",
    "wage": {
        "contract_value": 600000000,
        "average_wage": 3000000,
    },
    "tenure_months": 24,
    "annual_yield_percent": 5.5,
    "dependent_count": 1,
}

SAMPLE_MIGRANT_REQUEST = {
    "segment": "migrant",
    "wage": {
        "reported_income": 3000000,
        "package_index": 1,
    },
    "tenure_months": 18,
    "annual_yield_percent": 5.5,
    "opt_ins": {"old_age_savings": True},
}
