"""
Shared fixtures for the comparison test suite.

Run with: python -m pytest tests/ -v
"""

import sys
from pathlib import Path

# Ensure project root is on path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from core.schema import ComparisonInput, Country, Scenario


@pytest.fixture
def poland():
    return Country(name="Poland", tax_rate=19, social_security_rate=9, dividend_tax_rate=19)


@pytest.fixture
def sweden():
    return Country(
        name="Sweden",
        tax_rate=30,
        social_security_rate=7,
        dividend_tax_rate=30,
        is_isk=True,
        isk_rate=0.375,
    )


@pytest.fixture
def scenarios():
    return (
        Scenario(name="Bad", annual_return_rate=2),
        Scenario(name="Expected", annual_return_rate=5),
        Scenario(name="Good", annual_return_rate=8),
    )


@pytest.fixture
def make_input(poland, sweden, scenarios):
    """Factory for ComparisonInput with sensible defaults; override any field."""

    def _make(**overrides):
        fields = dict(
            annual_income=100000,
            investment_percentage=80,
            starting_investment=0,
            time_horizon_years=20,
            countries=(poland, sweden),
            scenarios=scenarios,
            include_extra_costs=False,
            extra_costs_by_country={},
            selected_scenario_name="Expected",
            currency_label="EUR",
            income_type="annual",
        )
        fields.update(overrides)
        return ComparisonInput(**fields)

    return _make


@pytest.fixture
def form_payload():
    return {
        "income": 100000,
        "incomeType": "annual",
        "investmentPercentage": 80,
        "startingInvestment": 0,
        "timeHorizon": 20,
        "countries": [
            {"name": "Poland", "taxRate": 19, "socialSecurityRate": 9, "dividendTaxRate": 19, "isISK": False},
            {
                "name": "Sweden",
                "taxRate": 30,
                "socialSecurityRate": 7,
                "dividendTaxRate": 30,
                "isISK": True,
                "iskRate": 0.375,
            },
        ],
        "scenarios": [
            {"name": "Bad", "rate": 2},
            {"name": "Expected", "rate": 5},
            {"name": "Good", "rate": 8},
        ],
        "includeExtraCosts": False,
        "extraCosts": {},
        "selectedScenario": "Expected",
        "currency": "EUR",
        "socialSecurityType": {},
    }
