"""
Projection engine — per-country cash flow, compound growth per scenario,
and the runner that assembles the comparison.
"""

from .cashflow import compute_country_cashflow, social_security_contribution
from .simulator import simulate_compound_growth
from .runner import run_comparison, run_projection_paths, selected_scenario

__all__ = [
    "compute_country_cashflow",
    "social_security_contribution",
    "simulate_compound_growth",
    "run_comparison",
    "run_projection_paths",
    "selected_scenario",
]
