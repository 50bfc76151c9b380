"""
Comparison runner: orchestrates the tax model and the compound simulator
over every (country, scenario) pair and assembles the final result.

  TaxModel            once per country         (engine.cashflow)
  Simulator           once per country x scenario (engine.simulator)
  Aggregation         year x country x scenario table -> YearPoint rows

Every scenario of every country lands in the time series, so the display
layer can draw best/worst bands; only the selected scenario feeds the
per-country summary.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from core.config import get_logger
from core.schema import (
    ComparisonInput,
    ComparisonResult,
    CountryCashflow,
    CountrySummary,
    ProjectionPath,
    Scenario,
    SeriesKey,
    YearPoint,
    freeze_values,
)

from .cashflow import compute_country_cashflow
from .simulator import simulate_compound_growth

logger = get_logger(__name__)


def _extra_cost_for(inputs: ComparisonInput, country_key: str) -> float:
    if not inputs.include_extra_costs:
        return 0.0
    return inputs.extra_costs_by_country.get(country_key, 0.0) or 0.0


def _country_cashflows(inputs: ComparisonInput) -> List[CountryCashflow]:
    return [
        compute_country_cashflow(
            country,
            inputs.annual_income,
            income_type=inputs.income_type,
            investment_percentage=inputs.investment_percentage,
        )
        for country in inputs.countries
    ]


def _selected_index(scenarios: Sequence[Scenario], selected_name: str) -> Optional[int]:
    match = None
    for i, scenario in enumerate(scenarios):
        if scenario.name == selected_name:
            match = i
    return match


def selected_scenario(
    scenarios: Sequence[Scenario], selected_name: str
) -> Optional[Scenario]:
    """Scenario named ``selected_name``; the last one wins when names repeat."""
    index = _selected_index(scenarios, selected_name)
    return scenarios[index] if index is not None else None


def _simulate_pairs(
    inputs: ComparisonInput, cashflows: Sequence[CountryCashflow]
) -> Iterator[Tuple[int, int, ProjectionPath]]:
    """Yield (country index, scenario index, path) for every pair."""
    horizon = max(int(inputs.time_horizon_years), 0)
    for ci, (country, cashflow) in enumerate(zip(inputs.countries, cashflows)):
        extra_cost = _extra_cost_for(inputs, country.key)
        for si, scenario in enumerate(inputs.scenarios):
            path = simulate_compound_growth(
                country,
                scenario,
                cashflow.yearly_investment,
                starting_investment=inputs.starting_investment,
                time_horizon_years=horizon,
                extra_cost=extra_cost,
            )
            logger.debug(
                "%s / %s: final net worth %.2f, gains %.2f",
                country.name,
                scenario.name,
                path.final_net_worth,
                path.investment_gains,
            )
            yield ci, si, path


def run_projection_paths(inputs: ComparisonInput) -> Dict[SeriesKey, ProjectionPath]:
    """
    Simulate every (country, scenario) pair and return the detailed paths
    (gain, tax, extra cost, net worth per year), keyed by SeriesKey.
    """
    cashflows = _country_cashflows(inputs)
    return {path.key: path for _, _, path in _simulate_pairs(inputs, cashflows)}


def run_comparison(inputs: ComparisonInput) -> ComparisonResult:
    """
    Run the full comparison.

    Parameters
    ----------
    inputs : ComparisonInput
        Already validated input (see data_prep.build_comparison_input).
        The engine does not re-check ranges.

    Returns
    -------
    ComparisonResult
        countries   : one CountrySummary per input country, input order.
                      investment_gains / final_net_worth come from the
                      scenario named ``selected_scenario_name`` and stay
                      None when no scenario has that name.
        time_series : one YearPoint per year 1..time_horizon_years, each
                      holding the net worth of every (country, scenario).
    """
    horizon = max(int(inputs.time_horizon_years), 0)
    n_countries = len(inputs.countries)
    n_scenarios = len(inputs.scenarios)

    selected_index = _selected_index(inputs.scenarios, inputs.selected_scenario_name)

    # year x country x scenario; each pair writes only its own column
    net_worth = np.zeros((horizon, n_countries, n_scenarios), dtype=float)
    series_keys: List[SeriesKey] = []
    cashflows = _country_cashflows(inputs)
    selected_paths: Dict[int, ProjectionPath] = {}

    for ci, si, path in _simulate_pairs(inputs, cashflows):
        net_worth[:, ci, si] = path.net_worth
        series_keys.append(path.key)
        if si == selected_index:
            selected_paths[ci] = path

    summaries: List[CountrySummary] = []
    for ci, (country, cashflow) in enumerate(zip(inputs.countries, cashflows)):
        path = selected_paths.get(ci)
        summaries.append(
            CountrySummary(
                name=country.name,
                country_key=country.key,
                net_income=cashflow.net_income,
                social_security_contributions=cashflow.social_security_contributions,
                social_security_mode=cashflow.social_security_mode,
                taxable_income=cashflow.taxable_income,
                income_tax=cashflow.income_tax,
                yearly_investment=cashflow.yearly_investment,
                monthly_investment=cashflow.monthly_investment,
                investment_gains=path.investment_gains if path is not None else None,
                final_net_worth=path.final_net_worth if path is not None else None,
            )
        )

    time_series = []
    for t in range(horizon):
        flat = net_worth[t].reshape(-1)
        values = {key: float(flat[i]) for i, key in enumerate(series_keys)}
        time_series.append(YearPoint(year=t + 1, values=freeze_values(values)))

    if selected_index is None:
        logger.warning(
            "Selected scenario %r not among scenarios; summary gains left empty.",
            inputs.selected_scenario_name,
        )
    logger.info(
        "Compared %d countries x %d scenarios over %d years.",
        n_countries,
        n_scenarios,
        horizon,
    )

    return ComparisonResult(
        countries=tuple(summaries),
        time_series=tuple(time_series),
        currency_label=inputs.currency_label,
        income_type=inputs.income_type,
        scenario_names=MappingProxyType({s.key: s.name for s in inputs.scenarios}),
    )
