"""
Compound growth of one (country, scenario) pair.

Per year, in order:
  1. gain        = capital x return rate
  2. taxed gain  = country's capital-gains rule (dividend tax on the gain,
                   or ISK wealth tax on the capital)
  3. capital    += yearly investment + taxed gain
  4. capital    -= extra living cost (if any)

Extra costs come off the capital after the gain is taxed; they never reduce
the gain itself.
"""

from __future__ import annotations

import numpy as np

from core.schema import Country, ProjectionPath, Scenario, SeriesKey


def simulate_compound_growth(
    country: Country,
    scenario: Scenario,
    yearly_investment: float,
    *,
    starting_investment: float,
    time_horizon_years: int,
    extra_cost: float = 0.0,
) -> ProjectionPath:
    """
    Run ``time_horizon_years`` years of compounding.

    Parameters
    ----------
    country : Country
        Supplies the capital-gains rule (dividend tax or ISK wealth tax).
    scenario : Scenario
        Annual return rate in percent, constant over the horizon.
    yearly_investment : float
        New contribution added every year (TaxModel output; may be negative).
    starting_investment : float
        Capital at the start of year 1.
    time_horizon_years : int
        Number of simulated years.
    extra_cost : float
        Fixed yearly amount withdrawn from capital; 0 disables it.

    Returns
    -------
    ProjectionPath with per-year arrays and the final totals.
    """
    horizon = max(int(time_horizon_years), 0)
    rule = country.capital_gains_rule
    rate = scenario.annual_return_rate

    yearly_gain = np.zeros(horizon, dtype=float)
    capital_tax = np.zeros(horizon, dtype=float)
    taxed_gain = np.zeros(horizon, dtype=float)
    extra_costs = np.zeros(horizon, dtype=float)
    net_worth = np.zeros(horizon, dtype=float)

    total_investment = starting_investment
    total_gains = 0.0

    for t in range(horizon):
        gain = total_investment * (rate / 100)
        tax = rule.tax_due(total_investment, gain)
        after_tax = rule.taxed_gain(total_investment, gain)

        total_gains += after_tax
        total_investment += yearly_investment + after_tax

        if extra_cost:
            total_investment -= extra_cost
            extra_costs[t] = extra_cost

        yearly_gain[t] = gain
        capital_tax[t] = tax
        taxed_gain[t] = after_tax
        net_worth[t] = total_investment

    return ProjectionPath(
        key=SeriesKey(country.key, scenario.key),
        years=np.arange(1, horizon + 1),
        yearly_gain=yearly_gain,
        capital_tax=capital_tax,
        taxed_gain=taxed_gain,
        extra_cost=extra_costs,
        net_worth=net_worth,
        investment_gains=float(total_gains),
        final_net_worth=float(total_investment),
    )
