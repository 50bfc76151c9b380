"""
Decision support: which country wins, how far each path is from financial
independence, and what looks off in the inputs.

  most_beneficial_country  highest final net worth (selected scenario)
  fire_portfolio           capital that sustains a desired income at a
                           safe withdrawal rate
  years_to_target          first year each trajectory reaches a target
  generate_comparison_report  all of the above plus flags
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

import pandas as pd

from core.config import FireConfig
from core.schema import ComparisonResult, CountrySummary, SeriesKey
from core.utils import format_money


def most_beneficial_country(
    result: ComparisonResult,
    *,
    visible_countries: Optional[Iterable[str]] = None,
) -> Optional[CountrySummary]:
    """
    Country with the highest final net worth under the selected scenario.

    Countries without a final net worth (selected scenario missing) are
    skipped. On a tie the later country wins. Returns None when nothing
    is left to compare.
    """
    visible = set(visible_countries) if visible_countries is not None else None
    best: Optional[CountrySummary] = None
    for country in result.countries:
        if visible is not None and country.name not in visible:
            continue
        if country.final_net_worth is None:
            continue
        if best is None or not (best.final_net_worth > country.final_net_worth):
            best = country
    return best


def fire_portfolio(desired_income: float, safe_withdrawal_rate: float) -> float:
    """Capital needed so that ``safe_withdrawal_rate`` % of it covers ``desired_income``."""
    if not safe_withdrawal_rate > 0:
        raise ValueError("Safe withdrawal rate must be greater than 0.")
    return desired_income / (safe_withdrawal_rate / 100)


def years_to_target(result: ComparisonResult, target: float) -> Dict[SeriesKey, Optional[int]]:
    """First year each (country, scenario) trajectory is >= target; None if never."""
    reached: Dict[SeriesKey, Optional[int]] = {key: None for key in result.series_keys}
    for point in result.time_series:
        for key, value in point.values.items():
            if reached.get(key) is None and value >= target:
                reached[key] = point.year
    return reached


@dataclass
class ComparisonReport:
    """Structured comparison outcome for the summary view."""
    currency: str
    best_country: Optional[str]
    best_final_net_worth: Optional[float]
    fire_target: float
    fire_years: Dict[str, Optional[int]]  # country name -> year, selected scenario
    flags: List[str] = field(default_factory=list)

    def to_dataframe(self) -> pd.DataFrame:
        """Convert to a display-friendly table."""
        rows = [
            {"Metric": "Most Beneficial Country", "Value": self.best_country or "N/A"},
            {
                "Metric": "Final Net Worth",
                "Value": format_money(self.best_final_net_worth, self.currency),
            },
            {"Metric": "Required FIRE Portfolio", "Value": format_money(self.fire_target, self.currency)},
        ]
        for country, year in self.fire_years.items():
            rows.append({
                "Metric": f"FIRE Year: {country}",
                "Value": f"Year {year}" if year is not None else "Not reached",
            })
        if self.flags:
            rows.append({"Metric": "FLAGS", "Value": " | ".join(self.flags)})
        return pd.DataFrame(rows)


def generate_comparison_report(
    result: ComparisonResult,
    *,
    selected_scenario_key: Optional[str] = None,
    fire: FireConfig = FireConfig(),
    visible_countries: Optional[Iterable[str]] = None,
) -> ComparisonReport:
    """
    Summarize a comparison for the decision view.

    Parameters
    ----------
    selected_scenario_key : str, optional
        Scenario whose trajectories feed the FIRE years. Without it no FIRE
        years are reported.
    fire : FireConfig
        Desired retirement income and safe withdrawal rate (percent).
    """
    visible = list(visible_countries) if visible_countries is not None else None
    best = most_beneficial_country(result, visible_countries=visible)
    target = fire_portfolio(fire.desired_income, fire.safe_withdrawal_rate)

    fire_years: Dict[str, Optional[int]] = {}
    if selected_scenario_key is not None:
        reached = years_to_target(result, target)
        for country in result.countries:
            if visible is not None and country.name not in visible:
                continue
            key = SeriesKey(country.country_key, selected_scenario_key)
            if key in reached:
                fire_years[country.name] = reached[key]

    flags = []
    for country in result.countries:
        if country.net_income < 0:
            flags.append(f"NEGATIVE_NET_INCOME: {country.name}")
        if country.yearly_investment < 0:
            flags.append(f"NEGATIVE_INVESTMENT: {country.name} withdraws from capital every year")
        if country.final_net_worth is not None and country.final_net_worth < 0:
            flags.append(f"NEGATIVE_NET_WORTH: {country.name} ends below zero")
    if result.countries and all(c.final_net_worth is None for c in result.countries):
        flags.append("NO_SELECTED_SCENARIO: selected scenario not found")

    return ComparisonReport(
        currency=result.currency_label,
        best_country=best.name if best is not None else None,
        best_final_net_worth=best.final_net_worth if best is not None else None,
        fire_target=target,
        fire_years=fire_years,
        flags=flags,
    )
