"""
Turn a ComparisonResult into display-ready tables.

  summary_frame      one row per country (selected scenario)
  time_series_frame  net worth per year, long or wide layout
  scenario_bands     per country per year, worst/best scenario envelope
"""

from __future__ import annotations

from typing import Dict, Literal

import numpy as np
import pandas as pd

from core.schema import SUMMARY_COLUMNS, TIME_SERIES_COLUMNS, ComparisonResult


def summary_frame(result: ComparisonResult) -> pd.DataFrame:
    """Per-country summary table (SUMMARY_COLUMNS); missing scenario values are NaN."""
    rows = []
    for c in result.countries:
        rows.append({
            "Country": c.name,
            "Net Income": c.net_income,
            "Social Security Contributions": c.social_security_contributions,
            "Social Security Type": "Fixed Amount" if c.social_security_mode == "fixed" else "Percentage",
            "Taxable Income": c.taxable_income,
            "Income Tax": c.income_tax,
            "Yearly Investment": c.yearly_investment,
            "Monthly Investment": c.monthly_investment,
            "Investment Gains": c.investment_gains if c.investment_gains is not None else np.nan,
            "Final Net Worth": c.final_net_worth if c.final_net_worth is not None else np.nan,
        })
    return pd.DataFrame(rows, columns=list(SUMMARY_COLUMNS))


def _display_names(result: ComparisonResult) -> Dict[str, str]:
    return {c.country_key: c.name for c in result.countries}


def time_series_frame(
    result: ComparisonResult,
    *,
    layout: Literal["long", "wide"] = "long",
    scenario_names: Dict[str, str] | None = None,
) -> pd.DataFrame:
    """
    Net-worth trajectories as a DataFrame.

    Parameters
    ----------
    layout : "long" or "wide"
        long: one row per (year, country, scenario) with TIME_SERIES_COLUMNS.
        wide: indexed by year, one column per series label
              ("<country>-<scenario>" by display name), the shape chart
              libraries expect. Raises ValueError when two series share a
              label; the long layout keeps them apart by key.
    scenario_names : dict, optional
        scenario key -> display name; overrides the names on the result.
    """
    if layout not in ("long", "wide"):
        raise ValueError(f"Unknown layout {layout!r}; expected 'long' or 'wide'.")

    if layout == "wide":
        records = result.to_records()
        if not records:
            return pd.DataFrame(columns=["year"]).set_index("year")
        return pd.DataFrame(records).set_index("year")

    countries = _display_names(result)
    scenarios = dict(result.scenario_names)
    scenarios.update(scenario_names or {})
    rows = []
    for point in result.time_series:
        for key, value in point.values.items():
            country = countries.get(key.country, key.country)
            scenario = scenarios.get(key.scenario, key.scenario)
            rows.append({
                "year": point.year,
                "country": country,
                "scenario": scenario,
                "country_key": key.country,
                "scenario_key": key.scenario,
                "series": f"{country}-{scenario}",
                "net_worth": value,
            })
    return pd.DataFrame(rows, columns=list(TIME_SERIES_COLUMNS))


def scenario_bands(result: ComparisonResult) -> pd.DataFrame:
    """
    Envelope of all scenarios per country and year.

    Returns columns: year, country_key, country, low, high, spread. ``low``
    and ``high`` are the min/max net worth across every scenario of that
    country in that year (the worst/best-case band around the lines).
    """
    long = time_series_frame(result, layout="long")
    if long.empty:
        return pd.DataFrame(columns=["year", "country_key", "country", "low", "high", "spread"])

    bands = (
        long.groupby(["year", "country_key", "country"], as_index=False, sort=False)["net_worth"]
        .agg(low="min", high="max")
    )
    bands["spread"] = bands["high"] - bands["low"]
    return bands.sort_values(["year"], kind="stable").reset_index(drop=True)
