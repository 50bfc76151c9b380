"""
Per-pair trajectory metrics.

Computes, for EACH (country, scenario) trajectory, where it ends, its
lowest and highest point, and how many years it spent below zero (possible
with extra costs or a negative yearly investment).
"""

from __future__ import annotations

import numpy as np
import pandas as pd

from core.schema import ComparisonResult

from .aggregator import time_series_frame


def compute_pair_metrics(result: ComparisonResult) -> pd.DataFrame:
    """
    Returns
    -------
    DataFrame with one row per (country, scenario):
        country, scenario, country_key, scenario_key, final_net_worth,
        min_net_worth, max_net_worth, years_below_zero, first_year_below_zero
    """
    long = time_series_frame(result, layout="long")
    columns = [
        "country", "scenario", "country_key", "scenario_key",
        "final_net_worth", "min_net_worth", "max_net_worth",
        "years_below_zero", "first_year_below_zero",
    ]
    if long.empty:
        return pd.DataFrame(columns=columns)

    results = []
    for (country_key, scenario_key), grp in long.groupby(["country_key", "scenario_key"], sort=False):
        grp = grp.sort_values("year")
        values = grp["net_worth"].to_numpy(dtype=float)
        below = values < 0
        results.append({
            "country": grp["country"].iloc[0],
            "scenario": grp["scenario"].iloc[0],
            "country_key": country_key,
            "scenario_key": scenario_key,
            "final_net_worth": float(values[-1]),
            "min_net_worth": float(np.min(values)),
            "max_net_worth": float(np.max(values)),
            "years_below_zero": int(below.sum()),
            "first_year_below_zero": int(grp["year"].to_numpy()[below][0]) if below.any() else None,
        })

    return pd.DataFrame(results, columns=columns)
