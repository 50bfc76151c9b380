"""
Report outputs — display tables, trajectory metrics, and decision support.
"""

from .aggregator import summary_frame, time_series_frame, scenario_bands
from .metrics import compute_pair_metrics
from .decisions import (
    ComparisonReport,
    fire_portfolio,
    generate_comparison_report,
    most_beneficial_country,
    years_to_target,
)

__all__ = [
    "summary_frame",
    "time_series_frame",
    "scenario_bands",
    "compute_pair_metrics",
    "ComparisonReport",
    "fire_portfolio",
    "generate_comparison_report",
    "most_beneficial_country",
    "years_to_target",
]
