"""
Core package — schema definitions, configuration, and shared utilities.
No business logic lives here.
"""

from .schema import (
    SUMMARY_COLUMNS,
    TIME_SERIES_COLUMNS,
    ComparisonInput,
    ComparisonResult,
    Country,
    CountryCashflow,
    CountrySummary,
    ProjectionPath,
    Scenario,
    SeriesKey,
    YearPoint,
)
from .config import FireConfig, get_logger, setup_logging
from .utils import require_columns, annualize_income, format_money

__all__ = [
    "SUMMARY_COLUMNS",
    "TIME_SERIES_COLUMNS",
    "ComparisonInput",
    "ComparisonResult",
    "Country",
    "CountryCashflow",
    "CountrySummary",
    "ProjectionPath",
    "Scenario",
    "SeriesKey",
    "YearPoint",
    "FireConfig",
    "get_logger",
    "setup_logging",
    "require_columns",
    "annualize_income",
    "format_money",
]
