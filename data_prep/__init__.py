"""
Input preparation — payload parsing, validation, country tables.
"""

from .loader import (
    load_countries,
    load_country_table,
    dataframe_to_countries,
    countries_to_frame,
)
from .payload import ComparisonPayload, CountryPayload, ScenarioPayload
from .validators import InvalidComparisonInput, ValidationResult, validate_comparison_input
from .input_builder import build_comparison_input, parse_payload

__all__ = [
    "load_countries",
    "load_country_table",
    "dataframe_to_countries",
    "countries_to_frame",
    "ComparisonPayload",
    "CountryPayload",
    "ScenarioPayload",
    "InvalidComparisonInput",
    "ValidationResult",
    "validate_comparison_input",
    "build_comparison_input",
    "parse_payload",
]
