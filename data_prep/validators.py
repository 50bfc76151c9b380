"""
Range validation for comparison inputs before they enter the engine.

Catches problems early:
- Non-positive income or horizon
- Percentages outside 0..100
- Negative amounts where only amounts >= 0 make sense
- Duplicate country / scenario identifiers (they would overwrite each
  other in the time series)

Errors are keyed by form field so the dashboard can show them next to the
input that caused them (``income``, ``Poland-taxRate``, ``Bad-rate``...).
"""

from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from core.schema import ComparisonInput


@dataclass
class ValidationResult:
    """Collects all validation warnings/errors for one comparison input."""
    errors: Dict[str, str] = field(default_factory=dict)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def summary(self) -> str:
        lines = []
        if self.errors:
            lines.append(f"ERRORS ({len(self.errors)}):")
            for key, message in self.errors.items():
                lines.append(f"  ✗ {key}: {message}")
        if self.warnings:
            lines.append(f"WARNINGS ({len(self.warnings)}):")
            for w in self.warnings:
                lines.append(f"  ⚠ {w}")
        if not lines:
            lines.append("✓ All checks passed.")
        return "\n".join(lines)


class InvalidComparisonInput(ValueError):
    """Raised by the input factory when validation finds blocking errors."""

    def __init__(self, result: ValidationResult):
        self.result = result
        super().__init__(result.summary())


def _between(value: float, low: float, high: float) -> bool:
    # NaN fails every comparison, so it is rejected here too.
    return low <= value <= high


def _duplicates(keys: Iterable[str]) -> List[str]:
    return sorted(k for k, n in Counter(keys).items() if n > 1)


def validate_comparison_input(inputs: ComparisonInput) -> ValidationResult:
    """
    Run all validation checks on a comparison input.
    Returns a ValidationResult with errors (blocking) and warnings (informational).
    """
    result = ValidationResult()
    errors = result.errors

    # --- Global inputs ---
    if not (inputs.annual_income > 0) or math.isinf(inputs.annual_income):
        errors["income"] = "Income must be greater than 0"
    if not _between(inputs.investment_percentage, 0, 100):
        errors["investmentPercentage"] = "Investment percentage must be between 0 and 100"
    if not (inputs.starting_investment >= 0) or math.isinf(inputs.starting_investment):
        errors["startingInvestment"] = "Starting investment must be 0 or greater"
    if inputs.time_horizon_years < 1:
        errors["timeHorizon"] = "Time horizon must be greater than 0"

    # --- Countries ---
    if not inputs.countries:
        errors["countries"] = "At least one country is required"
    dup_countries = _duplicates(c.key for c in inputs.countries)
    if dup_countries:
        errors["countries"] = f"Duplicate country identifiers: {dup_countries}"

    for country in inputs.countries:
        name = country.name
        if not _between(country.tax_rate, 0, 100):
            errors[f"{name}-taxRate"] = "Tax rate must be between 0 and 100"

        if country.social_security_mode == "percentage":
            if not _between(country.social_security_rate, 0, 100):
                errors[f"{name}-socialSecurityRate"] = (
                    "Social security rate must be between 0 and 100%"
                )
        elif not (country.social_security_rate >= 0):
            errors[f"{name}-socialSecurityRate"] = "Social security amount must be 0 or greater"

        if not _between(country.dividend_tax_rate, 0, 100):
            errors[f"{name}-dividendTaxRate"] = "Dividend tax rate must be between 0 and 100"

        if country.is_isk:
            if country.isk_rate is None:
                result.warnings.append(f"{name}: ISK enabled without a rate; using 0%.")
            elif not _between(country.isk_rate, 0, 100):
                errors[f"{name}-iskRate"] = "ISK rate must be between 0 and 100"

    # --- Scenarios ---
    if not inputs.scenarios:
        errors["scenarios"] = "At least one scenario is required"
    dup_scenarios = _duplicates(s.key for s in inputs.scenarios)
    if dup_scenarios:
        errors["scenarios"] = f"Duplicate scenario identifiers: {dup_scenarios}"

    for scenario in inputs.scenarios:
        if not _between(scenario.annual_return_rate, 0, 100):
            errors[f"{scenario.name}-rate"] = "Scenario rate must be between 0 and 100"

    if inputs.scenarios and inputs.selected_scenario_name not in {
        s.name for s in inputs.scenarios
    }:
        result.warnings.append(
            f"Selected scenario {inputs.selected_scenario_name!r} is not among the "
            f"scenarios; summary gains and net worth will be empty."
        )

    # --- Extra costs ---
    if inputs.include_extra_costs:
        known = {c.key for c in inputs.countries}
        names = {c.key: c.name for c in inputs.countries}
        for key, amount in inputs.extra_costs_by_country.items():
            if key not in known:
                result.warnings.append(f"Extra costs given for unknown country {key!r}; ignored.")
            elif not (amount >= 0):
                errors[f"{names[key]}-extraCosts"] = "Extra costs must be 0 or greater"

    return result
