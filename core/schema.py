"""
Schema definitions for the comparison engine.

Entities are frozen dataclasses created fresh on each engine call. Countries
and scenarios carry an ``id`` that defaults to their display name; all
lookups (extra costs, time-series cells) go through that key.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Literal, Mapping, NamedTuple, Optional, Tuple

import numpy as np

from taxes.base import CapitalGainsRule
from taxes.dividend import DividendTax
from taxes.wealth import WealthTax

SocialSecurityMode = Literal["percentage", "fixed"]
IncomeType = Literal["annual", "monthly"]

SOCIAL_SECURITY_MODES: Tuple[str, ...] = ("percentage", "fixed")
INCOME_TYPES: Tuple[str, ...] = ("annual", "monthly")

# Column order of the per-country summary table (report.aggregator.summary_frame).
SUMMARY_COLUMNS: Tuple[str, ...] = (
    "Country",
    "Net Income",
    "Social Security Contributions",
    "Social Security Type",
    "Taxable Income",
    "Income Tax",
    "Yearly Investment",
    "Monthly Investment",
    "Investment Gains",
    "Final Net Worth",
)

# Editable country rule table (data_prep.loader, dashboard editor).
COUNTRY_TABLE_COLUMNS: Tuple[str, ...] = (
    "Country",
    "Tax Rate (%)",
    "Social Security",
    "Social Security Type",
    "Dividend Tax Rate (%)",
    "ISK",
    "ISK Rate (%)",
)

# Columns of the long-form time series (report.aggregator.time_series_frame).
TIME_SERIES_COLUMNS: Tuple[str, ...] = (
    "year",
    "country",
    "scenario",
    "country_key",
    "scenario_key",
    "series",
    "net_worth",
)


@dataclass(frozen=True)
class Country:
    """Flat tax rules of one country."""

    name: str
    tax_rate: float
    social_security_rate: float
    social_security_mode: SocialSecurityMode = "percentage"
    dividend_tax_rate: float = 0.0
    is_isk: bool = False
    isk_rate: Optional[float] = None
    id: Optional[str] = None

    @property
    def key(self) -> str:
        return self.id if self.id is not None else self.name

    @property
    def capital_gains_rule(self) -> CapitalGainsRule:
        if self.is_isk:
            return WealthTax(rate=self.isk_rate if self.isk_rate is not None else 0.0)
        return DividendTax(rate=self.dividend_tax_rate)


@dataclass(frozen=True)
class Scenario:
    """Named annual rate-of-return assumption (percent)."""

    name: str
    annual_return_rate: float
    id: Optional[str] = None

    @property
    def key(self) -> str:
        return self.id if self.id is not None else self.name


@dataclass(frozen=True)
class ComparisonInput:
    annual_income: float
    investment_percentage: float
    starting_investment: float
    time_horizon_years: int
    countries: Tuple[Country, ...]
    scenarios: Tuple[Scenario, ...]
    include_extra_costs: bool = False
    extra_costs_by_country: Mapping[str, float] = field(default_factory=dict)
    selected_scenario_name: str = ""
    currency_label: str = "EUR"
    income_type: IncomeType = "annual"


class SeriesKey(NamedTuple):
    """Composite (country, scenario) key of one net-worth trajectory."""

    country: str
    scenario: str

    @property
    def label(self) -> str:
        return f"{self.country}-{self.scenario}"


@dataclass(frozen=True)
class YearPoint:
    year: int
    values: Mapping[SeriesKey, float]

    def as_record(self, labels: Optional[Mapping[SeriesKey, str]] = None) -> Dict[str, float]:
        """Flat chart row: ``{"year": y, "<country>-<scenario>": value, ...}``."""
        labels = labels or {}
        record: Dict[str, float] = {"year": self.year}
        for key, value in self.values.items():
            record[labels.get(key, key.label)] = value
        return record


@dataclass(frozen=True)
class CountryCashflow:
    """Yearly cash-flow breakdown of one country (TaxModel output)."""

    country_key: str
    name: str
    social_security_mode: SocialSecurityMode
    social_security_contributions: float
    taxable_income: float
    income_tax: float
    net_income: float
    yearly_investment: float
    monthly_investment: float


@dataclass(frozen=True)
class ProjectionPath:
    """
    Year-by-year trajectory of one (country, scenario) pair.

    Each array has shape (time_horizon_years,); index 0 is year 1.
    """

    key: SeriesKey
    years: np.ndarray
    yearly_gain: np.ndarray
    capital_tax: np.ndarray
    taxed_gain: np.ndarray
    extra_cost: np.ndarray
    net_worth: np.ndarray
    investment_gains: float
    final_net_worth: float


@dataclass(frozen=True)
class CountrySummary:
    name: str
    country_key: str
    net_income: float
    social_security_contributions: float
    social_security_mode: SocialSecurityMode
    taxable_income: float
    income_tax: float
    yearly_investment: float
    monthly_investment: float
    investment_gains: Optional[float] = None
    final_net_worth: Optional[float] = None


@dataclass(frozen=True)
class ComparisonResult:
    countries: Tuple[CountrySummary, ...]
    time_series: Tuple[YearPoint, ...]
    currency_label: str
    income_type: IncomeType
    scenario_names: Mapping[str, str] = field(default_factory=dict)  # scenario key -> name

    @property
    def series_keys(self) -> Tuple[SeriesKey, ...]:
        if not self.time_series:
            return ()
        return tuple(self.time_series[0].values.keys())

    def label_for(self, key: SeriesKey) -> str:
        """Display label ``"<country name>-<scenario name>"`` of one series."""
        countries = {c.country_key: c.name for c in self.countries}
        country = countries.get(key.country, key.country)
        scenario = self.scenario_names.get(key.scenario, key.scenario)
        return f"{country}-{scenario}"

    def series_labels(self) -> Dict[SeriesKey, str]:
        return {key: self.label_for(key) for key in self.series_keys}

    def to_records(self) -> list:
        """
        Flat chart rows keyed by display label.

        Raises ValueError when two series share a label (same names under
        different ids, or names containing ``-`` that join to the same
        string); use the long layout of ``report.time_series_frame`` then.
        """
        labels = self.series_labels()
        seen: Dict[str, SeriesKey] = {}
        for key, label in labels.items():
            if label in seen:
                raise ValueError(
                    f"Series {seen[label]} and {key} share the label {label!r}; "
                    f"flat records would overwrite one of them."
                )
            seen[label] = key
        return [point.as_record(labels) for point in self.time_series]


def freeze_values(values: Dict[SeriesKey, float]) -> Mapping[SeriesKey, float]:
    return MappingProxyType(dict(values))
