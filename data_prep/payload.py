"""
Pydantic models for the raw comparison form payload.

Field aliases follow the dashboard/JSON form (camelCase, ``isISK``). These
models only coerce types and fill defaults; range checks live in
``data_prep.validators``.
"""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from core.config import (
    DEFAULT_CURRENCY,
    DEFAULT_INCOME_TYPE,
    DEFAULT_INVESTMENT_PERCENTAGE,
    DEFAULT_SELECTED_SCENARIO,
    DEFAULT_STARTING_INVESTMENT,
    DEFAULT_TIME_HORIZON_YEARS,
)


def _blank_to_zero(value: Any) -> Any:
    # Number inputs submit "" when cleared.
    if value is None or (isinstance(value, str) and not value.strip()):
        return 0.0
    return value


class PayloadModel(BaseModel):
    """Frozen, camelCase-aliased base; unknown form fields are ignored."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )


class CountryPayload(PayloadModel):
    name: str
    tax_rate: float = 0.0
    social_security_rate: float = 0.0
    dividend_tax_rate: float = 0.0
    is_isk: bool = Field(default=False, alias="isISK")
    isk_rate: Optional[float] = None
    id: Optional[str] = None

    @field_validator("name")
    @classmethod
    def _strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Country name must not be empty")
        return value

    @field_validator("tax_rate", "social_security_rate", "dividend_tax_rate", mode="before")
    @classmethod
    def _coerce_blank_rates(cls, value: Any) -> Any:
        return _blank_to_zero(value)

    @field_validator("isk_rate", mode="before")
    @classmethod
    def _coerce_blank_isk_rate(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value


class ScenarioPayload(PayloadModel):
    name: str
    rate: float
    id: Optional[str] = None

    @field_validator("name")
    @classmethod
    def _strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Scenario name must not be empty")
        return value

    @field_validator("rate", mode="before")
    @classmethod
    def _coerce_blank_rate(cls, value: Any) -> Any:
        return _blank_to_zero(value)


class ComparisonPayload(PayloadModel):
    """
    Form submission. Either ``income`` (in the unit given by ``incomeType``)
    or an already annualized ``annualIncome`` must be present.
    """

    income: Optional[float] = None
    annual_income: Optional[float] = None
    income_type: Literal["annual", "monthly"] = DEFAULT_INCOME_TYPE
    investment_percentage: float = DEFAULT_INVESTMENT_PERCENTAGE
    starting_investment: float = DEFAULT_STARTING_INVESTMENT
    time_horizon: int = DEFAULT_TIME_HORIZON_YEARS
    countries: List[CountryPayload] = Field(default_factory=list)
    scenarios: List[ScenarioPayload] = Field(default_factory=list)
    include_extra_costs: bool = False
    extra_costs: Dict[str, float] = Field(default_factory=dict)
    selected_scenario: str = DEFAULT_SELECTED_SCENARIO
    currency: str = DEFAULT_CURRENCY
    social_security_type: Dict[str, Literal["fixed", "percentage"]] = Field(
        default_factory=dict
    )
    visible_countries: Optional[List[str]] = None
    visible_scenarios: Optional[List[str]] = None

    @field_validator("investment_percentage", "starting_investment", mode="before")
    @classmethod
    def _coerce_blank_amounts(cls, value: Any) -> Any:
        return _blank_to_zero(value)

    @field_validator("extra_costs", mode="before")
    @classmethod
    def _coerce_blank_costs(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return {k: _blank_to_zero(v) for k, v in value.items()}
        return value

    @model_validator(mode="after")
    def _require_income(self) -> "ComparisonPayload":
        if self.income is None and self.annual_income is None:
            raise ValueError("Either income or annualIncome is required")
        return self
