"""
Build a validated ComparisonInput from a form payload.

This is the only supported way for outer layers to construct engine input:
  1. parse + coerce the payload (pydantic)
  2. keep only the visible countries / scenarios
  3. normalize monthly income to annual
  4. attach each country's social-security mode and extra costs by key
  5. validate ranges; raise InvalidComparisonInput on any error
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Union

from pydantic import ValidationError

from core.config import get_logger
from core.schema import ComparisonInput, Country, Scenario
from core.utils import annualize_income

from .payload import ComparisonPayload, CountryPayload
from .validators import InvalidComparisonInput, ValidationResult, validate_comparison_input

logger = get_logger(__name__)


def parse_payload(payload: Union[ComparisonPayload, Mapping[str, Any]]) -> ComparisonPayload:
    """Coerce a raw mapping into ComparisonPayload; type errors become InvalidComparisonInput."""
    if isinstance(payload, ComparisonPayload):
        return payload
    try:
        return ComparisonPayload.model_validate(dict(payload))
    except ValidationError as exc:
        result = ValidationResult()
        for err in exc.errors():
            key = ".".join(str(part) for part in err["loc"]) or "payload"
            result.errors[key] = err["msg"]
        raise InvalidComparisonInput(result) from exc


def _to_country(item: CountryPayload, modes: Mapping[str, str]) -> Country:
    mode = modes.get(item.name, "percentage")
    return Country(
        name=item.name,
        tax_rate=item.tax_rate,
        social_security_rate=item.social_security_rate,
        social_security_mode=mode,
        dividend_tax_rate=item.dividend_tax_rate,
        is_isk=item.is_isk,
        isk_rate=item.isk_rate,
        id=item.id,
    )


def _extra_costs_by_key(
    countries: List[Country], extra_costs: Mapping[str, float]
) -> Dict[str, float]:
    """Re-key form extra costs (entered per id or per name) by country key."""
    out: Dict[str, float] = {}
    for country in countries:
        if country.key in extra_costs:
            out[country.key] = extra_costs[country.key]
        elif country.name in extra_costs:
            out[country.key] = extra_costs[country.name]
    return out


def _unknown_cost_keys(
    items: List[CountryPayload], extra_costs: Mapping[str, float]
) -> List[str]:
    """Extra-cost entries naming no submitted country (hidden ones included)."""
    known = {c.name for c in items} | {c.id for c in items if c.id is not None}
    return [key for key in extra_costs if key not in known]


def build_comparison_input(
    payload: Union[ComparisonPayload, Mapping[str, Any]],
) -> ComparisonInput:
    """
    Parse, normalize and validate a form payload.

    Raises
    ------
    InvalidComparisonInput
        When the payload has type errors or any range check fails. The
        attached ``result`` holds field-keyed messages.
    """
    form = parse_payload(payload)

    country_items = form.countries
    if form.visible_countries is not None:
        visible = set(form.visible_countries)
        country_items = [c for c in country_items if c.name in visible]

    scenario_items = form.scenarios
    if form.visible_scenarios is not None:
        visible = set(form.visible_scenarios)
        scenario_items = [s for s in scenario_items if s.name in visible]

    if form.annual_income is not None:
        annual_income = form.annual_income
    else:
        annual_income = annualize_income(form.income, form.income_type)

    countries = [_to_country(c, form.social_security_type) for c in country_items]
    scenarios = [Scenario(name=s.name, annual_return_rate=s.rate, id=s.id) for s in scenario_items]

    inputs = ComparisonInput(
        annual_income=annual_income,
        investment_percentage=form.investment_percentage,
        starting_investment=form.starting_investment,
        time_horizon_years=form.time_horizon,
        countries=tuple(countries),
        scenarios=tuple(scenarios),
        include_extra_costs=form.include_extra_costs,
        extra_costs_by_country=_extra_costs_by_key(countries, form.extra_costs),
        selected_scenario_name=form.selected_scenario,
        currency_label=form.currency,
        income_type=form.income_type,
    )

    result = validate_comparison_input(inputs)
    if form.include_extra_costs:
        for key in _unknown_cost_keys(form.countries, form.extra_costs):
            result.warnings.append(f"Extra costs given for unknown country {key!r}; ignored.")
    if not result.is_valid:
        raise InvalidComparisonInput(result)
    for warning in result.warnings:
        logger.warning(warning)

    return inputs
