"""
Deterministic per-country cash-flow computation (flat rates).

  contribution       = fixed amount (x12 for monthly income) or income x rate
  taxable income     = income - contribution
  income tax         = taxable income x tax rate
  net income         = income - income tax - contribution
  yearly investment  = net income x investment percentage

Nothing is clamped: contributions and taxes larger than the income give a
negative net income and a negative investment, which the simulator then
withdraws from capital every year.
"""

from __future__ import annotations

from core.config import MONTHS_PER_YEAR
from core.schema import Country, CountryCashflow, IncomeType


def social_security_contribution(
    country: Country, annual_income: float, income_type: IncomeType
) -> float:
    """
    Yearly social-security contribution.

    A fixed amount is entered in the same unit as the income, so it is
    annualized when the income itself was entered monthly.
    """
    if country.social_security_mode == "fixed":
        return country.social_security_rate * (
            MONTHS_PER_YEAR if income_type == "monthly" else 1
        )
    return annual_income * (country.social_security_rate / 100)


def compute_country_cashflow(
    country: Country,
    annual_income: float,
    *,
    income_type: IncomeType = "annual",
    investment_percentage: float,
) -> CountryCashflow:
    """Tax and savings breakdown of one year of income in ``country``."""
    contribution = social_security_contribution(country, annual_income, income_type)
    taxable_income = annual_income - contribution
    income_tax = taxable_income * (country.tax_rate / 100)
    net_income = annual_income - income_tax - contribution
    yearly_investment = net_income * (investment_percentage / 100)

    return CountryCashflow(
        country_key=country.key,
        name=country.name,
        social_security_mode=country.social_security_mode,
        social_security_contributions=contribution,
        taxable_income=taxable_income,
        income_tax=income_tax,
        net_income=net_income,
        yearly_investment=yearly_investment,
        monthly_investment=yearly_investment / MONTHS_PER_YEAR,
    )
