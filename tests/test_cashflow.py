"""
Tests for the per-country tax / cash-flow model (engine.cashflow).
"""

import pytest

from core.schema import Country
from engine.cashflow import compute_country_cashflow, social_security_contribution


class TestPercentageSocialSecurity:
    """Reference case: 100k annual income, Poland-like flat rates."""

    def test_reference_breakdown(self, poland):
        cf = compute_country_cashflow(
            poland, 100000, income_type="annual", investment_percentage=80
        )
        assert cf.social_security_contributions == pytest.approx(9000)
        assert cf.taxable_income == pytest.approx(91000)
        assert cf.income_tax == pytest.approx(17290)
        assert cf.net_income == pytest.approx(73710)
        assert cf.yearly_investment == pytest.approx(58968)
        assert cf.monthly_investment == pytest.approx(58968 / 12)

    def test_carries_country_identity(self, poland):
        cf = compute_country_cashflow(poland, 100000, investment_percentage=80)
        assert cf.name == "Poland"
        assert cf.country_key == "Poland"
        assert cf.social_security_mode == "percentage"

    def test_percentage_mode_ignores_income_type(self, poland):
        annual = social_security_contribution(poland, 120000, "annual")
        monthly = social_security_contribution(poland, 120000, "monthly")
        assert annual == monthly == pytest.approx(10800)

    def test_zero_investment_percentage(self, poland):
        cf = compute_country_cashflow(poland, 100000, investment_percentage=0)
        assert cf.yearly_investment == 0
        assert cf.monthly_investment == 0


class TestFixedSocialSecurity:

    def test_fixed_amount_annual(self):
        country = Country("Fixed", tax_rate=20, social_security_rate=5000, social_security_mode="fixed")
        cf = compute_country_cashflow(country, 60000, income_type="annual", investment_percentage=50)
        assert cf.social_security_contributions == 5000
        assert cf.taxable_income == pytest.approx(55000)
        assert cf.income_tax == pytest.approx(11000)
        assert cf.net_income == pytest.approx(44000)

    def test_fixed_amount_scaled_for_monthly_income(self):
        """A fixed amount entered alongside monthly income is a monthly amount."""
        country = Country("Fixed", tax_rate=0, social_security_rate=400, social_security_mode="fixed")
        cf = compute_country_cashflow(country, 60000, income_type="monthly", investment_percentage=100)
        assert cf.social_security_contributions == 4800
        assert cf.net_income == pytest.approx(55200)

    def test_fixed_matches_equivalent_percentage(self):
        """Fixed X with annual income equals a percentage giving the same X."""
        fixed = Country("A", tax_rate=25, social_security_rate=9000, social_security_mode="fixed",
                        dividend_tax_rate=19)
        pct = Country("A", tax_rate=25, social_security_rate=9, social_security_mode="percentage",
                      dividend_tax_rate=19)
        a = compute_country_cashflow(fixed, 100000, income_type="annual", investment_percentage=70)
        b = compute_country_cashflow(pct, 100000, income_type="annual", investment_percentage=70)
        assert a.social_security_contributions == pytest.approx(b.social_security_contributions)
        assert a.net_income == pytest.approx(b.net_income)
        assert a.yearly_investment == pytest.approx(b.yearly_investment)


class TestNoClamping:

    def test_negative_net_income_propagates(self):
        """Contribution larger than income is allowed and flows through."""
        country = Country("Odd", tax_rate=10, social_security_rate=50000, social_security_mode="fixed")
        cf = compute_country_cashflow(country, 30000, investment_percentage=50)
        assert cf.taxable_income == pytest.approx(-20000)
        assert cf.income_tax == pytest.approx(-2000)
        assert cf.net_income == pytest.approx(-18000)
        assert cf.yearly_investment == pytest.approx(-9000)
