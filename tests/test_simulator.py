"""
Tests for compound growth of a single (country, scenario) pair.
"""

import numpy as np
import pytest

from core.schema import Country, Scenario, SeriesKey
from engine.simulator import simulate_compound_growth
from taxes import DividendTax, WealthTax


class TestCapitalGainsRules:

    def test_dividend_tax_on_gain(self):
        rule = DividendTax(rate=19)
        assert rule.tax_due(100000, 5000) == pytest.approx(950)
        assert rule.taxed_gain(100000, 5000) == pytest.approx(4050)

    def test_wealth_tax_on_balance(self):
        rule = WealthTax(rate=0.375)
        assert rule.tax_due(100000, 5000) == pytest.approx(375)
        assert rule.taxed_gain(100000, 5000) == pytest.approx(4625)

    def test_country_selects_rule(self, poland, sweden):
        assert poland.capital_gains_rule == DividendTax(rate=19)
        assert sweden.capital_gains_rule == WealthTax(rate=0.375)

    def test_isk_without_rate_is_zero_rate(self):
        country = Country("NoRate", tax_rate=0, social_security_rate=0, is_isk=True)
        assert country.capital_gains_rule == WealthTax(rate=0.0)


class TestReferenceScenarios:

    def test_first_year_without_starting_capital(self, poland):
        path = simulate_compound_growth(
            poland, Scenario("Expected", 5), 58968,
            starting_investment=0, time_horizon_years=1,
        )
        assert path.yearly_gain[0] == 0
        assert path.final_net_worth == pytest.approx(58968)
        assert path.investment_gains == 0

    def test_isk_one_year(self, sweden):
        path = simulate_compound_growth(
            sweden, Scenario("Expected", 5), 58968,
            starting_investment=100000, time_horizon_years=1,
        )
        assert path.yearly_gain[0] == pytest.approx(5000)
        assert path.capital_tax[0] == pytest.approx(375)
        assert path.taxed_gain[0] == pytest.approx(4625)
        assert path.final_net_worth == pytest.approx(163593)

    def test_two_years_dividend_compounding(self):
        country = Country("D", tax_rate=0, social_security_rate=0, dividend_tax_rate=50)
        path = simulate_compound_growth(
            country, Scenario("S", 10), 100,
            starting_investment=1000, time_horizon_years=2,
        )
        np.testing.assert_allclose(path.yearly_gain, [100, 115])
        np.testing.assert_allclose(path.taxed_gain, [50, 57.5])
        np.testing.assert_allclose(path.net_worth, [1150, 1307.5])
        assert path.investment_gains == pytest.approx(107.5)


class TestInvariants:

    def test_zero_return_is_linear(self, poland):
        path = simulate_compound_growth(
            poland, Scenario("Flat", 0), 1234.5,
            starting_investment=10000, time_horizon_years=15,
        )
        assert path.final_net_worth == pytest.approx(10000 + 1234.5 * 15)
        assert path.investment_gains == 0

    def test_monotonic_with_positive_return(self, poland):
        path = simulate_compound_growth(
            poland, Scenario("Good", 8), 5000,
            starting_investment=0, time_horizon_years=30,
        )
        assert np.all(np.diff(path.net_worth) >= 0)

    def test_wealth_tax_can_exceed_gain(self):
        country = Country("ISK", tax_rate=0, social_security_rate=0, is_isk=True, isk_rate=0.375)
        path = simulate_compound_growth(
            country, Scenario("Low", 0.2), 0,
            starting_investment=100000, time_horizon_years=1,
        )
        assert path.taxed_gain[0] == pytest.approx(-175)
        assert path.final_net_worth == pytest.approx(99825)

    def test_arrays_cover_horizon(self, poland):
        path = simulate_compound_growth(
            poland, Scenario("Expected", 5), 1000,
            starting_investment=0, time_horizon_years=7,
        )
        assert list(path.years) == [1, 2, 3, 4, 5, 6, 7]
        for arr in (path.yearly_gain, path.capital_tax, path.taxed_gain, path.extra_cost, path.net_worth):
            assert arr.shape == (7,)
        assert path.net_worth[-1] == path.final_net_worth
        assert path.key == SeriesKey("Poland", "Expected")


class TestExtraCosts:

    def test_extra_cost_reduces_capital_each_year(self):
        country = Country("C", tax_rate=0, social_security_rate=0)
        path = simulate_compound_growth(
            country, Scenario("Flat", 0), 1000,
            starting_investment=0, time_horizon_years=3, extra_cost=300,
        )
        np.testing.assert_allclose(path.net_worth, [700, 1400, 2100])
        np.testing.assert_allclose(path.extra_cost, [300, 300, 300])

    def test_extra_cost_does_not_touch_taxed_gain(self):
        """Costs come off capital after the gain of that year is taxed."""
        country = Country("C", tax_rate=0, social_security_rate=0, dividend_tax_rate=0)
        path = simulate_compound_growth(
            country, Scenario("S", 10), 0,
            starting_investment=1000, time_horizon_years=2, extra_cost=100,
        )
        # y1: gain 100 -> 1100 - 100 = 1000; y2: gain 100 -> 1000
        np.testing.assert_allclose(path.taxed_gain, [100, 100])
        np.testing.assert_allclose(path.net_worth, [1000, 1000])
        assert path.investment_gains == pytest.approx(200)
