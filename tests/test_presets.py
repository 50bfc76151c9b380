"""
Preset sanity checks: every preset passes validation on its own.
"""

import pytest

from core.schema import ComparisonInput
from data_prep.validators import validate_comparison_input
from presets import (
    COUNTRY_PRESETS,
    DEFAULT_COUNTRIES,
    DEFAULT_SCENARIOS,
    get_country,
    get_scenario,
)


class TestPresets:

    def test_defaults(self):
        assert [c.name for c in DEFAULT_COUNTRIES] == ["Poland", "Sweden"]
        assert [(s.name, s.annual_return_rate) for s in DEFAULT_SCENARIOS] == [
            ("Bad", 2.0), ("Expected", 5.0), ("Good", 8.0),
        ]

    def test_all_presets_validate(self):
        inputs = ComparisonInput(
            annual_income=100000,
            investment_percentage=80,
            starting_investment=0,
            time_horizon_years=20,
            countries=tuple(COUNTRY_PRESETS.values()),
            scenarios=DEFAULT_SCENARIOS,
            selected_scenario_name="Expected",
        )
        assert validate_comparison_input(inputs).is_valid

    def test_lookup(self):
        assert get_country("Sweden").is_isk
        assert get_scenario("Good").annual_return_rate == 8.0

    def test_unknown_preset(self):
        with pytest.raises(KeyError):
            get_country("Atlantis")
        with pytest.raises(KeyError):
            get_scenario("Great")
