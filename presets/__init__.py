"""
Preset country rule sets and return scenarios offered by the dashboard.
"""

from .countries import ADDITIONAL_COUNTRIES, COUNTRY_PRESETS, DEFAULT_COUNTRIES, get_country
from .scenarios import DEFAULT_SCENARIOS, SCENARIO_PRESETS, get_scenario

__all__ = [
    "ADDITIONAL_COUNTRIES",
    "COUNTRY_PRESETS",
    "DEFAULT_COUNTRIES",
    "get_country",
    "DEFAULT_SCENARIOS",
    "SCENARIO_PRESETS",
    "get_scenario",
]
