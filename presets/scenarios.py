"""
Return scenarios: nominal annual rates applied uniformly over the horizon.

"Bad" and "Good" bound the band drawn around each country's trajectory;
"Expected" is the default scenario behind the summary table.
"""

from __future__ import annotations

from typing import Dict, Tuple

from core.schema import Scenario

SCENARIO_PRESETS: Dict[str, Dict[str, object]] = {
    "Bad": {
        "rate": 2.0,
        "description": "Lost decade, returns barely above cash",
    },
    "Expected": {
        "rate": 5.0,
        "description": "Long-run diversified equity/bond mix",
    },
    "Good": {
        "rate": 8.0,
        "description": "Equity-heavy portfolio in a strong market",
    },
}

DEFAULT_SCENARIOS: Tuple[Scenario, ...] = tuple(
    Scenario(name=name, annual_return_rate=float(preset["rate"]))
    for name, preset in SCENARIO_PRESETS.items()
)


def get_scenario(name: str) -> Scenario:
    for scenario in DEFAULT_SCENARIOS:
        if scenario.name == name:
            return scenario
    raise KeyError(f"Unknown scenario preset {name!r}. Known: {list(SCENARIO_PRESETS)}")
