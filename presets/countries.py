"""
Flat-rate approximations of a few national regimes.

These are headline top rates, not bracket schedules: good enough to compare
orders of magnitude, not to file a return. Users edit them in the dashboard.
"""

from __future__ import annotations

from typing import Dict, Tuple

from core.schema import Country

# ----- Pre-selected on first load -----

DEFAULT_COUNTRIES: Tuple[Country, ...] = (
    Country(
        name="Poland",
        tax_rate=19.0,
        social_security_rate=9.0,
        dividend_tax_rate=19.0,
    ),
    Country(
        name="Sweden",
        tax_rate=30.0,
        social_security_rate=7.0,
        dividend_tax_rate=30.0,
        is_isk=True,
        isk_rate=0.375,  # ISK schablonskatt, ~0.375% of account value
    ),
)

# ----- Available to add -----

ADDITIONAL_COUNTRIES: Tuple[Country, ...] = (
    Country(name="Germany", tax_rate=45.0, social_security_rate=20.0, dividend_tax_rate=25.0),
    Country(name="USA", tax_rate=37.0, social_security_rate=7.65, dividend_tax_rate=20.0),
    Country(name="UK", tax_rate=45.0, social_security_rate=12.0, dividend_tax_rate=38.1),
)

COUNTRY_PRESETS: Dict[str, Country] = {
    c.name: c for c in DEFAULT_COUNTRIES + ADDITIONAL_COUNTRIES
}


def get_country(name: str) -> Country:
    """Look up a preset by name. Raises KeyError listing the known presets."""
    try:
        return COUNTRY_PRESETS[name]
    except KeyError:
        raise KeyError(
            f"Unknown country preset {name!r}. Known: {sorted(COUNTRY_PRESETS)}"
        ) from None
