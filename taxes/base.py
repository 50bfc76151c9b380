"""
Base class for capital-gains rules.
"""

from __future__ import annotations


class CapitalGainsRule:
    """
    Interface for taxing one year of investment growth.

    ``balance`` is the capital at the start of the year, ``gain`` the nominal
    return earned on it during the year. Both are in the comparison currency.
    """

    rate: float

    def tax_due(self, balance: float, gain: float) -> float:
        raise NotImplementedError

    def taxed_gain(self, balance: float, gain: float) -> float:
        raise NotImplementedError
