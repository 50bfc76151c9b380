"""
WealthTax: ISK-style yearly levy on the capital base instead of the gain.
"""

from __future__ import annotations

from dataclasses import dataclass

from .base import CapitalGainsRule


@dataclass(frozen=True)
class WealthTax(CapitalGainsRule):
    """
    Tax is ``balance * rate``, independent of the return. At low return rates
    the levy exceeds the gain and the taxed gain turns negative.
    """

    rate: float = 0.0

    def tax_due(self, balance: float, gain: float) -> float:
        return balance * (self.rate / 100)

    def taxed_gain(self, balance: float, gain: float) -> float:
        return gain - self.tax_due(balance, gain)
