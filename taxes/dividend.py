"""
DividendTax: flat tax on the realised yearly gain.
"""

from __future__ import annotations

from dataclasses import dataclass

from .base import CapitalGainsRule


@dataclass(frozen=True)
class DividendTax(CapitalGainsRule):
    """
    Flat percentage of the gain is withheld. A negative gain yields a negative
    tax (the loss is shared with the tax authority), which is what the
    multiplicative form below produces.
    """

    rate: float = 0.0

    def tax_due(self, balance: float, gain: float) -> float:
        return gain * (self.rate / 100)

    def taxed_gain(self, balance: float, gain: float) -> float:
        return gain * (1 - self.rate / 100)
