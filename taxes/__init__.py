"""
Capital-gains rules, i.e. how one year of investment growth is taxed.
"""

from .base import CapitalGainsRule
from .dividend import DividendTax
from .wealth import WealthTax

__all__ = [
    "CapitalGainsRule",
    "DividendTax",
    "WealthTax",
]
