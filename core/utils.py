from __future__ import annotations

from typing import Iterable, Optional

import pandas as pd

from .config import MONTHS_PER_YEAR


def require_columns(df: pd.DataFrame, cols: Iterable[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}")


def annualize_income(income: float, income_type: str) -> float:
    """Income as entered on the form -> annual figure the engine works in."""
    if income_type == "monthly":
        return income * MONTHS_PER_YEAR
    return income


def format_money(value: Optional[float], currency: str, decimals: int = 2) -> str:
    """Currency-prefixed amount; ``-`` for missing values."""
    if value is None or pd.isna(value):
        return "-"
    return f"{currency}{value:,.{decimals}f}"
