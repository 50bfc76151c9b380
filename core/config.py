"""
Comparison defaults and logging configuration.

Form defaults mirror what the dashboard pre-fills. Nothing here is read from
the environment.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Tuple

MONTHS_PER_YEAR = 12

# ─── Form defaults ───────────────────────────────────────────────────────────

DEFAULT_INCOME = 100_000.0
DEFAULT_INCOME_TYPE = "annual"
DEFAULT_INVESTMENT_PERCENTAGE = 80.0
DEFAULT_STARTING_INVESTMENT = 0.0
DEFAULT_TIME_HORIZON_YEARS = 20
DEFAULT_CURRENCY = "EUR"
SUPPORTED_CURRENCIES: Tuple[str, ...] = ("USD", "EUR", "GBP", "SEK", "PLN")
DEFAULT_SELECTED_SCENARIO = "Expected"


@dataclass(frozen=True)
class FireConfig:
    """Inputs of the FIRE portfolio calculator."""

    desired_income: float = 40_000.0
    safe_withdrawal_rate: float = 4.0  # percent


# ─── Logging ─────────────────────────────────────────────────────────────────

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level=logging.INFO):
    """Configure logging for the application."""
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )


def get_logger(name: str) -> logging.Logger:
    """Get a named logger instance."""
    return logging.getLogger(name)
