"""
Country rule tables <-> Country objects.

Tables come from CSV/XLSX files or from the dashboard's data editor and use
COUNTRY_TABLE_COLUMNS (common header variants are accepted).
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, List, Optional

import pandas as pd

from core.schema import COUNTRY_TABLE_COLUMNS, SOCIAL_SECURITY_MODES, Country
from core.utils import require_columns

_COLUMN_ALIASES: Dict[str, str] = {
    "Name": "Country",
    "name": "Country",
    "country": "Country",
    "Tax Rate": "Tax Rate (%)",
    "taxRate": "Tax Rate (%)",
    "Social Security Rate": "Social Security",
    "socialSecurityRate": "Social Security",
    "Social Security Mode": "Social Security Type",
    "socialSecurityType": "Social Security Type",
    "Dividend Tax Rate": "Dividend Tax Rate (%)",
    "dividendTaxRate": "Dividend Tax Rate (%)",
    "isISK": "ISK",
    "ISK Rate": "ISK Rate (%)",
    "iskRate": "ISK Rate (%)",
    "id": "ID",
}

_REQUIRED_COLUMNS = ("Country", "Tax Rate (%)", "Social Security")

_TRUE_STRINGS = {"true", "yes", "y", "1", "x"}


def canonicalize_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Return a copy with common column name aliases normalized."""
    return df.rename(columns={c: _COLUMN_ALIASES.get(c, c) for c in df.columns}).copy()


def load_country_table(path: str) -> pd.DataFrame:
    """Read a country table from .csv or .xlsx/.xls."""
    suffix = Path(path).suffix.lower()
    if suffix in (".xlsx", ".xls"):
        return pd.read_excel(path)
    return pd.read_csv(path)


def load_countries(path: str) -> List[Country]:
    return dataframe_to_countries(load_country_table(path))


def _as_bool(value) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_STRINGS
    if value is None or pd.isna(value):
        return False
    return bool(value)


def _optional_float(value) -> Optional[float]:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    number = pd.to_numeric(value, errors="coerce")
    return None if pd.isna(number) else float(number)


def dataframe_to_countries(df: pd.DataFrame) -> List[Country]:
    """
    Convert a country table to Country objects.

    Rows with a blank name are skipped. Blank or unparseable rates count as
    0; a blank ISK rate stays None. An unknown social-security type raises
    ValueError.
    """
    df = canonicalize_columns(df)
    require_columns(df, _REQUIRED_COLUMNS)

    countries: List[Country] = []
    for row in df.to_dict("records"):
        raw_name = row.get("Country")
        if raw_name is None or pd.isna(raw_name) or not str(raw_name).strip():
            continue
        name = str(raw_name).strip()

        mode = row.get("Social Security Type")
        mode = "percentage" if mode is None or pd.isna(mode) or not str(mode).strip() else str(mode).strip().lower()
        if mode not in SOCIAL_SECURITY_MODES:
            raise ValueError(
                f"{name}: unknown social security type {mode!r}; expected one of {SOCIAL_SECURITY_MODES}"
            )

        raw_id = row.get("ID")
        country_id = None if raw_id is None or pd.isna(raw_id) or not str(raw_id).strip() else str(raw_id).strip()

        countries.append(
            Country(
                name=name,
                tax_rate=_optional_float(row.get("Tax Rate (%)")) or 0.0,
                social_security_rate=_optional_float(row.get("Social Security")) or 0.0,
                social_security_mode=mode,
                dividend_tax_rate=_optional_float(row.get("Dividend Tax Rate (%)")) or 0.0,
                is_isk=_as_bool(row.get("ISK")),
                isk_rate=_optional_float(row.get("ISK Rate (%)")),
                id=country_id,
            )
        )
    return countries


def countries_to_frame(countries: Iterable[Country]) -> pd.DataFrame:
    """Country objects -> editable table (COUNTRY_TABLE_COLUMNS)."""
    countries = list(countries)
    rows = [
        {
            "Country": c.name,
            "Tax Rate (%)": c.tax_rate,
            "Social Security": c.social_security_rate,
            "Social Security Type": c.social_security_mode,
            "Dividend Tax Rate (%)": c.dividend_tax_rate,
            "ISK": c.is_isk,
            "ISK Rate (%)": c.isk_rate,
        }
        for c in countries
    ]
    df = pd.DataFrame(rows, columns=list(COUNTRY_TABLE_COLUMNS))
    ids = [c.id for c in countries]
    if any(i is not None for i in ids):
        df["ID"] = ids
    return df
