"""
Tests for country tables (data_prep.loader).
"""

import pandas as pd
import pytest

from core.schema import COUNTRY_TABLE_COLUMNS, Country
from data_prep.loader import (
    canonicalize_columns,
    countries_to_frame,
    dataframe_to_countries,
    load_countries,
)
from presets import DEFAULT_COUNTRIES


class TestDataFrameToCountries:

    def test_round_trip_presets(self):
        df = countries_to_frame(DEFAULT_COUNTRIES)
        assert list(df.columns) == list(COUNTRY_TABLE_COLUMNS)
        assert tuple(dataframe_to_countries(df)) == DEFAULT_COUNTRIES

    def test_blank_rows_skipped(self):
        df = pd.DataFrame({
            "Country": ["Poland", None, "  "],
            "Tax Rate (%)": [19, 10, 10],
            "Social Security": [9, 5, 5],
        })
        countries = dataframe_to_countries(df)
        assert [c.name for c in countries] == ["Poland"]
        assert countries[0].social_security_mode == "percentage"
        assert countries[0].is_isk is False
        assert countries[0].isk_rate is None

    def test_missing_required_column(self):
        df = pd.DataFrame({"Country": ["Poland"], "Tax Rate (%)": [19]})
        with pytest.raises(ValueError, match="Missing required columns"):
            dataframe_to_countries(df)

    def test_unknown_social_security_type(self):
        df = pd.DataFrame({
            "Country": ["X"],
            "Tax Rate (%)": [10],
            "Social Security": [5],
            "Social Security Type": ["weekly"],
        })
        with pytest.raises(ValueError, match="unknown social security type"):
            dataframe_to_countries(df)

    def test_isk_flag_from_strings(self):
        df = pd.DataFrame({
            "Country": ["A", "B"],
            "Tax Rate (%)": [30, 30],
            "Social Security": [7, 7],
            "ISK": ["yes", "no"],
            "ISK Rate (%)": ["0.375", ""],
        })
        a, b = dataframe_to_countries(df)
        assert a.is_isk is True
        assert a.isk_rate == pytest.approx(0.375)
        assert b.is_isk is False
        assert b.isk_rate is None

    def test_id_column(self):
        countries = (
            Country("Poland", tax_rate=19, social_security_rate=9, id="pl-2024"),
            Country("Poland", tax_rate=12, social_security_rate=9, id="pl-2025"),
        )
        df = countries_to_frame(countries)
        assert list(df["ID"]) == ["pl-2024", "pl-2025"]
        assert [c.key for c in dataframe_to_countries(df)] == ["pl-2024", "pl-2025"]

    def test_no_id_column_without_ids(self):
        assert "ID" not in countries_to_frame(DEFAULT_COUNTRIES).columns


class TestAliases:

    def test_camel_case_headers(self):
        df = pd.DataFrame({
            "name": ["Germany"],
            "taxRate": [45],
            "socialSecurityRate": [20],
            "dividendTaxRate": [25],
        })
        assert "Country" in canonicalize_columns(df).columns
        (germany,) = dataframe_to_countries(df)
        assert germany.tax_rate == 45
        assert germany.dividend_tax_rate == 25


class TestLoadCountries:

    def test_csv(self, tmp_path):
        path = tmp_path / "countries.csv"
        path.write_text(
            "Country,Tax Rate (%),Social Security,Social Security Type,Dividend Tax Rate (%),ISK,ISK Rate (%)\n"
            "Poland,19,9,percentage,19,False,\n"
            "Fixedland,20,6000,fixed,15,False,\n"
        )
        poland, fixed = load_countries(str(path))
        assert poland == Country("Poland", tax_rate=19, social_security_rate=9, dividend_tax_rate=19)
        assert fixed.social_security_mode == "fixed"
        assert fixed.social_security_rate == 6000
