"""
Country Net Worth Comparison — Dashboard
========================================

Compare how net worth grows when the same salary is earned, taxed and
invested under different countries' rules:
  1. Income & savings:   income (annual/monthly), % invested, starting capital
  2. Countries:          editable flat-rate table, fixed or % social security
  3. Scenarios:          return assumptions; one selected for the summary

Run: streamlit run app/streamlit_app.py   (or the ``networth-compare`` script)
"""

from __future__ import annotations

import sys
from pathlib import Path

import altair as alt
import pandas as pd
import streamlit as st

# ---------------------------------------------------------------------------
# Make project root importable
# ---------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from core.config import (
    DEFAULT_CURRENCY,
    DEFAULT_INCOME,
    DEFAULT_INVESTMENT_PERCENTAGE,
    DEFAULT_SELECTED_SCENARIO,
    DEFAULT_STARTING_INVESTMENT,
    DEFAULT_TIME_HORIZON_YEARS,
    SUPPORTED_CURRENCIES,
    FireConfig,
    get_logger,
    setup_logging,
)
from core.schema import ComparisonResult
from core.utils import format_money

from data_prep.loader import countries_to_frame, dataframe_to_countries
from data_prep.input_builder import build_comparison_input
from data_prep.validators import InvalidComparisonInput

from presets import ADDITIONAL_COUNTRIES, DEFAULT_COUNTRIES, DEFAULT_SCENARIOS

from engine.runner import run_comparison, selected_scenario

from report.aggregator import summary_frame, time_series_frame, scenario_bands
from report.decisions import fire_portfolio, generate_comparison_report

logger = get_logger(__name__)


# ---------------------------------------------------------------------------
# Chart helpers
# ---------------------------------------------------------------------------
def _plot_net_worth(result: ComparisonResult, *, height=400):
    long = time_series_frame(result, layout="long")
    if long.empty:
        st.info("No data to plot.")
        return

    bands = scenario_bands(result)
    area = (
        alt.Chart(bands).mark_area(opacity=0.1)
        .encode(
            x=alt.X("year:Q", title="Years"),
            y=alt.Y("low:Q"),
            y2="high:Q",
            color=alt.Color("country:N", title="Country"),
        )
    )
    lines = (
        alt.Chart(long).mark_line(point=True)
        .encode(
            x=alt.X("year:Q", title="Years"),
            y=alt.Y(
                "net_worth:Q",
                title=f"Net Worth ({result.currency_label})",
                axis=alt.Axis(format=",.0f"),
            ),
            color=alt.Color("country:N", title="Country"),
            strokeDash=alt.StrokeDash("scenario:N", title="Scenario"),
            tooltip=["year", "country", "scenario", alt.Tooltip("net_worth:Q", format=",.2f")],
        )
    )
    chart = (area + lines).properties(title="Net Worth Comparison Over Time", height=height)
    st.altair_chart(chart.interactive(), use_container_width=True)


def _display_summary(result: ComparisonResult, fire: FireConfig, selected_key):
    currency = result.currency_label
    table = summary_frame(result)
    money_cols = [c for c in table.columns if c not in ("Country", "Social Security Type")]
    display = table.copy()
    for col in money_cols:
        display[col] = table[col].map(lambda v: format_money(v, currency))
    st.dataframe(display, use_container_width=True, hide_index=True)

    report = generate_comparison_report(result, selected_scenario_key=selected_key, fire=fire)
    if report.best_country is not None:
        st.success(
            f"Most Beneficial Country: **{report.best_country}** ✅ with a final net worth of "
            f"{format_money(report.best_final_net_worth, currency)}"
        )
    for flag in report.flags:
        st.warning(flag)

    with st.expander("Decision Report", expanded=False):
        st.dataframe(report.to_dataframe(), use_container_width=True, hide_index=True)


# ═══════════════════════════════════════════════════════════════════════════
# PAGE
# ═══════════════════════════════════════════════════════════════════════════
def render():
    st.set_page_config(page_title="Tax & Investment Comparison", layout="wide")
    st.title("Tax & Investment Comparison Tool")

    # --- Sidebar: income and investment ---
    with st.sidebar:
        st.header("Income and Investment")
        income = st.number_input("Income", min_value=0.0, value=DEFAULT_INCOME, step=1000.0)
        income_type = st.radio("Income type", ["annual", "monthly"], horizontal=True)
        investment_percentage = st.slider(
            "Investment Percentage (%)", 0.0, 100.0, DEFAULT_INVESTMENT_PERCENTAGE, 1.0
        )
        starting_investment = st.number_input(
            "Starting Investment", min_value=0.0, value=DEFAULT_STARTING_INVESTMENT, step=1000.0
        )
        time_horizon = st.number_input(
            "Time Horizon (years)", min_value=1, value=DEFAULT_TIME_HORIZON_YEARS, step=1
        )
        currency = st.selectbox(
            "Currency", SUPPORTED_CURRENCIES, index=SUPPORTED_CURRENCIES.index(DEFAULT_CURRENCY)
        )

    # --- Countries ---
    st.subheader("Countries")
    add = st.multiselect(
        "Add preset countries", [c.name for c in ADDITIONAL_COUNTRIES], default=[]
    )
    seed = list(DEFAULT_COUNTRIES) + [c for c in ADDITIONAL_COUNTRIES if c.name in add]
    edited = st.data_editor(
        countries_to_frame(seed),
        num_rows="dynamic",
        use_container_width=True,
        column_config={
            "Social Security Type": st.column_config.SelectboxColumn(
                options=["percentage", "fixed"], default="percentage"
            ),
            "ISK": st.column_config.CheckboxColumn(default=False),
        },
        key="countries_editor",
    )
    try:
        countries = dataframe_to_countries(edited)
    except ValueError as exc:
        st.error(str(exc))
        st.stop()

    include_extra_costs = st.toggle("Include fixed yearly extra costs", value=False)
    extra_costs = {}
    if include_extra_costs:
        cols = st.columns(max(len(countries), 1))
        for col, country in zip(cols, countries):
            extra_costs[country.name] = col.number_input(
                f"{country.name} extra costs / year", min_value=0.0, value=0.0, step=500.0
            )

    # --- Scenarios ---
    st.subheader("Scenarios")
    scenario_df = st.data_editor(
        pd.DataFrame(
            [{"Scenario": s.name, "Rate (%)": s.annual_return_rate} for s in DEFAULT_SCENARIOS]
        ),
        num_rows="dynamic",
        use_container_width=True,
        key="scenarios_editor",
    )
    scenario_df = scenario_df.dropna(subset=["Scenario"])
    scenario_names = [str(n).strip() for n in scenario_df["Scenario"] if str(n).strip()]
    default_idx = (
        scenario_names.index(DEFAULT_SELECTED_SCENARIO)
        if DEFAULT_SELECTED_SCENARIO in scenario_names else 0
    )
    selected = st.selectbox("Scenario for summary", scenario_names, index=default_idx) if scenario_names else ""

    payload = {
        "income": income,
        "incomeType": income_type,
        "investmentPercentage": investment_percentage,
        "startingInvestment": starting_investment,
        "timeHorizon": int(time_horizon),
        "countries": [
            {
                "name": c.name,
                "taxRate": c.tax_rate,
                "socialSecurityRate": c.social_security_rate,
                "dividendTaxRate": c.dividend_tax_rate,
                "isISK": c.is_isk,
                "iskRate": c.isk_rate,
                "id": c.id,
            }
            for c in countries
        ],
        "scenarios": [
            {"name": str(row["Scenario"]).strip(), "rate": row["Rate (%)"]}
            for row in scenario_df.to_dict("records")
            if str(row["Scenario"]).strip()
        ],
        "includeExtraCosts": include_extra_costs,
        "extraCosts": extra_costs,
        "selectedScenario": selected,
        "currency": currency,
        "socialSecurityType": {c.name: c.social_security_mode for c in countries},
    }

    with st.sidebar:
        st.header("FIRE Calculator")
        desired_income = st.number_input(
            f"Desired Annual Retirement Income ({currency})",
            min_value=0.0, value=FireConfig().desired_income, step=1000.0,
        )
        swr = st.number_input(
            "Safe Withdrawal Rate (%)",
            min_value=0.1, max_value=100.0, value=FireConfig().safe_withdrawal_rate, step=0.1,
        )
    fire = FireConfig(desired_income=desired_income, safe_withdrawal_rate=swr)

    if st.button("Compare", type="primary"):
        try:
            inputs = build_comparison_input(payload)
        except InvalidComparisonInput as exc:
            st.session_state.pop("comparison", None)
            for field_key, message in exc.result.errors.items():
                st.error(f"{field_key}: {message}")
            return
        chosen = selected_scenario(inputs.scenarios, inputs.selected_scenario_name)
        st.session_state["comparison"] = {
            "result": run_comparison(inputs),
            "selected_key": chosen.key if chosen is not None else None,
        }

    stored = st.session_state.get("comparison")
    if stored is None:
        st.info("Set the inputs above and click 'Compare'.")
        return

    result = stored["result"]
    logger.info("Rendering comparison for %d countries", len(result.countries))

    st.divider()
    _plot_net_worth(result)

    st.subheader("Comparison Summary")
    _display_summary(result, fire, stored["selected_key"])
    st.caption(
        "Required FIRE portfolio: "
        f"{format_money(fire_portfolio(desired_income, swr), result.currency_label)}"
    )


def main():
    """Console entry point: re-launch this file under ``streamlit run``."""
    from streamlit.web import cli as stcli

    sys.argv = ["streamlit", "run", str(Path(__file__).resolve())]
    sys.exit(stcli.main())


if __name__ == "__main__":
    from streamlit import runtime

    if runtime.exists():
        setup_logging()
        render()
    else:
        main()
