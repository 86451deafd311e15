"""Staking Calculator page — compounding comparison and lockup status."""

import streamlit as st

from defi_sim.dashboard.components.charts import staking_comparison_chart
from defi_sim.dashboard.components.metrics_cards import kpi_row
from defi_sim.protocol.compounding import CompoundingFrequency
from defi_sim.protocol.staking import frequency_table, with_lockup


def render_staking() -> None:
    """Render the staking rewards calculator."""
    st.header("Staking Calculator")

    col1, col2, col3 = st.columns(3)
    with col1:
        principal = st.number_input("Principal", min_value=0.0, value=10_000.0, step=100.0)
        apr = st.number_input("APR (%)", min_value=0.0, value=12.0, step=0.5)
    with col2:
        days = st.number_input("Staking Period (days)", min_value=0, value=365, step=1)
        lockup_days = st.number_input("Lockup Period (days)", min_value=0, value=0, step=1)
    with col3:
        frequencies = list(CompoundingFrequency)
        frequency = st.selectbox(
            "Compounding",
            frequencies,
            index=frequencies.index(CompoundingFrequency.DAILY),
            format_func=lambda f: f.value.capitalize(),
        )

    result = with_lockup(principal, apr, days, lockup_days, frequency)

    kpi_row(
        [
            ("Rewards", f"{result.rewards:,.2f}", None),
            ("Final Balance", f"{result.final_balance:,.2f}", None),
            ("Effective APY", f"{result.effective_apy:.2f}%", None),
        ]
    )

    if result.is_locked:
        st.warning(f"Funds remain locked for another {result.days_until_unlock:g} days.")
    else:
        st.success("Funds are unlocked at the end of the staking period.")

    st.divider()

    st.subheader("Compounding Frequency Comparison")
    table = frequency_table(principal, apr, days)
    st.plotly_chart(staking_comparison_chart(table), use_container_width=True)
    st.table(
        table.style.format(
            {"rewards": "{:,.2f}", "final_balance": "{:,.2f}", "effective_apy": "{:.2f}%"}
        )
    )
