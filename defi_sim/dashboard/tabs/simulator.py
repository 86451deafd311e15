"""Scenario Simulator page — day-by-day projection under a price shock."""

import streamlit as st

from defi_sim.dashboard.components.charts import health_factor_path_chart, portfolio_value_chart
from defi_sim.dashboard.components.metrics_cards import format_ratio, kpi_row
from defi_sim.simulation.results import SimulationResult
from defi_sim.simulation.scenario import ScenarioConfig


def render_simulator(result: SimulationResult | None, config: ScenarioConfig) -> None:
    """Render the scenario simulator page."""
    st.header("Scenario Simulator")

    if result is None:
        st.info("Add positions in the Strategy Builder to run a simulation.")
        return

    st.caption(
        f"{config.timeframe_days}-day projection with a {config.price_shock_pct:+.0f}% price shock"
    )

    totals = result.final_totals
    kpi_row(
        [
            ("Final Deposits", f"${totals.total_deposits:,.2f}", None),
            ("Final Borrows", f"${totals.total_borrows:,.2f}", None),
            ("Net Value", f"${totals.net_value:,.2f}", None),
            ("Health Factor", format_ratio(totals.health_factor), None),
        ]
    )

    df = result.to_frame()

    st.plotly_chart(portfolio_value_chart(df), use_container_width=True)
    st.plotly_chart(health_factor_path_chart(df), use_container_width=True)

    with st.expander("Daily Steps", expanded=False):
        st.dataframe(df.drop(columns=["timestamp"]), use_container_width=True)
