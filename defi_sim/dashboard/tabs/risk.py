"""Risk Metrics page — health factor gauge and shock sensitivity."""

from typing import Sequence

import streamlit as st

from defi_sim.dashboard.components.charts import health_factor_gauge, shock_sensitivity_chart
from defi_sim.dashboard.components.metrics_cards import format_ratio
from defi_sim.position.models import Position
from defi_sim.risk.metrics import RiskLevel, RiskResult
from defi_sim.stress.shock_engine import shock_sensitivity


def render_risk(positions: Sequence[Position], risk: RiskResult | None) -> None:
    """Render the risk metrics page."""
    st.header("Risk Metrics")

    if risk is None:
        st.info("Add positions in the Strategy Builder to calculate risk metrics.")
        return

    col1, col2 = st.columns([1, 1])

    with col1:
        st.plotly_chart(health_factor_gauge(risk.health_factor), use_container_width=True)

    with col2:
        st.subheader("Position Safety")
        if risk.risk_level is RiskLevel.LIQUIDATION:
            st.error(f"Risk Level: **{risk.risk_level.value}**")
        elif risk.risk_level is RiskLevel.AT_RISK:
            st.warning(f"Risk Level: **{risk.risk_level.value}**")
        else:
            st.success(f"Risk Level: **{risk.risk_level.value}**")

        st.metric("Health Factor", format_ratio(risk.health_factor))
        st.metric("Collateral Ratio", format_ratio(risk.collateral_ratio))
        st.metric("Avg Liquidation Threshold", f"{risk.liquidation_threshold*100:.1f}%")
        st.metric("Liquidation Price Index", f"{risk.liquidation_price:.3f}")

    if risk.price_sensitivity > 0:
        st.caption(
            f"A 10% price drop would reduce the health factor by about "
            f"{risk.price_sensitivity * 10:.2f}."
        )

    st.divider()

    st.subheader("Price Shock Sensitivity")
    df = shock_sensitivity(positions)
    st.plotly_chart(shock_sensitivity_chart(df), use_container_width=True)
