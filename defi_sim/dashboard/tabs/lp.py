"""LP Calculator page — impermanent loss versus fees."""

import streamlit as st

from defi_sim.dashboard.components.charts import impermanent_loss_chart
from defi_sim.dashboard.components.metrics_cards import kpi_row
from defi_sim.protocol.compounding import LP_FREQUENCIES
from defi_sim.protocol.lp import impermanent_loss_curve, simulate_lp_position


def render_lp() -> None:
    """Render the liquidity pool calculator."""
    st.header("Liquidity Pool Calculator")
    st.caption("50/50 constant-product pool: compare providing liquidity with holding.")

    col1, col2, col3 = st.columns(3)
    with col1:
        initial_price = st.number_input("Initial Price ($)", min_value=0.0, value=100.0, step=1.0)
        final_price = st.number_input("Final Price ($)", min_value=0.0, value=150.0, step=1.0)
    with col2:
        deposit = st.number_input("Deposit Amount ($)", min_value=0.0, value=1000.0, step=100.0)
        fee_apr = st.number_input("Fee APR (%)", min_value=0.0, value=25.0, step=1.0)
    with col3:
        days = st.number_input("Timeframe (days)", min_value=0, value=30, step=1)
        frequency = st.selectbox(
            "Fee Compounding",
            LP_FREQUENCIES,
            format_func=lambda f: f.value.capitalize(),
        )

    outcome = simulate_lp_position(initial_price, final_price, deposit, fee_apr, days, frequency)

    kpi_row(
        [
            ("Price Change", f"{outcome.price_change_percent:+.2f}%", None),
            ("Impermanent Loss", f"{outcome.impermanent_loss_pct:.2f}%", None),
            ("Fees Earned", f"${outcome.fees:,.2f}", None),
            ("Net vs Hold", f"${outcome.net.net_difference:,.2f}", f"{outcome.net.net_difference_percent:.2f}%"),
        ]
    )

    kpi_row(
        [
            ("LP Value", f"${outcome.valuation.lp_value:,.2f}", None),
            ("Hold Value", f"${outcome.valuation.hold_value:,.2f}", None),
            ("IL (USD)", f"${outcome.valuation.impermanent_loss:,.2f}", None),
        ]
    )

    if outcome.net.is_profitable:
        st.success("Fees offset impermanent loss: providing liquidity beats holding.")
    else:
        st.error(
            f"Impermanent loss exceeds fees. You would lose "
            f"${abs(outcome.net.net_difference):,.2f} compared to holding."
        )

    st.plotly_chart(
        impermanent_loss_chart(impermanent_loss_curve(), outcome.price_ratio),
        use_container_width=True,
    )
