"""Returns page — interest decomposition and annualized rates."""

import pandas as pd
import streamlit as st

from defi_sim.dashboard.components.charts import interest_breakdown_chart
from defi_sim.dashboard.components.metrics_cards import kpi_row
from defi_sim.position.returns import ReturnResult


def render_returns(returns: ReturnResult | None, timeframe_days: int) -> None:
    """Render the returns breakdown page."""
    st.header("Returns Breakdown")

    if returns is None:
        st.info("Add positions in the Strategy Builder to calculate returns.")
        return

    kpi_row(
        [
            ("Deposit Interest", f"${returns.total_deposit_interest:,.2f}", None),
            ("Borrow Cost", f"-${returns.total_borrow_interest:,.2f}", None),
            ("Net Return", f"${returns.net_return:,.2f}", None),
            ("APR / APY", f"{returns.apr:.2f}% / {returns.apy:.2f}%", None),
        ]
    )

    st.plotly_chart(interest_breakdown_chart(returns), use_container_width=True)

    rows = [
        {"Leg": "Deposit", "Asset": item.asset, "Interest": f"${item.interest:,.2f}"}
        for item in returns.deposit_breakdown
    ] + [
        {"Leg": "Borrow", "Asset": item.asset, "Interest": f"-${item.interest:,.2f}"}
        for item in returns.borrow_breakdown
    ]
    if rows:
        st.table(pd.DataFrame(rows))

    st.caption(
        f"Returns use fixed interest rates over {timeframe_days} days with simple accrual. "
        "APY assumes the implied daily rate compounds for a year. Price shocks are ignored."
    )
