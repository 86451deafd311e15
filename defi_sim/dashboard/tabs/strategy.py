"""Strategy Builder page — market data, add/remove positions."""

import pandas as pd
import streamlit as st

from defi_sim.data.provider_factory import MarketDataLoad
from defi_sim.position.models import PositionType
from defi_sim.position.portfolio import Portfolio


def render_strategy(portfolio: Portfolio, market: MarketDataLoad) -> None:
    """Render the strategy builder page."""
    st.header("Build Your DeFi Strategy")
    st.caption(
        "Create simulated deposit and borrow positions. Adjust parameters in the "
        "sidebar to see how scenarios affect the portfolio."
    )

    if market.fell_back:
        st.error(f"**Live Data Error:** {market.fallback_notice}")
    source = "Live" if market.data.is_live else "Sample"
    st.info(f"{market.data.protocol.label} markets: **{source} Data** ({len(market.data.assets)} assets)")

    # Add position form
    st.subheader("Add Position")
    assets = list(market.data.assets)
    with st.form("add_position", clear_on_submit=True):
        col1, col2, col3 = st.columns(3)
        with col1:
            position_type = st.selectbox(
                "Position Type",
                list(PositionType),
                format_func=lambda t: "Deposit (Supply)" if t is PositionType.DEPOSIT else "Borrow",
            )
        with col2:
            asset = st.selectbox(
                "Asset",
                assets,
                format_func=lambda a: f"{a.symbol} — ${a.price_usd:,.2f}",
            )
        with col3:
            amount = st.number_input("Amount", min_value=0.0, value=0.0, step=1.0, format="%.4f")
        submitted = st.form_submit_button("Add Position")

    if asset is not None:
        st.caption(
            f"{asset.name}: rate {asset.interest_rate*100:.2f}% · "
            f"liquidation threshold {asset.liquidation_threshold*100:.0f}%"
        )

    if submitted:
        try:
            portfolio.add(asset, position_type, amount)
        except ValueError:
            st.warning("Enter an amount greater than zero.")
        else:
            # Results above were computed before this position existed
            st.rerun()

    st.divider()

    # Current positions
    st.subheader("Current Positions")
    if not len(portfolio):
        st.caption("No positions yet.")
        return

    rows = [
        {
            "ID": p.id,
            "Type": p.position_type.value.capitalize(),
            "Asset": p.asset.symbol,
            "Amount": f"{p.amount:,.4f}",
            "Value": f"${p.value:,.2f}",
            "Rate": f"{p.asset.interest_rate*100:.2f}%",
        }
        for p in portfolio
    ]
    st.table(pd.DataFrame(rows))

    col1, col2 = st.columns([3, 1])
    with col1:
        to_remove = st.selectbox("Remove position", [p.id for p in portfolio])
        if st.button("Remove"):
            portfolio.remove(to_remove)
            st.rerun()
    with col2:
        if st.button("Clear All"):
            portfolio.clear()
            st.rerun()
