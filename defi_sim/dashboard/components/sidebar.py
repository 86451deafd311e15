"""Sidebar parameter controls."""

from dataclasses import dataclass

import streamlit as st

from defi_sim.config import Settings
from defi_sim.data.interfaces import Protocol
from defi_sim.stress.scenarios import PRESET_SCENARIOS
from defi_sim.stress.shock_engine import PRICE_SHOCK_LIMIT_PCT, clamp_price_shock

_CUSTOM = "Custom"


@dataclass
class SidebarParams:
    """User-controlled parameters from the sidebar."""

    protocol: Protocol
    use_live_data: bool
    timeframe_days: int
    price_shock_pct: float


def render_sidebar(settings: Settings) -> SidebarParams:
    """Render sidebar controls and return selected parameters."""
    st.sidebar.header("Market Data")

    protocols = list(Protocol)
    protocol = st.sidebar.selectbox(
        "Protocol",
        protocols,
        index=protocols.index(settings.protocol),
        format_func=lambda p: p.label,
        key="protocol",
    )
    use_live = st.sidebar.toggle(
        "Live Data",
        value=settings.use_live_data,
        key="use_live_data",
        help="Sample data is recommended; live data falls back to samples on any error.",
    )

    st.sidebar.header("Scenario")

    preset_names = [_CUSTOM] + [s.name for s in PRESET_SCENARIOS]
    preset_name = st.sidebar.selectbox("Preset Scenario", preset_names, index=0)
    preset = next((s for s in PRESET_SCENARIOS if s.name == preset_name), None)

    # A preset fixes both sliders
    if preset is None:
        default_timeframe = min(max(settings.timeframe_days, 1), 365)
        default_shock = clamp_price_shock(settings.price_shock_pct)
    else:
        default_timeframe = preset.timeframe_days
        default_shock = preset.price_shock_pct
        st.sidebar.caption(preset.description)

    timeframe = st.sidebar.slider(
        "Timeframe (days)",
        min_value=1,
        max_value=365,
        value=default_timeframe,
        step=1,
        disabled=preset is not None,
    )

    shock = st.sidebar.slider(
        "Price Shock (%)",
        min_value=-PRICE_SHOCK_LIMIT_PCT,
        max_value=PRICE_SHOCK_LIMIT_PCT,
        value=float(default_shock),
        step=1.0,
        disabled=preset is not None,
    )

    if preset is not None:
        timeframe = preset.timeframe_days
        shock = preset.price_shock_pct

    st.sidebar.caption(
        "Prices move once at day 0 by the shock percentage; interest then accrues "
        "linearly (simplified calculations)."
    )

    return SidebarParams(
        protocol=protocol,
        use_live_data=use_live,
        timeframe_days=int(timeframe),
        price_shock_pct=clamp_price_shock(shock),
    )
