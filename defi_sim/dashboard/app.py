"""DeFi Strategy Simulator — Main Streamlit entry point."""

import logging
from pathlib import Path

import streamlit as st

from defi_sim.config import load_env_file, load_settings
from defi_sim.logging_setup import configure_logging

# Load .env file if present (for DEFI_SIM_* settings)
load_env_file(Path(__file__).resolve().parents[2] / ".env")

from defi_sim.dashboard.components.sidebar import render_sidebar
from defi_sim.dashboard.tabs.learning import render_learning
from defi_sim.dashboard.tabs.lp import render_lp
from defi_sim.dashboard.tabs.returns import render_returns
from defi_sim.dashboard.tabs.risk import render_risk
from defi_sim.dashboard.tabs.simulator import render_simulator
from defi_sim.dashboard.tabs.staking import render_staking
from defi_sim.dashboard.tabs.strategy import render_strategy
from defi_sim.data.provider_factory import MarketDataLoad, load_market_data
from defi_sim.learning.links import LearningLinkStore
from defi_sim.position.portfolio import Portfolio
from defi_sim.position.returns import compute_returns
from defi_sim.risk.metrics import compute_risk
from defi_sim.simulation.scenario import ScenarioConfig, run_simulation

logger = logging.getLogger(__name__)


def _market_data(protocol, use_live: bool, timeout: float) -> MarketDataLoad:
    """Load market data once per (protocol, source) selection.

    Fallback results are not cached, so live data is retried on the next rerun.
    """
    cache_key = f"market:{protocol.value}:{use_live}"
    if cache_key in st.session_state:
        return st.session_state[cache_key]
    load = load_market_data(protocol, use_live=use_live, timeout=timeout)
    if not load.fell_back:
        st.session_state[cache_key] = load
    return load


def main() -> None:
    settings = load_settings()
    configure_logging(settings.log_level)

    st.set_page_config(
        page_title="DeFi Strategy Simulator",
        page_icon="📊",
        layout="wide",
    )

    st.title("DeFi Strategy Simulator")
    st.caption("Hypothetical lending portfolios — risk, returns, LP and staking projections")

    if "portfolio" not in st.session_state:
        st.session_state["portfolio"] = Portfolio()
    if "learning_links" not in st.session_state:
        st.session_state["learning_links"] = {}
    portfolio: Portfolio = st.session_state["portfolio"]
    link_store = LearningLinkStore(st.session_state["learning_links"])

    params = render_sidebar(settings)
    with st.spinner("Loading market data..."):
        market = _market_data(params.protocol, params.use_live_data, settings.fetch_timeout)
    if market.fell_back:
        st.sidebar.error("Live data failed; using sample data")

    config = ScenarioConfig(
        timeframe_days=params.timeframe_days,
        price_shock_pct=params.price_shock_pct,
    )

    # Results are recomputed from the current portfolio on every rerun
    positions = portfolio.positions
    risk = returns = simulation = None
    if positions:
        risk = compute_risk(positions, config.price_shock_pct)
        returns = compute_returns(positions, config.timeframe_days)
        simulation = run_simulation(positions, config)
        logger.debug(
            "Recomputed %d positions: HF=%.3f net_return=%.2f",
            len(positions),
            risk.health_factor,
            returns.net_return,
        )

    tabs = st.tabs(
        [
            "Strategy Builder",
            "Simulator",
            "Risk Metrics",
            "Returns",
            "LP Calculator",
            "Staking",
            "Learning",
        ]
    )

    with tabs[0]:
        render_strategy(portfolio, market)

    with tabs[1]:
        render_simulator(simulation, config)

    with tabs[2]:
        render_risk(positions, risk)

    with tabs[3]:
        render_returns(returns, config.timeframe_days)

    with tabs[4]:
        render_lp()

    with tabs[5]:
        render_staking()

    with tabs[6]:
        render_learning(risk, returns, link_store)


if __name__ == "__main__":
    main()
