"""Reusable Plotly chart components."""

import pandas as pd
import plotly.graph_objects as go

from defi_sim.position.returns import ReturnResult
from defi_sim.risk.metrics import NO_DEBT_SENTINEL


def health_factor_gauge(hf: float) -> go.Figure:
    """Create a health factor gauge chart."""
    # Clamp display value; the no-debt sentinel renders as a full gauge
    display_hf = min(hf, 3.0) if hf < NO_DEBT_SENTINEL else 3.0

    if hf >= 1.5:
        color = "#22c55e"  # green
    elif hf >= 1.0:
        color = "#f59e0b"  # amber
    else:
        color = "#ef4444"  # red

    fig = go.Figure(
        go.Indicator(
            mode="gauge+number",
            value=display_hf,
            number={"suffix": "", "font": {"size": 40}, "valueformat": ".2f"},
            title={"text": "Health Factor", "font": {"size": 16}},
            domain={"x": [0, 1], "y": [0.15, 1]},
            gauge={
                "axis": {"range": [0, 3], "tickwidth": 1},
                "bar": {"color": color},
                "steps": [
                    {"range": [0, 1], "color": "rgba(239,68,68,0.2)"},
                    {"range": [1, 1.5], "color": "rgba(245,158,11,0.2)"},
                    {"range": [1.5, 3], "color": "rgba(34,197,94,0.2)"},
                ],
                "threshold": {
                    "line": {"color": "white", "width": 2},
                    "thickness": 0.75,
                    "value": 1.0,
                },
            },
        )
    )

    fig.update_layout(
        template="plotly_dark",
        height=350,
        margin=dict(t=40, b=0, l=30, r=30),
    )

    return fig


def shock_sensitivity_chart(df: pd.DataFrame) -> go.Figure:
    """Health factor across price shocks.

    Args:
        df: DataFrame with columns: price_shock_pct, health_factor.
    """
    fig = go.Figure()

    fig.add_trace(
        go.Scatter(
            x=df["price_shock_pct"],
            y=df["health_factor"].clip(upper=5.0),
            mode="lines",
            name="Health Factor",
            line=dict(color="#3b82f6", width=2),
            hovertemplate="Shock: %{x:.0f}%<br>HF: %{y:.3f}<extra></extra>",
        )
    )

    fig.add_hline(
        y=1.0,
        line_dash="dash",
        line_color="#ef4444",
        annotation_text="Liquidation (HF=1.0)",
    )
    fig.add_hline(
        y=1.5,
        line_dash="dot",
        line_color="#f59e0b",
        annotation_text="At Risk (HF=1.5)",
    )

    fig.update_layout(
        title="Health Factor vs Price Shock",
        xaxis_title="Price Shock (%)",
        yaxis_title="Health Factor",
        template="plotly_dark",
        height=450,
    )

    return fig


def portfolio_value_chart(df: pd.DataFrame) -> go.Figure:
    """Deposit, borrow and net value over the projection.

    Args:
        df: Output of SimulationResult.to_frame().
    """
    fig = go.Figure()

    for column, label, color in (
        ("deposit_value", "Deposits", "#22c55e"),
        ("borrow_value", "Borrows", "#ef4444"),
        ("net_value", "Net Value", "#3b82f6"),
    ):
        fig.add_trace(
            go.Scatter(
                x=df["day"],
                y=df[column],
                mode="lines",
                name=label,
                line=dict(color=color, width=2),
                hovertemplate="Day %{x}<br>" + label + ": $%{y:,.2f}<extra></extra>",
            )
        )

    fig.update_layout(
        title="Portfolio Value Over Time",
        xaxis_title="Day",
        yaxis_title="Value (USD)",
        hovermode="x unified",
        template="plotly_dark",
        height=450,
    )

    return fig


def health_factor_path_chart(df: pd.DataFrame) -> go.Figure:
    """Health factor by day; no-debt portfolios have nothing to plot."""
    fig = go.Figure()

    fig.add_trace(
        go.Scatter(
            x=df["day"],
            y=df["health_factor"].where(df["health_factor"] < NO_DEBT_SENTINEL),
            mode="lines",
            name="Health Factor",
            line=dict(color="#a855f7", width=2),
            hovertemplate="Day %{x}<br>HF: %{y:.3f}<extra></extra>",
        )
    )

    fig.add_hline(y=1.0, line_dash="dash", line_color="#ef4444")

    fig.update_layout(
        title="Health Factor Over Time",
        xaxis_title="Day",
        yaxis_title="Health Factor",
        template="plotly_dark",
        height=350,
    )

    return fig


def interest_breakdown_chart(returns: ReturnResult) -> go.Figure:
    """Per-position interest earned (deposits) and paid (borrows)."""
    fig = go.Figure()

    fig.add_trace(
        go.Bar(
            x=[item.asset for item in returns.deposit_breakdown],
            y=[item.interest for item in returns.deposit_breakdown],
            name="Deposit Interest",
            marker_color="#22c55e",
        )
    )
    fig.add_trace(
        go.Bar(
            x=[item.asset for item in returns.borrow_breakdown],
            y=[-item.interest for item in returns.borrow_breakdown],
            name="Borrow Cost",
            marker_color="#ef4444",
        )
    )

    fig.update_layout(
        title="Interest by Position",
        yaxis_title="USD",
        barmode="relative",
        template="plotly_dark",
        height=400,
    )

    return fig


def impermanent_loss_chart(df: pd.DataFrame, current_ratio: float | None = None) -> go.Figure:
    """Impermanent loss curve.

    Args:
        df: DataFrame with columns: price_ratio, impermanent_loss_pct.
        current_ratio: If provided, marks the scenario's price ratio.
    """
    fig = go.Figure()

    fig.add_trace(
        go.Scatter(
            x=df["price_ratio"],
            y=df["impermanent_loss_pct"],
            mode="lines",
            name="Impermanent Loss",
            line=dict(color="#f97316", width=2),
            hovertemplate="Ratio: %{x:.2f}x<br>IL: %{y:.2f}%<extra></extra>",
        )
    )

    if current_ratio is not None and current_ratio > 0:
        fig.add_vline(
            x=current_ratio,
            line_dash="dash",
            line_color="#6b7280",
            annotation_text=f"Current: {current_ratio:.2f}x",
        )

    fig.update_layout(
        title="Impermanent Loss vs Price Ratio",
        xaxis_title="Final / Initial Price",
        yaxis_title="Impermanent Loss (%)",
        template="plotly_dark",
        height=400,
    )

    return fig


def staking_comparison_chart(df: pd.DataFrame) -> go.Figure:
    """Rewards by compounding frequency.

    Args:
        df: DataFrame with columns: frequency, rewards.
    """
    fig = go.Figure(
        go.Bar(
            x=df["frequency"],
            y=df["rewards"],
            marker_color="#3b82f6",
            hovertemplate="%{x}<br>Rewards: %{y:,.2f}<extra></extra>",
        )
    )

    fig.update_layout(
        title="Rewards by Compounding Frequency",
        xaxis_title="Frequency",
        yaxis_title="Rewards",
        template="plotly_dark",
        height=400,
    )

    return fig
