"""Shock engine — apply uniform price shocks and sweep health factor across them."""

from __future__ import annotations

import math
from typing import Iterable, Sequence

import numpy as np
import pandas as pd

from defi_sim.position.models import Position

PRICE_SHOCK_LIMIT_PCT = 50.0


def apply_price_shock(
    positions: Iterable[Position], price_shock_pct: float
) -> list[Position]:
    """Return shocked copies of ``positions``.

    Every asset price is scaled by ``1 + price_shock_pct / 100``. The input
    positions are left untouched.
    """
    return [p.with_price_shock(price_shock_pct) for p in positions]


def partition(positions: Iterable[Position]) -> tuple[list[Position], list[Position]]:
    """Split positions into (deposits, borrows), preserving order."""
    deposits: list[Position] = []
    borrows: list[Position] = []
    for p in positions:
        if p.is_deposit:
            deposits.append(p)
        else:
            borrows.append(p)
    return deposits, borrows


def clamp_price_shock(
    price_shock_pct: object, limit: float = PRICE_SHOCK_LIMIT_PCT
) -> float:
    """Coerce user input to a usable shock percentage in [-limit, limit].

    Non-numeric and NaN inputs become 0.
    """
    try:
        value = float(price_shock_pct)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(value):
        return 0.0
    return max(-limit, min(limit, value))


def shock_sensitivity(
    positions: Sequence[Position],
    shocks: Sequence[float] | np.ndarray | None = None,
) -> pd.DataFrame:
    """Evaluate the risk engine over a grid of price shocks.

    Args:
        positions: Portfolio snapshot.
        shocks: Shock percentages to evaluate. Defaults to -50%..+50% in 1% steps.

    Returns:
        DataFrame with columns: price_shock_pct, health_factor, risk_level
    """
    from defi_sim.risk.metrics import compute_risk

    if shocks is None:
        shocks = np.linspace(-PRICE_SHOCK_LIMIT_PCT, PRICE_SHOCK_LIMIT_PCT, 101)

    rows = []
    for shock in shocks:
        risk = compute_risk(positions, float(shock))
        rows.append(
            {
                "price_shock_pct": float(shock),
                "health_factor": risk.health_factor,
                "risk_level": risk.risk_level.value,
            }
        )
    return pd.DataFrame(rows, columns=["price_shock_pct", "health_factor", "risk_level"])
