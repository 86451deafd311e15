"""Constant-product (50/50) liquidity pool math.

Closed-form impermanent loss, LP-vs-hold valuation and fee accrual. All
functions are pure and return neutral zeros for invalid inputs.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np
import pandas as pd

from defi_sim.protocol.compounding import PERIODS_PER_YEAR, CompoundingFrequency, compound_growth

DAYS_PER_YEAR = 365


@dataclass(frozen=True)
class LpVsHold:
    """LP position value against simply holding the seeded assets (USD)."""

    lp_value: float
    hold_value: float
    impermanent_loss: float  # lp_value - hold_value
    impermanent_loss_percent: float


@dataclass(frozen=True)
class NetOutcome:
    """LP outcome after fees, relative to holding."""

    net_difference: float
    net_difference_percent: float
    is_profitable: bool


@dataclass(frozen=True)
class LpOutcome:
    """Combined calculator output for one LP scenario."""

    token_amount: float
    price_ratio: float
    price_change_percent: float
    impermanent_loss_pct: float
    valuation: LpVsHold
    fees: float
    net: NetOutcome


def impermanent_loss(price_ratio: float) -> float:
    """Impermanent loss in percent for a 50/50 constant-product pool.

    IL = 2·sqrt(r) / (1 + r) - 1, where r = final price / initial price.
    Always <= 0. Returns 0 for non-positive or non-finite ratios.
    """
    if not math.isfinite(price_ratio) or price_ratio <= 0:
        return 0.0
    return (2 * math.sqrt(price_ratio) / (1 + price_ratio) - 1) * 100


def lp_vs_hold(
    initial_price: float,
    final_price: float,
    initial_token_amount: float,
) -> LpVsHold:
    """Value an LP position against holding.

    The pool is seeded with ``initial_token_amount`` of the risk asset plus
    an equal USD value of a numeraire, so k = x0·y0 and the LP value after
    the move is 2·sqrt(k·final_price).

    Args:
        initial_price: Risk-asset price at deposit.
        final_price: Risk-asset price at valuation.
        initial_token_amount: Risk-asset units deposited.

    Returns:
        LpVsHold; all zeros when any input is non-positive.
    """
    if initial_price <= 0 or final_price <= 0 or initial_token_amount <= 0:
        return LpVsHold(0.0, 0.0, 0.0, 0.0)

    numeraire_reserve = initial_token_amount * initial_price
    k = initial_token_amount * numeraire_reserve
    lp_value = 2 * math.sqrt(k * final_price)
    hold_value = initial_token_amount * final_price + numeraire_reserve
    loss = lp_value - hold_value

    return LpVsHold(
        lp_value=lp_value,
        hold_value=hold_value,
        impermanent_loss=loss,
        impermanent_loss_percent=loss / hold_value * 100,
    )


def fees_earned(
    liquidity_value: float,
    fee_apr: float,
    days: float,
    frequency: CompoundingFrequency | str = CompoundingFrequency.NONE,
) -> float:
    """Trading fees earned over ``days``.

    Args:
        liquidity_value: Liquidity provided (USD).
        fee_apr: Annual fee rate in percent (25 = 25%).
        days: Holding period.
        frequency: NONE for simple accrual, otherwise the reinvestment cadence.

    Returns:
        Fees in USD; 0 for non-positive liquidity or days, or negative APR.
    """
    if liquidity_value <= 0 or fee_apr < 0 or days <= 0:
        return 0.0

    frequency = CompoundingFrequency.parse(frequency)
    annual_rate = fee_apr / 100

    if frequency is CompoundingFrequency.NONE:
        return liquidity_value * (annual_rate / DAYS_PER_YEAR) * days

    periods_per_year = PERIODS_PER_YEAR[frequency]
    rate_per_period = annual_rate / periods_per_year
    periods_elapsed = (days / DAYS_PER_YEAR) * periods_per_year
    return liquidity_value * compound_growth(1 + rate_per_period, periods_elapsed) - liquidity_value


def net_with_fees(lp_value: float, hold_value: float, fees: float) -> NetOutcome:
    """Net LP outcome versus holding once fees are included.

    Break-even (difference exactly 0) counts as profitable.
    """
    net_difference = lp_value + fees - hold_value
    net_difference_percent = net_difference / hold_value * 100 if hold_value != 0 else 0.0
    return NetOutcome(
        net_difference=net_difference,
        net_difference_percent=net_difference_percent,
        is_profitable=net_difference >= 0,
    )


def token_amount_for_deposit(deposit_usd: float, initial_price: float) -> float:
    """Risk-asset units for a USD deposit split 50/50."""
    if initial_price <= 0 or deposit_usd <= 0:
        return 0.0
    return deposit_usd / initial_price / 2


def simulate_lp_position(
    initial_price: float,
    final_price: float,
    deposit_usd: float,
    fee_apr: float,
    days: float,
    frequency: CompoundingFrequency | str = CompoundingFrequency.NONE,
) -> LpOutcome:
    """Run the full LP calculator for a USD deposit.

    Fees accrue on the whole deposit; impermanent loss is measured on the
    token amount implied by a 50/50 split at ``initial_price``.
    """
    token_amount = token_amount_for_deposit(deposit_usd, initial_price)
    valuation = lp_vs_hold(initial_price, final_price, token_amount)
    fees = fees_earned(deposit_usd, fee_apr, days, frequency)

    if initial_price > 0:
        price_ratio = final_price / initial_price
        price_change_percent = (final_price - initial_price) / initial_price * 100
    else:
        price_ratio = 0.0
        price_change_percent = 0.0

    return LpOutcome(
        token_amount=token_amount,
        price_ratio=price_ratio,
        price_change_percent=price_change_percent,
        impermanent_loss_pct=impermanent_loss(price_ratio),
        valuation=valuation,
        fees=fees,
        net=net_with_fees(valuation.lp_value, valuation.hold_value, fees),
    )


def impermanent_loss_curve(
    price_ratios: Sequence[float] | np.ndarray | None = None,
) -> pd.DataFrame:
    """Impermanent loss across a range of price ratios for plotting.

    Returns:
        DataFrame with columns: price_ratio, impermanent_loss_pct
    """
    if price_ratios is None:
        price_ratios = np.linspace(0.1, 5.0, 200)
    losses = [impermanent_loss(float(r)) for r in price_ratios]
    return pd.DataFrame(
        {
            "price_ratio": np.asarray(price_ratios, dtype=float),
            "impermanent_loss_pct": losses,
        }
    )
