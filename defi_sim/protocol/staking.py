"""Staking reward projections across compounding frequencies."""

from __future__ import annotations

from dataclasses import asdict, dataclass

import pandas as pd

from defi_sim.protocol.compounding import (
    PERIODS_PER_YEAR,
    STAKING_FREQUENCIES,
    CompoundingFrequency,
    compound_growth,
)

DAYS_PER_YEAR = 365


@dataclass(frozen=True)
class StakingRewards:
    rewards: float
    final_balance: float
    effective_apy: float  # percent, one-year equivalent


@dataclass(frozen=True)
class LockupRewards:
    """Rewards plus lockup status.

    The lockup is informational only: it does not change the rewards.
    """

    rewards: float
    final_balance: float
    effective_apy: float
    is_locked: bool
    days_until_unlock: float


def simple_rewards(principal: float, apr: float, days: float) -> float:
    """Non-compounding rewards: principal · (apr/100/365) · days.

    Returns 0 for principal <= 0, apr < 0 or days <= 0.
    """
    if principal <= 0 or apr < 0 or days <= 0:
        return 0.0
    return principal * (apr / 100 / DAYS_PER_YEAR) * days


def compounded_rewards(
    principal: float,
    apr: float,
    days: float,
    frequency: CompoundingFrequency | str,
) -> StakingRewards:
    """Project staking rewards with periodic compounding.

    Args:
        principal: Amount staked.
        apr: Annual rate in percent (12 = 12%).
        days: Staking period.
        frequency: Compounding cadence; NONE falls back to simple rewards.

    Returns:
        StakingRewards. ``effective_apy`` is the one-year equivalent rate
        regardless of ``days``.
    """
    if principal <= 0 or apr < 0 or days <= 0:
        return StakingRewards(rewards=0.0, final_balance=principal, effective_apy=0.0)

    frequency = CompoundingFrequency.parse(frequency)

    if frequency is CompoundingFrequency.NONE:
        rewards = simple_rewards(principal, apr, days)
        return StakingRewards(
            rewards=rewards,
            final_balance=principal + rewards,
            effective_apy=apr,
        )

    periods_per_year = PERIODS_PER_YEAR[frequency]
    total_periods = (days / DAYS_PER_YEAR) * periods_per_year
    rate_per_period = apr / 100 / periods_per_year
    final_balance = principal * compound_growth(1 + rate_per_period, total_periods)

    return StakingRewards(
        rewards=final_balance - principal,
        final_balance=final_balance,
        effective_apy=(compound_growth(1 + rate_per_period, periods_per_year) - 1) * 100,
    )


def with_lockup(
    principal: float,
    apr: float,
    staking_days: float,
    lockup_days: float,
    frequency: CompoundingFrequency | str,
) -> LockupRewards:
    """Compounded rewards annotated with whether funds are still locked."""
    result = compounded_rewards(principal, apr, staking_days, frequency)
    return LockupRewards(
        rewards=result.rewards,
        final_balance=result.final_balance,
        effective_apy=result.effective_apy,
        is_locked=staking_days < lockup_days,
        days_until_unlock=max(0, lockup_days - staking_days),
    )


def compare_frequencies(
    principal: float, apr: float, days: float
) -> dict[CompoundingFrequency, StakingRewards]:
    """Compounded rewards for every frequency, keyed by frequency."""
    return {
        frequency: compounded_rewards(principal, apr, days, frequency)
        for frequency in STAKING_FREQUENCIES
    }


def frequency_table(principal: float, apr: float, days: float) -> pd.DataFrame:
    """Side-by-side comparison table.

    Returns:
        DataFrame with columns: frequency, rewards, final_balance, effective_apy
    """
    rows = [
        {"frequency": frequency.value, **asdict(result)}
        for frequency, result in compare_frequencies(principal, apr, days).items()
    ]
    return pd.DataFrame(rows, columns=["frequency", "rewards", "final_balance", "effective_apy"])
