"""Deterministic scenario projector.

Walks a day-indexed horizon over a shocked portfolio. Interest accrues
linearly from the original principal (simple interest, recomputed each
day rather than compounded day-over-day).
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Sequence

from defi_sim.position.models import Position
from defi_sim.risk.metrics import (
    NO_DEBT_SENTINEL,
    average_liquidation_threshold,
    liquidation_price_index,
)
from defi_sim.simulation.results import FinalTotals, ScenarioStep, SimulationResult
from defi_sim.stress.shock_engine import apply_price_shock, partition

DAYS_PER_YEAR = 365
MS_PER_DAY = 24 * 60 * 60 * 1000


@dataclass(frozen=True)
class ScenarioConfig:
    """Projection parameters.

    Attributes:
        timeframe_days: Horizon length in days (1-365 recommended).
        price_shock_pct: One-time price move applied at day 0 (e.g. -20.0).
    """

    timeframe_days: int = 30
    price_shock_pct: float = 0.0


def _accrued(position: Position, day_fraction: float) -> float:
    principal = position.value
    return principal + principal * position.asset.interest_rate * day_fraction


def _daily_interest(positions: Sequence[Position]) -> float:
    return sum(p.value * p.asset.interest_rate / DAYS_PER_YEAR for p in positions)


def run_simulation(
    positions: Sequence[Position],
    config: ScenarioConfig,
    clock: Callable[[], float] = time.time,
) -> SimulationResult:
    """Project portfolio value and health over ``config.timeframe_days``.

    Produces ``timeframe_days + 1`` steps (day 0 through the horizon
    inclusive). Everything except ``ScenarioStep.timestamp`` is a pure
    function of the inputs.

    Args:
        positions: Portfolio snapshot.
        config: Horizon and price shock.
        clock: Returns the current time in epoch seconds; used only for timestamps.

    Returns:
        SimulationResult with per-day steps and terminal totals.
    """
    start_ms = int(clock() * 1000)
    horizon = max(int(config.timeframe_days), 0)

    shocked = apply_price_shock(positions, config.price_shock_pct)
    deposits, borrows = partition(shocked)

    # Marginal daily interest is horizon-independent
    interest_accrued = _daily_interest(deposits) - _daily_interest(borrows)

    steps: list[ScenarioStep] = []
    for day in range(horizon + 1):
        day_fraction = day / DAYS_PER_YEAR

        deposit_value = sum(_accrued(p, day_fraction) for p in deposits)
        borrow_value = sum(_accrued(p, day_fraction) for p in borrows)
        collateral_value = sum(
            _accrued(p, day_fraction) * p.asset.liquidation_threshold for p in deposits
        )
        health_factor = (
            collateral_value / borrow_value if borrow_value > 0 else NO_DEBT_SENTINEL
        )

        steps.append(
            ScenarioStep(
                day=day,
                timestamp=start_ms + day * MS_PER_DAY,
                deposit_value=deposit_value,
                borrow_value=borrow_value,
                net_value=deposit_value - borrow_value,
                interest_accrued=interest_accrued,
                health_factor=health_factor,
            )
        )

    final = steps[-1]
    final_totals = FinalTotals(
        total_deposits=final.deposit_value,
        total_borrows=final.borrow_value,
        net_value=final.net_value,
        health_factor=final.health_factor,
        liquidation_price=liquidation_price_index(
            final.deposit_value,
            final.borrow_value,
            average_liquidation_threshold(deposits),
        ),
    )
    return SimulationResult(steps=steps, final_totals=final_totals)
