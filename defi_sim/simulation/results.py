"""Result dataclasses for scenario projection outputs."""

from dataclasses import asdict, dataclass

import pandas as pd


@dataclass(frozen=True)
class ScenarioStep:
    """Portfolio state on one day of the projection.

    Attributes:
        day: Days elapsed since the start (0-based).
        timestamp: Wall-clock epoch milliseconds for this day.
        deposit_value: Deposits plus accrued interest (USD).
        borrow_value: Borrows plus accrued interest (USD).
        net_value: deposit_value - borrow_value.
        interest_accrued: Net interest earned on this single day (USD).
        health_factor: Risk-weighted deposits / borrows, or the no-debt sentinel.
    """

    day: int
    timestamp: int
    deposit_value: float
    borrow_value: float
    net_value: float
    interest_accrued: float
    health_factor: float


@dataclass(frozen=True)
class FinalTotals:
    """Aggregate totals at the end of the horizon."""

    total_deposits: float
    total_borrows: float
    net_value: float
    health_factor: float
    liquidation_price: float


@dataclass(frozen=True)
class SimulationResult:
    """Full day-by-day projection plus terminal totals."""

    steps: list[ScenarioStep]
    final_totals: FinalTotals

    def to_frame(self) -> pd.DataFrame:
        """One row per step, columns named after ScenarioStep fields."""
        return pd.DataFrame([asdict(step) for step in self.steps])
