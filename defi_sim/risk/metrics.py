"""Portfolio risk metrics — health factor, collateral ratio, liquidation price, risk tier."""

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from defi_sim.position.models import Position
from defi_sim.stress.shock_engine import apply_price_shock, partition

# Reported for health factor and collateral ratio when nothing is borrowed.
NO_DEBT_SENTINEL = 999.0

AT_RISK_HEALTH_FACTOR = 1.5
LIQUIDATION_HEALTH_FACTOR = 1.0


class RiskLevel(str, Enum):
    SAFE = "Safe"
    AT_RISK = "At Risk"
    LIQUIDATION = "Liquidation"


@dataclass(frozen=True)
class RiskResult:
    """Risk snapshot of a portfolio under a given price shock.

    Attributes:
        health_factor: Risk-weighted collateral / borrow value.
        collateral_ratio: Raw deposit value / borrow value.
        liquidation_threshold: Mean liquidation threshold of the deposits.
        liquidation_price: Price index (relative to current) at which HF hits 1.
        risk_level: Tier derived from the health factor.
        price_sensitivity: Approximate HF change per 1% price move.
    """

    health_factor: float
    collateral_ratio: float
    liquidation_threshold: float
    liquidation_price: float
    risk_level: RiskLevel
    price_sensitivity: float
    total_deposit_value: float
    total_borrow_value: float
    collateral_value: float


def classify_risk(health_factor: float) -> RiskLevel:
    """Map a health factor to its tier.

    - HF < 1.0: Liquidation
    - 1.0 <= HF < 1.5: At Risk
    - HF >= 1.5: Safe
    """
    if health_factor < LIQUIDATION_HEALTH_FACTOR:
        return RiskLevel.LIQUIDATION
    if health_factor < AT_RISK_HEALTH_FACTOR:
        return RiskLevel.AT_RISK
    return RiskLevel.SAFE


def average_liquidation_threshold(deposits: Sequence[Position]) -> float:
    """Mean threshold over deposits; 0.0 when there are none."""
    total = sum(p.asset.liquidation_threshold for p in deposits)
    return total / max(len(deposits), 1)


def liquidation_price_index(
    total_deposit_value: float,
    total_borrow_value: float,
    avg_threshold: float,
) -> float:
    """Simplified liquidation price relative to current prices.

    borrow / (deposits * avg_threshold); 0 without borrows and inf when
    there is debt but no creditable collateral.
    """
    if total_borrow_value <= 0:
        return 0.0
    denominator = total_deposit_value * avg_threshold
    if denominator == 0:
        return float("inf")
    return total_borrow_value / denominator


def compute_risk(
    positions: Sequence[Position], price_shock_pct: float = 0.0
) -> RiskResult:
    """Compute risk metrics for a portfolio after a uniform price shock.

    Never raises: empty, deposit-only and borrow-only portfolios produce the
    sentinel or zero values instead.

    Args:
        positions: Portfolio snapshot.
        price_shock_pct: Percentage move applied to every asset price.

    Returns:
        RiskResult for the shocked portfolio.
    """
    shocked = apply_price_shock(positions, price_shock_pct)
    deposits, borrows = partition(shocked)

    total_deposit_value = sum(p.value for p in deposits)
    total_borrow_value = sum(p.value for p in borrows)
    collateral_value = sum(p.value * p.asset.liquidation_threshold for p in deposits)

    if total_borrow_value > 0:
        collateral_ratio = total_deposit_value / total_borrow_value
        health_factor = collateral_value / total_borrow_value
        price_sensitivity = health_factor / 100
    else:
        collateral_ratio = NO_DEBT_SENTINEL
        health_factor = NO_DEBT_SENTINEL
        price_sensitivity = 0.0

    avg_threshold = average_liquidation_threshold(deposits)

    return RiskResult(
        health_factor=health_factor,
        collateral_ratio=collateral_ratio,
        liquidation_threshold=avg_threshold,
        liquidation_price=liquidation_price_index(
            total_deposit_value, total_borrow_value, avg_threshold
        ),
        risk_level=classify_risk(health_factor),
        price_sensitivity=price_sensitivity,
        total_deposit_value=total_deposit_value,
        total_borrow_value=total_borrow_value,
        collateral_value=collateral_value,
    )
