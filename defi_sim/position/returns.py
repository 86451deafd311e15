"""Interest return decomposition for a portfolio over a horizon."""

from dataclasses import dataclass, field
from typing import Sequence

from defi_sim.position.models import Position
from defi_sim.protocol.compounding import compound_growth
from defi_sim.stress.shock_engine import partition

DAYS_PER_YEAR = 365


@dataclass(frozen=True)
class AssetInterest:
    """Interest contributed by one position."""

    asset: str  # asset symbol
    interest: float  # USD over the horizon


@dataclass(frozen=True)
class ReturnResult:
    """Deposit income, borrow cost and annualized rates.

    APR is the simple annualized net return on net principal; APY compounds
    the implied daily rate over a year.
    """

    total_deposit_interest: float
    total_borrow_interest: float
    net_return: float
    apr: float  # percent
    apy: float  # percent
    deposit_breakdown: list[AssetInterest] = field(default_factory=list)
    borrow_breakdown: list[AssetInterest] = field(default_factory=list)
    total_principal: float = 0.0  # deposits - borrows, USD


def _breakdown(positions: Sequence[Position], year_fraction: float) -> list[AssetInterest]:
    return [
        AssetInterest(
            asset=p.asset.symbol,
            interest=p.value * p.asset.interest_rate * year_fraction,
        )
        for p in positions
    ]


def compute_returns(positions: Sequence[Position], timeframe_days: int) -> ReturnResult:
    """Decompose interest earned and paid over ``timeframe_days``.

    Breakdown rows are per position, so two deposits of the same asset
    produce two rows.

    Args:
        positions: Portfolio snapshot (price shock is not applied).
        timeframe_days: Horizon in days.

    Returns:
        ReturnResult with totals, APR/APY and per-position breakdowns.
    """
    deposits, borrows = partition(positions)
    year_fraction = timeframe_days / DAYS_PER_YEAR

    deposit_breakdown = _breakdown(deposits, year_fraction)
    borrow_breakdown = _breakdown(borrows, year_fraction)

    total_deposit_interest = sum(item.interest for item in deposit_breakdown)
    total_borrow_interest = sum(item.interest for item in borrow_breakdown)
    net_return = total_deposit_interest - total_borrow_interest

    total_principal = sum(p.value for p in deposits) - sum(p.value for p in borrows)

    if total_principal > 0 and timeframe_days > 0:
        apr = (net_return / total_principal / year_fraction) * 100
        daily_rate = net_return / total_principal / timeframe_days
        apy = (compound_growth(1 + daily_rate, DAYS_PER_YEAR) - 1) * 100
    else:
        apr = 0.0
        apy = 0.0

    return ReturnResult(
        total_deposit_interest=total_deposit_interest,
        total_borrow_interest=total_borrow_interest,
        net_return=net_return,
        apr=apr,
        apy=apy,
        deposit_breakdown=deposit_breakdown,
        borrow_breakdown=borrow_breakdown,
        total_principal=total_principal,
    )
