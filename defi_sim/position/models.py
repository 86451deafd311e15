"""Deposit/borrow position model shared by the risk, scenario and return calculators."""

from dataclasses import dataclass, replace
from enum import Enum


class PositionType(str, Enum):
    """Which side of the lending market a position sits on."""

    DEPOSIT = "deposit"
    BORROW = "borrow"


@dataclass(frozen=True)
class Asset:
    """Priced, rated asset as supplied by a market-data provider.

    Attributes:
        id: Provider-local identifier.
        symbol: Ticker (e.g. "WETH").
        name: Display name.
        price_usd: Spot price in USD (> 0).
        interest_rate: Annual rate as a decimal (0.05 = 5%).
        liquidation_threshold: Fraction of value creditable as collateral, in (0, 1].
    """

    id: str
    symbol: str
    name: str
    price_usd: float
    interest_rate: float
    liquidation_threshold: float

    def with_price_shock(self, price_shock_pct: float) -> "Asset":
        """Copy of this asset with the price moved by ``price_shock_pct`` percent."""
        return replace(self, price_usd=self.price_usd * (1 + price_shock_pct / 100))


@dataclass(frozen=True)
class Position:
    """A single deposit or borrow entry.

    The asset is snapshotted by value when the position is created, so later
    market-data refreshes do not change an existing position.
    """

    id: str
    asset: Asset
    position_type: PositionType
    amount: float  # units of the asset
    created_at: int  # epoch milliseconds

    @property
    def value(self) -> float:
        """Notional value in USD at the snapshotted price."""
        return self.amount * self.asset.price_usd

    @property
    def is_deposit(self) -> bool:
        return self.position_type is PositionType.DEPOSIT

    @property
    def is_borrow(self) -> bool:
        return self.position_type is PositionType.BORROW

    def with_price_shock(self, price_shock_pct: float) -> "Position":
        return replace(self, asset=self.asset.with_price_shock(price_shock_pct))
