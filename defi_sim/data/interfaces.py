"""Abstract market-data provider interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

from defi_sim.position.models import Asset


class Protocol(str, Enum):
    AAVE = "aave"
    COMPOUND = "compound"

    @property
    def label(self) -> str:
        return self.value.capitalize()


@dataclass(frozen=True)
class MarketData:
    """Assets available for building positions on one protocol."""

    protocol: Protocol
    assets: tuple[Asset, ...]
    is_live: bool = False

    def find(self, asset_id: str) -> Asset | None:
        return next((a for a in self.assets if a.id == asset_id), None)


class MarketDataProvider(ABC):
    """Source of priced, rated assets."""

    @abstractmethod
    def get_market_data(self, protocol: Protocol) -> MarketData:
        """Get all assets for a protocol.

        Implementations must either return complete data or raise
        ``MarketDataError``; never partial results.
        """
