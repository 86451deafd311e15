"""Factory for market-data providers with automatic fallback to sample data."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from defi_sim.data.constants import LIVE_FETCH_TIMEOUT
from defi_sim.data.errors import MarketDataError
from defi_sim.data.interfaces import MarketData, MarketDataProvider, Protocol
from defi_sim.data.static_params import StaticDataProvider

logger = logging.getLogger(__name__)

FALLBACK_NOTE = "Automatically switched to Sample Data mode."


@dataclass(frozen=True)
class MarketDataLoad:
    """Market data plus a user-facing notice when live data failed."""

    data: MarketData
    fallback_notice: str | None = None

    @property
    def fell_back(self) -> bool:
        return self.fallback_notice is not None


def create_provider(
    use_live: bool = False,
    timeout: float = LIVE_FETCH_TIMEOUT,
) -> MarketDataProvider:
    """Create a data provider, selecting sample or live.

    Parameters
    ----------
    use_live : bool
        If True, return a ``LiveDataProvider``.
    timeout : float
        Bounded wait in seconds for live requests.
    """
    if not use_live:
        return StaticDataProvider()

    from defi_sim.data.live_provider import LiveDataProvider

    return LiveDataProvider(timeout=timeout)


def load_market_data(
    protocol: Protocol,
    use_live: bool = False,
    timeout: float = LIVE_FETCH_TIMEOUT,
    provider: MarketDataProvider | None = None,
) -> MarketDataLoad:
    """Load assets for ``protocol``, falling back to sample data on failure.

    Live-data errors are logged and converted into ``fallback_notice``; they
    are never raised to the caller.
    """
    provider = provider or create_provider(use_live=use_live, timeout=timeout)
    try:
        return MarketDataLoad(data=provider.get_market_data(protocol))
    except MarketDataError as exc:
        logger.warning("Live %s data failed, falling back to sample data: %s", Protocol(protocol).label, exc)
        fallback = StaticDataProvider().get_market_data(protocol)
        return MarketDataLoad(data=fallback, fallback_notice=f"{exc} {FALLBACK_NOTE}")
