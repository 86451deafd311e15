"""Static data provider with bundled sample assets per protocol."""

from defi_sim.data.interfaces import MarketData, MarketDataProvider, Protocol
from defi_sim.position.models import Asset

# --- Illustrative sample markets (not live prices) ---

_SAMPLE_ASSETS: dict[Protocol, tuple[Asset, ...]] = {
    Protocol.AAVE: (
        Asset(
            id="aave-weth",
            symbol="WETH",
            name="Wrapped Ether",
            price_usd=3_200.0,
            interest_rate=0.025,
            liquidation_threshold=0.83,
        ),
        Asset(
            id="aave-wbtc",
            symbol="WBTC",
            name="Wrapped Bitcoin",
            price_usd=65_000.0,
            interest_rate=0.008,
            liquidation_threshold=0.78,
        ),
        Asset(
            id="aave-usdc",
            symbol="USDC",
            name="USD Coin",
            price_usd=1.0,
            interest_rate=0.052,
            liquidation_threshold=0.78,
        ),
        Asset(
            id="aave-dai",
            symbol="DAI",
            name="Dai Stablecoin",
            price_usd=1.0,
            interest_rate=0.061,
            liquidation_threshold=0.77,
        ),
        Asset(
            id="aave-link",
            symbol="LINK",
            name="Chainlink",
            price_usd=14.5,
            interest_rate=0.004,
            liquidation_threshold=0.68,
        ),
    ),
    Protocol.COMPOUND: (
        Asset(
            id="compound-eth",
            symbol="ETH",
            name="Ether",
            price_usd=3_200.0,
            interest_rate=0.021,
            liquidation_threshold=0.825,
        ),
        Asset(
            id="compound-wbtc",
            symbol="WBTC",
            name="Wrapped Bitcoin",
            price_usd=65_000.0,
            interest_rate=0.006,
            liquidation_threshold=0.7,
        ),
        Asset(
            id="compound-usdc",
            symbol="USDC",
            name="USD Coin",
            price_usd=1.0,
            interest_rate=0.048,
            liquidation_threshold=0.85,
        ),
        Asset(
            id="compound-usdt",
            symbol="USDT",
            name="Tether USD",
            price_usd=1.0,
            interest_rate=0.055,
            liquidation_threshold=0.8,
        ),
        Asset(
            id="compound-comp",
            symbol="COMP",
            name="Compound",
            price_usd=55.0,
            interest_rate=0.012,
            liquidation_threshold=0.6,
        ),
    ),
}


class StaticDataProvider(MarketDataProvider):
    """Data provider serving the bundled sample markets."""

    def get_market_data(self, protocol: Protocol) -> MarketData:
        return MarketData(protocol=Protocol(protocol), assets=_SAMPLE_ASSETS[Protocol(protocol)])
