"""Market-data providers for sample and live protocol assets."""

from defi_sim.data.provider_factory import create_provider, load_market_data

__all__ = ["create_provider", "load_market_data"]
