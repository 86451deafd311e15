"""Live market-data provider fetching asset records over HTTP via requests."""

from __future__ import annotations

import logging
import math
from typing import Any

import requests

from defi_sim.data.constants import AAVE_API_URL, COMPOUND_API_URL, LIVE_FETCH_TIMEOUT
from defi_sim.data.errors import (
    MarketDataConnectionError,
    MarketDataError,
    MarketDataHTTPError,
    MarketDataParseError,
    MarketDataTimeout,
)
from defi_sim.data.interfaces import MarketData, MarketDataProvider, Protocol
from defi_sim.position.models import Asset

logger = logging.getLogger(__name__)

_ENDPOINTS: dict[Protocol, str] = {
    Protocol.AAVE: AAVE_API_URL,
    Protocol.COMPOUND: COMPOUND_API_URL,
}


# ---------------------------------------------------------------------------
# Payload parsing
# ---------------------------------------------------------------------------

def _number(record: dict[str, Any], *keys: str) -> float:
    for key in keys:
        if key in record:
            try:
                value = float(record[key])
            except (TypeError, ValueError) as exc:
                raise MarketDataParseError(f"field '{key}' is not numeric") from exc
            if not math.isfinite(value):
                raise MarketDataParseError(f"field '{key}' is not finite")
            return value
    raise MarketDataParseError(f"missing field '{keys[0]}'")


def _parse_asset(record: Any) -> Asset:
    if not isinstance(record, dict):
        raise MarketDataParseError("asset record is not an object")

    symbol = str(record.get("symbol") or "").strip()
    if not symbol:
        raise MarketDataParseError("asset record has no symbol")

    price = _number(record, "priceUSD", "price_usd")
    rate = _number(record, "interestRate", "interest_rate")
    threshold = _number(record, "liquidationThreshold", "liquidation_threshold")

    if price <= 0:
        raise MarketDataParseError(f"{symbol} has non-positive price")
    if rate < 0:
        raise MarketDataParseError(f"{symbol} has negative interest rate")
    if not 0 < threshold <= 1:
        raise MarketDataParseError(f"{symbol} liquidation threshold outside (0, 1]")

    return Asset(
        id=str(record.get("id") or symbol.lower()),
        symbol=symbol,
        name=str(record.get("name") or symbol),
        price_usd=price,
        interest_rate=rate,
        liquidation_threshold=threshold,
    )


def parse_assets(payload: Any) -> tuple[Asset, ...]:
    """Convert a JSON payload into assets.

    Accepts either a list of asset records or an object with an ``assets``
    list. A single invalid record rejects the whole payload.
    """
    if isinstance(payload, dict):
        records = payload.get("assets")
    else:
        records = payload
    if not isinstance(records, list):
        raise MarketDataParseError("response does not contain an asset list")
    if not records:
        raise MarketDataParseError("response contained no assets")
    return tuple(_parse_asset(record) for record in records)


# ---------------------------------------------------------------------------
# LiveDataProvider
# ---------------------------------------------------------------------------

class LiveDataProvider(MarketDataProvider):
    """Fetch protocol markets from a remote JSON API.

    Parameters
    ----------
    timeout : float
        Seconds to wait for connect and read (default 10).
    session : requests.Session | None
        Optional session, mainly for tests and connection reuse.
    endpoints : dict[Protocol, str] | None
        Override the per-protocol URLs.
    """

    def __init__(
        self,
        timeout: float = LIVE_FETCH_TIMEOUT,
        session: requests.Session | None = None,
        endpoints: dict[Protocol, str] | None = None,
    ) -> None:
        self._timeout = timeout
        self._session = session or requests.Session()
        self._endpoints = dict(endpoints or _ENDPOINTS)

    def get_market_data(self, protocol: Protocol) -> MarketData:
        protocol = Protocol(protocol)
        url = self._endpoints[protocol]
        logger.debug("Fetching live %s markets from %s", protocol.label, url)

        try:
            resp = self._session.get(
                url,
                headers={"Accept": "application/json"},
                timeout=self._timeout,
            )
        except requests.Timeout as exc:
            raise MarketDataTimeout(self._timeout) from exc
        except requests.ConnectionError as exc:
            raise MarketDataConnectionError() from exc
        except requests.RequestException as exc:
            raise MarketDataError(
                "An unexpected error occurred while loading live data. "
                f"Please use Sample Data mode to continue. Error: {exc}"
            ) from exc

        if not resp.ok:
            raise MarketDataHTTPError(protocol.label, resp.status_code)

        try:
            payload = resp.json()
        except ValueError as exc:
            raise MarketDataParseError("response was not valid JSON") from exc

        assets = parse_assets(payload)
        logger.info("Loaded %d live %s assets", len(assets), protocol.label)
        return MarketData(protocol=protocol, assets=assets, is_live=True)
