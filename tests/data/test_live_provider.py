"""Tests for LiveDataProvider — payload parsing and HTTP error mapping."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
import requests

from defi_sim.data.errors import (
    MarketDataConnectionError,
    MarketDataError,
    MarketDataHTTPError,
    MarketDataParseError,
    MarketDataTimeout,
)
from defi_sim.data.interfaces import Protocol
from defi_sim.data.live_provider import LiveDataProvider, parse_assets

RECORDS = [
    {
        "id": "weth",
        "symbol": "WETH",
        "name": "Wrapped Ether",
        "priceUSD": "3000.5",
        "interestRate": 0.02,
        "liquidationThreshold": 0.83,
    },
    {
        "symbol": "USDC",
        "price_usd": 1.0,
        "interest_rate": 0.05,
        "liquidation_threshold": 0.8,
    },
]


def _session(payload=None, ok: bool = True, status_code: int = 200, exc=None) -> MagicMock:
    session = MagicMock()
    if exc is not None:
        session.get.side_effect = exc
        return session
    resp = MagicMock()
    resp.ok = ok
    resp.status_code = status_code
    resp.json.return_value = payload
    session.get.return_value = resp
    return session


# ======================================================================
# Payload parsing
# ======================================================================


class TestParseAssets:
    def test_mixed_key_styles(self) -> None:
        assets = parse_assets(RECORDS)
        assert [a.symbol for a in assets] == ["WETH", "USDC"]
        assert assets[0].price_usd == pytest.approx(3000.5)
        assert assets[1].id == "usdc"
        assert assets[1].name == "USDC"

    def test_wrapped_payload(self) -> None:
        assert len(parse_assets({"assets": RECORDS})) == 2

    @pytest.mark.parametrize(
        "payload",
        [
            [],
            {"data": []},
            "not a list",
            [{"symbol": "X", "priceUSD": 0, "interestRate": 0.1, "liquidationThreshold": 0.5}],
            [{"symbol": "X", "priceUSD": 1, "interestRate": -0.1, "liquidationThreshold": 0.5}],
            [{"symbol": "X", "priceUSD": 1, "interestRate": 0.1, "liquidationThreshold": 1.5}],
            [{"symbol": "X", "priceUSD": "abc", "interestRate": 0.1, "liquidationThreshold": 0.5}],
            [{"symbol": "X", "interestRate": 0.1, "liquidationThreshold": 0.5}],
            [{"priceUSD": 1, "interestRate": 0.1, "liquidationThreshold": 0.5}],
            [RECORDS[0], "junk"],
        ],
    )
    def test_invalid_payload_rejected(self, payload) -> None:
        with pytest.raises(MarketDataParseError):
            parse_assets(payload)


# ======================================================================
# HTTP behaviour
# ======================================================================


class TestLiveDataProvider:
    def test_success(self) -> None:
        session = _session(payload=RECORDS)
        provider = LiveDataProvider(timeout=3.0, session=session)
        data = provider.get_market_data(Protocol.AAVE)
        assert data.is_live is True
        assert data.protocol is Protocol.AAVE
        assert len(data.assets) == 2
        _, kwargs = session.get.call_args
        assert kwargs["timeout"] == 3.0

    def test_custom_endpoint(self) -> None:
        session = _session(payload=RECORDS)
        provider = LiveDataProvider(session=session, endpoints={Protocol.COMPOUND: "http://x"})
        provider.get_market_data(Protocol.COMPOUND)
        assert session.get.call_args[0][0] == "http://x"

    def test_timeout(self) -> None:
        provider = LiveDataProvider(timeout=10.0, session=_session(exc=requests.Timeout()))
        with pytest.raises(MarketDataTimeout, match="timed out after 10 seconds"):
            provider.get_market_data(Protocol.AAVE)

    def test_connection_error(self) -> None:
        provider = LiveDataProvider(session=_session(exc=requests.ConnectionError()))
        with pytest.raises(MarketDataConnectionError):
            provider.get_market_data(Protocol.AAVE)

    def test_other_request_error(self) -> None:
        provider = LiveDataProvider(session=_session(exc=requests.RequestException("boom")))
        with pytest.raises(MarketDataError, match="boom"):
            provider.get_market_data(Protocol.AAVE)

    def test_http_error_status(self) -> None:
        provider = LiveDataProvider(session=_session(ok=False, status_code=503))
        with pytest.raises(MarketDataHTTPError, match="status 503") as excinfo:
            provider.get_market_data(Protocol.COMPOUND)
        assert excinfo.value.status_code == 503
        assert "Compound" in str(excinfo.value)

    def test_invalid_json(self) -> None:
        session = _session()
        session.get.return_value.json.side_effect = ValueError("bad json")
        with pytest.raises(MarketDataParseError):
            LiveDataProvider(session=session).get_market_data(Protocol.AAVE)

    def test_partial_payload_is_rejected(self) -> None:
        bad = RECORDS + [{"symbol": "BAD", "priceUSD": -1, "interestRate": 0, "liquidationThreshold": 0.5}]
        with pytest.raises(MarketDataParseError):
            LiveDataProvider(session=_session(payload=bad)).get_market_data(Protocol.AAVE)
