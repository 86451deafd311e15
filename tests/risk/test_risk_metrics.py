"""Tests for portfolio risk metrics."""

import math

import pytest

from defi_sim.position.models import Asset, Position, PositionType
from defi_sim.risk.metrics import (
    NO_DEBT_SENTINEL,
    RiskLevel,
    average_liquidation_threshold,
    classify_risk,
    compute_risk,
    liquidation_price_index,
)

DEP_ASSET = Asset("weth", "WETH", "Wrapped Ether", 100.0, 0.05, 0.8)
BOR_ASSET = Asset("usdc", "USDC", "USD Coin", 100.0, 0.03, 0.8)


def _positions(borrow_amount: float = 5.0) -> list[Position]:
    return [
        Position("d", DEP_ASSET, PositionType.DEPOSIT, 10.0, 0),
        Position("b", BOR_ASSET, PositionType.BORROW, borrow_amount, 0),
    ]


class TestClassifyRisk:
    @pytest.mark.parametrize(
        "hf, expected",
        [
            (0.99, RiskLevel.LIQUIDATION),
            (1.0, RiskLevel.AT_RISK),
            (1.49, RiskLevel.AT_RISK),
            (1.5, RiskLevel.SAFE),
            (NO_DEBT_SENTINEL, RiskLevel.SAFE),
        ],
    )
    def test_boundaries(self, hf: float, expected: RiskLevel) -> None:
        assert classify_risk(hf) is expected


class TestComputeRisk:
    def test_basic_portfolio(self) -> None:
        r = compute_risk(_positions())
        assert r.health_factor == pytest.approx(1.6)
        assert r.collateral_ratio == pytest.approx(2.0)
        assert r.liquidation_threshold == pytest.approx(0.8)
        assert r.liquidation_price == pytest.approx(500.0 / 800.0)
        assert r.price_sensitivity == pytest.approx(0.016)
        assert r.risk_level is RiskLevel.SAFE

    def test_uniform_shock_preserves_health_factor(self) -> None:
        # Both sides move together
        r = compute_risk(_positions(), -40.0)
        assert r.health_factor == pytest.approx(1.6)
        assert r.total_deposit_value == pytest.approx(600.0)

    def test_heavy_borrow_is_liquidatable(self) -> None:
        r = compute_risk(_positions(borrow_amount=9.0))
        assert r.health_factor == pytest.approx(800.0 / 900.0)
        assert r.risk_level is RiskLevel.LIQUIDATION

    def test_at_risk_tier(self) -> None:
        r = compute_risk(_positions(borrow_amount=6.0))
        assert r.health_factor == pytest.approx(800.0 / 600.0)
        assert r.risk_level is RiskLevel.AT_RISK

    def test_no_debt_uses_sentinel(self) -> None:
        r = compute_risk(_positions()[:1])
        assert r.health_factor == NO_DEBT_SENTINEL
        assert r.collateral_ratio == NO_DEBT_SENTINEL
        assert r.liquidation_price == 0.0
        assert r.price_sensitivity == 0.0
        assert r.risk_level is RiskLevel.SAFE

    def test_empty_portfolio(self) -> None:
        r = compute_risk([])
        assert r.health_factor == NO_DEBT_SENTINEL
        assert r.liquidation_threshold == 0.0

    def test_borrow_only_portfolio(self) -> None:
        r = compute_risk(_positions()[1:])
        assert r.health_factor == 0.0
        assert r.risk_level is RiskLevel.LIQUIDATION
        assert math.isinf(r.liquidation_price)


class TestHelpers:
    def test_average_threshold(self) -> None:
        low = Asset("link", "LINK", "Chainlink", 10.0, 0.0, 0.6)
        deposits = [
            Position("a", DEP_ASSET, PositionType.DEPOSIT, 1.0, 0),
            Position("b", low, PositionType.DEPOSIT, 1.0, 0),
        ]
        assert average_liquidation_threshold(deposits) == pytest.approx(0.7)
        assert average_liquidation_threshold([]) == 0.0

    def test_liquidation_price_index(self) -> None:
        assert liquidation_price_index(1000.0, 0.0, 0.8) == 0.0
        assert liquidation_price_index(1000.0, 400.0, 0.8) == pytest.approx(0.5)
        assert math.isinf(liquidation_price_index(0.0, 400.0, 0.8))

    def test_zero_threshold_collateral_is_liquidatable(self) -> None:
        worthless = Asset("meme", "MEME", "Meme Coin", 100.0, 0.0, 0.0)
        positions = [
            Position("d", worthless, PositionType.DEPOSIT, 10.0, 0),
            Position("b", BOR_ASSET, PositionType.BORROW, 1.0, 0),
        ]
        r = compute_risk(positions)
        assert r.health_factor == 0.0
        assert r.risk_level is RiskLevel.LIQUIDATION
        assert math.isinf(r.liquidation_price)

    def test_deterministic(self) -> None:
        assert compute_risk(_positions(), -12.5) == compute_risk(_positions(), -12.5)
