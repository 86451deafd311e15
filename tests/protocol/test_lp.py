"""Tests for constant-product LP math."""

import math

import pytest

from defi_sim.protocol.compounding import CompoundingFrequency
from defi_sim.protocol.lp import (
    fees_earned,
    impermanent_loss,
    impermanent_loss_curve,
    lp_vs_hold,
    net_with_fees,
    simulate_lp_position,
    token_amount_for_deposit,
)


class TestImpermanentLoss:
    def test_no_move_no_loss(self) -> None:
        assert impermanent_loss(1.0) == pytest.approx(0.0)

    def test_known_values(self) -> None:
        assert impermanent_loss(1.5) == pytest.approx(-2.0204, abs=1e-4)
        assert impermanent_loss(4.0) == pytest.approx(-20.0)

    @pytest.mark.parametrize("ratio", [0.25, 0.5, 2.0, 3.0])
    def test_symmetric_in_reciprocal(self, ratio: float) -> None:
        assert impermanent_loss(ratio) == pytest.approx(impermanent_loss(1 / ratio))

    def test_never_positive(self) -> None:
        df = impermanent_loss_curve()
        assert len(df) == 200
        assert (df["impermanent_loss_pct"] <= 1e-9).all()

    @pytest.mark.parametrize("ratio", [0.0, -1.0, float("inf")])
    def test_invalid_ratio(self, ratio: float) -> None:
        assert impermanent_loss(ratio) == 0.0


class TestLpVsHold:
    def test_price_quadruples(self) -> None:
        v = lp_vs_hold(100.0, 400.0, 10.0)
        assert v.lp_value == pytest.approx(4000.0)
        assert v.hold_value == pytest.approx(5000.0)
        assert v.impermanent_loss == pytest.approx(-1000.0)
        assert v.impermanent_loss_percent == pytest.approx(impermanent_loss(4.0))

    def test_invalid_inputs_zero(self) -> None:
        v = lp_vs_hold(0.0, 100.0, 10.0)
        assert (v.lp_value, v.hold_value, v.impermanent_loss) == (0.0, 0.0, 0.0)


class TestFees:
    def test_simple_fees(self) -> None:
        assert fees_earned(10_000.0, 36.5, 10) == pytest.approx(100.0)

    def test_compounding_beats_simple(self) -> None:
        simple = fees_earned(10_000.0, 20.0, 365)
        weekly = fees_earned(10_000.0, 20.0, 365, CompoundingFrequency.WEEKLY)
        daily = fees_earned(10_000.0, 20.0, 365, "daily")
        assert simple < weekly < daily

    @pytest.mark.parametrize("liquidity, apr, days", [(0, 10, 30), (100, -1, 30), (100, 10, 0)])
    def test_invalid_inputs(self, liquidity: float, apr: float, days: float) -> None:
        assert fees_earned(liquidity, apr, days) == 0.0


class TestNetWithFees:
    def test_fees_offset_loss(self) -> None:
        net = net_with_fees(lp_value=4000.0, hold_value=5000.0, fees=1200.0)
        assert net.net_difference == pytest.approx(200.0)
        assert net.net_difference_percent == pytest.approx(4.0)
        assert net.is_profitable

    def test_break_even_is_profitable(self) -> None:
        assert net_with_fees(100.0, 100.0, 0.0).is_profitable

    def test_zero_hold_value(self) -> None:
        assert net_with_fees(0.0, 0.0, 0.0).net_difference_percent == 0.0


class TestSimulateLpPosition:
    def test_token_amount_splits_deposit(self) -> None:
        assert token_amount_for_deposit(2000.0, 100.0) == pytest.approx(10.0)
        assert token_amount_for_deposit(2000.0, 0.0) == 0.0

    def test_flat_price_no_fees(self) -> None:
        out = simulate_lp_position(100.0, 100.0, 2000.0, 0.0, 30)
        assert out.price_ratio == pytest.approx(1.0)
        assert out.valuation.lp_value == pytest.approx(2000.0)
        assert out.net.net_difference == pytest.approx(0.0)
        assert out.net.is_profitable

    def test_price_drop_with_fees(self) -> None:
        out = simulate_lp_position(100.0, 50.0, 2000.0, 20.0, 365)
        assert out.price_change_percent == pytest.approx(-50.0)
        assert out.impermanent_loss_pct < 0
        assert out.fees == pytest.approx(400.0)


class TestProperties:
    @pytest.mark.parametrize("price, amount", [(1.0, 1.0), (3200.0, 2.5), (0.05, 10_000.0)])
    def test_flat_price_lp_equals_hold(self, price: float, amount: float) -> None:
        assert lp_vs_hold(price, price, amount).impermanent_loss == pytest.approx(0.0, abs=1e-6)

    @pytest.mark.parametrize("frequency", ["none", "daily", "weekly", "monthly"])
    def test_fees_non_decreasing_in_days(self, frequency: str) -> None:
        fees = [fees_earned(5_000.0, 15.0, d, frequency) for d in (1, 30, 90, 365, 730)]
        assert fees == sorted(fees)

    def test_fee_compounding_overflow_is_infinite(self) -> None:
        assert fees_earned(1000.0, 100.0, 10_000_000, CompoundingFrequency.DAILY) == math.inf
        net = net_with_fees(1000.0, 1000.0, math.inf)
        assert net.is_profitable

    def test_deterministic(self) -> None:
        a = simulate_lp_position(100.0, 137.0, 5_000.0, 18.0, 90, "weekly")
        b = simulate_lp_position(100.0, 137.0, 5_000.0, 18.0, 90, "weekly")
        assert a == b
        assert impermanent_loss(1.37) == impermanent_loss(1.37)
