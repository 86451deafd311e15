"""Tests for the portfolio collection."""

import math

import pytest

from defi_sim.position.models import Asset, PositionType
from defi_sim.position.portfolio import Portfolio, counter_ids

ASSET = Asset("usdc", "USDC", "USD Coin", 1.0, 0.05, 0.8)


@pytest.fixture
def portfolio() -> Portfolio:
    return Portfolio(clock=lambda: 1_000)


class TestAdd:
    def test_add_assigns_sequential_ids(self, portfolio: Portfolio) -> None:
        a = portfolio.add(ASSET, PositionType.DEPOSIT, 10.0)
        b = portfolio.add(ASSET, PositionType.BORROW, 5.0)
        assert (a.id, b.id) == ("pos-0", "pos-1")
        assert a.created_at == 1_000

    def test_add_accepts_string_type(self, portfolio: Portfolio) -> None:
        pos = portfolio.add(ASSET, "borrow", 1.0)
        assert pos.position_type is PositionType.BORROW

    @pytest.mark.parametrize("amount", [0, -1.0, math.nan, math.inf])
    def test_invalid_amount_rejected(self, portfolio: Portfolio, amount: float) -> None:
        with pytest.raises(ValueError):
            portfolio.add(ASSET, PositionType.DEPOSIT, amount)
        assert len(portfolio) == 0

    def test_ids_are_scoped_per_portfolio(self) -> None:
        first = Portfolio().add(ASSET, PositionType.DEPOSIT, 1.0)
        second = Portfolio().add(ASSET, PositionType.DEPOSIT, 1.0)
        assert first.id == second.id == "pos-0"

    def test_custom_id_factory(self) -> None:
        p = Portfolio(id_factory=counter_ids("x-"))
        assert p.add(ASSET, PositionType.DEPOSIT, 1.0).id == "x-0"


class TestMutation:
    def test_remove(self, portfolio: Portfolio) -> None:
        pos = portfolio.add(ASSET, PositionType.DEPOSIT, 10.0)
        assert portfolio.remove(pos.id) is True
        assert portfolio.remove(pos.id) is False
        assert len(portfolio) == 0

    def test_replace_amount_moves_to_end(self, portfolio: Portfolio) -> None:
        a = portfolio.add(ASSET, PositionType.DEPOSIT, 10.0)
        b = portfolio.add(ASSET, PositionType.BORROW, 5.0)
        replaced = portfolio.replace_amount(a.id, 20.0)
        assert replaced is not None
        assert replaced.id != a.id
        assert [p.id for p in portfolio] == [b.id, replaced.id]
        assert replaced.amount == 20.0

    def test_replace_unknown_returns_none(self, portfolio: Portfolio) -> None:
        assert portfolio.replace_amount("missing", 1.0) is None

    def test_replace_with_bad_amount_keeps_position(self, portfolio: Portfolio) -> None:
        a = portfolio.add(ASSET, PositionType.DEPOSIT, 10.0)
        with pytest.raises(ValueError):
            portfolio.replace_amount(a.id, 0.0)
        assert portfolio.positions == (a,)

    def test_clear_and_partition(self, portfolio: Portfolio) -> None:
        portfolio.add(ASSET, PositionType.DEPOSIT, 10.0)
        portfolio.add(ASSET, PositionType.BORROW, 5.0)
        assert len(portfolio.deposits()) == 1
        assert len(portfolio.borrows()) == 1
        portfolio.clear()
        assert portfolio.positions == ()

    def test_positions_snapshot_is_immutable(self, portfolio: Portfolio) -> None:
        portfolio.add(ASSET, PositionType.DEPOSIT, 10.0)
        snapshot = portfolio.positions
        portfolio.add(ASSET, PositionType.DEPOSIT, 1.0)
        assert len(snapshot) == 1
