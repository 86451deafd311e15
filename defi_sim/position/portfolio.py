"""Ordered portfolio of simulated positions.

The portfolio is the only place positions are created or destroyed. The
calculators never mutate it; they receive a snapshot of ``positions``.
"""

from __future__ import annotations

import itertools
import math
import time
from typing import Callable, Iterator

from defi_sim.position.models import Asset, Position, PositionType


def counter_ids(prefix: str = "pos-") -> Callable[[], str]:
    """Monotonic id factory: ``pos-0``, ``pos-1``, ... scoped to one caller."""
    counter = itertools.count()
    return lambda: f"{prefix}{next(counter)}"


def _now_ms() -> int:
    return int(time.time() * 1000)


class Portfolio:
    """Mutable, ordered collection of positions.

    Parameters
    ----------
    id_factory : Callable[[], str] | None
        Produces a fresh position id per ``add``. Defaults to a per-instance
        counter.
    clock : Callable[[], int] | None
        Returns the creation timestamp in epoch milliseconds.
    """

    def __init__(
        self,
        id_factory: Callable[[], str] | None = None,
        clock: Callable[[], int] | None = None,
    ) -> None:
        self._id_factory = id_factory or counter_ids()
        self._clock = clock or _now_ms
        self._positions: list[Position] = []

    @property
    def positions(self) -> tuple[Position, ...]:
        """Read-only snapshot in insertion order."""
        return tuple(self._positions)

    def __len__(self) -> int:
        return len(self._positions)

    def __iter__(self) -> Iterator[Position]:
        return iter(tuple(self._positions))

    def add(self, asset: Asset, position_type: PositionType, amount: float) -> Position:
        """Append a new position.

        Raises:
            ValueError: If ``amount`` is not a finite positive number.
        """
        if not isinstance(amount, (int, float)) or not math.isfinite(amount) or amount <= 0:
            raise ValueError(f"Position amount must be a positive number, got {amount!r}")
        position = Position(
            id=self._id_factory(),
            asset=asset,
            position_type=PositionType(position_type),
            amount=float(amount),
            created_at=self._clock(),
        )
        self._positions.append(position)
        return position

    def remove(self, position_id: str) -> bool:
        """Remove a position by id. Returns False if no such position exists."""
        before = len(self._positions)
        self._positions = [p for p in self._positions if p.id != position_id]
        return len(self._positions) < before

    def replace_amount(self, position_id: str, amount: float) -> Position | None:
        """Change a position's amount by removing it and re-adding a new one.

        The replacement gets a new id and timestamp and moves to the end of
        the portfolio. Returns None if ``position_id`` is unknown.
        """
        existing = next((p for p in self._positions if p.id == position_id), None)
        if existing is None:
            return None
        # Validate before removing so a bad amount leaves the portfolio intact
        if not isinstance(amount, (int, float)) or not math.isfinite(amount) or amount <= 0:
            raise ValueError(f"Position amount must be a positive number, got {amount!r}")
        self.remove(position_id)
        return self.add(existing.asset, existing.position_type, amount)

    def clear(self) -> None:
        self._positions.clear()

    def deposits(self) -> list[Position]:
        return [p for p in self._positions if p.is_deposit]

    def borrows(self) -> list[Position]:
        return [p for p in self._positions if p.is_borrow]
