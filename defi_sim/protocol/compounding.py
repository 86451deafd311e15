"""Compounding frequencies shared by the LP fee and staking reward calculators."""

import math
from enum import Enum


class CompoundingFrequency(str, Enum):
    NONE = "none"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"

    @classmethod
    def parse(cls, value: "str | CompoundingFrequency") -> "CompoundingFrequency":
        """Accept an enum member or its lowercase name (e.g. "weekly")."""
        if isinstance(value, cls):
            return value
        return cls(str(value).strip().lower())


PERIODS_PER_YEAR: dict[CompoundingFrequency, int] = {
    CompoundingFrequency.DAILY: 365,
    CompoundingFrequency.WEEKLY: 52,
    CompoundingFrequency.MONTHLY: 12,
    CompoundingFrequency.YEARLY: 1,
}

# Options offered by the LP fee calculator
LP_FREQUENCIES = (
    CompoundingFrequency.NONE,
    CompoundingFrequency.DAILY,
    CompoundingFrequency.WEEKLY,
    CompoundingFrequency.MONTHLY,
)

STAKING_FREQUENCIES = tuple(CompoundingFrequency)


def compound_growth(base: float, exponent: float) -> float:
    """``base ** exponent`` that saturates to +/-inf instead of raising OverflowError."""
    try:
        return base**exponent
    except OverflowError:
        if base < 0 and float(exponent).is_integer() and int(exponent) % 2:
            return -math.inf
        return math.inf
