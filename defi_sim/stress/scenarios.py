"""Price shock scenario presets — historical-style and custom."""

from dataclasses import dataclass

from defi_sim.simulation.scenario import ScenarioConfig


@dataclass(frozen=True)
class PriceShockScenario:
    """A named, uniform price shock held over a horizon.

    Attributes:
        name: Short identifier.
        description: Human-readable explanation.
        price_shock_pct: Percentage move applied to every asset (e.g. -30.0).
        timeframe_days: Projection horizon in days.
    """

    name: str
    description: str
    price_shock_pct: float
    timeframe_days: int

    def to_config(self) -> ScenarioConfig:
        return ScenarioConfig(
            timeframe_days=self.timeframe_days,
            price_shock_pct=self.price_shock_pct,
        )


MILD_CORRECTION = PriceShockScenario(
    name="Mild Correction",
    description="A routine 10% pullback across the market over a month.",
    price_shock_pct=-10.0,
    timeframe_days=30,
)

BEAR_MARKET = PriceShockScenario(
    name="Bear Market",
    description="Sustained 30% drawdown held for a quarter. "
    "Tests whether carry can offset lost collateral value.",
    price_shock_pct=-30.0,
    timeframe_days=90,
)

BLACK_THURSDAY = PriceShockScenario(
    name="March 2020 Black Thursday",
    description="COVID crash: crypto prices roughly halved within a day, "
    "triggering liquidation cascades across lending markets.",
    price_shock_pct=-50.0,
    timeframe_days=7,
)

BULL_RUN = PriceShockScenario(
    name="Bull Run",
    description="Broad 25% rally over a quarter.",
    price_shock_pct=25.0,
    timeframe_days=90,
)

PRESET_SCENARIOS = [MILD_CORRECTION, BEAR_MARKET, BLACK_THURSDAY, BULL_RUN]


def create_custom_scenario(
    name: str,
    price_shock_pct: float,
    timeframe_days: int = 30,
    description: str = "Custom scenario",
) -> PriceShockScenario:
    """Factory for user-defined shock scenarios."""
    return PriceShockScenario(
        name=name,
        description=description,
        price_shock_pct=price_shock_pct,
        timeframe_days=timeframe_days,
    )
