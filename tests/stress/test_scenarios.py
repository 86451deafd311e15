"""Tests for price shock scenario presets."""

import pytest

from defi_sim.simulation.scenario import ScenarioConfig
from defi_sim.stress.scenarios import (
    BLACK_THURSDAY,
    PRESET_SCENARIOS,
    create_custom_scenario,
)


class TestPresets:
    def test_presets_have_unique_names(self) -> None:
        names = [s.name for s in PRESET_SCENARIOS]
        assert len(names) == len(set(names))

    @pytest.mark.parametrize("scenario", PRESET_SCENARIOS, ids=lambda s: s.name)
    def test_presets_within_bounds(self, scenario) -> None:
        assert -50.0 <= scenario.price_shock_pct <= 50.0
        assert 1 <= scenario.timeframe_days <= 365
        assert scenario.description

    def test_black_thursday(self) -> None:
        assert BLACK_THURSDAY.price_shock_pct == -50.0
        assert BLACK_THURSDAY.timeframe_days == 7

    def test_to_config(self) -> None:
        assert BLACK_THURSDAY.to_config() == ScenarioConfig(timeframe_days=7, price_shock_pct=-50.0)


class TestCustomScenario:
    def test_defaults(self) -> None:
        s = create_custom_scenario("Flat", 0.0)
        assert s.timeframe_days == 30
        assert s.description == "Custom scenario"

    def test_custom_values(self) -> None:
        s = create_custom_scenario("Dip", -15.0, timeframe_days=60, description="Quick dip")
        assert s.to_config().price_shock_pct == -15.0
        assert s.to_config().timeframe_days == 60
