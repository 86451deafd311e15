"""Runtime settings read from environment variables (and an optional .env file)."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from defi_sim.data.constants import LIVE_FETCH_TIMEOUT
from defi_sim.data.interfaces import Protocol

logger = logging.getLogger(__name__)

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """Dashboard defaults.

    Environment variables:
        DEFI_SIM_PROTOCOL: "aave" or "compound".
        DEFI_SIM_LIVE_DATA: truthy to start in live-data mode.
        DEFI_SIM_FETCH_TIMEOUT: live fetch timeout in seconds.
        DEFI_SIM_TIMEFRAME_DAYS: default projection horizon.
        DEFI_SIM_PRICE_SHOCK_PCT: default price shock.
        DEFI_SIM_LOG_LEVEL: logging level name.
    """

    protocol: Protocol = Protocol.AAVE
    use_live_data: bool = False
    fetch_timeout: float = LIVE_FETCH_TIMEOUT
    timeframe_days: int = 30
    price_shock_pct: float = 0.0
    log_level: str = "INFO"


def load_env_file(path: Path) -> None:
    """Load KEY=VALUE lines into os.environ without overriding existing values."""
    if not path.exists():
        return
    for line in path.read_text().splitlines():
        line = line.strip()
        if line and not line.startswith("#") and "=" in line:
            key, _, value = line.partition("=")
            os.environ.setdefault(key.strip(), value.strip())


def _parse(env: Mapping[str, str], name: str, convert, default):
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return convert(raw.strip())
    except ValueError:
        logger.warning("Ignoring invalid %s=%r; using %r", name, raw, default)
        return default


def load_settings(env: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from ``env`` (defaults to ``os.environ``)."""
    env = os.environ if env is None else env
    defaults = Settings()
    return Settings(
        protocol=_parse(env, "DEFI_SIM_PROTOCOL", lambda v: Protocol(v.lower()), defaults.protocol),
        use_live_data=_parse(
            env, "DEFI_SIM_LIVE_DATA", lambda v: v.lower() in _TRUTHY, defaults.use_live_data
        ),
        fetch_timeout=_parse(env, "DEFI_SIM_FETCH_TIMEOUT", float, defaults.fetch_timeout),
        timeframe_days=_parse(env, "DEFI_SIM_TIMEFRAME_DAYS", int, defaults.timeframe_days),
        price_shock_pct=_parse(env, "DEFI_SIM_PRICE_SHOCK_PCT", float, defaults.price_shock_pct),
        log_level=env.get("DEFI_SIM_LOG_LEVEL", defaults.log_level).strip().upper() or defaults.log_level,
    )
