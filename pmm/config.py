"""
YAML pool configuration.

A pool file looks like::

    k: "0.1"
    targets:
      mode: static          # or: dynamic
      target_base: "1000"
      target_quote: "2000"
    base_decimals: 18
    quote_decimals: 6
    oracle:                 # optional default reference price
      price: 200000000
      expo: -8

Decimal strings are human units and are converted to 10^18 fixed point on
load. `base_decimals` / `quote_decimals` describe the tokens' native units so
raw on-chain amounts can be brought to the engine's scale.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from .core.errors import ConfigError, PricingError
from .core.fixed_point import ceil_div, require_uint, to_fixed
from .core.oracle import OraclePrice
from .core.pricing import PricingEngine
from .core.targets import StaticTargets, TargetStrategy, ValueConservingTargets
from .state.curve_params import validate_depth

logger = logging.getLogger(__name__)

FIXED_DECIMALS = 18
TARGET_MODES = ("static", "dynamic")


def _require_mapping(obj: Any, *, name: str) -> dict[str, Any]:
    if not isinstance(obj, dict):
        raise ConfigError(f"{name} must be a mapping")
    return obj


def _require_int(obj: Any, *, name: str) -> int:
    if isinstance(obj, bool) or not isinstance(obj, int):
        raise ConfigError(f"{name} must be an integer")
    return obj


def _require_fixed(obj: Any, *, name: str) -> int:
    # Unquoted YAML decimals arrive as floats; to_fixed goes through str().
    if isinstance(obj, bool) or not isinstance(obj, (int, float, str)):
        raise ConfigError(f"{name} must be a decimal string or an integer")
    try:
        return to_fixed(obj)
    except PricingError as exc:
        raise ConfigError(f"{name}: {exc}") from exc


def _require_decimals(obj: Any, *, name: str) -> int:
    if obj is None:
        return FIXED_DECIMALS
    value = _require_int(obj, name=name)
    if not 0 <= value <= FIXED_DECIMALS:
        raise ConfigError(f"{name} must be in [0, {FIXED_DECIMALS}]: {value}")
    return value


@dataclass(frozen=True)
class PoolConfig:
    """Pricing configuration of one pool, in fixed point."""

    depth: int
    target_mode: str = "dynamic"
    target_base: int | None = None
    target_quote: int | None = None
    base_decimals: int = FIXED_DECIMALS
    quote_decimals: int = FIXED_DECIMALS
    oracle: OraclePrice | None = None

    def __post_init__(self) -> None:
        if self.target_mode not in TARGET_MODES:
            raise ConfigError(f"unknown targets mode: {self.target_mode!r}")
        if self.target_mode == "static" and (self.target_base is None or self.target_quote is None):
            raise ConfigError("static targets need target_base and target_quote")

    def strategy(self) -> TargetStrategy:
        if self.target_mode == "static":
            assert self.target_base is not None and self.target_quote is not None
            return StaticTargets(self.target_base, self.target_quote)
        return ValueConservingTargets()

    def from_native(self, asset: str, amount: int) -> int:
        """Scale a raw token amount (native decimals) to 10^18 fixed point."""
        require_uint(asset, amount)
        decimals = self.base_decimals if asset == "base" else self.quote_decimals
        return amount * 10 ** (FIXED_DECIMALS - decimals)

    def to_native(self, asset: str, amount: int, *, round_up: bool = False) -> int:
        """Inverse of `from_native`; rounds down unless `round_up` (amounts charged to a taker)."""
        decimals = self.base_decimals if asset == "base" else self.quote_decimals
        unit = 10 ** (FIXED_DECIMALS - decimals)
        return ceil_div(amount, unit) if round_up else amount // unit

    def reference_price(self) -> int | None:
        return None if self.oracle is None else self.oracle.to_fixed()


def parse_pool_config(obj: Any) -> PoolConfig:
    """Build a `PoolConfig` from an already-parsed YAML document."""
    root = _require_mapping(obj, name="pool config")
    if "k" not in root:
        raise ConfigError("pool config is missing k")
    depth = _require_fixed(root["k"], name="k")
    try:
        validate_depth(depth)
    except PricingError as exc:
        raise ConfigError(f"k: {exc}") from exc

    targets = _require_mapping(root.get("targets", {"mode": "dynamic"}), name="targets")
    mode = targets.get("mode", "dynamic")
    target_base = target_quote = None
    if mode == "static":
        target_base = _require_fixed(targets.get("target_base"), name="targets.target_base")
        target_quote = _require_fixed(targets.get("target_quote"), name="targets.target_quote")
        if target_base == 0 or target_quote == 0:
            raise ConfigError("static targets must be positive")

    oracle = None
    if root.get("oracle") is not None:
        raw = _require_mapping(root["oracle"], name="oracle")
        try:
            oracle = OraclePrice(
                price=_require_int(raw.get("price"), name="oracle.price"),
                expo=_require_int(raw.get("expo"), name="oracle.expo"),
            )
        except PricingError as exc:
            if isinstance(exc, ConfigError):
                raise
            raise ConfigError(f"oracle: {exc}") from exc

    return PoolConfig(
        depth=depth,
        target_mode=mode,
        target_base=target_base,
        target_quote=target_quote,
        base_decimals=_require_decimals(root.get("base_decimals"), name="base_decimals"),
        quote_decimals=_require_decimals(root.get("quote_decimals"), name="quote_decimals"),
        oracle=oracle,
    )


def load_pool_config(path: Path | str) -> PoolConfig:
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"cannot read pool config {path}: {exc}") from exc
    try:
        obj = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid YAML in {path}: {exc}") from exc
    config = parse_pool_config(obj)
    logger.info("loaded pool config %s (k=%d, targets=%s)", path, config.depth, config.target_mode)
    return config


def build_engine(config: PoolConfig) -> PricingEngine:
    return PricingEngine(config.strategy(), config.depth)
