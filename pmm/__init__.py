"""
PMM pricing engine.

Prices swaps on a Proactive-Market-Maker curve from reserves, an equilibrium
point, a depth parameter k and an external reference price. Everything is
integer arithmetic on 10^18 fixed point.

Public API:
- `compute_swap(reserves, params, request) -> int`
- `quote_swap(reserves, params, request) -> SwapResult`
- `PricingEngine(strategy, depth)`
- `load_pool_config(path)` / `build_engine(config)`
"""

from .state import Amount, CurveParameters, ReserveState
from .core.fixed_point import ONE
from .core.regime import RegimeTag, classify_regime
from .core.targets import StaticTargets, TargetStrategy, ValueConservingTargets
from .core.pricing import (
    PricingEngine,
    SwapDirection,
    SwapRequest,
    SwapResult,
    compute_swap,
    quote_swap,
)
from .config import PoolConfig, build_engine, load_pool_config

__all__ = [
    "ONE",
    "Amount",
    "CurveParameters",
    "ReserveState",
    "RegimeTag",
    "classify_regime",
    "TargetStrategy",
    "StaticTargets",
    "ValueConservingTargets",
    "PricingEngine",
    "SwapDirection",
    "SwapRequest",
    "SwapResult",
    "compute_swap",
    "quote_swap",
    "PoolConfig",
    "build_engine",
    "load_pool_config",
]
