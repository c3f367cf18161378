"""`pmm.core.pricing`: swap pricing on the PMM curve.

Public API:
- `compute_swap(reserves, params, request) -> int` (raises on rejection)
- `quote_swap(reserves, params, request) -> SwapResult`
- `PricingEngine(strategy, depth)` for strategy-derived curve parameters
"""

from .engine import PricingEngine, compute_swap, quote_swap
from .types import SwapDirection, SwapRequest, SwapResult

__all__ = [
    "PricingEngine",
    "compute_swap",
    "quote_swap",
    "SwapDirection",
    "SwapRequest",
    "SwapResult",
]
