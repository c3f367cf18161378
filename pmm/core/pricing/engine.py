"""Dispatch-table engine for `pmm.core.pricing`.

``compute_swap(reserves, params, request)`` is the single pricing entry point.
It:

1. Runs the pre-conditions (non-empty pool, depth domain, fillable exact-out).
2. Classifies the regime from the live reserves and the targets.
3. Dispatches to the calculator for (regime, side).
4. Checks the post-condition against the live reserves.

``quote_swap`` is the non-raising twin: it returns a ``SwapResult`` carrying
either the amount or the error that ``compute_swap`` would have raised.
Nothing here mutates its inputs, so repeated calls are identical.
"""

from __future__ import annotations

import logging
from typing import Callable

from ...state.curve_params import CurveParameters
from ...state.reserves import ReserveState
from ..errors import PricingError
from ..regime import RegimeTag, classify_regime
from ..targets import TargetStrategy
from .calculators import (
    balanced_buy_base,
    balanced_sell_base,
    base_excess_buy_base,
    base_excess_sell_base,
    quote_excess_buy_base,
    quote_excess_sell_base,
)
from .guards import check_all, check_payout
from .types import SwapRequest, SwapResult

logger = logging.getLogger(__name__)

CalculatorFn = Callable[[ReserveState, CurveParameters, SwapRequest], int]

# Keyed by (regime, selling_base).
_DISPATCH: dict[tuple[RegimeTag, bool], CalculatorFn] = {
    (RegimeTag.BALANCED, True): balanced_sell_base,
    (RegimeTag.BALANCED, False): balanced_buy_base,
    (RegimeTag.QUOTE_EXCESS, True): quote_excess_sell_base,
    (RegimeTag.QUOTE_EXCESS, False): quote_excess_buy_base,
    (RegimeTag.BASE_EXCESS, True): base_excess_sell_base,
    (RegimeTag.BASE_EXCESS, False): base_excess_buy_base,
}


def _price(reserves: ReserveState, params: CurveParameters, request: SwapRequest) -> tuple[RegimeTag, int]:
    check_all(reserves, params, request)
    regime = classify_regime(reserves, params)
    if request.amount == 0:
        return regime, 0

    calculator = _DISPATCH[(regime, request.selling_base)]
    amount = calculator(reserves, params, request)
    check_payout(reserves, request, amount)
    logger.debug(
        "priced %s %s %s=%d -> %d via %s",
        regime.value,
        request.direction.value,
        request.asset_in if request.exact_in else request.asset_out,
        request.amount,
        amount,
        calculator.__name__,
    )
    return regime, amount


def compute_swap(reserves: ReserveState, params: CurveParameters, request: SwapRequest) -> int:
    """Price one swap.

    Exact-in returns the output amount (rounded down); exact-out returns the
    required input (rounded up).

    Raises:
        BothBalancesRequired: Either reserve is zero.
        InvalidDepthParameter: Depth above ONE.
        InsufficientLiquidity: The trade would reach or exceed a live reserve.
        InvariantViolation: Reserves sit below both targets.
        DivisionByZero: A curve denominator collapsed to zero.
    """
    _, amount = _price(reserves, params, request)
    return amount


def quote_swap(reserves: ReserveState, params: CurveParameters, request: SwapRequest) -> SwapResult:
    """Like ``compute_swap()`` but returns a ``SwapResult`` instead of raising."""
    try:
        regime, amount = _price(reserves, params, request)
    except PricingError as exc:
        logger.debug("quote rejected: %s: %s", type(exc).__name__, exc)
        return SwapResult(ok=False, error=exc)
    return SwapResult(ok=True, amount=amount, regime=regime)


class PricingEngine:
    """Binds a target strategy and a depth to the pure pricing functions."""

    def __init__(self, strategy: TargetStrategy, depth: int) -> None:
        self.strategy = strategy
        self.depth = depth

    def curve_parameters(self, reserves: ReserveState, reference_price: int) -> CurveParameters:
        return self.strategy.curve_parameters(reserves, reference_price, self.depth)

    def compute_swap(self, reserves: ReserveState, reference_price: int, request: SwapRequest) -> int:
        return compute_swap(reserves, self.curve_parameters(reserves, reference_price), request)

    def quote_swap(self, reserves: ReserveState, reference_price: int, request: SwapRequest) -> SwapResult:
        try:
            params = self.curve_parameters(reserves, reference_price)
        except PricingError as exc:
            return SwapResult(ok=False, error=exc)
        return quote_swap(reserves, params, request)

    def __repr__(self) -> str:
        return f"PricingEngine(strategy={self.strategy!r}, depth={self.depth})"
