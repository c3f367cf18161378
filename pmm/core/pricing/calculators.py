"""Per-regime swap calculators.

One pure function per (regime, side). Each has an exact-in and an exact-out
branch and returns the priced amount without checking it against the pool;
the engine runs the post-condition.

Balanced and quote-excess pools price on the base-side curve (target B0,
price i). Balanced pools anchor at B0 so the closed forms reduce to the
textbook ones; quote-excess pools anchor at the live base reserve B.
Base-excess pools price on the quote-side curve (target Q0, price 1/i)
anchored at the live quote reserve Q.

Rounding always favours the pool: amounts paid out are floored, amounts
charged are ceiled.
"""

from __future__ import annotations

from ...state.curve_params import CurveParameters
from ...state.reserves import ReserveState
from ..curve_integrator import general_integrate
from ..curve_solver import solve_buying, solve_selling
from ..errors import InsufficientLiquidity
from ..fixed_point import ONE, mul_div_ceil
from .types import SwapRequest


# -- Base-side curve ----------------------------------------------------------


def _base_curve_sell_base(anchor: int, params: CurveParameters, request: SwapRequest) -> int:
    b0, i, k = params.target_base, params.reference_price, params.depth
    if request.exact_in:
        # pool takes ΔB base, pays the area under the curve in quote
        return general_integrate(b0, anchor + request.amount, anchor, i, k)
    # base needed so that the pool pays exactly ΔQ quote
    return solve_selling(b0, anchor, request.amount, i, k)


def _base_curve_buy_base(anchor: int, params: CurveParameters, request: SwapRequest) -> int:
    b0, i, k = params.target_base, params.reference_price, params.depth
    if request.exact_in:
        # base paid out for ΔQ quote
        return solve_buying(b0, anchor, request.amount, i, k)
    if k == 0:
        # flat curve: no bound at the anchor, the live reserve is checked by the guards
        return mul_div_ceil(request.amount, i, ONE)
    if request.amount >= anchor:
        raise InsufficientLiquidity(
            f"cannot buy {request.amount} base against a curve anchored at {anchor}"
        )
    return general_integrate(b0, anchor, anchor - request.amount, i, k, round_up=True)


def balanced_sell_base(reserves: ReserveState, params: CurveParameters, request: SwapRequest) -> int:
    return _base_curve_sell_base(params.target_base, params, request)


def balanced_buy_base(reserves: ReserveState, params: CurveParameters, request: SwapRequest) -> int:
    return _base_curve_buy_base(params.target_base, params, request)


def quote_excess_sell_base(reserves: ReserveState, params: CurveParameters, request: SwapRequest) -> int:
    return _base_curve_sell_base(reserves.base, params, request)


def quote_excess_buy_base(reserves: ReserveState, params: CurveParameters, request: SwapRequest) -> int:
    return _base_curve_buy_base(reserves.base, params, request)


# -- Quote-side curve ---------------------------------------------------------


def base_excess_sell_base(reserves: ReserveState, params: CurveParameters, request: SwapRequest) -> int:
    q0, q, i, k = params.target_quote, reserves.quote, params.reference_price, params.depth
    if request.exact_in:
        # quote paid out for ΔB base
        return solve_buying(q0, q, request.amount, i, k, inverse_price=True)
    if request.amount >= q:
        raise InsufficientLiquidity(f"cannot pay {request.amount} quote from {q}")
    # base charged for moving the quote reserve from Q down to Q - ΔQ
    return general_integrate(q0, q, q - request.amount, i, k, round_up=True, inverse_price=True)


def base_excess_buy_base(reserves: ReserveState, params: CurveParameters, request: SwapRequest) -> int:
    q0, q, i, k = params.target_quote, reserves.quote, params.reference_price, params.depth
    if request.exact_in:
        # pool takes ΔQ quote, pays the area under the quote curve in base
        return general_integrate(q0, q + request.amount, q, i, k, inverse_price=True)
    # quote needed so that the pool pays exactly ΔB base
    return solve_selling(q0, q, request.amount, i, k, inverse_price=True)
