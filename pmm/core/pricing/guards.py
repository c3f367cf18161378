"""Pre- and post-conditions for `pmm.core.pricing`.

Each guard raises the typed `PricingError` for its condition and returns None
otherwise. Guards never touch the curve math; they only compare amounts
against the live reserves and the curve parameters.
"""

from __future__ import annotations

from ...state.curve_params import CurveParameters, validate_depth
from ...state.reserves import ReserveState
from ..errors import BothBalancesNonZero, InsufficientLiquidity
from .types import SwapRequest


def reserve_of(reserves: ReserveState, asset: str) -> int:
    return reserves.base if asset == "base" else reserves.quote


def guard_reserves(reserves: ReserveState) -> None:
    if reserves.is_empty():
        raise BothBalancesNonZero(reserves.base, reserves.quote)


def guard_depth(params: CurveParameters) -> None:
    validate_depth(params.depth)


def guard_fillable(reserves: ReserveState, request: SwapRequest) -> None:
    """An exact-out request may never ask for the whole reserve or more."""
    if request.exact_in:
        return
    available = reserve_of(reserves, request.asset_out)
    if request.amount >= available:
        raise InsufficientLiquidity(
            f"requested {request.amount} {request.asset_out} but the pool holds {available}"
        )


def check_payout(reserves: ReserveState, request: SwapRequest, amount: int) -> None:
    """Whatever the pool pays out must stay strictly below the live reserve."""
    paid = amount if request.exact_in else request.amount
    available = reserve_of(reserves, request.asset_out)
    if paid >= available:
        raise InsufficientLiquidity(
            f"payout {paid} {request.asset_out} would drain the pool ({available} held)"
        )


def check_all(reserves: ReserveState, params: CurveParameters, request: SwapRequest) -> None:
    """Run every pre-condition in the order the engine reports them."""
    guard_reserves(reserves)
    guard_depth(params)
    guard_fillable(reserves, request)
