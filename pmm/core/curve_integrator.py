"""
Closed-form integral of the PMM price curve.

On one side of the pool the marginal price of the side asset, measured in the
other asset, is

    P(v) = p * (1 - k + k * (V0 / v)^2)

where V0 is that side's equilibrium target and p the reference price (i on the
base side, 1/i on the quote side). Moving the side reserve between two known
points V2 < V1 costs

    integral(V2..V1) P(v) dv = p * (V1 - V2) * (1 - k + k * V0^2 / (V1 * V2))

in the other asset. Everything is folded into one numerator/denominator pair
so only a single rounding step happens, in the direction the caller asks for.
"""

from __future__ import annotations

from .errors import InsufficientLiquidity, InvalidAmount, InvalidCurveParameters
from .fixed_point import ONE, mul_div_ceil, mul_div_floor


def general_integrate(
    v0: int,
    v1: int,
    v2: int,
    i: int,
    k: int,
    *,
    round_up: bool = False,
    inverse_price: bool = False,
) -> int:
    """
    Amount of the other asset between side reserves `v2` and `v1`.

    Args:
        v0: Equilibrium target of the side being integrated.
        v1: Larger side reserve.
        v2: Smaller side reserve (must stay positive).
        i: Reference price, quote per base (fixed-point).
        k: Depth in [0, ONE].
        round_up: Ceil instead of floor (use when the result is charged to the taker).
        inverse_price: Integrate the quote side, pricing in base (p = 1/i).

    Raises:
        InvalidCurveParameters: If v0 or i is zero.
        InvalidAmount: If the bounds are out of order.
        InsufficientLiquidity: If v2 is zero (the curve is unbounded there).
    """
    if v0 <= 0:
        raise InvalidCurveParameters("target is zero")
    if i <= 0:
        raise InvalidCurveParameters("reference price is zero")
    if v1 < v2:
        raise InvalidAmount(f"integration bounds out of order: v1={v1} < v2={v2}")
    if v2 <= 0:
        raise InsufficientLiquidity("integration would drain the side reserve")
    if v1 == v2:
        return 0

    # (V1 - V2) * ((1-k) * V1 * V2 + k * V0^2) / (V1 * V2), k still scaled by ONE
    span = (v1 - v2) * ((ONE - k) * v1 * v2 + k * v0 * v0)
    if inverse_price:
        scale, denominator = 1, i * v1 * v2
    else:
        scale, denominator = i, ONE * ONE * v1 * v2
    if round_up:
        return mul_div_ceil(span, scale, denominator)
    return mul_div_floor(span, scale, denominator)
