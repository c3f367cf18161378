"""
Quadratic solver for the PMM price curve.

The integrator answers "how much of the other asset does moving this side from
V to V±x cost". The solver answers the inverse question: given that amount,
how far does the side reserve move.

With C = amount / p (the other-asset amount expressed in side units), a = 1-k,
target V0 and anchor V, the two forms are:

    buying  (pool pays x of the side):    a*x^2 - ((1-k)*V + k*V0^2/V + C)*x + C*V = 0
    selling (pool receives x of the side): a*x^2 + ((1-k)*V + k*V0^2/V - C)*x - C*V = 0

At V = V0 these reduce to the textbook base forms

    a*x^2 - (C + B0)*x + C*B0 = 0      (smaller root)
    a*x^2 + (B0 - C)*x - C*B0 = 0      (positive root)

Buying takes the smaller root (0 <= x < V) and floors it: the taker receives
no more than they paid for. Selling takes the positive root and ceils it: the
taker never pays less than the curve asks.

Both equations are multiplied through by ONE * V * Cd so every coefficient is
an exact integer. `isqrt` gives a candidate root; one sign test of the integer
polynomial turns it into the exact floor/ceil, so no value leaks through the
square-root rounding.

k = ONE (a = 0) is the constant-product limit and is solved linearly:

    buying:  x = C*V^2 / (V0^2 + C*V)        (= C*B0/(C+B0) at V = B0)
    selling: x = C*V^2 / (V0^2 - C*V)        (= C*B0/(B0-C), needs C < B0)
"""

from __future__ import annotations

from typing import Tuple

from .errors import DivisionByZero, InsufficientLiquidity, InvalidCurveParameters, NegativeDiscriminant
from .fixed_point import ONE, ceil_div, isqrt, mul_div_ceil, mul_div_floor, require_uint


def _price_divided_out(amount: int, i: int, inverse_price: bool) -> Tuple[int, int]:
    """C = amount / p as an exact fraction (numerator, denominator)."""
    if inverse_price:
        # p = 1/i  ->  C = amount * i / ONE
        return amount * i, ONE
    # p = i  ->  C = amount * ONE / i
    return amount * ONE, i


def _check_curve(v0: int, v: int, i: int) -> None:
    if v0 <= 0:
        raise InvalidCurveParameters("target is zero")
    if i <= 0:
        raise InvalidCurveParameters("reference price is zero")
    if v <= 0:
        raise InsufficientLiquidity("side reserve is empty")


def solve_buying(v0: int, v: int, amount: int, i: int, k: int, *, inverse_price: bool = False) -> int:
    """
    Side asset paid out when the pool receives `amount` of the other asset.

    Returns floor(x) for the smaller root x of the buying form.

    Raises:
        NegativeDiscriminant: If the quadratic has no real root.
    """
    _check_curve(v0, v, i)
    if amount == 0:
        return 0
    c_num, c_den = _price_divided_out(amount, i, inverse_price)

    if k == 0:
        return mul_div_floor(c_num, 1, c_den)

    a = (ONE - k) * v * c_den
    b = ((ONE - k) * v * v + k * v0 * v0) * c_den + ONE * c_num * v
    c = ONE * c_num * v * v

    if k == ONE:
        return mul_div_floor(c, 1, b)

    disc = b * b - 4 * a * c
    if disc < 0:
        raise NegativeDiscriminant(f"no real root for buying form (disc={disc})")
    x = (b - isqrt(disc)) // (2 * a)
    # (b - s)/2a overshoots the root by less than one unit; step back if past it.
    if a * x * x - b * x + c < 0:
        x -= 1
    return require_uint("buying root", x)


def solve_selling(v0: int, v: int, amount: int, i: int, k: int, *, inverse_price: bool = False) -> int:
    """
    Side asset the pool must receive to pay out `amount` of the other asset.

    Returns ceil(x) for the positive root x of the selling form.

    Raises:
        InsufficientLiquidity: If the constant-product limit cannot reach `amount`.
        DivisionByZero: If `amount` sits exactly on that limit.
    """
    _check_curve(v0, v, i)
    if amount == 0:
        return 0
    c_num, c_den = _price_divided_out(amount, i, inverse_price)

    if k == 0:
        return mul_div_ceil(c_num, 1, c_den)

    a = (ONE - k) * v * c_den
    b = ((ONE - k) * v * v + k * v0 * v0) * c_den - ONE * c_num * v
    c = ONE * c_num * v * v

    if k == ONE:
        if b == 0:
            raise DivisionByZero("selling form denominator V0^2 - C*V is zero")
        if b < 0:
            raise InsufficientLiquidity("amount exceeds what the constant-product curve can pay out")
        return mul_div_ceil(c, 1, b)

    s = isqrt(b * b + 4 * a * c)
    x = ceil_div(s - b, 2 * a)
    # (s - b)/2a undershoots the root by less than one unit; step up if short.
    if a * x * x + b * x - c < 0:
        x += 1
    return require_uint("selling root", x)
