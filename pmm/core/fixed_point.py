"""
Fixed-point decimal arithmetic (scale 10^18, unsigned, integer-only).

Values are plain Python ints holding `real * ONE`. Every helper here states its
rounding direction in its name:

- `*_floor` rounds toward zero (what the pool pays out),
- `*_ceil` rounds up (what the pool charges).

Python ints never wrap, so multiply-then-divide is always computed on the full
product. Results are still required to fit an unsigned 256-bit word, matching
the on-chain representation the engine prices for.
"""

from __future__ import annotations

import math
from decimal import Decimal, InvalidOperation, ROUND_DOWN, localcontext
from typing import Union

from .errors import DivisionByZero, FixedPointOverflow, InvalidAmount


ONE: int = 10**18
MAX_UINT256: int = 2**256 - 1

DecimalLike = Union[Decimal, int, str]

# Enough digits for any uint256 plus the 18 fractional places.
_DECIMAL_PREC = 100


def require_uint(name: str, value: int) -> int:
    """Return `value` if it is a non-negative int that fits 256 bits."""
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidAmount(f"{name} must be an int: {value!r}")
    if value < 0:
        raise InvalidAmount(f"{name} must be non-negative: {value}")
    if value > MAX_UINT256:
        raise FixedPointOverflow(f"{name} exceeds uint256: {value}")
    return value


def _word(value: int) -> int:
    if value > MAX_UINT256:
        raise FixedPointOverflow(f"result exceeds uint256: {value}")
    return value


def ceil_div(numerator: int, denominator: int) -> int:
    if denominator == 0:
        raise DivisionByZero("division by zero")
    if numerator < 0 or denominator < 0:
        raise InvalidAmount("ceil_div expects non-negative operands")
    return -(-numerator // denominator)


def mul_div_floor(a: int, b: int, denominator: int) -> int:
    """floor(a * b / denominator) on the full-width product."""
    if denominator == 0:
        raise DivisionByZero("division by zero")
    return _word((a * b) // denominator)


def mul_div_ceil(a: int, b: int, denominator: int) -> int:
    """ceil(a * b / denominator) on the full-width product."""
    return _word(ceil_div(a * b, denominator))


def mul_floor(a: int, b: int) -> int:
    return mul_div_floor(a, b, ONE)


def mul_ceil(a: int, b: int) -> int:
    return mul_div_ceil(a, b, ONE)


def div_floor(a: int, b: int) -> int:
    return mul_div_floor(a, ONE, b)


def div_ceil(a: int, b: int) -> int:
    return mul_div_ceil(a, ONE, b)


def isqrt(n: int) -> int:
    """Integer square root, floor semantics."""
    if n < 0:
        raise InvalidAmount(f"isqrt expects a non-negative value: {n}")
    return math.isqrt(n)


def to_fixed(value: DecimalLike) -> int:
    """Convert a human decimal ("0.5", Decimal("2"), 3) into fixed-point, rounding down.

    I/O boundary only; pricing never goes through Decimal.
    """
    try:
        d = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation as exc:
        raise InvalidAmount(f"not a decimal value: {value!r}") from exc
    if d.is_nan() or d.is_infinite():
        raise InvalidAmount(f"not a finite decimal: {value!r}")
    if d < 0:
        raise InvalidAmount(f"fixed-point values must be non-negative: {value!r}")
    with localcontext() as ctx:
        ctx.prec = _DECIMAL_PREC
        scaled = d.scaleb(18).to_integral_value(rounding=ROUND_DOWN)
    return require_uint("value", int(scaled))


def from_fixed(value: int) -> Decimal:
    """Decimal view of a fixed-point int (logs and printing)."""
    with localcontext() as ctx:
        ctx.prec = _DECIMAL_PREC
        return Decimal(value).scaleb(-18)


__all__ = [
    "ONE",
    "MAX_UINT256",
    "require_uint",
    "ceil_div",
    "mul_div_floor",
    "mul_div_ceil",
    "mul_floor",
    "mul_ceil",
    "div_floor",
    "div_ceil",
    "isqrt",
    "to_fixed",
    "from_fixed",
]
