"""
Reference-price normalisation.

Price feeds publish a mantissa and a base-10 exponent (e.g. price=200000000,
expo=-8 for 2.0). The engine wants the reference price as a 10^18 fixed-point
int. Fetching, freshness and signature checks belong to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidCurveParameters
from .fixed_point import require_uint

_SCALE_DIGITS = 18


@dataclass(frozen=True)
class OraclePrice:
    """A published price `price * 10**expo`."""

    price: int
    expo: int

    def __post_init__(self) -> None:
        if isinstance(self.price, bool) or not isinstance(self.price, int):
            raise InvalidCurveParameters(f"oracle price must be an int: {self.price!r}")
        if self.price <= 0:
            raise InvalidCurveParameters(f"oracle price must be positive: {self.price}")
        if isinstance(self.expo, bool) or not isinstance(self.expo, int):
            raise InvalidCurveParameters(f"oracle expo must be an int: {self.expo!r}")

    def to_fixed(self) -> int:
        return normalize_oracle_price(self.price, self.expo)


def normalize_oracle_price(price: int, expo: int) -> int:
    """
    Rescale `price * 10**expo` to 10^18 fixed point, rounding down.

    Raises:
        InvalidCurveParameters: If the price is not positive or rounds to zero.
    """
    if price <= 0:
        raise InvalidCurveParameters(f"oracle price must be positive: {price}")
    shift = _SCALE_DIGITS + expo
    if shift >= 0:
        scaled = price * 10**shift
    else:
        scaled = price // 10**(-shift)
    if scaled == 0:
        raise InvalidCurveParameters(f"oracle price {price}e{expo} is below fixed-point resolution")
    return require_uint("reference_price", scaled)
