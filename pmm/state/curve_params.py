"""
Curve parameters for the PMM price curve.

`CurveParameters` is the engine's whole view of a pool's pricing
configuration: where equilibrium sits `(B0, Q0)`, the reference price `i` and
the depth `k`. All four are 10^18 fixed-point ints.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..core.errors import InvalidCurveParameters, InvalidDepthParameter
from ..core.fixed_point import ONE, require_uint


def validate_depth(k: int) -> int:
    """Return `k` if it lies in [0, ONE]."""
    require_uint("depth", k)
    if k > ONE:
        raise InvalidDepthParameter(k)
    return k


@dataclass(frozen=True)
class CurveParameters:
    """
    Equilibrium point, reference price and depth of one pool.

    Invariants:
    - target_base > 0 and target_quote > 0
    - reference_price > 0
    - 0 <= depth <= ONE (ONE is the constant-product limit)
    """

    target_base: int
    target_quote: int
    reference_price: int
    depth: int

    def __post_init__(self) -> None:
        for name in ("target_base", "target_quote", "reference_price"):
            value = require_uint(name, getattr(self, name))
            if value == 0:
                raise InvalidCurveParameters(f"{name} must be positive")
        validate_depth(self.depth)
