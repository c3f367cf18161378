"""
Strategies that produce `CurveParameters` for a pricing call.

Two ways of placing the equilibrium point are supported, behind one interface:

- `StaticTargets`: the caller fixes (B0, Q0) up front. Targets drift away from
  the market as the reference price moves.
- `ValueConservingTargets`: (B0, Q0) are re-derived on every call from the live
  reserves and the reference price, assuming total value V = B*i + Q is
  conserved and that at equilibrium Q0 = i*B0:

      Q0 = V / 2,   B0 = Q0 / i

Both round down, which keeps the two regime inequalities mutually exclusive
for derived targets.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from ..state.curve_params import CurveParameters, validate_depth
from ..state.reserves import ReserveState
from .errors import InvalidCurveParameters
from .fixed_point import div_floor, mul_floor, require_uint


class TargetStrategy(Protocol):
    """Anything that can place the equilibrium point for a pricing call."""

    def curve_parameters(self, reserves: ReserveState, reference_price: int, depth: int) -> CurveParameters:
        ...


@dataclass(frozen=True)
class StaticTargets:
    """Caller-supplied equilibrium targets."""

    target_base: int
    target_quote: int

    def __post_init__(self) -> None:
        if require_uint("target_base", self.target_base) == 0:
            raise InvalidCurveParameters("target_base must be positive")
        if require_uint("target_quote", self.target_quote) == 0:
            raise InvalidCurveParameters("target_quote must be positive")

    def curve_parameters(self, reserves: ReserveState, reference_price: int, depth: int) -> CurveParameters:
        return CurveParameters(
            target_base=self.target_base,
            target_quote=self.target_quote,
            reference_price=reference_price,
            depth=depth,
        )


@dataclass(frozen=True)
class ValueConservingTargets:
    """Targets derived from live reserves: B0 = V/(2i), Q0 = V/2 with V = B*i + Q."""

    def curve_parameters(self, reserves: ReserveState, reference_price: int, depth: int) -> CurveParameters:
        return derive_targets(reserves, reference_price, depth)


def derive_targets(reserves: ReserveState, reference_price: int, depth: int) -> CurveParameters:
    """
    Equilibrium point under total-value conservation.

    Raises:
        InvalidCurveParameters: If the price is zero or the pool is too small to
            place a positive target on both sides.
    """
    validate_depth(depth)
    if require_uint("reference_price", reference_price) == 0:
        raise InvalidCurveParameters("reference_price must be positive")
    total_value = mul_floor(reserves.base, reference_price) + reserves.quote
    target_quote = total_value // 2
    target_base = div_floor(target_quote, reference_price)
    if target_base == 0 or target_quote == 0:
        raise InvalidCurveParameters(
            f"derived targets must be positive: (B0={target_base}, Q0={target_quote})"
        )
    return CurveParameters(
        target_base=target_base,
        target_quote=target_quote,
        reference_price=reference_price,
        depth=depth,
    )
