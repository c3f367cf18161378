"""
Constant-product reference pricing.

The PMM curve collapses to x * y = const when k = ONE. This module prices that
limit directly from two reserves so the engine's k = ONE branch has an
independent formula to be checked against.

Rounding follows the same rules as the engine:
- amount_out = floor(reserve_out * amount_in / (reserve_in + amount_in))
- amount_in  = ceil(reserve_in * amount_out / (reserve_out - amount_out))

Invariant: new_reserve_in * new_reserve_out >= reserve_in * reserve_out.
No fees are charged.
"""

from __future__ import annotations

from typing import Tuple

from ..state.reserves import Amount
from .errors import BothBalancesRequired, InsufficientLiquidity, InvariantViolation
from .fixed_point import mul_div_ceil, mul_div_floor, require_uint


def _check_reserves(reserve_in: Amount, reserve_out: Amount) -> None:
    require_uint("reserve_in", reserve_in)
    require_uint("reserve_out", reserve_out)
    if reserve_in == 0 or reserve_out == 0:
        raise BothBalancesRequired(reserve_in, reserve_out)


def _check_product(reserve_in: Amount, reserve_out: Amount, new_in: Amount, new_out: Amount) -> None:
    if new_in * new_out < reserve_in * reserve_out:
        raise InvariantViolation(
            f"constant product decreased: {new_in * new_out} < {reserve_in * reserve_out}"
        )


def swap_exact_in(
    reserve_in: Amount,
    reserve_out: Amount,
    amount_in: Amount,
) -> Tuple[Amount, Tuple[Amount, Amount]]:
    """
    Output for an exact input.

    Returns:
        Tuple of (amount_out, (new_reserve_in, new_reserve_out))
    """
    _check_reserves(reserve_in, reserve_out)
    require_uint("amount_in", amount_in)
    amount_out = mul_div_floor(reserve_out, amount_in, reserve_in + amount_in)
    new_in, new_out = reserve_in + amount_in, reserve_out - amount_out
    _check_product(reserve_in, reserve_out, new_in, new_out)
    return amount_out, (new_in, new_out)


def swap_exact_out(
    reserve_in: Amount,
    reserve_out: Amount,
    amount_out: Amount,
) -> Tuple[Amount, Tuple[Amount, Amount]]:
    """
    Input required for an exact output.

    Returns:
        Tuple of (amount_in, (new_reserve_in, new_reserve_out))

    Raises:
        InsufficientLiquidity: If amount_out would drain the output reserve.
    """
    _check_reserves(reserve_in, reserve_out)
    require_uint("amount_out", amount_out)
    if amount_out >= reserve_out:
        raise InsufficientLiquidity(
            f"cannot drain full reserve: amount_out ({amount_out}) >= reserve_out ({reserve_out})"
        )
    amount_in = mul_div_ceil(reserve_in, amount_out, reserve_out - amount_out)
    new_in, new_out = reserve_in + amount_in, reserve_out - amount_out
    _check_product(reserve_in, reserve_out, new_in, new_out)
    return amount_in, (new_in, new_out)
