"""Property tests for the pricing engine (Hypothesis)."""

from __future__ import annotations

import hypothesis.strategies as st
from hypothesis import given, settings

from pmm import CurveParameters, ReserveState, SwapDirection, SwapRequest, compute_swap, quote_swap
from pmm.core.fixed_point import ONE

B0 = 1000 * ONE
Q0 = 2000 * ONE
I = 2 * ONE

POOLS = [
    ReserveState(B0, Q0),
    ReserveState(900 * ONE, 2200 * ONE),
    ReserveState(1100 * ONE, 1800 * ONE),
    ReserveState(1500 * ONE, 2500 * ONE),
]

depths = st.integers(min_value=0, max_value=ONE)
amounts = st.integers(min_value=0, max_value=100 * ONE)
pools = st.sampled_from(POOLS)
directions = st.sampled_from(list(SwapDirection))


def _params(k: int) -> CurveParameters:
    return CurveParameters(target_base=B0, target_quote=Q0, reference_price=I, depth=k)


@settings(max_examples=300)
@given(reserves=pools, k=depths, direction=directions, selling_base=st.booleans(), a=amounts, b=amounts)
def test_monotone_in_amount(reserves, k, direction, selling_base, a, b):
    a, b = sorted((a, b))
    params = _params(k)
    lo = compute_swap(reserves, params, SwapRequest(direction, selling_base, a))
    hi = compute_swap(reserves, params, SwapRequest(direction, selling_base, b))
    assert lo <= hi


@settings(max_examples=300)
@given(k=depths, amount=amounts)
def test_round_trip_never_profits_selling_base(k, amount):
    reserves, params = POOLS[0], _params(k)
    quote_out = compute_swap(reserves, params, SwapRequest(SwapDirection.EXACT_IN, True, amount))
    base_needed = compute_swap(reserves, params, SwapRequest(SwapDirection.EXACT_OUT, True, quote_out))
    assert base_needed <= amount


@settings(max_examples=300)
@given(k=depths, amount=amounts)
def test_round_trip_never_profits_buying_base(k, amount):
    reserves, params = POOLS[0], _params(k)
    base_out = compute_swap(reserves, params, SwapRequest(SwapDirection.EXACT_IN, False, amount))
    quote_needed = compute_swap(reserves, params, SwapRequest(SwapDirection.EXACT_OUT, False, base_out))
    assert quote_needed <= amount


@given(reserves=pools, k=depths, direction=directions, selling_base=st.booleans(), amount=amounts)
def test_deterministic_and_consistent(reserves, k, direction, selling_base, amount):
    params = _params(k)
    request = SwapRequest(direction, selling_base, amount)
    first = compute_swap(reserves, params, request)
    assert compute_swap(reserves, params, request) == first
    result = quote_swap(reserves, params, request)
    assert result.ok and result.amount == first


@given(reserves=pools, k=depths, selling_base=st.booleans(), amount=amounts)
def test_exact_in_never_pays_the_whole_reserve(reserves, k, selling_base, amount):
    out = compute_swap(reserves, _params(k), SwapRequest(SwapDirection.EXACT_IN, selling_base, amount))
    assert out < (reserves.quote if selling_base else reserves.base)


@given(amount=amounts)
def test_flat_curve_is_symmetric(amount):
    params = _params(0)
    reserves = POOLS[0]
    assert compute_swap(reserves, params, SwapRequest(SwapDirection.EXACT_IN, True, amount)) == I * amount // ONE
    assert compute_swap(reserves, params, SwapRequest(SwapDirection.EXACT_IN, False, amount)) == amount * ONE // I


@given(reserves=pools, k=depths, direction=directions, selling_base=st.booleans(), a=amounts)
def test_strictly_increasing_for_whole_unit_steps(reserves, k, direction, selling_base, a):
    # floor/ceil can flatten sub-unit steps; one whole token always moves the price
    params = _params(k)
    lo = compute_swap(reserves, params, SwapRequest(direction, selling_base, a))
    hi = compute_swap(reserves, params, SwapRequest(direction, selling_base, a + ONE))
    assert lo < hi
