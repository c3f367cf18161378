"""Tests for pmm/core/pricing/engine.py: dispatch table, guards and results.

Reference pool: B0 = 1000, Q0 = 2000, i = 2, k = 0.1 (all scaled by ONE).
"""

from __future__ import annotations

import pytest

from pmm import (
    CurveParameters,
    PricingEngine,
    RegimeTag,
    ReserveState,
    StaticTargets,
    SwapDirection,
    SwapRequest,
    ValueConservingTargets,
    compute_swap,
    quote_swap,
)
from pmm.core import cpmm
from pmm.core.errors import (
    BothBalancesNonZero,
    BothBalancesRequired,
    InsufficientLiquidity,
    InvalidAmount,
    InvalidDepthParameter,
    InvariantViolation,
)
from pmm.core.fixed_point import ONE
from pmm.core.pricing.engine import _DISPATCH

B0 = 1000 * ONE
Q0 = 2000 * ONE
I = 2 * ONE
K = ONE // 10

BALANCED = ReserveState(B0, Q0)
BASE_SHORT = ReserveState(900 * ONE, 2200 * ONE)
QUOTE_SHORT = ReserveState(1100 * ONE, 1800 * ONE)


def _params(k: int = K) -> CurveParameters:
    return CurveParameters(target_base=B0, target_quote=Q0, reference_price=I, depth=k)


def sell_in(amount: int) -> SwapRequest:
    return SwapRequest(SwapDirection.EXACT_IN, True, amount)


def sell_out(amount: int) -> SwapRequest:
    return SwapRequest(SwapDirection.EXACT_OUT, True, amount)


def buy_in(amount: int) -> SwapRequest:
    return SwapRequest(SwapDirection.EXACT_IN, False, amount)


def buy_out(amount: int) -> SwapRequest:
    return SwapRequest(SwapDirection.EXACT_OUT, False, amount)


# ---------------------------------------------------------------------------
# dispatch table
# ---------------------------------------------------------------------------

def test_dispatch_covers_every_regime_and_side():
    assert set(_DISPATCH) == {(tag, side) for tag in RegimeTag for side in (True, False)}


# ---------------------------------------------------------------------------
# balanced scenario
# ---------------------------------------------------------------------------

class TestBalancedScenario:
    def test_sell_ten_base_matches_closed_form(self):
        d = 10 * ONE
        expected = (I * d * ((ONE - K) * (B0 + d) + K * B0)) // (ONE * ONE * (B0 + d))
        out = compute_swap(BALANCED, _params(), sell_in(d))
        assert out == expected

    def test_sell_ten_base_sits_between_constant_product_and_flat(self):
        out = compute_swap(BALANCED, _params(), sell_in(10 * ONE))
        cp_out, _ = cpmm.swap_exact_in(B0, Q0, 10 * ONE)
        assert cp_out < out < 20 * ONE

    def test_exact_out_charges_at_least_the_flat_price(self):
        paid = compute_swap(BALANCED, _params(), buy_out(10 * ONE))
        assert paid > 20 * ONE

    def test_zero_amount(self):
        for request in (sell_in(0), sell_out(0), buy_in(0), buy_out(0)):
            assert compute_swap(BALANCED, _params(), request) == 0


# ---------------------------------------------------------------------------
# regime pricing direction
# ---------------------------------------------------------------------------

class TestRegimes:
    def test_base_short_pool_pays_more_than_reference_for_base(self):
        assert compute_swap(BASE_SHORT, _params(), sell_in(ONE)) > I

    def test_base_short_pool_charges_more_than_reference_for_base(self):
        assert compute_swap(BASE_SHORT, _params(), buy_out(ONE)) > I

    def test_quote_short_pool_pays_less_than_reference_for_base(self):
        assert compute_swap(QUOTE_SHORT, _params(), sell_in(ONE)) < I

    def test_quote_short_pool_charges_less_than_reference_for_base(self):
        assert compute_swap(QUOTE_SHORT, _params(), buy_out(ONE)) < I

    def test_quote_short_buy_whole_base_reserve(self):
        with pytest.raises(InsufficientLiquidity):
            compute_swap(QUOTE_SHORT, _params(), buy_out(QUOTE_SHORT.base))
        with pytest.raises(InsufficientLiquidity):
            compute_swap(QUOTE_SHORT, _params(), buy_out(QUOTE_SHORT.base + ONE))

    def test_flat_curve_exact_out_is_bounded_by_live_reserve_not_target(self):
        # balanced pool holding more base than its target
        reserves = ReserveState(1500 * ONE, 2500 * ONE)
        params = _params(0)
        base_out = compute_swap(reserves, params, buy_in(2100 * ONE))
        assert base_out == 1050 * ONE
        assert compute_swap(reserves, params, buy_out(base_out)) == 2100 * ONE
        assert compute_swap(reserves, params, buy_out(1500 * ONE - 1)) == 3000 * ONE - 2
        with pytest.raises(InsufficientLiquidity):
            compute_swap(reserves, params, buy_out(1500 * ONE))

    @pytest.mark.parametrize("reserves", [BALANCED, BASE_SHORT, QUOTE_SHORT])
    def test_flat_curve_prices_at_reference(self, reserves):
        amount = 7 * ONE + 3
        assert compute_swap(reserves, _params(0), sell_in(amount)) == I * amount // ONE
        assert compute_swap(reserves, _params(0), buy_in(amount)) == amount * ONE // I


# ---------------------------------------------------------------------------
# constant-product limit
# ---------------------------------------------------------------------------

class TestConstantProductLimit:
    @pytest.mark.parametrize("amount", [1, 10**9, 10 * ONE, 500 * ONE])
    def test_all_four_directions(self, amount):
        params = _params(ONE)
        assert compute_swap(BALANCED, params, sell_in(amount)) == cpmm.swap_exact_in(B0, Q0, amount)[0]
        assert compute_swap(BALANCED, params, buy_in(amount)) == cpmm.swap_exact_in(Q0, B0, amount)[0]
        assert compute_swap(BALANCED, params, sell_out(amount)) == cpmm.swap_exact_out(B0, Q0, amount)[0]
        assert compute_swap(BALANCED, params, buy_out(amount)) == cpmm.swap_exact_out(Q0, B0, amount)[0]


# ---------------------------------------------------------------------------
# rejections
# ---------------------------------------------------------------------------

class TestRejections:
    def test_depth_above_one(self):
        engine = PricingEngine(StaticTargets(B0, Q0), ONE + 1)
        with pytest.raises(InvalidDepthParameter):
            engine.compute_swap(BALANCED, I, sell_in(ONE))

    @pytest.mark.parametrize("reserves", [ReserveState(0, Q0), ReserveState(B0, 0)])
    def test_empty_side(self, reserves):
        with pytest.raises(BothBalancesRequired):
            compute_swap(reserves, _params(), sell_in(ONE))
        assert BothBalancesNonZero is BothBalancesRequired

    def test_exact_out_of_whole_quote_reserve(self):
        with pytest.raises(InsufficientLiquidity):
            compute_swap(BALANCED, _params(), sell_out(Q0))

    def test_exact_in_that_would_drain_the_pool(self):
        # flat curve: 1000 base buys 2000 quote, the whole reserve
        with pytest.raises(InsufficientLiquidity):
            compute_swap(BALANCED, _params(0), sell_in(B0))

    def test_both_sides_short(self):
        with pytest.raises(InvariantViolation):
            compute_swap(ReserveState(B0 - 1, Q0 - 1), _params(), sell_in(ONE))

    def test_negative_amount(self):
        with pytest.raises(InvalidAmount):
            sell_in(-1)

    def test_direction_must_be_enum(self):
        with pytest.raises(TypeError):
            SwapRequest("exact_in", True, ONE)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# quote_swap / PricingEngine
# ---------------------------------------------------------------------------

class TestQuoteSwap:
    def test_ok_result(self):
        r = quote_swap(BASE_SHORT, _params(), sell_in(ONE))
        assert r.ok
        assert r.regime is RegimeTag.BASE_EXCESS
        assert r.amount == compute_swap(BASE_SHORT, _params(), sell_in(ONE))
        assert r.error is None and r.rejection is None

    def test_error_result(self):
        r = quote_swap(BALANCED, _params(), sell_out(Q0))
        assert not r.ok
        assert r.amount is None
        assert isinstance(r.error, InsufficientLiquidity)
        assert r.rejection == "InsufficientLiquidity"

    def test_engine_strategy_errors_become_results(self):
        r = PricingEngine(StaticTargets(B0, Q0), ONE + 1).quote_swap(BALANCED, I, sell_in(ONE))
        assert not r.ok
        assert isinstance(r.error, InvalidDepthParameter)


class TestPricingEngine:
    def test_static_engine_matches_functional_api(self):
        engine = PricingEngine(StaticTargets(B0, Q0), K)
        assert engine.compute_swap(BASE_SHORT, I, sell_in(5 * ONE)) == compute_swap(BASE_SHORT, _params(), sell_in(5 * ONE))

    @pytest.mark.parametrize("reserves", [BALANCED, BASE_SHORT])
    def test_dynamic_engine_derives_the_same_targets(self, reserves):
        # both pools hold 4000 quote of value at i = 2
        engine = PricingEngine(ValueConservingTargets(), K)
        for request in (sell_in(5 * ONE), sell_out(5 * ONE), buy_in(5 * ONE), buy_out(5 * ONE)):
            assert engine.compute_swap(reserves, I, request) == compute_swap(reserves, _params(), request)

    def test_dynamic_engine_reprices_with_the_reference(self):
        engine = PricingEngine(ValueConservingTargets(), K)
        low = engine.compute_swap(BALANCED, I, sell_in(ONE))
        high = engine.compute_swap(BALANCED, 3 * ONE, sell_in(ONE))
        assert high > low

    def test_inputs_are_not_mutated(self):
        engine = PricingEngine(StaticTargets(B0, Q0), K)
        reserves = ReserveState(B0, Q0)
        engine.compute_swap(reserves, I, sell_in(ONE))
        assert reserves == ReserveState(B0, Q0)
