"""
Pool regime ("R status") classification.

The regime is never stored: it is recomputed on every call from the live
reserves and the equilibrium targets, checking the two inequalities in order.

    B < B0            -> BASE_EXCESS   (R above one)
    Q < Q0            -> QUOTE_EXCESS  (R below one)
    otherwise         -> BALANCED      (R = one)

The tag names follow the R-status convention, not which reserve is physically
larger: BASE_EXCESS is the state where the base reserve sits *below* its
target. In that state base is priced above the reference price, so selling
base to the pool pays out more than `i` per unit and buying base costs more.
QUOTE_EXCESS is the mirror image. Classification only ever looks at the
inequalities; never infer it from the names.
"""

from __future__ import annotations

from enum import Enum, unique

from ..state.curve_params import CurveParameters
from ..state.reserves import ReserveState
from .errors import InvariantViolation


@unique
class RegimeTag(Enum):
    BALANCED = "balanced"
    BASE_EXCESS = "base_excess"
    QUOTE_EXCESS = "quote_excess"


def classify_regime(reserves: ReserveState, params: CurveParameters) -> RegimeTag:
    """First matching inequality wins; both holding at once is an invariant violation."""
    base_short = reserves.base < params.target_base
    quote_short = reserves.quote < params.target_quote
    if base_short and quote_short:
        raise InvariantViolation(
            "reserves below both targets: "
            f"base={reserves.base} < {params.target_base}, quote={reserves.quote} < {params.target_quote}"
        )
    if base_short:
        return RegimeTag.BASE_EXCESS
    if quote_short:
        return RegimeTag.QUOTE_EXCESS
    return RegimeTag.BALANCED
