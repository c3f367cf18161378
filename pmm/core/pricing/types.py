"""Request/result types for the PMM pricing engine.

All types are frozen dataclasses (immutable).

Units/conventions:
- every amount is a 10^18 fixed-point int in the units of its own asset,
- `selling_base=True` means the taker gives base and receives quote,
- EXACT_IN prices the output for a given input; EXACT_OUT prices the input
  needed for a given output.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, unique

from ...state.reserves import Amount
from ..errors import PricingError
from ..fixed_point import require_uint
from ..regime import RegimeTag


@unique
class SwapDirection(Enum):
    EXACT_IN = "exact_in"
    EXACT_OUT = "exact_out"


@dataclass(frozen=True)
class SwapRequest:
    """One priced trade: which way, which side is fixed, and by how much."""

    direction: SwapDirection
    selling_base: bool
    amount: Amount

    def __post_init__(self) -> None:
        if not isinstance(self.direction, SwapDirection):
            raise TypeError(f"direction must be a SwapDirection: {self.direction!r}")
        require_uint("amount", self.amount)

    @property
    def exact_in(self) -> bool:
        return self.direction is SwapDirection.EXACT_IN

    @property
    def asset_in(self) -> str:
        return "base" if self.selling_base else "quote"

    @property
    def asset_out(self) -> str:
        return "quote" if self.selling_base else "base"


@dataclass(frozen=True)
class SwapResult:
    """Result of a non-raising quote."""

    ok: bool
    amount: Amount | None = None
    regime: RegimeTag | None = None
    error: PricingError | None = None

    @property
    def rejection(self) -> str | None:
        if self.error is None:
            return None
        return type(self.error).__name__
