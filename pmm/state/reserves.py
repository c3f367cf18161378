"""
Pool reserves as seen by the pricing engine.

The engine only reads reserves; applying a quoted amount to real balances is
the caller's job.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..core.fixed_point import require_uint


# Type alias
Amount = int  # Non-negative fixed-point integer (10^18 scale)


@dataclass(frozen=True)
class ReserveState:
    """Current base/quote holdings of a pool."""

    base: Amount
    quote: Amount

    def __post_init__(self) -> None:
        require_uint("base", self.base)
        require_uint("quote", self.quote)

    def is_empty(self) -> bool:
        """True when either side holds nothing."""
        return self.base == 0 or self.quote == 0
