"""Exception types for the PMM pricing engine.

Every failure is a `PricingError` (a `ValueError`), so callers that only care
about "the quote was rejected" can catch one type. The subclasses let callers
tell apart bad parameters, empty pools and trades the curve cannot fill.
"""

from __future__ import annotations


class PricingError(ValueError):
    """Base class for every engine rejection."""


class InvalidDepthParameter(PricingError):
    """Raised when the depth parameter k exceeds ONE."""

    def __init__(self, k: int) -> None:
        self.k = k
        super().__init__(f"depth k must be in [0, ONE]: {k}")


class BothBalancesRequired(PricingError):
    """Raised when either reserve is zero."""

    def __init__(self, base: int, quote: int) -> None:
        self.base = base
        self.quote = quote
        super().__init__(f"both reserves must be positive: (base={base}, quote={quote})")


# Name used by the dispatch pre-conditions.
BothBalancesNonZero = BothBalancesRequired


class InsufficientLiquidity(PricingError):
    """Raised when a trade would meet or exceed the reserve it draws from."""


class NegativeDiscriminant(InsufficientLiquidity):
    """Raised when the curve quadratic has no real root."""


class DivisionByZero(PricingError, ZeroDivisionError):
    """Raised when a denominator collapses to zero."""


class InvariantViolation(PricingError):
    """Raised when reserves sit below both equilibrium targets at once."""


class InvalidCurveParameters(PricingError):
    """Raised when the reference price or a target is not positive."""


class InvalidAmount(PricingError):
    """Raised when an amount is negative, not an int, or out of range."""


class FixedPointOverflow(PricingError, OverflowError):
    """Raised when a result does not fit in an unsigned 256-bit word."""


class ConfigError(PricingError):
    """Raised when a pool configuration cannot be loaded."""
