"""Integer-only PMM pricing kernels.

Only the leaf modules are re-exported here; `regime`, `targets` and `pricing`
depend on `pmm.state` and are imported from `pmm` directly.
"""

from .curve_integrator import general_integrate
from .curve_solver import solve_buying, solve_selling
from .errors import (
    BothBalancesNonZero,
    BothBalancesRequired,
    ConfigError,
    DivisionByZero,
    FixedPointOverflow,
    InsufficientLiquidity,
    InvalidAmount,
    InvalidCurveParameters,
    InvalidDepthParameter,
    InvariantViolation,
    NegativeDiscriminant,
    PricingError,
)
from .fixed_point import ONE

__all__ = [
    "ONE",
    "general_integrate",
    "solve_buying",
    "solve_selling",
    "PricingError",
    "InvalidDepthParameter",
    "BothBalancesRequired",
    "BothBalancesNonZero",
    "InsufficientLiquidity",
    "NegativeDiscriminant",
    "DivisionByZero",
    "InvariantViolation",
    "InvalidCurveParameters",
    "InvalidAmount",
    "FixedPointOverflow",
    "ConfigError",
]
