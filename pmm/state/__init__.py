"""
Data model for the PMM pricing engine
"""

from .curve_params import CurveParameters, validate_depth
from .reserves import Amount, ReserveState

__all__ = [
    "Amount",
    "CurveParameters",
    "ReserveState",
    "validate_depth",
]
