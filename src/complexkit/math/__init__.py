"""
Math modules для complexkit

Чистые функции над каноническими парами и численные примитивы.
"""

# Numerical Safeguards
from complexkit.math.numerical_safeguards import (
    # Epsilon constants
    EPSILON,
    # Finiteness
    is_valid_float,
    is_valid_pair,
    # Epsilon comparisons
    is_close_abs,
    pairs_close,
    # Real helpers
    heaviside_sign,
    real_cosh,
    real_sinh,
)

# Canonical pair
from complexkit.math.pair import CanonicalPair

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPSILON",
    # Numerical Safeguards — Finiteness
    "is_valid_float",
    "is_valid_pair",
    # Numerical Safeguards — Epsilon comparisons
    "is_close_abs",
    "pairs_close",
    # Numerical Safeguards — Real helpers
    "heaviside_sign",
    "real_cosh",
    "real_sinh",
    # Types
    "CanonicalPair",
]
