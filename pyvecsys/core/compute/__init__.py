"""
Shared compute infrastructure for pyvecsys.

This module provides tolerances, timing utilities and linear algebra
kernels used by the independence backends.

Submodules:
    tolerances: EPSILON and comparison tiers
    timing: Execution timing utilities
    linalg: Determinant, elimination and SVD kernels
"""

from pyvecsys.core.compute.tolerances import (
    EPSILON,
    COFACTOR_MAX_DIMENSION,
    ToleranceTier,
)
from pyvecsys.core.compute.timing import Timer, timed

__all__ = [
    # Tolerances
    "EPSILON",
    "COFACTOR_MAX_DIMENSION",
    "ToleranceTier",
    # Timing
    "Timer",
    "timed",
]
