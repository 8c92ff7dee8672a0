"""
Linear algebra kernels for pyvecsys.

All functions follow these conventions:
    - Inputs are 2D float64 arrays with one row per vector
    - The caller's array is never modified
    - Errors are raised immediately with clear messages

Submodules:
    determinant: Minors and cofactor (Laplace) expansion
    elimination: Gaussian elimination, rank, determinant from pivots
    svd: Singular-value rank via SciPy (reference cross-check)
"""

from pyvecsys.core.compute.linalg.determinant import (
    minor,
    cofactor_determinant,
)
from pyvecsys.core.compute.linalg.elimination import (
    EliminationResult,
    row_echelon,
    matrix_rank_elimination,
    elimination_determinant,
)
from pyvecsys.core.compute.linalg.svd import (
    singular_values,
    svd_rank,
)

__all__ = [
    # Cofactor expansion
    "minor",
    "cofactor_determinant",
    # Elimination
    "EliminationResult",
    "row_echelon",
    "matrix_rank_elimination",
    "elimination_determinant",
    # SVD
    "singular_values",
    "svd_rank",
]
