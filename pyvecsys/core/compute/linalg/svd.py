"""
Reference rank via singular values (LAPACK through SciPy).

Used as an independent cross-check of the elimination kernel. The same
absolute EPSILON threshold applies, so on well-conditioned input both
agree exactly.
"""

from typing import Any
import numpy as np
from numpy.typing import NDArray
from scipy import linalg

from pyvecsys.core.exceptions import DimensionError
from pyvecsys.core.compute.tolerances import EPSILON


def singular_values(matrix: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    """Singular values in descending order; the input is not modified."""
    arr = np.asarray(matrix, dtype=np.float64)
    if arr.ndim != 2:
        raise DimensionError(f"matrix: expected 2D array, got {arr.ndim}D")
    return linalg.svdvals(arr)


def svd_rank(
    matrix: NDArray[np.floating[Any]],
    tol: float = EPSILON,
) -> int:
    """Number of singular values strictly greater than tol."""
    return int(np.sum(singular_values(matrix) > tol))
