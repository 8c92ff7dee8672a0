"""
Gaussian elimination to row-echelon form.

Rows are vectors and columns are coordinates. The pivot search takes the
first row (from the current pivot row downward) whose entry exceeds the
tolerance, not the largest one: no partial pivoting is done, so results
on ill-conditioned input are only as good as the fixed tolerance allows.

The caller's matrix is never modified; all work happens on a copy.
"""

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pyvecsys.core.exceptions import DimensionError
from pyvecsys.core.compute.tolerances import EPSILON


@dataclass(frozen=True)
class EliminationResult:
    """
    Result of row reduction.

    Attributes:
        echelon: Row-echelon form (pivot rows normalized to a leading 1)
        rank: Number of pivots found
        pivot_columns: Column index of each pivot, in order
        n_swaps: Number of row interchanges performed
        pivot_product: Product of the pivot values before normalization
    """
    echelon: NDArray[np.floating[Any]]
    rank: int
    pivot_columns: tuple[int, ...]
    n_swaps: int
    pivot_product: float

    def determinant(self) -> float:
        """
        Determinant of the original square matrix.

        det = (-1)^n_swaps * product(pivots), or 0.0 when a column has no pivot.

        Raises:
            DimensionError: If the reduced matrix is not square
        """
        n_rows, n_cols = self.echelon.shape
        if n_rows != n_cols:
            raise DimensionError(
                f"determinant requires a square matrix, got shape {self.echelon.shape}"
            )
        if self.rank < n_rows:
            return 0.0
        sign = -1.0 if self.n_swaps % 2 else 1.0
        return sign * self.pivot_product


def row_echelon(
    matrix: NDArray[np.floating[Any]],
    tol: float = EPSILON,
) -> EliminationResult:
    """
    Reduce a matrix to row-echelon form and count pivots.

    Algorithm, for each column while pivot_row < n_rows:
        1. Find the first row r >= pivot_row with |A[r, col]| > tol;
           if none, the column contributes no pivot
        2. Swap row r into position pivot_row
        3. Divide the pivot row (from col onward) by the pivot value
        4. Subtract A[i, col] * pivot_row from every row i below it
        5. pivot_row += 1

    Args:
        matrix: 2D matrix (n_rows x n_cols)
        tol: Entries with absolute value <= tol are treated as zero

    Returns:
        EliminationResult with the reduced matrix and pivot bookkeeping

    Raises:
        DimensionError: If matrix is not 2D
    """
    work = np.array(matrix, dtype=np.float64, copy=True)
    if work.ndim != 2:
        raise DimensionError(f"matrix: expected 2D array, got {work.ndim}D")

    n_rows, n_cols = work.shape
    pivot_row = 0
    pivot_columns: list[int] = []
    n_swaps = 0
    pivot_product = 1.0

    for col in range(n_cols):
        if pivot_row >= n_rows:
            break

        candidates = np.nonzero(np.abs(work[pivot_row:, col]) > tol)[0]
        if candidates.size == 0:
            continue
        r = pivot_row + int(candidates[0])

        if r != pivot_row:
            work[[pivot_row, r]] = work[[r, pivot_row]]
            n_swaps += 1

        pivot = work[pivot_row, col]
        pivot_product *= pivot
        work[pivot_row, col:] /= pivot

        below = work[pivot_row + 1:, col].copy()
        work[pivot_row + 1:, col:] -= np.outer(below, work[pivot_row, col:])

        pivot_columns.append(col)
        pivot_row += 1

    return EliminationResult(
        echelon=work,
        rank=pivot_row,
        pivot_columns=tuple(pivot_columns),
        n_swaps=n_swaps,
        pivot_product=float(pivot_product),
    )


def matrix_rank_elimination(
    matrix: NDArray[np.floating[Any]],
    tol: float = EPSILON,
) -> int:
    """Rank of a matrix as the number of elimination pivots."""
    return row_echelon(matrix, tol=tol).rank


def elimination_determinant(
    matrix: NDArray[np.floating[Any]],
    tol: float = EPSILON,
) -> float:
    """
    Determinant of a square matrix from its elimination pivots.

    Raises:
        DimensionError: If matrix is not square
    """
    arr = np.asarray(matrix, dtype=np.float64)
    if arr.ndim != 2 or arr.shape[0] != arr.shape[1]:
        raise DimensionError(
            f"matrix: expected a square 2D matrix, got shape {arr.shape}"
        )
    return row_echelon(arr, tol=tol).determinant()
