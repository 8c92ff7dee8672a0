"""
Determinant by cofactor (Laplace) expansion.

Expands recursively along the first row. This is O(n!) and intended for
the small systems (n <= 4 or so) the library is built around; the
elimination kernel in elimination.py handles anything larger.
"""

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pyvecsys.core.exceptions import DimensionError


def _check_square(matrix: NDArray[np.floating[Any]], name: str) -> int:
    if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
        raise DimensionError(
            f"{name}: expected a square 2D matrix, got shape {matrix.shape}"
        )
    if matrix.shape[0] == 0:
        raise DimensionError(f"{name}: matrix is empty")
    return matrix.shape[0]


def minor(matrix: NDArray[np.floating[Any]], row: int, col: int) -> NDArray[np.floating[Any]]:
    """
    Submatrix with one row and one column removed.

    Args:
        matrix: Square matrix (n x n), n >= 2
        row: Row index to drop
        col: Column index to drop

    Returns:
        New (n-1) x (n-1) array; the input is not modified
    """
    n = _check_square(matrix, "matrix")
    if not (0 <= row < n and 0 <= col < n):
        raise IndexError(f"minor({row}, {col}) out of range for {n}x{n} matrix")
    return np.delete(np.delete(matrix, row, axis=0), col, axis=1)


def _cofactor(matrix: NDArray[np.floating[Any]]) -> float:
    n = matrix.shape[0]
    if n == 1:
        return float(matrix[0, 0])
    if n == 2:
        return float(matrix[0, 0] * matrix[1, 1] - matrix[0, 1] * matrix[1, 0])

    det = 0.0
    for i in range(n):
        if matrix[0, i] == 0.0:
            continue
        sign = 1.0 if i % 2 == 0 else -1.0
        det += sign * matrix[0, i] * _cofactor(minor(matrix, 0, i))
    return float(det)


def cofactor_determinant(matrix: NDArray[np.floating[Any]]) -> float:
    """
    Determinant of a square matrix by recursive Laplace expansion.

    Base cases:
        1x1: the single entry
        2x2: a*d - b*c

    General case expands along row 0:
        det(M) = sum_i (-1)^i * M[0, i] * det(minor(M, 0, i))

    Args:
        matrix: Square matrix (n x n)

    Returns:
        The determinant as a Python float

    Raises:
        DimensionError: If matrix is not square or is empty
    """
    matrix = np.asarray(matrix, dtype=np.float64)
    _check_square(matrix, "matrix")
    return _cofactor(matrix)
