"""
VectorSystem: validated, immutable collection of equal-length vectors.

A single generic type covers every dimension; a "2D system" and a
"3D system" are just instances with dimension 2 and 3. Follows the
Design pattern: build once through a classmethod, then query.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyvecsys.core.exceptions import DimensionError
from pyvecsys.core.compute.tolerances import EPSILON
from pyvecsys.core.validation import (
    check_vectors_present,
    check_not_null,
    check_array,
    check_1d,
    check_not_empty_vector,
    check_consistent_dimension,
    check_finite,
    check_vector_count,
)

if TYPE_CHECKING:
    from pyvecsys.independence.solution import IndependenceSolution


@dataclass(frozen=True, eq=False)
class VectorSystem:
    """
    Ordered system of real vectors sharing one dimension.

    Stored as a read-only (count x dimension) float64 matrix, one row per
    vector. The caller's input is copied, never aliased, and nothing is
    mutated after construction.

    Construction:
        VectorSystem.from_vectors([[1, 2], [3, 4]])
        VectorSystem.from_vectors(vectors, expected_count=3)
        VectorSystem.square([[1, 0, 0], [0, 1, 0], [0, 0, 1]])
        VectorSystem.from_array(np.eye(4))
    """
    _matrix: NDArray[np.floating[Any]]
    _count: int
    _dim: int

    @classmethod
    def from_vectors(
        cls,
        vectors: Iterable[ArrayLike] | None,
        *,
        expected_count: int | None = None,
    ) -> VectorSystem:
        """
        Build a VectorSystem from a sequence of numeric sequences.

        Parameters
        ----------
        vectors : iterable of array-like
            Non-empty outer sequence; each item is one vector.
        expected_count : int, optional
            If given, the system must contain exactly this many vectors.

        Raises
        ------
        EmptyInputError
            vectors is None or empty.
        NullVectorError
            An item is None.
        EmptyVectorError
            An item has zero coordinates.
        DimensionMismatchError
            Items have different lengths.
        ValidationError
            Non-numeric, nested, complex or non-finite coordinates.
        WrongVectorCountError
            expected_count was given and does not match.
        """
        items = check_vectors_present(vectors, "vectors")

        arrays = []
        for i, item in enumerate(items):
            check_not_null(item, i, "vectors")
            arr = check_array(item, f"vectors[{i}]")
            check_1d(arr, f"vectors[{i}]")
            check_not_empty_vector(arr, i, "vectors")
            arrays.append(arr)

        dim = check_consistent_dimension(arrays, "vectors")
        matrix = np.vstack(arrays)
        check_finite(matrix, "vectors")

        if expected_count is not None:
            check_vector_count(len(arrays), expected_count, "vectors")

        matrix.setflags(write=False)
        return cls(_matrix=matrix, _count=len(arrays), _dim=dim)

    @classmethod
    def square(cls, vectors: Iterable[ArrayLike] | None) -> VectorSystem:
        """
        Build a system that must hold exactly `dimension` vectors.

        Raises WrongVectorCountError when the count differs from the
        dimension; all other checks are those of from_vectors().
        """
        system = cls.from_vectors(vectors)
        check_vector_count(system.count, system.dimension, "vectors")
        return system

    @classmethod
    def from_array(cls, matrix: ArrayLike, *, expected_count: int | None = None) -> VectorSystem:
        """
        Build a VectorSystem from a 2D array, one row per vector.

        Raises
        ------
        DimensionError
            matrix is not 2D.
        """
        arr = check_array(matrix, "matrix")
        if arr.ndim != 2:
            raise DimensionError(
                f"matrix: expected 2D array (vectors x coordinates), got {arr.ndim}D "
                f"with shape {arr.shape}"
            )
        return cls.from_vectors(list(arr), expected_count=expected_count)

    @property
    def matrix(self) -> NDArray[np.floating[Any]]:
        """Read-only (count x dimension) matrix, one row per vector."""
        return self._matrix

    @property
    def vectors(self) -> tuple[NDArray[np.floating[Any]], ...]:
        """The vectors in input order, as read-only 1D arrays."""
        return tuple(self._matrix)

    @property
    def dimension(self) -> int:
        """Length shared by every vector."""
        return self._dim

    @property
    def count(self) -> int:
        """Number of vectors."""
        return self._count

    @property
    def is_square(self) -> bool:
        """Whether count == dimension (determinant is defined)."""
        return self._count == self._dim

    @property
    def is_overdetermined(self) -> bool:
        """Whether there are more vectors than coordinates."""
        return self._count > self._dim

    def zero_vector_index(self) -> int | None:
        """Index of the first vector with every |coordinate| < EPSILON, or None."""
        is_zero = np.all(np.abs(self._matrix) < EPSILON, axis=1)
        hits = np.flatnonzero(is_zero)
        return int(hits[0]) if hits.size else None

    def contains_zero_vector(self) -> bool:
        """Whether any vector is (numerically) the zero vector."""
        return self.zero_vector_index() is not None

    def is_linearly_independent(self) -> bool:
        """Shortcut for check_independence(self).is_independent."""
        return self.check().is_independent

    def check(self, *, method: str = 'auto') -> IndependenceSolution:
        """Run the independence check on this system."""
        from pyvecsys.independence.solvers import check_independence
        return check_independence(self, method=method)

    def __len__(self) -> int:
        return self._count

    def __repr__(self) -> str:
        return f"VectorSystem(count={self._count}, dimension={self._dim})"
