"""
Solver dispatch for the independence check.

Provides check_independence() as the comprehensive entry point, plus
is_linearly_independent(), matrix_rank() and determinant().
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Literal
from numpy.typing import ArrayLike

from pyvecsys.core.exceptions import ValidationError
from pyvecsys.core.validation import check_vector_count
from pyvecsys.core.compute.linalg.determinant import cofactor_determinant
from pyvecsys.core.compute.linalg.elimination import row_echelon
from pyvecsys.core.compute.linalg.svd import svd_rank
from pyvecsys.independence.design import VectorSystem
from pyvecsys.independence.solution import IndependenceSolution
from pyvecsys.independence.backends.cpu import CPUEliminationBackend, CPUCofactorBackend
from pyvecsys.independence.backends.reference import SVDReferenceBackend


MethodChoice = Literal['auto', 'elimination', 'cofactor', 'svd']
RankMethod = Literal['elimination', 'svd']
DeterminantMethod = Literal['cofactor', 'elimination']

VectorsLike = Iterable[ArrayLike] | VectorSystem


def _ensure_design(vectors: VectorsLike) -> VectorSystem:
    """Convert raw vectors to VectorSystem if needed."""
    if isinstance(vectors, VectorSystem):
        return vectors
    return VectorSystem.from_vectors(vectors)


def _get_backend(method: MethodChoice):
    """Select backend based on method name."""
    if method in ('auto', 'elimination'):
        return CPUEliminationBackend()
    if method == 'cofactor':
        return CPUCofactorBackend()
    if method == 'svd':
        return SVDReferenceBackend()

    raise ValidationError(
        f"Unknown method: {method!r}. "
        f"Must be 'auto', 'elimination', 'cofactor', or 'svd'."
    )


def check_independence(
    vectors: VectorsLike,
    *,
    method: MethodChoice = 'auto',
) -> IndependenceSolution:
    """
    Decide whether a system of vectors is linearly independent.

    Policy, in order:
        1. Any vector with every |coordinate| < EPSILON -> dependent
        2. More vectors than coordinates -> dependent
        3. Square system -> independent iff |det| > EPSILON
           (the determinant comes from the chosen backend)
        4. Fewer vectors than coordinates -> independent iff rank == count

    Parameters
    ----------
    vectors : iterable of array-like, or VectorSystem
        The system to check. Raw input is validated first.
    method : str
        'auto' (same as 'elimination'), 'elimination', 'cofactor', 'svd'.

    Returns
    -------
    IndependenceSolution with the verdict, rank and/or determinant.

    Raises
    ------
    ValidationError
        Invalid input (see VectorSystem.from_vectors) or unknown method.
    """
    be = _get_backend(method)
    design = _ensure_design(vectors)
    result = be.solve(design)
    return IndependenceSolution(_result=result, _design=design)


def is_linearly_independent(
    vectors: VectorsLike,
    *,
    method: MethodChoice = 'auto',
) -> bool:
    """Boolean shortcut for check_independence(...).is_independent."""
    return check_independence(vectors, method=method).is_independent


def matrix_rank(
    vectors: VectorsLike,
    *,
    method: RankMethod = 'elimination',
) -> int:
    """
    Number of linearly independent vectors in the system.

    Unlike check_independence(), no shortcut is taken: the rank is
    always computed, including for zero vectors and k > d systems.
    """
    design = _ensure_design(vectors)
    if method == 'elimination':
        return row_echelon(design.matrix).rank
    if method == 'svd':
        return svd_rank(design.matrix)
    raise ValidationError(
        f"Unknown rank method: {method!r}. Must be 'elimination' or 'svd'."
    )


def determinant(
    vectors: VectorsLike,
    *,
    method: DeterminantMethod = 'cofactor',
) -> float:
    """
    Determinant of the square matrix whose rows are the vectors.

    Raises
    ------
    WrongVectorCountError
        The number of vectors differs from the dimension.
    """
    if method not in ('cofactor', 'elimination'):
        raise ValidationError(
            f"Unknown determinant method: {method!r}. "
            f"Must be 'cofactor' or 'elimination'."
        )

    design = _ensure_design(vectors)
    check_vector_count(design.count, design.dimension, "vectors")

    if method == 'cofactor':
        return cofactor_determinant(design.matrix)
    return row_echelon(design.matrix).determinant()
