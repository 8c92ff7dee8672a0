"""
Linear independence of vector systems.

Public API:
    VectorSystem.from_vectors(v)  - Validated, immutable vector system
    check_independence(v)         - Verdict with rank/determinant details
    is_linearly_independent(v)    - Boolean verdict
    matrix_rank(v)                - Rank by elimination or SVD
    determinant(v)                - Determinant of a square system
"""

from pyvecsys.independence.design import VectorSystem
from pyvecsys.independence.solution import IndependenceParams, IndependenceSolution
from pyvecsys.independence.solvers import (
    check_independence,
    is_linearly_independent,
    matrix_rank,
    determinant,
)

__all__ = [
    "check_independence",
    "is_linearly_independent",
    "matrix_rank",
    "determinant",
    "VectorSystem",
    "IndependenceParams",
    "IndependenceSolution",
]
