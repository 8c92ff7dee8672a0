"""
pyvecsys: linear independence of real vector systems.

Decides whether a finite set of equal-length vectors is linearly
independent, by Gaussian elimination (rank), cofactor expansion
(determinant) or singular values (reference cross-check).

Submodules:
    core: Exceptions, validation, tolerances, linear algebra kernels
    independence: VectorSystem and the independence check
    cli: Demo driver (python -m pyvecsys)
"""

__version__ = "0.1.0"

from pyvecsys.core.exceptions import (
    PyVecSysError,
    ValidationError,
    EmptyInputError,
    NullVectorError,
    EmptyVectorError,
    DimensionError,
    DimensionMismatchError,
    WrongVectorCountError,
)
from pyvecsys.independence import (
    VectorSystem,
    IndependenceSolution,
    check_independence,
    is_linearly_independent,
    matrix_rank,
    determinant,
)

__all__ = [
    "__version__",
    "VectorSystem",
    "IndependenceSolution",
    "check_independence",
    "is_linearly_independent",
    "matrix_rank",
    "determinant",
    "PyVecSysError",
    "ValidationError",
    "EmptyInputError",
    "NullVectorError",
    "EmptyVectorError",
    "DimensionError",
    "DimensionMismatchError",
    "WrongVectorCountError",
]
