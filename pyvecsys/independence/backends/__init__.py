"""
Backends for the independence check.

    CPUEliminationBackend: rank by Gaussian elimination (default)
    CPUCofactorBackend: determinant by cofactor expansion (square systems)
    SVDReferenceBackend: rank from singular values (cross-check)
"""

from pyvecsys.independence.backends.cpu import CPUEliminationBackend, CPUCofactorBackend
from pyvecsys.independence.backends.reference import SVDReferenceBackend

__all__ = [
    "CPUEliminationBackend",
    "CPUCofactorBackend",
    "SVDReferenceBackend",
]
