"""
Core infrastructure for pyvecsys.

This module provides shared abstractions and utilities used by the
independence engine.

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Tolerances, timing, linear algebra kernels
"""

from pyvecsys.core.protocols import Backend
from pyvecsys.core.result import Result
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

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PyVecSysError",
    "ValidationError",
    "EmptyInputError",
    "NullVectorError",
    "EmptyVectorError",
    "DimensionError",
    "DimensionMismatchError",
    "WrongVectorCountError",
]
