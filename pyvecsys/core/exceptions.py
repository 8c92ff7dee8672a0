"""
Exception hierarchy for pyvecsys.

All exceptions inherit from PyVecSysError to allow catching any
library-specific error. Apart from an unknown method name, every error
here is raised while a VectorSystem is being constructed; the
independence query itself never raises on a validly constructed system.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyVecSysError(Exception):
    """Base exception for all pyvecsys errors."""
    pass


class ValidationError(PyVecSysError):
    """
    Input validation failed.

    Raised when user-provided vectors fail validation checks
    (non-numeric coordinates, NaN/Inf, nested input, unknown method).
    """
    pass


class EmptyInputError(ValidationError):
    """No vectors were supplied (None or an empty outer sequence)."""
    pass


class NullVectorError(ValidationError):
    """
    A vector entry is None.

    Attributes:
        index: Position of the missing vector in the input sequence
    """

    def __init__(self, message: str, index: int | None = None):
        super().__init__(message)
        self.index = index


class EmptyVectorError(ValidationError):
    """
    A vector has zero coordinates.

    Attributes:
        index: Position of the empty vector in the input sequence
    """

    def __init__(self, message: str, index: int | None = None):
        super().__init__(message)
        self.index = index


class DimensionError(ValidationError):
    """
    Vector dimensions are incorrect or inconsistent.

    Base class for shape problems detected at construction time.
    """
    pass


class DimensionMismatchError(DimensionError):
    """
    Vectors in one system have different lengths.

    Attributes:
        index: Position of the first vector whose length differs
        expected: Dimension established by the first vector
        actual: Length of the offending vector
    """

    def __init__(
        self,
        message: str,
        index: int | None = None,
        expected: int | None = None,
        actual: int | None = None,
    ):
        super().__init__(message)
        self.index = index
        self.expected = expected
        self.actual = actual


class WrongVectorCountError(DimensionError):
    """
    The number of vectors does not match what a square check requires.

    Raised by VectorSystem.square() (count must equal the dimension) and
    by from_vectors(expected_count=k).

    Attributes:
        expected: Required number of vectors
        actual: Number of vectors supplied
    """

    def __init__(
        self,
        message: str,
        expected: int | None = None,
        actual: int | None = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual
