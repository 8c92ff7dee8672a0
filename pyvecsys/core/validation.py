"""
Input validation utilities for pyvecsys.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent. A malformed vector is never
truncated or padded.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from collections.abc import Iterable
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyvecsys.core.exceptions import (
    ValidationError,
    EmptyInputError,
    NullVectorError,
    EmptyVectorError,
    DimensionMismatchError,
    WrongVectorCountError,
)


def check_vectors_present(vectors: Iterable[Any] | None, name: str) -> list[Any]:
    """
    Verify that a non-empty outer sequence of vectors was supplied.

    Materializes the outer iterable into a list so that generators are
    consumed exactly once.

    Args:
        vectors: Outer sequence (may be None)
        name: Parameter name for error messages

    Returns:
        List of the inner items, in input order

    Raises:
        EmptyInputError: If vectors is None or has no elements
        ValidationError: If vectors is not iterable
    """
    if vectors is None:
        raise EmptyInputError(f"{name}: no vectors supplied (got None)")

    try:
        items = list(vectors)
    except TypeError as e:
        raise ValidationError(f"{name}: expected a sequence of vectors: {e}") from e

    if len(items) == 0:
        raise EmptyInputError(f"{name}: vector system cannot be empty")

    return items


def check_not_null(vector: Any, index: int, name: str) -> None:
    """
    Verify a single vector entry is present.

    Raises:
        NullVectorError: If the entry is None
    """
    if vector is None:
        raise NullVectorError(f"{name}[{index}]: vector is None", index=index)


def _contains_bool(obj: Any) -> bool:
    if isinstance(obj, (bool, np.bool_)):
        return True
    if isinstance(obj, (list, tuple)):
        return any(_contains_bool(item) for item in obj)
    return False


def _is_real_scalar(obj: Any) -> bool:
    return isinstance(obj, (int, float, np.integer, np.floating)) and not isinstance(
        obj, (bool, np.bool_)
    )


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to numpy array. Rejects booleans,
    non-numeric dtypes, complex values and object arrays holding anything
    other than real numbers. Python integers too large for int64 land in
    an object array and are converted to float64.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype (always a fresh copy)

    Raises:
        ValidationError: If input cannot be converted to a real numeric array
    """
    if _contains_bool(array):
        raise ValidationError(f"{name}: boolean values are not real numbers")

    try:
        result = np.array(array, copy=True)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        if not all(_is_real_scalar(x) for x in result.ravel()):
            raise ValidationError(
                f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
            )
        try:
            return result.astype(np.float64)
        except OverflowError as e:
            raise ValidationError(f"{name}: value too large for float64: {e}") from e

    if result.dtype == np.bool_:
        raise ValidationError(f"{name}: boolean values are not real numbers")

    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected real numbers"
        )

    if np.iscomplexobj(result):
        raise ValidationError(f"{name}: complex values are not supported")

    return result.astype(np.float64, copy=False)


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify a single vector is 1-dimensional.

    Raises:
        ValidationError: If array is a scalar or nested deeper than one level
    """
    if array.ndim != 1:
        raise ValidationError(
            f"{name}: expected a flat sequence of numbers, got {array.ndim}D "
            f"with shape {array.shape}"
        )


def check_not_empty_vector(array: NDArray[np.floating[Any]], index: int, name: str) -> None:
    """
    Verify a vector has at least one coordinate.

    Raises:
        EmptyVectorError: If the vector has zero length
    """
    if array.shape[0] == 0:
        raise EmptyVectorError(f"{name}[{index}]: vector has no coordinates", index=index)


def check_consistent_dimension(
    arrays: list[NDArray[np.floating[Any]]],
    name: str,
) -> int:
    """
    Verify all vectors share the length of the first one.

    Args:
        arrays: 1D arrays to check
        name: Parameter name for error messages

    Returns:
        The common dimension

    Raises:
        DimensionMismatchError: At the first vector whose length differs
    """
    dim = arrays[0].shape[0]
    for i, arr in enumerate(arrays):
        if arr.shape[0] != dim:
            raise DimensionMismatchError(
                f"{name}[{i}]: all vectors must have the same dimension "
                f"(expected {dim}, got {arr.shape[0]})",
                index=i,
                expected=dim,
                actual=arr.shape[0],
            )
    return dim


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_vector_count(count: int, expected: int, name: str) -> None:
    """
    Verify a system has exactly the required number of vectors.

    Raises:
        WrongVectorCountError: If count != expected
    """
    if count != expected:
        raise WrongVectorCountError(
            f"{name}: expected {expected} vectors, got {count}",
            expected=expected,
            actual=count,
        )
