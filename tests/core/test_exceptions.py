"""
Tests for the pyvecsys exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyVecSysError)
    - Diagnostic attributes on the construction errors
    - Default attribute values (None for optional attributes)
"""

import pytest

from pyvecsys.core.exceptions import (
    DimensionError,
    DimensionMismatchError,
    EmptyInputError,
    EmptyVectorError,
    NullVectorError,
    PyVecSysError,
    ValidationError,
    WrongVectorCountError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyVecSysError."""

    @pytest.mark.parametrize("exc_type", [
        EmptyInputError,
        NullVectorError,
        EmptyVectorError,
        DimensionError,
        DimensionMismatchError,
        WrongVectorCountError,
    ])
    def test_construction_errors_are_validation_errors(self, exc_type):
        with pytest.raises(ValidationError):
            raise exc_type("bad input")

    def test_validation_error_is_pyvecsys_error(self):
        with pytest.raises(PyVecSysError):
            raise ValidationError("bad input")

    def test_dimension_mismatch_is_dimension_error(self):
        with pytest.raises(DimensionError):
            raise DimensionMismatchError("lengths differ")

    def test_wrong_count_is_dimension_error(self):
        with pytest.raises(DimensionError):
            raise WrongVectorCountError("need 3")

    def test_empty_input_is_not_dimension_error(self):
        assert not isinstance(EmptyInputError("empty"), DimensionError)


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestAttributes:

    def test_null_vector_index(self):
        err = NullVectorError("vectors[2]: vector is None", index=2)
        assert err.index == 2
        assert str(err) == "vectors[2]: vector is None"

    def test_empty_vector_index(self):
        err = EmptyVectorError("empty", index=0)
        assert err.index == 0

    def test_dimension_mismatch_attributes(self):
        err = DimensionMismatchError("mismatch", index=1, expected=2, actual=3)
        assert err.index == 1
        assert err.expected == 2
        assert err.actual == 3

    def test_wrong_count_attributes(self):
        err = WrongVectorCountError("count", expected=3, actual=2)
        assert err.expected == 3
        assert err.actual == 2

    def test_defaults_are_none(self):
        assert NullVectorError("x").index is None
        err = DimensionMismatchError("x")
        assert (err.index, err.expected, err.actual) == (None, None, None)
        err = WrongVectorCountError("x")
        assert (err.expected, err.actual) == (None, None)
