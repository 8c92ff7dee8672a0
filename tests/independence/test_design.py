"""
Tests for VectorSystem construction, validation and introspection.
"""

import numpy as np
import pytest

from pyvecsys.core.exceptions import (
    DimensionError,
    DimensionMismatchError,
    EmptyInputError,
    EmptyVectorError,
    NullVectorError,
    ValidationError,
    WrongVectorCountError,
)
from pyvecsys.independence import VectorSystem


class TestFromVectors:
    """Construction from a sequence of sequences."""

    def test_basic(self):
        system = VectorSystem.from_vectors([[1, 2], [3, 4]])
        assert system.count == 2
        assert system.dimension == 2
        assert system.matrix.dtype == np.float64
        np.testing.assert_array_equal(system.matrix, [[1.0, 2.0], [3.0, 4.0]])

    def test_order_preserved(self):
        vectors = [[3.0, 0.0], [1.0, 1.0], [0.0, 5.0]]
        system = VectorSystem.from_vectors(vectors)
        for stored, original in zip(system.vectors, vectors):
            np.testing.assert_array_equal(stored, original)

    def test_accepts_tuples_arrays_and_generators(self):
        system = VectorSystem.from_vectors(
            (np.array([1.0, 0.0]), (0, 1), [2.5, 2.5])
        )
        assert system.count == 3
        gen_system = VectorSystem.from_vectors(([i, i + 1] for i in range(2)))
        assert gen_system.count == 2

    def test_single_vector(self):
        system = VectorSystem.from_vectors([[4.0, 5.0, 6.0]])
        assert system.count == 1
        assert system.dimension == 3

    def test_expected_count(self):
        system = VectorSystem.from_vectors([[1, 0, 0], [0, 1, 0]], expected_count=2)
        assert system.count == 2

    def test_expected_count_mismatch(self):
        with pytest.raises(WrongVectorCountError) as exc_info:
            VectorSystem.from_vectors([[1, 0], [0, 1], [1, 1]], expected_count=2)
        assert exc_info.value.expected == 2
        assert exc_info.value.actual == 3


class TestConstructionErrors:
    """Malformed input always fails with a typed error, never a silent default."""

    def test_none(self):
        with pytest.raises(EmptyInputError):
            VectorSystem.from_vectors(None)

    def test_empty(self):
        with pytest.raises(EmptyInputError):
            VectorSystem.from_vectors([])

    def test_null_vector(self):
        with pytest.raises(NullVectorError) as exc_info:
            VectorSystem.from_vectors([[1, 2], None])
        assert exc_info.value.index == 1

    def test_empty_vector(self):
        with pytest.raises(EmptyVectorError) as exc_info:
            VectorSystem.from_vectors([[], [1.0]])
        assert exc_info.value.index == 0

    def test_dimension_mismatch(self):
        with pytest.raises(DimensionMismatchError) as exc_info:
            VectorSystem.from_vectors([[1, 2], [1, 2, 3]])
        err = exc_info.value
        assert (err.index, err.expected, err.actual) == (1, 2, 3)

    def test_dimension_mismatch_never_truncates(self):
        with pytest.raises(DimensionMismatchError):
            VectorSystem.from_vectors([[1, 2, 3], [1, 2]])

    def test_non_numeric(self):
        with pytest.raises(ValidationError, match="non-numeric"):
            VectorSystem.from_vectors([[1, 2], ["a", "b"]])

    def test_nested_vector(self):
        with pytest.raises(ValidationError, match="flat sequence"):
            VectorSystem.from_vectors([[[1, 2]], [[3, 4]]])

    def test_scalar_vector(self):
        with pytest.raises(ValidationError, match="flat sequence"):
            VectorSystem.from_vectors([1.0, 2.0])

    def test_nan(self):
        with pytest.raises(ValidationError, match="non-finite"):
            VectorSystem.from_vectors([[1.0, np.nan], [0.0, 1.0]])

    def test_inf(self):
        with pytest.raises(ValidationError, match="non-finite"):
            VectorSystem.from_vectors([[1.0, 0.0], [np.inf, 1.0]])

    def test_large_python_ints_accepted(self):
        system = VectorSystem.from_vectors([[10**20, 0], [0, 1]])
        assert system.matrix.dtype == np.float64
        assert system.matrix[0, 0] == 1e20
        assert system.is_linearly_independent()

    def test_int_beyond_float_range_rejected(self):
        with pytest.raises(ValidationError, match="too large"):
            VectorSystem.from_vectors([[10**400, 0], [0, 1]])

    @pytest.mark.parametrize("vectors", [
        [[True, False], [False, True]],
        [[True, 1], [0, 1]],
        [[1.0, 2.0], [np.True_, 0.0]],
    ])
    def test_booleans_rejected(self, vectors):
        with pytest.raises(ValidationError, match="boolean"):
            VectorSystem.from_vectors(vectors)

    def test_boolean_array_rejected(self):
        with pytest.raises(ValidationError, match="boolean"):
            VectorSystem.from_array(np.eye(2, dtype=bool))

    def test_null_detected_before_later_mismatch(self):
        with pytest.raises(NullVectorError):
            VectorSystem.from_vectors([[1, 2], None, [1, 2, 3]])


class TestSquare:

    def test_square_ok(self):
        system = VectorSystem.square([[1, 0, 0], [0, 1, 0], [0, 0, 1]])
        assert system.is_square

    def test_too_few(self):
        with pytest.raises(WrongVectorCountError, match="expected 3 vectors, got 2"):
            VectorSystem.square([[1, 2, 3], [4, 5, 6]])

    def test_too_many(self):
        with pytest.raises(WrongVectorCountError):
            VectorSystem.square([[1, 2], [3, 4], [5, 6]])

    def test_mismatch_reported_before_count(self):
        with pytest.raises(DimensionMismatchError):
            VectorSystem.square([[1, 2], [1, 2, 3]])


class TestFromArray:

    def test_rows_are_vectors(self):
        system = VectorSystem.from_array(np.eye(4))
        assert system.count == 4
        assert system.dimension == 4

    def test_rejects_1d(self):
        with pytest.raises(DimensionError, match="2D"):
            VectorSystem.from_array(np.array([1.0, 2.0]))

    def test_no_rows(self):
        with pytest.raises(EmptyInputError):
            VectorSystem.from_array(np.empty((0, 3)))

    def test_no_columns(self):
        with pytest.raises(EmptyVectorError):
            VectorSystem.from_array(np.empty((2, 0)))


class TestImmutability:

    def test_matrix_read_only(self):
        system = VectorSystem.from_vectors([[1.0, 2.0], [3.0, 4.0]])
        with pytest.raises(ValueError):
            system.matrix[0, 0] = 9.0
        with pytest.raises(ValueError):
            system.vectors[1][0] = 9.0

    def test_input_not_aliased(self):
        data = np.array([[1.0, 2.0], [3.0, 4.0]])
        system = VectorSystem.from_array(data)
        data[0, 0] = 100.0
        assert system.matrix[0, 0] == 1.0

    def test_caller_array_stays_writeable(self):
        data = np.array([[1.0, 2.0], [3.0, 4.0]])
        VectorSystem.from_array(data)
        assert data.flags.writeable

    def test_frozen(self):
        system = VectorSystem.from_vectors([[1.0]])
        with pytest.raises(AttributeError):
            system._count = 5


class TestIntrospection:

    def test_shape_flags(self):
        square = VectorSystem.from_vectors([[1, 0], [0, 1]])
        tall = VectorSystem.from_vectors([[1, 0], [0, 1], [1, 1]])
        wide = VectorSystem.from_vectors([[1, 0, 0]])
        assert square.is_square and not square.is_overdetermined
        assert tall.is_overdetermined and not tall.is_square
        assert not wide.is_square and not wide.is_overdetermined

    def test_len(self):
        assert len(VectorSystem.from_vectors([[1, 0], [0, 1], [1, 1]])) == 3

    def test_repr(self):
        r = repr(VectorSystem.from_vectors([[1, 2, 3], [4, 5, 6]]))
        assert r == "VectorSystem(count=2, dimension=3)"


class TestZeroVector:

    def test_no_zero_vector(self):
        system = VectorSystem.from_vectors([[1, 2], [3, 4]])
        assert not system.contains_zero_vector()
        assert system.zero_vector_index() is None

    def test_exact_zero(self):
        system = VectorSystem.from_vectors([[1, 2], [0, 0]])
        assert system.contains_zero_vector()
        assert system.zero_vector_index() == 1

    def test_near_zero_below_epsilon(self):
        system = VectorSystem.from_vectors([[1e-10, -5e-10, 0.0], [1, 2, 3]])
        assert system.zero_vector_index() == 0

    def test_single_coordinate_above_epsilon(self):
        system = VectorSystem.from_vectors([[1e-10, 1e-8], [1, 2]])
        assert not system.contains_zero_vector()

    def test_first_index_reported(self):
        system = VectorSystem.from_vectors([[1, 1], [0, 0], [0, 0]])
        assert system.zero_vector_index() == 1
