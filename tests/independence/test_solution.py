"""
Tests for IndependenceSolution accessors and formatting.
"""

import pytest

from pyvecsys.core.result import Result
from pyvecsys.independence import (
    IndependenceParams,
    IndependenceSolution,
    VectorSystem,
    check_independence,
)


class TestSummary:

    def test_independent_summary(self):
        text = check_independence([[1, 2], [3, 4]]).summary()
        assert "2 vector(s) of dimension 2" in text
        assert "v1 = (1, 2)" in text
        assert "v2 = (3, 4)" in text
        assert "Verdict: linearly independent (decided by determinant)" in text
        assert "Rank: 2" in text
        assert "Determinant: -2" in text
        assert "Backend: cpu_elimination" in text

    def test_zero_vector_summary(self):
        text = check_independence([[1, 2], [0, 0]]).summary()
        assert "linearly dependent" in text
        assert "Zero vector: v2" in text
        assert "Rank:" not in text

    def test_warnings_listed(self):
        design = VectorSystem.from_vectors([[1.0]])
        result = Result(
            params=IndependenceParams(is_independent=True, decided_by='rank', rank=1),
            info={},
            timing=None,
            backend_name='test',
            warnings=('something odd',),
        )
        solution = IndependenceSolution(_result=result, _design=design)
        assert "Warning: something odd" in solution.summary()
        assert solution.has_warning("odd")
        assert solution.timing is None


class TestRepr:

    def test_repr(self):
        r = repr(check_independence([[1, 2], [2, 4]]))
        assert r == (
            "IndependenceSolution(count=2, dimension=2, dependent, decided_by='determinant')"
        )


class TestParams:

    def test_frozen(self):
        params = IndependenceParams(is_independent=False, decided_by='overdetermined')
        with pytest.raises(AttributeError):
            params.rank = 3

    def test_defaults(self):
        params = IndependenceParams(is_independent=False, decided_by='overdetermined')
        assert params.rank is None
        assert params.determinant is None
        assert params.zero_vector_index is None
