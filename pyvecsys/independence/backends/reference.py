"""
SVD reference backend for the independence check.

Counts singular values above EPSILON using LAPACK (via SciPy). Slower to
reason about than elimination but independent of pivot order, so it is
used to cross-check the CPU backends. Square systems are decided by the
LU determinant, like every other backend.
"""

from __future__ import annotations

from scipy import linalg

from pyvecsys.core.result import Result
from pyvecsys.core.compute.timing import Timer
from pyvecsys.core.compute.tolerances import EPSILON
from pyvecsys.core.compute.linalg.svd import svd_rank
from pyvecsys.independence.design import VectorSystem
from pyvecsys.independence.solution import IndependenceParams
from pyvecsys.independence._common import screen, base_info


class SVDReferenceBackend:
    """Numerical rank from singular values; determinant from LU for square systems."""

    @property
    def name(self) -> str:
        return 'cpu_svd'

    def solve(self, design: VectorSystem) -> Result[IndependenceParams]:
        timer = Timer()
        timer.start()

        with timer.section('zero_vector'):
            params = screen(design)

        if params is None:
            with timer.section('svd'):
                rank = svd_rank(design.matrix)

            if design.is_square:
                with timer.section('determinant'):
                    det = float(linalg.det(design.matrix))
                params = IndependenceParams(
                    is_independent=abs(det) > EPSILON,
                    decided_by='determinant',
                    rank=rank,
                    determinant=det,
                )
            else:
                params = IndependenceParams(
                    is_independent=rank == design.count,
                    decided_by='rank',
                    rank=rank,
                )

        timer.stop()

        info = base_info(design, 'svd')
        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=(),
        )
