"""
CPU backends for the independence check.

CPUEliminationBackend is the default path: Gaussian elimination gives the
rank and, for square systems, the determinant. CPUCofactorBackend decides square
systems by cofactor expansion and falls back to elimination otherwise.
"""

from __future__ import annotations

import warnings
from typing import Any

from pyvecsys.core.result import Result
from pyvecsys.core.compute.timing import Timer
from pyvecsys.core.compute.tolerances import EPSILON, COFACTOR_MAX_DIMENSION
from pyvecsys.core.compute.linalg.determinant import cofactor_determinant
from pyvecsys.core.compute.linalg.elimination import row_echelon
from pyvecsys.independence.design import VectorSystem
from pyvecsys.independence.solution import IndependenceParams
from pyvecsys.independence._common import screen, base_info


def _eliminate(design: VectorSystem, timer: Timer) -> IndependenceParams:
    """
    Decide by elimination.

    Square systems are independent iff |det| > EPSILON, the determinant
    being the signed pivot product; otherwise every vector must
    contribute a pivot.
    """
    with timer.section('elimination'):
        reduced = row_echelon(design.matrix)

    if design.is_square:
        det = reduced.determinant()
        return IndependenceParams(
            is_independent=abs(det) > EPSILON,
            decided_by='determinant',
            rank=reduced.rank,
            determinant=det,
        )

    return IndependenceParams(
        is_independent=reduced.rank == design.count,
        decided_by='rank',
        rank=reduced.rank,
    )


class CPUEliminationBackend:
    """
    Elimination-based independence check.

    Implements the Backend protocol for VectorSystem -> IndependenceParams.

    Policy:
        1. Zero vector present -> dependent
        2. count > dimension -> dependent
        3. count == dimension -> independent iff |det| > EPSILON
        4. otherwise independent iff rank == count
    """

    @property
    def name(self) -> str:
        return 'cpu_elimination'

    def solve(self, design: VectorSystem) -> Result[IndependenceParams]:
        timer = Timer()
        timer.start()

        with timer.section('zero_vector'):
            params = screen(design)

        if params is None:
            params = _eliminate(design, timer)

        timer.stop()

        return Result(
            params=params,
            info=base_info(design, 'elimination'),
            timing=timer.result(),
            backend_name=self.name,
            warnings=(),
        )


class CPUCofactorBackend:
    """
    Determinant-based independence check for square systems.

    A square system is independent iff |det| > EPSILON, with the
    determinant computed by cofactor expansion. Cost is O(n!), so a
    warning is issued above COFACTOR_MAX_DIMENSION. Non-square systems
    are handed to elimination, since a determinant is undefined there.
    """

    @property
    def name(self) -> str:
        return 'cpu_cofactor'

    def solve(self, design: VectorSystem) -> Result[IndependenceParams]:
        timer = Timer()
        timer.start()
        warnings_list: list[str] = []

        with timer.section('zero_vector'):
            params = screen(design)

        info: dict[str, Any] = base_info(design, 'cofactor')

        if params is None and not design.is_square:
            info['method'] = 'elimination'
            info['fallback_reason'] = 'not_square'
            params = _eliminate(design, timer)

        if params is None:
            if design.dimension > COFACTOR_MAX_DIMENSION:
                msg = (
                    f"Cofactor expansion on a {design.dimension}x{design.dimension} "
                    f"matrix is O(n!); method='elimination' is much faster"
                )
                warnings.warn(msg, UserWarning, stacklevel=3)
                warnings_list.append(msg)

            with timer.section('determinant'):
                det = cofactor_determinant(design.matrix)

            params = IndependenceParams(
                is_independent=abs(det) > EPSILON,
                decided_by='determinant',
                determinant=det,
            )

        timer.stop()

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
