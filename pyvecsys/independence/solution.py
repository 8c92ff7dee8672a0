"""
Independence check solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, TYPE_CHECKING

from pyvecsys.core.result import Result

if TYPE_CHECKING:
    from pyvecsys.independence.design import VectorSystem


DecidedBy = Literal['zero_vector', 'overdetermined', 'determinant', 'rank']


@dataclass(frozen=True)
class IndependenceParams:
    """
    Parameter payload for an independence check.

    rank is None when a shortcut (zero vector, more vectors than
    coordinates) decided the verdict before elimination ran. determinant
    is only computed for square systems.
    """
    is_independent: bool
    decided_by: DecidedBy
    rank: int | None = None
    determinant: float | None = None
    zero_vector_index: int | None = None


@dataclass
class IndependenceSolution:
    """
    User-facing independence check results.

    Wraps Result[IndependenceParams] and provides convenient accessors.
    Truthiness follows the verdict, so `if check_independence(v): ...`
    reads naturally.
    """
    _result: Result[IndependenceParams]
    _design: 'VectorSystem'

    @property
    def is_independent(self) -> bool:
        return self._result.params.is_independent

    @property
    def decided_by(self) -> DecidedBy:
        """Which rule produced the verdict."""
        return self._result.params.decided_by

    @property
    def rank(self) -> int | None:
        return self._result.params.rank

    @property
    def determinant(self) -> float | None:
        return self._result.params.determinant

    @property
    def zero_vector_index(self) -> int | None:
        return self._result.params.zero_vector_index

    # --- Metadata ---

    @property
    def system(self) -> 'VectorSystem':
        return self._design

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def has_warning(self, substring: str) -> bool:
        return self._result.has_warning(substring)

    def __bool__(self) -> bool:
        return self.is_independent

    def summary(self) -> str:
        """Plain-text report of the system and the verdict."""
        design = self._design
        lines = [
            f"Vector system: {design.count} vector(s) of dimension {design.dimension}",
        ]
        for i, vec in enumerate(design.vectors):
            coords = ", ".join(f"{x:g}" for x in vec)
            lines.append(f"  v{i + 1} = ({coords})")

        verdict = "linearly independent" if self.is_independent else "linearly dependent"
        lines.append(f"Verdict: {verdict} (decided by {self.decided_by})")

        if self.zero_vector_index is not None:
            lines.append(f"Zero vector: v{self.zero_vector_index + 1}")
        if self.rank is not None:
            lines.append(f"Rank: {self.rank}")
        if self.determinant is not None:
            lines.append(f"Determinant: {self.determinant:.6g}")
        lines.append(f"Backend: {self.backend_name}")
        for w in self.warnings:
            lines.append(f"Warning: {w}")

        return "\n".join(lines)

    def __repr__(self) -> str:
        verdict = "independent" if self.is_independent else "dependent"
        return (
            f"IndependenceSolution(count={self._design.count}, "
            f"dimension={self._design.dimension}, {verdict}, "
            f"decided_by={self.decided_by!r})"
        )
