"""
Shortcut rules shared by every independence backend.

Applied in order before any determinant or rank work:
    1. A (numerically) zero vector is always a dependence witness
    2. More vectors than coordinates can never be independent
"""

from __future__ import annotations

from typing import Any

from pyvecsys.independence.design import VectorSystem
from pyvecsys.independence.solution import IndependenceParams


def screen(design: VectorSystem) -> IndependenceParams | None:
    """Return a dependent verdict if a shortcut applies, else None."""
    zero_idx = design.zero_vector_index()
    if zero_idx is not None:
        return IndependenceParams(
            is_independent=False,
            decided_by='zero_vector',
            zero_vector_index=zero_idx,
        )

    if design.is_overdetermined:
        return IndependenceParams(is_independent=False, decided_by='overdetermined')

    return None


def base_info(design: VectorSystem, method: str) -> dict[str, Any]:
    return {
        'method': method,
        'dimension': design.dimension,
        'count': design.count,
    }
