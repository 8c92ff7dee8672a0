"""
Generic result container for all pyvecsys computations.

The Result class provides a standardized envelope that every backend
returns. Backends differ in which algorithm they run (elimination,
cofactor expansion, SVD) but share timing, metadata and warning handling.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, dimension, count)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) so a result can be shared freely
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for vector-system computations.

    Type Parameters:
        P: The parameter payload type

    Attributes:
        params: Computed payload (verdict, rank, determinant, ...)
        info: Structured metadata (method, dimension, count)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=IndependenceParams(is_independent=True, rank=2,
        ...                               determinant=-2.0, decided_by='rank'),
        ...     info={'method': 'elimination', 'dimension': 2, 'count': 2},
        ...     timing={'total_seconds': 1e-5},
        ...     backend_name='cpu_elimination'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
