"""
Numerical tolerances for pyvecsys.

EPSILON is the single threshold below which a floating-point quantity is
treated as zero: vector coordinates in the zero-vector check, pivot
candidates during elimination, determinants and singular values. It is
read-only and shared by all computations.

The ToleranceTier instances are used by the test suite when comparing
two algorithms (cofactor vs elimination vs LAPACK) on the same input.
"""

from dataclasses import dataclass


EPSILON = 1e-9

# Cofactor expansion is O(n!); beyond this size the cofactor backend warns.
COFACTOR_MAX_DIMENSION = 8


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Same algorithm, same input: results must agree to machine precision
EXACT = ToleranceTier(
    rtol=1e-12,
    atol=1e-12,
    name='exact',
    description='Same arithmetic path, machine precision',
)

# Different algorithms on the same small matrix (cofactor vs LU vs elimination)
CROSS_CHECK = ToleranceTier(
    rtol=1e-8,
    atol=1e-9,
    name='cross_check',
    description='Different algorithms, well-conditioned small matrices',
)
