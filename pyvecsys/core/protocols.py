"""
Core protocols for pyvecsys.

We use Protocol (structural typing) rather than ABC (nominal typing) so
that any object with a name and a solve() method can act as a backend,
without inheriting from a library base class.
"""

from typing import Protocol, TypeVar, runtime_checkable

D = TypeVar('D', contravariant=True)  # Design type
P = TypeVar('P', covariant=True)  # Parameter payload type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend takes a validated design (a VectorSystem) and produces a
    parameter payload wrapped in a Result. Backends are stateless: all
    input comes from the design, so one instance can be shared across
    threads and calls.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}'
        Examples: 'cpu_elimination', 'cpu_cofactor', 'cpu_svd'
        """
        ...

    def solve(self, design: D) -> 'Result[P]':
        """
        Execute the computation.

        Args:
            design: Validated design

        Returns:
            Result envelope containing the parameter payload and metadata
        """
        ...
