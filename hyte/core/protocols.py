"""
Core protocols for hyte.

We use Protocol (structural typing) rather than ABC (nominal typing) so
a backend only has to look like a backend.
"""

from typing import Protocol, TypeVar, runtime_checkable

from hyte.core.result import Result

D = TypeVar('D', contravariant=True)  # Design type
P = TypeVar('P', covariant=True)  # Parameter payload type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend knows how to take a validated design and produce a
    test-specific parameter payload wrapped in a Result.

    Backends are stateless; all configuration is carried by the design.
    This makes them easy to test and swap.
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{domain}', e.g. 'cpu_hypothesis'.
        """
        ...

    def solve(self, design: D) -> Result[P]:
        """
        Execute the test.

        Raises:
            NumericalError: If the computation degenerates (zero standard
                error, zero expected frequency)
            ValidationError: If design is invalid for this backend
        """
        ...
