"""
Generic result container for all hyte computations.

The Result class provides a standardized envelope that every test
family uses. This enables shared tooling for timing, diagnostics and
reporting while allowing each family to define its own parameter
record (ZTestParams, TTestParams, ChiSquareParams).

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (test type, sample sizes)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True)
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for a hypothesis test.

    Type Parameters:
        P: The test-specific parameter payload type

    Attributes:
        params: Test-specific record (statistic, df, p-value, ...)
        info: Structured metadata (test type, sample sizes)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=ZTestParams(statistic=2.19, p_value=0.014, ...),
        ...     info={'test_type': 'z_summary'},
        ...     timing={'total_seconds': 0.0001},
        ...     backend_name='cpu_hypothesis'
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
