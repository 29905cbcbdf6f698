"""
Core infrastructure for hyte.

This module provides shared abstractions and utilities used by the
descriptive and hypothesis submodules.

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    distributions: Normal, Student's t and chi-squared CDFs
    compute: Timing
"""

from hyte.core.protocols import Backend
from hyte.core.result import Result
from hyte.core.exceptions import (
    HyteError,
    ValidationError,
    DimensionError,
    NumericalError,
)
from hyte.core.distributions import Normal, StudentsT, ChiSquared

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
    # Exceptions
    "HyteError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    # Distributions
    "Normal",
    "StudentsT",
    "ChiSquared",
]
