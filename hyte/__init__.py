"""
hyte: closed-form hypothesis testing for Python.

One- and two-sample tests for means and Pearson's chi-squared tests,
computed from raw data or from numerical summaries, with a simple
reject / do-not-reject decision rule.

Submodules:
    hypothesis: Z-, t- and chi-squared tests, conclusions
    descriptive: Sample mean and variance
    core: Exceptions, result envelope, validation, distributions
"""

__version__ = "0.1.0"

from hyte import descriptive
from hyte import hypothesis
from hyte.core.exceptions import (
    HyteError,
    ValidationError,
    DimensionError,
    NumericalError,
)
from hyte.hypothesis import (
    z_test,
    z_test_summary,
    t_test,
    t_test_summary,
    t_test_two_samples,
    chisq_test,
    conclude,
    conclude_by_convention,
    Tail,
    Conclusion,
)

__all__ = [
    "__version__",
    "descriptive",
    "hypothesis",
    "HyteError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "z_test",
    "z_test_summary",
    "t_test",
    "t_test_summary",
    "t_test_two_samples",
    "chisq_test",
    "conclude",
    "conclude_by_convention",
    "Tail",
    "Conclusion",
]
