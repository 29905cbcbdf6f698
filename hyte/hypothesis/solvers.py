"""
Solver dispatch for hypothesis tests.

Provides z_test(), z_test_summary(), t_test(), t_test_summary(),
t_test_two_samples() and chisq_test().

Tests on raw data return None when a sample is empty: there is nothing
to test, which is not an error. Every other invalid input raises
ValidationError (or a subclass) before any computation runs.
"""

from __future__ import annotations

import warnings
from typing import Literal
from numpy.typing import ArrayLike

from hyte.core.exceptions import ValidationError
from hyte.core.protocols import Backend
from hyte.descriptive._moments import as_sample
from hyte.hypothesis._common import Tail
from hyte.hypothesis.design import HypothesisDesign
from hyte.hypothesis.solution import (
    ZTestSolution,
    TTestSolution,
    ChiSquareSolution,
)
from hyte.hypothesis.backends.cpu import CPUHypothesisBackend


BackendChoice = Literal['cpu']
TailChoice = Tail | Literal["lower", "upper", "both"]


def _get_backend(backend: str = 'cpu') -> Backend:
    """
    Select backend for hypothesis tests.

    Every test here is closed-form arithmetic, so CPU is the only
    backend.
    """
    if backend in ('cpu', 'auto'):
        return CPUHypothesisBackend()
    raise ValidationError(
        f"Unknown backend: {backend!r}. Use 'cpu'."
    )


def _run(design: HypothesisDesign, backend: str, print_output: bool, solution_cls):
    be = _get_backend(backend)
    result = be.solve(design)
    solution = solution_cls(_result=result, _design=design)
    for message in result.warnings:
        warnings.warn(message, RuntimeWarning, stacklevel=3)
    if print_output:
        print(solution.summary())
    return solution


def _is_empty(x: ArrayLike, name: str) -> bool:
    return len(as_sample(x, name)) == 0


def z_test(
    x: ArrayLike | HypothesisDesign,
    expected_mean: float = 0.0,
    *,
    tail: TailChoice = Tail.BOTH,
    print_output: bool = False,
    backend: str = 'cpu',
) -> ZTestSolution | None:
    """
    One-sample Z-test for a mean, from raw data.

    The sample mean, size and standard deviation are derived from `x`
    and passed on to the summary form; the sample standard deviation
    stands in for the population value.

    Parameters
    ----------
    x : array-like or HypothesisDesign
        Sample data. 1D numeric vector; integers are widened to float.
    expected_mean : float
        Hypothesized mean under H0. Default 0.
    tail : Tail or str
        "lower", "upper" or "both" (default).
    print_output : bool
        If True, print summary() after computing.
    backend : str
        'cpu' (default).

    Returns
    -------
    ZTestSolution or None
        None if `x` is empty.

    Raises
    ------
    ValidationError
        If `x` has a single observation (no sample variance), contains
        non-finite values, or `tail` is not recognised.
    NumericalError
        If the sample is constant (zero standard error).
    """
    if isinstance(x, HypothesisDesign):
        design = x
    else:
        if _is_empty(x, "x"):
            return None
        design = HypothesisDesign.for_z_test(x, expected_mean, tail=tail)

    return _run(design, backend, print_output, ZTestSolution)


def z_test_summary(
    observed_mean: float,
    expected_mean: float,
    sample_size: int,
    sd: float,
    *,
    tail: TailChoice = Tail.BOTH,
    print_output: bool = False,
    backend: str = 'cpu',
) -> ZTestSolution:
    """
    One-sample Z-test for a mean, from numerical summaries.

    z = (observed_mean - expected_mean) / (sd / sqrt(sample_size))

    Parameters
    ----------
    observed_mean : float
        Sample mean.
    expected_mean : float
        Hypothesized mean under H0.
    sample_size : int
        Number of observations, > 0.
    sd : float
        Population standard deviation, >= 0.
    tail : Tail or str
        "lower", "upper" or "both" (default).

    Returns
    -------
    ZTestSolution

    Raises
    ------
    ValidationError
        If sample_size <= 0 or sd < 0.
    NumericalError
        If sd == 0.
    """
    design = HypothesisDesign.for_z_summary(
        observed_mean, expected_mean, sample_size, sd, tail=tail,
    )
    return _run(design, backend, print_output, ZTestSolution)


def t_test(
    x: ArrayLike | HypothesisDesign,
    expected_mean: float = 0.0,
    *,
    tail: TailChoice = Tail.BOTH,
    print_output: bool = False,
    backend: str = 'cpu',
) -> TTestSolution | None:
    """
    One-sample t-test for a mean, from raw data.

    Parameters
    ----------
    x : array-like or HypothesisDesign
        Sample data. 1D numeric vector.
    expected_mean : float
        Hypothesized mean under H0. Default 0.
    tail : Tail or str
        "lower", "upper" or "both" (default).

    Returns
    -------
    TTestSolution or None
        None if `x` is empty. df = len(x) - 1.
    """
    if isinstance(x, HypothesisDesign):
        design = x
    else:
        if _is_empty(x, "x"):
            return None
        design = HypothesisDesign.for_t_test(x, expected_mean, tail=tail)

    return _run(design, backend, print_output, TTestSolution)


def t_test_summary(
    observed_mean: float,
    expected_mean: float,
    sample_size: int,
    sd: float,
    *,
    tail: TailChoice = Tail.BOTH,
    print_output: bool = False,
    backend: str = 'cpu',
) -> TTestSolution:
    """
    One-sample t-test for a mean, from numerical summaries.

    t = (observed_mean - expected_mean) / (sd / sqrt(sample_size)),
    referred to Student's t with sample_size - 1 degrees of freedom.

    Raises
    ------
    ValidationError
        If sample_size <= 0, sample_size == 1 (df = 0) or sd < 0.
    NumericalError
        If sd == 0.
    """
    design = HypothesisDesign.for_t_summary(
        observed_mean, expected_mean, sample_size, sd, tail=tail,
    )
    return _run(design, backend, print_output, TTestSolution)


def t_test_two_samples(
    x: ArrayLike | HypothesisDesign,
    y: ArrayLike | None = None,
    *,
    print_output: bool = False,
    backend: str = 'cpu',
) -> TTestSolution | None:
    """
    Welch's two-sample t-test (unequal variances), always two-sided.

    Degrees of freedom follow the Welch-Satterthwaite equation and are
    generally fractional.

    Parameters
    ----------
    x, y : array-like
        The two samples. A HypothesisDesign may be passed as `x`.

    Returns
    -------
    TTestSolution or None
        None if either sample is empty.

    Raises
    ------
    ValidationError
        If either sample has a single observation.
    NumericalError
        If both samples are constant (zero standard error).
    """
    if isinstance(x, HypothesisDesign):
        design = x
    else:
        if y is None:
            raise ValidationError("y is required for t_test_two_samples")
        if _is_empty(x, "x") or _is_empty(y, "y"):
            return None
        design = HypothesisDesign.for_t_two_samples(x, y)

    return _run(design, backend, print_output, TTestSolution)


def chisq_test(
    kind: str | HypothesisDesign,
    observed: ArrayLike | None = None,
    p: ArrayLike | None = None,
    *,
    print_output: bool = False,
    backend: str = 'cpu',
) -> ChiSquareSolution:
    """
    Pearson's Chi-squared test.

    Parameters
    ----------
    kind : str or HypothesisDesign
        "independence" (or "toi"): `observed` is a 2D contingency table
        and `p` must be None.
        "goodness-of-fit" (or "gof"): `observed` is a 1D sequence of
        counts and `p` the expected probabilities, same length.
    observed : array-like
        Non-negative counts.
    p : array-like or None
        Expected probabilities, each in [0, 1] (goodness of fit only).

    Returns
    -------
    ChiSquareSolution
        Statistic, integer df, upper-tail p-value, and observed,
        expected and residuals arrays.

    Raises
    ------
    ValidationError
        Unknown kind, kind/shape/`p` mismatch, empty or negative counts,
        probabilities outside [0, 1].
    DimensionError
        Ragged rows, or `p` of a different length than `observed`.
    NumericalError
        If any expected frequency is zero.
    """
    if isinstance(kind, HypothesisDesign):
        design = kind
    else:
        if observed is None:
            raise ValidationError("observed is required for chisq_test")
        design = HypothesisDesign.for_chisq_test(kind, observed, p)

    return _run(design, backend, print_output, ChiSquareSolution)
