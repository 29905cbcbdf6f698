"""
Common types for hypothesis testing.

Defines the Tail and Conclusion enums and the parameter records each
test family returns (ZTestParams, TTestParams, ChiSquareParams).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any
import numpy as np
from numpy.typing import NDArray


CONVENTIONAL_SIGNIFICANCE_LEVEL = 0.05


class Tail(str, Enum):
    """Which side(s) of the reference distribution the p-value covers."""
    LOWER = "lower"
    UPPER = "upper"
    BOTH = "both"


class Conclusion(str, Enum):
    """Verdict of a test against a significance level."""
    REJECT = "reject"
    DO_NOT_REJECT = "do not reject"


@dataclass(frozen=True)
class ZTestParams:
    """
    Parameter payload for the one-sample Z-test.

    Attributes
    ----------
    statistic : float
        Z score, (observed mean - expected mean) / (sd / sqrt(n)).
    p_value : float
        p-value for the requested tail.
    tail : Tail
        Tail the p-value integrates over.
    method : str
        Human-readable test label, e.g. "Two-Sided Z-Test for Mean".
    estimate : float
        Observed mean.
    null_value : float
        Expected mean under H0.
    sample_size : int
        Number of observations.
    sd : float
        Standard deviation used for the standard error.
    """
    statistic: float
    p_value: float
    tail: Tail
    method: str
    estimate: float
    null_value: float
    sample_size: int
    sd: float


@dataclass(frozen=True)
class TTestParams:
    """
    Parameter payload for one- and two-sample T-tests.

    For the two-sample (Welch) test `estimate` holds both sample means,
    `sample_size` both sizes, `sd` both standard deviations, and
    `null_value` is the hypothesised difference in means (0).
    """
    statistic: float
    df: float
    p_value: float
    tail: Tail
    method: str
    estimate: float | tuple[float, float]
    null_value: float
    sample_size: int | tuple[int, int]
    sd: float | tuple[float, float]


@dataclass(frozen=True)
class ChiSquareParams:
    """
    Parameter payload for Pearson's chi-squared tests.

    Attributes
    ----------
    statistic : float
        X-squared, sum of (observed - expected)^2 / expected.
    df : int
        (rows - 1) * (cols - 1) for independence, k - 1 for goodness of fit.
    p_value : float
        Upper-tail p-value.
    method : str
        "Pearson's Chi-squared Test of Independence" or
        "Pearson's Chi-squared Goodness Of Fit".
    observed : ndarray
        Observed counts as float64, same shape as the input.
    expected : ndarray
        Expected counts under H0, same shape as `observed`.
    residuals : ndarray
        Pearson residuals, (observed - expected) / sqrt(expected).
    """
    statistic: float
    df: int
    p_value: float
    method: str
    observed: NDArray[np.floating[Any]]
    expected: NDArray[np.floating[Any]]
    residuals: NDArray[np.floating[Any]]
