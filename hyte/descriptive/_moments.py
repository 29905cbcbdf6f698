"""
Sample moments used by every test that accepts raw data.

An empty sample has no mean and no variance: both functions return
None rather than raising, so callers can tell absent data apart from
bad input. A single observation has a mean but no Bessel-corrected
variance, and asking for one is an error.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from hyte.core.validation import check_array, check_1d, check_finite, check_min_samples


def as_sample(x: ArrayLike, name: str = "x") -> NDArray[np.floating[Any]]:
    """Convert a sample to a validated 1D float64 array (may be empty)."""
    arr = check_array(x, name)
    check_1d(arr, name)
    check_finite(arr, name)
    return arr


def mean(x: ArrayLike) -> float | None:
    """
    Arithmetic mean.

    Parameters
    ----------
    x : array-like
        1D numeric sample. Integers are widened to float.

    Returns
    -------
    float or None
        None when the sample is empty.
    """
    arr = as_sample(x)
    if len(arr) == 0:
        return None
    return float(np.mean(arr))


def variance(x: ArrayLike) -> float | None:
    """
    Sample variance with Bessel's correction (divides by n-1).

    Parameters
    ----------
    x : array-like
        1D numeric sample.

    Returns
    -------
    float or None
        None when the sample is empty.

    Raises
    ------
    ValidationError
        If the sample has exactly one observation.
    """
    arr = as_sample(x)
    n = len(arr)
    if n == 0:
        return None
    check_min_samples(arr, 2, "x", purpose="variance")
    deviations = arr - np.mean(arr)
    return float(np.sum(deviations ** 2) / (n - 1))


def sd(x: ArrayLike) -> float | None:
    """Sample standard deviation, sqrt(variance(x))."""
    v = variance(x)
    if v is None:
        return None
    return float(np.sqrt(v))
