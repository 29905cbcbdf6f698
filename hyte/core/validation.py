"""
Input validation utilities for hyte.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import math
from numbers import Integral, Real
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from hyte.core.exceptions import ValidationError, DimensionError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types, ragged nested
    lists or non-numeric data). Integer and boolean inputs are widened
    to float64.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray of dtype float64

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not (np.issubdtype(result.dtype, np.number) or result.dtype == np.bool_):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    return result.astype(np.float64)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_consistent_length(
    *arrays: NDArray[np.floating[Any]],
    names: tuple[str, ...]
) -> None:
    """
    Verify paired vectors (counts and their probabilities) have equal length.

    Raises:
        ValueError: If number of names doesn't match number of arrays
        DimensionError: If the lengths differ
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )

    lengths = [len(arr) for arr in arrays]
    if len(set(lengths)) > 1:
        details = ", ".join(f"{name}={length}" for name, length in zip(names, lengths))
        raise DimensionError(
            f"{names[-1]}: lengths of {' and '.join(names)} do not match ({details})"
        )


def check_min_samples(
    array: NDArray[np.floating[Any]],
    min_samples: int,
    name: str,
    purpose: str = "this test",
) -> None:
    """
    Verify a sample has enough observations for the statistic to exist.

    Raises:
        ValidationError: If array has fewer than min_samples observations
    """
    n = len(array)
    if n < min_samples:
        raise ValidationError(
            f"{name}: {purpose} needs at least {min_samples} observations, got {n}"
        )


def check_non_negative(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify every entry is >= 0.

    Raises:
        ValidationError: If any entry is negative
    """
    negative = np.flatnonzero(np.ravel(array) < 0)
    if len(negative) > 0:
        raise ValidationError(
            f"{name}: must not contain negative numbers, "
            f"found {len(negative)} (first: {np.ravel(array)[negative[0]]:g})"
        )


def check_probabilities(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify every entry lies in [0, 1].

    Raises:
        ValidationError: If any entry is outside [0, 1]
    """
    outside = np.flatnonzero((array < 0.0) | (array > 1.0))
    if len(outside) > 0:
        raise ValidationError(
            f"{name}: probabilities must lie in [0, 1], "
            f"got {array[outside[0]]:g} at position {int(outside[0])}"
        )


def check_rectangular(rows: Any, name: str) -> None:
    """
    Verify a nested sequence has rows of equal, non-zero length.

    numpy cannot represent a ragged table, so this runs on the raw
    nested input before conversion. numpy arrays are rectangular by
    construction and only the row length is checked.

    Raises:
        DimensionError: If rows differ in length or a row is empty
    """
    if isinstance(rows, np.ndarray):
        lengths = [rows.shape[1]] if rows.ndim == 2 else []
    else:
        lengths = [len(row) for row in rows]

    if lengths and min(lengths) == 0:
        raise DimensionError(f"{name}: rows must not be empty")
    if len(set(lengths)) > 1:
        raise DimensionError(
            f"{name}: all rows must have the same length, got row lengths {lengths}"
        )


def check_sample_size(sample_size: Any, name: str = "sample_size") -> int:
    """
    Verify a sample size is a positive integer.

    Raises:
        ValidationError: If sample_size is not an integer or is not > 0
    """
    if isinstance(sample_size, bool) or not isinstance(sample_size, Integral):
        raise ValidationError(
            f"{name}: must be an integer, got {type(sample_size).__name__}"
        )
    if sample_size <= 0:
        raise ValidationError(
            f"{name}: sample size must be greater than 0, got {sample_size}"
        )
    return int(sample_size)


def check_scalar(value: Any, name: str) -> float:
    """
    Verify a value is a finite real number and return it as float.

    Raises:
        ValidationError: If value is not a real number or is NaN/Inf
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ValidationError(
            f"{name}: must be a real number, got {type(value).__name__}"
        )
    value = float(value)
    if not math.isfinite(value):
        raise ValidationError(f"{name}: must be finite, got {value}")
    return value
