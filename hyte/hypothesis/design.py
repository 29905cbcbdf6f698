"""
HypothesisDesign: tagged union for hypothesis test inputs.

Uses factory classmethods per test type. The `test_type` field identifies
which fields are populated. Immutable after construction.

Tests on raw data reduce the sample to its summaries (mean, size,
standard deviation) here, so the backends only ever see the summary
form.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any
import numpy as np
from numpy.typing import NDArray, ArrayLike

from hyte.core.exceptions import ValidationError, DimensionError
from hyte.core.validation import (
    check_array,
    check_1d,
    check_2d,
    check_consistent_length,
    check_finite,
    check_min_samples,
    check_non_negative,
    check_probabilities,
    check_rectangular,
    check_sample_size,
    check_scalar,
)
from hyte.descriptive._moments import as_sample, mean, sd
from hyte.hypothesis._common import Tail


CHISQ_INDEPENDENCE = "independence"
CHISQ_GOODNESS_OF_FIT = "goodness-of-fit"

# Short aliases accepted alongside the full names
CHISQ_KINDS = {
    "independence": CHISQ_INDEPENDENCE,
    "toi": CHISQ_INDEPENDENCE,
    "goodness-of-fit": CHISQ_GOODNESS_OF_FIT,
    "gof": CHISQ_GOODNESS_OF_FIT,
}


def _validate_tail(tail: Tail | str) -> Tail:
    """Validate and return the tail selector."""
    try:
        return Tail(tail)
    except ValueError:
        valid = tuple(t.value for t in Tail)
        raise ValidationError(
            f"tail must be one of {valid}, got {tail!r}"
        ) from None


def _validate_sd(value: float, name: str = "sd") -> float:
    """Validate a standard deviation is a finite, non-negative number."""
    value = check_scalar(value, name)
    if value < 0:
        raise ValidationError(
            f"{name}: standard deviation must not be negative, got {value}"
        )
    return value


def _non_empty_sample(x: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    arr = as_sample(x, name)
    if len(arr) == 0:
        raise ValidationError(f"{name}: sample must not be empty")
    return arr


def _is_nested(observed: Any) -> bool:
    """True if `observed` looks like a table (sequence of rows)."""
    if isinstance(observed, np.ndarray):
        return observed.ndim >= 2
    if not isinstance(observed, (list, tuple)):
        return False
    return all(isinstance(row, (list, tuple, np.ndarray)) for row in observed)


@dataclass(frozen=True)
class HypothesisDesign:
    """
    Design for hypothesis tests.

    Uses a tagged-union approach: the `test_type` field identifies which
    fields are populated. Factory classmethods validate inputs.

    Do not construct directly; use factory classmethods.
    """
    test_type: str

    # One-sample summaries (Z and T)
    _observed_mean: float = 0.0
    _expected_mean: float = 0.0
    _sample_size: int = 0
    _sd: float = 0.0
    _tail: Tail = Tail.BOTH

    # Raw samples, kept when the test was built from data
    _x: NDArray[np.floating[Any]] | None = None
    _y: NDArray[np.floating[Any]] | None = None

    # Chi-squared
    _table: NDArray[np.floating[Any]] | None = None
    _expected_p: NDArray[np.floating[Any]] | None = None

    # Metadata
    _data_name: str = ""

    # --- Properties ---

    @property
    def observed_mean(self) -> float:
        return self._observed_mean

    @property
    def expected_mean(self) -> float:
        return self._expected_mean

    @property
    def sample_size(self) -> int:
        return self._sample_size

    @property
    def sd(self) -> float:
        return self._sd

    @property
    def tail(self) -> Tail:
        return self._tail

    @property
    def x(self) -> NDArray[np.floating[Any]] | None:
        return self._x

    @property
    def y(self) -> NDArray[np.floating[Any]] | None:
        return self._y

    @property
    def table(self) -> NDArray[np.floating[Any]] | None:
        return self._table

    @property
    def expected_p(self) -> NDArray[np.floating[Any]] | None:
        return self._expected_p

    @property
    def data_name(self) -> str:
        return self._data_name

    # --- Factory classmethods ---

    @classmethod
    def for_z_test(
        cls,
        x: ArrayLike,
        expected_mean: float,
        *,
        tail: Tail | str = Tail.BOTH,
    ) -> HypothesisDesign:
        """
        Build design for z_test() from raw data.

        The sample standard deviation stands in for the population one.
        """
        x_arr = _non_empty_sample(x, "x")
        design = cls.for_z_summary(
            mean(x_arr), expected_mean, len(x_arr), sd(x_arr), tail=tail,
        )
        return replace(design, _x=x_arr, _data_name="x")

    @classmethod
    def for_z_summary(
        cls,
        observed_mean: float,
        expected_mean: float,
        sample_size: int,
        sd: float,
        *,
        tail: Tail | str = Tail.BOTH,
    ) -> HypothesisDesign:
        """Build design for z_test_summary() from numerical summaries."""
        return cls(
            test_type="z_one_sample",
            _observed_mean=check_scalar(observed_mean, "observed_mean"),
            _expected_mean=check_scalar(expected_mean, "expected_mean"),
            _sample_size=check_sample_size(sample_size),
            _sd=_validate_sd(sd),
            _tail=_validate_tail(tail),
            _data_name="summary statistics",
        )

    @classmethod
    def for_t_test(
        cls,
        x: ArrayLike,
        expected_mean: float,
        *,
        tail: Tail | str = Tail.BOTH,
    ) -> HypothesisDesign:
        """Build design for t_test() from raw data."""
        x_arr = _non_empty_sample(x, "x")
        design = cls.for_t_summary(
            mean(x_arr), expected_mean, len(x_arr), sd(x_arr), tail=tail,
        )
        return replace(design, _x=x_arr, _data_name="x")

    @classmethod
    def for_t_summary(
        cls,
        observed_mean: float,
        expected_mean: float,
        sample_size: int,
        sd: float,
        *,
        tail: Tail | str = Tail.BOTH,
    ) -> HypothesisDesign:
        """
        Build design for t_test_summary() from numerical summaries.

        df = sample_size - 1 must be positive, so a single observation
        is rejected here rather than by the t distribution.
        """
        n = check_sample_size(sample_size)
        if n < 2:
            raise ValidationError(
                f"sample_size: T-test needs at least 2 observations "
                f"(df = n - 1), got {n}"
            )
        return cls(
            test_type="t_one_sample",
            _observed_mean=check_scalar(observed_mean, "observed_mean"),
            _expected_mean=check_scalar(expected_mean, "expected_mean"),
            _sample_size=n,
            _sd=_validate_sd(sd),
            _tail=_validate_tail(tail),
            _data_name="summary statistics",
        )

    @classmethod
    def for_t_two_samples(
        cls,
        x: ArrayLike,
        y: ArrayLike,
    ) -> HypothesisDesign:
        """
        Build design for t_test_two_samples() (Welch).

        Both samples need at least 2 observations for their variances,
        and hence the Welch-Satterthwaite df, to exist.
        """
        x_arr = as_sample(x, "x")
        y_arr = as_sample(y, "y")
        check_min_samples(x_arr, 2, "x", purpose="a two-sample T-test")
        check_min_samples(y_arr, 2, "y", purpose="a two-sample T-test")
        return cls(
            test_type="t_two_sample",
            _x=x_arr,
            _y=y_arr,
            _data_name="x and y",
        )

    @classmethod
    def for_chisq_test(
        cls,
        kind: str,
        observed: ArrayLike,
        p: ArrayLike | None = None,
    ) -> HypothesisDesign:
        """
        Build design for chisq_test().

        Parameters
        ----------
        kind : str
            "independence" (alias "toi") with a 2D table and no `p`, or
            "goodness-of-fit" (alias "gof") with a 1D sequence and `p`.
        observed : array-like
            Observed counts.
        p : array-like or None
            Expected probabilities, goodness of fit only.
        """
        if not isinstance(kind, str) or kind not in CHISQ_KINDS:
            raise ValidationError(
                f"kind must be one of {tuple(CHISQ_KINDS)}, got {kind!r}"
            )
        kind = CHISQ_KINDS[kind]

        empty = (
            (isinstance(observed, (list, tuple)) and len(observed) == 0)
            or (isinstance(observed, np.ndarray) and observed.size == 0)
        )
        if empty:
            raise ValidationError("observed: must not pass in an empty matrix")

        if kind == CHISQ_INDEPENDENCE:
            return cls._for_chisq_independence(observed, p)
        return cls._for_chisq_gof(observed, p)

    @classmethod
    def _for_chisq_independence(
        cls,
        observed: ArrayLike,
        p: ArrayLike | None,
    ) -> HypothesisDesign:
        if p is not None:
            raise ValidationError(
                "p: expected probabilities must not be given for a test of independence"
            )
        if not _is_nested(observed):
            raise DimensionError(
                "observed: test of independence requires a 2D table of counts"
            )
        check_rectangular(observed, "observed")

        table = check_array(observed, "observed")
        check_2d(table, "observed")
        check_finite(table, "observed")
        check_non_negative(table, "observed")

        nrow, ncol = table.shape
        if nrow < 2 or ncol < 2:
            raise ValidationError(
                f"observed: contingency table must have at least 2 rows and "
                f"2 columns, got shape {table.shape}"
            )

        return cls(
            test_type="chisq_independence",
            _table=table,
            _data_name="observed",
        )

    @classmethod
    def _for_chisq_gof(
        cls,
        observed: ArrayLike,
        p: ArrayLike | None,
    ) -> HypothesisDesign:
        if p is None:
            raise ValidationError(
                "p: expected probabilities must be provided for the goodness of fit test"
            )
        if _is_nested(observed):
            raise DimensionError(
                "observed: goodness of fit requires a 1D sequence of counts"
            )

        counts = check_array(observed, "observed")
        check_1d(counts, "observed")
        check_finite(counts, "observed")
        check_non_negative(counts, "observed")

        p_arr = check_array(p, "p")
        check_1d(p_arr, "p")
        check_finite(p_arr, "p")
        check_probabilities(p_arr, "p")
        check_consistent_length(counts, p_arr, names=("observed", "p"))
        if len(counts) < 2:
            raise ValidationError(
                "observed: need at least 2 categories for goodness-of-fit test"
            )

        return cls(
            test_type="chisq_gof",
            _table=counts,
            _expected_p=p_arr,
            _data_name="observed",
        )

    def __repr__(self) -> str:
        if self._table is not None:
            return (
                f"HypothesisDesign(test_type={self.test_type!r}, "
                f"table={self._table.shape})"
            )
        if self._y is not None:
            return (
                f"HypothesisDesign(test_type={self.test_type!r}, "
                f"n_x={len(self._x)}, n_y={len(self._y)})"
            )
        return (
            f"HypothesisDesign(test_type={self.test_type!r}, "
            f"n={self._sample_size}, tail={self._tail.value!r})"
        )
