"""
Hypothesis test solution types.

Each solution wraps a Result[...Params] and provides read-only access to
the record, the accept/reject decision, and a printable report via
summary().
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from hyte.core.result import Result
from hyte.hypothesis._common import (
    Conclusion,
    Tail,
    ZTestParams,
    TTestParams,
    ChiSquareParams,
)
from hyte.hypothesis._conclusion import (
    conclude,
    conclude_by_convention,
    conclusion_summary,
)

if TYPE_CHECKING:
    from hyte.hypothesis.design import HypothesisDesign

P = TypeVar('P', ZTestParams, TTestParams, ChiSquareParams)

_ALTERNATIVE_WORDING = {
    Tail.LOWER: "is less than",
    Tail.UPPER: "is greater than",
    Tail.BOTH: "is not equal to",
}


@dataclass
class HTestSolution(Generic[P]):
    """
    Fields shared by every hypothesis test result.

    Use the family-specific subclasses: ZTestSolution, TTestSolution,
    ChiSquareSolution.
    """
    _result: Result[P]
    _design: 'HypothesisDesign | None'

    @property
    def statistic(self) -> float:
        """Test statistic value."""
        return self._result.params.statistic

    @property
    def p_value(self) -> float:
        """p-value of the test."""
        return self._result.params.p_value

    @property
    def method(self) -> str:
        """Human-readable test label."""
        return self._result.params.method

    @property
    def params(self) -> P:
        """The underlying parameter record."""
        return self._result.params

    # --- Metadata ---

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    @property
    def data_name(self) -> str:
        return self._result.info.get('data_name', '')

    # --- Decision ---

    def conclude(
        self,
        significance_level: float | None = None,
        *,
        print_output: bool = False,
    ) -> Conclusion:
        """Reject H0 if p_value < significance_level (default 0.05)."""
        return conclude(self, significance_level, print_output=print_output)

    def conclude_by_convention(self, *, print_output: bool = False) -> Conclusion:
        """Reject H0 if p_value < 0.05."""
        return conclude_by_convention(self, print_output=print_output)

    def conclusion_summary(self, significance_level: float | None = None) -> str:
        """Plain-text verdict at the given significance level."""
        return conclusion_summary(self, significance_level)

    # --- Formatting ---

    _statistic_name = "statistic"

    def _parameter_parts(self) -> list[str]:
        return []

    def _alternative_line(self) -> str | None:
        return None

    def _estimate_lines(self) -> list[str]:
        return []

    def summary(self) -> str:
        """
        Format as a printable report.

        Produces output like:
            (2-Sample) T-Test for Mean

        data:  x and y
        t = -6.1968, df = 16.514, p-value = 1.1112e-05
        alternative hypothesis: true difference in means is not equal to 0
        sample estimates:
             mean of x      mean of y
                  20.2           23.4
        """
        lines = [f"\t{self.method}", ""]
        lines.append(f"data:  {self.data_name}")

        parts = [f"{self._statistic_name} = {self.statistic:.5g}"]
        parts.extend(self._parameter_parts())
        parts.append(f"p-value = {_format_pvalue(self.p_value)}")
        lines.append(", ".join(parts))

        alternative = self._alternative_line()
        if alternative is not None:
            lines.append(alternative)
        lines.extend(self._estimate_lines())

        lines.append("")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(method={self.method!r}, "
            f"{self._statistic_name}={self.statistic:.4g}, "
            f"p_value={self.p_value:.4g})"
        )


@dataclass(repr=False)
class ZTestSolution(HTestSolution[ZTestParams]):
    """User-facing one-sample Z-test result."""

    _statistic_name = "z"

    @property
    def tail(self) -> Tail:
        return self._result.params.tail

    @property
    def estimate(self) -> float:
        """Observed mean."""
        return self._result.params.estimate

    @property
    def null_value(self) -> float:
        """Expected mean under H0."""
        return self._result.params.null_value

    @property
    def sample_size(self) -> int:
        return self._result.params.sample_size

    @property
    def sd(self) -> float:
        return self._result.params.sd

    def _alternative_line(self) -> str:
        return (
            f"alternative hypothesis: true mean "
            f"{_ALTERNATIVE_WORDING[self.tail]} {self.null_value:g}"
        )

    def _estimate_lines(self) -> list[str]:
        return _format_estimates({"mean of x": self.estimate})


@dataclass(repr=False)
class TTestSolution(HTestSolution[TTestParams]):
    """User-facing one- or two-sample T-test result."""

    _statistic_name = "t"

    @property
    def df(self) -> float:
        """Degrees of freedom (fractional for Welch)."""
        return self._result.params.df

    @property
    def tail(self) -> Tail:
        return self._result.params.tail

    @property
    def estimate(self) -> float | tuple[float, float]:
        """Observed mean, or both means for the two-sample test."""
        return self._result.params.estimate

    @property
    def null_value(self) -> float:
        return self._result.params.null_value

    @property
    def sample_size(self) -> int | tuple[int, int]:
        return self._result.params.sample_size

    @property
    def sd(self) -> float | tuple[float, float]:
        return self._result.params.sd

    @property
    def two_sample(self) -> bool:
        return isinstance(self.estimate, tuple)

    def _parameter_parts(self) -> list[str]:
        return [f"df = {self.df:.5g}"]

    def _alternative_line(self) -> str:
        quantity = "difference in means" if self.two_sample else "mean"
        return (
            f"alternative hypothesis: true {quantity} "
            f"{_ALTERNATIVE_WORDING[self.tail]} {self.null_value:g}"
        )

    def _estimate_lines(self) -> list[str]:
        if self.two_sample:
            mean_x, mean_y = self.estimate
            return _format_estimates({"mean of x": mean_x, "mean of y": mean_y})
        return _format_estimates({"mean of x": self.estimate})


@dataclass(repr=False)
class ChiSquareSolution(HTestSolution[ChiSquareParams]):
    """User-facing Pearson's chi-squared result."""

    _statistic_name = "X-squared"

    @property
    def df(self) -> int:
        return self._result.params.df

    @property
    def observed(self) -> NDArray[np.floating[Any]]:
        """Observed counts."""
        return self._result.params.observed

    @property
    def expected(self) -> NDArray[np.floating[Any]]:
        """Expected counts under H0."""
        return self._result.params.expected

    @property
    def residuals(self) -> NDArray[np.floating[Any]]:
        """Pearson residuals."""
        return self._result.params.residuals

    def _parameter_parts(self) -> list[str]:
        return [f"df = {self.df}"]


def _format_estimates(estimates: dict[str, float]) -> list[str]:
    return [
        "sample estimates:",
        " ".join(f"{n:>14s}" for n in estimates),
        " ".join(f"{v:14.7g}" for v in estimates.values()),
    ]


def _format_pvalue(p: float) -> str:
    """Format p-value for reports."""
    if p < 2.2e-16:
        return "< 2.2e-16"
    if p < 0.001:
        return f"{p:.4e}"
    return f"{p:.4g}"
