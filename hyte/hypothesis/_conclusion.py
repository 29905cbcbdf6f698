"""
Accept/reject decision for any test result.

This is a standalone utility (no Design/Backend pipeline). It works on
a solution, a bare parameter record or a Result envelope: anything that
carries a p-value.
"""

from __future__ import annotations

import math
from numbers import Real
from typing import Any

from hyte.core.exceptions import ValidationError
from hyte.hypothesis._common import CONVENTIONAL_SIGNIFICANCE_LEVEL, Conclusion


def _p_value_of(result: Any) -> float:
    if hasattr(result, "p_value"):
        return result.p_value
    if hasattr(result, "params") and hasattr(result.params, "p_value"):
        return result.params.p_value
    raise ValidationError(
        f"result: expected a test result with a p-value, got {type(result).__name__}"
    )


def _validate_significance_level(significance_level: float) -> float:
    if isinstance(significance_level, bool) or not isinstance(significance_level, Real):
        raise ValidationError(
            f"significance_level must be a number, got {type(significance_level).__name__}"
        )
    if not (0.0 < significance_level < 1.0):
        raise ValidationError(
            f"significance_level must be in (0, 1), got {significance_level}"
        )
    return float(significance_level)


def conclude(
    result: Any,
    significance_level: float | None = None,
    *,
    print_output: bool = False,
) -> Conclusion:
    """
    Reject H0 when the p-value is strictly below the significance level.

    Parameters
    ----------
    result : solution, parameter record or Result
        Anything exposing `p_value` (directly or via `.params`).
    significance_level : float or None
        Threshold in (0, 1). None means the conventional 0.05.
    print_output : bool
        If True, print conclusion_summary() for the same level.

    Returns
    -------
    Conclusion
        Conclusion.REJECT or Conclusion.DO_NOT_REJECT.
    """
    if significance_level is None:
        significance_level = CONVENTIONAL_SIGNIFICANCE_LEVEL
    alpha = _validate_significance_level(significance_level)
    p = _p_value_of(result)
    if math.isnan(p):
        raise ValidationError("result: p-value is NaN, no conclusion can be drawn")
    verdict = Conclusion.REJECT if p < alpha else Conclusion.DO_NOT_REJECT
    if print_output:
        print(_format_verdict(p, alpha, verdict))
    return verdict


def conclude_by_convention(result: Any, *, print_output: bool = False) -> Conclusion:
    """conclude() at the conventional significance level of 0.05."""
    return conclude(
        result, CONVENTIONAL_SIGNIFICANCE_LEVEL, print_output=print_output,
    )


def conclusion_summary(result: Any, significance_level: float | None = None) -> str:
    """
    Plain-text verdict for a result.

    Produces output like:
        Statistical Conclusion

        p-value = 1.234e-02
        significance level = 5.000e-02

        p-value < significance level, therefore reject H0

        There is sufficient evidence to reject the null hypothesis.
    """
    if significance_level is None:
        significance_level = CONVENTIONAL_SIGNIFICANCE_LEVEL
    verdict = conclude(result, significance_level)
    return _format_verdict(_p_value_of(result), significance_level, verdict)


def _format_verdict(p: float, significance_level: float, verdict: Conclusion) -> str:
    lines = [
        "Statistical Conclusion",
        "",
        f"p-value = {p:.3e}",
        f"significance level = {significance_level:.3e}",
        "",
    ]
    if verdict is Conclusion.REJECT:
        lines.append("p-value < significance level, therefore reject H0")
        lines.append("")
        lines.append("There is sufficient evidence to reject the null hypothesis.")
    else:
        lines.append("p-value >= significance level, therefore do not reject H0")
        lines.append("")
        lines.append("There is insufficient evidence to reject the null hypothesis.")
    lines.append("")
    return "\n".join(lines)

