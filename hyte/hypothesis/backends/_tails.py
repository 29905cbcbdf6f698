"""
Tail rules shared by the Z- and T-tests.

Lower: p = F(stat). Upper: p = 1 - F(stat). Both: p = 2 F(-|stat|).
"""

from __future__ import annotations

import math
from typing import Protocol

from hyte.core.exceptions import NumericalError
from hyte.hypothesis._common import Tail


class _CDF(Protocol):
    def cdf(self, x: float) -> float: ...


def standard_error(sd: float, n: float) -> float:
    """sd / sqrt(n), refusing a zero or non-finite standard error."""
    se = sd / math.sqrt(n)
    if se == 0.0:
        raise NumericalError(
            "standard error is zero (data are essentially constant); "
            "the test statistic is undefined",
            quantity="standard_error",
            value=se,
        )
    return require_finite(se, "standard_error")


def require_finite(value: float, quantity: str) -> float:
    """Return `value`, or raise NumericalError if it overflowed to inf or NaN."""
    if not math.isfinite(value):
        raise NumericalError(
            f"{quantity} is not finite ({value}); the inputs are too extreme "
            f"to compute the test in double precision",
            quantity=quantity,
            value=value,
        )
    return value



def tail_p_value(dist: _CDF, statistic: float, tail: Tail) -> float:
    """p-value of `statistic` under `dist` for the given tail."""
    if tail is Tail.LOWER:
        return dist.cdf(statistic)
    if tail is Tail.UPPER:
        return 1.0 - dist.cdf(statistic)
    return 2.0 * dist.cdf(-abs(statistic))
