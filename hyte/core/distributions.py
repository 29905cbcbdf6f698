"""
Reference distributions used to turn test statistics into p-values.

Thin adapters over scipy.stats. Each exposes only cdf(x); the tail
arithmetic lives with the tests. Degrees of freedom are validated here
so an impossible distribution is never handed to scipy (which would
quietly answer NaN).
"""

from __future__ import annotations

import math

from scipy import stats as sp_stats

from hyte.core.exceptions import ValidationError


def _check_df(df: float, name: str) -> float:
    df = float(df)
    if not math.isfinite(df) or df <= 0:
        raise ValidationError(
            f"{name}: degrees of freedom must be a positive finite number, got {df}"
        )
    return df


class Normal:
    """Standard normal distribution N(0, 1)."""

    def cdf(self, x: float) -> float:
        return float(sp_stats.norm.cdf(x))

    def __repr__(self) -> str:
        return "Normal(0, 1)"


class StudentsT:
    """Student's t distribution. df may be fractional (Welch)."""

    def __init__(self, df: float):
        self.df = _check_df(df, "StudentsT")

    def cdf(self, x: float) -> float:
        return float(sp_stats.t.cdf(x, self.df))

    def __repr__(self) -> str:
        return f"StudentsT(df={self.df:g})"


class ChiSquared:
    """Chi-squared distribution with integer degrees of freedom."""

    def __init__(self, df: int):
        if isinstance(df, float) and not df.is_integer():
            raise ValidationError(
                f"ChiSquared: degrees of freedom must be an integer, got {df}"
            )
        self.df = int(_check_df(df, "ChiSquared"))

    def cdf(self, x: float) -> float:
        return float(sp_stats.chi2.cdf(x, self.df))

    def __repr__(self) -> str:
        return f"ChiSquared(df={self.df})"
