"""
Hypothesis testing module.

Public API:
    z_test(x, mu)                      - One-sample Z-test from data
    z_test_summary(m, mu, n, sd)       - One-sample Z-test from summaries
    t_test(x, mu)                      - One-sample t-test from data
    t_test_summary(m, mu, n, sd)       - One-sample t-test from summaries
    t_test_two_samples(x, y)           - Welch two-sample t-test
    chisq_test(kind, observed, p)      - Pearson's chi-squared test
                                         (independence, goodness of fit)
    conclude(result, level)            - Reject / do not reject H0
    conclude_by_convention(result)     - Same, at the 0.05 level
"""

from hyte.hypothesis.solvers import (
    z_test, z_test_summary, t_test, t_test_summary, t_test_two_samples,
    chisq_test,
)
from hyte.hypothesis._conclusion import (
    conclude, conclude_by_convention, conclusion_summary,
)
from hyte.hypothesis.design import HypothesisDesign
from hyte.hypothesis._common import (
    CONVENTIONAL_SIGNIFICANCE_LEVEL,
    Tail,
    Conclusion,
    ZTestParams,
    TTestParams,
    ChiSquareParams,
)
from hyte.hypothesis.solution import (
    HTestSolution,
    ZTestSolution,
    TTestSolution,
    ChiSquareSolution,
)

__all__ = [
    "z_test",
    "z_test_summary",
    "t_test",
    "t_test_summary",
    "t_test_two_samples",
    "chisq_test",
    "conclude",
    "conclude_by_convention",
    "conclusion_summary",
    "CONVENTIONAL_SIGNIFICANCE_LEVEL",
    "Tail",
    "Conclusion",
    "HypothesisDesign",
    "ZTestParams",
    "TTestParams",
    "ChiSquareParams",
    "HTestSolution",
    "ZTestSolution",
    "TTestSolution",
    "ChiSquareSolution",
]
