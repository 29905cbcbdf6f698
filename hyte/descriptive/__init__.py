"""
Descriptive statistics module.

Public API:
    mean(x)      - Arithmetic mean (None for an empty sample)
    variance(x)  - Sample variance, Bessel-corrected (n-1)
    sd(x)        - Sample standard deviation
"""

from hyte.descriptive._moments import mean, variance, sd

__all__ = [
    "mean",
    "variance",
    "sd",
]
