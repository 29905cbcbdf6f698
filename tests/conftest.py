"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def welch_groups():
    """Two groups with unequal variances (Welch example)."""
    group1 = [20, 22, 19, 20, 21, 20, 19, 21, 22, 18]
    group2 = [22, 24, 23, 24, 25, 23, 24, 23, 22, 24]
    return group1, group2


@pytest.fixture
def contingency_2x3():
    """2x3 contingency table with a strong association."""
    return [[762, 327, 468], [484, 239, 477]]
