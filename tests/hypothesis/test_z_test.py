"""
Tests for z_test() and z_test_summary().

Reference values computed from the standard normal CDF.
"""

import numpy as np
import pytest

from hyte.core.distributions import Normal
from hyte.core.exceptions import NumericalError, ValidationError
from hyte.hypothesis import Tail, z_test, z_test_summary


class TestZTestSummary:
    """Z-test from numerical summaries."""

    def test_lower(self):
        result = z_test_summary(1.2, 1.0, 30, 0.5, tail=Tail.LOWER)
        assert result.statistic == pytest.approx(2.1908902300206643, rel=1e-12)
        assert result.p_value == pytest.approx(0.9857701315424667, rel=1e-10)
        assert result.method == "One-Sided Z-Test for Mean (Lower-Tailed)"
        assert result.tail is Tail.LOWER

    def test_upper(self):
        result = z_test_summary(1.2, 1.0, 30, 0.5, tail=Tail.UPPER)
        assert result.p_value == pytest.approx(0.0142298684575333, rel=1e-8)
        assert result.method == "One-Sided Z-Test for Mean (Upper-Tailed)"

    def test_both(self):
        result = z_test_summary(1.2, 1.0, 30, 0.5, tail=Tail.BOTH)
        assert result.p_value == pytest.approx(0.0284597369150666, rel=1e-8)
        assert result.method == "Two-Sided Z-Test for Mean"

    def test_default_tail_is_both(self):
        result = z_test_summary(1.2, 1.0, 30, 0.5)
        assert result.tail is Tail.BOTH

    def test_string_tail(self):
        result = z_test_summary(1.2, 1.0, 30, 0.5, tail="upper")
        assert result.tail is Tail.UPPER

    def test_upper_tail_small_p(self):
        """z = 0.5 * sqrt(30); p rounds to 0.00."""
        result = z_test_summary(5.0, 4.5, 30, 1.0, tail=Tail.UPPER)
        assert result.statistic == pytest.approx(2.7386127875258306, rel=1e-12)
        assert round(result.p_value, 2) == 0.0
        assert 0.0029 < result.p_value < 0.0032
        assert result.p_value == pytest.approx(
            1.0 - Normal().cdf(result.statistic), rel=1e-12
        )

    def test_estimates_recorded(self):
        result = z_test_summary(5.0, 4.5, 30, 1.0)
        assert result.estimate == 5.0
        assert result.null_value == 4.5
        assert result.sample_size == 30
        assert result.sd == 1.0

    def test_no_df(self):
        result = z_test_summary(5.0, 4.5, 30, 1.0)
        assert not hasattr(result, "df")


class TestZTestProperties:

    @pytest.mark.parametrize("observed", [0.3, 1.7, 4.5, -2.0])
    def test_two_sided_symmetric_in_sign(self, observed):
        pos = z_test_summary(observed, 0.0, 12, 2.0, tail=Tail.BOTH)
        neg = z_test_summary(-observed, 0.0, 12, 2.0, tail=Tail.BOTH)
        assert pos.statistic == pytest.approx(-neg.statistic)
        assert pos.p_value == pytest.approx(neg.p_value, rel=1e-12)

    @pytest.mark.parametrize("observed", [0.3, 1.7, -0.9])
    def test_lower_plus_upper_is_one(self, observed):
        lower = z_test_summary(observed, 0.5, 20, 1.5, tail=Tail.LOWER)
        upper = z_test_summary(observed, 0.5, 20, 1.5, tail=Tail.UPPER)
        assert lower.p_value + upper.p_value == pytest.approx(1.0, abs=1e-12)

    def test_p_in_unit_interval(self, rng):
        for observed in rng.normal(size=20):
            for tail in Tail:
                p = z_test_summary(float(observed), 0.0, 10, 1.0, tail=tail).p_value
                assert 0.0 <= p <= 1.0


class TestZTestData:
    """Z-test from raw data."""

    def test_lower(self):
        result = z_test([1, 2, 3, 4, 5], 3.5, tail=Tail.LOWER)
        assert result.statistic == pytest.approx(-0.7071067811865475, rel=1e-12)
        assert result.p_value == pytest.approx(0.2397500610934768, rel=1e-10)
        assert result.method == "One-Sided Z-Test for Mean (Lower-Tailed)"

    def test_matches_summary_form(self, rng):
        x = rng.normal(loc=10.0, scale=2.0, size=40)
        from_data = z_test(x, 9.5, tail=Tail.BOTH)
        from_summary = z_test_summary(
            float(np.mean(x)), 9.5, 40, float(np.std(x, ddof=1)), tail=Tail.BOTH
        )
        assert from_data.statistic == pytest.approx(from_summary.statistic, rel=1e-12)
        assert from_data.p_value == pytest.approx(from_summary.p_value, rel=1e-12)

    def test_integers_accepted(self):
        assert z_test([1, 2, 3], 2).statistic == pytest.approx(0.0, abs=1e-15)

    def test_empty_returns_none(self):
        assert z_test([], 3.0) is None

    def test_single_observation_raises(self):
        with pytest.raises(ValidationError, match="at least 2 observations"):
            z_test([4.0], 3.0)

    def test_constant_sample_raises(self):
        with pytest.raises(NumericalError, match="standard error is zero"):
            z_test([2.0, 2.0, 2.0], 1.0)

    def test_data_name(self):
        assert z_test([1, 2, 3, 4], 2).data_name == "x"


class TestZTestValidation:

    def test_zero_sample_size(self):
        with pytest.raises(ValidationError, match="greater than 0"):
            z_test_summary(1.2, 1.0, 0, 0.5)

    def test_negative_sd(self):
        with pytest.raises(ValidationError, match="must not be negative"):
            z_test_summary(1.2, 1.0, 30, -0.5)

    def test_zero_sd_raises_numerical_error(self):
        with pytest.raises(NumericalError):
            z_test_summary(1.2, 1.0, 30, 0.0)

    def test_statistic_overflow_raises(self):
        with pytest.raises(NumericalError, match="statistic is not finite") as exc_info:
            z_test_summary(1.0, 0.0, 4, 1e-310)
        assert exc_info.value.quantity == "statistic"

    def test_invalid_tail(self):
        with pytest.raises(ValidationError, match="tail must be one of"):
            z_test_summary(1.2, 1.0, 30, 0.5, tail="sideways")

    def test_unknown_backend(self):
        with pytest.raises(ValidationError, match="Unknown backend"):
            z_test_summary(1.2, 1.0, 30, 0.5, backend="gpu")
