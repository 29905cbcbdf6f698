"""
Tests for chisq_test().

Independence reference values verified against R chisq.test(correct=FALSE).
"""

import warnings

import numpy as np
import pytest

from hyte.core.exceptions import DimensionError, NumericalError, ValidationError
from hyte.hypothesis import chisq_test


class TestChisqIndependence:
    """Test of independence on a contingency table."""

    def test_2x3(self, contingency_2x3):
        result = chisq_test("independence", contingency_2x3)
        assert result.method == "Pearson's Chi-squared Test of Independence"
        assert result.statistic == pytest.approx(30.070149095754672, rel=1e-10)
        assert result.df == 2
        assert isinstance(result.df, int)
        assert result.p_value == pytest.approx(2.9535891832299654e-07, rel=1e-6)

    def test_expected_counts(self):
        result = chisq_test("independence", [[10, 20, 30], [10, 20, 10]])
        np.testing.assert_allclose(
            result.expected, [[12, 24, 24], [8, 16, 16]], rtol=1e-12,
        )
        assert result.statistic == pytest.approx(6.25, rel=1e-12)
        assert result.df == 2
        assert result.p_value == pytest.approx(0.04393693362340742, rel=1e-8)

    def test_2x2_no_continuity_correction(self):
        result = chisq_test("independence", [[10, 5], [8, 12]])
        assert result.statistic == pytest.approx(2.4400871459694997, rel=1e-10)
        assert result.df == 1
        assert result.p_value == pytest.approx(0.11826965501636745, rel=1e-8)

    def test_residuals(self):
        result = chisq_test("independence", [[10, 20, 30], [10, 20, 10]])
        expected_resid = (result.observed - result.expected) / np.sqrt(result.expected)
        np.testing.assert_allclose(result.residuals, expected_resid)
        assert np.sum(result.residuals ** 2) == pytest.approx(result.statistic)

    def test_transpose_invariant(self, contingency_2x3):
        forward = chisq_test("independence", contingency_2x3)
        transposed = chisq_test("independence", np.array(contingency_2x3).T)
        assert forward.statistic == pytest.approx(transposed.statistic)
        assert forward.df == transposed.df

    def test_alias(self, contingency_2x3):
        full = chisq_test("independence", contingency_2x3)
        alias = chisq_test("toi", contingency_2x3)
        assert alias.statistic == full.statistic
        assert alias.method == full.method

    def test_numpy_table(self):
        result = chisq_test("independence", np.array([[10, 5], [8, 12]]))
        assert result.statistic == pytest.approx(2.4400871459694997, rel=1e-10)

    def test_small_expected_warns(self):
        with pytest.warns(RuntimeWarning, match="may be incorrect"):
            result = chisq_test("independence", [[3, 1], [1, 3]])
        assert result.statistic == pytest.approx(2.0)
        assert len(result.warnings) == 1

    def test_large_expected_does_not_warn(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            result = chisq_test("independence", [[10, 5], [8, 12]])
        assert result.warnings == ()

    def test_p_not_allowed(self):
        with pytest.raises(ValidationError, match="must not be given"):
            chisq_test("independence", [[1, 2], [3, 4]], [0.5, 0.5])

    def test_1d_rejected(self):
        with pytest.raises(DimensionError, match="2D table"):
            chisq_test("independence", [1, 2, 3])

    def test_ragged_rejected(self):
        with pytest.raises(DimensionError, match="same length"):
            chisq_test("independence", [[1, 2, 3], [4, 5]])

    def test_empty_row_rejected(self):
        with pytest.raises(DimensionError, match="must not be empty"):
            chisq_test("independence", [[], []])

    def test_single_row_rejected(self):
        with pytest.raises(ValidationError, match="at least 2 rows"):
            chisq_test("independence", [[1, 2, 3]])

    def test_single_column_rejected(self):
        with pytest.raises(ValidationError, match="at least 2 rows"):
            chisq_test("independence", [[1], [2]])

    def test_negative_count_rejected(self):
        with pytest.raises(ValidationError, match="negative"):
            chisq_test("independence", [[1, -2], [3, 4]])

    def test_zero_column_raises(self):
        with pytest.raises(NumericalError, match="expected frequency is zero"):
            chisq_test("independence", [[0, 1], [0, 2]])

    def test_all_zero_raises(self):
        with pytest.raises(NumericalError, match="grand total is zero"):
            chisq_test("independence", [[0, 0], [0, 0]])


class TestChisqGoodnessOfFit:
    """Goodness of fit of counts to expected probabilities."""

    def test_basic(self):
        result = chisq_test("goodness-of-fit", [30, 40, 30], [0.25, 0.5, 0.25])
        assert result.method == "Pearson's Chi-squared Goodness Of Fit"
        assert result.statistic == pytest.approx(4.0, rel=1e-12)
        assert result.df == 2
        assert result.p_value == pytest.approx(0.1353352832366127, rel=1e-8)
        np.testing.assert_allclose(result.expected, [25, 50, 25])

    def test_perfect_fit(self):
        result = chisq_test("gof", [25, 25, 25, 25], [0.25] * 4)
        assert result.statistic == 0.0
        assert result.df == 3
        assert result.p_value == pytest.approx(1.0)

    def test_extreme_departure(self):
        result = chisq_test("gof", [100, 0, 0, 0], [0.25] * 4)
        assert result.statistic == pytest.approx(300.0)
        assert result.p_value < 1e-60

    def test_alias(self):
        full = chisq_test("goodness-of-fit", [30, 40, 30], [0.25, 0.5, 0.25])
        alias = chisq_test("gof", [30, 40, 30], [0.25, 0.5, 0.25])
        assert alias.statistic == full.statistic

    def test_probabilities_not_summing_to_one_warns(self):
        with pytest.warns(RuntimeWarning, match="probabilities sum to 0.8"):
            result = chisq_test("gof", [10, 10], [0.4, 0.4])
        np.testing.assert_allclose(result.expected, [8, 8])

    def test_p_required(self):
        with pytest.raises(ValidationError, match="must be provided"):
            chisq_test("gof", [10, 20, 30])

    def test_table_rejected(self):
        with pytest.raises(DimensionError, match="1D sequence"):
            chisq_test("gof", [[10, 20], [30, 40]], [0.5, 0.5])

    def test_length_mismatch(self):
        with pytest.raises(DimensionError, match="do not match"):
            chisq_test("gof", [10, 20, 30], [0.5, 0.5])

    def test_single_category(self):
        with pytest.raises(ValidationError, match="at least 2 categories"):
            chisq_test("gof", [10], [1.0])

    def test_probability_out_of_range(self):
        with pytest.raises(ValidationError, match=r"\[0, 1\]"):
            chisq_test("gof", [10, 20], [1.5, -0.5])

    def test_zero_probability_raises(self):
        with pytest.raises(NumericalError, match="expected frequency is zero"):
            chisq_test("gof", [10, 20, 0], [0.5, 0.5, 0.0])


class TestChisqInputs:
    """Arguments shared by both kinds."""

    def test_unknown_kind(self):
        with pytest.raises(ValidationError, match="kind must be one of"):
            chisq_test("homogeneity", [[1, 2], [3, 4]])

    def test_empty_observed(self):
        with pytest.raises(ValidationError, match="empty matrix"):
            chisq_test("independence", [])
        with pytest.raises(ValidationError, match="empty matrix"):
            chisq_test("gof", [], [])

    def test_observed_required(self):
        with pytest.raises(ValidationError, match="observed is required"):
            chisq_test("independence")

    def test_unknown_backend(self, contingency_2x3):
        with pytest.raises(ValidationError, match="Unknown backend"):
            chisq_test("independence", contingency_2x3, backend="gpu")
