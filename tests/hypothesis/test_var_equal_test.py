"""
Tests for the F-test of equal variances.

The larger unbiased variance is always the numerator.
"""

import numpy as np
import pytest
from scipy import stats as sp_stats

from pyhtest.core.exceptions import (
    DimensionError,
    DistributionParametersError,
    FreedomDegreesError,
    SignificanceError,
    ValidationError,
)
from pyhtest.hypothesis import (
    HypothesisDesign,
    SameVarianceHypothesis,
    var_equal_test,
)


class TestVarEqualBasic:

    def test_variance_samples(self, variance_samples):
        """
        var(x) = 80.5 / 4 = 20.125, var(y) = 14.52 / 3 = 4.84
        F = 20.125 / 4.84 = 4.158058, F(0.95; 4, 3) = 9.1172
        """
        x, y = variance_samples
        result = var_equal_test(x, y, significance=0.05)
        assert result.estimate["variance of x"] == pytest.approx(20.125, rel=1e-12)
        assert result.estimate["variance of y"] == pytest.approx(4.84, rel=1e-12)
        assert result.statistic == pytest.approx(20.125 / 4.84, rel=1e-12)
        assert result.parameter == {"num df": 4.0, "denom df": 3.0}
        assert result.critical_value == pytest.approx(9.1172, rel=1e-4)
        assert result.accepted is True
        assert result.extras["numerator"] == "x"

    def test_engine_form(self, variance_samples):
        result = SameVarianceHypothesis(*variance_samples, 0.05).solve()
        assert result.statistic == pytest.approx(4.158058, rel=1e-6)
        assert result.accepted is True

    def test_matches_numpy_variance(self, rng):
        x = rng.normal(0, 2, 30)
        y = rng.normal(0, 1, 12)
        result = var_equal_test(x, y)
        vx, vy = np.var(x, ddof=1), np.var(y, ddof=1)
        assert result.statistic == pytest.approx(max(vx, vy) / min(vx, vy), rel=1e-12)

    def test_p_value(self, variance_samples):
        result = var_equal_test(*variance_samples)
        assert result.p_value == pytest.approx(
            sp_stats.f.sf(result.statistic, 4, 3), rel=1e-10,
        )

    def test_very_different(self):
        result = var_equal_test([1, 2, 3, 4, 5], [1, 10, 100, 1000, 10000])
        assert result.statistic > result.critical_value
        assert result.accepted is False
        assert result.extras["numerator"] == "y"

    def test_larger_samples(self, rng):
        x = rng.normal(0, 1, 50)
        y = rng.normal(0, 3, 50)
        result = var_equal_test(x, y, significance=0.05)
        assert result.accepted is False


class TestOrientation:

    def test_swapped_samples_swap_degrees_of_freedom(self, variance_samples):
        """y has the smaller variance; as first argument its df goes second."""
        x, y = variance_samples
        result = var_equal_test(y, x)
        assert result.statistic == pytest.approx(20.125 / 4.84, rel=1e-12)
        assert result.parameter == {"num df": 4.0, "denom df": 3.0}
        assert result.extras["numerator"] == "y"

    def test_critical_value_uses_oriented_df(self):
        # var(x) = 1 with n = 3, var(y) = 2.5 with n = 5: y is the numerator
        result = var_equal_test([-1, 0, 1], [1, 2, 3, 4, 5])
        assert result.parameter == {"num df": 4.0, "denom df": 2.0}
        assert result.critical_value == pytest.approx(
            sp_stats.f.ppf(0.95, 4, 2), rel=1e-12,
        )

    def test_tie_puts_x_in_numerator(self):
        # Both unbiased variances are exactly 1
        x = [-1.0, 0.0, 1.0]
        y = [-1.0, -1.0, 0.0, 1.0, 1.0]
        result = var_equal_test(x, y)
        assert result.statistic == 1.0
        assert result.parameter == {"num df": 2.0, "denom df": 4.0}
        assert result.extras["numerator"] == "x"

        swapped = var_equal_test(y, x)
        assert swapped.parameter == {"num df": 4.0, "denom df": 2.0}

    def test_statistic_never_below_one(self, rng):
        for _ in range(50):
            nx, ny = rng.integers(2, 20, size=2)
            x = rng.normal(0, rng.uniform(0.1, 5), nx)
            y = rng.normal(0, rng.uniform(0.1, 5), ny)
            assert var_equal_test(x, y).statistic >= 1.0


class TestDegreesOfFreedom:

    def test_single_observation(self):
        with pytest.raises(FreedomDegreesError):
            var_equal_test([1.0], [1.0, 2.0, 3.0])

    def test_single_observation_in_y(self):
        with pytest.raises(DistributionParametersError):
            var_equal_test([1.0, 2.0, 3.0], [4.0])

    def test_empty_sample(self):
        with pytest.raises(FreedomDegreesError):
            var_equal_test([], [1.0, 2.0])

    def test_two_observations_is_enough(self):
        result = var_equal_test([1.0, 3.0], [1.0, 2.0, 4.0])
        assert result.parameter["num df"] + result.parameter["denom df"] == 3.0


class TestSignificance:

    @pytest.mark.parametrize("significance", [0.0, 1.0, -0.1, 1.5])
    def test_invalid_significance(self, variance_samples, significance):
        with pytest.raises(SignificanceError):
            var_equal_test(*variance_samples, significance=significance)

    def test_validated_at_solve_not_construction(self, variance_samples):
        hypothesis = SameVarianceHypothesis(*variance_samples, 1.5)
        with pytest.raises(SignificanceError):
            hypothesis.solve()

    def test_significance_checked_before_degrees_of_freedom(self):
        with pytest.raises(SignificanceError):
            var_equal_test([1.0], [2.0], significance=0.0)


class TestZeroVariance:

    def test_constant_sample_gives_inf(self):
        result = var_equal_test([5.0, 5.0, 5.0], [1.0, 2.0, 3.0])
        assert result.statistic == np.inf
        assert result.accepted is False
        assert result.extras["numerator"] == "y"
        assert result.warnings

    def test_both_constant_gives_nan(self):
        result = var_equal_test([5.0, 5.0], [1.0, 1.0, 1.0])
        assert np.isnan(result.statistic)
        assert result.accepted is False


class TestValidation:

    def test_y_required(self):
        with pytest.raises(ValidationError, match="y is required"):
            var_equal_test([1, 2, 3])

    def test_nan_rejected(self):
        with pytest.raises(ValidationError):
            var_equal_test([1.0, np.nan, 3.0], [1.0, 2.0])

    def test_2d_rejected(self):
        with pytest.raises(DimensionError):
            var_equal_test([[1.0, 2.0], [3.0, 4.0]], [1.0, 2.0])

    def test_unknown_backend(self, variance_samples):
        with pytest.raises(ValidationError, match="backend"):
            SameVarianceHypothesis(*variance_samples, 0.05, backend="gpu")


class TestSolution:

    def test_idempotent(self, variance_samples):
        hypothesis = SameVarianceHypothesis(*variance_samples, 0.05)
        first = hypothesis.solve()
        second = hypothesis.solve()
        assert first.statistic == second.statistic
        assert first.critical_value == second.critical_value
        assert first.accepted == second.accepted

    def test_design_passthrough(self, variance_samples):
        design = HypothesisDesign.for_variance_test(*variance_samples, significance=0.05)
        result = var_equal_test(design)
        assert result.statistic == pytest.approx(20.125 / 4.84, rel=1e-12)

    def test_inputs_are_read_only(self, variance_samples):
        hypothesis = SameVarianceHypothesis(*variance_samples, 0.05)
        with pytest.raises(ValueError):
            hypothesis.design.x[0] = 0.0

    def test_summary(self, variance_samples):
        s = var_equal_test(*variance_samples).summary()
        assert "F test to compare two variances" in s
        assert "num df = 4, denom df = 3" in s
        assert "critical value = 9.1172" in s
        assert "variance of x" in s

    def test_repr(self, variance_samples):
        assert "SameVarianceHypothesis(n_x=5, n_y=4" in repr(
            SameVarianceHypothesis(*variance_samples, 0.05)
        )
        assert "accepted=True" in repr(var_equal_test(*variance_samples))

    def test_metadata(self, variance_samples):
        result = var_equal_test(*variance_samples)
        assert result.backend_name == "cpu_hypothesis"
        assert result.info["test_type"] == "variance_f"
        assert result.statistic_name == "F"
