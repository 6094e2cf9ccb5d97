"""
Tests for pyhtest exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyHTestError)
    - Diagnostic attributes on LengthMismatchError, SignificanceError,
      DistributionParametersError
    - Default attribute values
"""

import pytest

from pyhtest.core.exceptions import (
    DimensionError,
    DistributionParametersError,
    FreedomDegreesError,
    LengthMismatchError,
    NumericalError,
    PyHTestError,
    SignificanceError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyHTestError."""

    def test_validation_error_is_pyhtest_error(self):
        with pytest.raises(PyHTestError):
            raise ValidationError("bad input")

    def test_length_mismatch_is_dimension_error(self):
        with pytest.raises(DimensionError):
            raise LengthMismatchError("different lengths")

    def test_length_mismatch_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise LengthMismatchError("different lengths")

    def test_significance_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise SignificanceError("out of range")

    def test_freedom_degrees_is_distribution_parameters_error(self):
        with pytest.raises(DistributionParametersError):
            raise FreedomDegreesError("df <= 0")

    def test_distribution_parameters_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise DistributionParametersError("bad scale")

    def test_numerical_error_is_not_validation_error(self):
        err = DistributionParametersError("bad scale")
        assert not isinstance(err, ValidationError)


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestAttributes:

    def test_length_mismatch_attributes(self):
        err = LengthMismatchError(
            "Inconsistent lengths", names=("a", "b"), lengths=(3, 4),
        )
        assert err.names == ("a", "b")
        assert err.lengths == (3, 4)
        assert str(err) == "Inconsistent lengths"

    def test_length_mismatch_defaults(self):
        err = LengthMismatchError("x")
        assert err.names == ()
        assert err.lengths == ()

    def test_significance_attribute(self):
        err = SignificanceError("bad", significance=1.5)
        assert err.significance == 1.5

    def test_significance_default_none(self):
        assert SignificanceError("bad").significance is None

    def test_distribution_parameters_attributes(self):
        err = FreedomDegreesError(
            "df", distribution="chi2", parameters={"df": -1.0},
        )
        assert err.distribution == "chi2"
        assert err.parameters == {"df": -1.0}

    def test_parameters_are_copied(self):
        params = {"df": 0.0}
        err = DistributionParametersError("df", parameters=params)
        params["df"] = 5.0
        assert err.parameters == {"df": 0.0}

    def test_distribution_parameters_defaults(self):
        err = DistributionParametersError("bad")
        assert err.distribution is None
        assert err.parameters is None
