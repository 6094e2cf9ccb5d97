"""
Exception hierarchy for pyhtest.

All exceptions inherit from PyHTestError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here, so new failure kinds can be added
without breaking callers that catch a base class.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""

from typing import Any, Mapping


class PyHTestError(Exception):
    """Base exception for all pyhtest errors."""
    pass


class ValidationError(PyHTestError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions.
    """
    pass


class LengthMismatchError(DimensionError):
    """
    Arrays that pair element-wise have different lengths.

    Attributes:
        names: Parameter names of the arrays involved
        lengths: Their lengths, in the same order
    """

    def __init__(
        self,
        message: str,
        names: tuple[str, ...] = (),
        lengths: tuple[int, ...] = (),
    ):
        super().__init__(message)
        self.names = names
        self.lengths = lengths


class SignificanceError(ValidationError):
    """
    Significance level is not strictly between 0 and 1.

    Attributes:
        significance: The rejected value
    """

    def __init__(self, message: str, significance: float | None = None):
        super().__init__(message)
        self.significance = significance


class NumericalError(PyHTestError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class DistributionParametersError(NumericalError):
    """
    Parameters cannot construct a valid probability distribution.

    Raised for estimated normal parameters (zero or non-finite standard
    deviation) and for any shape parameter outside the family's domain.

    Attributes:
        distribution: Distribution family name ('chi2', 'f', 'norm')
        parameters: The offending parameters
    """

    def __init__(
        self,
        message: str,
        distribution: str | None = None,
        parameters: Mapping[str, Any] | None = None,
    ):
        super().__init__(message)
        self.distribution = distribution
        self.parameters = dict(parameters) if parameters is not None else None


class FreedomDegreesError(DistributionParametersError):
    """
    Degrees of freedom are not positive finite reals.

    Raised for chi-squared and F distributions, typically because the
    sample is too small for the number of estimated parameters.
    """
    pass
