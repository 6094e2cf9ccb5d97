"""
Core infrastructure for pyhtest.

This module provides shared abstractions and utilities used by all
domain-specific submodules (distributions, hypothesis).

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing
"""

from pyhtest.core.protocols import Backend
from pyhtest.core.result import Result
from pyhtest.core.exceptions import (
    PyHTestError,
    ValidationError,
    DimensionError,
    LengthMismatchError,
    SignificanceError,
    NumericalError,
    DistributionParametersError,
    FreedomDegreesError,
)

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PyHTestError",
    "ValidationError",
    "DimensionError",
    "LengthMismatchError",
    "SignificanceError",
    "NumericalError",
    "DistributionParametersError",
    "FreedomDegreesError",
]
