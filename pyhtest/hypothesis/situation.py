"""
Problem situations for the normality test.

A problem situation resolves to an empirical frequency sample and the
theoretical (expected) frequencies it is compared against:

    CompleteSituation   - both samples are given directly
    IncompleteSituation - only bin ranges and empirical counts are given;
                          expected frequencies come from a normal
                          distribution fitted by the method of moments
                          on the bin midpoints

Anything satisfying the ProblemSituation protocol can be tested, so
callers may bring their own source of expected frequencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyhtest.core.exceptions import DimensionError, ValidationError
from pyhtest.core.validation import (
    check_1d,
    check_array,
    check_consistent_length,
    check_finite,
    check_ndim,
    check_non_negative,
    check_significance,
)
from pyhtest.distributions import frozen_distribution


@runtime_checkable
class ProblemSituation(Protocol):
    """
    Data source for the normality test.

    empirical_sample() and theoretical_sample() must return equally long
    1D sequences of frequencies in the same bin order, and must be pure:
    repeated calls return identical values.
    """

    def empirical_sample(self) -> NDArray[np.floating[Any]]:
        """Observed frequency per bin."""
        ...

    def theoretical_sample(self) -> NDArray[np.floating[Any]]:
        """Expected frequency per bin under normality."""
        ...

    @property
    def significance(self) -> float:
        """Significance level of the test."""
        ...


def _frequencies(values: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """Validated, read-only 1D float array."""
    arr = check_array(values, name)
    check_1d(arr, name)
    check_finite(arr, name)
    arr = arr.astype(np.float64, copy=True)
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True)
class CompleteSituation:
    """
    Empirical and theoretical frequencies, both given.

    Construction:
        CompleteSituation.from_samples(empirical, theoretical, significance=0.05)
    """
    _empirical: NDArray[np.floating[Any]]
    _theoretical: NDArray[np.floating[Any]]
    _significance: float

    @classmethod
    def from_samples(
        cls,
        empirical: ArrayLike,
        theoretical: ArrayLike,
        *,
        significance: float,
    ) -> CompleteSituation:
        """
        Build from two paired frequency samples.

        Raises
        ------
        LengthMismatchError
            If the samples have different lengths.
        SignificanceError
            If significance is outside (0, 1).
        """
        emp = _frequencies(empirical, "empirical")
        theo = _frequencies(theoretical, "theoretical")
        check_consistent_length(emp, theo, names=("empirical", "theoretical"))
        significance = check_significance(significance)
        return cls(_empirical=emp, _theoretical=theo, _significance=significance)

    def empirical_sample(self) -> NDArray[np.floating[Any]]:
        return self._empirical

    def theoretical_sample(self) -> NDArray[np.floating[Any]]:
        return self._theoretical

    @property
    def significance(self) -> float:
        return self._significance

    @property
    def n_bins(self) -> int:
        return len(self._empirical)

    def __repr__(self) -> str:
        return (
            f"CompleteSituation(n_bins={self.n_bins}, "
            f"significance={self._significance})"
        )


@dataclass(frozen=True)
class IncompleteSituation:
    """
    Binned empirical counts without expected frequencies.

    The expected frequencies are derived on every call to
    theoretical_sample():

        N        = sum of empirical counts
        mean     = (1/N) * sum(count_i * midpoint_i)
        variance = (1/N) * sum(count_i * (midpoint_i - mean)^2)
        expected_i = N * (Phi(upper_i) - Phi(lower_i))

    where Phi is the CDF of Normal(mean, sqrt(variance)). The variance
    is the population (1/N) moment, not the unbiased estimate.

    Construction:
        IncompleteSituation.from_bins([(22, 24), (24, 26), ...],
                                      [2, 12, ...], significance=0.01)
    """
    _bin_ranges: NDArray[np.floating[Any]]
    _empirical: NDArray[np.floating[Any]]
    _significance: float

    @classmethod
    def from_bins(
        cls,
        bin_ranges: ArrayLike,
        empirical: ArrayLike,
        *,
        significance: float,
    ) -> IncompleteSituation:
        """
        Build from (lower, upper) bin ranges and the count in each bin.

        Raises
        ------
        LengthMismatchError
            If the number of bins and counts differ.
        DimensionError
            If bin_ranges is not a sequence of (lower, upper) pairs.
        ValidationError
            If a bin has lower >= upper, a count is negative, or the
            counts sum to zero.
        SignificanceError
            If significance is outside (0, 1).
        """
        ranges = check_array(bin_ranges, "bin_ranges")
        if ranges.ndim == 1 and ranges.shape[0] == 0:
            ranges = ranges.reshape(0, 2)
        check_ndim(ranges, 2, "bin_ranges")
        if ranges.shape[1] != 2:
            raise DimensionError(
                f"bin_ranges: expected (lower, upper) pairs with shape (k, 2), "
                f"got shape {ranges.shape}"
            )
        check_finite(ranges, "bin_ranges")
        counts = _frequencies(empirical, "empirical")
        check_consistent_length(ranges, counts, names=("bin_ranges", "empirical"))

        inverted = np.where(ranges[:, 0] >= ranges[:, 1])[0]
        if len(inverted) > 0:
            raise ValidationError(
                f"bin_ranges: bins {inverted.tolist()} have lower >= upper"
            )
        check_non_negative(counts, "empirical")
        if counts.sum() <= 0:
            raise ValidationError(
                "empirical: counts must sum to a positive total"
            )
        significance = check_significance(significance)

        ranges = ranges.astype(np.float64, copy=True)
        ranges.setflags(write=False)
        return cls(_bin_ranges=ranges, _empirical=counts, _significance=significance)

    @property
    def bin_ranges(self) -> NDArray[np.floating[Any]]:
        return self._bin_ranges

    @property
    def significance(self) -> float:
        return self._significance

    @property
    def n_bins(self) -> int:
        return len(self._empirical)

    @property
    def total(self) -> float:
        """N, the total empirical count."""
        return float(self._empirical.sum())

    def empirical_sample(self) -> NDArray[np.floating[Any]]:
        return self._empirical

    def midpoints(self) -> NDArray[np.floating[Any]]:
        return (self._bin_ranges[:, 0] + self._bin_ranges[:, 1]) / 2.0

    def fitted_parameters(self) -> tuple[float, float]:
        """Method-of-moments (mean, standard deviation) from the bin midpoints."""
        n = self.total
        mid = self.midpoints()
        mean = float(np.sum(self._empirical * mid) / n)
        variance = float(np.sum(self._empirical * (mid - mean) ** 2) / n)
        return mean, float(np.sqrt(variance))

    def fitted_distribution(self):
        """
        Frozen Normal(mean, sd) from fitted_parameters().

        Raises DistributionParametersError when the fitted standard
        deviation is zero, which happens when every count falls into
        a single bin.
        """
        mean, sd = self.fitted_parameters()
        return frozen_distribution("norm", {"loc": mean, "scale": sd})

    def theoretical_sample(self) -> NDArray[np.floating[Any]]:
        dist = self.fitted_distribution()
        probs = dist.cdf(self._bin_ranges[:, 1]) - dist.cdf(self._bin_ranges[:, 0])
        return self.total * probs

    def __repr__(self) -> str:
        return (
            f"IncompleteSituation(n_bins={self.n_bins}, total={self.total:g}, "
            f"significance={self._significance})"
        )
