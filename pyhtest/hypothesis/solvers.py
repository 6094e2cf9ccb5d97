"""
Solver dispatch for hypothesis tests.

Provides the two hypothesis engines and their R-style function forms:

    NormalDistributionHypothesis(situation).solve()  /  normality_test()
    SameVarianceHypothesis(x, y, significance).solve()  /  var_equal_test()
"""

from __future__ import annotations

from numpy.typing import ArrayLike

from pyhtest.core.exceptions import ValidationError
from pyhtest.core.protocols import Backend
from pyhtest.hypothesis.design import HypothesisDesign
from pyhtest.hypothesis.situation import (
    CompleteSituation,
    IncompleteSituation,
    ProblemSituation,
)
from pyhtest.hypothesis.solution import HTestSolution
from pyhtest.hypothesis.backends.cpu import CPUHypothesisBackend


def _get_backend(backend: str = 'cpu') -> Backend:
    """
    Select backend for hypothesis tests.

    Every test here is a closed-form scalar computation, so CPU is the
    only backend; 'auto' resolves to it.
    """
    if backend in ('cpu', 'auto'):
        return CPUHypothesisBackend()
    raise ValidationError(
        f"Unknown backend: {backend!r}. Use 'cpu' or 'auto'."
    )


class NormalDistributionHypothesis:
    """
    Chi-squared goodness-of-fit test of normality.

    H0: the empirical frequencies come from a normal distribution.

    Parameters
    ----------
    situation : ProblemSituation
        CompleteSituation, IncompleteSituation, or any object providing
        empirical_sample(), theoretical_sample() and significance.
    backend : str
        'cpu' (default).

    Raises
    ------
    SignificanceError
        At construction, if the situation's significance is outside (0, 1).

    Examples
    --------
    >>> situation = CompleteSituation.from_samples(
    ...     [7, 12, 49, 66, 83, 67, 23, 13],
    ...     [5, 9, 46, 60, 89, 81, 19, 11],
    ...     significance=0.05,
    ... )
    >>> NormalDistributionHypothesis(situation).solve().accepted
    True
    """

    def __init__(self, situation: ProblemSituation, *, backend: str = 'cpu'):
        self._design = HypothesisDesign.for_normality_test(situation)
        self._backend = _get_backend(backend)

    @property
    def design(self) -> HypothesisDesign:
        return self._design

    def solve(self) -> HTestSolution:
        """
        Run the test.

        Raises
        ------
        FreedomDegreesError
            If there are 3 bins or fewer (k - 3 <= 0 degrees of freedom).
        DistributionParametersError
            If the normal fit of an IncompleteSituation is degenerate.
        LengthMismatchError
            If a custom situation returns samples of different lengths.
        """
        result = self._backend.solve(self._design)
        return HTestSolution(_result=result, _design=self._design)

    def __repr__(self) -> str:
        return f"NormalDistributionHypothesis({self._design.situation!r})"


class SameVarianceHypothesis:
    """
    F-test of equal population variances.

    H0: Var(X) = Var(Y).

    Parameters
    ----------
    x, y : array-like
        Samples; lengths may differ.
    significance : float
        Significance level, validated when solving.
    backend : str
        'cpu' (default).

    Examples
    --------
    >>> h = SameVarianceHypothesis(
    ...     [100.0, 100.5, 99.5, 90.0, 100.0],
    ...     [85.4, 80.6, 83.0, 81.0],
    ...     0.05,
    ... )
    >>> h.solve().accepted
    True
    """

    def __init__(
        self,
        x: ArrayLike,
        y: ArrayLike,
        significance: float,
        *,
        backend: str = 'cpu',
    ):
        self._design = HypothesisDesign.for_variance_test(
            x, y, significance=significance,
        )
        self._backend = _get_backend(backend)

    @property
    def design(self) -> HypothesisDesign:
        return self._design

    def solve(self) -> HTestSolution:
        """
        Run the test.

        Raises
        ------
        SignificanceError
            If significance is outside (0, 1).
        FreedomDegreesError
            If either sample has fewer than 2 observations.
        """
        result = self._backend.solve(self._design)
        return HTestSolution(_result=result, _design=self._design)

    def __repr__(self) -> str:
        return (
            f"SameVarianceHypothesis(n_x={len(self._design.x)}, "
            f"n_y={len(self._design.y)}, "
            f"significance={self._design.significance})"
        )


def normality_test(
    empirical: ArrayLike | ProblemSituation | HypothesisDesign,
    theoretical: ArrayLike | None = None,
    *,
    bin_ranges: ArrayLike | None = None,
    significance: float = 0.05,
    backend: str = 'cpu',
) -> HTestSolution:
    """
    Chi-squared goodness-of-fit test for normality.

    Parameters
    ----------
    empirical : array-like, ProblemSituation or HypothesisDesign
        Observed frequency per bin. A situation or design carries its
        own significance; `significance` is then ignored.
    theoretical : array-like or None
        Expected frequency per bin. Give either this or `bin_ranges`.
    bin_ranges : array-like or None
        (lower, upper) per bin. Expected frequencies are then derived
        from a normal distribution fitted to the bin midpoints.
    significance : float
        Significance level. Default 0.05.
    backend : str
        'cpu' (default).

    Returns
    -------
    HTestSolution
        Verdict (`accepted`), statistic, critical_value, p_value and
        extras (observed, expected).
    """
    if isinstance(empirical, HypothesisDesign):
        design = empirical
    elif isinstance(empirical, ProblemSituation):
        design = HypothesisDesign.for_normality_test(empirical)
    else:
        if bin_ranges is not None and theoretical is not None:
            raise ValidationError(
                "Give either theoretical frequencies or bin_ranges, not both"
            )
        if bin_ranges is not None:
            situation = IncompleteSituation.from_bins(
                bin_ranges, empirical, significance=significance,
            )
        elif theoretical is not None:
            situation = CompleteSituation.from_samples(
                empirical, theoretical, significance=significance,
            )
        else:
            raise ValidationError(
                "theoretical or bin_ranges is required for normality_test"
            )
        design = HypothesisDesign.for_normality_test(situation)

    be = _get_backend(backend)
    result = be.solve(design)
    return HTestSolution(_result=result, _design=design)


def var_equal_test(
    x: ArrayLike | HypothesisDesign,
    y: ArrayLike | None = None,
    *,
    significance: float = 0.05,
    backend: str = 'cpu',
) -> HTestSolution:
    """
    F-test for equality of two variances.

    Parameters
    ----------
    x : array-like or HypothesisDesign
        First sample.
    y : array-like or None
        Second sample. Required unless x is a HypothesisDesign.
    significance : float
        Significance level. Default 0.05.
    backend : str
        'cpu' (default).

    Returns
    -------
    HTestSolution
        Verdict (`accepted`), statistic (F >= 1), critical_value,
        parameter ({"num df", "denom df"}), estimate (both variances).
    """
    if isinstance(x, HypothesisDesign):
        design = x
    else:
        if y is None:
            raise ValidationError("y is required for var_equal_test")
        design = HypothesisDesign.for_variance_test(
            x, y, significance=significance,
        )

    be = _get_backend(backend)
    result = be.solve(design)
    return HTestSolution(_result=result, _design=design)
