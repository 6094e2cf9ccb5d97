"""
HypothesisDesign: tagged union for hypothesis test inputs.

Uses factory classmethods per test type. The `test_type` field identifies
which fields are populated. Immutable after construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray, ArrayLike

from pyhtest.core.exceptions import ValidationError
from pyhtest.core.validation import (
    check_1d,
    check_array,
    check_finite,
    check_significance,
)
from pyhtest.hypothesis.situation import (
    CompleteSituation,
    IncompleteSituation,
    ProblemSituation,
)


def _to_float64_1d(x: ArrayLike, name: str = "x") -> NDArray[np.floating[Any]]:
    """Convert to a read-only 1D float64 array, rejecting NaN and Inf."""
    arr = check_array(x, name)
    check_1d(arr, name)
    check_finite(arr, name)
    arr = arr.astype(np.float64, copy=True)
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True)
class HypothesisDesign:
    """
    Design for hypothesis tests.

    Uses a tagged-union approach: the `test_type` field identifies which
    fields are populated. Factory classmethods validate inputs.

    Do not construct directly; use factory classmethods.
    """
    test_type: str

    # Normality test
    _situation: ProblemSituation | None = None

    # Variance test
    _x: NDArray[np.floating[Any]] | None = None
    _y: NDArray[np.floating[Any]] | None = None

    _significance: float = 0.05

    # Metadata
    _data_name: str = ""

    # --- Properties ---

    @property
    def situation(self) -> ProblemSituation | None:
        return self._situation

    @property
    def x(self) -> NDArray[np.floating[Any]] | None:
        return self._x

    @property
    def y(self) -> NDArray[np.floating[Any]] | None:
        return self._y

    @property
    def significance(self) -> float:
        return self._significance

    @property
    def data_name(self) -> str:
        return self._data_name

    # --- Factory classmethods ---

    @classmethod
    def for_normality_test(cls, situation: ProblemSituation) -> HypothesisDesign:
        """
        Build design for normality_test().

        The significance is taken from the situation and validated here,
        so an out-of-range value is reported before solving. Degrees of
        freedom and the normal fit are only checked when solving.
        """
        if not isinstance(situation, ProblemSituation):
            raise ValidationError(
                f"situation must provide empirical_sample(), theoretical_sample() "
                f"and significance, got {type(situation).__name__}"
            )
        significance = check_significance(situation.significance)

        if isinstance(situation, IncompleteSituation):
            data_name = f"empirical counts in {situation.n_bins} bins"
        elif isinstance(situation, CompleteSituation):
            data_name = "empirical and theoretical"
        else:
            data_name = type(situation).__name__

        return cls(
            test_type="normality_chisq",
            _situation=situation,
            _significance=significance,
            _data_name=data_name,
        )

    @classmethod
    def for_variance_test(
        cls,
        x: ArrayLike,
        y: ArrayLike,
        *,
        significance: float = 0.05,
    ) -> HypothesisDesign:
        """
        Build design for var_equal_test().

        Parameters
        ----------
        x : array-like
            First sample.
        y : array-like
            Second sample. May differ in length from x.
        significance : float
            Significance level. Not validated here; the critical value
            computation rejects values outside (0, 1) when solving.
        """
        x_arr = _to_float64_1d(x, "x")
        y_arr = _to_float64_1d(y, "y")

        return cls(
            test_type="variance_f",
            _x=x_arr,
            _y=y_arr,
            _significance=significance,
            _data_name="x and y",
        )

    def __repr__(self) -> str:
        if self._situation is not None:
            return (
                f"HypothesisDesign(test_type={self.test_type!r}, "
                f"situation={self._situation!r})"
            )
        n_x = len(self._x) if self._x is not None else 0
        n_y = len(self._y) if self._y is not None else 0
        return (
            f"HypothesisDesign(test_type={self.test_type!r}, "
            f"n_x={n_x}, n_y={n_y})"
        )
