"""
Common types for hypothesis testing.

Defines HTestParams, the parameter payload every test returns.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


# Mean and standard deviation of the hypothesised normal distribution.
# Their loss of freedom is charged to every normality test, whether the
# expected frequencies were given or fitted.
NORMAL_ESTIMATED_PARAMETERS = 2

SMALL_EXPECTED_WARNING = "Chi-squared approximation may be incorrect"


@dataclass(frozen=True)
class HTestParams:
    """
    Parameter payload for hypothesis tests.

    Every test decides by comparing the observed statistic against the
    right-tail critical value of its null distribution; the p-value is
    reported alongside for reference.

    Attributes
    ----------
    statistic : float
        Observed test statistic. May be inf or nan when a denominator
        is zero (see the result's warnings).
    statistic_name : str
        Name of the test statistic ("X-squared", "F").
    parameter : dict
        Distribution parameters, e.g. {"df": 5} or {"num df": 4, "denom df": 3}.
    critical_value : float
        Right-tail critical value at the given significance.
    significance : float
        Significance level used to derive the critical value.
    accepted : bool
        True when the null hypothesis is not rejected
        (statistic < critical_value).
    p_value : float
        Right-tail probability of the observed statistic.
    estimate : dict or None
        Point estimate(s), e.g. {"mean": 28.0, "sd": 1.93}.
    method : str
        Human-readable method name.
    data_name : str
        Description of the data, e.g. "x and y".
    extras : dict or None
        Test-specific additional outputs (e.g. observed/expected
        frequencies for the chi-squared test).
    """
    statistic: float
    statistic_name: str
    parameter: dict[str, float]
    critical_value: float
    significance: float
    accepted: bool
    p_value: float
    estimate: dict[str, float] | None
    method: str
    data_name: str
    extras: dict[str, Any] | None = None
