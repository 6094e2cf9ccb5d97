"""
Hypothesis testing module.

Public API:
    normality_test(empirical, theoretical)      - chi-squared test of normality
    normality_test(empirical, bin_ranges=...)   - same, normal fit from binned data
    var_equal_test(x, y)                        - F-test of equal variances
    NormalDistributionHypothesis(situation)     - engine form, .solve()
    SameVarianceHypothesis(x, y, significance)  - engine form, .solve()
    CompleteSituation, IncompleteSituation      - normality test inputs
"""

from pyhtest.hypothesis.solvers import (
    normality_test,
    var_equal_test,
    NormalDistributionHypothesis,
    SameVarianceHypothesis,
)
from pyhtest.hypothesis.situation import (
    ProblemSituation,
    CompleteSituation,
    IncompleteSituation,
)
from pyhtest.hypothesis.design import HypothesisDesign
from pyhtest.hypothesis._common import HTestParams
from pyhtest.hypothesis.solution import HTestSolution

__all__ = [
    "normality_test",
    "var_equal_test",
    "NormalDistributionHypothesis",
    "SameVarianceHypothesis",
    "ProblemSituation",
    "CompleteSituation",
    "IncompleteSituation",
    "HypothesisDesign",
    "HTestParams",
    "HTestSolution",
]
