"""
pyhtest: classical hypothesis tests with explicit critical values.

Every test decides by comparing an observed statistic against the
right-tail critical value of its null distribution at a chosen
significance level.

Submodules:
    hypothesis: chi-squared test of normality, F-test of equal variances
    distributions: critical values of the chi2, F and normal distributions
"""

__version__ = "0.1.0"

from pyhtest import distributions
from pyhtest import hypothesis

__all__ = [
    "__version__",
    "distributions",
    "hypothesis",
]
