"""
Test distributions.

Public API:
    critical_value(distribution, parameters, significance)
        - right-tail critical value via the inverse CDF
    upper_tail_probability(distribution, parameters, statistic)
        - survival function (right-tailed p-value)
    frozen_distribution(distribution, parameters)
        - validated scipy frozen distribution

Supported families: "chi2", "f", "norm".
"""

from pyhtest.distributions._critical import (
    DistributionKind,
    critical_value,
    frozen_distribution,
    upper_tail_probability,
)

__all__ = [
    "DistributionKind",
    "critical_value",
    "frozen_distribution",
    "upper_tail_probability",
]
