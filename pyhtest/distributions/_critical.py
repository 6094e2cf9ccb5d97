"""
Critical values of the test distributions.

Thin layer over scipy.stats: validates the family and its shape
parameters, then reads the right-tail critical value off the inverse
CDF. scipy itself does not reject invalid shapes (chi2.ppf(0.95, -1)
is NaN), so validation happens here, before any frozen distribution
is handed out.
"""

from __future__ import annotations

import math
from typing import Any, Callable, Literal, Mapping

from scipy import stats as sp_stats

from pyhtest.core.exceptions import (
    DistributionParametersError,
    FreedomDegreesError,
    ValidationError,
)
from pyhtest.core.validation import check_significance


DistributionKind = Literal["chi2", "f", "norm"]


def _check_degrees_of_freedom(
    distribution: str, parameters: Mapping[str, float],
) -> None:
    for name, value in parameters.items():
        if not (math.isfinite(value) and value > 0):
            raise FreedomDegreesError(
                f"{distribution}: degrees of freedom must be positive and "
                f"finite, got {name}={value}",
                distribution=distribution,
                parameters=parameters,
            )


def _check_location_scale(
    distribution: str, parameters: Mapping[str, float],
) -> None:
    loc = parameters["loc"]
    scale = parameters["scale"]
    if not math.isfinite(loc):
        raise DistributionParametersError(
            f"{distribution}: loc must be finite, got {loc}",
            distribution=distribution,
            parameters=parameters,
        )
    if not (math.isfinite(scale) and scale > 0):
        raise DistributionParametersError(
            f"{distribution}: scale must be positive and finite, got {scale}",
            distribution=distribution,
            parameters=parameters,
        )


# family -> (scipy distribution, required shape names, validator)
_FAMILIES: dict[str, tuple[Any, tuple[str, ...], Callable[[str, Mapping[str, float]], None]]] = {
    "chi2": (sp_stats.chi2, ("df",), _check_degrees_of_freedom),
    "f": (sp_stats.f, ("dfn", "dfd"), _check_degrees_of_freedom),
    "norm": (sp_stats.norm, ("loc", "scale"), _check_location_scale),
}


def frozen_distribution(
    distribution: DistributionKind | str,
    parameters: Mapping[str, float],
):
    """
    Build a validated scipy frozen distribution.

    Parameters
    ----------
    distribution : str
        "chi2", "f" or "norm".
    parameters : mapping
        Shape parameters by scipy name: {"df"} for chi2,
        {"dfn", "dfd"} for f, {"loc", "scale"} for norm.

    Raises
    ------
    ValidationError
        Unknown family, or missing/unexpected parameter names.
    FreedomDegreesError
        Non-positive or non-finite degrees of freedom.
    DistributionParametersError
        Non-finite location or non-positive scale.
    """
    if distribution not in _FAMILIES:
        raise ValidationError(
            f"Unknown distribution: {distribution!r}. "
            f"Use one of {tuple(_FAMILIES)}."
        )
    dist, names, validate = _FAMILIES[distribution]

    if set(parameters) != set(names):
        raise ValidationError(
            f"{distribution}: expected parameters {names}, "
            f"got {tuple(parameters)}"
        )

    try:
        values = {name: float(parameters[name]) for name in names}
    except (TypeError, ValueError) as e:
        raise DistributionParametersError(
            f"{distribution}: parameters must be real numbers, got {dict(parameters)}",
            distribution=distribution,
            parameters=parameters,
        ) from e

    validate(distribution, values)
    return dist(**values)


def critical_value(
    distribution: DistributionKind | str,
    parameters: Mapping[str, float],
    significance: float,
) -> float:
    """
    Right-tail critical value of a distribution.

    Returns x such that P(X > x) = significance, i.e. the
    (1 - significance)-quantile.

    Examples
    --------
    >>> critical_value("chi2", {"df": 5}, 0.05)    # doctest: +SKIP
    11.0704976935...
    """
    significance = check_significance(significance)
    frozen = frozen_distribution(distribution, parameters)
    return float(frozen.ppf(1.0 - significance))


def upper_tail_probability(
    distribution: DistributionKind | str,
    parameters: Mapping[str, float],
    statistic: float,
) -> float:
    """P(X > statistic): the p-value of a right-tailed test."""
    frozen = frozen_distribution(distribution, parameters)
    return float(frozen.sf(statistic))
