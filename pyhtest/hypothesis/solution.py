"""
Hypothesis test solution types.

HTestSolution wraps Result[HTestParams] and provides an R print.htest
style report.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pyhtest.core.result import Result
from pyhtest.hypothesis._common import HTestParams

if TYPE_CHECKING:
    from pyhtest.hypothesis.design import HypothesisDesign


@dataclass
class HTestSolution:
    """
    User-facing hypothesis test results.

    Wraps Result[HTestParams]. The verdict is `accepted`: True when the
    null hypothesis is not rejected at the given significance. The
    statistic and critical value it was decided on are exposed too.
    """
    _result: Result[HTestParams]
    _design: 'HypothesisDesign | None'

    # --- Verdict ---

    @property
    def accepted(self) -> bool:
        """True if statistic < critical_value (H0 not rejected)."""
        return self._result.params.accepted

    @property
    def rejected(self) -> bool:
        return not self._result.params.accepted

    @property
    def statistic(self) -> float:
        """Observed test statistic."""
        return self._result.params.statistic

    @property
    def critical_value(self) -> float:
        """Right-tail critical value at `significance`."""
        return self._result.params.critical_value

    @property
    def significance(self) -> float:
        return self._result.params.significance

    # --- Standard htest fields ---

    @property
    def statistic_name(self) -> str:
        """Name of the test statistic (e.g. 'X-squared', 'F')."""
        return self._result.params.statistic_name

    @property
    def parameter(self) -> dict[str, float]:
        """Distribution parameters (e.g. {'df': 5})."""
        return self._result.params.parameter

    @property
    def p_value(self) -> float:
        return self._result.params.p_value

    @property
    def estimate(self) -> dict[str, float] | None:
        """Point estimate(s)."""
        return self._result.params.estimate

    @property
    def method(self) -> str:
        return self._result.params.method

    @property
    def data_name(self) -> str:
        return self._result.params.data_name

    # --- Test-specific extras ---

    @property
    def extras(self) -> dict[str, Any] | None:
        """Test-specific additional outputs."""
        return self._result.params.extras

    @property
    def observed(self) -> NDArray | None:
        """For the normality test: empirical frequencies."""
        e = self._result.params.extras
        return e.get('observed') if e else None

    @property
    def expected(self) -> NDArray | None:
        """For the normality test: theoretical frequencies."""
        e = self._result.params.extras
        return e.get('expected') if e else None

    # --- Metadata ---

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    # --- Formatting ---

    def summary(self) -> str:
        """
        Format like R's print.htest, followed by the decision.

        Produces output like:
            F test to compare two variances

        data:  x and y
        F = 4.1581, num df = 4, denom df = 3, p-value = <p>
        critical value = 9.1172 at significance 0.05
        decision: do not reject H0
        sample estimates:
         variance of x  variance of y
                20.125           4.84
        """
        p = self._result.params
        lines = []

        lines.append(f"\t{p.method}")
        lines.append("")

        lines.append(f"data:  {p.data_name}")

        parts = [f"{p.statistic_name} = {_format_number(p.statistic)}"]
        for name, val in p.parameter.items():
            parts.append(f"{name} = {val:.5g}")
        parts.append(f"p-value = {_format_pvalue(p.p_value)}")
        lines.append(", ".join(parts))

        lines.append(
            f"critical value = {_format_number(p.critical_value)} "
            f"at significance {p.significance:g}"
        )
        lines.append(
            "decision: do not reject H0" if p.accepted else "decision: reject H0"
        )

        if p.estimate is not None:
            lines.append("sample estimates:")
            names = list(p.estimate.keys())
            vals = list(p.estimate.values())
            lines.append(" ".join(f"{n:>14s}" for n in names))
            lines.append(" ".join(f"{v:14.7g}" for v in vals))

        for w in self._result.warnings:
            lines.append(f"Warning: {w}")

        lines.append("")
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"HTestSolution(method={p.method!r}, "
            f"{p.statistic_name}={p.statistic:.4g}, "
            f"critical_value={p.critical_value:.4g}, accepted={p.accepted})"
        )


def _format_pvalue(p: float) -> str:
    """Format p-value like R does."""
    if np.isnan(p):
        return "NA"
    if p < 2.2e-16:
        return "< 2.2e-16"
    if p < 0.001:
        return f"{p:.4e}"
    return f"{p:.4g}"


def _format_number(x: float) -> str:
    """Format a number, handling infinity and NaN."""
    if np.isnan(x):
        return "NaN"
    if np.isinf(x):
        return "-Inf" if x < 0 else "Inf"
    return f"{x:.5g}"
