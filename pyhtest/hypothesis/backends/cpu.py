"""
CPU backend for hypothesis tests.

Dispatches to test-specific submodules based on design.test_type.
"""

from __future__ import annotations

from pyhtest.core.result import Result
from pyhtest.core.compute.timing import Timer
from pyhtest.hypothesis._common import HTestParams
from pyhtest.hypothesis.design import HypothesisDesign


class CPUHypothesisBackend:
    """CPU backend for hypothesis tests."""

    @property
    def name(self) -> str:
        return 'cpu_hypothesis'

    def solve(self, design: HypothesisDesign) -> Result[HTestParams]:
        """Dispatch to test-specific implementation based on design.test_type."""
        timer = Timer()
        timer.start()

        test_type = design.test_type

        with timer.section(test_type):
            if test_type == "normality_chisq":
                from pyhtest.hypothesis.backends._normality_test import normality_chisq
                params, warnings_list = normality_chisq(design)
            elif test_type == "variance_f":
                from pyhtest.hypothesis.backends._variance_test import variance_f
                params, warnings_list = variance_f(design)
            else:
                raise ValueError(f"Unknown test_type: {test_type!r}")

        timer.stop()

        return Result(
            params=params,
            info={'test_type': test_type},
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
