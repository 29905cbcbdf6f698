"""
CPU reference backend for hypothesis tests.

Dispatches to test-specific submodules based on design.test_type.
"""

from __future__ import annotations

from typing import Any

from hyte.core.result import Result
from hyte.core.compute.timing import Timer
from hyte.hypothesis.design import HypothesisDesign


class CPUHypothesisBackend:
    """CPU reference backend for hypothesis tests."""

    @property
    def name(self) -> str:
        return 'cpu_hypothesis'

    def solve(self, design: HypothesisDesign) -> Result[Any]:
        """Dispatch to test-specific implementation based on design.test_type."""
        timer = Timer()
        timer.start()

        test_type = design.test_type

        with timer.section(test_type):
            if test_type == "z_one_sample":
                from hyte.hypothesis.backends._z_test import z_one_sample
                params, warnings_list = z_one_sample(design)
            elif test_type == "t_one_sample":
                from hyte.hypothesis.backends._t_test import t_one_sample
                params, warnings_list = t_one_sample(design)
            elif test_type == "t_two_sample":
                from hyte.hypothesis.backends._t_test import t_two_sample
                params, warnings_list = t_two_sample(design)
            elif test_type == "chisq_independence":
                from hyte.hypothesis.backends._chisq_test import chisq_independence
                params, warnings_list = chisq_independence(design)
            elif test_type == "chisq_gof":
                from hyte.hypothesis.backends._chisq_test import chisq_gof
                params, warnings_list = chisq_gof(design)
            else:
                raise ValueError(f"Unknown test_type: {test_type!r}")

        timer.stop()

        return Result(
            params=params,
            info={'test_type': test_type, 'data_name': design.data_name},
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
