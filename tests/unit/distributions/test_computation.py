from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import Any

import pytest

from pysatl_bats.distributions.computation import AnalyticalComputation, Computation
from tests.unit.distributions.helpers import DistributionTestBase


class TestAnalyticalComputation(DistributionTestBase):
    def test_call_forwards_data_and_options(self) -> None:
        seen: dict[str, Any] = {}

        def func(x: float, **options: Any) -> float:
            seen.update(options)
            return 2.0 * x

        comp = AnalyticalComputation[float, float](target="pdf", func=func)
        assert comp(1.5, tol=1e-3) == 3.0
        assert seen == {"tol": 1e-3}

    def test_satisfies_computation_protocol(self) -> None:
        comp = AnalyticalComputation[float, float](target="cdf", func=lambda x, **_: x)
        assert isinstance(comp, Computation)
        assert comp.target == "cdf"

    def test_is_frozen(self) -> None:
        comp = AnalyticalComputation[float, float](target="cdf", func=lambda x, **_: x)
        with pytest.raises(AttributeError):
            comp.target = "pdf"  # type: ignore[misc]

    def test_distribution_query_method(self) -> None:
        distr = self.make_uniform_ppf_distribution()
        assert distr.query_method("ppf")(0.25) == 0.25
        assert distr.calculate_characteristic("ppf", 0.75) == 0.75

    def test_missing_characteristic(self) -> None:
        distr = self.make_uniform_ppf_distribution()
        with pytest.raises(KeyError, match="cdf"):
            distr.query_method("cdf")
