from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Callable
from typing import Any, cast

import numpy as np
from mypy_extensions import KwArg

from pysatl_bats.distributions.computation import AnalyticalComputation
from pysatl_bats.distributions.support import ContinuousSupport
from pysatl_bats.types import CharacteristicName
from tests.utils.mocks import StandaloneUnivariateDistribution


class DistributionTestBase:
    def make_uniform_ppf_distribution(self) -> StandaloneUnivariateDistribution:
        ppf_func = cast(
            Callable[[Any, KwArg(Any)], Any], lambda q, **kwargs: np.asarray(q, dtype=float)
        )
        return StandaloneUnivariateDistribution(
            analytical_computations=[
                AnalyticalComputation[Any, Any](target=CharacteristicName.PPF, func=ppf_func),
            ],
            support=ContinuousSupport.from_bounds(0.0, 1.0),
        )

    def make_exponential_ppf_distribution(self, rate: float) -> StandaloneUnivariateDistribution:
        def exponential_ppf(q: Any, **options: Any) -> Any:
            scale = options.get("scale", 1.0)
            return -scale * np.log1p(-np.asarray(q, dtype=float)) / rate

        return StandaloneUnivariateDistribution(
            analytical_computations={
                CharacteristicName.PPF: AnalyticalComputation[Any, Any](
                    target=CharacteristicName.PPF, func=exponential_ppf
                ),
            },
            support=ContinuousSupport.from_bounds(0.0, float("inf")),
        )
