"""
Distribution Interface
======================

The public :class:`Distribution` protocol consumed by sampling strategies and
the functional API.

Notes
-----
- Characteristics are looked up by name among the analytical computations
  the distribution carries; there is no conversion graph between them.
- Sampling is delegated to the attached :class:`SamplingStrategy` and always
  takes an explicit ``numpy.random.Generator``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    import numpy as np

    from pysatl_bats.distributions.computation import AnalyticalComputation
    from pysatl_bats.distributions.sampling import Sample
    from pysatl_bats.distributions.strategies import SamplingStrategy
    from pysatl_bats.distributions.support import Support
    from pysatl_bats.types import EuclideanDistributionType, GenericCharacteristicName


@runtime_checkable
class Distribution(Protocol):
    """Public distribution interface used by strategies and the functional API."""

    @property
    def distribution_type(self) -> EuclideanDistributionType: ...

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]: ...

    @property
    def sampling_strategy(self) -> SamplingStrategy: ...

    @property
    def support(self) -> Support | None: ...

    def query_method(
        self, characteristic_name: GenericCharacteristicName
    ) -> AnalyticalComputation[Any, Any]:
        try:
            return self.analytical_computations[characteristic_name]
        except KeyError:
            raise KeyError(
                f"Characteristic '{characteristic_name}' is not provided by this distribution."
            ) from None

    def calculate_characteristic(
        self, characteristic_name: GenericCharacteristicName, value: Any, **options: Any
    ) -> Any:
        return self.query_method(characteristic_name)(value, **options)

    def sample(self, n: int, *, rng: np.random.Generator, **options: Any) -> Sample:
        return self.sampling_strategy.sample(n, distr=self, rng=rng, **options)
