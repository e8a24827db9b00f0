"""
Concrete distribution instances with specific parameter values.

This module provides the implementation for individual distribution instances
created from parametric families.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from dataclasses import dataclass
from typing import TYPE_CHECKING

from pysatl_bats.distributions.distribution import Distribution
from pysatl_bats.families.registry import ParametricFamilyRegister
from pysatl_bats.types import CharacteristicName

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    import numpy as np

    from pysatl_bats.distributions.computation import AnalyticalComputation
    from pysatl_bats.distributions.sampling import Sample
    from pysatl_bats.distributions.strategies import SamplingStrategy
    from pysatl_bats.distributions.support import Support
    from pysatl_bats.families.parametric_family import ParametricFamily
    from pysatl_bats.families.parametrizations import Parametrization
    from pysatl_bats.types import EuclideanDistributionType, GenericCharacteristicName


@dataclass(slots=True)
class ParametricFamilyDistribution(Distribution):
    """
    A specific distribution instance from a parametric family.

    Parameters
    ----------
    family_name : str
        Name of the distribution family.
    _distribution_type : EuclideanDistributionType
        Type of this distribution.
    parameters : Parametrization
        Parameter values, in the parametrization the caller used.
    state : Any
        Object prepared once from the base parameters; every characteristic
        is evaluated against it.
    _support : Support or None
        Support of this distribution.
    _analytical_computations : Mapping
        Characteristics bound to ``state``.
    """

    family_name: str
    _distribution_type: EuclideanDistributionType
    parameters: Parametrization
    state: Any
    _support: Support | None
    _analytical_computations: Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]

    @property
    def distribution_type(self) -> EuclideanDistributionType:
        return self._distribution_type

    @property
    def family(self) -> ParametricFamily:
        """The parametric family this distribution belongs to."""
        return ParametricFamilyRegister.get(self.family_name)

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        return self._analytical_computations

    @property
    def sampling_strategy(self) -> SamplingStrategy:
        return self.family.sampling_strategy

    @property
    def support(self) -> Support | None:
        return self._support

    def pdf(self, x: Any) -> Any:
        return self.calculate_characteristic(CharacteristicName.PDF, x)

    def logpdf(self, x: Any) -> Any:
        return self.calculate_characteristic(CharacteristicName.LOGPDF, x)

    def cdf(self, x: Any) -> Any:
        return self.calculate_characteristic(CharacteristicName.CDF, x)

    def logcdf(self, x: Any) -> Any:
        return self.calculate_characteristic(CharacteristicName.LOGCDF, x)

    def ppf(self, p: Any, **options: Any) -> Any:
        """
        Quantile at ``p``.

        ``**options`` override the root-finding tolerances (``x_tol``,
        ``r_tol``, ``max_iter``, ``max_expand``).
        """
        return self.calculate_characteristic(CharacteristicName.PPF, p, **options)

    def sample(self, n: int, *, rng: np.random.Generator, **options: Any) -> Sample:
        """
        Draw ``n`` values with the caller's generator.

        Parameters
        ----------
        n : int
            Number of values to draw.
        rng : numpy.random.Generator
            Source of randomness; never defaulted.
        **options : Any
            Forwarded to ``ppf``.

        Returns
        -------
        Sample
            An ``(n, 1)`` sample.
        """
        return self.sampling_strategy.sample(n, distr=self, rng=rng, **options)


__all__ = ["ParametricFamilyDistribution"]
