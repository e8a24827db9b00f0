"""
Parametric family definitions and management infrastructure.

A :class:`ParametricFamily` ties together the parametrizations of a
distribution, the characteristic functions evaluating it, the support rule
and the sampling strategy, and acts as the factory of
:class:`~pysatl_bats.families.distribution.ParametricFamilyDistribution`
instances.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from functools import partial
from typing import TYPE_CHECKING, dataclass_transform

from pysatl_bats.distributions.computation import AnalyticalComputation
from pysatl_bats.distributions.strategies import InverseTransformSamplingStrategy
from pysatl_bats.families.distribution import ParametricFamilyDistribution
from pysatl_bats.logging import logger
from pysatl_bats.types import EuclideanDistributionType

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any, TypeAlias

    from pysatl_bats.distributions.strategies import SamplingStrategy
    from pysatl_bats.distributions.support import Support
    from pysatl_bats.families.parametrizations import Parametrization
    from pysatl_bats.types import GenericCharacteristicName, ParametrizationName

    StateFunction: TypeAlias = Callable[..., Any]
    StatePreparer: TypeAlias = Callable[[Parametrization], Any]
    SupportResolver: TypeAlias = Callable[[Any], Support | None]
    TypeResolver: TypeAlias = Callable[[Parametrization], EuclideanDistributionType]


class ParametricFamily:
    """
    A family of distributions with multiple parametrizations.

    Parameters
    ----------
    name : str
        Name of the distribution family.
    distr_type : EuclideanDistributionType or Callable
        Distribution type or a function inferring it from base parameters.
    distr_parametrizations : list[ParametrizationName]
        Parametrization names; the first one is the base parametrization.
    distr_characteristics : dict[str, Callable]
        Mapping from characteristic names to functions
        ``func(state, x, **options)``.
    sampling_strategy : SamplingStrategy, optional
        Strategy for sampling; inverse transform sampling by default.
    support_by_state : Callable or None, optional
        Function returning the support for a prepared state.
    prepare : Callable or None, optional
        Called once per distribution with the validated base parameters;
        its result is the ``state`` handed to every characteristic. The base
        parameters themselves are the state when omitted.

    Notes
    -----
    Characteristics are always evaluated on the base parametrization, so
    alternative parametrizations only need a conversion to the base.
    """

    def __init__(
        self,
        name: str,
        distr_type: EuclideanDistributionType | TypeResolver,
        distr_parametrizations: list[ParametrizationName],
        distr_characteristics: dict[GenericCharacteristicName, StateFunction],
        sampling_strategy: SamplingStrategy | None = None,
        support_by_state: SupportResolver | None = None,
        prepare: StatePreparer | None = None,
    ):
        if not distr_parametrizations:
            raise ValueError("A family needs at least one parametrization.")

        self._name = name
        self._distr_type: TypeResolver = (
            (lambda params: distr_type)
            if isinstance(distr_type, EuclideanDistributionType)
            else distr_type
        )
        self._support_resolver: SupportResolver = (
            (lambda _state: None) if support_by_state is None else support_by_state
        )
        self._prepare: StatePreparer = (lambda params: params) if prepare is None else prepare

        # Ordered names; the first one is the base parametrization name
        self.parametrization_names: list[ParametrizationName] = list(distr_parametrizations)
        self.base_parametrization_name: ParametrizationName = self.parametrization_names[0]

        self._parametrizations: dict[ParametrizationName, type[Parametrization]] = {}

        self.sampling_strategy: SamplingStrategy = (
            InverseTransformSamplingStrategy() if sampling_strategy is None else sampling_strategy
        )
        self.distr_characteristics: dict[GenericCharacteristicName, StateFunction] = dict(
            distr_characteristics
        )

    @property
    def name(self) -> str:
        return self._name

    @property
    def parametrizations(self) -> dict[ParametrizationName, type[Parametrization]]:
        """Mapping from parametrization names to classes."""
        return self._parametrizations

    @property
    def base(self) -> type[Parametrization]:
        """
        The base parametrization class.

        Raises
        ------
        ValueError
            If the base parametrization is not registered.
        """
        try:
            return self._parametrizations[self.base_parametrization_name]
        except KeyError as exc:
            raise ValueError(
                f"Base parametrization '{self.base_parametrization_name}' is not registered."
            ) from exc

    @property
    def support_resolver(self) -> SupportResolver:
        return self._support_resolver

    def register_parametrization(
        self,
        name: ParametrizationName,
        parametrization_class: type[Parametrization],
    ) -> None:
        """
        Register a parametrization class.

        Raises
        ------
        ValueError
            If ``name`` is not declared by the family or already registered.
        """
        if name not in self.parametrization_names:
            raise ValueError(f"Parametrization '{name}' is not declared by family {self.name}.")
        if name in self._parametrizations:
            raise ValueError(f"Parametrization '{name}' is already registered.")
        self._parametrizations[name] = parametrization_class

    def get_parametrization(self, name: ParametrizationName) -> type[Parametrization]:
        """
        Fetch a parametrization class by name.

        Raises
        ------
        KeyError
            If ``name`` is not registered.
        """
        return self._parametrizations[name]

    def to_base(self, parameters: Parametrization) -> Parametrization:
        """Convert ``parameters`` to the base parametrization."""
        if parameters.name == self.base_parametrization_name:
            return parameters
        return parameters.transform_to_base_parametrization()

    def _build_analytical_computations(
        self, state: Any
    ) -> dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        return {
            characteristic: AnalyticalComputation(target=characteristic, func=partial(func, state))
            for characteristic, func in self.distr_characteristics.items()
        }

    def distribution(
        self,
        parametrization_name: str | None = None,
        **parameters_values: Any,
    ) -> ParametricFamilyDistribution:
        """
        Create a distribution instance with the given parameters.

        Parameters
        ----------
        parametrization_name : str, optional
            Name of the parametrization to use (defaults to the base one).
        **parameters_values
            Parameter values.

        Returns
        -------
        ParametricFamilyDistribution

        Raises
        ------
        KeyError
            If the parametrization name is not registered.
        InvalidParameter
            If a constraint does not hold, or the prepared state rejects the
            parameters.
        """
        if parametrization_name is None:
            parametrization_class = self.base
        else:
            parametrization_class = self._parametrizations[parametrization_name]

        parameters = parametrization_class(**parameters_values)
        parameters.validate()
        base_parameters = self.to_base(parameters)
        if base_parameters is not parameters:
            base_parameters.validate()

        state = self._prepare(base_parameters)
        support = self._support_resolver(state)
        logger.debug(
            "Built {} distribution with {}, support {}", self.name, base_parameters, support
        )
        return ParametricFamilyDistribution(
            family_name=self.name,
            _distribution_type=self._distr_type(base_parameters),
            parameters=parameters,
            state=state,
            _support=support,
            _analytical_computations=self._build_analytical_computations(state),
        )

    @dataclass_transform()
    def parametrization(
        self, *, name: str
    ) -> Callable[[type[Parametrization]], type[Parametrization]]:
        """
        Class decorator registering a parametrization with this family.

        Mypy cannot identify ``dataclass_transform`` on a method, so mark the
        class as a dataclass explicitly when type checking matters.
        """
        from pysatl_bats.families.parametrizations import parametrization as _param_deco

        return _param_deco(family=self, name=name)

    __call__ = distribution


__all__ = ["ParametricFamily"]
