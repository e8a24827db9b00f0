"""
Computation Primitives
======================

A characteristic (``pdf``, ``cdf``, ``ppf``, ...) bound to one distribution
instance is represented by :class:`AnalyticalComputation`: a named callable
accepting a scalar or an array and free-form keyword options.

Notes
-----
``**options`` carry numerical knobs, e.g. the quantile tolerances
``x_tol``/``max_iter``. Characteristics that take no options reject them.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeVar, runtime_checkable

from mypy_extensions import KwArg

from pysatl_bats.types import GenericCharacteristicName

In = TypeVar("In")
Out = TypeVar("Out")


@runtime_checkable
class Computation(Protocol[In, Out]):
    """Callable for a single characteristic.

    Attributes
    ----------
    target : str
        The characteristic name this computation represents.
    """

    @property
    def target(self) -> GenericCharacteristicName: ...
    def __call__(self, data: In, **options: Any) -> Out: ...


@dataclass(frozen=True, slots=True)
class AnalyticalComputation(Generic[In, Out]):
    """Analytical computation provided directly by the distribution.

    Parameters
    ----------
    target : str
        Characteristic name (e.g., ``"pdf"``).
    func : Callable[[In, KwArg(Any)], Out]
        Callable already bound to the distribution's precomputed state.
    """

    target: GenericCharacteristicName
    func: Callable[[In, KwArg(Any)], Out]

    def __call__(self, data: In, **options: Any) -> Out:
        """Evaluate the analytical function."""
        return self.func(data, **options)
