"""
Student-t base ("bulk") distribution.

Thin adapter over :data:`scipy.stats.t` exposing the five characteristics the
BATS core consumes. Any object with the same methods can stand in for it.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from scipy import stats

if TYPE_CHECKING:
    from pysatl_bats.types import Number, NumericArray


@runtime_checkable
class BaseDistribution(Protocol):
    """Continuous distribution on the real line evaluated at transformed points."""

    def pdf(self, x: Number | NumericArray) -> NumericArray: ...
    def logpdf(self, x: Number | NumericArray) -> NumericArray: ...
    def cdf(self, x: Number | NumericArray) -> NumericArray: ...
    def logcdf(self, x: Number | NumericArray) -> NumericArray: ...
    def ppf(self, p: Number | NumericArray) -> NumericArray: ...


@dataclass(frozen=True, slots=True)
class StudentT:
    """
    Standard Student-t distribution with ``nu`` degrees of freedom.

    Parameters
    ----------
    nu : float
        Degrees of freedom, ``nu > 0``.
    """

    nu: float

    def pdf(self, x: Number | NumericArray) -> NumericArray:
        return stats.t.pdf(x, self.nu)

    def logpdf(self, x: Number | NumericArray) -> NumericArray:
        return stats.t.logpdf(x, self.nu)

    def cdf(self, x: Number | NumericArray) -> NumericArray:
        return stats.t.cdf(x, self.nu)

    def logcdf(self, x: Number | NumericArray) -> NumericArray:
        return stats.t.logcdf(x, self.nu)

    def ppf(self, p: Number | NumericArray) -> NumericArray:
        return stats.t.ppf(p, self.nu)


__all__ = ["BaseDistribution", "StudentT"]
