from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from math import isfinite
from typing import Protocol, overload, runtime_checkable

from pysatl_bats.types import BoolArray, Interval1D, Number, NumericArray


@runtime_checkable
class Support(Protocol):
    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...


class ContinuousSupport(Interval1D, Support):
    """
    Support of a univariate continuous distribution.

    BATS supports are open: the density vanishes at finite bounds.
    """

    @classmethod
    def from_bounds(cls, x_min: float, x_max: float) -> ContinuousSupport:
        """Open interval ``(x_min, x_max)``; either end may be infinite."""
        return cls(left=x_min, right=x_max, left_closed=False, right_closed=False)

    @property
    def is_left_bounded(self) -> bool:
        return isfinite(self.left)

    @property
    def is_right_bounded(self) -> bool:
        return isfinite(self.right)


__all__ = [
    "Support",
    "ContinuousSupport",
]
