"""
Sampling Interfaces
===================

Sample containers returned by sampling strategies.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Iterator
    from typing import Any

    import numpy.typing as npt


def open_unit_uniform(
    rng: np.random.Generator, size: int | tuple[int, ...] | None = None
) -> npt.NDArray[np.floating[Any]]:
    """
    Draw from ``U(0, 1)`` excluding zero.

    ``Generator.random`` samples ``[0, 1)``; exact zeros are redrawn so every
    variate has a finite quantile. Always returns an array (shape ``(1,)``
    for ``size=None``).
    """
    u = np.atleast_1d(rng.random(size))
    zero = u == 0.0
    while zero.any():
        u[zero] = rng.random(int(zero.sum()))
        zero = u == 0.0
    return u


class Sample(Protocol):
    """
    Protocol for sample containers.

    Attributes
    ----------
    array : numpy.ndarray
        Array representation of the samples.
    shape : tuple[int, ...]
        Shape of the sample array.
    """

    def __len__(self) -> int: ...
    @property
    def array(self) -> npt.NDArray[np.floating[Any]]: ...
    @property
    def shape(self) -> tuple[int, ...]: ...


class ArraySample:
    """
    Univariate sample stored as a column of shape ``(n, 1)``.

    Parameters
    ----------
    data : numpy.ndarray
        Floating-point array of shape ``(n, 1)``; a 1D array of length ``n``
        is reshaped into a column.

    Raises
    ------
    ValueError
        If data cannot be seen as a single column.
    """

    data: npt.NDArray[np.floating[Any]]

    def __init__(self, data: npt.NDArray[np.floating[Any]]) -> None:
        data = np.asarray(data, dtype=np.float64)
        if data.ndim == 1:
            data = data.reshape(-1, 1)
        if data.ndim != 2 or data.shape[1] != 1:
            raise ValueError("ArraySample expects a column of shape (n, 1).")
        self.data = data

    def __len__(self) -> int:
        return int(self.data.shape[0])

    def __iter__(self) -> Iterator[float]:
        """Iterate over the drawn values."""
        for value in self.data[:, 0]:
            yield float(value)

    @property
    def array(self) -> npt.NDArray[np.floating[Any]]:
        """Return the backing ``(n, 1)`` array."""
        return self.data

    @property
    def values(self) -> npt.NDArray[np.floating[Any]]:
        """Flat view of the draws."""
        return self.data[:, 0]

    @property
    def shape(self) -> tuple[int, ...]:
        n, d = self.data.shape
        return int(n), int(d)

    def ecdf(self, x: float) -> float:
        """Empirical cumulative probability ``#{X_i <= x} / n``."""
        return float(np.count_nonzero(self.values <= x) / len(self))
