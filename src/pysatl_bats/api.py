"""
Functional API
==============

Flat helpers taking the parameters as one 7-sequence
``(kappa0, tau0, phi0, kappa1, tau1, phi1, nu)``:

- :func:`batspdf`, :func:`batslogpdf`, :func:`batscdf`, :func:`batslogcdf`
  evaluate at ``x``;
- :func:`batsquantile` inverts the cdf at ``p``;
- :func:`batsrand` draws with an explicit generator.

The output container follows the input: a list (or tuple) gives a list, a
NumPy array gives an array of the same shape, a scalar gives a ``float``.

Examples
--------
>>> params = (0.2, 1.0, 0.0, 0.2, 1.0, 0.0, 5.0)
>>> round(batscdf(0.0, params), 12)
0.5
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Sequence
from typing import TYPE_CHECKING

import numpy as np

from pysatl_bats.errors import InvalidParameter
from pysatl_bats.families.configuration import configure_families_register
from pysatl_bats.types import CharacteristicName, FamilyName

if TYPE_CHECKING:
    from typing import Any

    from pysatl_bats.families.distribution import ParametricFamilyDistribution

PARAMETER_NAMES = ("kappa0", "tau0", "phi0", "kappa1", "tau1", "phi1", "nu")


def bats_distribution(params: Sequence[float]) -> ParametricFamilyDistribution:
    """
    Build a BATS distribution from a 7-sequence of parameters.

    Raises
    ------
    InvalidParameter
        If ``params`` does not hold exactly seven real numbers, or the values
        violate a parameter constraint.
    """
    try:
        values = [float(v) for v in params]
    except (TypeError, ValueError) as exc:
        raise InvalidParameter(f"Parameters must be seven real numbers: {exc}") from exc
    if len(values) != len(PARAMETER_NAMES):
        raise InvalidParameter(
            f"Expected {len(PARAMETER_NAMES)} parameters {PARAMETER_NAMES}, got {len(values)}"
        )
    family = configure_families_register().get(FamilyName.BATS)
    return family.distribution(**dict(zip(PARAMETER_NAMES, values, strict=True)))


def _evaluate(
    characteristic: CharacteristicName, x: Any, params: Sequence[float], **options: Any
) -> Any:
    method = bats_distribution(params).query_method(characteristic)
    if isinstance(x, np.ndarray):
        return np.asarray(method(x, **options), dtype=float)
    if isinstance(x, Sequence) and not isinstance(x, str):
        return np.asarray(method(np.asarray(x, dtype=float), **options)).tolist()
    return float(method(x, **options))


def batspdf(x: Any, params: Sequence[float]) -> Any:
    """Density of BATS(``params``) at ``x``."""
    return _evaluate(CharacteristicName.PDF, x, params)


def batslogpdf(x: Any, params: Sequence[float]) -> Any:
    """Log density of BATS(``params``) at ``x``."""
    return _evaluate(CharacteristicName.LOGPDF, x, params)


def batscdf(x: Any, params: Sequence[float]) -> Any:
    """Cumulative probability of BATS(``params``) at ``x``."""
    return _evaluate(CharacteristicName.CDF, x, params)


def batslogcdf(x: Any, params: Sequence[float]) -> Any:
    """Log cumulative probability of BATS(``params``) at ``x``."""
    return _evaluate(CharacteristicName.LOGCDF, x, params)


def batsquantile(p: Any, params: Sequence[float], **options: Any) -> Any:
    """
    Quantile of BATS(``params``) at ``p``.

    ``**options`` override the root-finding tolerances.

    Raises
    ------
    InvalidQuantileInput
        If a probability is not strictly inside ``(0, 1)``.
    """
    return _evaluate(CharacteristicName.PPF, p, params, **options)


def batsrand(
    params: Sequence[float],
    rng: np.random.Generator,
    size: int | tuple[int, ...] | None = None,
) -> Any:
    """
    Random draws from BATS(``params``).

    Parameters
    ----------
    params : Sequence[float]
        The seven parameters.
    rng : numpy.random.Generator
        Source of randomness.
    size : int or tuple of int, optional
        Output shape; a single ``float`` is returned when omitted.
    """
    if size is None:
        return float(bats_distribution(params).sample(1, rng=rng).array[0, 0])
    shape = (size,) if isinstance(size, int) else tuple(size)
    n = int(np.prod(shape))
    return bats_distribution(params).sample(n, rng=rng).array.reshape(shape)


__all__ = [
    "PARAMETER_NAMES",
    "bats_distribution",
    "batspdf",
    "batslogpdf",
    "batscdf",
    "batslogcdf",
    "batsquantile",
    "batsrand",
]
