"""
Support bounds of a BATS parameter set.

A tail with negative shape truncates the support: the power base
``1 + kappa * Ψ(z)`` reaches zero at ``z* = iΨ(-1 / kappa)``. A tail with
non-negative shape leaves that side unbounded.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from math import inf

from pysatl_bats.core.transforms import ipsi
from pysatl_bats.errors import InvalidParameter


def tail_edge(kappa: float, tau: float) -> float:
    """
    Distance from the tail location to the support edge, in data units.

    Returns ``tau * iΨ(-1 / kappa)`` for ``kappa < 0`` and ``inf`` otherwise.
    """
    if kappa >= 0.0:
        return inf
    return float(tau * ipsi(-1.0 / kappa))


def support_bounds(
    kappa0: float,
    tau0: float,
    phi0: float,
    kappa1: float,
    tau1: float,
    phi1: float,
) -> tuple[float, float]:
    """
    Compute ``(x_min, x_max)`` for a parameter set.

    Parameters
    ----------
    kappa0, tau0, phi0 : float
        Lower tail shape, scale and location.
    kappa1, tau1, phi1 : float
        Upper tail shape, scale and location.

    Returns
    -------
    tuple[float, float]
        ``x_min = phi0 - tau0 * z0*`` and ``x_max = phi1 + tau1 * z1*``, each
        infinite when the corresponding shape is non-negative.

    Raises
    ------
    InvalidParameter
        If both tails are bounded and the resulting interval is empty.
    """
    x_min = phi0 - tail_edge(kappa0, tau0)
    x_max = phi1 + tail_edge(kappa1, tau1)
    if not x_min < x_max:
        raise InvalidParameter(f"Tail bounds leave an empty support: x_min={x_min}, x_max={x_max}")
    return x_min, x_max


__all__ = ["tail_edge", "support_bounds"]
