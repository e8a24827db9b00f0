"""
Tail Transforms
===============

Numerical building blocks of the BATS distribution:

- :func:`psi`, :func:`dpsi`, :func:`ipsi`: softplus ``Ψ``, its derivative and
  its inverse, branched at :data:`PSI_CUTOFF` so that ``exp`` never overflows;
- :func:`h_part`: one tail's power transform of the standardized coordinate;
- :func:`h`: the composite transform feeding the Student-t base;
- :func:`dh_part`, :func:`log_dh_part`, :func:`h_derivative`,
  :func:`log_h_derivative`: closed-form derivatives used by the densities.

All functions are vectorized: scalar input gives a NumPy scalar, array input
gives an array of the same shape.

Notes
-----
Tail parameters ``(kappa, tau, phi)`` are scalars. The lower tail enters
:func:`h` mirrored: it is evaluated at ``-x`` with location ``-phi``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

import numpy as np
from scipy.special import expit, log_expit

if TYPE_CHECKING:
    from pysatl_bats.types import Number, NumericArray

PSI_CUTOFF = 25.0
"""Above this argument ``Ψ(x) == x`` and ``dΨ(x) == 1`` to double precision."""

KAPPA_ZERO_TOL = 1e-8
"""Absolute tolerance under which a tail shape is treated as zero."""


def psi(x: Number | NumericArray) -> NumericArray:
    """Softplus ``log(1 + e^x)``, returned as ``x`` itself past the cutoff."""
    arr = np.asarray(x, dtype=float)
    small = np.log1p(np.exp(np.minimum(arr, PSI_CUTOFF)))
    return np.where(arr < PSI_CUTOFF, small, arr)[()]


def dpsi(x: Number | NumericArray) -> NumericArray:
    """Logistic function ``e^x / (1 + e^x)``, exactly ``1.0`` past the cutoff."""
    arr = np.asarray(x, dtype=float)
    return np.where(arr < PSI_CUTOFF, expit(arr), 1.0)[()]


def ipsi(y: Number | NumericArray) -> NumericArray:
    """
    Inverse of :func:`psi`: ``log(e^y - 1)``.

    ``e^y - 1`` is clamped at zero before the logarithm, so round-off around
    ``y == 0`` yields ``-inf`` instead of ``nan``. The natural domain is
    ``y >= 0``.
    """
    arr = np.asarray(y, dtype=float)
    with np.errstate(divide="ignore"):
        small = np.log(np.maximum(0.0, np.expm1(np.minimum(arr, PSI_CUTOFF))))
    return np.where(arr < PSI_CUTOFF, small, arr)[()]


def _is_zero_shape(kappa: float) -> bool:
    return abs(kappa) <= KAPPA_ZERO_TOL


def h_part(x: Number | NumericArray, kappa: float, tau: float, phi: float) -> NumericArray:
    """
    One tail's contribution to the composite transform.

    Parameters
    ----------
    x : Number or NumericArray
        Evaluation point(s).
    kappa, tau, phi : float
        Shape, scale and location of the tail.

    Returns
    -------
    NumericArray
        ``(1 + kappa * Ψ(z)) ** (1 / kappa)`` with ``z = (x - phi) / tau``.
        For ``|kappa| <= KAPPA_ZERO_TOL`` the first-order expansion
        ``e^Ψ - kappa * Ψ² e^Ψ / 2`` is used instead, which removes the
        indeterminate power as ``kappa -> 0``. Where ``e^Ψ`` overflows the
        result is ``+inf``.

    Notes
    -----
    For ``kappa < 0`` the base must stay non-negative, i.e.
    ``Ψ(z) <= -1 / kappa``. Points past that edge lie outside the support
    and are never passed here by the distribution.
    """
    z = (np.asarray(x, dtype=float) - phi) / tau
    a = psi(z)
    with np.errstate(over="ignore", divide="ignore", invalid="ignore"):
        if _is_zero_shape(kappa):
            ea = np.exp(a)
            # past overflow of e^a the true value is +inf for either sign of kappa
            expansion = ea * (1.0 - 0.5 * kappa * a**2)
            return np.asarray(np.where(np.isfinite(ea), expansion, np.inf))[()]
        return np.asarray(np.power(1.0 + kappa * a, 1.0 / kappa))[()]


def dh_part(x: Number | NumericArray, kappa: float, tau: float, phi: float) -> NumericArray:
    """
    Derivative of :func:`h_part` with respect to ``x``.

    ``dΨ(z) / tau * (1 + kappa * Ψ(z)) ** (1 / kappa - 1)``; in the near-zero
    shape regime the derivative of the expansion,
    ``dΨ(z) / tau * e^Ψ * (1 - kappa * (Ψ + Ψ² / 2))``.
    """
    z = (np.asarray(x, dtype=float) - phi) / tau
    a = psi(z)
    slope = dpsi(z) / tau
    with np.errstate(over="ignore", divide="ignore", invalid="ignore"):
        if _is_zero_shape(kappa):
            ea = np.exp(a)
            factor = 1.0 - kappa * (a + 0.5 * a**2)
            return np.asarray(np.where(np.isfinite(ea), slope * ea * factor, np.inf))[()]
        return np.asarray(slope * np.power(1.0 + kappa * a, 1.0 / kappa - 1.0))[()]


def log_dh_part(x: Number | NumericArray, kappa: float, tau: float, phi: float) -> NumericArray:
    """
    Natural logarithm of :func:`dh_part`, computed without leaving log space.

    Stays finite where the linear-scale derivative overflows. In the near-zero
    shape regime the factor ``1 - kappa * (Ψ + Ψ² / 2)`` enters through
    ``log1p``; once it would turn non-positive, which happens only far past
    the overflow of ``e^Ψ``, its exponent form ``-kappa * (Ψ + Ψ² / 2)`` is
    used.
    """
    z = (np.asarray(x, dtype=float) - phi) / tau
    a = psi(z)
    log_slope = np.where(z < PSI_CUTOFF, log_expit(z), 0.0) - np.log(tau)
    with np.errstate(divide="ignore", invalid="ignore"):
        if _is_zero_shape(kappa):
            correction = kappa * (a + 0.5 * a**2)
            log_factor = np.where(correction < 1.0, np.log1p(-correction), -correction)
            return np.asarray(log_slope + a + log_factor)[()]
        return np.asarray(log_slope + (1.0 / kappa - 1.0) * np.log1p(kappa * a))[()]


def h(
    x: Number | NumericArray,
    kappa0: float,
    tau0: float,
    phi0: float,
    kappa1: float,
    tau1: float,
    phi1: float,
) -> NumericArray:
    """
    Composite transform ``H(x) = H_part(x; upper) - H_part(-x; lower)``.

    The lower tail is evaluated on the mirrored coordinate with a sign-flipped
    location, so ``H`` increases through the support and maps it onto the
    real line where the Student-t base lives.
    """
    arr = np.asarray(x, dtype=float)
    return np.asarray(h_part(arr, kappa1, tau1, phi1) - h_part(-arr, kappa0, tau0, -phi0))[()]


def h_derivative(
    x: Number | NumericArray,
    kappa0: float,
    tau0: float,
    phi0: float,
    kappa1: float,
    tau1: float,
    phi1: float,
) -> NumericArray:
    """``dH/dx = dH_part(x; upper) + dH_part(-x; lower)``."""
    arr = np.asarray(x, dtype=float)
    with np.errstate(over="ignore", invalid="ignore"):
        return np.asarray(dh_part(arr, kappa1, tau1, phi1) + dh_part(-arr, kappa0, tau0, -phi0))[()]


def log_h_derivative(
    x: Number | NumericArray,
    kappa0: float,
    tau0: float,
    phi0: float,
    kappa1: float,
    tau1: float,
    phi1: float,
) -> NumericArray:
    """``log(dH/dx)``, the two tail terms combined with ``logaddexp``."""
    arr = np.asarray(x, dtype=float)
    upper = log_dh_part(arr, kappa1, tau1, phi1)
    lower = log_dh_part(-arr, kappa0, tau0, -phi0)
    return np.asarray(np.logaddexp(upper, lower))[()]


__all__ = [
    "PSI_CUTOFF",
    "KAPPA_ZERO_TOL",
    "psi",
    "dpsi",
    "ipsi",
    "h_part",
    "dh_part",
    "log_dh_part",
    "h",
    "h_derivative",
    "log_h_derivative",
]
