"""
Bulk-And-Tails Distribution Core
================================

:class:`BATSCore` evaluates the BATS distribution for one parameter set:

.. math::

    F(x) = T_\\nu(H(x)), \\qquad f(x) = t_\\nu(H(x)) \\, H'(x),

where ``T_ν``/``t_ν`` are the Student-t cdf/pdf and ``H`` is the composite
tail transform of :mod:`pysatl_bats.core.transforms`.

Support bounds are derived once, at construction. Every evaluation routine
accepts a scalar or an array-like; arrays are evaluated pointwise with shape
preserved, scalars come back as ``float``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass, field
from math import isfinite
from typing import TYPE_CHECKING, Any

import numpy as np

from pysatl_bats.core import roots
from pysatl_bats.core.base import StudentT
from pysatl_bats.core.bounds import support_bounds
from pysatl_bats.core.transforms import h, h_derivative, log_h_derivative
from pysatl_bats.distributions.sampling import open_unit_uniform
from pysatl_bats.errors import InvalidQuantileInput
from pysatl_bats.logging import logger

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from pysatl_bats.types import Number, NumericArray


def _finalize(values: NumericArray, shape: tuple[int, ...] | None) -> Any:
    if shape is None:
        return float(values[0])
    return values.reshape(shape)


def _prepare(x: Number | NumericArray | Sequence[float]) -> tuple[NumericArray, Any]:
    arr = np.asarray(x, dtype=float)
    shape = None if arr.ndim == 0 else arr.shape
    return arr.ravel(), shape


@dataclass(frozen=True, slots=True)
class BATSCore:
    """
    BATS distribution for a fixed, validated parameter set.

    Parameters
    ----------
    kappa0, tau0, phi0 : float
        Shape, scale and location of the lower tail.
    kappa1, tau1, phi1 : float
        Shape, scale and location of the upper tail.
    nu : float
        Degrees of freedom of the Student-t base.

    Attributes
    ----------
    x_min, x_max : float
        Support bounds; the support is the open interval ``(x_min, x_max)``.

    Notes
    -----
    Parameter constraints (``tau0, tau1, nu > 0``) are checked by the family
    layer before a core is built. The only check performed here is that the
    two tail bounds leave a non-empty support.
    """

    kappa0: float
    tau0: float
    phi0: float
    kappa1: float
    tau1: float
    phi1: float
    nu: float
    x_min: float = field(init=False)
    x_max: float = field(init=False)
    base: StudentT = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        x_min, x_max = support_bounds(
            self.kappa0, self.tau0, self.phi0, self.kappa1, self.tau1, self.phi1
        )
        object.__setattr__(self, "x_min", x_min)
        object.__setattr__(self, "x_max", x_max)
        object.__setattr__(self, "base", StudentT(self.nu))

    @classmethod
    def from_tuple(cls, params: Sequence[float]) -> BATSCore:
        """Build from ``(κ0, τ0, φ0, κ1, τ1, φ1, ν)``."""
        return cls(*(float(v) for v in params))

    def as_tuple(self) -> tuple[float, float, float, float, float, float, float]:
        return (self.kappa0, self.tau0, self.phi0, self.kappa1, self.tau1, self.phi1, self.nu)

    @property
    def tails(self) -> tuple[float, float, float, float, float, float]:
        """Tail parameters in the order expected by the transforms."""
        return (self.kappa0, self.tau0, self.phi0, self.kappa1, self.tau1, self.phi1)

    # ------------------------------------------------------------------
    # Transform
    # ------------------------------------------------------------------
    def h(self, x: Number | NumericArray) -> NumericArray:
        """Composite transform ``H`` at ``x`` (no support check)."""
        return h(x, *self.tails)

    def _evaluate(
        self,
        x: Number | NumericArray | Sequence[float],
        inside: Callable[[NumericArray], NumericArray],
        below: float,
        above: float,
    ) -> Any:
        values, shape = _prepare(x)
        out = np.where(values <= self.x_min, below, above)
        mask = (values > self.x_min) & (values < self.x_max)
        if mask.any():
            out[mask] = inside(values[mask])
        out[np.isnan(values)] = np.nan
        return _finalize(out, shape)

    # ------------------------------------------------------------------
    # Densities
    # ------------------------------------------------------------------
    def _logpdf_inside(self, x: NumericArray) -> NumericArray:
        return self.base.logpdf(self.h(x)) + log_h_derivative(x, *self.tails)

    def _pdf_raw(self, x: NumericArray) -> NumericArray:
        with np.errstate(over="ignore", invalid="ignore"):
            return np.asarray(self.base.pdf(self.h(x)) * h_derivative(x, *self.tails))

    def _pdf_inside(self, x: NumericArray) -> NumericArray:
        raw = self._pdf_raw(x)
        # 0 * inf where H overflows: the density limit is taken in log space
        overflow = ~np.isfinite(raw)
        if overflow.any():
            raw[overflow] = np.exp(self._logpdf_inside(x[overflow]))
        negative = raw < 0.0
        if negative.any():
            logger.debug(
                "Clamped {} negative density value(s), most negative {:.3e}",
                int(negative.sum()),
                float(raw[negative].min()),
            )
        return np.maximum(raw, 0.0)

    def logpdf(self, x: Number | NumericArray | Sequence[float]) -> Any:
        """
        Log density. ``-inf`` at and beyond the support bounds.

        Inside the support this is ``log t_ν(H(x)) + log H'(x)`` with
        ``log H'(x)`` evaluated by ``logaddexp`` of the two tail terms.
        """
        return self._evaluate(x, self._logpdf_inside, -np.inf, -np.inf)

    def pdf(self, x: Number | NumericArray | Sequence[float]) -> Any:
        """
        Density. ``0.0`` at and beyond the support bounds.

        Inside the support this is ``t_ν(H(x)) * H'(x)``, clamped below at
        zero. The clamp only hides round-off from cancellation; it is a policy,
        not a bound on the error. Use :meth:`pdf_unclamped` to inspect the raw
        value. Products of the form ``0 * inf`` (``H`` overflowed) are resolved
        through :meth:`logpdf`.
        """
        return self._evaluate(x, self._pdf_inside, 0.0, 0.0)

    def pdf_unclamped(self, x: Number | NumericArray | Sequence[float]) -> Any:
        """Raw product ``t_ν(H(x)) * H'(x)`` inside the support, without clamping."""
        return self._evaluate(x, self._pdf_raw, 0.0, 0.0)

    # ------------------------------------------------------------------
    # Distribution functions
    # ------------------------------------------------------------------
    def cdf(self, x: Number | NumericArray | Sequence[float]) -> Any:
        """Cumulative probability. ``0.0`` at/below ``x_min``, ``1.0`` at/above ``x_max``."""
        return self._evaluate(x, lambda v: self.base.cdf(self.h(v)), 0.0, 1.0)

    def logcdf(self, x: Number | NumericArray | Sequence[float]) -> Any:
        """Log cumulative probability. ``-inf`` at/below ``x_min``, ``0.0`` at/above ``x_max``."""
        return self._evaluate(x, lambda v: self.base.logcdf(self.h(v)), -np.inf, 0.0)

    # ------------------------------------------------------------------
    # Quantile and sampling
    # ------------------------------------------------------------------
    @property
    def anchor(self) -> float:
        """Interior starting point of the bracket search."""
        if isfinite(self.x_min) and isfinite(self.x_max):
            return 0.5 * self.x_min + 0.5 * self.x_max
        if isfinite(self.x_min):
            return self.x_min
        if isfinite(self.x_max):
            return self.x_max
        return 0.5 * (self.phi0 + self.phi1)

    def ppf(
        self,
        p: Number | NumericArray | Sequence[float],
        *,
        x_tol: float = roots.X_TOL,
        r_tol: float = roots.R_TOL,
        max_iter: int = roots.MAX_ITER,
        max_expand: int = roots.MAX_EXPAND,
        init_step: float = roots.INIT_STEP,
    ) -> Any:
        """
        Quantile function.

        Solves ``F(x) = p`` by bisection over ``[x_min, x_max]``. Since the
        Student-t cdf is strictly increasing the search runs on the transformed
        scale, ``H(x) = T_ν^{-1}(p)``, which has the same root and keeps full
        resolution in the tails. Infinite ends are replaced by brackets found
        by geometric expansion.

        Parameters
        ----------
        p : Number or array-like
            Probabilities, each strictly inside ``(0, 1)``.
        x_tol, r_tol : float
            Absolute and relative bracket-width tolerances.
        max_iter : int
            Bisection budget.
        max_expand : int
            Bracket-expansion budget per side.
        init_step : float
            First expansion step.

        Raises
        ------
        InvalidQuantileInput
            If any ``p`` is not strictly inside ``(0, 1)`` (``0``, ``1`` and
            ``nan`` included).
        NonConvergence
            If bracketing or bisection exhausts its budget.
        """
        values, shape = _prepare(p)
        invalid = ~((values > 0.0) & (values < 1.0))
        if invalid.any():
            raise InvalidQuantileInput(float(values[invalid][0]))

        target = np.asarray(self.base.ppf(values), dtype=float)
        lo, hi = roots.expand_bracket(
            self.h,
            target,
            self.x_min,
            self.x_max,
            self.anchor,
            init_step=init_step,
            max_expand=max_expand,
        )
        result, rounds = roots.bisect(
            self.h, target, lo, hi, x_tol=x_tol, r_tol=r_tol, max_iter=max_iter
        )
        logger.debug("Resolved {} quantile(s) in {} bisection round(s)", values.size, rounds)
        return _finalize(result, shape)

    def sample(
        self, rng: np.random.Generator, size: int | tuple[int, ...] | None = None, **options: Any
    ) -> Any:
        """
        Inverse-transform sampling with the caller's generator.

        Uniform variates are drawn from ``rng``; exact zeros, which have no
        finite quantile, are redrawn. With ``size=None`` a single ``float`` is
        returned.
        """
        draws = self.ppf(open_unit_uniform(rng, size), **options)
        if size is None:
            return float(draws[0])
        return draws


__all__ = ["BATSCore"]
