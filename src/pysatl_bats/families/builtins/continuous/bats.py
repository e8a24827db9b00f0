"""
Bulk-And-Tails distribution family implementation.

Contains the BATS family with the ``base`` and ``symmetric``
parametrizations.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from math import isfinite
from typing import TYPE_CHECKING, cast

from pysatl_bats.core.bats import BATSCore
from pysatl_bats.distributions.support import ContinuousSupport
from pysatl_bats.families.parametric_family import ParametricFamily
from pysatl_bats.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_bats.families.registry import ParametricFamilyRegister
from pysatl_bats.types import CharacteristicName, FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from typing import Any

    from pysatl_bats.types import NumericArray


BASE = "base"
SYMMETRIC = "symmetric"


def configure_bats_family() -> None:
    """
    Configure and register the BATS distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.BATS):
        return

    BATS_DOC = """
    Bulk-And-Tails (BATS) distribution.

    A Student-t variable with ``nu`` degrees of freedom pushed through the
    inverse of a monotone transform ``H`` built from two tail maps:

        H(x) = H_part(x; κ1, τ1, φ1) − H_part(−x; κ0, τ0, −φ0),
        H_part(x; κ, τ, φ) = (1 + κ Ψ((x − φ)/τ))^(1/κ),   Ψ = softplus.

    Probability density function:
        f(x) = t_ν(H(x)) H'(x)

    Positive tail shapes ``κ`` thicken a tail, negative ones truncate it at
    a finite edge. The bulk between the two locations stays close to the
    Student-t shape.
    """

    def pdf(core: BATSCore, x: NumericArray) -> NumericArray:
        """
        Probability density function, ``0`` outside the open support.

        Parameters
        ----------
        core : BATSCore
            Evaluator prepared from the base parameters.
        x : NumericArray
            Points at which to evaluate the density.

        Returns
        -------
        NumericArray
            Density values at points x, clamped below at zero.
        """
        return cast("NumericArray", core.pdf(x))

    def logpdf(core: BATSCore, x: NumericArray) -> NumericArray:
        """Log density, ``-inf`` outside the open support."""
        return cast("NumericArray", core.logpdf(x))

    def cdf(core: BATSCore, x: NumericArray) -> NumericArray:
        """
        Cumulative distribution function.

        Returns
        -------
        NumericArray
            Probabilities P(X ≤ x); ``0`` at and below the lower bound,
            ``1`` at and above the upper bound.
        """
        return cast("NumericArray", core.cdf(x))

    def logcdf(core: BATSCore, x: NumericArray) -> NumericArray:
        """Logarithm of the cumulative distribution function."""
        return cast("NumericArray", core.logcdf(x))

    def ppf(core: BATSCore, p: NumericArray, **options: Any) -> NumericArray:
        """
        Percent point function (inverse CDF).

        Parameters
        ----------
        core : BATSCore
            Evaluator prepared from the base parameters.
        p : NumericArray
            Probabilities strictly inside ``(0, 1)``.
        **options : Any
            Root-finding overrides (``x_tol``, ``r_tol``, ``max_iter``,
            ``max_expand``, ``init_step``).

        Raises
        ------
        InvalidQuantileInput
            If a probability is ``0``, ``1``, outside ``(0, 1)`` or ``nan``.
        """
        return cast("NumericArray", core.ppf(p, **options))

    def _prepare(parameters: Parametrization) -> BATSCore:
        parameters = cast(_Base, parameters)
        return BATSCore(
            kappa0=parameters.kappa0,
            tau0=parameters.tau0,
            phi0=parameters.phi0,
            kappa1=parameters.kappa1,
            tau1=parameters.tau1,
            phi1=parameters.phi1,
            nu=parameters.nu,
        )

    def _support(core: BATSCore) -> ContinuousSupport:
        """Open interval between the tail edges."""
        return ContinuousSupport.from_bounds(core.x_min, core.x_max)

    BATS = ParametricFamily(
        name=FamilyName.BATS,
        distr_type=UnivariateContinuous,
        distr_parametrizations=[BASE, SYMMETRIC],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.LOGPDF: logpdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.LOGCDF: logcdf,
            CharacteristicName.PPF: ppf,
        },
        support_by_state=_support,
        prepare=_prepare,
    )
    BATS.__doc__ = BATS_DOC

    @parametrization(family=BATS, name=BASE)
    class _Base(Parametrization):
        """
        Full parametrization with independent tails.

        Parameters
        ----------
        kappa0, tau0, phi0 : float
            Shape, scale and location of the lower tail.
        kappa1, tau1, phi1 : float
            Shape, scale and location of the upper tail.
        nu : float
            Degrees of freedom of the Student-t base.
        """

        kappa0: float
        tau0: float
        phi0: float
        kappa1: float
        tau1: float
        phi1: float
        nu: float

        @constraint(description="all parameters are finite")
        def check_finite(self) -> bool:
            return all(isfinite(v) for v in self.parameters.values())

        @constraint(description="tau0 > 0")
        def check_tau0_positive(self) -> bool:
            """Check that the lower tail scale is positive."""
            return self.tau0 > 0

        @constraint(description="tau1 > 0")
        def check_tau1_positive(self) -> bool:
            """Check that the upper tail scale is positive."""
            return self.tau1 > 0

        @constraint(description="nu > 0")
        def check_nu_positive(self) -> bool:
            """Check that the degrees of freedom are positive."""
            return self.nu > 0

    @parametrization(family=BATS, name=SYMMETRIC)
    class _Symmetric(Parametrization):
        """
        Mirrored tails sharing one shape, scale and location.

        Parameters
        ----------
        kappa : float
            Shape of both tails.
        tau : float
            Scale of both tails.
        phi : float
            Location; the distribution is symmetric around it.
        nu : float
            Degrees of freedom of the Student-t base.
        """

        kappa: float
        tau: float
        phi: float
        nu: float

        @constraint(description="all parameters are finite")
        def check_finite(self) -> bool:
            return all(isfinite(v) for v in self.parameters.values())

        @constraint(description="tau > 0")
        def check_tau_positive(self) -> bool:
            return self.tau > 0

        @constraint(description="nu > 0")
        def check_nu_positive(self) -> bool:
            return self.nu > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            """
            Transform to the base parametrization.

            Returns
            -------
            Parametrization
                Base parametrization with both tails equal to this one.
            """
            return _Base(
                kappa0=self.kappa,
                tau0=self.tau,
                phi0=self.phi,
                kappa1=self.kappa,
                tau1=self.tau,
                phi1=self.phi,
                nu=self.nu,
            )

    ParametricFamilyRegister.register(BATS)


def bats_core(distribution: Any) -> BATSCore:
    """Evaluator behind a BATS distribution built by the family."""
    if distribution.family_name != FamilyName.BATS:
        raise ValueError(f"Not a {FamilyName.BATS} distribution: {distribution.family_name}")
    return cast(BATSCore, distribution.state)


__all__ = ["configure_bats_family", "bats_core", "BASE", "SYMMETRIC"]
