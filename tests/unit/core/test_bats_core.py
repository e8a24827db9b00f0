"""
Tests for the BATS evaluator: densities, distribution functions, quantile
and sampling for a fixed parameter set.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy import integrate, stats

from pysatl_bats.core.bats import BATSCore
from pysatl_bats.errors import InvalidParameter, InvalidQuantileInput, NonConvergence

SYMMETRIC = (0.2, 1.0, 0.0, 0.2, 1.0, 0.0, 5.0)
BOUNDED_BELOW = (-0.5, 1.0, 0.0, 0.2, 1.0, 0.0, 5.0)
BOUNDED_BOTH = (-0.5, 1.0, -0.5, -0.3, 0.7, 0.8, 3.0)
SKEWED = (0.4, 0.6, -1.0, 0.05, 1.4, 0.5, 2.5)
NEAR_ZERO_SHAPES = (1e-9, 1.0, 0.0, -1e-9, 1.0, 0.0, 4.0)

ALL_CASES = [SYMMETRIC, BOUNDED_BELOW, BOUNDED_BOTH, SKEWED, NEAR_ZERO_SHAPES]
ALL_IDS = ["symmetric", "bounded_below", "bounded_both", "skewed", "near_zero_shapes"]


def interior_grid(core: BATSCore, n: int = 201) -> np.ndarray:
    lo = max(core.x_min, -8.0)
    hi = min(core.x_max, 8.0)
    return np.linspace(lo, hi, n + 2)[1:-1]


class TestConstruction:
    def test_lower_bound_from_negative_shape(self) -> None:
        core = BATSCore.from_tuple(BOUNDED_BELOW)
        assert core.x_min == pytest.approx(-math.log(math.exp(2.0) - 1.0), rel=1e-14)
        assert core.x_max == math.inf

    def test_tuple_round_trip(self) -> None:
        assert BATSCore.from_tuple(SKEWED).as_tuple() == SKEWED

    def test_is_immutable(self) -> None:
        core = BATSCore.from_tuple(SYMMETRIC)
        with pytest.raises(AttributeError):
            core.kappa0 = 1.0  # type: ignore[misc]

    def test_empty_support_rejected(self) -> None:
        with pytest.raises(InvalidParameter):
            BATSCore(-10.0, 1.0, 5.0, -10.0, 1.0, -5.0, 3.0)


class TestSymmetricScenario:
    def setup_method(self) -> None:
        self.core = BATSCore.from_tuple(SYMMETRIC)

    def test_cdf_at_center_is_half(self) -> None:
        assert self.core.cdf(0.0) == pytest.approx(0.5, abs=1e-12)

    def test_pdf_at_center_is_positive(self) -> None:
        assert self.core.pdf(0.0) > 0.0

    def test_density_is_symmetric(self) -> None:
        x = np.linspace(0.1, 6.0, 30)
        np.testing.assert_allclose(self.core.pdf(-x), self.core.pdf(x), rtol=1e-12)

    def test_median_is_center(self) -> None:
        assert self.core.ppf(0.5) == pytest.approx(0.0, abs=1e-9)

    def test_support_is_real_line(self) -> None:
        assert (self.core.x_min, self.core.x_max) == (-math.inf, math.inf)


class TestBoundedLowerTailScenario:
    def setup_method(self) -> None:
        self.core = BATSCore.from_tuple(BOUNDED_BELOW)

    def test_lower_bound_is_finite(self) -> None:
        assert math.isfinite(self.core.x_min)
        assert self.core.x_max == math.inf

    def test_density_vanishes_towards_lower_bound(self) -> None:
        offsets = np.array([1e-1, 1e-2, 1e-3, 1e-4])
        values = self.core.pdf(self.core.x_min + offsets)
        assert np.all(values >= 0.0)
        assert np.all(np.diff(values) < 0.0)
        assert values[-1] < 1e-6

    def test_cdf_starts_at_zero(self) -> None:
        assert self.core.cdf(self.core.x_min + 1e-6) < 1e-12

    def test_small_quantile_stays_inside_support(self) -> None:
        x = self.core.ppf(1e-10)
        assert x > self.core.x_min
        assert self.core.cdf(x) == pytest.approx(1e-10, rel=1e-6)


class TestBoundarySentinels:
    @pytest.mark.parametrize("params", [BOUNDED_BELOW, BOUNDED_BOTH], ids=["below", "both"])
    def test_at_and_below_lower_bound(self, params) -> None:
        core = BATSCore.from_tuple(params)
        for x in (core.x_min, core.x_min - 1.0, -math.inf):
            assert core.pdf(x) == 0.0
            assert core.cdf(x) == 0.0
            assert core.logpdf(x) == -math.inf
            assert core.logcdf(x) == -math.inf

    def test_at_and_above_upper_bound(self) -> None:
        core = BATSCore.from_tuple(BOUNDED_BOTH)
        for x in (core.x_max, core.x_max + 1.0, math.inf):
            assert core.pdf(x) == 0.0
            assert core.cdf(x) == 1.0
            assert core.logpdf(x) == -math.inf
            assert core.logcdf(x) == 0.0

    def test_nan_passes_through(self) -> None:
        core = BATSCore.from_tuple(BOUNDED_BOTH)
        assert math.isnan(core.pdf(math.nan))
        assert math.isnan(core.cdf(math.nan))


class TestProperties:
    @pytest.mark.parametrize("params", ALL_CASES, ids=ALL_IDS)
    def test_ranges_and_no_nan_inside_support(self, params) -> None:
        core = BATSCore.from_tuple(params)
        x = interior_grid(core)
        pdf = core.pdf(x)
        cdf = core.cdf(x)
        assert not np.isnan(pdf).any()
        assert not np.isnan(cdf).any()
        assert np.all(pdf >= 0.0)
        assert np.all((cdf >= 0.0) & (cdf <= 1.0))

    @pytest.mark.parametrize("params", ALL_CASES, ids=ALL_IDS)
    def test_cdf_is_monotone(self, params) -> None:
        core = BATSCore.from_tuple(params)
        assert np.all(np.diff(core.cdf(interior_grid(core, 1001))) >= 0.0)

    @pytest.mark.parametrize("params", ALL_CASES, ids=ALL_IDS)
    def test_log_and_linear_forms_agree(self, params) -> None:
        core = BATSCore.from_tuple(params)
        x = interior_grid(core, 51)[5:-5]
        np.testing.assert_allclose(np.exp(core.logpdf(x)), core.pdf(x), rtol=1e-9)
        np.testing.assert_allclose(np.exp(core.logcdf(x)), core.cdf(x), rtol=1e-9)

    @pytest.mark.parametrize("params", ALL_CASES, ids=ALL_IDS)
    def test_density_integrates_to_cdf_increment(self, params) -> None:
        core = BATSCore.from_tuple(params)
        x = interior_grid(core, 9)
        a, b = float(x[1]), float(x[-2])
        mass, _ = integrate.quad(core.pdf, a, b, epsabs=1e-12, epsrel=1e-10)
        assert mass == pytest.approx(core.cdf(b) - core.cdf(a), abs=1e-8)

    @pytest.mark.parametrize("params", ALL_CASES, ids=ALL_IDS)
    @pytest.mark.parametrize("p", [1e-8, 0.01, 0.3, 0.5, 0.77, 0.999, 1 - 1e-8])
    def test_quantile_round_trip(self, params, p: float) -> None:
        core = BATSCore.from_tuple(params)
        x = core.ppf(p)
        assert core.x_min < x < core.x_max
        assert core.cdf(x) == pytest.approx(p, abs=1e-6)

    def test_extreme_arguments_give_finite_non_negative_density(self) -> None:
        core = BATSCore.from_tuple(SYMMETRIC)
        x = np.array([-1e300, -1e6, -50.0, 50.0, 1e6, 1e300])
        pdf = core.pdf(x)
        assert np.all(np.isfinite(pdf))
        assert np.all(pdf >= 0.0)
        assert not np.isnan(core.logpdf(x)).any()

    @pytest.mark.parametrize(
        "params",
        [NEAR_ZERO_SHAPES, (0.0, 1.0, 0.0, 0.0, 1.0, 0.0, 5.0)],
        ids=["near_zero_shapes", "zero_shapes"],
    )
    def test_extreme_arguments_with_small_shapes(self, params) -> None:
        core = BATSCore.from_tuple(params)
        x = np.array([700.0, 800.0, 1e6])
        for method in (core.pdf, core.logpdf, core.cdf, core.logcdf):
            assert not np.isnan(method(x)).any()
            assert not np.isnan(method(-x)).any()
        np.testing.assert_array_equal(core.cdf(x), 1.0)
        np.testing.assert_array_equal(core.pdf(x), 0.0)
        np.testing.assert_array_equal(core.pdf(-x), 0.0)
        assert np.all(core.cdf(-x) <= 1e-300)
        assert np.all(core.logpdf(x) < 0.0)

    def test_pdf_matches_change_of_variables(self) -> None:
        core = BATSCore.from_tuple(SKEWED)
        x, step = 0.3, 1e-5
        slope = (core.h(x + step) - core.h(x - step)) / (2 * step)
        expected = stats.t.pdf(core.h(x), SKEWED[-1]) * slope
        assert core.pdf(x) == pytest.approx(expected, rel=1e-7)

    def test_unclamped_density_agrees_where_positive(self) -> None:
        core = BATSCore.from_tuple(BOUNDED_BOTH)
        x = interior_grid(core, 31)
        np.testing.assert_allclose(core.pdf_unclamped(x), core.pdf(x), rtol=1e-15)


class TestShapes:
    def setup_method(self) -> None:
        self.core = BATSCore.from_tuple(SKEWED)

    def test_scalar_gives_float(self) -> None:
        for method in (self.core.pdf, self.core.logpdf, self.core.cdf, self.core.logcdf):
            assert isinstance(method(0.1), float)
        assert isinstance(self.core.ppf(0.2), float)

    def test_array_shape_and_order_preserved(self) -> None:
        x = np.array([[0.5, -1.0, 2.0], [0.0, 3.0, -0.2]])
        result = self.core.cdf(x)
        assert result.shape == (2, 3)
        for index, value in np.ndenumerate(x):
            assert result[index] == pytest.approx(self.core.cdf(float(value)), rel=1e-14)

    def test_quantile_array_matches_scalar_calls(self) -> None:
        p = np.array([0.9, 0.1, 0.5])
        result = self.core.ppf(p)
        assert result.shape == (3,)
        expected = [self.core.ppf(float(v)) for v in p]
        np.testing.assert_allclose(result, expected, rtol=1e-12, atol=1e-12)

    def test_empty_array(self) -> None:
        assert self.core.pdf(np.array([])).shape == (0,)


class TestQuantileErrors:
    def setup_method(self) -> None:
        self.core = BATSCore.from_tuple(SYMMETRIC)

    @pytest.mark.parametrize("p", [0.0, 1.0, -0.1, 1.5, math.nan], ids=str)
    def test_invalid_probability(self, p: float) -> None:
        with pytest.raises(InvalidQuantileInput, match="strictly inside"):
            self.core.ppf(p)

    def test_invalid_probability_in_array(self) -> None:
        with pytest.raises(InvalidQuantileInput) as info:
            self.core.ppf(np.array([0.2, 1.0, 0.4]))
        assert info.value.p == 1.0

    def test_tiny_bisection_budget_raises(self) -> None:
        with pytest.raises(NonConvergence):
            self.core.ppf(0.3, max_iter=2)

    def test_tolerance_override(self) -> None:
        coarse = self.core.ppf(0.8, x_tol=1e-3, r_tol=0.0)
        fine = self.core.ppf(0.8)
        assert coarse == pytest.approx(fine, abs=1e-3)


class TestSampling:
    def test_scalar_draw(self, rng: np.random.Generator) -> None:
        draw = BATSCore.from_tuple(BOUNDED_BELOW).sample(rng)
        assert isinstance(draw, float)

    def test_same_seed_same_draws(self) -> None:
        core = BATSCore.from_tuple(SKEWED)
        first = core.sample(np.random.default_rng(7), 50)
        second = core.sample(np.random.default_rng(7), 50)
        np.testing.assert_array_equal(first, second)

    @pytest.mark.parametrize("params", [SYMMETRIC, BOUNDED_BELOW], ids=["symmetric", "bounded"])
    def test_empirical_cdf_matches(self, params, rng: np.random.Generator) -> None:
        core = BATSCore.from_tuple(params)
        n = 10_000
        draws = core.sample(rng, n)
        assert draws.shape == (n,)
        assert np.all(draws > core.x_min)
        for x in (-2.0, -0.5, 0.0, 0.7, 3.0):
            ecdf = np.count_nonzero(draws <= x) / n
            assert abs(ecdf - core.cdf(x)) <= 4.0 / math.sqrt(n)
