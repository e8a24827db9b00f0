from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from math import inf

import pytest

from pysatl_bats.core.bounds import support_bounds, tail_edge
from pysatl_bats.core.transforms import h_part
from pysatl_bats.errors import InvalidParameter


class TestTailEdge:
    @pytest.mark.parametrize("kappa", [0.0, 1e-12, 0.3, 5.0])
    def test_non_negative_shape_is_unbounded(self, kappa: float) -> None:
        assert tail_edge(kappa, 1.0) == inf

    def test_negative_shape_edge_value(self) -> None:
        # 1 + kappa * Ψ(z) vanishes at Ψ(z) = 2
        assert tail_edge(-0.5, 1.0) == pytest.approx(math.log(math.exp(2.0) - 1.0), rel=1e-14)

    def test_edge_scales_with_tau(self) -> None:
        assert tail_edge(-0.5, 3.0) == pytest.approx(3.0 * tail_edge(-0.5, 1.0), rel=1e-14)

    def test_power_base_vanishes_at_edge(self) -> None:
        kappa = -0.25
        edge = tail_edge(kappa, 1.0)
        inside = float(h_part(edge * (1 - 1e-6), kappa, 1.0, 0.0))
        assert inside > 1e10


class TestSupportBounds:
    def test_both_tails_heavy_give_real_line(self) -> None:
        assert support_bounds(0.1, 1.0, 0.0, 0.2, 1.0, 0.0) == (-inf, inf)

    def test_bounded_lower_tail(self) -> None:
        x_min, x_max = support_bounds(-0.5, 1.0, 0.0, 0.2, 1.0, 0.0)
        assert x_min == pytest.approx(-math.log(math.exp(2.0) - 1.0), rel=1e-14)
        assert x_max == inf

    def test_bounded_upper_tail(self) -> None:
        x_min, x_max = support_bounds(0.2, 1.0, 0.0, -1.0, 2.0, 1.5)
        assert x_min == -inf
        assert x_max == pytest.approx(1.5 + 2.0 * math.log(math.e - 1.0), rel=1e-14)

    def test_bounded_interval(self) -> None:
        x_min, x_max = support_bounds(-0.5, 1.0, 0.0, -0.5, 1.0, 0.0)
        assert x_min == pytest.approx(-x_max, rel=1e-14)
        assert x_min < 0.0 < x_max

    def test_empty_support_is_rejected(self) -> None:
        # Strongly negative shapes push the edges below the opposite locations
        with pytest.raises(InvalidParameter, match="empty support"):
            support_bounds(-10.0, 1.0, 5.0, -10.0, 1.0, -5.0)
