"""
Numerical core of the Bulk-And-Tails distribution:

- stabilized softplus transforms and tail maps (:mod:`.transforms`);
- support bounds (:mod:`.bounds`);
- Student-t base adapter (:mod:`.base`);
- bracketed root finding (:mod:`.roots`);
- the per-parameter-set evaluator :class:`BATSCore` (:mod:`.bats`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .base import BaseDistribution, StudentT
from .bats import BATSCore
from .bounds import support_bounds, tail_edge
from .transforms import (
    KAPPA_ZERO_TOL,
    PSI_CUTOFF,
    dh_part,
    dpsi,
    h,
    h_derivative,
    h_part,
    ipsi,
    log_dh_part,
    log_h_derivative,
    psi,
)

__all__ = [
    "BATSCore",
    "BaseDistribution",
    "StudentT",
    "support_bounds",
    "tail_edge",
    "KAPPA_ZERO_TOL",
    "PSI_CUTOFF",
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
