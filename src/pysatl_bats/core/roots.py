"""
Bracketed root finding for increasing functions.

Vectorized counterpart of a bracket-expansion plus bisection search: every
element of ``target`` gets its own bracket and the bisection runs on all
unresolved elements at once. Each element follows exactly the path a scalar
search would take, so the array result is the pointwise map of the scalar
one.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from math import isfinite
from typing import TYPE_CHECKING

import numpy as np

from pysatl_bats.errors import NonConvergence
from pysatl_bats.logging import logger

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import TypeAlias

    from pysatl_bats.types import NumericArray

    VectorFunc: TypeAlias = Callable[[NumericArray], NumericArray]

X_TOL = 1e-12
R_TOL = 4.0 * float(np.finfo(float).eps)
MAX_ITER = 500
MAX_EXPAND = 1100
INIT_STEP = 1.0
EXPAND_FACTOR = 2.0


def _walk(
    func: VectorFunc,
    target: NumericArray,
    start: float,
    direction: float,
    *,
    init_step: float,
    expand_factor: float,
    max_expand: int,
) -> NumericArray:
    """Step away from ``start`` geometrically until ``func`` crosses ``target``."""

    def unresolved(values: NumericArray, goal: NumericArray) -> NumericArray:
        if direction < 0:
            return ~(values < goal)
        return ~(values >= goal)

    step = np.full(target.shape, init_step, dtype=float)
    x = start + direction * step
    pending = unresolved(func(x), target)

    for _ in range(max_expand):
        if not pending.any():
            return x
        step[pending] *= expand_factor
        x[pending] = start + direction * step[pending]
        if not np.isfinite(x[pending]).all():
            break
        pending[pending] = unresolved(func(x[pending]), target[pending])

    if not pending.any():
        return x
    side = "lower" if direction < 0 else "upper"
    logger.warning("Failed to bracket {} quantile(s) on the {} side", int(pending.sum()), side)
    raise NonConvergence(
        f"Could not bracket the root on the {side} side",
        iterations=max_expand,
        bracket=(start, float(x[pending][0])),
    )


def expand_bracket(
    func: VectorFunc,
    target: NumericArray,
    lower: float,
    upper: float,
    anchor: float,
    *,
    init_step: float = INIT_STEP,
    expand_factor: float = EXPAND_FACTOR,
    max_expand: int = MAX_EXPAND,
) -> tuple[NumericArray, NumericArray]:
    """
    Build finite brackets ``[lo, hi]`` around the roots of ``func(x) = target``.

    Parameters
    ----------
    func : Callable[[NumericArray], NumericArray]
        Increasing function on ``(lower, upper)``.
    target : NumericArray
        1D array of finite target values.
    lower, upper : float
        Domain ends. A finite end is taken as-is and is treated as mapping to
        ``-inf`` (resp. ``+inf``) without being evaluated.
    anchor : float
        Interior starting point used when both ends are infinite.
    init_step : float, default 1.0
        First step away from the starting point.
    expand_factor : float, default 2.0
        Geometric growth of the step.
    max_expand : int, default 1100
        Maximum number of expansions per side.

    Returns
    -------
    tuple[NumericArray, NumericArray]
        Lower and upper bracket ends.

    Raises
    ------
    NonConvergence
        If a side cannot be bracketed within ``max_expand`` steps or before
        leaving the range of finite doubles.
    """
    options = {"init_step": init_step, "expand_factor": expand_factor, "max_expand": max_expand}

    if isfinite(lower):
        lo = np.full(target.shape, lower, dtype=float)
    else:
        start = upper if isfinite(upper) else anchor
        lo = _walk(func, target, start, -1.0, **options)

    if isfinite(upper):
        hi = np.full(target.shape, upper, dtype=float)
    else:
        start = lower if isfinite(lower) else anchor
        hi = _walk(func, target, start, 1.0, **options)

    return lo, hi


def bisect(
    func: VectorFunc,
    target: NumericArray,
    lo: NumericArray,
    hi: NumericArray,
    *,
    x_tol: float = X_TOL,
    r_tol: float = R_TOL,
    max_iter: int = MAX_ITER,
) -> tuple[NumericArray, int]:
    """
    Bisect ``func(x) = target`` inside the brackets ``[lo, hi]``.

    An element is resolved once ``hi - lo <= x_tol + r_tol * max(|lo|, |hi|)``
    or once no double lies strictly between its bracket ends.

    Returns
    -------
    tuple[NumericArray, int]
        Midpoints of the final brackets and the number of bisection rounds.

    Raises
    ------
    NonConvergence
        If some element is still unresolved after ``max_iter`` rounds.
    """
    lo = np.array(lo, dtype=float)
    hi = np.array(hi, dtype=float)

    def wide(a: NumericArray, b: NumericArray) -> NumericArray:
        return (b - a) > x_tol + r_tol * np.maximum(np.abs(a), np.abs(b))

    active = wide(lo, hi)
    rounds = 0
    while active.any():
        if rounds >= max_iter:
            first = int(np.flatnonzero(active)[0])
            logger.warning("Bisection left {} quantile(s) unresolved", int(active.sum()))
            raise NonConvergence(
                "Bisection did not reach the requested tolerance",
                iterations=rounds,
                bracket=(float(lo[first]), float(hi[first])),
            )
        a, b = lo[active], hi[active]
        mid = 0.5 * a + 0.5 * b
        moving = (mid > a) & (mid < b)
        below = func(mid) < target[active]

        new_lo = np.where(below, mid, a)
        new_hi = np.where(below, b, mid)
        lo[active] = new_lo
        hi[active] = new_hi
        active[active] = moving & wide(new_lo, new_hi)
        rounds += 1

    return 0.5 * lo + 0.5 * hi, rounds


__all__ = [
    "X_TOL",
    "R_TOL",
    "MAX_ITER",
    "MAX_EXPAND",
    "INIT_STEP",
    "EXPAND_FACTOR",
    "expand_bracket",
    "bisect",
]
