"""
Sampling Strategies
===================

- :class:`SamplingStrategy`: draws samples from a distribution.
- :class:`InverseTransformSamplingStrategy`: draws ``(n, 1)`` samples by
  pushing uniforms from the caller's generator through ``ppf``.

Notes
-----
Strategies are stateless. The random generator is always supplied by the
caller; no module-level generator exists.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Any, Protocol

import numpy as np

from pysatl_bats.types import CharacteristicName

from .sampling import ArraySample, Sample, open_unit_uniform

if TYPE_CHECKING:
    from .distribution import Distribution


class SamplingStrategy(Protocol):
    """Protocol for sampling strategies (return a :class:`Sample`)."""

    def sample(
        self, n: int, distr: "Distribution", *, rng: np.random.Generator, **options: Any
    ) -> Sample: ...


class InverseTransformSamplingStrategy(SamplingStrategy):
    """
    Univariate sampler using inverse transform sampling.

    Draws ``U ~ U(0, 1)`` from ``rng``, redraws exact zeros (their quantile is
    the support bound, not a point of the support), and applies the
    distribution's ``ppf`` to the whole batch. ``**options`` are forwarded to
    ``ppf``.

    Returns
    -------
    ArraySample
        A 2D sample of shape ``(n, 1)``.
    """

    def sample(
        self, n: int, distr: "Distribution", *, rng: np.random.Generator, **options: Any
    ) -> ArraySample:
        if n < 0:
            raise ValueError(f"Sample size must be non-negative, got {n}")
        if n == 0:
            return ArraySample(np.empty((0, 1)))
        ppf = distr.query_method(CharacteristicName.PPF)
        U = open_unit_uniform(rng, n)
        vals = np.asarray(ppf(U, **options), dtype=np.float64).reshape(n, 1)
        return ArraySample(vals)
