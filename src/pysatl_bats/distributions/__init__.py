"""
Distributions subpackage

Interfaces and default implementations shared by distribution families:

- distribution protocol (:mod:`.distribution`);
- analytical computation primitives (:mod:`.computation`);
- supports (:mod:`.support`);
- sampling protocol and array-backed samples (:mod:`.sampling`);
- sampling strategies (:mod:`.strategies`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
from .computation import AnalyticalComputation, Computation
from .distribution import Distribution
from .sampling import ArraySample, Sample, open_unit_uniform
from .strategies import InverseTransformSamplingStrategy, SamplingStrategy
from .support import ContinuousSupport, Support

__all__ = [
    # computation primitives
    "AnalyticalComputation",
    "Computation",
    # distribution
    "Distribution",
    # support
    "Support",
    "ContinuousSupport",
    # sampling
    "Sample",
    "ArraySample",
    "open_unit_uniform",
    # strategies
    "SamplingStrategy",
    "InverseTransformSamplingStrategy",
]
