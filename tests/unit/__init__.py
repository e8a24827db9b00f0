"""
PySATL Core
===========

Minimal core for probabilistic distributions: types, strategies, fitters,
and graph-based characteristic resolution.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
