"""
Built-in continuous distribution families.

This module contains implementations of continuous parametric families.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_bats.families.builtins.continuous.bats import bats_core, configure_bats_family

__all__ = [
    "configure_bats_family",
    "bats_core",
]
