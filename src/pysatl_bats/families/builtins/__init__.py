"""
Built-in distribution families shipped with ``pysatl_bats``.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_bats.families.builtins.continuous import bats_core, configure_bats_family

__all__ = [
    "configure_bats_family",
    "bats_core",
]
