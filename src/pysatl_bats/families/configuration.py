"""
Distribution Families Configuration
====================================

Registers the built-in families in the global registry:

- :class:`BATS Family`: Bulk-And-Tails distribution with ``base`` and
  ``symmetric`` parametrizations.

Notes
-----
- Registration runs once per process; the result is cached.
- :func:`reset_families_register` clears the cache together with the
  registry, so the next call registers everything afresh.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import lru_cache

from pysatl_bats.families.builtins import configure_bats_family
from pysatl_bats.families.registry import ParametricFamilyRegister


@lru_cache(maxsize=1)
def configure_families_register() -> ParametricFamilyRegister:
    """
    Register all built-in distribution families in the global registry.

    Returns
    -------
    ParametricFamilyRegister
        The global registry of parametric families.
    """
    configure_bats_family()
    return ParametricFamilyRegister()


def reset_families_register() -> None:
    """
    Reset the cached families registry.
    """
    configure_families_register.cache_clear()
    ParametricFamilyRegister._reset()


__all__ = ["configure_families_register", "reset_families_register"]
