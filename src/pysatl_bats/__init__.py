"""
PySATL BATS
===========

The Bulk-And-Tails (BATS) distribution: a Student-t base whose tails are
reshaped by two generalized-Pareto-like transforms. Provides the numerical
core, the parametric family with its parametrizations, sampling, and a flat
functional API.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .api import *
from .api import __all__ as _api_all
from .core import BATSCore
from .distributions import *
from .distributions import __all__ as _distr_all
from .errors import *
from .errors import __all__ as _errors_all
from .families import *
from .families import __all__ as _family_all
from .logging import set_log_level
from .types import *
from .types import __all__ as _types_all

__version__ = version("pysatl-bats")
__all__ = [
    "__version__",
    "BATSCore",
    "set_log_level",
    *_api_all,
    *_distr_all,
    *_errors_all,
    *_family_all,
    *_types_all,
]

del _api_all
del _distr_all
del _errors_all
del _family_all
del _types_all
