"""
PySATL Distr
============

Statistical distribution evaluation engine: parametric families with
analytical characteristics, conversions deriving the missing ones, an
evaluation facade with uniform input validation, and a self-contained
special-function kernel (incomplete gamma and beta functions, their
inverses, the normal quantile and a bracketing root-finder).
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .distributions import *
from .distributions import __all__ as _distr_all
from .errors import *
from .errors import __all__ as _errors_all
from .families import *
from .families import __all__ as _family_all
from .types import *
from .types import __all__ as _types_all

__version__ = version("pysatl-distr")
__all__ = [
    "__version__",
    *_distr_all,
    *_errors_all,
    *_family_all,
    *_types_all,
]

del _distr_all
del _errors_all
del _family_all
del _types_all
