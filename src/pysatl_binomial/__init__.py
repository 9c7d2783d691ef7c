"""
PySATL Binomial
===============

Binomial distribution handle with validated, mutable parameters, built on a
small parametric-family framework: type definitions, parametrizations with
constraints, a family register and distribution handles.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .distributions import *
from .distributions import __all__ as _distr_all
from .errors import InvalidArgumentError
from .families import *
from .families import __all__ as _family_all
from .types import *
from .types import __all__ as _types_all
from .validation import is_positive_integer, is_probability

__version__ = version("pysatl-binomial")
__all__ = [
    "__version__",
    "InvalidArgumentError",
    "is_positive_integer",
    "is_probability",
    *_distr_all,
    *_family_all,
    *_types_all,
]

del _distr_all
del _family_all
del _types_all
