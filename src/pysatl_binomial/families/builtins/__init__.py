"""
Built-in distribution families for PySATL binomial.

This package contains implementations of standard statistical distribution families
that are available by default.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_binomial.families.builtins.discrete import configure_binomial_family

__all__ = [
    "configure_binomial_family",
]
