"""
Distribution Families Configuration
====================================

This module defines and configures parametric distribution families for the
PySATL binomial package:

- :class:`Binomial Family` — number of successes in ``n`` Bernoulli trials.

Notes
-----
- All families are registered in the global ParametricFamilyRegister.
- Analytical implementations are delegated to :mod:`scipy.stats` where available.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import lru_cache

from pysatl_binomial.families.builtins import configure_binomial_family
from pysatl_binomial.families.registry import ParametricFamilyRegister


@lru_cache(maxsize=1)
def configure_families_register() -> ParametricFamilyRegister:
    """
    Configure and register all distribution families in the global registry.

    Distribution handles call this lazily, so explicit configuration at
    application startup is optional.

    Returns
    -------
    ParametricFamilyRegister
        The global registry of parametric families.
    """
    configure_binomial_family()
    return ParametricFamilyRegister()


def reset_families_register() -> None:
    """
    Reset the cached families registry.
    """
    configure_families_register.cache_clear()
    ParametricFamilyRegister._reset()
