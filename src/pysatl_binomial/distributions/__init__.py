"""
Distributions subpackage

Interfaces and implementations of distribution handles:

- distribution protocol (:mod:`.distribution`);
- binomial distribution handle and factory (:mod:`.binomial`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
from .binomial import DEFAULT_N, DEFAULT_P, Binomial, binomial
from .distribution import Distribution

__all__ = [
    # distribution
    "Distribution",
    # binomial
    "Binomial",
    "binomial",
    "DEFAULT_N",
    "DEFAULT_P",
]
