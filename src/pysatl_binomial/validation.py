"""
Input-validity predicates for distribution parameters.

The predicates accept arbitrary objects and never raise: anything that is not
a real number of the right domain (including ``bool``, strings, ``None`` and
containers) is simply rejected.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
import sys
from numbers import Integral, Real
from typing import Any

import numpy as np


def _is_real_number(value: Any) -> bool:
    # bool is an Integral
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, Real)


def is_positive_integer(value: Any) -> bool:
    """
    Check whether ``value`` is a positive integer.

    Parameters
    ----------
    value : Any
        Value to test.

    Returns
    -------
    bool
        True for finite integral numbers greater than zero, e.g. ``3``,
        ``np.int64(3)`` or ``3.0``. Integers too large for a float64 are
        rejected.
    """
    if not _is_real_number(value):
        return False
    if isinstance(value, Integral):
        # must stay representable as a float64
        return bool(0 < value <= sys.float_info.max)
    number = float(value)
    return math.isfinite(number) and number.is_integer() and number > 0


def is_probability(value: Any) -> bool:
    """
    Check whether ``value`` is a number on the closed interval [0, 1].

    Parameters
    ----------
    value : Any
        Value to test.

    Returns
    -------
    bool
        True for real numbers ``0 <= value <= 1``; NaN is rejected.
    """
    if not _is_real_number(value):
        return False
    return bool(0 <= value <= 1)


def format_invalid_value(message: str, value: Any) -> str:
    """Render an error message that embeds the rejected value."""
    return f"{message}. Value: `{value!r}`."


__all__ = ["is_positive_integer", "is_probability", "format_invalid_value"]
