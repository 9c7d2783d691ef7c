"""
Exceptions raised by distribution handles and parametrizations.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


class InvalidArgumentError(TypeError, ValueError):
    """
    A distribution parameter was rejected.

    Raised when a constructor receives a malformed or partial parameter set,
    and when a parameter assignment fails validation. The message embeds the
    ``repr`` of the rejected value.
    """


__all__ = ["InvalidArgumentError"]
