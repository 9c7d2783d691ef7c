"""
Distribution Interfaces
=======================

This module defines the public :class:`Distribution` protocol implemented by
every distribution handle of the package.

Notes
-----
- A handle owns its parameter values; characteristics are never stored and
  are evaluated against the parameters current at call time.
- :meth:`Distribution.query_method` returns a callable that reads the
  parameters when it is called, not when it is queried.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any

    from pysatl_binomial.families.parametric_family import ParametricFamily
    from pysatl_binomial.families.parametrizations import Parametrization
    from pysatl_binomial.types import (
        DistributionType,
        GenericCharacteristicName,
    )


@runtime_checkable
class Distribution(Protocol):
    """Public distribution interface."""

    __slots__ = ()

    @property
    def distribution_type(self) -> DistributionType: ...

    @property
    def family(self) -> ParametricFamily: ...

    @property
    def parameters(self) -> Parametrization: ...

    def calculate_characteristic(
        self, characteristic_name: GenericCharacteristicName, value: Any = None
    ) -> Any:
        return self.family.characteristic(characteristic_name)(self.parameters, value)

    def query_method(self, characteristic_name: GenericCharacteristicName) -> Callable[..., Any]:
        # Resolve eagerly so unknown names fail here, evaluate lazily
        self.family.characteristic(characteristic_name)

        def method(value: Any = None) -> Any:
            return self.calculate_characteristic(characteristic_name, value)

        return method
