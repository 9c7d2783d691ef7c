"""
Parametric family definitions and management infrastructure.

This module contains the main class for defining parametric families of
distributions: a named table of characteristic functions, the
parametrizations the family accepts, and a factory producing distribution
handles.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from typing import TYPE_CHECKING, dataclass_transform

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping
    from typing import Any

    from pysatl_binomial.distributions.distribution import Distribution
    from pysatl_binomial.families.parametrizations import Parametrization
    from pysatl_binomial.types import (
        DistributionType,
        GenericCharacteristicName,
        ParametrizationName,
    )

    type ParametrizedFunction = Callable[..., Any]
    type DistributionFactory = Callable[..., Distribution]


class ParametricFamily:
    """
    A family of distributions sharing characteristic functions.

    Every characteristic function takes the parameters object as its first
    argument and the evaluation point as its second, ``f(parameters, x)``.
    Moments ignore the evaluation point.

    Parameters
    ----------
    name : str
        Name of the distribution family.
    distr_type : DistributionType
        Type of every distribution of the family.
    distr_parametrizations : list[ParametrizationName]
        List of parametrization names (first is base parametrization).
    distr_characteristics : Mapping[str, Callable]
        Mapping from characteristic names to computation functions defined
        for the base parametrization.
    distribution_factory : Callable, optional
        Callable building a distribution handle from parameter values.
    """

    def __init__(
        self,
        name: str,
        distr_type: DistributionType,
        distr_parametrizations: list[ParametrizationName],
        distr_characteristics: Mapping[GenericCharacteristicName, ParametrizedFunction],
        distribution_factory: DistributionFactory | None = None,
    ):
        self._name = name
        self.distribution_type = distr_type

        # Ordered names; the first one is the base parametrization name
        self.parametrization_names: list[ParametrizationName] = distr_parametrizations
        self.base_parametrization_name: ParametrizationName = self.parametrization_names[0]

        # Runtime registry of parametrization classes
        self._parametrizations: dict[ParametrizationName, type[Parametrization]] = {}

        self.distr_characteristics: dict[GenericCharacteristicName, ParametrizedFunction] = dict(
            distr_characteristics
        )
        self._distribution_factory = distribution_factory

    @property
    def name(self) -> str:
        """Get the family name."""
        return self._name

    @property
    def parametrizations(self) -> dict[ParametrizationName, type[Parametrization]]:
        """Get mapping from parametrization names to classes."""
        return self._parametrizations

    @property
    def base(self) -> type[Parametrization]:
        """
        Get the base parametrization class.

        Raises
        ------
        ValueError
            If base parametrization is not registered.
        """
        try:
            return self._parametrizations[self.base_parametrization_name]
        except KeyError as exc:
            raise ValueError(
                f"Base parametrization '{self.base_parametrization_name}' is not registered."
            ) from exc

    @property
    def characteristic_names(self) -> list[GenericCharacteristicName]:
        """Get names of all characteristics the family provides."""
        return list(self.distr_characteristics)

    def register_parametrization(
        self,
        name: ParametrizationName,
        parametrization_class: type[Parametrization],
    ) -> None:
        """
        Register a parametrization class.

        Parameters
        ----------
        name : ParametrizationName
            Unique parametrization name.
        parametrization_class : type[Parametrization]
            Parametrization class to register.

        Raises
        ------
        ValueError
            If name is already registered.
        """
        if name in self._parametrizations:
            raise ValueError(f"Parametrization '{name}' is already registered.")
        self._parametrizations[name] = parametrization_class

    def get_parametrization(self, name: ParametrizationName) -> type[Parametrization]:
        """
        Fetch a parametrization class by name.

        Raises
        ------
        KeyError
            If name is not registered.
        """
        return self._parametrizations[name]

    def characteristic(self, name: GenericCharacteristicName) -> ParametrizedFunction:
        """
        Fetch a characteristic function by name.

        Parameters
        ----------
        name : GenericCharacteristicName
            Characteristic name, e.g. ``"pmf"`` or ``"mean"``.

        Returns
        -------
        Callable
            Function of ``(parameters, x)``.

        Raises
        ------
        KeyError
            If the family does not provide the characteristic.
        """
        try:
            return self.distr_characteristics[name]
        except KeyError as exc:
            raise KeyError(
                f"Characteristic '{name}' is not provided by family '{self.name}'."
            ) from exc

    def distribution(self, *args: Any, **parameters_values: Any) -> Distribution:
        """
        Create a distribution handle with given parameters.

        Parameters
        ----------
        *args, **parameters_values
            Parameter values, forwarded to the distribution factory.

        Returns
        -------
        Distribution
            A new, independent distribution handle.

        Raises
        ------
        TypeError
            If the family has no distribution factory.
        """
        if self._distribution_factory is None:
            raise TypeError(f"Family '{self.name}' does not define a distribution factory.")
        return self._distribution_factory(*args, **parameters_values)

    @dataclass_transform()
    def parametrization(
        self, *, name: str
    ) -> Callable[[type[Parametrization]], type[Parametrization]]:
        """
        Create a class decorator that registers a parametrization.

        Parameters
        ----------
        name : str
            Name of the parametrization.

        Returns
        -------
        Callable[[type[Parametrization]], type[Parametrization]]
            Class decorator for registering parametrizations.
        """
        from pysatl_binomial.families.parametrizations import parametrization as _param_deco

        return _param_deco(family=self, name=name)

    __call__ = distribution
