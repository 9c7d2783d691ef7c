"""
Parameterization classes and constraint machinery for distribution families.

This module provides the core abstractions for defining parameterizations
of statistical distributions, including per-parameter constraint validation.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from abc import ABC
from dataclasses import dataclass, is_dataclass
from functools import wraps
from inspect import isfunction
from typing import TYPE_CHECKING, ParamSpec

from pysatl_binomial.errors import InvalidArgumentError
from pysatl_binomial.types import ParametrizationName
from pysatl_binomial.validation import format_invalid_value

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any, ClassVar

    from pysatl_binomial.families.parametric_family import ParametricFamily


@dataclass(slots=True, frozen=True)
class ParametrizationConstraint:
    """
    Constraint on parameter values for a parametrization.

    Parameters
    ----------
    description : str
        Human-readable description of the constraint.
    check : Callable[[Any], bool]
        Validation function that returns True if constraint is satisfied.
    parameter : str or None
        Name of the parameter the constraint guards, if it guards exactly one.
    """

    description: str
    check: Callable[[Any], bool]
    parameter: str | None = None


class Parametrization(ABC):
    """
    Abstract base class for distribution parametrizations.

    Instances are immutable snapshots of parameter values. Validation is
    explicit: constructing a parametrization never checks its constraints,
    :meth:`validate` does.
    """

    # These attributes are set by the @parametrization decorator
    __family__: ClassVar[ParametricFamily]
    __param_name__: ClassVar[ParametrizationName]

    _constraints: ClassVar[list[ParametrizationConstraint]] = []

    @property
    def name(self) -> str:
        """Get the name of this parametrization."""
        return self.__class__.__param_name__

    @property
    def parameters(self) -> dict[str, Any]:
        """Get parameters as a dictionary."""
        return {f: getattr(self, f) for f in getattr(self, "__dataclass_fields__", {})}

    @property
    def constraints(self) -> list[ParametrizationConstraint]:
        """Get constraints for this parametrization."""
        return self._constraints

    def validate(self, parameter: str | None = None, *, action: str = "argument") -> None:
        """
        Validate constraints for this parametrization.

        Parameters
        ----------
        parameter : str, optional
            Only check constraints bound to this parameter. All constraints
            are checked when omitted.
        action : str, default="argument"
            Word used in the error message ("argument" or "assignment").

        Raises
        ------
        InvalidArgumentError
            On the first constraint that does not hold. The message contains
            the constraint description and the offending value.
        """
        for constraint in self._constraints:
            if parameter is not None and constraint.parameter != parameter:
                continue
            if not constraint.check(self):
                value = (
                    self.parameters
                    if constraint.parameter is None
                    else getattr(self, constraint.parameter)
                )
                raise InvalidArgumentError(
                    format_invalid_value(f"invalid {action}. {constraint.description}", value)
                )


P = ParamSpec("P")


def constraint(
    description: str, *, parameter: str | None = None
) -> Callable[[Callable[P, bool]], Callable[P, bool]]:
    """
    Decorator to mark an instance method as a parameter constraint.

    Parameters
    ----------
    description : str
        Human-readable description of the constraint.
    parameter : str, optional
        Name of the parameter the constraint checks.

    Returns
    -------
    Callable[[Callable[P, bool]], Callable[P, bool]]
        Decorator that marks the function as a constraint.

    Notes
    -----
    The decorated function must be a predicate returning bool.
    Sets marker attributes on the function:
    - __is_constraint: True
    - __constraint_description: description
    - __constraint_parameter: parameter
    """

    def decorator(func: Callable[P, bool]) -> Callable[P, bool]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> bool:
            return func(*args, **kwargs)

        setattr(wrapper, "__is_constraint", True)
        setattr(wrapper, "__constraint_description", description)
        setattr(wrapper, "__constraint_parameter", parameter)
        return wrapper

    return decorator


def parametrization(
    *,
    family: ParametricFamily,
    name: str,
) -> Callable[[type[Parametrization]], type[Parametrization]]:
    """
    Decorator to register a class as a parametrization for a family.

    Parameters
    ----------
    family : ParametricFamily
        Family to register the parametrization with.
    name : str
        Name of the parametrization.

    Returns
    -------
    Callable[[type[Parametrization]], type[Parametrization]]
        Class decorator that registers the parametrization.

    Notes
    -----
    Automatically converts the class to a frozen dataclass if not already one.
    Collects and registers constraint methods marked with @constraint.
    """

    def _collect_constraints(
        cls: type[Parametrization],
    ) -> list[ParametrizationConstraint]:
        """Collect constraint methods from the class."""
        constraints: list[ParametrizationConstraint] = []
        for attr_name, attr in cls.__dict__.items():
            if isinstance(attr, (staticmethod, classmethod)) and getattr(
                attr.__func__, "__is_constraint", False
            ):
                kind = "@staticmethod" if isinstance(attr, staticmethod) else "@classmethod"
                raise TypeError(f"@constraint '{attr_name}' must be an instance method, not {kind}")

            func = attr if callable(attr) and isfunction(attr) else None
            if not func:
                continue
            if getattr(func, "__is_constraint", False):
                constraints.append(
                    ParametrizationConstraint(
                        description=getattr(func, "__constraint_description", func.__name__),
                        check=func,
                        parameter=getattr(func, "__constraint_parameter", None),
                    )
                )
        return constraints

    def decorator(cls: type[Parametrization]) -> type[Parametrization]:
        if not is_dataclass(cls):
            cls = dataclass(slots=True, frozen=True)(cls)

        # Attach metadata
        cls.__family__ = family
        cls.__param_name__ = name

        cls._constraints = _collect_constraints(cls)

        family.register_parametrization(name, cls)
        return cls

    return decorator
