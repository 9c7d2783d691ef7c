"""
Binomial distribution handle.

:class:`Binomial` holds the two parameters of a binomial distribution, guards
them against invalid values on construction and on every later assignment,
and evaluates moments and distribution functions of the registered Binomial
family against the parameters current at the time of the call.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, cast

from pysatl_binomial.distributions.distribution import Distribution
from pysatl_binomial.errors import InvalidArgumentError
from pysatl_binomial.families.configuration import configure_families_register
from pysatl_binomial.types import CharacteristicName, FamilyName, UnivariateDiscrete
from pysatl_binomial.validation import format_invalid_value

if TYPE_CHECKING:
    from typing import Any

    from pysatl_binomial.families.parametric_family import ParametricFamily
    from pysatl_binomial.families.parametrizations import Parametrization
    from pysatl_binomial.types import DistributionType, NumericArray, NumericInput

logger = logging.getLogger(__name__)

DEFAULT_N = 1
"""Number of trials used when no parameters are given."""

DEFAULT_P = 0.5
"""Success probability used when no parameters are given."""

_PARAMETER_NAMES = ("n", "p")

_UNSET: Any = object()


@dataclass(slots=True, init=False, eq=False)
class Binomial(Distribution):
    """
    Binomial distribution with mutable, validated parameters.

    Parameters
    ----------
    n : int, default=1
        Number of trials, a positive integer.
    p : float, default=0.5
        Success probability, a number on [0, 1].

    Raises
    ------
    InvalidArgumentError
        If only one of ``n`` and ``p`` is given, or either is invalid.

    Notes
    -----
    Either both parameters or none must be given. Moments and distribution
    functions are recomputed from the current ``n`` and ``p`` on every access;
    nothing is cached.

    Examples
    --------
    >>> dist = Binomial(5, 0.1)
    >>> round(float(dist.cdf(0.8)), 2)
    0.59
    >>> dist.p = 0.5
    >>> dist.mean
    2.5
    """

    n: int
    p: float

    def __init__(self, n: Any = _UNSET, p: Any = _UNSET) -> None:
        if n is _UNSET and p is _UNSET:
            n, p = DEFAULT_N, DEFAULT_P
        elif n is _UNSET or p is _UNSET:
            given = p if n is _UNSET else n
            raise InvalidArgumentError(
                format_invalid_value(
                    "invalid arguments. Number of trials and success probability "
                    "must be provided together",
                    given,
                )
            )

        parameters = self.family.base(n=n, p=p)  # type: ignore[call-arg]
        parameters.validate()

        object.__setattr__(self, "n", n)
        object.__setattr__(self, "p", p)

    def __setattr__(self, name: str, value: Any) -> None:
        if name in _PARAMETER_NAMES:
            candidate = replace(self.parameters, **{name: value})  # type: ignore[type-var]
            try:
                candidate.validate(name, action="assignment")
            except InvalidArgumentError:
                logger.debug("Rejected assignment %s=%r, keeping %r", name, value, getattr(self, name))
                raise
        object.__setattr__(self, name, value)

    @property
    def distribution_type(self) -> DistributionType:
        """Get the distribution type."""
        return UnivariateDiscrete

    @property
    def family(self) -> ParametricFamily:
        """Get the parametric family this distribution belongs to."""
        return configure_families_register().get(FamilyName.BINOMIAL)

    @property
    def parameters(self) -> Parametrization:
        """
        Snapshot of the current parameters.

        Returns
        -------
        Parametrization
            A new immutable parametrization built from ``n`` and ``p``.
        """
        return self.family.base(n=self.n, p=self.p)  # type: ignore[call-arg]

    @property
    def kurtosis(self) -> float:
        """Excess kurtosis."""
        return cast(float, self.calculate_characteristic(CharacteristicName.KURT))

    @property
    def mean(self) -> float:
        """Expected value, ``n * p``."""
        return cast(float, self.calculate_characteristic(CharacteristicName.MEAN))

    @property
    def median(self) -> float:
        """Median, the smallest ``k`` with ``P(X <= k) >= 0.5``."""
        return cast(float, self.calculate_characteristic(CharacteristicName.MEDIAN))

    @property
    def mode(self) -> int:
        """Most probable number of successes."""
        return cast(int, self.calculate_characteristic(CharacteristicName.MODE))

    @property
    def skewness(self) -> float:
        """Skewness, ``(1 - 2p) / sqrt(n * p * (1 - p))``."""
        return cast(float, self.calculate_characteristic(CharacteristicName.SKEW))

    @property
    def stdev(self) -> float:
        """Standard deviation."""
        return cast(float, self.calculate_characteristic(CharacteristicName.STDEV))

    @property
    def variance(self) -> float:
        """Variance, ``n * p * (1 - p)``."""
        return cast(float, self.calculate_characteristic(CharacteristicName.VAR))

    def cdf(self, x: NumericInput) -> NumericArray:
        """
        Evaluate the cumulative distribution function.

        Parameters
        ----------
        x : NumericInput
            Point(s) of evaluation.

        Returns
        -------
        NumericArray
            P(X ≤ x), same shape as ``x``.
        """
        return cast("NumericArray", self.calculate_characteristic(CharacteristicName.CDF, x))

    def logpmf(self, x: NumericInput) -> NumericArray:
        """Evaluate the natural logarithm of the probability mass function."""
        return cast("NumericArray", self.calculate_characteristic(CharacteristicName.LOGPMF, x))

    def mgf(self, t: NumericInput) -> NumericArray:
        """Evaluate the moment-generating function E[exp(tX)]."""
        return cast("NumericArray", self.calculate_characteristic(CharacteristicName.MGF, t))

    def pmf(self, x: NumericInput) -> NumericArray:
        """
        Evaluate the probability mass function.

        Parameters
        ----------
        x : NumericInput
            Point(s) of evaluation.

        Returns
        -------
        NumericArray
            P(X = x), zero for non-integer points and points outside [0, n].
        """
        return cast("NumericArray", self.calculate_characteristic(CharacteristicName.PMF, x))

    def quantile(self, pr: NumericInput) -> NumericArray:
        """
        Evaluate the quantile function.

        Parameters
        ----------
        pr : NumericInput
            Probability (or probabilities) on [0, 1].

        Returns
        -------
        NumericArray
            Smallest k with P(X ≤ k) ≥ pr; NaN for ``pr`` outside [0, 1].
        """
        return cast("NumericArray", self.calculate_characteristic(CharacteristicName.PPF, pr))


def binomial(*args: Any, **kwargs: Any) -> Binomial:
    """
    Create a binomial distribution through the registered family.

    Accepts the same arguments as :class:`Binomial` and returns an equivalent,
    independent handle.
    """
    return cast(Binomial, configure_families_register().get(FamilyName.BINOMIAL)(*args, **kwargs))
