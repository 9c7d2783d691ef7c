"""
Binomial distribution family implementation.

Contains the Binomial family with the standard (trials, success probability)
parameterization. Distribution functions and moments are delegated to
:data:`scipy.stats.binom`; mode and moment-generating function are closed
forms over NumPy.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.stats import binom

from pysatl_binomial.families.parametric_family import ParametricFamily
from pysatl_binomial.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_binomial.families.registry import ParametricFamilyRegister
from pysatl_binomial.types import (
    CharacteristicName,
    FamilyName,
    NumericArray,
    NumericInput,
    UnivariateDiscrete,
)
from pysatl_binomial.validation import is_positive_integer, is_probability

if TYPE_CHECKING:
    from typing import Any


def configure_binomial_family() -> None:
    """
    Configure and register the Binomial distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.BINOMIAL):
        return

    from pysatl_binomial.distributions.binomial import Binomial

    BINOMIAL_DOC = """
    Binomial distribution.

    The binomial distribution describes the number of successes in ``n``
    independent Bernoulli trials, each succeeding with probability ``p``.

    Probability mass function:
        P(X = k) = C(n, k) * p^k * (1 - p)^(n - k) for k = 0, 1, ..., n
    """

    def cdf(parameters: Parametrization, x: NumericInput) -> NumericArray:
        """
        Cumulative distribution function for binomial distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - n: int (number of trials)
            - p: float (success probability)
        x : NumericInput
            Points at which to evaluate the cumulative distribution function

        Returns
        -------
        NumericArray
            Probabilities P(X ≤ x) for each point x
        """
        parameters = cast(_Standard, parameters)
        return cast(NumericArray, binom.cdf(x, parameters.trials, parameters.p))

    def pmf(parameters: Parametrization, x: NumericInput) -> NumericArray:
        """
        Probability mass function for binomial distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - n: int (number of trials)
            - p: float (success probability)
        x : NumericInput
            Points at which to evaluate the probability mass function

        Returns
        -------
        NumericArray
            Probabilities P(X = x); zero for points outside {0, ..., n}
            and for non-integer points
        """
        parameters = cast(_Standard, parameters)
        return cast(NumericArray, binom.pmf(x, parameters.trials, parameters.p))

    def logpmf(parameters: Parametrization, x: NumericInput) -> NumericArray:
        """Natural logarithm of the probability mass function (``-inf`` off support)."""
        parameters = cast(_Standard, parameters)
        return cast(NumericArray, binom.logpmf(x, parameters.trials, parameters.p))

    def ppf(parameters: Parametrization, q: NumericInput) -> NumericArray:
        """
        Quantile function (inverse CDF) for binomial distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - n: int (number of trials)
            - p: float (success probability)
        q : NumericInput
            Probabilities from [0, 1]

        Returns
        -------
        NumericArray
            Smallest k with P(X ≤ k) ≥ q; NaN for q outside [0, 1]
        """
        parameters = cast(_Standard, parameters)
        return cast(NumericArray, binom.ppf(q, parameters.trials, parameters.p))

    def mgf(parameters: Parametrization, t: NumericInput) -> NumericArray:
        """
        Moment-generating function of binomial distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - n: int (number of trials)
            - p: float (success probability)
        t : NumericInput
            Points at which to evaluate the moment-generating function

        Returns
        -------
        NumericArray
            Values (1 - p + p * e^t)^n
        """
        parameters = cast(_Standard, parameters)
        n, p = parameters.trials, parameters.p
        t_arr = np.asarray(t, dtype=np.float64)

        with np.errstate(over="ignore"):
            result = np.power(1.0 - p + p * np.exp(t_arr), n)
        return cast(NumericArray, result[()])

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of binomial distribution."""
        parameters = cast(_Standard, parameters)
        return float(binom.mean(parameters.trials, parameters.p))

    def median_func(parameters: Parametrization, _: Any) -> float:
        """Median of binomial distribution."""
        parameters = cast(_Standard, parameters)
        return float(binom.median(parameters.trials, parameters.p))

    def mode_func(parameters: Parametrization, _: Any) -> int:
        """Mode of binomial distribution, floor((n + 1) p) clipped to n."""
        parameters = cast(_Standard, parameters)
        n, p = parameters.trials, parameters.p
        return int(np.minimum(np.floor((n + 1) * p), n))

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of binomial distribution."""
        parameters = cast(_Standard, parameters)
        return float(binom.var(parameters.trials, parameters.p))

    def stdev_func(parameters: Parametrization, _: Any) -> float:
        """Standard deviation of binomial distribution."""
        parameters = cast(_Standard, parameters)
        return float(binom.std(parameters.trials, parameters.p))

    def skew_func(parameters: Parametrization, _: Any) -> float:
        """Skewness of binomial distribution (infinite for p in {0, 1})."""
        parameters = cast(_Standard, parameters)
        with np.errstate(divide="ignore", invalid="ignore"):
            return float(binom.stats(parameters.trials, parameters.p, moments="s"))

    def kurt_func(parameters: Parametrization, _: Any) -> float:
        """Excess kurtosis of binomial distribution (infinite for p in {0, 1})."""
        parameters = cast(_Standard, parameters)
        with np.errstate(divide="ignore", invalid="ignore"):
            return float(binom.stats(parameters.trials, parameters.p, moments="k"))

    BinomialFamily = ParametricFamily(
        name=FamilyName.BINOMIAL,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["standard"],
        distr_characteristics={
            CharacteristicName.CDF: cdf,
            CharacteristicName.PMF: pmf,
            CharacteristicName.LOGPMF: logpmf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MGF: mgf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.MEDIAN: median_func,
            CharacteristicName.MODE: mode_func,
            CharacteristicName.VAR: var_func,
            CharacteristicName.STDEV: stdev_func,
            CharacteristicName.SKEW: skew_func,
            CharacteristicName.KURT: kurt_func,
        },
        distribution_factory=Binomial,
    )
    BinomialFamily.__doc__ = BINOMIAL_DOC

    @parametrization(family=BinomialFamily, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of binomial distribution.

        Parameters
        ----------
        n : int
            Number of trials
        p : float
            Success probability
        """

        n: int
        p: float

        @property
        def trials(self) -> int | float:
            """Number of trials as passed to the numerics; float beyond the int64 range."""
            if self.n > np.iinfo(np.int64).max:
                return float(self.n)
            return self.n

        @constraint(description="Number of trials must be a positive integer", parameter="n")
        def check_n_positive_integer(self) -> bool:
            """Check that the number of trials is a positive integer."""
            return is_positive_integer(self.n)

        @constraint(
            description="Success probability must be a number on the interval [0, 1]",
            parameter="p",
        )
        def check_p_probability(self) -> bool:
            """Check that the success probability lies in [0, 1]."""
            return is_probability(self.p)

    ParametricFamilyRegister.register(BinomialFamily)
