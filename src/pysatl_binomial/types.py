"""
Core Type Definitions
=====================

Fundamental types and data structures used throughout the PySATL binomial package.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray


class Kind(StrEnum):
    """
    Enumeration of distribution kinds.

    Attributes
    ----------
    DISCRETE : str
        Discrete probability distribution.
    """

    DISCRETE = "discrete"


class DistributionType:
    """Base class for distribution type descriptors."""

    __slots__ = ()


@dataclass(frozen=True, slots=True)
class EuclideanDistributionType(DistributionType):
    """
    Distribution type for Euclidean space distributions.

    Parameters
    ----------
    kind : Kind
        Distribution kind.
    dimension : int
        Spatial dimension (e.g., 1 for univariate).
    """

    kind: Kind
    dimension: int


UnivariateDiscrete = EuclideanDistributionType(kind=Kind.DISCRETE, dimension=1)
"""Type for univariate discrete distributions."""

NumPyNumber = np.floating[Any] | np.integer[Any]
"""Type alias for NumPy numeric types."""

Number = NumPyNumber | int | float
"""Type alias for all numeric types."""

NumericArray = NDArray[NumPyNumber]
"""Type alias for numeric arrays."""

NumericInput = Number | ArrayLike
"""Type alias for scalar or array-like evaluator arguments."""

type GenericCharacteristicName = str
"""Type alias for characteristic names (e.g., 'pmf', 'cdf')."""

type ParametrizationName = str
"""Type alias for parametrization names."""


class CharacteristicName(StrEnum):
    """
    Enumeration of statistical distribution characteristics.

    Distribution functions take an argument; moments ignore it.
    """

    CDF = "cdf"
    PMF = "pmf"
    LOGPMF = "logpmf"
    MGF = "mgf"
    PPF = "ppf"
    MEAN = "mean"
    MEDIAN = "median"
    MODE = "mode"
    VAR = "variance"
    STDEV = "stdev"
    SKEW = "skewness"
    KURT = "kurtosis"


class FamilyName(StrEnum):
    BINOMIAL = "Binomial"


__all__ = [
    "Kind",
    "EuclideanDistributionType",
    "UnivariateDiscrete",
    "GenericCharacteristicName",
    "ParametrizationName",
    "DistributionType",
    "NumPyNumber",
    "Number",
    "NumericArray",
    "NumericInput",
    "CharacteristicName",
    "FamilyName",
]
