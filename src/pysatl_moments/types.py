"""
Core Type Definitions
=====================

Fundamental types and data structures used throughout pysatl-moments.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Callable
from dataclasses import asdict, dataclass
from enum import StrEnum
from math import inf, isnan
from typing import Any, cast, overload

import numpy as np
from numpy.typing import NDArray


class Kind(StrEnum):
    """
    Enumeration of distribution kinds.

    Attributes
    ----------
    DISCRETE : str
        Discrete probability distribution (lattice support, mass function).
    CONTINUOUS : str
        Continuous probability distribution (density function).
    """

    DISCRETE = "discrete"
    CONTINUOUS = "continuous"


NumPyNumber = np.floating[Any] | np.integer[Any]
"""Type alias for NumPy numeric types."""

Number = NumPyNumber | int | float
"""Type alias for all numeric types."""

NumericArray = NDArray[NumPyNumber]
"""Type alias for numeric arrays."""

BoolArray = NDArray[np.bool_]
"""Type alias for boolean arrays."""


@dataclass(frozen=True, slots=True)
class Bounds:
    """
    Support bounds of a univariate distribution.

    Parameters
    ----------
    lower : float, default=-inf
        Lower endpoint.
    upper : float, default=inf
        Upper endpoint.
    lower_inclusive : bool, default=True
        Whether the lower endpoint belongs to the support (ignored if -inf).
    upper_inclusive : bool, default=True
        Whether the upper endpoint belongs to the support (ignored if inf).

    Raises
    ------
    ValueError
        If an endpoint is NaN or ``lower > upper``.
    """

    lower: float = -inf
    upper: float = inf
    lower_inclusive: bool = True
    upper_inclusive: bool = True

    def __post_init__(self) -> None:
        if isnan(self.lower) or isnan(self.upper):
            raise ValueError("Bounds endpoints must not be NaN")
        if self.lower > self.upper:
            raise ValueError(f"Invalid bounds: lower={self.lower} > upper={self.upper}")
        if self.lower == -inf and self.lower_inclusive:
            object.__setattr__(self, "lower_inclusive", False)
        if self.upper == inf and self.upper_inclusive:
            object.__setattr__(self, "upper_inclusive", False)

    @property
    def lower_bound(self) -> tuple[float, bool]:
        """Lower endpoint as a ``(value, inclusive)`` pair."""
        return self.lower, self.lower_inclusive

    @property
    def upper_bound(self) -> tuple[float, bool]:
        """Upper endpoint as a ``(value, inclusive)`` pair."""
        return self.upper, self.upper_inclusive

    @property
    def is_bounded_below(self) -> bool:
        return self.lower > -inf

    @property
    def is_bounded_above(self) -> bool:
        return self.upper < inf

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        """
        Check if point(s) lie within the bounds.

        Parameters
        ----------
        x : Number or NumericArray
            Point(s) to check.

        Returns
        -------
        bool or BoolArray
            True for points within the bounds, False otherwise.
        """
        arr = np.asarray(x)

        lower_ok = (arr > self.lower) | (self.lower_inclusive & (arr >= self.lower))
        upper_ok = (arr < self.upper) | (self.upper_inclusive & (arr <= self.upper))
        result = lower_ok & upper_ok

        if np.ndim(arr) == 0:
            return bool(result)

        return cast(BoolArray, result)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(Number, x)))


@dataclass(frozen=True, slots=True)
class MomentSet:
    """
    Mean, variance, skewness and excess kurtosis of a distribution.

    ``None`` marks a moment that is undefined (e.g. every moment of the
    Cauchy distribution) or that could not be computed numerically.

    Raises
    ------
    ValueError
        If ``variance`` is defined and negative.
    """

    mean: float | None = None
    variance: float | None = None
    skewness: float | None = None
    kurtosis: float | None = None

    def __post_init__(self) -> None:
        if self.variance is not None and self.variance < 0:
            raise ValueError(f"Variance must be non-negative, got {self.variance}")

    @classmethod
    def undefined(cls) -> "MomentSet":
        """Moment set with every moment undefined."""
        return cls()

    def as_dict(self) -> dict[str, float | None]:
        return asdict(self)


type GenericCharacteristicName = str
"""Type alias for characteristic names (e.g., 'pdf', 'cdf')."""

type ParametrizationName = str
"""Type alias for parametrization names."""

ScalarFunc = Callable[[float], float]
"""Type alias for scalar functions (float -> float)."""


class CharacteristicName(StrEnum):
    """
    Enumeration of the characteristics a distribution family may provide.

    Attributes
    ----------
    PDF : str
        Density function (mass function for discrete kinds).
    CDF : str
        Cumulative distribution function.
    MGF : str
        Moment-generating function, or a closed-form :class:`MomentSet`.
    """

    PDF = "pdf"
    CDF = "cdf"
    MGF = "mgf"


class DistributionName(StrEnum):
    BINOMIAL = "binomial"
    GEOMETRIC = "geometric"
    POISSON = "poisson"
    LOGARITHMIC = "logarithmic"
    UNIFORM = "uniform"
    EXPONENTIAL = "exponential"
    GAUSSIAN = "gaussian"
    GAMMA = "gamma"
    BETA = "beta"
    RAYLEIGH = "rayleigh"
    GUMBEL = "gumbel"
    CAUCHY = "cauchy"


__all__ = [
    "Kind",
    "Bounds",
    "MomentSet",
    "GenericCharacteristicName",
    "ParametrizationName",
    "ScalarFunc",
    "BoolArray",
    "NumPyNumber",
    "Number",
    "NumericArray",
    "CharacteristicName",
    "DistributionName",
]
