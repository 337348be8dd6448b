"""
Discrete uniform distribution family implementation.

Every integer in ``[a, b]`` is equally likely. Moments come in closed form
rather than from the moment-generating function.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

from pysatl_moments.families.parametric_family import ParametricFamily
from pysatl_moments.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_moments.numerics.special import is_int
from pysatl_moments.types import (
    Bounds,
    CharacteristicName,
    DistributionName,
    Kind,
    MomentSet,
)

if TYPE_CHECKING:
    from pysatl_moments.families.registry import DistributionRegistry


def configure_uniform_family(registry: DistributionRegistry) -> None:
    """
    Configure and register the discrete Uniform distribution family.
    """

    if registry.contains(DistributionName.UNIFORM):
        return

    UNIFORM_DOC = """
    Discrete uniform distribution on the integers a, a + 1, ..., b.

    Probability mass function:
        P(X = k) = 1 / n,  n = b - a + 1

    Cumulative distribution function:
        F(k) = (floor(k) - a + 1) / n,  clipped to [0, 1]

    Moments:
        mean = (a + b) / 2
        variance = (n^2 - 1) / 12
        skewness = 0
        excess kurtosis = -6 (n^2 + 1) / (5 (n^2 - 1))
    """

    def _count(parameters: _Standard) -> float:
        return parameters.b - parameters.a + 1

    def pmf(parameters: Parametrization, k: float) -> float:
        parameters = cast(_Standard, parameters)
        if not is_int(k) or k < parameters.a or k > parameters.b:
            return 0.0
        return 1.0 / _count(parameters)

    def cdf(parameters: Parametrization, k: float) -> float:
        parameters = cast(_Standard, parameters)
        if math.isnan(k):
            return math.nan
        if k < parameters.a:
            return 0.0
        if k >= parameters.b:
            return 1.0
        return (math.floor(k) - parameters.a + 1) / _count(parameters)

    def _moments(parameters: Parametrization) -> MomentSet:
        parameters = cast(_Standard, parameters)
        n = _count(parameters)
        mean = (parameters.a + parameters.b) / 2
        if n == 1:
            # point mass
            return MomentSet(mean=mean, variance=0.0)
        return MomentSet(
            mean=mean,
            variance=(n**2 - 1) / 12,
            skewness=0.0,
            kurtosis=-6 * (n**2 + 1) / (5 * (n**2 - 1)),
        )

    def _bounds(parameters: Parametrization) -> Bounds:
        parameters = cast(_Standard, parameters)
        return Bounds(lower=float(parameters.a), upper=float(parameters.b))

    Uniform = ParametricFamily(
        name=DistributionName.UNIFORM,
        kind=Kind.DISCRETE,
        distr_parametrizations=["standard"],
        distr_characteristics={
            CharacteristicName.PDF: pmf,
            CharacteristicName.CDF: cdf,
        },
        bounds_by_parametrization=_bounds,
        moments_by_parametrization=_moments,
    )
    Uniform.__doc__ = UNIFORM_DOC

    @parametrization(family=Uniform, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of the discrete uniform distribution.

        Parameters
        ----------
        a : int
            Smallest value of the support.
        b : int
            Largest value of the support.
        """

        a: int
        b: int

        @constraint(description="a and b are integers")
        def check_integer_bounds(self) -> bool:
            return is_int(self.a) and is_int(self.b)

        @constraint(description="a <= b")
        def check_a_not_above_b(self) -> bool:
            return self.a <= self.b

    registry.register(Uniform)
