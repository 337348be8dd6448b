"""
Poisson distribution family implementation.
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
from pysatl_moments.numerics.special import (
    is_int,
    lngamma,
    regularized_uigamma,
    safe_exp,
)
from pysatl_moments.types import Bounds, CharacteristicName, DistributionName, Kind

if TYPE_CHECKING:
    from pysatl_moments.families.registry import DistributionRegistry


def configure_poisson_family(registry: DistributionRegistry) -> None:
    """
    Configure and register the Poisson distribution family.
    """

    if registry.contains(DistributionName.POISSON):
        return

    POISSON_DOC = """
    Poisson distribution.

    Probability mass function:
        P(X = k) = lambda^k * e^(-lambda) / k!,  k = 0, 1, 2, ...

    Cumulative distribution function (regularized upper incomplete gamma):
        F(k) = Q(floor(k) + 1, lambda)

    Moment-generating function:
        M(t) = exp(lambda * (e^t - 1))
    """

    def pmf(parameters: Parametrization, k: float) -> float:
        """Mass at ``k``, evaluated in log space; 0 off the support."""
        parameters = cast(_Rate, parameters)
        lambda_ = parameters.lambda_
        if not is_int(k) or k < 0:
            return 0.0
        return safe_exp(k * math.log(lambda_) - lambda_ - lngamma(k + 1))

    def cdf(parameters: Parametrization, k: float) -> float:
        parameters = cast(_Rate, parameters)
        if math.isnan(k):
            return math.nan
        if k < 0:
            return 0.0
        if math.isinf(k):
            return 1.0
        return regularized_uigamma(math.floor(k) + 1, parameters.lambda_)

    def mgf(parameters: Parametrization, t: float) -> float:
        parameters = cast(_Rate, parameters)
        return safe_exp(parameters.lambda_ * (safe_exp(t) - 1))

    def _bounds(_: Parametrization) -> Bounds:
        return Bounds(lower=0.0)

    Poisson = ParametricFamily(
        name=DistributionName.POISSON,
        kind=Kind.DISCRETE,
        distr_parametrizations=["rate"],
        distr_characteristics={
            CharacteristicName.PDF: pmf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.MGF: mgf,
        },
        bounds_by_parametrization=_bounds,
    )
    Poisson.__doc__ = POISSON_DOC

    @parametrization(family=Poisson, name="rate")
    class _Rate(Parametrization):
        """
        Rate parametrization of the Poisson distribution.

        Parameters
        ----------
        lambda_ : float
            Expected number of events (λ).
        """

        lambda_: float

        @constraint(description="lambda_ > 0")
        def check_lambda_positive(self) -> bool:
            return self.lambda_ > 0

    registry.register(Poisson)
