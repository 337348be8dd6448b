"""
Exponential distribution family implementation.

Provides the rate parametrization (base) and the scale parametrization.
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
from pysatl_moments.numerics.special import safe_exp
from pysatl_moments.types import Bounds, CharacteristicName, DistributionName, Kind

if TYPE_CHECKING:
    from pysatl_moments.families.registry import DistributionRegistry


def configure_exponential_family(registry: DistributionRegistry) -> None:
    """
    Configure and register the Exponential distribution family.
    """

    if registry.contains(DistributionName.EXPONENTIAL):
        return

    EXPONENTIAL_DOC = """
    Exponential distribution.

    Parametrizations:
        - Rate: λ > 0 (base)
        - Scale: β = 1/λ > 0

    Probability density function:
        f(x) = λ e^(-λx) for x ≥ 0, 0 otherwise

    Cumulative distribution function:
        F(x) = 1 - e^(-λx) for x ≥ 0, 0 otherwise

    Moment-generating function:
        M(t) = (1 - t/λ)^(-1),  t < λ
    """

    def pdf(parameters: Parametrization, x: float) -> float:
        """
        Probability density function for the exponential distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with field:
            - lambda_: float (rate parameter)
        x : float
            Point at which to evaluate the density.

        Returns
        -------
        float
            Density at ``x``; 0 for negative ``x``.
        """
        parameters = cast(_Rate, parameters)
        lambda_ = parameters.lambda_
        if math.isnan(x):
            return math.nan
        if x < 0:
            return 0.0
        return lambda_ * safe_exp(-lambda_ * x)

    def cdf(parameters: Parametrization, x: float) -> float:
        parameters = cast(_Rate, parameters)
        if math.isnan(x):
            return math.nan
        if x <= 0:
            return 0.0
        return -math.expm1(-parameters.lambda_ * x)

    def mgf(parameters: Parametrization, t: float) -> float:
        parameters = cast(_Rate, parameters)
        lambda_ = parameters.lambda_
        if t >= lambda_:
            return math.nan
        return 1.0 / (1.0 - t / lambda_)

    def _bounds(_: Parametrization) -> Bounds:
        return Bounds(lower=0.0)

    Exponential = ParametricFamily(
        name=DistributionName.EXPONENTIAL,
        kind=Kind.CONTINUOUS,
        distr_parametrizations=["rate", "scale"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.MGF: mgf,
        },
        bounds_by_parametrization=_bounds,
    )
    Exponential.__doc__ = EXPONENTIAL_DOC

    @parametrization(family=Exponential, name="rate")
    class _Rate(Parametrization):
        """
        Rate parametrization of the exponential distribution.

        Parameters
        ----------
        lambda_ : float
            Rate parameter (λ) of the distribution.
        """

        lambda_: float

        @constraint(description="lambda_ > 0")
        def check_lambda_positive(self) -> bool:
            return self.lambda_ > 0

    @parametrization(family=Exponential, name="scale")
    class _Scale(Parametrization):
        """
        Scale parametrization of the exponential distribution.

        Parameters
        ----------
        beta : float
            Scale parameter (β), the mean of the distribution.
        """

        beta: float

        @constraint(description="beta > 0")
        def check_beta_positive(self) -> bool:
            return self.beta > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            return _Rate(lambda_=1.0 / self.beta)

    registry.register(Exponential)
