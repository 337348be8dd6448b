"""
Gamma distribution family implementation.

Provides the shape-scale parametrization (base) and the shape-rate
parametrization.
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
from pysatl_moments.numerics.special import lngamma, regularized_ligamma, safe_exp, safe_pow
from pysatl_moments.types import Bounds, CharacteristicName, DistributionName, Kind

if TYPE_CHECKING:
    from pysatl_moments.families.registry import DistributionRegistry


def configure_gamma_family(registry: DistributionRegistry) -> None:
    """
    Configure and register the Gamma distribution family.
    """

    if registry.contains(DistributionName.GAMMA):
        return

    GAMMA_DOC = """
    Gamma distribution.

    Parametrizations:
        - shapeScale: k > 0, θ > 0 (base)
        - shapeRate: α = k, β = 1/θ

    Probability density function:
        f(x) = x^(k-1) e^(-x/θ) / (Γ(k) θ^k),  x ≥ 0

    Cumulative distribution function:
        F(x) = P(k, x/θ), the regularized lower incomplete gamma

    Moment-generating function:
        M(t) = (1 - θt)^(-k),  t < 1/θ
    """

    def pdf(parameters: Parametrization, x: float) -> float:
        """Density evaluated in log space, so large shapes do not overflow."""
        parameters = cast(_ShapeScale, parameters)
        k, theta = parameters.k, parameters.theta
        if math.isnan(x):
            return math.nan
        if x < 0:
            return 0.0
        if x == 0:
            if k < 1:
                return math.inf
            return 1.0 / theta if k == 1 else 0.0
        log_density = (k - 1) * math.log(x) - x / theta - lngamma(k) - k * math.log(theta)
        return safe_exp(log_density)

    def cdf(parameters: Parametrization, x: float) -> float:
        parameters = cast(_ShapeScale, parameters)
        if math.isnan(x):
            return math.nan
        if x <= 0:
            return 0.0
        return regularized_ligamma(parameters.k, x / parameters.theta)

    def mgf(parameters: Parametrization, t: float) -> float:
        parameters = cast(_ShapeScale, parameters)
        base = 1 - parameters.theta * t
        if base <= 0:
            return math.nan
        return safe_pow(base, -parameters.k)

    def _bounds(_: Parametrization) -> Bounds:
        return Bounds(lower=0.0)

    Gamma = ParametricFamily(
        name=DistributionName.GAMMA,
        kind=Kind.CONTINUOUS,
        distr_parametrizations=["shapeScale", "shapeRate"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.MGF: mgf,
        },
        bounds_by_parametrization=_bounds,
    )
    Gamma.__doc__ = GAMMA_DOC

    @parametrization(family=Gamma, name="shapeScale")
    class _ShapeScale(Parametrization):
        """
        Shape-scale parametrization of the gamma distribution.

        Parameters
        ----------
        k : float
            Shape parameter.
        theta : float
            Scale parameter.
        """

        k: float
        theta: float

        @constraint(description="k > 0")
        def check_k_positive(self) -> bool:
            return self.k > 0

        @constraint(description="theta > 0")
        def check_theta_positive(self) -> bool:
            return self.theta > 0

    @parametrization(family=Gamma, name="shapeRate")
    class _ShapeRate(Parametrization):
        """
        Shape-rate parametrization of the gamma distribution.

        Parameters
        ----------
        alpha : float
            Shape parameter.
        beta : float
            Rate parameter, the inverse of the scale.
        """

        alpha: float
        beta: float

        @constraint(description="alpha > 0")
        def check_alpha_positive(self) -> bool:
            return self.alpha > 0

        @constraint(description="beta > 0")
        def check_beta_positive(self) -> bool:
            return self.beta > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            return _ShapeScale(k=self.alpha, theta=1.0 / self.beta)

    registry.register(Gamma)
