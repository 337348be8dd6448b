"""
Gaussian (normal) distribution family implementation.

Provides the mean-standard deviation parametrization (base) and the
mean-precision parametrization.
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
from pysatl_moments.numerics.special import erf, safe_exp
from pysatl_moments.types import CharacteristicName, DistributionName, Kind

if TYPE_CHECKING:
    from pysatl_moments.families.registry import DistributionRegistry


def configure_gaussian_family(registry: DistributionRegistry) -> None:
    """
    Configure and register the Gaussian distribution family.

    The support is the whole real line, so no bounds resolver is given.
    """

    if registry.contains(DistributionName.GAUSSIAN):
        return

    GAUSSIAN_DOC = """
    Gaussian (normal) distribution.

    Parametrizations:
        - meanStd: μ, σ > 0 (base)
        - meanPrec: μ, τ = 1/σ² > 0

    Probability density function:
        f(x) = 1 / (σ sqrt(2π)) * exp(-(x - μ)² / (2σ²))

    Cumulative distribution function:
        F(x) = (1 + erf((x - μ) / (σ sqrt(2)))) / 2

    Moment-generating function:
        M(t) = exp(μt + σ²t²/2)
    """

    def pdf(parameters: Parametrization, x: float) -> float:
        parameters = cast(_MeanStd, parameters)
        mu, sigma = parameters.mu, parameters.sigma
        z = (x - mu) / sigma
        return safe_exp(-0.5 * z * z) / (sigma * math.sqrt(2 * math.pi))

    def cdf(parameters: Parametrization, x: float) -> float:
        parameters = cast(_MeanStd, parameters)
        if math.isnan(x):
            return math.nan
        if math.isinf(x):
            return 1.0 if x > 0 else 0.0
        z = (x - parameters.mu) / (parameters.sigma * math.sqrt(2))
        return 0.5 * (1 + erf(z))

    def mgf(parameters: Parametrization, t: float) -> float:
        parameters = cast(_MeanStd, parameters)
        mu, sigma = parameters.mu, parameters.sigma
        return safe_exp(mu * t + 0.5 * sigma**2 * t**2)

    Gaussian = ParametricFamily(
        name=DistributionName.GAUSSIAN,
        kind=Kind.CONTINUOUS,
        distr_parametrizations=["meanStd", "meanPrec"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.MGF: mgf,
        },
    )
    Gaussian.__doc__ = GAUSSIAN_DOC

    @parametrization(family=Gaussian, name="meanStd")
    class _MeanStd(Parametrization):
        """
        Standard parametrization of the Gaussian distribution.

        Parameters
        ----------
        mu : float
            Mean of the distribution.
        sigma : float
            Standard deviation of the distribution.
        """

        mu: float
        sigma: float

        @constraint(description="sigma > 0")
        def check_sigma_positive(self) -> bool:
            return self.sigma > 0

    @parametrization(family=Gaussian, name="meanPrec")
    class _MeanPrec(Parametrization):
        """
        Mean-precision parametrization of the Gaussian distribution.

        Parameters
        ----------
        mu : float
            Mean of the distribution.
        tau : float
            Precision, the inverse of the variance.
        """

        mu: float
        tau: float

        @constraint(description="tau > 0")
        def check_tau_positive(self) -> bool:
            return self.tau > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            return _MeanStd(mu=self.mu, sigma=1.0 / math.sqrt(self.tau))

    registry.register(Gaussian)
