"""
Rayleigh distribution family implementation.

Moments are given in closed form; the Rayleigh mgf involves the error
function and is not differentiated numerically.
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
from pysatl_moments.types import (
    Bounds,
    CharacteristicName,
    DistributionName,
    Kind,
    MomentSet,
)

if TYPE_CHECKING:
    from pysatl_moments.families.registry import DistributionRegistry

_SKEWNESS = 2 * math.sqrt(math.pi) * (math.pi - 3) / (4 - math.pi) ** 1.5
_EXCESS_KURTOSIS = -(6 * math.pi**2 - 24 * math.pi + 16) / (4 - math.pi) ** 2


def configure_rayleigh_family(registry: DistributionRegistry) -> None:
    """
    Configure and register the Rayleigh distribution family.
    """

    if registry.contains(DistributionName.RAYLEIGH):
        return

    RAYLEIGH_DOC = """
    Rayleigh distribution.

    Probability density function:
        f(x) = x / σ² * exp(-x² / (2σ²)),  x ≥ 0

    Cumulative distribution function:
        F(x) = 1 - exp(-x² / (2σ²))
    """

    def pdf(parameters: Parametrization, x: float) -> float:
        parameters = cast(_Standard, parameters)
        sigma2 = parameters.sigma**2
        if math.isnan(x):
            return math.nan
        if x < 0:
            return 0.0
        return x / sigma2 * safe_exp(-(x * x) / (2 * sigma2))

    def cdf(parameters: Parametrization, x: float) -> float:
        parameters = cast(_Standard, parameters)
        if math.isnan(x):
            return math.nan
        if x <= 0:
            return 0.0
        if math.isinf(x):
            return 1.0
        return -math.expm1(-(x * x) / (2 * parameters.sigma**2))

    def _moments(parameters: Parametrization) -> MomentSet:
        parameters = cast(_Standard, parameters)
        sigma = parameters.sigma
        return MomentSet(
            mean=sigma * math.sqrt(math.pi / 2),
            variance=(4 - math.pi) * sigma**2 / 2,
            skewness=_SKEWNESS,
            kurtosis=_EXCESS_KURTOSIS,
        )

    def _bounds(_: Parametrization) -> Bounds:
        return Bounds(lower=0.0)

    Rayleigh = ParametricFamily(
        name=DistributionName.RAYLEIGH,
        kind=Kind.CONTINUOUS,
        distr_parametrizations=["standard"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
        },
        bounds_by_parametrization=_bounds,
        moments_by_parametrization=_moments,
    )
    Rayleigh.__doc__ = RAYLEIGH_DOC

    @parametrization(family=Rayleigh, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of the Rayleigh distribution.

        Parameters
        ----------
        sigma : float
            Scale parameter.
        """

        sigma: float

        @constraint(description="sigma > 0")
        def check_sigma_positive(self) -> bool:
            return self.sigma > 0

    registry.register(Rayleigh)
