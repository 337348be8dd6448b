"""
Cauchy distribution family implementation.

The Cauchy distribution has no moments and no moment-generating function;
the family exposes an all-undefined moment set instead.
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
from pysatl_moments.types import CharacteristicName, DistributionName, Kind, MomentSet

if TYPE_CHECKING:
    from pysatl_moments.families.registry import DistributionRegistry


def configure_cauchy_family(registry: DistributionRegistry) -> None:
    """
    Configure and register the Cauchy distribution family.
    """

    if registry.contains(DistributionName.CAUCHY):
        return

    CAUCHY_DOC = """
    Cauchy distribution.

    Probability density function:
        f(x) = 1 / (πγ (1 + z²)),  z = (x - x0) / γ

    Cumulative distribution function:
        F(x) = 1/2 + atan(z) / π
    """

    def pdf(parameters: Parametrization, x: float) -> float:
        parameters = cast(_Standard, parameters)
        z = (x - parameters.x0) / parameters.gamma
        return 1.0 / (math.pi * parameters.gamma * (1 + z * z))

    def cdf(parameters: Parametrization, x: float) -> float:
        parameters = cast(_Standard, parameters)
        z = (x - parameters.x0) / parameters.gamma
        return 0.5 + math.atan(z) / math.pi

    def _moments(_: Parametrization) -> MomentSet:
        return MomentSet.undefined()

    Cauchy = ParametricFamily(
        name=DistributionName.CAUCHY,
        kind=Kind.CONTINUOUS,
        distr_parametrizations=["standard"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
        },
        moments_by_parametrization=_moments,
    )
    Cauchy.__doc__ = CAUCHY_DOC

    @parametrization(family=Cauchy, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of the Cauchy distribution.

        Parameters
        ----------
        x0 : float
            Location parameter (median).
        gamma : float
            Scale parameter (half width at half maximum).
        """

        x0: float
        gamma: float

        @constraint(description="gamma > 0")
        def check_gamma_positive(self) -> bool:
            return self.gamma > 0

    registry.register(Cauchy)
