"""
Gumbel (type I extreme value) distribution family implementation.
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
from pysatl_moments.numerics.special import gamma, safe_exp
from pysatl_moments.types import CharacteristicName, DistributionName, Kind

if TYPE_CHECKING:
    from pysatl_moments.families.registry import DistributionRegistry


def configure_gumbel_family(registry: DistributionRegistry) -> None:
    """
    Configure and register the Gumbel distribution family.
    """

    if registry.contains(DistributionName.GUMBEL):
        return

    GUMBEL_DOC = """
    Gumbel distribution (maximum).

    Probability density function:
        f(x) = 1/β * exp(-(z + e^(-z))),  z = (x - μ) / β

    Cumulative distribution function:
        F(x) = exp(-e^(-z))

    Moment-generating function:
        M(t) = Γ(1 - βt) e^(μt),  t < 1/β
    """

    def pdf(parameters: Parametrization, x: float) -> float:
        parameters = cast(_Standard, parameters)
        z = (x - parameters.mu) / parameters.beta
        return safe_exp(-(z + safe_exp(-z))) / parameters.beta

    def cdf(parameters: Parametrization, x: float) -> float:
        parameters = cast(_Standard, parameters)
        z = (x - parameters.mu) / parameters.beta
        return safe_exp(-safe_exp(-z))

    def mgf(parameters: Parametrization, t: float) -> float:
        parameters = cast(_Standard, parameters)
        mu, beta = parameters.mu, parameters.beta
        if beta * t >= 1:
            return math.nan
        return gamma(1 - beta * t) * safe_exp(mu * t)

    Gumbel = ParametricFamily(
        name=DistributionName.GUMBEL,
        kind=Kind.CONTINUOUS,
        distr_parametrizations=["standard"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.MGF: mgf,
        },
    )
    Gumbel.__doc__ = GUMBEL_DOC

    @parametrization(family=Gumbel, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of the Gumbel distribution.

        Parameters
        ----------
        mu : float
            Location parameter (mode).
        beta : float
            Scale parameter.
        """

        mu: float
        beta: float

        @constraint(description="beta > 0")
        def check_beta_positive(self) -> bool:
            return self.beta > 0

    registry.register(Gumbel)
