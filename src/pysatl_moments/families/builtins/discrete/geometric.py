"""
Geometric distribution family implementation.

Number of failures before the first success, supported on ``k = 0, 1, 2, ...``.
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
from pysatl_moments.numerics.special import is_int, safe_exp, safe_pow
from pysatl_moments.types import Bounds, CharacteristicName, DistributionName, Kind

if TYPE_CHECKING:
    from pysatl_moments.families.registry import DistributionRegistry


def configure_geometric_family(registry: DistributionRegistry) -> None:
    """
    Configure and register the Geometric distribution family.
    """

    if registry.contains(DistributionName.GEOMETRIC):
        return

    GEOMETRIC_DOC = """
    Geometric distribution (failures before the first success).

    Probability mass function:
        P(X = k) = (1 - p)^k * p,  k = 0, 1, 2, ...

    Cumulative distribution function:
        F(k) = 1 - (1 - p)^(floor(k) + 1)

    Moment-generating function:
        M(t) = p / (1 - (1 - p) * e^t),  t < -ln(1 - p)
    """

    def pmf(parameters: Parametrization, k: float) -> float:
        parameters = cast(_Standard, parameters)
        if not is_int(k) or k < 0:
            return 0.0
        return safe_pow(1 - parameters.p, k) * parameters.p

    def cdf(parameters: Parametrization, k: float) -> float:
        parameters = cast(_Standard, parameters)
        if math.isnan(k):
            return math.nan
        if k < 0:
            return 0.0
        if math.isinf(k):
            return 1.0
        return 1.0 - safe_pow(1 - parameters.p, math.floor(k) + 1)

    def mgf(parameters: Parametrization, t: float) -> float:
        parameters = cast(_Standard, parameters)
        p = parameters.p
        denominator = 1 - (1 - p) * safe_exp(t)
        if denominator <= 0:
            return math.nan
        return p / denominator

    def _bounds(_: Parametrization) -> Bounds:
        return Bounds(lower=0.0)

    Geometric = ParametricFamily(
        name=DistributionName.GEOMETRIC,
        kind=Kind.DISCRETE,
        distr_parametrizations=["standard"],
        distr_characteristics={
            CharacteristicName.PDF: pmf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.MGF: mgf,
        },
        bounds_by_parametrization=_bounds,
    )
    Geometric.__doc__ = GEOMETRIC_DOC

    @parametrization(family=Geometric, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of the geometric distribution.

        Parameters
        ----------
        p : float
            Success probability of a single trial.
        """

        p: float

        @constraint(description="0 < p <= 1")
        def check_p_probability(self) -> bool:
            return 0 < self.p <= 1

    registry.register(Geometric)
