"""
Logarithmic (log-series) distribution family implementation.
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


def configure_logarithmic_family(registry: DistributionRegistry) -> None:
    """
    Configure and register the Logarithmic distribution family.

    The cdf has no closed form here and is fitted by summing the mass function.
    """

    if registry.contains(DistributionName.LOGARITHMIC):
        return

    LOGARITHMIC_DOC = """
    Logarithmic distribution.

    Probability mass function:
        P(X = k) = -p^k / (k * ln(1 - p)),  k = 1, 2, ...

    Moment-generating function:
        M(t) = ln(1 - p * e^t) / ln(1 - p),  t < -ln(p)
    """

    def pmf(parameters: Parametrization, k: float) -> float:
        parameters = cast(_Standard, parameters)
        p = parameters.p
        if not is_int(k) or k < 1:
            return 0.0
        return -safe_pow(p, k) / (k * math.log1p(-p))

    def mgf(parameters: Parametrization, t: float) -> float:
        parameters = cast(_Standard, parameters)
        p = parameters.p
        argument = 1 - p * safe_exp(t)
        if argument <= 0:
            return math.nan
        return math.log(argument) / math.log1p(-p)

    def _bounds(_: Parametrization) -> Bounds:
        return Bounds(lower=1.0)

    Logarithmic = ParametricFamily(
        name=DistributionName.LOGARITHMIC,
        kind=Kind.DISCRETE,
        distr_parametrizations=["standard"],
        distr_characteristics={
            CharacteristicName.PDF: pmf,
            CharacteristicName.MGF: mgf,
        },
        bounds_by_parametrization=_bounds,
    )
    Logarithmic.__doc__ = LOGARITHMIC_DOC

    @parametrization(family=Logarithmic, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of the logarithmic distribution.

        Parameters
        ----------
        p : float
            Shape parameter in the open unit interval.
        """

        p: float

        @constraint(description="0 < p < 1")
        def check_p_open_unit(self) -> bool:
            return 0 < self.p < 1

    registry.register(Logarithmic)
