"""
Beta distribution family implementation.
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
from pysatl_moments.numerics.series import product, summation
from pysatl_moments.numerics.special import beta, factorial, safe_pow
from pysatl_moments.types import Bounds, CharacteristicName, DistributionName, Kind

if TYPE_CHECKING:
    from pysatl_moments.families.registry import DistributionRegistry

_MGF_TOLERANCE = 1e-16


def configure_beta_family(registry: DistributionRegistry) -> None:
    """
    Configure and register the Beta distribution family.

    The cdf is fitted from the pdf by adaptive quadrature.
    """

    if registry.contains(DistributionName.BETA):
        return

    BETA_DOC = """
    Beta distribution on the open unit interval.

    Probability density function:
        f(x) = x^(a-1) (1 - x)^(b-1) / B(a, b),  0 < x < 1

    Moment-generating function:
        M(t) = 1 + sum_{k>=1} prod_{r=0}^{k-1} (a + r) / (a + b + r) * t^k / k!
    """

    def pdf(parameters: Parametrization, x: float) -> float:
        """Density on ``(0, 1)``; the excluded endpoints carry no density."""
        parameters = cast(_Standard, parameters)
        a, b = parameters.a, parameters.b
        if math.isnan(x):
            return math.nan
        if x <= 0 or x >= 1:
            return 0.0
        return safe_pow(x, a - 1) * safe_pow(1 - x, b - 1) / beta(a, b)

    def mgf(parameters: Parametrization, t: float) -> float:
        parameters = cast(_Standard, parameters)
        a, b = parameters.a, parameters.b

        def ratio(r: int) -> float:
            return (a + r) / (a + b + r)

        def term(k: int) -> float:
            coefficient = product(ratio, 0, k - 1)
            if coefficient is None:
                return math.nan
            return coefficient * safe_pow(t, k) / factorial(k)

        tail = summation(term, 1, math.inf, tol=_MGF_TOLERANCE)
        if tail is None:
            return math.nan
        return 1.0 + tail

    def _bounds(_: Parametrization) -> Bounds:
        return Bounds(lower=0.0, upper=1.0, lower_inclusive=False, upper_inclusive=False)

    Beta = ParametricFamily(
        name=DistributionName.BETA,
        kind=Kind.CONTINUOUS,
        distr_parametrizations=["standard"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.MGF: mgf,
        },
        bounds_by_parametrization=_bounds,
    )
    Beta.__doc__ = BETA_DOC

    @parametrization(family=Beta, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of the beta distribution.

        Parameters
        ----------
        a : float
            First shape parameter (α).
        b : float
            Second shape parameter (β).
        """

        a: float
        b: float

        @constraint(description="a > 0")
        def check_a_positive(self) -> bool:
            return self.a > 0

        @constraint(description="b > 0")
        def check_b_positive(self) -> bool:
            return self.b > 0

    registry.register(Beta)
