"""
Binomial distribution family implementation.

Number of successes in ``n`` independent trials with success probability ``p``.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, cast

from pysatl_moments.families.parametric_family import ParametricFamily
from pysatl_moments.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_moments.numerics.special import choose, is_int, safe_exp, safe_pow
from pysatl_moments.types import Bounds, CharacteristicName, DistributionName, Kind

if TYPE_CHECKING:
    from pysatl_moments.families.registry import DistributionRegistry


def configure_binomial_family(registry: DistributionRegistry) -> None:
    """
    Configure and register the Binomial distribution family.
    """

    if registry.contains(DistributionName.BINOMIAL):
        return

    BINOMIAL_DOC = """
    Binomial distribution.

    Probability mass function:
        P(X = k) = C(n, k) * p^k * (1 - p)^(n - k),  k = 0, 1, ..., n

    Moment-generating function:
        M(t) = (1 - p + p * e^t)^n
    """

    def pmf(parameters: Parametrization, k: float) -> float:
        """Probability of exactly ``k`` successes; 0 off the support."""
        parameters = cast(_Standard, parameters)
        n, p = parameters.n, parameters.p
        if not is_int(k) or k < 0 or k > n:
            return 0.0
        return choose(n, k) * safe_pow(p, k) * safe_pow(1 - p, n - k)

    def mgf(parameters: Parametrization, t: float) -> float:
        parameters = cast(_Standard, parameters)
        n, p = parameters.n, parameters.p
        return safe_pow(1 - p + p * safe_exp(t), n)

    def _bounds(parameters: Parametrization) -> Bounds:
        parameters = cast(_Standard, parameters)
        return Bounds(lower=0.0, upper=float(parameters.n))

    Binomial = ParametricFamily(
        name=DistributionName.BINOMIAL,
        kind=Kind.DISCRETE,
        distr_parametrizations=["standard"],
        distr_characteristics={
            CharacteristicName.PDF: pmf,
            CharacteristicName.MGF: mgf,
        },
        bounds_by_parametrization=_bounds,
    )
    Binomial.__doc__ = BINOMIAL_DOC

    @parametrization(family=Binomial, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of the binomial distribution.

        Parameters
        ----------
        p : float
            Success probability of a single trial.
        n : int
            Number of trials.
        """

        p: float
        n: int

        @constraint(description="0 <= p <= 1")
        def check_p_probability(self) -> bool:
            return 0 <= self.p <= 1

        @constraint(description="n is a non-negative integer")
        def check_n_non_negative_integer(self) -> bool:
            return is_int(self.n) and self.n >= 0

    registry.register(Binomial)
