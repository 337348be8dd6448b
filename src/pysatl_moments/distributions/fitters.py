"""
Fitted Conversions
==================

Numerical conversions used when a family has no closed-form CDF:

- ``fit_pdf_to_cdf_1C`` — integrates the family's own density from the lower
  bound of the support with adaptive quadrature.
- ``fit_pdf_to_cdf_1D`` — accumulates the family's own mass function over the
  integer lattice up to ``floor(x)``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, cast

import numpy as np
from mypy_extensions import KwArg
from scipy import integrate as _sp_integrate

from pysatl_moments.config import DEFAULT_NUMERICS_CONFIG
from pysatl_moments.distributions.computation import FittedComputationMethod
from pysatl_moments.numerics.series import summation
from pysatl_moments.types import CharacteristicName

if TYPE_CHECKING:
    from pysatl_moments.config import NumericsConfig
    from pysatl_moments.distributions.distribution import Distribution
    from pysatl_moments.types import GenericCharacteristicName, ScalarFunc


def _resolve(distribution: Distribution, name: GenericCharacteristicName) -> ScalarFunc:
    """
    Resolve a scalar characteristic from the distribution.

    Raises
    ------
    RuntimeError
        If the distribution does not provide a computation strategy.
    """
    try:
        fn = distribution.query_method(name)
    except AttributeError as e:
        raise RuntimeError(
            "Distribution must provide computation_strategy.query_method(name, distribution)."
        ) from e

    def _wrap(x: float, **kwargs: Any) -> float:
        return float(fn(x, **kwargs))

    return _wrap


def fit_pdf_to_cdf_1C(
    distribution: Distribution, /, *, config: NumericsConfig | None = None, **_: Any
) -> FittedComputationMethod[float, float]:
    """
    Fit ``cdf`` from the distribution's own ``pdf`` via numerical integration.

    The density is integrated over ``[lower, x]`` with
    :func:`scipy.integrate.quad`, which copes with integrable singularities at
    the endpoints and with supports extending to ``-inf``.

    Parameters
    ----------
    distribution : Distribution
        Continuous distribution providing a ``pdf``.
    config : NumericsConfig, optional
        Source of the quadrature subinterval limit.

    Returns
    -------
    FittedComputationMethod[float, float]
        Fitted ``pdf -> cdf`` conversion.
    """
    cfg = DEFAULT_NUMERICS_CONFIG if config is None else config
    pdf_func = _resolve(distribution, CharacteristicName.PDF)
    bounds = distribution.bounds
    lower, upper = bounds.lower, bounds.upper

    def _cdf(x: float, **options: Any) -> float:
        if math.isnan(x):
            return math.nan
        if x <= lower:
            return 0.0
        if x >= upper:
            return 1.0

        val, _ = _sp_integrate.quad(
            lambda t: float(pdf_func(t, **options)), lower, x, limit=cfg.cdf_subintervals
        )
        return float(np.clip(val, 0.0, 1.0))

    cdf_func = cast(Callable[[float, KwArg(Any)], float], _cdf)
    return FittedComputationMethod[float, float](
        target=CharacteristicName.CDF, sources=[CharacteristicName.PDF], func=cdf_func
    )


def fit_pdf_to_cdf_1D(
    distribution: Distribution, /, **_: Any
) -> FittedComputationMethod[float, float]:
    """
    Build ``cdf`` from the mass function by a prefix sum over the lattice.

    The sum runs over the integers from the first support point to
    ``floor(x)``; supports unbounded below are not supported.

    Raises
    ------
    RuntimeError
        If the support is not bounded below.
    """
    bounds = distribution.bounds
    if not bounds.is_bounded_below:
        raise RuntimeError(
            "pmf->cdf requires a support bounded below. Provide an analytical cdf instead."
        )

    pmf_func = _resolve(distribution, CharacteristicName.PDF)
    first = math.ceil(bounds.lower)
    if not bounds.lower_inclusive and first == bounds.lower:
        first += 1

    def _cdf(x: float, **kwargs: Any) -> float:
        if math.isnan(x):
            return math.nan
        if x < first:
            return 0.0
        if math.isinf(x):
            return 1.0
        last = math.floor(min(x, bounds.upper))
        total = summation(lambda k: pmf_func(float(k), **kwargs), first, last)
        return float(np.clip(0.0 if total is None else total, 0.0, 1.0))

    cdf_func = cast(Callable[[float, KwArg(Any)], float], _cdf)
    return FittedComputationMethod[float, float](
        target=CharacteristicName.CDF, sources=[CharacteristicName.PDF], func=cdf_func
    )


__all__ = [
    "fit_pdf_to_cdf_1C",
    "fit_pdf_to_cdf_1D",
]
