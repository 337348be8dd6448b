"""
Moment Extraction
=================

Mean, variance, skewness and excess kurtosis derived from a
moment-generating function ``m(t)`` by numerical differentiation.

The mean is ``m'(t)``; the central moments are the derivatives at ``t`` of
the mgf re-centred on that mean, all taken with
:func:`pysatl_moments.numerics.calculus.derivative`. Results are rounded to
``config.moment_precision`` decimals only once, at the very end. Any
derivative that fails to converge, and any degenerate combination
(non-positive variance, NaN, infinity), is reported as ``None``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import math
from typing import TYPE_CHECKING

from pysatl_moments.config import DEFAULT_NUMERICS_CONFIG
from pysatl_moments.numerics.calculus import derivative
from pysatl_moments.types import MomentSet

if TYPE_CHECKING:
    from pysatl_moments.config import NumericsConfig
    from pysatl_moments.types import ScalarFunc

log = logging.getLogger(__name__)


def _finite(value: float | None) -> float | None:
    if value is None or not math.isfinite(value):
        return None
    return value


def _round(value: float | None, precision: int | None) -> float | None:
    value = _finite(value)
    if value is None or precision is None:
        return value
    # normalise -0.0
    return round(value, precision) + 0.0


def _centred(f: ScalarFunc, t: float, mean: float) -> ScalarFunc:
    """
    ``exp(-mean (s - t)) (m(s) - m(t) + 1)``.

    Its derivatives at ``t`` are the central moments, with no raw moment
    of size ``mean^k`` to cancel.
    """
    base = f(t)

    def _g(s: float) -> float:
        try:
            scale = math.exp(-mean * (s - t))
        except OverflowError:
            return math.inf
        return scale * (f(s) - base + 1.0)

    return _g


def _central(
    f: ScalarFunc, t: float, order: int, cfg: NumericsConfig, precision: int | None
) -> tuple[float | None, ...]:
    """
    Unrounded ``(mean, variance, skewness, kurtosis)`` up to ``order``.

    A variance that rounds to zero at ``precision`` is degenerate: a slightly
    negative one is reported as 0 and the shape moments stay undefined.
    Without a ``precision`` only a strictly positive variance is usable.
    """
    mean = _finite(derivative(f, 1, t, config=cfg))
    if mean is None or order == 1:
        return mean, None, None, None

    g = _centred(f, t, mean)
    mu2, mu3, mu4 = (
        _finite(derivative(g, k, t, config=cfg)) if k <= order else None for k in (2, 3, 4)
    )

    variance = mu2
    if variance is not None and variance < 0:
        if precision is not None and round(variance, precision) == 0:
            variance = 0.0
        else:
            log.debug("Negative variance %r treated as undefined", variance)
            variance = None

    if variance is None:
        return mean, None, None, None
    if (variance if precision is None else round(variance, precision)) <= 0:
        return mean, variance, None, None

    skewness = None if mu3 is None else _finite(mu3 / variance**1.5)
    kurtosis = None if mu4 is None else _finite(mu4 / variance**2 - 3)
    return mean, variance, skewness, kurtosis


def _extract(f: ScalarFunc, t: float, order: int, cfg: NumericsConfig) -> float | None:
    central = _central(f, t, order, cfg, cfg.moment_precision)
    return _round(central[order - 1], cfg.moment_precision)


def mean(f: ScalarFunc, t: float = 0.0, *, config: NumericsConfig | None = None) -> float | None:
    """Mean ``m'(t)`` of the mgf ``f``, rounded; ``None`` if unavailable."""
    cfg = DEFAULT_NUMERICS_CONFIG if config is None else config
    return _extract(f, t, 1, cfg)


def variance(
    f: ScalarFunc, t: float = 0.0, *, config: NumericsConfig | None = None
) -> float | None:
    """Variance ``E[(X - mean)^2]`` of the mgf ``f``, rounded; ``None`` if unavailable."""
    cfg = DEFAULT_NUMERICS_CONFIG if config is None else config
    return _extract(f, t, 2, cfg)


def skewness(
    f: ScalarFunc, t: float = 0.0, *, config: NumericsConfig | None = None
) -> float | None:
    """
    Skewness ``mu_3 / var^1.5`` of the mgf ``f``.

    ``None`` when the variance rounds to zero or is undefined.
    """
    cfg = DEFAULT_NUMERICS_CONFIG if config is None else config
    return _extract(f, t, 3, cfg)


def kurtosis(
    f: ScalarFunc, t: float = 0.0, *, config: NumericsConfig | None = None
) -> float | None:
    """
    Excess kurtosis of the mgf ``f``.

    The central fourth moment ``mu_4`` divided by ``var^2``, minus 3.
    ``None`` when the variance rounds to zero or is undefined.
    """
    cfg = DEFAULT_NUMERICS_CONFIG if config is None else config
    return _extract(f, t, 4, cfg)


def compute_moments(
    source: ScalarFunc | MomentSet,
    t: float = 0.0,
    *,
    config: NumericsConfig | None = None,
    rounded: bool = True,
) -> MomentSet:
    """
    Extract all four moments at once.

    Parameters
    ----------
    source : ScalarFunc or MomentSet
        A moment-generating function, or a closed-form moment set which is
        returned unchanged.
    t : float, default 0.0
        Point at which the mgf derivatives are taken.
    config : NumericsConfig, optional
        Derivative settings and rounding precision.
    rounded : bool, default True
        Round to ``config.moment_precision``. Unrounded moments treat only a
        strictly positive variance as usable.

    Returns
    -------
    MomentSet
        Moments, ``None`` for those that are unavailable.
    """
    if isinstance(source, MomentSet):
        return source

    cfg = DEFAULT_NUMERICS_CONFIG if config is None else config
    precision = cfg.moment_precision if rounded else None
    central = _central(source, t, 4, cfg, precision)
    m, v, s, k = (_round(value, precision) for value in central)
    return MomentSet(mean=m, variance=v, skewness=s, kurtosis=k)


__all__ = [
    "mean",
    "variance",
    "skewness",
    "kurtosis",
    "compute_moments",
]
