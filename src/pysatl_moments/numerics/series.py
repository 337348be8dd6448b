"""
Series Engine
=============

Summation and product operators over finite or infinite integer index ranges.

- Finite ranges are evaluated exactly over the closed range ``[a, b]``.
- Infinite ranges stop once the one-step-ahead change falls below a tolerance,
  and report non-convergence as ``None`` once the term cap is reached.

Terms evaluating to NaN are skipped in every mode, so isolated undefined
terms never poison the accumulated value.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import math
import operator
from typing import TYPE_CHECKING

from pysatl_moments.config import DEFAULT_NUMERICS_CONFIG

if TYPE_CHECKING:
    from collections.abc import Callable

    from pysatl_moments.config import NumericsConfig

    type Term = Callable[[int], float]
    type Combine = Callable[[float, float], float]

log = logging.getLogger(__name__)


def _finite(f: Term, a: float, b: float, combine: Combine, initial: float) -> float:
    total = initial
    for i in range(math.ceil(a), math.floor(b) + 1):
        term = float(f(i))
        if math.isnan(term):
            continue
        total = combine(total, term)
    return total


def _infinite(
    f: Term,
    start: int,
    direction: int,
    combine: Combine,
    initial: float,
    tol: float,
    max_terms: int,
) -> float | None:
    total = initial
    i = start
    for _ in range(max_terms):
        term = float(f(i))
        if not math.isnan(term):
            total = combine(total, term)
        if not math.isfinite(total):
            log.debug("Series diverged at index %d", i)
            return None

        upcoming = float(f(i + direction))
        if not math.isnan(upcoming):
            ahead = combine(total, upcoming)
            if abs(ahead - total) < tol:
                return ahead
        i += direction

    log.debug("Series did not converge within %d terms", max_terms)
    return None


def _evaluate(
    f: Term,
    a: float,
    b: float,
    combine: Combine,
    initial: float,
    tol: float | None,
    max_terms: int | None,
    config: NumericsConfig | None,
) -> float | None:
    cfg = DEFAULT_NUMERICS_CONFIG if config is None else config
    tol = cfg.series_tolerance if tol is None else tol
    max_terms = cfg.series_max_terms if max_terms is None else max_terms

    if math.isnan(a) or math.isnan(b):
        raise ValueError("Series bounds must not be NaN")
    if math.isinf(a) and math.isinf(b):
        raise ValueError("At most one series bound may be infinite")

    if math.isinf(b):
        if b < 0:
            return initial
        return _infinite(f, math.ceil(a), 1, combine, initial, tol, max_terms)
    if math.isinf(a):
        if a > 0:
            return initial
        return _infinite(f, math.floor(b), -1, combine, initial, tol, max_terms)
    return _finite(f, a, b, combine, initial)


def summation(
    f: Term,
    a: float,
    b: float,
    tol: float | None = None,
    max_terms: int | None = None,
    *,
    config: NumericsConfig | None = None,
) -> float | None:
    """
    Sum ``f(i)`` over integer indices ``a <= i <= b``.

    Parameters
    ----------
    f : Callable[[int], float]
        Term function; must return identical values for identical indices.
    a, b : float
        Index bounds. At most one of them may be infinite.
    tol : float, optional
        Stop threshold for infinite ranges (default from the configuration).
    max_terms : int, optional
        Hard term cap for infinite ranges (default from the configuration).
    config : NumericsConfig, optional
        Source of the defaults for ``tol`` and ``max_terms``.

    Returns
    -------
    float or None
        The sum, or ``None`` if an infinite series failed to converge.

    Raises
    ------
    ValueError
        If both bounds are infinite or a bound is NaN.

    Notes
    -----
    An empty finite range sums to 0.
    """
    return _evaluate(f, a, b, operator.add, 0.0, tol, max_terms, config)


def product(
    f: Term,
    a: float,
    b: float,
    tol: float | None = None,
    max_terms: int | None = None,
    *,
    config: NumericsConfig | None = None,
) -> float | None:
    """
    Multiply ``f(i)`` over integer indices ``a <= i <= b``.

    Mirrors :func:`summation`; an empty finite range yields 1.
    """
    return _evaluate(f, a, b, operator.mul, 1.0, tol, max_terms, config)


__all__ = [
    "summation",
    "product",
]
