"""
Numerical Calculus
==================

Finite-difference derivatives of arbitrary order with adaptive step
refinement, and Simpson's rule integration.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import math
from typing import TYPE_CHECKING

from pysatl_moments.config import DEFAULT_NUMERICS_CONFIG
from pysatl_moments.numerics.series import summation

if TYPE_CHECKING:
    from pysatl_moments.config import NumericsConfig
    from pysatl_moments.types import ScalarFunc

log = logging.getLogger(__name__)


def stencil(f: ScalarFunc, order: int, x: float, h: float) -> float:
    """
    Central finite-difference estimate of the ``order``-th derivative.

    Evaluates ``sum_i (-1)^i * C(order, i) * f(x + (order/2 - i) * h) / h^order``.
    """
    acc = 0.0
    for i in range(order + 1):
        weight = math.comb(order, i)
        if i % 2:
            weight = -weight
        acc += weight * f(x + (order / 2 - i) * h)
    return acc / h**order


def derivative(
    f: ScalarFunc,
    order: int,
    x: float,
    *,
    initial_step: float | None = None,
    max_iterations: int | None = None,
    config: NumericsConfig | None = None,
) -> float | None:
    """
    Estimate the ``order``-th derivative of ``f`` at ``x``.

    The step starts at ``initial_step`` and is halved on every iteration.
    Each iteration compares the stencil at ``h`` with the stencil at ``h/2``;
    as soon as that difference grows instead of shrinking, round-off has
    started to dominate and the previous iteration's estimate is returned.
    A non-finite estimate ends the refinement with the last good value; before
    any good value exists the step keeps shrinking instead.

    Parameters
    ----------
    f : ScalarFunc
        Function to differentiate; must be referentially transparent.
    order : int
        Derivative order, at least 1.
    x : float
        Evaluation point.
    initial_step : float, optional
        First step size (default from the configuration, 0.01).
    max_iterations : int, optional
        Hard cap on halvings (default from the configuration).
    config : NumericsConfig, optional
        Source of the defaults.

    Returns
    -------
    float or None
        The estimate, or ``None`` if refinement produced no finite estimate
        or did not settle within ``max_iterations``.

    Raises
    ------
    ValueError
        If ``order < 1``.
    """
    if order < 1:
        raise ValueError(f"Derivative order must be at least 1, got {order}")

    cfg = DEFAULT_NUMERICS_CONFIG if config is None else config
    h = cfg.derivative_initial_step if initial_step is None else initial_step
    max_iterations = cfg.derivative_max_iterations if max_iterations is None else max_iterations

    last_good: float | None = None
    prev_diff: float | None = None

    for _ in range(max_iterations):
        half = h / 2
        if half**order == 0.0:
            log.debug("Derivative step underflowed at x=%r", x)
            return last_good

        coarse = stencil(f, order, x, h)
        fine = stencil(f, order, x, half)
        if not (math.isfinite(coarse) and math.isfinite(fine)):
            if last_good is not None:
                return last_good
            # the stencil still straddles a singularity; shrink until it does not
            h = half
            continue

        diff = abs(coarse - fine)
        if prev_diff is not None and diff > prev_diff:
            return last_good
        if diff == 0.0:
            return coarse

        prev_diff = diff
        last_good = coarse
        h = half

    log.debug("Derivative did not settle within %d iterations at x=%r", max_iterations, x)
    return None


def integral(f: ScalarFunc, a: float, b: float) -> float:
    """
    Single-panel Simpson's rule ``(b - a) / 6 * (f(a) + 4 f((a + b) / 2) + f(b))``.

    A cheap approximation; pass narrow panels (or use
    :func:`composite_integral`) when accuracy matters.
    """
    return (b - a) / 6 * (f(a) + 4 * f((a + b) / 2) + f(b))


def composite_integral(f: ScalarFunc, a: float, b: float, panels: int) -> float:
    """Sum of single-panel Simpson integrals over ``panels`` equal sub-intervals."""
    if panels < 1:
        raise ValueError(f"At least one panel is required, got {panels}")
    width = (b - a) / panels
    total = summation(
        lambda i: integral(f, a + i * width, a + (i + 1) * width),
        0,
        panels - 1,
    )
    # finite ranges always produce a value
    assert total is not None
    return total


__all__ = [
    "stencil",
    "derivative",
    "integral",
    "composite_integral",
]
