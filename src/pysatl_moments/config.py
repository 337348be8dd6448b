"""
Numerical Configuration
=======================

Tolerances, step sizes and hard iteration caps used by the numerical engines.

Every constant here was chosen empirically; none of them is load-bearing
mathematically, so all of them can be overridden per call by passing a
:class:`NumericsConfig` (or, for the low-level engines, explicit keywords).
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass, fields


@dataclass(frozen=True, slots=True)
class NumericsConfig:
    """
    Tunable numerical settings.

    Parameters
    ----------
    series_tolerance : float
        Infinite series stop once the one-step-ahead change drops below this.
    series_max_terms : int
        Hard cap on evaluated terms of an infinite series.
    derivative_initial_step : float
        First finite-difference step; halved on each refinement.
    derivative_max_iterations : int
        Hard cap on step halvings.
    moment_precision : int
        Decimal places moments are rounded to.
    density_epsilon : float
        Density walk stops once the density decays to this value.
    walk_max_steps : int
        Hard cap on steps per density walk direction.
    step_divisor : float
        Continuous walk step is ``sqrt(variance) / step_divisor``.
    fallback_step : float
        Walk step used when the variance-based one is unusable.
    max_step : float
        Variance-based steps larger than this are replaced by ``fallback_step``.
    max_start : float
        Walks start at 0 when ``|mean|`` exceeds this.
    cdf_subintervals : int
        Subinterval limit of the adaptive quadrature behind fitted continuous
        CDFs.
    """

    series_tolerance: float = 1e-12
    series_max_terms: int = 1_000_000
    derivative_initial_step: float = 0.01
    derivative_max_iterations: int = 99_999
    moment_precision: int = 3
    density_epsilon: float = 1e-5
    walk_max_steps: int = 99_999
    step_divisor: float = 100.0
    fallback_step: float = 0.01
    max_step: float = 1e6
    max_start: float = 1e12
    cdf_subintervals: int = 200

    def __post_init__(self) -> None:
        positive = (
            "series_tolerance",
            "derivative_initial_step",
            "density_epsilon",
            "step_divisor",
            "fallback_step",
            "max_step",
            "max_start",
        )
        at_least_one = (
            "series_max_terms",
            "derivative_max_iterations",
            "walk_max_steps",
            "cdf_subintervals",
        )
        for name in positive:
            if not getattr(self, name) > 0:
                raise ValueError(f'Constraint "{name} > 0" does not hold')
        for name in at_least_one:
            if getattr(self, name) < 1:
                raise ValueError(f'Constraint "{name} >= 1" does not hold')
        if self.moment_precision < 0:
            raise ValueError('Constraint "moment_precision >= 0" does not hold')

    def as_dict(self) -> dict[str, float | int]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


DEFAULT_NUMERICS_CONFIG = NumericsConfig()
"""Configuration used when callers do not pass one."""


__all__ = [
    "NumericsConfig",
    "DEFAULT_NUMERICS_CONFIG",
]
