"""
Density Sampling
================

Tabulation of a distribution's density for plotting.

- :class:`SampleSeries` — immutable, array-backed ``(x, y)`` table strictly
  increasing in ``x``.
- :class:`DensityFunctions` — a density table and the cumulative table
  derived from it.
- :func:`sample_density` / :func:`build_df` — walk outward from the
  distribution's mean until the density decays, then accumulate a Riemann-sum
  CDF over the same grid.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple

import numpy as np

from pysatl_moments.config import DEFAULT_NUMERICS_CONFIG
from pysatl_moments.types import Kind

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping
    from typing import Any

    import numpy.typing as npt

    from pysatl_moments.config import NumericsConfig
    from pysatl_moments.families.distribution import ParametricFamilyDistribution
    from pysatl_moments.families.parametrizations import Parametrization
    from pysatl_moments.families.registry import DistributionRegistry
    from pysatl_moments.types import Bounds, MomentSet, ScalarFunc

log = logging.getLogger(__name__)


class SamplePoint(NamedTuple):
    x: float
    y: float


class SampleSeries:
    """
    Immutable table of ``(x, y)`` points ordered by strictly increasing ``x``.

    Parameters
    ----------
    data : numpy.ndarray
        Floating-point array of shape ``(n, 2)``; column 0 holds ``x`` and
        column 1 holds ``y``. The data is copied and the copy made read-only.

    Raises
    ------
    ValueError
        If data is not of shape ``(n, 2)`` or ``x`` is not strictly increasing.
    """

    __slots__ = ("_data",)

    def __init__(self, data: npt.NDArray[np.floating[Any]]) -> None:
        arr = np.array(data, dtype=np.float64)
        if arr.size == 0:
            arr = arr.reshape(0, 2)
        if arr.ndim != 2 or arr.shape[1] != 2:
            raise ValueError("SampleSeries expects a 2D array of shape (n, 2).")
        if np.any(np.diff(arr[:, 0]) <= 0):
            raise ValueError("SampleSeries x values must be strictly increasing.")
        arr.setflags(write=False)
        self._data = arr

    @classmethod
    def from_columns(cls, x: npt.ArrayLike, y: npt.ArrayLike) -> SampleSeries:
        """Build a series from separate ``x`` and ``y`` columns."""
        xs = np.asarray(x, dtype=np.float64)
        ys = np.asarray(y, dtype=np.float64)
        return cls(np.column_stack((xs, ys)))

    def __len__(self) -> int:
        """Return the number of points."""
        return int(self._data.shape[0])

    def __iter__(self) -> Iterator[SamplePoint]:
        for x, y in self._data:
            yield SamplePoint(float(x), float(y))

    def __repr__(self) -> str:
        return f"SampleSeries(n={len(self)})"

    @property
    def x(self) -> npt.NDArray[np.float64]:
        return self._data[:, 0]

    @property
    def y(self) -> npt.NDArray[np.float64]:
        return self._data[:, 1]

    @property
    def array(self) -> npt.NDArray[np.float64]:
        """Return the (read-only) backing array."""
        return self._data

    @property
    def shape(self) -> tuple[int, ...]:
        n, d = self._data.shape
        return int(n), int(d)


@dataclass(frozen=True, slots=True)
class DensityFunctions:
    """
    Density table and its cumulative counterpart over one grid.

    Parameters
    ----------
    pdf : SampleSeries
        Density (or mass) values above the density epsilon.
    cdf : SampleSeries
        Running sum of ``y * increment`` over ``pdf``.
    increment : float
        Grid step used for the walk.
    """

    pdf: SampleSeries
    cdf: SampleSeries
    increment: float


def _start(
    moments: MomentSet, kind: Kind, bounds: Bounds, inc: float, cfg: NumericsConfig
) -> float:
    x0 = moments.mean
    if x0 is None or not math.isfinite(x0) or abs(x0) > cfg.max_start:
        x0 = 0.0
    if kind == Kind.DISCRETE:
        x0 = float(round(x0))

    if x0 < bounds.lower:
        x0 = math.ceil(bounds.lower) if kind == Kind.DISCRETE else bounds.lower
        if not bounds.contains(x0):
            x0 += inc
    elif x0 > bounds.upper:
        x0 = math.floor(bounds.upper) if kind == Kind.DISCRETE else bounds.upper
        if not bounds.contains(x0):
            x0 -= inc
    return float(x0)


def _increment(moments: MomentSet, kind: Kind, cfg: NumericsConfig) -> float:
    if kind == Kind.DISCRETE:
        return 1.0

    variance = moments.variance
    if variance is None or math.isnan(variance) or variance <= 0:
        log.debug("Variance %r unusable for the walk step, using %r", variance, cfg.fallback_step)
        return cfg.fallback_step
    inc = math.sqrt(variance) / cfg.step_divisor
    if not math.isfinite(inc) or inc > cfg.max_step:
        log.debug("Walk step %r too large, using %r", inc, cfg.fallback_step)
        return cfg.fallback_step
    return inc


def _walk(
    pdf: ScalarFunc,
    bounds: Bounds,
    x0: float,
    inc: float,
    direction: int,
    first: int,
    cfg: NumericsConfig,
) -> list[tuple[float, float]]:
    points: list[tuple[float, float]] = []
    seen_positive = False
    for k in range(first, first + cfg.walk_max_steps):
        x = x0 + direction * k * inc
        if not bounds.contains(x):
            return points
        y = float(pdf(x))
        if not math.isfinite(y):
            return points
        if y > cfg.density_epsilon:
            points.append((x, y))
            seen_positive = True
        elif seen_positive:
            return points

    log.debug("Density walk hit the %d step cap (direction %+d)", cfg.walk_max_steps, direction)
    return points


def sample_density(
    distribution: ParametricFamilyDistribution,
    moments: MomentSet | None = None,
    *,
    config: NumericsConfig | None = None,
) -> DensityFunctions:
    """
    Tabulate the density of ``distribution`` and a Riemann-sum CDF.

    The walk starts at the mean (or 0 when the mean is undefined or huge),
    rounded to the lattice for discrete kinds and clamped into the support.
    The step is 1 for discrete kinds and ``sqrt(variance) / step_divisor``
    otherwise, or ``fallback_step`` when the variance is undefined or not
    positive, or the step exceeds ``max_step``. Each direction stops when
    ``x`` leaves the support, the density is not finite, the density decays
    to ``density_epsilon`` after having exceeded it, or the step cap is
    reached.

    Parameters
    ----------
    distribution : ParametricFamilyDistribution
        Distribution bound to concrete parameters.
    moments : MomentSet, optional
        Moments steering the walk; extracted unrounded from the distribution
        if omitted, so narrow densities keep a step below their spread.
    config : NumericsConfig, optional
        Walk settings.

    Returns
    -------
    DensityFunctions
        Sorted density table (every ``y > density_epsilon``, every ``x``
        inside the support) and its non-decreasing cumulative table.
    """
    cfg = DEFAULT_NUMERICS_CONFIG if config is None else config
    if moments is None:
        moments = distribution.moments(config=cfg, rounded=False)

    kind = distribution.kind
    bounds = distribution.bounds
    pdf = distribution.pdf

    inc = _increment(moments, kind, cfg)
    x0 = _start(moments, kind, bounds, inc, cfg)

    right = _walk(pdf, bounds, x0, inc, 1, 0, cfg)
    left = _walk(pdf, bounds, x0, inc, -1, 1, cfg)

    table = np.array(left + right, dtype=np.float64).reshape(-1, 2)
    table = table[np.argsort(table[:, 0], kind="stable")]

    cumulative = np.column_stack((table[:, 0], np.cumsum(table[:, 1] * inc)))
    return DensityFunctions(pdf=SampleSeries(table), cdf=SampleSeries(cumulative), increment=inc)


def build_df(
    distr_type: str,
    params: Mapping[str, Any] | Parametrization,
    moments: MomentSet | None = None,
    *,
    parametrization_name: str | None = None,
    registry: DistributionRegistry | None = None,
    config: NumericsConfig | None = None,
) -> DensityFunctions:
    """
    Tabulate density and cumulative samples for a registered distribution.

    Parameters
    ----------
    distr_type : str
        Registered distribution name (see :class:`~pysatl_moments.types.DistributionName`).
    params : Mapping[str, Any] or Parametrization
        Parameter values.
    moments : MomentSet, optional
        Precomputed moments; extracted from the family's mgf if omitted.
    parametrization_name : str, optional
        Parametrization ``params`` are given in (defaults to the base one).
    registry : DistributionRegistry, optional
        Lookup table to resolve ``distr_type``; the configured default
        registry is used if omitted.
    config : NumericsConfig, optional
        Walk and moment settings.

    Raises
    ------
    ValueError
        If ``distr_type`` is not registered or the parameters violate a
        constraint.
    """
    if registry is None:
        from pysatl_moments.families.configuration import configure_families_register

        registry = configure_families_register()

    family = registry.get(distr_type)
    distribution = family.bind(params, parametrization_name)
    return sample_density(distribution, moments, config=config)


__all__ = [
    "SamplePoint",
    "SampleSeries",
    "DensityFunctions",
    "sample_density",
    "build_df",
]
