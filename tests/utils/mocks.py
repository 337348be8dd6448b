from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Iterable, Mapping
from typing import Any

from pysatl_moments.distributions import (
    AnalyticalComputation,
    ComputationStrategy,
    DefaultComputationStrategy,
    Distribution,
)
from pysatl_moments.types import Bounds, GenericCharacteristicName, Kind


class StandaloneUnivariateDistribution(Distribution):
    """
    Minimal standalone univariate distribution.

    Notes
    -----
    - Analytical computations are given explicitly.
    - The computation strategy is shared by the instance, so caching works.
    """

    _analytical: dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]]

    def __init__(
        self,
        kind: Kind,
        analytical_computations: (
            Iterable[AnalyticalComputation[Any, Any]]
            | Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]
        ) = (),
        bounds: Bounds | None = None,
        strategy: ComputationStrategy | None = None,
    ) -> None:
        self._kind = kind
        self._bounds = Bounds() if bounds is None else bounds
        self._strategy = DefaultComputationStrategy() if strategy is None else strategy
        if isinstance(analytical_computations, Mapping):
            self._analytical = dict(analytical_computations)
        else:
            self._analytical = {ac.target: ac for ac in analytical_computations}

    @property
    def kind(self) -> Kind:
        return self._kind

    @property
    def bounds(self) -> Bounds:
        return self._bounds

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """Mapping from characteristic name to analytical callable."""
        return self._analytical

    @property
    def computation_strategy(self) -> ComputationStrategy:
        """Computation strategy instance."""
        return self._strategy
