"""
Distribution Interface
======================

The :class:`Distribution` protocol used by strategies, fitters, the moment
extractor and the density sampler.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from pysatl_moments.distributions.computation import AnalyticalComputation, Method
    from pysatl_moments.distributions.strategies import ComputationStrategy
    from pysatl_moments.types import Bounds, GenericCharacteristicName, Kind


@runtime_checkable
class Distribution(Protocol):
    """Public univariate distribution interface."""

    @property
    def kind(self) -> Kind: ...

    @property
    def bounds(self) -> Bounds: ...

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]: ...

    @property
    def computation_strategy(self) -> ComputationStrategy: ...

    def query_method(
        self, characteristic_name: GenericCharacteristicName, **options: Any
    ) -> Method[Any, Any]:
        return self.computation_strategy.query_method(characteristic_name, self, **options)

    def calculate_characteristic(
        self, characteristic_name: GenericCharacteristicName, value: Any, **options: Any
    ) -> Any:
        return self.query_method(characteristic_name, **options)(value)
