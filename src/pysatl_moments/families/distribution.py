"""
Concrete distribution instances with specific parameter values.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pysatl_moments.distributions.distribution import Distribution
from pysatl_moments.distributions.moments import compute_moments
from pysatl_moments.types import CharacteristicName

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from pysatl_moments.config import NumericsConfig
    from pysatl_moments.distributions.computation import AnalyticalComputation
    from pysatl_moments.distributions.strategies import ComputationStrategy
    from pysatl_moments.families.parametric_family import ParametricFamily
    from pysatl_moments.families.parametrizations import Parametrization
    from pysatl_moments.types import (
        Bounds,
        GenericCharacteristicName,
        Kind,
        MomentSet,
        ScalarFunc,
    )


@dataclass(slots=True)
class ParametricFamilyDistribution(Distribution):
    """
    A distribution of a parametric family bound to concrete parameter values.

    Parameters
    ----------
    family : ParametricFamily
        The family this distribution belongs to.
    parameters : Parametrization
        Validated parameter values, in any of the family's parametrizations.
    """

    family: ParametricFamily
    parameters: Parametrization
    _analytical: dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]] | None = field(
        default=None, init=False, repr=False, compare=False
    )

    @property
    def family_name(self) -> str:
        return self.family.name

    @property
    def parametrization_name(self) -> str:
        return self.parameters.name

    @property
    def kind(self) -> Kind:
        return self.family.kind

    @property
    def bounds(self) -> Bounds:
        """Support bounds of this distribution."""
        return self.family.resolve_bounds(self.parameters)

    @property
    def computation_strategy(self) -> ComputationStrategy:
        return self.family.computation_strategy

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """Analytical computations bound to the parameters, built once per instance."""
        if self._analytical is None:
            self._analytical = self.family.bind_characteristics(self.parameters)
        return self._analytical

    @property
    def pdf(self) -> ScalarFunc:
        """Density function (mass function for discrete kinds)."""
        return self.query_method(CharacteristicName.PDF)

    @property
    def cdf(self) -> ScalarFunc:
        """Cumulative distribution function, analytical or fitted from :attr:`pdf`."""
        return self.query_method(CharacteristicName.CDF)

    @property
    def mgf(self) -> ScalarFunc | MomentSet:
        """
        Moment-generating function, or closed-form moments.

        Families whose mgf is numerically unsafe to differentiate (or does
        not exist) expose a :class:`~pysatl_moments.types.MomentSet` instead.
        """
        closed_form = self.family.resolve_moments(self.parameters)
        if closed_form is not None:
            return closed_form
        return self.query_method(CharacteristicName.MGF)

    def moments(
        self, *, config: NumericsConfig | None = None, rounded: bool = True
    ) -> MomentSet:
        """Mean, variance, skewness and excess kurtosis of this distribution."""
        return compute_moments(self.mgf, config=config, rounded=rounded)
