"""
Parametric family definitions.

A :class:`ParametricFamily` bundles the parametrizations of one distribution
with its characteristic functions (``pdf``, ``cdf``, ``mgf``), its support
bounds and, where differentiating the mgf is unsafe, closed-form moments.
The family works as a factory: given parameter values it returns closures
bound to them, or a full :class:`ParametricFamilyDistribution`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from collections.abc import Mapping
from functools import partial
from typing import TYPE_CHECKING, dataclass_transform

from pysatl_moments.distributions.computation import AnalyticalComputation
from pysatl_moments.distributions.strategies import DefaultComputationStrategy
from pysatl_moments.families.distribution import ParametricFamilyDistribution
from pysatl_moments.types import Bounds

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence
    from typing import Any

    from pysatl_moments.distributions.strategies import ComputationStrategy
    from pysatl_moments.families.parametrizations import Parametrization
    from pysatl_moments.types import (
        GenericCharacteristicName,
        Kind,
        MomentSet,
        ParametrizationName,
        ScalarFunc,
    )

    type ParametrizedFunction = Callable[[Parametrization, Any], Any]
    type Forms = dict[ParametrizationName, ParametrizedFunction]
    type BoundsResolver = Callable[[Parametrization], Bounds]
    type MomentsResolver = Callable[[Parametrization], MomentSet]
    type Params = Mapping[str, Any] | Parametrization


def _unbounded(_: Parametrization) -> Bounds:
    return Bounds()


def _plan_providers(
    names: Sequence[ParametrizationName],
    characteristics: Mapping[GenericCharacteristicName, Forms],
) -> dict[ParametrizationName, dict[GenericCharacteristicName, ParametrizationName]]:
    """
    For every parametrization, which form evaluates each characteristic.

    A parametrization uses its own form when the family defines one and the
    base form otherwise; characteristics with neither are left out.
    """
    base = names[0]
    return {
        name: {
            characteristic: name if name in forms else base
            for characteristic, forms in characteristics.items()
            if name in forms or base in forms
        }
        for name in names
    }


class ParametricFamily:
    """
    A family of distributions with one or more parametrizations.

    Parameters
    ----------
    name : str
        Name of the family, used as its registry key.
    kind : Kind
        Discrete or continuous.
    distr_parametrizations : list[ParametrizationName]
        Parametrization names; the first one is the base parametrization.
    distr_characteristics : dict[str, dict[str, Callable] or Callable]
        Characteristic name to ``func(parameters, x)``. A bare callable is
        defined for the base parametrization.
    bounds_by_parametrization : Callable[[Parametrization], Bounds], optional
        Support of the distribution for given base parameters. The whole
        real line if omitted.
    moments_by_parametrization : Callable[[Parametrization], MomentSet], optional
        Closed-form moments for given base parameters. When present they take
        precedence over differentiating the mgf.
    computation_strategy : ComputationStrategy, optional
        Resolver for characteristics without an analytical form.
    """

    def __init__(
        self,
        name: str,
        kind: Kind,
        distr_parametrizations: list[ParametrizationName],
        distr_characteristics: Mapping[GenericCharacteristicName, Forms | ParametrizedFunction],
        bounds_by_parametrization: BoundsResolver | None = None,
        moments_by_parametrization: MomentsResolver | None = None,
        computation_strategy: ComputationStrategy | None = None,
    ):
        if not distr_parametrizations:
            raise ValueError(f"Family '{name}' declares no parametrizations.")

        self._name = name
        self._kind = kind
        self._bounds_resolver = bounds_by_parametrization or _unbounded
        self._moments_resolver = moments_by_parametrization
        self.computation_strategy = computation_strategy or DefaultComputationStrategy()

        self.parametrization_names = list(distr_parametrizations)
        self.base_parametrization_name = self.parametrization_names[0]
        self._parametrizations: dict[ParametrizationName, type[Parametrization]] = {}

        self.distr_characteristics: dict[GenericCharacteristicName, Forms] = {}
        for characteristic, forms in distr_characteristics.items():
            if callable(forms):
                forms = {self.base_parametrization_name: forms}
            self.distr_characteristics[characteristic] = dict(forms)
        self._providers = _plan_providers(self.parametrization_names, self.distr_characteristics)

    def __repr__(self) -> str:
        return f"ParametricFamily(name={self._name!r}, kind={self._kind!s})"

    @property
    def name(self) -> str:
        return self._name

    @property
    def kind(self) -> Kind:
        return self._kind

    @property
    def parametrizations(self) -> dict[ParametrizationName, type[Parametrization]]:
        """Registered parametrization classes by name."""
        return self._parametrizations

    @property
    def base(self) -> type[Parametrization]:
        """
        Class of the base parametrization.

        Raises
        ------
        ValueError
            If no class has been registered under the base name yet.
        """
        base = self._parametrizations.get(self.base_parametrization_name)
        if base is None:
            raise ValueError(
                f"Base parametrization '{self.base_parametrization_name}' is not registered."
            )
        return base

    @property
    def has_closed_form_moments(self) -> bool:
        return self._moments_resolver is not None

    def register_parametrization(
        self, name: ParametrizationName, parametrization_class: type[Parametrization]
    ) -> None:
        """
        Attach ``parametrization_class`` under one of the declared names.

        Raises
        ------
        ValueError
            If the name is not declared by the family or is already taken.
        """
        if name not in self.parametrization_names:
            raise ValueError(f"Parametrization '{name}' is not declared by family '{self.name}'.")
        if name in self._parametrizations:
            raise ValueError(f"Parametrization '{name}' is already registered.")
        self._parametrizations[name] = parametrization_class

    def get_parametrization(self, name: ParametrizationName) -> type[Parametrization]:
        """Parametrization class registered as ``name``; ``KeyError`` if there is none."""
        return self._parametrizations[name]

    def to_base(self, parameters: Parametrization) -> Parametrization:
        """``parameters`` expressed in the base parametrization."""
        if parameters.name != self.base_parametrization_name:
            return parameters.transform_to_base_parametrization()
        return parameters

    def resolve_bounds(self, parameters: Parametrization) -> Bounds:
        return self._bounds_resolver(self.to_base(parameters))

    def resolve_moments(self, parameters: Parametrization) -> MomentSet | None:
        if self._moments_resolver is None:
            return None
        return self._moments_resolver(self.to_base(parameters))

    def bind_characteristics(
        self, parameters: Parametrization
    ) -> dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """
        Bind every analytical characteristic available for ``parameters``.

        Characteristics without a form of their own in ``parameters``'
        parametrization are evaluated on the base-converted parameters,
        which are computed at most once.
        """
        providers = self._providers.get(parameters.name, {})
        bound: dict[ParametrizationName, Parametrization] = {parameters.name: parameters}
        if any(provider not in bound for provider in providers.values()):
            bound[self.base_parametrization_name] = self.to_base(parameters)

        return {
            characteristic: AnalyticalComputation(
                target=characteristic,
                func=partial(self.distr_characteristics[characteristic][provider], bound[provider]),
            )
            for characteristic, provider in providers.items()
        }

    def distribution(
        self,
        parametrization_name: str | None = None,
        **parameters_values: Any,
    ) -> ParametricFamilyDistribution:
        """
        Create a distribution with the given parameter values.

        Raises
        ------
        KeyError
            If the parametrization name is not registered.
        TypeError
            If a parameter is missing or unknown.
        ValueError
            If the parameters violate a constraint.
        """
        return self.bind(parameters_values, parametrization_name)

    def bind(
        self, params: Params, parametrization_name: str | None = None
    ) -> ParametricFamilyDistribution:
        """
        Create a distribution from a mapping or a parametrization instance.

        Parameters
        ----------
        params : Mapping[str, Any] or Parametrization
            Parameter values. A mapping is read in ``parametrization_name``
            (the base parametrization by default).
        parametrization_name : str, optional
            Parametrization of a mapping ``params``.
        """
        if isinstance(params, Mapping):
            if parametrization_name is None:
                parametrization_class = self.base
            else:
                parametrization_class = self._parametrizations[parametrization_name]
            parameters = parametrization_class.from_mapping(params)
        else:
            parameters = params

        parameters.validate()
        return ParametricFamilyDistribution(self, parameters)

    def pdf(self, params: Params, parametrization_name: str | None = None) -> ScalarFunc:
        """Density (mass) function bound to ``params``."""
        return self.bind(params, parametrization_name).pdf

    def cdf(self, params: Params, parametrization_name: str | None = None) -> ScalarFunc:
        """Cumulative distribution function bound to ``params``."""
        return self.bind(params, parametrization_name).cdf

    def mgf(
        self, params: Params, parametrization_name: str | None = None
    ) -> ScalarFunc | MomentSet:
        """Moment-generating function bound to ``params``, or closed-form moments."""
        return self.bind(params, parametrization_name).mgf

    def bounds(self, params: Params, parametrization_name: str | None = None) -> Bounds:
        """Support bounds for ``params``."""
        return self.bind(params, parametrization_name).bounds

    @dataclass_transform()
    def parametrization(
        self, *, name: str
    ) -> Callable[[type[Parametrization]], type[Parametrization]]:
        """
        Class decorator registering a parametrization of this family.

        Mark the class as a dataclass as well if the type checker should see
        its generated ``__init__``.
        """
        from pysatl_moments.families.parametrizations import parametrization as _param_deco

        return _param_deco(family=self, name=name)

    __call__ = distribution
