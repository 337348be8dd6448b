from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import pytest

from pysatl_moments.distributions import Distribution
from pysatl_moments.families import ParametricFamily, ParametricFamilyDistribution, Parametrization
from pysatl_moments.types import Bounds, Kind, MomentSet
from tests.unit.families.test_basic import TestBaseFamily


class TestFamilyDefinition(TestBaseFamily):
    def test_properties(self) -> None:
        fam = self.make_default_family()
        assert fam.name == "Default"
        assert fam.kind == Kind.CONTINUOUS
        assert fam.base_parametrization_name == "base"
        assert set(fam.parametrizations) == {"base", "alt"}
        assert not fam.has_closed_form_moments
        assert repr(fam) == "ParametricFamily(name='Default', kind=continuous)"

    def test_bare_callable_is_defined_for_base(self) -> None:
        fam = ParametricFamily(
            name="Bare",
            kind=Kind.DISCRETE,
            distr_parametrizations=["p"],
            distr_characteristics={self.PDF: lambda p, x: 0.5},
        )
        assert set(fam.distr_characteristics[self.PDF]) == {"p"}

    def test_undeclared_parametrization_is_rejected(self) -> None:
        fam = self.make_default_family()

        with pytest.raises(ValueError, match="not declared"):

            @fam.parametrization(name="other")
            class Other(Parametrization):
                value: float

    def test_duplicate_parametrization_is_rejected(self) -> None:
        fam = self.make_default_family()

        with pytest.raises(ValueError, match="already registered"):

            @fam.parametrization(name="alt")
            class Again(Parametrization):
                value: float

    def test_missing_base_parametrization(self) -> None:
        fam = ParametricFamily(
            name="Empty",
            kind=Kind.CONTINUOUS,
            distr_parametrizations=["base"],
            distr_characteristics={},
        )
        with pytest.raises(ValueError, match="Base parametrization 'base' is not registered"):
            _ = fam.base

    def test_unknown_parametrization_name(self) -> None:
        fam = self.make_default_family()
        with pytest.raises(KeyError):
            fam.get_parametrization("nope")
        with pytest.raises(KeyError):
            fam.bind({"width": 1.0}, "nope")


class TestAnalyticalPlan(TestBaseFamily):
    def test_alt_uses_own_form_and_falls_back_to_base(self) -> None:
        fam = self.make_default_family()
        dist = fam(rate=4.0, parametrization_name="alt")

        computations = dist.analytical_computations
        assert set(computations) == {self.PDF, self.CDF}
        # cdf comes from the alt form, pdf from the base one after conversion
        assert computations[self.CDF](0.125) == pytest.approx(0.5)
        assert computations[self.PDF](0.1) == pytest.approx(4.0)
        assert computations[self.PDF](0.3) == 0.0

    def test_computations_are_built_once(self) -> None:
        fam = self.make_default_family()
        dist = fam(width=2.0)
        assert dist.analytical_computations is dist.analytical_computations

    def test_missing_characteristic_has_no_computation(self) -> None:
        fam = self.make_default_family()
        dist = fam(width=2.0)
        assert self.MGF not in dist.analytical_computations


class TestFamilyDistribution(TestBaseFamily):
    def test_call_and_bind_agree(self) -> None:
        fam = self.make_default_family()
        called = fam(width=2.0)
        bound = fam.bind({"width": 2.0})
        assert isinstance(called, ParametricFamilyDistribution)
        assert isinstance(called, Distribution)
        assert called == bound
        assert called.family_name == "Default"
        assert called.parametrization_name == "base"
        assert called.parameters.parameters == {"width": 2.0}
        assert called.kind == Kind.CONTINUOUS

    def test_bind_accepts_parametrization_instance(self) -> None:
        fam = self.make_default_family()
        alt = fam.get_parametrization("alt")(rate=2.0)  # type: ignore[call-arg]
        dist = fam.bind(alt)
        assert dist.parameters is alt
        assert dist.bounds == Bounds(lower=0.0, upper=0.5)

    def test_bind_validates(self) -> None:
        fam = self.make_default_family()
        with pytest.raises(ValueError, match="width > 0"):
            fam(width=0.0)
        with pytest.raises(TypeError):
            fam(height=1.0)

    def test_family_level_characteristics(self) -> None:
        fam = self.make_default_family()
        params = {"width": 2.0}
        assert fam.pdf(params)(1.0) == pytest.approx(0.5)
        assert fam.cdf(params)(1.5) == pytest.approx(0.75)
        assert fam.bounds(params) == Bounds(lower=0.0, upper=2.0)
        assert fam.bounds({"rate": 0.25}, "alt") == Bounds(lower=0.0, upper=4.0)

    def test_cdf_is_fitted_when_missing(self) -> None:
        fam = self.make_default_family(distr_characteristics={self.PDF: {"base": lambda p, x: 0.5}})
        dist = fam(width=2.0)
        assert dist.cdf(1.0) == pytest.approx(0.5, abs=1e-9)
        assert dist.calculate_characteristic(self.CDF, 2.0) == pytest.approx(1.0, abs=1e-9)

    def test_mgf_without_form_raises(self) -> None:
        fam = self.make_default_family()
        with pytest.raises(RuntimeError):
            _ = fam(width=1.0).mgf

    def test_closed_form_moments_take_precedence(self) -> None:
        closed = MomentSet(mean=1.0, variance=1.0 / 3.0, skewness=0.0, kurtosis=-1.2)
        fam = ParametricFamily(
            name="Closed",
            kind=Kind.CONTINUOUS,
            distr_parametrizations=["base"],
            distr_characteristics={self.MGF: lambda p, t: 1.0},
            moments_by_parametrization=lambda p: closed,
        )

        @fam.parametrization(name="base")
        class Base(Parametrization):
            value: float

        dist = fam(value=1.0)
        assert fam.has_closed_form_moments
        assert dist.mgf is closed
        assert fam.mgf({"value": 1.0}) is closed
        assert dist.moments() is closed

    def test_numerical_moments_from_mgf(self) -> None:
        fam = ParametricFamily(
            name="Shifted",
            kind=Kind.CONTINUOUS,
            distr_parametrizations=["base"],
            distr_characteristics={self.MGF: lambda p, t: 1.0 / (1.0 - p.scale * t)},
        )

        @fam.parametrization(name="base")
        class Base(Parametrization):
            scale: float

        moments = fam(scale=2.0).moments()
        assert moments.mean == pytest.approx(2.0, abs=2e-3)
        assert moments.variance == pytest.approx(4.0, abs=2e-3)
