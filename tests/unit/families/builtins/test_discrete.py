"""
Tests for the discrete distribution families

Mass functions, cumulative distribution functions and moment-generating
functions are compared against ``scipy.stats``; parameter constraints and
support bounds are checked per family.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import Any

import numpy as np
import pytest
from scipy import stats

from pysatl_moments.types import Bounds, CharacteristicName, DistributionName, Kind

from .base import BaseDistributionTest

CASES = [
    pytest.param(
        DistributionName.BINOMIAL, {"p": 0.3, "n": 12}, stats.binom(12, 0.3), id="binomial"
    ),
    pytest.param(DistributionName.GEOMETRIC, {"p": 0.25}, stats.geom(0.25, loc=-1), id="geometric"),
    pytest.param(DistributionName.POISSON, {"lambda_": 3.5}, stats.poisson(3.5), id="poisson"),
    pytest.param(DistributionName.LOGARITHMIC, {"p": 0.7}, stats.logser(0.7), id="logarithmic"),
    pytest.param(DistributionName.UNIFORM, {"a": -3, "b": 4}, stats.randint(-3, 5), id="uniform"),
]

POINTS = np.arange(-4, 16)


class TestDiscreteFamilies(BaseDistributionTest):
    """Common behaviour of every discrete family."""

    @pytest.mark.parametrize("name, params, reference", CASES)
    def test_kind(self, name: str, params: dict[str, Any], reference: Any) -> None:
        assert self.family(name).kind == Kind.DISCRETE
        assert self.distribution(name, **params).kind == Kind.DISCRETE

    @pytest.mark.parametrize("name, params, reference", CASES)
    def test_pmf_matches_scipy(self, name: str, params: dict[str, Any], reference: Any) -> None:
        dist = self.distribution(name, **params)
        self.assert_arrays_almost_equal(
            self.evaluate(dist.pdf, POINTS), reference.pmf(POINTS), precision=1e-9
        )

    @pytest.mark.parametrize("name, params, reference", CASES)
    def test_cdf_matches_scipy(self, name: str, params: dict[str, Any], reference: Any) -> None:
        dist = self.distribution(name, **params)
        points = np.concatenate([POINTS, POINTS + 0.5])
        self.assert_arrays_almost_equal(
            self.evaluate(dist.cdf, points), reference.cdf(points), precision=1e-7
        )

    @pytest.mark.parametrize("name, params, reference", CASES)
    def test_pmf_is_zero_off_the_lattice_and_support(
        self, name: str, params: dict[str, Any], reference: Any
    ) -> None:
        dist = self.distribution(name, **params)
        assert dist.pdf(1.5) == 0.0
        assert dist.pdf(dist.bounds.lower - 1.0) == 0.0

    @pytest.mark.parametrize("name, params, reference", CASES)
    def test_mgf_matches_expectation(
        self, name: str, params: dict[str, Any], reference: Any
    ) -> None:
        dist = self.distribution(name, **params)
        if CharacteristicName.MGF not in dist.analytical_computations:
            pytest.skip("family exposes closed-form moments")
        t = 0.1
        expected = reference.expect(lambda k: np.exp(t * k), ub=200)
        assert dist.mgf(t) == pytest.approx(expected, rel=1e-7)
        assert dist.mgf(0.0) == pytest.approx(1.0)


class TestBinomialFamily(BaseDistributionTest):
    def test_bounds(self) -> None:
        dist = self.distribution(DistributionName.BINOMIAL, p=0.5, n=7)
        assert dist.bounds == Bounds(lower=0.0, upper=7.0)

    def test_degenerate_probabilities(self) -> None:
        never = self.distribution(DistributionName.BINOMIAL, p=0.0, n=5)
        always = self.distribution(DistributionName.BINOMIAL, p=1.0, n=5)
        assert never.pdf(0) == 1.0
        assert always.pdf(5) == 1.0
        assert always.pdf(4) == 0.0

    @pytest.mark.parametrize("params", [{"p": -0.1, "n": 5}, {"p": 1.1, "n": 5}])
    def test_probability_constraint(self, params: dict[str, Any]) -> None:
        with pytest.raises(ValueError, match="0 <= p <= 1"):
            self.distribution(DistributionName.BINOMIAL, **params)

    @pytest.mark.parametrize("n", [-1, 2.5])
    def test_trials_constraint(self, n: float) -> None:
        with pytest.raises(ValueError, match="n is a non-negative integer"):
            self.distribution(DistributionName.BINOMIAL, p=0.5, n=n)


class TestGeometricFamily(BaseDistributionTest):
    def test_support_starts_at_zero(self) -> None:
        dist = self.distribution(DistributionName.GEOMETRIC, p=0.5)
        assert dist.bounds == Bounds(lower=0.0)
        assert dist.pdf(0) == 0.5

    def test_cdf_edges(self) -> None:
        dist = self.distribution(DistributionName.GEOMETRIC, p=0.5)
        assert dist.cdf(-0.5) == 0.0
        assert dist.cdf(math.inf) == 1.0
        assert math.isnan(dist.cdf(math.nan))

    def test_mgf_diverges(self) -> None:
        dist = self.distribution(DistributionName.GEOMETRIC, p=0.5)
        assert math.isnan(dist.mgf(math.log(2.0) + 0.1))

    @pytest.mark.parametrize("p", [0.0, 1.5])
    def test_constraint(self, p: float) -> None:
        with pytest.raises(ValueError, match="0 < p <= 1"):
            self.distribution(DistributionName.GEOMETRIC, p=p)


class TestPoissonFamily(BaseDistributionTest):
    def test_parametrization(self) -> None:
        family = self.family(DistributionName.POISSON)
        assert family.parametrization_names == ["rate"]
        assert self.distribution(DistributionName.POISSON, lambda_=2.0).parameters.parameters == {
            "lambda_": 2.0
        }

    def test_large_rate_stays_finite(self) -> None:
        dist = self.distribution(DistributionName.POISSON, lambda_=500.0)
        assert dist.pdf(500) == pytest.approx(stats.poisson(500.0).pmf(500), rel=1e-5)

    def test_constraint(self) -> None:
        with pytest.raises(ValueError, match="lambda_ > 0"):
            self.distribution(DistributionName.POISSON, lambda_=0.0)


class TestLogarithmicFamily(BaseDistributionTest):
    def test_support_starts_at_one(self) -> None:
        dist = self.distribution(DistributionName.LOGARITHMIC, p=0.5)
        assert dist.bounds == Bounds(lower=1.0)
        assert dist.pdf(0) == 0.0

    def test_mgf_outside_domain(self) -> None:
        dist = self.distribution(DistributionName.LOGARITHMIC, p=0.5)
        assert math.isnan(dist.mgf(1.0))

    @pytest.mark.parametrize("p", [0.0, 1.0])
    def test_constraint(self, p: float) -> None:
        with pytest.raises(ValueError, match="0 < p < 1"):
            self.distribution(DistributionName.LOGARITHMIC, p=p)


class TestUniformFamily(BaseDistributionTest):
    def test_bounds(self) -> None:
        dist = self.distribution(DistributionName.UNIFORM, a=2, b=9)
        assert dist.bounds == Bounds(lower=2.0, upper=9.0)

    def test_point_mass(self) -> None:
        dist = self.distribution(DistributionName.UNIFORM, a=3, b=3)
        assert dist.pdf(3) == 1.0
        moments = dist.moments()
        assert moments.mean == 3.0
        assert moments.variance == 0.0
        assert moments.skewness is None

    def test_has_no_mgf(self) -> None:
        dist = self.distribution(DistributionName.UNIFORM, a=0, b=1)
        assert CharacteristicName.MGF not in dist.analytical_computations

    def test_order_constraint(self) -> None:
        with pytest.raises(ValueError, match="a <= b"):
            self.distribution(DistributionName.UNIFORM, a=5, b=1)

    def test_integer_constraint(self) -> None:
        with pytest.raises(ValueError, match="a and b are integers"):
            self.distribution(DistributionName.UNIFORM, a=0.5, b=3)
