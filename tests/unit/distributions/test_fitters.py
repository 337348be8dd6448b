from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import pytest
from scipy import stats
from scipy.integrate import IntegrationWarning

from pysatl_moments.config import NumericsConfig
from pysatl_moments.distributions.computation import AnalyticalComputation
from pysatl_moments.distributions.fitters import fit_pdf_to_cdf_1C, fit_pdf_to_cdf_1D
from pysatl_moments.types import Bounds, CharacteristicName, Kind
from tests.utils.mocks import StandaloneUnivariateDistribution


def arcsine_pdf(x: float) -> float:
    if x <= 0.0 or x >= 1.0:
        return 0.0
    return 1 / (math.pi * math.sqrt(x * (1 - x)))


def make_continuous(pdf, bounds: Bounds) -> StandaloneUnivariateDistribution:
    return StandaloneUnivariateDistribution(
        kind=Kind.CONTINUOUS,
        analytical_computations=[AnalyticalComputation(target=CharacteristicName.PDF, func=pdf)],
        bounds=bounds,
    )


def make_discrete(pmf, bounds: Bounds) -> StandaloneUnivariateDistribution:
    return StandaloneUnivariateDistribution(
        kind=Kind.DISCRETE,
        analytical_computations=[AnalyticalComputation(target=CharacteristicName.PDF, func=pmf)],
        bounds=bounds,
    )


class TestContinuousFitter:
    def test_bounded_support(self) -> None:
        distr = make_continuous(lambda x: 2 * x, Bounds(lower=0.0, upper=1.0))
        cdf = fit_pdf_to_cdf_1C(distr)
        assert cdf.target == CharacteristicName.CDF
        assert list(cdf.sources) == [CharacteristicName.PDF]
        assert cdf(0.5) == pytest.approx(0.25, abs=1e-12)

    def test_outside_support(self) -> None:
        cdf = fit_pdf_to_cdf_1C(make_continuous(lambda x: 1.0, Bounds(lower=0.0, upper=1.0)))
        assert cdf(-1.0) == 0.0
        assert cdf(0.0) == 0.0
        assert cdf(2.0) == 1.0
        assert math.isnan(cdf(math.nan))

    def test_half_line_support(self) -> None:
        cdf = fit_pdf_to_cdf_1C(make_continuous(lambda x: math.exp(-x), Bounds(lower=0.0)))
        assert cdf(1.5) == pytest.approx(stats.expon.cdf(1.5), abs=1e-8)

    def test_real_line_support(self) -> None:
        cdf = fit_pdf_to_cdf_1C(make_continuous(stats.norm.pdf, Bounds()))
        for x in (-2.0, 0.0, 1.3):
            assert cdf(x) == pytest.approx(stats.norm.cdf(x), abs=1e-8)

    def test_endpoint_singularity(self) -> None:
        distr = make_continuous(arcsine_pdf, Bounds(lower=0.0, upper=1.0))
        cdf = fit_pdf_to_cdf_1C(distr)
        assert cdf(0.5) == pytest.approx(0.5, abs=1e-7)
        assert cdf(0.1) == pytest.approx(2 / math.pi * math.asin(math.sqrt(0.1)), abs=1e-7)

    def test_subinterval_limit_from_config(self) -> None:
        distr = make_continuous(arcsine_pdf, Bounds(lower=0.0, upper=1.0))
        coarse = fit_pdf_to_cdf_1C(distr, config=NumericsConfig(cdf_subintervals=1))
        with pytest.warns(IntegrationWarning):
            value = coarse(0.5)
        assert abs(value - 0.5) > abs(fit_pdf_to_cdf_1C(distr)(0.5) - 0.5)

    def test_result_is_clipped(self) -> None:
        cdf = fit_pdf_to_cdf_1C(make_continuous(lambda x: 5.0, Bounds(lower=0.0, upper=1.0)))
        assert cdf(0.9) == 1.0


class TestDiscreteFitter:
    def test_prefix_sum(self) -> None:
        def pmf(k: float) -> float:
            return stats.binom.pmf(k, 10, 0.3)

        cdf = fit_pdf_to_cdf_1D(make_discrete(pmf, Bounds(lower=0.0, upper=10.0)))
        for x in (0, 2.5, 7, 10):
            assert cdf(x) == pytest.approx(stats.binom.cdf(x, 10, 0.3), abs=1e-12)

    def test_edges(self) -> None:
        cdf = fit_pdf_to_cdf_1D(make_discrete(lambda k: 0.5**k, Bounds(lower=1.0)))
        assert cdf(0.5) == 0.0
        assert cdf(math.inf) == 1.0
        assert math.isnan(cdf(math.nan))
        assert cdf(3) == pytest.approx(0.875)

    def test_exclusive_lower_bound_skips_the_endpoint(self) -> None:
        bounds = Bounds(lower=0.0, lower_inclusive=False)
        cdf = fit_pdf_to_cdf_1D(make_discrete(lambda k: 0.5**k, bounds))
        assert cdf(1) == pytest.approx(0.5)

    def test_support_unbounded_below(self) -> None:
        with pytest.raises(RuntimeError, match="bounded below"):
            fit_pdf_to_cdf_1D(make_discrete(lambda k: 0.0, Bounds()))
