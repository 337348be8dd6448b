from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest

from pysatl_moments.types import Bounds, DistributionName, MomentSet


class TestBounds:
    def test_default_is_the_real_line(self) -> None:
        b = Bounds()
        assert not b.is_bounded_below
        assert not b.is_bounded_above
        assert b.lower_bound == (-math.inf, False)
        assert b.upper_bound == (math.inf, False)
        assert 1e300 in b

    def test_inclusive_endpoints(self) -> None:
        b = Bounds(lower=0.0, upper=1.0)
        assert b.contains(0.0)
        assert b.contains(1.0)
        assert not b.contains(1.0000001)

    def test_exclusive_endpoints(self) -> None:
        b = Bounds(lower=0.0, upper=1.0, lower_inclusive=False, upper_inclusive=False)
        assert not b.contains(0.0)
        assert not b.contains(1.0)
        assert b.contains(0.5)

    def test_array_membership(self) -> None:
        b = Bounds(lower=0.0)
        mask = b.contains(np.array([-1.0, 0.0, 2.0, np.nan]))
        np.testing.assert_array_equal(mask, [False, True, True, False])

    def test_infinite_endpoints_are_never_inclusive(self) -> None:
        b = Bounds(lower=-math.inf, upper=math.inf, lower_inclusive=True, upper_inclusive=True)
        assert not b.lower_inclusive
        assert not b.upper_inclusive

    def test_invalid_bounds(self) -> None:
        with pytest.raises(ValueError, match="Invalid bounds"):
            Bounds(lower=2.0, upper=1.0)
        with pytest.raises(ValueError, match="NaN"):
            Bounds(lower=math.nan)

    def test_degenerate_bounds_allowed(self) -> None:
        assert 3.0 in Bounds(lower=3.0, upper=3.0)


class TestMomentSet:
    def test_undefined(self) -> None:
        assert MomentSet.undefined().as_dict() == {
            "mean": None,
            "variance": None,
            "skewness": None,
            "kurtosis": None,
        }

    def test_negative_variance_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            MomentSet(mean=0.0, variance=-1.0)

    def test_frozen(self) -> None:
        moments = MomentSet(mean=1.0)
        with pytest.raises(AttributeError):
            moments.mean = 2.0  # type: ignore[misc]


def test_distribution_names_are_plain_strings() -> None:
    assert DistributionName.GAUSSIAN == "gaussian"
    assert {str(name) for name in DistributionName} >= {"binomial", "cauchy", "beta"}
    assert len(DistributionName) == 12
