"""
Common fixtures and utilities for built-in family tests.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


import math
from collections.abc import Iterable
from typing import Any

import numpy as np

from pysatl_moments.families.configuration import configure_families_register
from pysatl_moments.families.distribution import ParametricFamilyDistribution
from pysatl_moments.families.parametric_family import ParametricFamily


class BaseDistributionTest:
    """Base class for all distribution families' tests"""

    # Precision for floating point comparisons
    CALCULATION_PRECISION = 1e-10

    @staticmethod
    def family(name: str) -> ParametricFamily:
        return configure_families_register().get(name)

    @classmethod
    def distribution(
        cls, name: str, parametrization_name: str | None = None, **params: Any
    ) -> ParametricFamilyDistribution:
        return cls.family(name).distribution(parametrization_name, **params)

    @staticmethod
    def evaluate(method: Any, points: Iterable[float]) -> np.ndarray[Any, Any]:
        """Evaluate an analytical or fitted characteristic at every point."""
        return np.array([method(float(x)) for x in points], dtype=np.float64)

    @staticmethod
    def assert_arrays_almost_equal(
        actual: np.ndarray[Any, Any], expected: np.ndarray[Any, Any], precision: float | None = None
    ) -> None:
        """Helper method to assert arrays are almost equal."""
        if precision is None:
            precision = BaseDistributionTest.CALCULATION_PRECISION

        np.testing.assert_array_almost_equal(actual, expected, decimal=int(-math.log10(precision)))
