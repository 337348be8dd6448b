"""
Distributions subpackage

Interfaces and default implementations for probability distributions used by
PySATL moments:

- computation primitives (:mod:`.computation`);
- distribution protocol (:mod:`.distribution`);
- numerical cdf fitters (:mod:`.fitters`);
- moment extraction from moment-generating functions (:mod:`.moments`);
- density sampling for plotting (:mod:`.sampling`);
- pluggable computation strategies (:mod:`.strategies`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
from .computation import (
    AnalyticalComputation,
    ComputationMethod,
    FittedComputationMethod,
)
from .distribution import Distribution
from .moments import compute_moments, kurtosis, mean, skewness, variance
from .sampling import DensityFunctions, SamplePoint, SampleSeries, build_df, sample_density
from .strategies import ComputationStrategy, DefaultComputationStrategy

__all__ = [
    # computation primitives
    "AnalyticalComputation",
    "ComputationMethod",
    "FittedComputationMethod",
    # distribution
    "Distribution",
    # moments
    "mean",
    "variance",
    "skewness",
    "kurtosis",
    "compute_moments",
    # sampling
    "SamplePoint",
    "SampleSeries",
    "DensityFunctions",
    "sample_density",
    "build_df",
    # strategies
    "ComputationStrategy",
    "DefaultComputationStrategy",
]
