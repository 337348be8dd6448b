"""
Built-in continuous distribution families.

This module contains implementations of continuous parametric families.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_moments.families.builtins.continuous.beta import configure_beta_family
from pysatl_moments.families.builtins.continuous.cauchy import configure_cauchy_family
from pysatl_moments.families.builtins.continuous.exponential import configure_exponential_family
from pysatl_moments.families.builtins.continuous.gamma import configure_gamma_family
from pysatl_moments.families.builtins.continuous.gaussian import configure_gaussian_family
from pysatl_moments.families.builtins.continuous.gumbel import configure_gumbel_family
from pysatl_moments.families.builtins.continuous.rayleigh import configure_rayleigh_family

__all__ = [
    "configure_exponential_family",
    "configure_gaussian_family",
    "configure_gamma_family",
    "configure_beta_family",
    "configure_rayleigh_family",
    "configure_gumbel_family",
    "configure_cauchy_family",
]
