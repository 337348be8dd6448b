"""
Built-in distribution families for PySATL moments.

Each ``configure_*_family`` function builds one family and registers it in
the given registry; see :mod:`pysatl_moments.families.configuration`.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_moments.families.builtins.continuous import (
    configure_beta_family,
    configure_cauchy_family,
    configure_exponential_family,
    configure_gamma_family,
    configure_gaussian_family,
    configure_gumbel_family,
    configure_rayleigh_family,
)
from pysatl_moments.families.builtins.discrete import (
    configure_binomial_family,
    configure_geometric_family,
    configure_logarithmic_family,
    configure_poisson_family,
    configure_uniform_family,
)

__all__ = [
    "configure_binomial_family",
    "configure_geometric_family",
    "configure_poisson_family",
    "configure_logarithmic_family",
    "configure_uniform_family",
    "configure_exponential_family",
    "configure_gaussian_family",
    "configure_gamma_family",
    "configure_beta_family",
    "configure_rayleigh_family",
    "configure_gumbel_family",
    "configure_cauchy_family",
]
