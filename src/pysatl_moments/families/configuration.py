"""
Distribution Families Configuration
===================================

Builds the registry of built-in distribution families:

- discrete: binomial, geometric, Poisson, logarithmic, discrete uniform;
- continuous: exponential, Gaussian, gamma, beta, Rayleigh, Gumbel, Cauchy.

Notes
-----
The configured registry is cached; :func:`reset_families_register` drops the
cache so the next call builds a fresh one.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import lru_cache

from pysatl_moments.families.builtins import (
    configure_beta_family,
    configure_binomial_family,
    configure_cauchy_family,
    configure_exponential_family,
    configure_gamma_family,
    configure_gaussian_family,
    configure_geometric_family,
    configure_gumbel_family,
    configure_logarithmic_family,
    configure_poisson_family,
    configure_rayleigh_family,
    configure_uniform_family,
)
from pysatl_moments.families.registry import DistributionRegistry


def populate_registry(registry: DistributionRegistry) -> DistributionRegistry:
    """Register every built-in family in ``registry`` and return it."""
    configure_binomial_family(registry)
    configure_geometric_family(registry)
    configure_poisson_family(registry)
    configure_logarithmic_family(registry)
    configure_uniform_family(registry)
    configure_exponential_family(registry)
    configure_gaussian_family(registry)
    configure_gamma_family(registry)
    configure_beta_family(registry)
    configure_rayleigh_family(registry)
    configure_gumbel_family(registry)
    configure_cauchy_family(registry)
    return registry


@lru_cache(maxsize=1)
def configure_families_register() -> DistributionRegistry:
    """
    Build the shared registry holding every built-in family.

    Returns
    -------
    DistributionRegistry
        The same instance on every call until :func:`reset_families_register`.
    """
    return populate_registry(DistributionRegistry())


def reset_families_register() -> None:
    """Reset the cached families registry."""
    configure_families_register.cache_clear()
