"""
Built-in discrete distribution families.

Mass functions are exposed under the ``pdf`` characteristic.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_moments.families.builtins.discrete.binomial import configure_binomial_family
from pysatl_moments.families.builtins.discrete.geometric import configure_geometric_family
from pysatl_moments.families.builtins.discrete.logarithmic import configure_logarithmic_family
from pysatl_moments.families.builtins.discrete.poisson import configure_poisson_family
from pysatl_moments.families.builtins.discrete.uniform import configure_uniform_family

__all__ = [
    "configure_binomial_family",
    "configure_geometric_family",
    "configure_poisson_family",
    "configure_logarithmic_family",
    "configure_uniform_family",
]
