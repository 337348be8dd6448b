"""
PySATL Moments
==============

Numerical statistics for a catalog of probability distributions: special
functions, series and numerical calculus, moment extraction from
moment-generating functions, parametric distribution families and a density
sampler for plotting.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from importlib.metadata import version

from .config import *
from .config import __all__ as _config_all
from .distributions import *
from .distributions import __all__ as _distr_all
from .families import *
from .families import __all__ as _family_all
from .types import *
from .types import __all__ as _types_all

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = version("pysatl-moments")
__all__ = [
    "__version__",
    *_config_all,
    *_distr_all,
    *_family_all,
    *_types_all,
]

del _config_all
del _distr_all
del _family_all
del _types_all
