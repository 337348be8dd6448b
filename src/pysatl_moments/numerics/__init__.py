"""
Numerical building blocks: series, calculus, special functions and a
reproducible pseudo-random generator.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .calculus import composite_integral, derivative, integral, stencil
from .prng import WELL19937c, random, seed
from .series import product, summation
from .special import (
    bessel_i,
    beta,
    choose,
    cot,
    coth,
    csc,
    csch,
    digamma,
    erf,
    euler,
    factorial,
    gamma,
    is_int,
    ligamma,
    lngamma,
    polylogarithm,
    regularized_ligamma,
    regularized_uigamma,
    safe_exp,
    safe_pow,
    sec,
    sech,
    triangular,
    uigamma,
    zeta,
)

__all__ = [
    "summation",
    "product",
    "stencil",
    "derivative",
    "integral",
    "composite_integral",
    "WELL19937c",
    "random",
    "seed",
    "safe_exp",
    "safe_pow",
    "is_int",
    "gamma",
    "lngamma",
    "factorial",
    "choose",
    "triangular",
    "euler",
    "beta",
    "erf",
    "ligamma",
    "uigamma",
    "regularized_ligamma",
    "regularized_uigamma",
    "digamma",
    "bessel_i",
    "zeta",
    "polylogarithm",
    "sec",
    "csc",
    "cot",
    "sech",
    "csch",
    "coth",
]
