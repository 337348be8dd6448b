"""
Special Functions
=================

Pure scalar special functions used by the distribution catalog.

Every function is total over its documented domain. Outside of it the result
is an explicit ``nan`` or ``inf`` sentinel; nothing here raises for a
mathematical edge case, including floating point overflow.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

from pysatl_moments.numerics.calculus import derivative
from pysatl_moments.numerics.series import product, summation

_LANCZOS_G = 7
_LANCZOS_P = (
    0.99999999999980993,
    676.5203681218851,
    -1259.1392167224028,
    771.32342877765313,
    -176.61502916214059,
    12.507343278686905,
    -0.13857109526572012,
    9.9843695780195716e-6,
    1.5056327351493116e-7,
)

_LANCZOS_LN_G = 607 / 128
_LANCZOS_LN_P = (
    0.99999999999999709182,
    57.156235665862923517,
    -59.597960355475491248,
    14.136097974741747174,
    -0.49191381609762019978,
    0.33994649984811888699e-4,
    0.46523628927048575665e-4,
    -0.98374475304879564677e-4,
    0.15808870322491248884e-3,
    -0.21026444172410488319e-3,
    0.21743961811521264320e-3,
    -0.16431810653676389022e-3,
    0.84418223983852743293e-4,
    -0.26190838401581408670e-4,
    0.36899182659531622704e-5,
)

# Abramowitz & Stegun 7.1.26
_ERF_A = (0.254829592, -0.284496736, 1.421413741, -1.453152027, 1.061405429)
_ERF_P = 0.3275911

# B_2, B_4, ..., B_12
_BERNOULLI_EVEN = (1 / 6, -1 / 30, 1 / 42, -1 / 30, 5 / 66, -691 / 2730)
_ZETA_HEAD = 10

_MAX_SAFE_INTEGER = 2.0**53
_MAX_EXACT_FACTORIAL = 170


def safe_exp(x: float) -> float:
    """``exp(x)`` that saturates to ``inf`` instead of raising on overflow."""
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf


def safe_pow(base: float, exponent: float) -> float:
    """
    Real power ``base ** exponent``.

    Overflow and ``0 ** negative`` give ``inf``; a negative base with a
    non-integer exponent has no real value and gives ``nan``.
    """
    if base < 0 and not is_int(exponent):
        return math.nan
    try:
        return float(base**exponent)
    except (OverflowError, ZeroDivisionError):
        return math.inf


def is_int(n: float) -> bool:
    """Whether ``n`` is a finite number with an exactly representable integral value."""
    return math.isfinite(n) and abs(n) < _MAX_SAFE_INTEGER and math.floor(n) == n


def lngamma(n: float) -> float:
    """
    Natural logarithm of the gamma function for ``n > 0``.

    Log-space Lanczos approximation (g = 607/128, 15 coefficients).
    Returns ``nan`` for ``n <= 0``.
    """
    if math.isnan(n) or n <= 0:
        return math.nan
    if math.isinf(n):
        return math.inf

    x = _LANCZOS_LN_P[0]
    for i in range(len(_LANCZOS_LN_P) - 1, 0, -1):
        x += _LANCZOS_LN_P[i] / (n + i)
    t = n + _LANCZOS_LN_G + 0.5
    return 0.5 * math.log(2 * math.pi) + (n + 0.5) * math.log(t) - t + math.log(x) - math.log(n)


def gamma(n: float) -> float:
    """
    Gamma function.

    Uses the reflection formula below 0.5, ``exp(lngamma(n))`` above 100 and
    the 9-term Lanczos approximation (g = 7) in between.

    Returns
    -------
    float
        ``inf`` at the poles (non-positive integers) and on overflow,
        ``nan`` for ``nan`` and ``-inf``.
    """
    if math.isnan(n) or n == -math.inf:
        return math.nan
    if n == math.inf:
        return math.inf

    if n < 0.5:
        if is_int(n):
            return math.inf
        denominator = math.sin(math.pi * n) * gamma(1 - n)
        if denominator == 0.0:
            return math.inf
        return math.pi / denominator

    if n > 100:
        return safe_exp(lngamma(n))

    n -= 1
    x = _LANCZOS_P[0]
    for i in range(1, _LANCZOS_G + 2):
        x += _LANCZOS_P[i] / (n + i)
    t = n + _LANCZOS_G + 0.5
    return math.sqrt(2 * math.pi) * t ** (n + 0.5) * math.exp(-t) * x


def factorial(n: float) -> float:
    """
    Factorial extended to the reals.

    Non-negative integers use the exact product ``n * (n - 1) * ... * 1``
    (the empty product is 1), negative integers give ``inf`` and any other
    value is ``gamma(n + 1)``.
    """
    if is_int(n):
        if n < 0 or n > _MAX_EXACT_FACTORIAL:
            return math.inf
        result = 1.0
        for i in range(2, int(n) + 1):
            result *= i
        return result
    return gamma(n + 1)


def choose(n: float, k: float) -> float:
    """
    Binomial coefficient ``n! / ((n - k)! k!)``.

    Defined for non-negative integers; ``k > n`` gives 0. Any other input
    gives ``nan``.
    """
    if not (is_int(n) and is_int(k)) or n < 0 or k < 0:
        return math.nan
    if k > n:
        return 0.0
    if n > _MAX_EXACT_FACTORIAL:
        return safe_exp(lngamma(n + 1) - lngamma(n - k + 1) - lngamma(k + 1))
    return factorial(n) / (factorial(n - k) * factorial(k))


def triangular(n: float) -> float:
    """The ``n``-th triangular number ``choose(n + 1, 2)``."""
    return choose(n + 1, 2)


def euler(terms: int = 18) -> float:
    """Series estimate of Euler's number ``sum 1/i!`` over the first ``terms`` terms."""
    total = summation(lambda i: 1 / factorial(i), 0, terms - 1)
    assert total is not None
    return total


def beta(a: float, b: float) -> float:
    """Beta function ``gamma(a) * gamma(b) / gamma(a + b)``."""
    denominator = gamma(a + b)
    if math.isinf(denominator):
        log_beta = lngamma(a) + lngamma(b) - lngamma(a + b)
        return safe_exp(log_beta) if not math.isnan(log_beta) else math.nan
    return gamma(a) * gamma(b) / denominator


def erf(x: float) -> float:
    """Error function, Abramowitz & Stegun 7.1.26 (absolute error below 1.5e-7)."""
    if math.isnan(x):
        return math.nan
    if x == 0:
        return 0.0

    sign = -1.0 if x < 0 else 1.0
    x = abs(x)
    t = 1.0 / (1.0 + _ERF_P * x)
    a1, a2, a3, a4, a5 = _ERF_A
    poly = ((((a5 * t + a4) * t + a3) * t + a2) * t + a1) * t
    return sign * (1.0 - poly * math.exp(-x * x))


def _log_ligamma(a: float, x: float) -> float | None:
    """``log(ligamma(a, x))`` for ``a > 0``, ``0 < x < inf``; ``None`` on divergence."""
    log_x = math.log(x)
    log_head = lngamma(a + 1)

    def term(k: int) -> float:
        return safe_exp(k * log_x + log_head - lngamma(a + k + 1))

    scaled = summation(term, 0, math.inf)
    if scaled is None:
        return None
    return a * log_x - x - math.log(a) + math.log(scaled)


def _outside_domain(a: float, x: float) -> bool:
    return math.isnan(a) or math.isnan(x) or a <= 0 or x < 0


def ligamma(a: float, x: float) -> float:
    """
    Lower incomplete gamma function ``gamma(a) - uigamma(a, x)``.

    Evaluated as ``x^a e^-x / a * S`` with
    ``S = sum_k x^k * gamma(a + 1) / gamma(a + k + 1)``; the leading term of
    ``S`` is 1, so the series stop rule is relative, and terms are built in
    log space.

    Returns ``nan`` for ``a <= 0`` or ``x < 0``. When ``S`` overflows
    (``x`` beyond roughly 700) the result saturates to ``gamma(a)`` if
    ``x > a`` and is ``nan`` otherwise.
    """
    if _outside_domain(a, x):
        return math.nan
    if x == 0:
        return 0.0
    if math.isinf(x):
        return gamma(a)

    log_value = _log_ligamma(a, x)
    if log_value is None:
        return gamma(a) if x > a else math.nan
    return safe_exp(log_value)


def uigamma(a: float, x: float) -> float:
    """Upper incomplete gamma function ``gamma(a) - ligamma(a, x)``."""
    return gamma(a) - ligamma(a, x)


def regularized_ligamma(a: float, x: float) -> float:
    """
    Regularized lower incomplete gamma ``P(a, x) = ligamma(a, x) / gamma(a)``.

    Computed in log space, so it stays finite where ``gamma(a)`` overflows.
    """
    if _outside_domain(a, x):
        return math.nan
    if x == 0:
        return 0.0
    if math.isinf(x):
        return 1.0

    log_value = _log_ligamma(a, x)
    if log_value is None:
        return 1.0 if x > a else math.nan
    return min(1.0, safe_exp(log_value - lngamma(a)))


def regularized_uigamma(a: float, x: float) -> float:
    """Regularized upper incomplete gamma ``Q(a, x) = 1 - P(a, x)``."""
    return 1.0 - regularized_ligamma(a, x)


def digamma(n: float) -> float:
    """
    Digamma function, the first derivative of ``log(gamma(x))`` at ``n``.

    Returns ``inf`` for ``n <= 0`` and ``nan`` if differentiation fails.
    """
    if math.isnan(n):
        return math.nan
    if n <= 0:
        return math.inf

    def log_gamma(x: float) -> float:
        if x > 100:
            return lngamma(x)
        value = abs(gamma(x))
        return math.log(value) if value > 0 else -math.inf

    value = derivative(log_gamma, 1, n)
    return math.nan if value is None else value


def bessel_i(a: float, x: float) -> float:
    """
    Modified Bessel function of the first kind ``I_a(x)``.

    ``sum_k (x/2)^(2k + a) / (k! gamma(k + a + 1))``, with terms evaluated in
    log space. Negative integer orders use ``I_-n = I_n``; negative ``x`` is
    only defined for integer orders. Negative non-integer orders give ``nan``.
    """
    if math.isnan(a) or math.isnan(x):
        return math.nan
    if is_int(a) and a < 0:
        a = -a
    if x < 0:
        if not is_int(a):
            return math.nan
        value = bessel_i(a, -x)
        return -value if int(a) % 2 else value
    if x == 0:
        return 1.0 if a == 0 else 0.0
    if a < 0:
        return math.nan

    log_half = math.log(x / 2)

    def term(k: int) -> float:
        return safe_exp((2 * k + a) * log_half - lngamma(k + 1) - lngamma(k + a + 1))

    value = summation(term, 0, math.inf)
    return math.nan if value is None else value


def zeta(s: float) -> float:
    """
    Riemann zeta function.

    Finite head ``sum_{n<N} n^-s`` plus an Euler-Maclaurin tail with
    Bernoulli corrections. Undefined (``nan``) at the pole ``s = 1``.
    """
    if math.isnan(s) or s == 1:
        return math.nan

    n = _ZETA_HEAD
    head = summation(lambda k: safe_pow(k, -s), 1, n - 1)
    assert head is not None
    tail = safe_pow(n, 1 - s) / (s - 1) + safe_pow(n, -s) / 2

    for j, bernoulli in enumerate(_BERNOULLI_EVEN, start=1):
        rising = product(lambda i: s + i, 0, 2 * j - 2)
        assert rising is not None
        tail += bernoulli / factorial(2 * j) * rising * safe_pow(n, -s - 2 * j + 1)
    return head + tail


def polylogarithm(s: float, z: float) -> float:
    """
    Polylogarithm ``Li_s(z) = sum_{k>=1} z^k / k^s``.

    ``z = 1`` is ``zeta(s)`` and ``z = -1`` is ``-(1 - 2^(1-s)) zeta(s)``;
    the series diverges (``nan``) for ``|z| > 1``.
    """
    if math.isnan(s) or math.isnan(z) or abs(z) > 1:
        return math.nan
    if z == 1:
        return zeta(s)
    if z == -1:
        if s == 1:
            return -math.log(2)
        return -(1 - 2 ** (1 - s)) * zeta(s)
    if z == 0:
        return 0.0

    value = summation(lambda k: z**k / safe_pow(k, s), 1, math.inf)
    return math.nan if value is None else value


def sec(x: float) -> float:
    c = math.cos(x)
    return math.inf if c == 0 else 1 / c


def csc(x: float) -> float:
    s = math.sin(x)
    return math.inf if s == 0 else 1 / s


def cot(x: float) -> float:
    t = math.tan(x)
    return math.inf if t == 0 else 1 / t


def sech(x: float) -> float:
    return 1 / math.cosh(x) if abs(x) < 710 else 0.0


def csch(x: float) -> float:
    if x == 0:
        return math.inf
    return 1 / math.sinh(x) if abs(x) < 710 else 0.0


def coth(x: float) -> float:
    if x == 0:
        return math.inf
    return 1 / math.tanh(x)


__all__ = [
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
    "regularized_ligamma",
    "regularized_uigamma",
    "uigamma",
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
