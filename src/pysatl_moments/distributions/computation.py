"""
Computation Primitives
======================

Scalar characteristics of a distribution come in two flavours:

- :class:`AnalyticalComputation` is a closed-form function a family binds
  to concrete parameters;
- :class:`FittedComputationMethod` is derived numerically from other
  characteristics, e.g. a cdf accumulated from the family's own pdf.

A :class:`ComputationMethod` knows which characteristics it reads and how to
fit a :class:`FittedComputationMethod` for one distribution.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from mypy_extensions import KwArg

from pysatl_moments.types import GenericCharacteristicName

if TYPE_CHECKING:
    from pysatl_moments.distributions.distribution import Distribution


@dataclass(frozen=True, slots=True)
class AnalyticalComputation[In, Out]:
    """
    Closed-form characteristic bound to concrete parameters.

    Parameters
    ----------
    target : str
        Characteristic it evaluates (``"pdf"``, ``"cdf"`` or ``"mgf"``).
    func : Callable[[In, KwArg(Any)], Out]
        The bound function.
    """

    target: GenericCharacteristicName
    func: Callable[[In, KwArg(Any)], Out]

    def __call__(self, x: In, **options: Any) -> Out:
        return self.func(x, **options)


@dataclass(frozen=True, slots=True)
class FittedComputationMethod[In, Out]:
    """
    Characteristic derived numerically for one distribution.

    Parameters
    ----------
    target : str
        Characteristic it evaluates.
    sources : Sequence[str]
        Analytical characteristics it was derived from.
    func : Callable[[In, KwArg(Any)], Out]
        The derived function.
    """

    target: GenericCharacteristicName
    sources: Sequence[GenericCharacteristicName]
    func: Callable[[In, KwArg(Any)], Out]

    def __call__(self, x: In, **options: Any) -> Out:
        return self.func(x, **options)


@dataclass(frozen=True, slots=True)
class ComputationMethod[In, Out]:
    """
    Recipe deriving ``target`` from ``sources``.

    Parameters
    ----------
    target : str
        Characteristic produced.
    sources : Sequence[str]
        Analytical characteristics the distribution must provide.
    fitter : Callable[[Distribution, KwArg(Any)], FittedComputationMethod]
        Builds the derived callable for one distribution.
    """

    target: GenericCharacteristicName
    sources: Sequence[GenericCharacteristicName]
    fitter: Callable[["Distribution", KwArg(Any)], FittedComputationMethod[In, Out]]

    def fit(self, distribution: "Distribution", **options: Any) -> FittedComputationMethod[In, Out]:
        return self.fitter(distribution, **options)


type Method[In, Out] = AnalyticalComputation[In, Out] | FittedComputationMethod[In, Out]


__all__ = [
    "AnalyticalComputation",
    "FittedComputationMethod",
    "ComputationMethod",
    "Method",
]
