"""
Computation Strategies
======================

- :class:`ComputationStrategy` — resolves characteristic methods.
- :class:`DefaultComputationStrategy` — returns analytical computations when
  the family provides them and otherwise fits a conversion from the family's
  own density (optionally caching the fitted result).
"""

__author__ = "Leonid Elkin, Mikhail, Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Any, Protocol

from pysatl_moments.distributions.computation import (
    ComputationMethod,
    FittedComputationMethod,
    Method,
)
from pysatl_moments.distributions.fitters import fit_pdf_to_cdf_1C, fit_pdf_to_cdf_1D
from pysatl_moments.types import CharacteristicName, GenericCharacteristicName, Kind

if TYPE_CHECKING:
    from .distribution import Distribution


FITTERS: dict[tuple[GenericCharacteristicName, Kind], ComputationMethod[float, float]] = {
    (CharacteristicName.CDF, Kind.CONTINUOUS): ComputationMethod[float, float](
        target=CharacteristicName.CDF, sources=[CharacteristicName.PDF], fitter=fit_pdf_to_cdf_1C
    ),
    (CharacteristicName.CDF, Kind.DISCRETE): ComputationMethod[float, float](
        target=CharacteristicName.CDF, sources=[CharacteristicName.PDF], fitter=fit_pdf_to_cdf_1D
    ),
}
"""Conversions available for characteristics without a closed form."""


class ComputationStrategy(Protocol):
    """Protocol for characteristic resolution strategies."""

    enable_caching: bool

    def query_method(
        self, state: GenericCharacteristicName, distr: "Distribution", **options: Any
    ) -> Method[Any, Any]: ...


class DefaultComputationStrategy:
    """
    Default characteristic resolver.

    Resolution order
    ----------------
    1. If the distribution provides an analytical implementation, return it.
    2. Else, if caching is enabled and the method is cached, return it.
    3. Else fit the conversion registered for ``(state, distr.kind)``; every
       registered conversion is grounded on the analytical ``pdf``.

    Parameters
    ----------
    enable_caching : bool, default False
        If ``True``, cache fitted conversions per distribution and target.

    Raises
    ------
    RuntimeError
        If the distribution has no analytical ``pdf`` to ground the
        conversion, or no conversion to ``state`` exists.
    """

    def __init__(self, enable_caching: bool = False) -> None:
        self.enable_caching = enable_caching
        self._cache: dict[tuple[int, GenericCharacteristicName], FittedComputationMethod[Any, Any]]
        self._cache = {}

    def query_method(
        self, state: GenericCharacteristicName, distr: "Distribution", **options: Any
    ) -> Method[Any, Any]:
        """
        Resolve an analytical or fitted method for ``state``.

        Parameters
        ----------
        state : str
            Target characteristic name to resolve.
        distr : Distribution
            The distribution providing the analytical base and kind.
        **options
            Passed to the fitter when a conversion is required.

        Returns
        -------
        Method
            Analytical or fitted callable implementing ``state``.
        """
        if state in distr.analytical_computations:
            return distr.analytical_computations[state]

        key = (id(distr), state)
        if self.enable_caching:
            cached = self._cache.get(key)
            if cached is not None:
                return cached

        method = FITTERS.get((state, distr.kind))
        if method is None:
            raise RuntimeError(
                f"No analytical '{state}' and no conversion for {distr.kind} distributions."
            )
        if not all(src in distr.analytical_computations for src in method.sources):
            raise RuntimeError(
                f"Distribution provides no analytical {list(method.sources)} to fit '{state}'."
            )

        fitted = method.fit(distr, **options)
        if self.enable_caching:
            self._cache[key] = fitted
        return fitted


__all__ = [
    "FITTERS",
    "ComputationStrategy",
    "DefaultComputationStrategy",
]
