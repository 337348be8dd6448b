"""
Registry of distribution families.

Maps distribution names to their :class:`ParametricFamily`. The registry is
an ordinary object that is passed explicitly to the density sampler; a
shared, lazily configured instance is available through
:func:`pysatl_moments.families.configuration.configure_families_register`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

    from pysatl_moments.families.parametric_family import ParametricFamily


class DistributionRegistry:
    """Lookup table from distribution names to parametric families."""

    def __init__(self) -> None:
        self._registered_families: dict[str, ParametricFamily] = {}

    def get(self, name: str) -> ParametricFamily:
        """
        Retrieve a family by name.

        Raises
        ------
        ValueError
            If no family with the given name exists.
        """
        if name not in self._registered_families:
            raise ValueError(f"No family {name} found in register")
        return self._registered_families[name]

    def register(self, family: ParametricFamily) -> None:
        """
        Register a new family.

        Raises
        ------
        ValueError
            If a family with the same name is already registered.
        """
        if family.name in self._registered_families:
            raise ValueError(f"Family {family.name} already found in register")
        self._registered_families[family.name] = family

    def contains(self, name: str) -> bool:
        return name in self._registered_families

    def names(self) -> list[str]:
        """Registered names in registration order."""
        return list(self._registered_families)

    def __contains__(self, name: object) -> bool:
        return name in self._registered_families

    def __iter__(self) -> Iterator[ParametricFamily]:
        return iter(self._registered_families.values())

    def __len__(self) -> int:
        return len(self._registered_families)
