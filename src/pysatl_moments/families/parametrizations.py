"""
Parametrizations of distribution families.

A parametrization is a frozen dataclass holding one set of parameter values
together with the constraints those values must satisfy. Alternative
parametrizations (e.g. rate vs. scale) convert themselves to the family's
base parametrization, which is the one the characteristic functions read.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from abc import ABC
from dataclasses import dataclass, fields, is_dataclass
from functools import wraps
from inspect import isfunction
from numbers import Real
from typing import TYPE_CHECKING, ParamSpec

from pysatl_moments.types import ParametrizationName

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping
    from typing import Any, ClassVar

    from pysatl_moments.families.parametric_family import ParametricFamily


@dataclass(slots=True, frozen=True)
class ParametrizationConstraint:
    """
    Constraint on parameter values of a parametrization.

    Parameters
    ----------
    description : str
        Human-readable description, reported when the constraint fails.
    check : Callable[[Any], bool]
        Predicate over the parametrization instance.
    """

    description: str
    check: Callable[[Any], bool]


class Parametrization(ABC):
    """
    Base class for distribution parametrizations.

    Subclasses are turned into frozen dataclasses by :func:`parametrization`,
    which also attaches the owning family and collects ``@constraint`` methods.
    """

    # Set by the @parametrization decorator
    __family__: ClassVar[ParametricFamily]
    __param_name__: ClassVar[ParametrizationName]

    _constraints: ClassVar[list[ParametrizationConstraint]] = []

    @property
    def name(self) -> str:
        """Name of this parametrization within its family."""
        return self.__class__.__param_name__

    @property
    def parameters(self) -> dict[str, Any]:
        """Parameter values keyed by field name."""
        return {f.name: getattr(self, f.name) for f in fields(self)}  # type: ignore[arg-type]

    @property
    def constraints(self) -> list[ParametrizationConstraint]:
        return self._constraints

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> Parametrization:
        """
        Build a parametrization from a ``name -> value`` mapping.

        Raises
        ------
        TypeError
            If a parameter is missing or unknown.
        """
        expected = {f.name for f in fields(cls)}  # type: ignore[arg-type]
        unknown = set(values) - expected
        missing = expected - set(values)
        if unknown or missing:
            raise TypeError(
                f"Parametrization '{cls.__param_name__}' expects {sorted(expected)}; "
                f"missing {sorted(missing)}, unknown {sorted(unknown)}"
            )
        return cls(**values)

    def validate(self) -> None:
        """
        Check that every parameter is a finite real and every constraint holds.

        Raises
        ------
        ValueError
            If a parameter is not a finite real number or a constraint fails.
        """
        for key, value in self.parameters.items():
            if isinstance(value, bool) or not isinstance(value, Real) or not math.isfinite(value):
                raise ValueError(f"Parameter '{key}' must be a finite real number, got {value!r}")
        for constraint in self._constraints:
            if not constraint.check(self):
                raise ValueError(f'Constraint "{constraint.description}" does not hold')

    def transform_to_base_parametrization(self) -> Parametrization:
        """
        Convert to the family's base parametrization.

        The base parametrization returns itself; alternatives override this.
        """
        return self


P = ParamSpec("P")


def constraint(description: str) -> Callable[[Callable[P, bool]], Callable[P, bool]]:
    """
    Mark an instance method as a parameter constraint.

    Parameters
    ----------
    description : str
        Human-readable description, used in the validation error.

    Notes
    -----
    The decorated function must be a predicate. The marker attributes
    ``__is_constraint`` and ``__constraint_description`` are read by
    :func:`parametrization`.
    """

    def decorator(func: Callable[P, bool]) -> Callable[P, bool]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> bool:
            return func(*args, **kwargs)

        setattr(wrapper, "__is_constraint", True)
        setattr(wrapper, "__constraint_description", description)
        return wrapper

    return decorator


def _collect_constraints(cls: type[Parametrization]) -> list[ParametrizationConstraint]:
    collected: list[ParametrizationConstraint] = []
    for attr_name, attr in cls.__dict__.items():
        if isinstance(attr, staticmethod | classmethod):
            if getattr(attr.__func__, "__is_constraint", False):
                raise TypeError(f"@constraint '{attr_name}' must be an instance method")
            continue
        if not isfunction(attr) or not getattr(attr, "__is_constraint", False):
            continue
        desc = getattr(attr, "__constraint_description", attr.__name__)
        collected.append(ParametrizationConstraint(description=desc, check=attr))
    return collected


def parametrization(
    *,
    family: ParametricFamily,
    name: str,
) -> Callable[[type[Parametrization]], type[Parametrization]]:
    """
    Register a class as a parametrization of ``family``.

    The class is converted to a frozen, slotted dataclass if it is not a
    dataclass already, and its ``@constraint`` methods are collected.
    """

    def decorator(cls: type[Parametrization]) -> type[Parametrization]:
        if not is_dataclass(cls):
            cls = dataclass(slots=True, frozen=True)(cls)

        cls.__family__ = family
        cls.__param_name__ = name
        cls._constraints = _collect_constraints(cls)

        family.register_parametrization(name, cls)
        return cls

    return decorator


__all__ = [
    "ParametrizationConstraint",
    "Parametrization",
    "constraint",
    "parametrization",
]
