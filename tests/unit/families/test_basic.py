from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from pysatl_moments.families import ParametricFamily, Parametrization, constraint
from pysatl_moments.types import Bounds, CharacteristicName, GenericCharacteristicName, Kind


class TestBaseFamily:
    PDF: GenericCharacteristicName = CharacteristicName.PDF
    CDF: GenericCharacteristicName = CharacteristicName.CDF
    MGF: GenericCharacteristicName = CharacteristicName.MGF

    def make_default_family(
        self,
        distr_characteristics: dict[GenericCharacteristicName, dict[str, object]] | None = None,
        name: str = "Default",
    ) -> ParametricFamily:
        """Family of uniform densities on ``[0, width]`` with a ``width``/``rate`` pair."""
        if distr_characteristics is None:
            distr_characteristics = {
                self.PDF: {"base": lambda p, x: 1.0 / p.width if 0.0 <= x <= p.width else 0.0},
                self.CDF: {
                    "alt": lambda p, x: min(max(x * p.rate, 0.0), 1.0),
                    "base": lambda p, x: min(max(x / p.width, 0.0), 1.0),
                },
            }
        fam = ParametricFamily(
            name=name,
            kind=Kind.CONTINUOUS,
            distr_parametrizations=["base", "alt"],
            distr_characteristics=distr_characteristics,  # type: ignore[arg-type]
            bounds_by_parametrization=lambda p: Bounds(lower=0.0, upper=p.width),  # type: ignore
        )

        @fam.parametrization(name="base")
        class Base(Parametrization):
            width: float

            @constraint(description="width > 0")
            def check_width_positive(self) -> bool:
                return self.width > 0

        @fam.parametrization(name="alt")
        class Alt(Parametrization):
            rate: float

            @constraint(description="rate > 0")
            def check_rate_positive(self) -> bool:
                return self.rate > 0

            def transform_to_base_parametrization(self) -> Parametrization:
                return Base(width=1.0 / self.rate)  # type: ignore[call-arg]

        return fam
