from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import pytest

from pysatl_moments.config import DEFAULT_NUMERICS_CONFIG, NumericsConfig


def test_defaults() -> None:
    cfg = DEFAULT_NUMERICS_CONFIG
    assert cfg.series_tolerance == 1e-12
    assert cfg.derivative_initial_step == 0.01
    assert cfg.derivative_max_iterations == 99_999
    assert cfg.moment_precision == 3
    assert cfg.density_epsilon == 1e-5
    assert cfg.step_divisor == 100.0
    assert cfg.fallback_step == 0.01


def test_as_dict_round_trips_through_the_constructor() -> None:
    cfg = NumericsConfig(moment_precision=6, cdf_subintervals=50)
    assert NumericsConfig(**cfg.as_dict()) == cfg


@pytest.mark.parametrize(
    "kwargs, message",
    [
        ({"series_tolerance": 0.0}, "series_tolerance > 0"),
        ({"fallback_step": -1.0}, "fallback_step > 0"),
        ({"walk_max_steps": 0}, "walk_max_steps >= 1"),
        ({"cdf_subintervals": 0}, "cdf_subintervals >= 1"),
        ({"moment_precision": -1}, "moment_precision >= 0"),
    ],
)
def test_invalid_settings(kwargs: dict[str, float], message: str) -> None:
    with pytest.raises(ValueError, match=message):
        NumericsConfig(**kwargs)  # type: ignore[arg-type]


def test_frozen() -> None:
    with pytest.raises(AttributeError):
        DEFAULT_NUMERICS_CONFIG.cdf_subintervals = 10  # type: ignore[misc]
