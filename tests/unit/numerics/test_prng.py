from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest

from pysatl_moments import numerics
from pysatl_moments.numerics.prng import WELL19937c


class TestWELL19937c:
    def test_same_seed_same_stream(self) -> None:
        a = WELL19937c(12345)
        b = WELL19937c(12345)
        assert [a.random() for _ in range(100)] == [b.random() for _ in range(100)]

    def test_different_seeds_differ(self) -> None:
        assert WELL19937c(1).random(10).tolist() != WELL19937c(2).random(10).tolist()

    def test_values_in_unit_interval(self) -> None:
        values = WELL19937c(7).random(5000)
        assert values.shape == (5000,)
        assert np.all(values >= 0.0)
        assert np.all(values < 1.0)
        assert abs(values.mean() - 0.5) < 0.02

    def test_sized_draw_continues_the_scalar_stream(self) -> None:
        scalar = WELL19937c(2024)
        expected = [scalar.random() for _ in range(8)]
        drawn = WELL19937c(2024).random(8)
        assert drawn.dtype == np.float64
        assert drawn.tolist() == expected
        assert WELL19937c(1).random(0).shape == (0,)

    def test_reseed_restarts_the_stream(self) -> None:
        gen = WELL19937c(99)
        first = gen.random(20)
        gen.seed(99)
        np.testing.assert_array_equal(gen.random(20), first)

    def test_full_state_is_used_verbatim(self) -> None:
        words = list(range(1, 625))
        a = WELL19937c(words)
        b = WELL19937c(words)
        assert a.next_uint32() == b.next_uint32()
        assert a.next_uint32() != WELL19937c(words[:100]).next_uint32()

    def test_numpy_integer_seed(self) -> None:
        assert WELL19937c(np.int64(5)).random() == WELL19937c(5).random()

    def test_words_are_32_bit(self) -> None:
        gen = WELL19937c(3)
        assert all(0 <= gen.next_uint32() < 2**32 for _ in range(1000))

    def test_all_zero_state_rejected(self) -> None:
        with pytest.raises(ValueError, match="all-zero"):
            WELL19937c([0] * 624)

    def test_empty_sequence_rejected(self) -> None:
        with pytest.raises(ValueError, match="empty"):
            WELL19937c([])

    def test_negative_size_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            WELL19937c(1).random(-1)


def test_module_level_generator_is_reproducible() -> None:
    numerics.seed(2024)
    first = [numerics.random() for _ in range(5)]
    numerics.seed(2024)
    assert [numerics.random() for _ in range(5)] == first
    assert all(0.0 <= x < 1.0 for x in first)
