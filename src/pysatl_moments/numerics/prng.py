"""
WELL19937c Pseudo-Random Generator
==================================

A reproducible uniform generator independent of the platform's random source.

- :class:`WELL19937c` — 624-word WELL generator with Matsumoto-Kurita
  tempering, seeded from a 32-bit integer or a sequence of words.
- :func:`random` / :func:`seed` — module-level helpers backed by a lazily
  created default generator.

Notes
-----
Each instance owns its state and mutates it on every draw; callers sharing
one instance across threads must synchronise externally.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import time
from typing import TYPE_CHECKING, overload

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Sequence

    from numpy.typing import NDArray

    type Seed = int | Sequence[int] | None

_R = 624
_M1 = 70
_M2 = 179
_M3 = 449

_MASK32 = 0xFFFFFFFF
_MASKU = 0x7FFFFFFF
_MASKL = 0x80000000

_TEMPER_B = 0xE46E1700
_TEMPER_C = 0x9B868000

_TWO_POW_MINUS_32 = 2.0**-32


def _expand_seed(value: int) -> list[int]:
    state = [value & _MASK32]
    for i in range(1, _R):
        prev = state[i - 1]
        state.append((1812433253 * (prev ^ (prev >> 30)) + i) & _MASK32)
    return state


def _mix_seed_array(key: Sequence[int]) -> list[int]:
    state = _expand_seed(19650218)
    i, j = 1, 0
    for _ in range(max(_R, len(key))):
        prev = state[i - 1]
        state[i] = ((state[i] ^ ((prev ^ (prev >> 30)) * 1664525)) + key[j] + j) & _MASK32
        i += 1
        j += 1
        if i >= _R:
            state[0] = state[_R - 1]
            i = 1
        if j >= len(key):
            j = 0
    for _ in range(_R - 1):
        prev = state[i - 1]
        state[i] = ((state[i] ^ ((prev ^ (prev >> 30)) * 1566083941)) - i) & _MASK32
        i += 1
        if i >= _R:
            state[0] = state[_R - 1]
            i = 1
    state[0] = _MASKL
    return state


class WELL19937c:
    """
    WELL19937c generator producing floats in ``[0, 1)``.

    Parameters
    ----------
    seed : int or Sequence[int] or None, optional
        A 32-bit integer (expanded with the MT19937 linear-congruential
        recurrence), a sequence of 32-bit words (exactly 624 words are used
        verbatim as the state, other lengths are mixed in), or ``None`` to
        seed from the clock.

    Raises
    ------
    ValueError
        If the seed sequence is empty or yields an all-zero state.
    """

    __slots__ = ("_state", "_index")

    def __init__(self, seed: Seed = None) -> None:
        self._state: list[int] = []
        self._index = 0
        self.seed(seed)

    def seed(self, value: Seed = None) -> None:
        """Replace the state deterministically from ``value``."""
        if value is None:
            value = time.time_ns() & _MASK32

        if isinstance(value, int | np.integer):
            state = _expand_seed(int(value))
        else:
            words = [int(w) & _MASK32 for w in value]
            if not words:
                raise ValueError("Seed sequence must not be empty")
            state = words if len(words) == _R else _mix_seed_array(words)

        if not any(state):
            raise ValueError("Seed produced an all-zero generator state")

        self._state = state
        self._index = 0

    def next_uint32(self) -> int:
        """Advance the generator and return the next tempered 32-bit word."""
        s = self._state
        i = self._index

        v_m1 = s[(i + _M1) % _R]
        v_m2 = s[(i + _M2) % _R]
        v_m3 = s[(i + _M3) % _R]
        i_minus_1 = (i + _R - 1) % _R
        i_minus_2 = (i + _R - 2) % _R

        z0 = (s[i_minus_1] & _MASKL) | (s[i_minus_2] & _MASKU)
        z1 = (s[i] ^ (s[i] << 25)) ^ (v_m1 ^ (v_m1 >> 27))
        z2 = (v_m2 >> 9) ^ (v_m3 ^ (v_m3 >> 1))
        z1 &= _MASK32
        z2 &= _MASK32

        new_v1 = z1 ^ z2
        s[i] = new_v1
        s[i_minus_1] = (
            z0 ^ (z1 ^ (z1 << 9)) ^ (z2 ^ (z2 << 21)) ^ (new_v1 ^ (new_v1 >> 21))
        ) & _MASK32
        self._index = i_minus_1

        y = s[i_minus_1]
        y ^= (y << 7) & _TEMPER_B
        y ^= (y << 15) & _TEMPER_C
        return y & _MASK32

    @overload
    def random(self, size: None = None) -> float: ...
    @overload
    def random(self, size: int) -> NDArray[np.float64]: ...

    def random(self, size: int | None = None) -> float | NDArray[np.float64]:
        """
        Draw uniform float(s) in ``[0, 1)``.

        Parameters
        ----------
        size : int, optional
            Number of draws. If omitted a single float is returned.

        Returns
        -------
        float or NDArray[np.float64]
            The draw(s), each a 32-bit word divided by ``2**32``.
        """
        if size is None:
            return self.next_uint32() * _TWO_POW_MINUS_32
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        words = np.fromiter((self.next_uint32() for _ in range(size)), dtype=np.uint64, count=size)
        return words.astype(np.float64) * _TWO_POW_MINUS_32


_default_generator: WELL19937c | None = None


def default_generator() -> WELL19937c:
    """Return the module-level generator, creating it on first use."""
    global _default_generator
    if _default_generator is None:
        _default_generator = WELL19937c()
    return _default_generator


def seed(value: Seed = None) -> None:
    """Reseed the module-level generator."""
    default_generator().seed(value)


def random() -> float:
    """Draw a float in ``[0, 1)`` from the module-level generator."""
    return default_generator().next_uint32() * _TWO_POW_MINUS_32


__all__ = [
    "WELL19937c",
    "default_generator",
    "seed",
    "random",
]
