"""xorshift1024* pseudorandom number generator.

64-bit output, 1024-bit state (sixteen 64-bit words plus a cursor).
Reference: Vigna, "An experimental exploration of Marsaglia's xorshift
generators, scrambled" (https://arxiv.org/abs/1402.6246).

Not cryptographically secure: the state can be recovered from 16
consecutive outputs. Not safe to share between threads either; give each
thread its own instance.

Instances cannot be copied or pickled. Two copies would emit identical
streams, so the only way to duplicate a stream is explicit: pass
``get_state()`` to a new generator or to ``set_seed``.
"""

from __future__ import annotations

from typing import Iterable, Optional

import numpy as np

from . import entropy, ranges
from .state import STATE_WORDS, StateVector
from .types import FLOAT64, INT64, UINT64, FloatFormat, IntWidth


class Xorshift1024Star:
    _MASK64 = 0xFFFFFFFFFFFFFFFF
    _MUL = 1181783497276652981

    def __init__(self, seed: Optional[Iterable[int]] = None) -> None:
        """Seed from ``seed`` (16 words) or, if omitted, from the entropy source.

        An all-zero seed is accepted and produces a constant zero stream.
        """
        if seed is None:
            seed = entropy.draw_seed()
        self._state = StateVector.from_seed(seed)

    def set_seed(self, seed: Iterable[int]) -> None:
        self._state.reseed(seed)

    def get_state(self) -> list[int]:
        """Snapshot of the 16 words, in the order ``set_seed`` accepts."""
        return self._state.snapshot()

    def next_u64(self) -> int:
        words = self._state.words
        s0 = words[self._state.cursor]
        self._state.cursor = (self._state.cursor + 1) & (STATE_WORDS - 1)
        s1 = words[self._state.cursor]
        s1 ^= (s1 << 31) & self._MASK64
        s1 ^= s1 >> 11
        s0 ^= s0 >> 30
        words[self._state.cursor] = s0 ^ s1
        return (words[self._state.cursor] * self._MUL) & self._MASK64

    def fill_u64(self, count: int) -> np.ndarray:
        """The next ``count`` raw words as a uint64 array."""
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        return np.fromiter(
            (self.next_u64() for _ in range(count)), dtype=np.uint64, count=count
        )

    # --- integers ---

    def next_bounded_u64(self, max_inclusive: int) -> int:
        """Uniform integer in [0, max_inclusive]; max_inclusive must be nonzero."""
        return ranges.bounded_u64(self, max_inclusive)

    def next_int(
        self, lo: int, hi: int, width: Optional[IntWidth] = None
    ) -> int:
        """Uniform integer in [lo, hi] inclusive; requires lo < hi."""
        return ranges.int_in_range(self, lo, hi, width)

    def next_uint(self, max_value: int, width: IntWidth = UINT64) -> int:
        """Uniform integer in [0, max_value] inclusive; max_value must be nonzero."""
        return ranges.uint_up_to(self, max_value, width)

    def next_raw_int(self, width: IntWidth = INT64) -> int:
        return ranges.raw_int(self, width)

    # --- floats ---

    def next_unit(self, fmt: FloatFormat = FLOAT64) -> np.floating:
        """Uniform value in [0, 1) as a numpy scalar of ``fmt``."""
        return ranges.unit_float(self, fmt)

    def next_float(self) -> float:
        """Uniform float in [0, 1)."""
        return float(ranges.unit_float(self, FLOAT64))

    def next_float_up_to(
        self, max_value, fmt: FloatFormat = FLOAT64
    ) -> np.floating:
        return ranges.float_up_to(self, max_value, fmt)

    def next_float_in_range(
        self, lo, hi, fmt: FloatFormat = FLOAT64
    ) -> np.floating:
        """Uniform value between lo and hi, which may come in either order."""
        return ranges.float_in_range(self, lo, hi, fmt)

    # --- ownership ---

    def __copy__(self):
        raise TypeError(
            f"{type(self).__name__} cannot be copied; "
            "seed a new instance from get_state() instead"
        )

    def __deepcopy__(self, memo):
        return self.__copy__()

    def __reduce_ex__(self, protocol):
        raise TypeError(
            f"{type(self).__name__} cannot be pickled; persist get_state() instead"
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(cursor={self._state.cursor})"
