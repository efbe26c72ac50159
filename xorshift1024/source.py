"""Capability interface shared by the engine and its test doubles.

The range mapper in ``ranges.py`` only ever talks to a ``RandomSource``, so a
scripted double can stand in for ``Xorshift1024Star`` when a test needs to
control the exact raw words a draw sees.
"""

from __future__ import annotations

from typing import Iterable, Protocol


class RandomSource(Protocol):
    def next_u64(self) -> int:
        """One raw 64-bit word. Advances state by exactly one step."""
        ...

    def next_bounded_u64(self, max_inclusive: int) -> int:
        """Uniform integer in [0, max_inclusive]; max_inclusive must be nonzero."""
        ...

    def set_seed(self, seed: Iterable[int]) -> None:
        ...

    def get_state(self) -> list[int]:
        ...
