"""The 1024-bit generator state: sixteen 64-bit words and a rotating cursor.

The word order is the checkpoint order: ``snapshot()`` returns the words in
the same order ``from_seed()`` accepts them, so a snapshot fed back in
reproduces the stream from that point on. Right after seeding the snapshot
is the seed itself.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass, field
from typing import Iterable

from .types import U64_MAX

STATE_WORDS = 16


def validate_seed(seed: Iterable[int]) -> list[int]:
    """Return ``seed`` as a fresh list of 16 ints, or raise ValueError.

    An all-zero seed is accepted; it is a fixed point of the transform and
    yields a constant zero stream.
    """
    words = list(seed)
    if len(words) != STATE_WORDS:
        raise ValueError(
            f"Seed must have exactly {STATE_WORDS} words, got {len(words)}"
        )
    for i, w in enumerate(words):
        try:
            w = operator.index(w)
        except TypeError:
            raise ValueError(f"Seed word {i} is not an integer: {w!r}") from None
        words[i] = w
        if not 0 <= w <= U64_MAX:
            raise ValueError(f"Seed word {i} is outside [0, 2**64): {w:#x}")
    return words


@dataclass
class StateVector:
    words: list[int] = field(default_factory=lambda: [0] * STATE_WORDS)
    cursor: int = 0

    @staticmethod
    def from_seed(seed: Iterable[int]) -> StateVector:
        return StateVector(words=validate_seed(seed), cursor=0)

    def reseed(self, seed: Iterable[int]) -> None:
        """Replace the words in place and rewind the cursor."""
        self.words = validate_seed(seed)
        self.cursor = 0

    def snapshot(self) -> list[int]:
        # The transform only reads slots cursor and cursor + 1, so rotating
        # the cursor slot to the front gives a seed that resumes this stream.
        return self.words[self.cursor :] + self.words[: self.cursor]
