"""Process-wide entropy source for default-constructed generators.

Lifecycle:
  - The ``EntropySource`` singleton is created lazily on first use by
    ``get_entropy_source()`` and lives for the rest of the process.
  - Each ``draw_seed()`` holds the source's lock only while reading the
    1024 bits of a seed. The lock guards the reader, never a generator's
    state, and is released before the seed is handed back.

The default reader is ``secrets.token_bytes`` (the OS CSPRNG). Another
reader can be installed with ``set_entropy_reader``; it is called as
``reader(n_bytes)`` and must return exactly ``n_bytes`` bytes.

Failures are never retried or papered over with weaker entropy: an OS-level
error, a short read, or an all-zero seed raises ``EntropyError``.
"""

from __future__ import annotations

import logging
import secrets
import threading
from typing import Callable, Optional

from .state import STATE_WORDS

logger = logging.getLogger(__name__)

WORD_BYTES = 8
SEED_BYTES = STATE_WORDS * WORD_BYTES

EntropyReader = Callable[[int], bytes]


class EntropyError(RuntimeError):
    """The entropy source could not supply a usable seed."""


class EntropySource:
    def __init__(self, reader: Optional[EntropyReader] = None) -> None:
        self._reader: EntropyReader = reader or secrets.token_bytes
        self._lock = threading.Lock()

    def set_reader(self, reader: Optional[EntropyReader]) -> None:
        with self._lock:
            installed = reader or secrets.token_bytes
            self._reader = installed
        logger.debug(
            "Entropy reader set to %s",
            getattr(installed, "__qualname__", repr(installed)),
        )

    def draw_seed(self) -> list[int]:
        """Read 16 words from the reader. Serialized across threads."""
        with self._lock:
            try:
                raw = self._reader(SEED_BYTES)
            except (OSError, NotImplementedError) as e:
                raise EntropyError(f"Entropy source failed: {e}") from e

        if len(raw) != SEED_BYTES:
            raise EntropyError(
                f"Entropy source returned {len(raw)} bytes, expected {SEED_BYTES}"
            )
        words = [
            int.from_bytes(raw[i : i + WORD_BYTES], "little")
            for i in range(0, SEED_BYTES, WORD_BYTES)
        ]
        if not any(words):
            raise EntropyError("Entropy source returned an all-zero seed")
        return words


_SOURCE: Optional[EntropySource] = None
_SOURCE_LOCK = threading.Lock()


def get_entropy_source() -> EntropySource:
    """Return the process-wide source, creating it on first call."""
    global _SOURCE
    if _SOURCE is None:
        with _SOURCE_LOCK:
            if _SOURCE is None:
                _SOURCE = EntropySource()
                logger.debug("Initialized process-wide entropy source")
    return _SOURCE


def set_entropy_reader(reader: Optional[EntropyReader]) -> None:
    """Install ``reader`` for all future default constructions.

    ``None`` restores ``secrets.token_bytes``.
    """
    get_entropy_source().set_reader(reader)


def draw_seed() -> list[int]:
    return get_entropy_source().draw_seed()
