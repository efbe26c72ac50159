"""Save and load generator state checkpoints as JSON.

A checkpoint is the 16-word snapshot from ``get_state()``, stored as
zero-padded hex strings so 64-bit values survive JSON readers that parse
numbers as doubles::

    {"format": "xorshift1024star", "words": ["0x374be26ee31f1e78", ...]}

Loading a checkpoint and passing it to ``Xorshift1024Star(...)`` or
``set_seed`` reproduces the stream from the point the snapshot was taken.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable

from .state import validate_seed

logger = logging.getLogger(__name__)

FORMAT_NAME = "xorshift1024star"


def state_to_dict(words: Iterable[int]) -> dict:
    return {
        "format": FORMAT_NAME,
        "words": [f"{w:#018x}" for w in validate_seed(words)],
    }


def state_from_dict(d: dict) -> list[int]:
    """Parse a checkpoint dict. Raises ValueError if it is malformed."""
    fmt = d.get("format")
    if fmt != FORMAT_NAME:
        raise ValueError(
            f"Unsupported state format {fmt!r}, expected {FORMAT_NAME!r}"
        )
    raw = d.get("words")
    if not isinstance(raw, list):
        raise ValueError("State checkpoint is missing its 'words' list")
    try:
        words = [int(w, 16) for w in raw]
    except (TypeError, ValueError) as e:
        raise ValueError(f"State checkpoint has a non-hex word: {e}") from e
    return validate_seed(words)


def save_state(words: Iterable[int], path: Path) -> None:
    """Write a checkpoint to ``path``, creating parent directories."""
    path = Path(path)
    data = state_to_dict(words)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(data, f, indent=2)
        f.write("\n")
    logger.debug("Saved generator state to %s", path)


def load_state(path: Path) -> list[int]:
    with open(path) as f:
        data = json.load(f)
    words = state_from_dict(data)
    logger.debug("Loaded generator state from %s", path)
    return words
