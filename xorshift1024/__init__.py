"""xorshift1024* random number engine with unbiased range mapping."""

from .entropy import EntropyError, set_entropy_reader
from .prng import Xorshift1024Star
from .source import RandomSource
from .state_io import load_state, save_state
from .types import (
    FLOAT16,
    FLOAT32,
    FLOAT64,
    INT8,
    INT16,
    INT32,
    INT64,
    LONGDOUBLE,
    UINT8,
    UINT16,
    UINT32,
    UINT64,
    FloatFormat,
    IntWidth,
)

__all__ = [
    "EntropyError",
    "FLOAT16",
    "FLOAT32",
    "FLOAT64",
    "FloatFormat",
    "INT8",
    "INT16",
    "INT32",
    "INT64",
    "IntWidth",
    "LONGDOUBLE",
    "RandomSource",
    "UINT8",
    "UINT16",
    "UINT32",
    "UINT64",
    "Xorshift1024Star",
    "load_state",
    "save_state",
    "set_entropy_reader",
]
