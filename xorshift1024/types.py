"""Numeric width descriptors used by the range mapper.

Python integers are unbounded and Python floats are always doubles, so the
target type of a draw is passed around as a value rather than a type:

  - ``IntWidth`` describes a fixed-width integer (bit count + signedness).
  - ``FloatFormat`` describes a binary floating-point type through its numpy
    dtype, machine epsilon and mantissa digit count.

The module-level constants cover the widths callers normally want.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

U64_MAX = 0xFFFFFFFFFFFFFFFF
WORD_BITS = 64


@dataclass(frozen=True)
class IntWidth:
    bits: int
    signed: bool

    def __post_init__(self) -> None:
        if not 1 <= self.bits <= WORD_BITS:
            raise ValueError(
                f"Integer width must be between 1 and {WORD_BITS} bits, got {self.bits}"
            )

    @property
    def mask(self) -> int:
        return (1 << self.bits) - 1

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        if self.signed:
            return (1 << (self.bits - 1)) - 1
        return self.mask

    @property
    def name(self) -> str:
        return f"{'int' if self.signed else 'uint'}{self.bits}"

    def fits(self, value: int) -> bool:
        return self.min_value <= value <= self.max_value

    def wrap(self, word: int) -> int:
        """Narrow a raw word to this width, reinterpreting as two's complement."""
        value = word & self.mask
        if self.signed and value > self.max_value:
            value -= 1 << self.bits
        return value


INT8 = IntWidth(8, signed=True)
UINT8 = IntWidth(8, signed=False)
INT16 = IntWidth(16, signed=True)
UINT16 = IntWidth(16, signed=False)
INT32 = IntWidth(32, signed=True)
UINT32 = IntWidth(32, signed=False)
INT64 = IntWidth(64, signed=True)
UINT64 = IntWidth(64, signed=False)


@dataclass(frozen=True)
class FloatFormat:
    """A binary floating-point format the unit draw can be shaped to.

    ``digits`` counts the mantissa including the implicit leading bit (the
    C++ ``numeric_limits<T>::digits``). ``keep_bits`` is how many high bits
    of a raw word survive; ``scale`` maps those bits onto ``[0, 1)``.
    """

    dtype: np.dtype
    epsilon: np.floating
    digits: int

    @staticmethod
    def from_dtype(dtype) -> FloatFormat:
        dt = np.dtype(dtype)
        if dt.kind != "f":
            raise ValueError(f"Not a floating-point dtype: {dt}")
        info = np.finfo(dt)
        return FloatFormat(dtype=dt, epsilon=info.eps, digits=info.nmant + 1)

    @property
    def name(self) -> str:
        return self.dtype.name

    @property
    def keep_bits(self) -> int:
        return min(self.digits - 1, WORD_BITS)

    @property
    def lose_bits(self) -> int:
        return WORD_BITS - self.keep_bits

    @property
    def scale(self) -> np.floating:
        # Equals epsilon whenever the mantissa fits inside one raw word.
        if self.keep_bits == self.digits - 1:
            return self.epsilon
        return np.ldexp(self.dtype.type(1), -self.keep_bits)

    def cast(self, value) -> np.floating:
        return self.dtype.type(value)


FLOAT16 = FloatFormat.from_dtype(np.float16)
FLOAT32 = FloatFormat.from_dtype(np.float32)
FLOAT64 = FloatFormat.from_dtype(np.float64)
LONGDOUBLE = FloatFormat.from_dtype(np.longdouble)
