"""Range mapping: shape raw 64-bit words into bounded integers and floats.

Every function here is stateless and takes the generator as its first
argument, typed as the ``RandomSource`` capability so tests can drive it
with scripted words.

Integers
--------
``bounded_u64`` is the only place integer randomness is produced. It avoids
modulo bias by rejection sampling: each raw word is shifted right by the
leading-zero count of the bound, which leaves a candidate space less than
twice the target range, and the first candidate ``<= max_inclusive`` is
accepted. Expected draws per call are below 2. The loop is formally
unbounded; the chance of needing more than ``k`` draws is below ``2**-k``.

Every other integer form (signed, narrower, offset ranges) is an offset of
one ``next_bounded_u64`` call and never runs its own rejection loop.

Floats
------
``unit_float`` keeps only as many high bits of one raw word as the target
format's mantissa can hold and scales them by the format's epsilon, giving
a value in ``[0, 1)`` at the format's full granularity. ``float_up_to`` and
``float_in_range`` scale and offset that unit draw.

Unlike integer ranges, float ranges accept their bounds in either order and
always return a value between them.
"""

from __future__ import annotations

import numpy as np

from .source import RandomSource
from .types import FLOAT64, U64_MAX, UINT64, WORD_BITS, FloatFormat, IntWidth


def count_leading_zeros64(value: int) -> int:
    """Number of zero bits above the highest set bit of a 64-bit word."""
    if not 0 <= value <= U64_MAX:
        raise ValueError(f"Not a 64-bit unsigned value: {value}")
    return WORD_BITS - value.bit_length()


def bounded_u64(rng: RandomSource, max_inclusive: int) -> int:
    """Uniform integer in [0, max_inclusive] by shift-and-reject."""
    if max_inclusive == 0:
        raise ValueError("max_inclusive must be nonzero")
    leading_zeros = count_leading_zeros64(max_inclusive)
    while True:
        candidate = rng.next_u64() >> leading_zeros
        if candidate <= max_inclusive:
            return candidate


def _check_width(width: IntWidth | None, *values: int) -> None:
    if width is None:
        return
    for v in values:
        if not width.fits(v):
            raise ValueError(
                f"{v} is not representable as {width.name} "
                f"[{width.min_value}, {width.max_value}]"
            )


def int_in_range(
    rng: RandomSource,
    min_value: int,
    max_value: int,
    width: IntWidth | None = None,
) -> int:
    """Uniform integer in [min_value, max_value] inclusive.

    Requires ``min_value < max_value``. If ``width`` is given, both bounds
    must be representable in it; the result then is too.
    """
    if min_value >= max_value:
        raise ValueError(
            f"min_value must be less than max_value (got {min_value}, {max_value})"
        )
    _check_width(width, min_value, max_value)
    span = max_value - min_value
    if span > U64_MAX:
        raise ValueError(
            f"Range [{min_value}, {max_value}] is wider than a 64-bit word"
        )
    return rng.next_bounded_u64(span) + min_value


def uint_up_to(
    rng: RandomSource, max_value: int, width: IntWidth = UINT64
) -> int:
    """Uniform unsigned integer in [0, max_value] inclusive; max_value != 0."""
    if max_value > U64_MAX:
        raise ValueError(f"max_value exceeds the 64-bit range: {max_value}")
    if width.signed:
        raise ValueError(f"uint_up_to needs an unsigned width, got {width.name}")
    _check_width(width, max_value)
    return rng.next_bounded_u64(max_value)


def raw_int(rng: RandomSource, width: IntWidth) -> int:
    """One raw word narrowed to ``width`` (low bits, two's complement)."""
    return width.wrap(rng.next_u64())


def unit_float(rng: RandomSource, fmt: FloatFormat = FLOAT64) -> np.floating:
    """Uniform value of ``fmt`` in [0, 1)."""
    # Through uint64 so longdouble keeps all 64 bits.
    top_bits = fmt.cast(np.uint64(rng.next_u64() >> fmt.lose_bits))
    return top_bits * fmt.scale


def float_up_to(
    rng: RandomSource, max_value, fmt: FloatFormat = FLOAT64
) -> np.floating:
    """Uniform value between 0 and ``max_value`` (which may be negative)."""
    return unit_float(rng, fmt) * fmt.cast(max_value)


def float_in_range(
    rng: RandomSource, min_value, max_value, fmt: FloatFormat = FLOAT64
) -> np.floating:
    """Uniform value between the two bounds, accepted in either order."""
    lo = fmt.cast(min_value)
    hi = fmt.cast(max_value)
    if lo > hi:
        lo, hi = hi, lo
    with np.errstate(over="ignore"):
        span = hi - lo
    if np.isfinite(span):
        result = float_up_to(rng, span, fmt) + lo
    else:
        # Span overflows the format; interpolate so no term leaves it
        u = unit_float(rng, fmt)
        result = lo * (fmt.cast(1) - u) + hi * u
    if result > hi:
        # lo + u * (hi - lo) can round up past hi for wide or lopsided ranges
        result = hi
    return result
