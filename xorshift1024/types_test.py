"""Tests for integer widths and float formats."""

import numpy as np
import pytest

from xorshift1024.types import (
    FLOAT16,
    FLOAT32,
    FLOAT64,
    INT8,
    INT64,
    LONGDOUBLE,
    UINT8,
    UINT32,
    UINT64,
    FloatFormat,
    IntWidth,
)


class TestIntWidth:
    def test_limits(self):
        assert (INT8.min_value, INT8.max_value) == (-128, 127)
        assert (UINT8.min_value, UINT8.max_value) == (0, 255)
        assert (INT64.min_value, INT64.max_value) == (-(1 << 63), (1 << 63) - 1)
        assert UINT64.max_value == 0xFFFFFFFFFFFFFFFF

    def test_names(self):
        assert INT8.name == "int8"
        assert UINT32.name == "uint32"

    def test_fits(self):
        assert INT8.fits(-128)
        assert not INT8.fits(128)
        assert not UINT8.fits(-1)

    def test_wrap(self):
        assert UINT8.wrap(0x1FF) == 0xFF
        assert INT8.wrap(0x1FF) == -1
        assert INT8.wrap(0x7F) == 127

    def test_odd_widths_allowed(self):
        w = IntWidth(12, signed=True)
        assert (w.min_value, w.max_value) == (-2048, 2047)

    @pytest.mark.parametrize("bits", [0, 65, -8])
    def test_bad_widths(self, bits):
        with pytest.raises(ValueError):
            IntWidth(bits, signed=False)


class TestFloatFormat:
    def test_float64(self):
        assert FLOAT64.digits == 53
        assert FLOAT64.keep_bits == 52
        assert FLOAT64.lose_bits == 12
        assert FLOAT64.scale == 2.0**-52

    def test_float32(self):
        assert FLOAT32.dtype == np.float32
        assert FLOAT32.digits == 24
        assert FLOAT32.lose_bits == 41
        assert FLOAT32.scale == np.finfo(np.float32).eps

    def test_float16(self):
        assert FLOAT16.digits == 11
        assert FLOAT16.lose_bits == 54

    def test_longdouble_keeps_at_most_one_word(self):
        assert 0 <= LONGDOUBLE.lose_bits <= 12
        assert LONGDOUBLE.keep_bits <= 64
        assert np.ldexp(LONGDOUBLE.scale, LONGDOUBLE.keep_bits) == 1

    def test_from_dtype_rejects_integers(self):
        with pytest.raises(ValueError):
            FloatFormat.from_dtype(np.int32)

    def test_cast(self):
        assert FLOAT32.cast(1.5).dtype == np.float32
