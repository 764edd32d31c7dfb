"""IEEE-754 bit reinterpretation helpers.

All integer results follow two's-complement signed conventions (int32 / int64),
so ``float_to_int_bits(x) >> 31`` is -1 for a set sign bit and 0 otherwise.
"""

from __future__ import annotations

import math
import struct

MASK32 = 0xFFFFFFFF
MASK64 = 0xFFFFFFFFFFFFFFFF

INT32_MIN = -(1 << 31)
INT32_MAX = (1 << 31) - 1
INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1


def to_int32(v: int) -> int:
    """Wrap an arbitrary Python int to a signed 32-bit value."""
    v &= MASK32
    return v - (1 << 32) if v & 0x80000000 else v


def to_int64(v: int) -> int:
    """Wrap an arbitrary Python int to a signed 64-bit value."""
    v &= MASK64
    return v - (1 << 64) if v & 0x8000000000000000 else v


def f32(value: float) -> float:
    """Round a double to the nearest binary32 value (overflow goes to +-inf)."""
    try:
        return struct.unpack("<f", struct.pack("<f", float(value)))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def float_to_int_bits(value: float) -> int:
    if math.isnan(value):
        # narrow by hand: sign and top 22 payload bits kept, quiet bit set
        d = double_to_long_bits(value)
        return to_int32(((d >> 32) & 0x80000000) | 0x7FC00000 | ((d >> 29) & 0x3FFFFF))
    return struct.unpack("<i", struct.pack("<f", f32(value)))[0]


def int_bits_to_float(bits: int) -> float:
    """
    The binary32 value with the given bits, widened to a Python float.

    Every pattern except a signalling NaN comes back unchanged through
    float_to_int_bits. A signalling NaN is quieted on the way back (0x7F800001
    returns as 0x7FC00001), since Python floats are doubles and narrowing a NaN
    sets its quiet bit.
    """
    return struct.unpack("<f", struct.pack("<I", int(bits) & MASK32))[0]


def double_to_long_bits(value: float) -> int:
    return struct.unpack("<q", struct.pack("<d", float(value)))[0]


def long_bits_to_double(bits: int) -> float:
    return struct.unpack("<d", struct.pack("<Q", int(bits) & MASK64))[0]


def double_to_high_int_bits(value: float) -> int:
    # upper word carries sign, exponent and the top 20 mantissa bits
    return double_to_long_bits(value) >> 32


def leading_zeros32(v: int) -> int:
    return 32 - (v & MASK32).bit_length()


def leading_zeros64(v: int) -> int:
    return 64 - (v & MASK64).bit_length()
