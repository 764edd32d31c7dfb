# numeric/roots.py

"""
Bit-trick roots.

inv_sqrt / inv_sqrt_f32
    The Quake III estimate: reinterpret x as an integer, subtract half of it
    from a magic constant, reinterpret back, then one Newton-Raphson step
    y * (1.5 - 0.5 * x * y * y). Relative error is about 0.2% at worst. Only
    meaningful for non-negative finite x; other inputs return whatever the
    bits produce.

cbrt_f32
    Marc B. Reynolds' cube-root estimate (a Hacker's Delight style integer
    approximation of x^(1/3) on the magnitude bits), sign bit OR-ed back in,
    then two Newton steps. Relative error below 1e-9 on average for inputs
    uniform in [-512, 512].

isqrt
    floor(sqrt(n)) for n taken as an unsigned 64-bit integer, without floating
    point. Digit-doubling Newton iteration after CPython's math.isqrt, made
    branch-free apart from the loop.
"""

from __future__ import annotations

import math

from ..core.bits import (
    MASK64,
    double_to_long_bits,
    f32,
    float_to_int_bits,
    int_bits_to_float,
    leading_zeros32,
    leading_zeros64,
    long_bits_to_double,
    to_int32,
    to_int64,
)
from ..core.ieee import div, pow as _pow
from .helpers import is_equal, round_f32

INV_SQRT_MAGIC_32 = 0x5F3759DF
INV_SQRT_MAGIC_64 = 0x5FE6EC85E7DE30DA
CBRT_MAGIC = 0x2A5137A0

_THIRD_F = f32(0.33333334)


def inv_sqrt_f32(x: float) -> float:
    x = f32(x)
    i = to_int32(INV_SQRT_MAGIC_32 - (float_to_int_bits(x) >> 1))
    y = int_bits_to_float(i)
    return f32(y * f32(1.5 - f32(f32(f32(0.5 * x) * y) * y)))


def inv_sqrt(x: float) -> float:
    i = to_int64(INV_SQRT_MAGIC_64 - (double_to_long_bits(x) >> 1))
    y = long_bits_to_double(i)
    return y * (1.5 - 0.5 * x * y * y)


def cbrt_f32(x: float) -> float:
    x0 = f32(x)
    ix = float_to_int_bits(x0)
    sign = ix & 0x80000000
    ix &= 0x7FFFFFFF
    ix = (ix >> 2) + (ix >> 4)
    ix += ix >> 4
    ix = (ix + (ix >> 8) + CBRT_MAGIC) | sign
    y = int_bits_to_float(ix)
    y = f32(_THIRD_F * f32(f32(2.0 * y) + f32(div(x0, f32(y * y)))))
    y = f32(_THIRD_F * f32(f32(2.0 * y) + f32(div(x0, f32(y * y)))))
    return y


def isqrt(n: int) -> int:
    """
    Integer square root, rounded down.

    ``n`` is read as an unsigned 64-bit value, so negative int64 inputs act as
    large unsigned ones (isqrt(-1) == 2**32 - 1).
    """
    u = n & MASK64
    c = (63 - leading_zeros64(u)) >> 1
    a = 1
    d = 0
    s = 31 & (32 - leading_zeros32(c))
    while s > 0:
        e = d
        s -= 1
        d = c >> s
        a = (a << (d - e - 1)) + (u >> (c + c - e - d + 1)) // a
    # a may overshoot by one; the sign bit of the 64-bit difference says so
    return a - (((u - a * a) & MASK64) >> 63)


def nthrt_f32(x: float, n: float) -> float:
    """
    x ** (1 / n), snapping results within FLOAT_ROUNDING_ERROR of an integer
    to that integer. Negative x or n follow IEEE pow rules.
    """
    f = f32(_pow(f32(x), f32(div(1.0, f32(n)))))
    if math.isnan(f) or math.isinf(f):
        return f
    i = round_f32(f)
    return float(i) if is_equal(i, f) else f
