from __future__ import annotations

import math

from ..core.bits import INT32_MAX, INT32_MIN, INT64_MIN, f32, leading_zeros32, to_int32, to_int64
from ..core.ieee import div, fmod, log as _ln, pow as _pow, saturate_int32, saturate_int64

# Smallest reasonable tolerance for is_equal/is_zero: enough for the rounding
# error of one addition between numbers smaller than 16.
FLOAT_ROUNDING_ERROR = 2.0 ** -20
# ulp(0.5f); the smallest non-zero distance between floats in [0.5, 1).
EPSILON = 2.0 ** -24
EPSILON_D = 2.0 ** -53

E = f32(math.e)
E_D = math.e
ROOT2 = f32(math.sqrt(2.0))
ROOT2_D = math.sqrt(2.0)
ROOT3 = f32(math.sqrt(3.0))
ROOT3_D = math.sqrt(3.0)
ROOT5 = f32(math.sqrt(5.0))
ROOT5_D = math.sqrt(5.0)
GOLDEN_RATIO = f32(1.6180339887498949)
PHI = GOLDEN_RATIO
GOLDEN_RATIO_D = 1.6180339887498949
PHI_D = GOLDEN_RATIO_D
GOLDEN_RATIO_INVERSE = f32(0.6180339887498949)
GOLDEN_RATIO_INVERSE_D = 0.6180339887498949
PSI = -GOLDEN_RATIO_INVERSE
PSI_D = -GOLDEN_RATIO_INVERSE_D

_BIG_ENOUGH_INT = 16384
_BIG_ENOUGH_FLOOR = float(_BIG_ENOUGH_INT)
_BIG_ENOUGH_ROUND = _BIG_ENOUGH_INT + 0.5
_CEIL = float.fromhex("0x1.fffffep-1")


# ============================================================
# Powers, logarithms, comparisons
# ============================================================

def raise_to_power(value: int, power: int) -> int:
    """value ** power with 64-bit wraparound; negative powers are rejected."""
    if power < 0:
        raise ValueError("raise_to_power does not support negative powers.")
    result = 1
    for _ in range(power):
        result = to_int64(result * value)
    return result


def log(base: float, value: float) -> float:
    """Logarithm of ``value`` in ``base``, by change of base from natural logs."""
    return div(_ln(value), _ln(base))


def log_f32(base: float, value: float) -> float:
    return f32(div(_ln(f32(value)), _ln(f32(base))))


def log2_f32(value: float) -> float:
    return f32(_ln(f32(value)) / 0.6931471805599453)


def is_equal(a: float, b: float, tolerance: float = FLOAT_ROUNDING_ERROR) -> bool:
    return abs(a - b) <= tolerance


def is_zero(value: float, tolerance: float = FLOAT_ROUNDING_ERROR) -> bool:
    return abs(value) <= tolerance


def clamp(value, lo, hi):
    """min(max(value, lo), hi); works for ints and floats alike."""
    return min(max(value, lo), hi)


def remainder(op: float, d: float) -> float:
    """Like fmod, but the result takes the sign of ``d`` instead of ``op``."""
    return fmod(fmod(op, d) + d, d)


# ============================================================
# Integer utilities
# ============================================================

def greatest_common_divisor(a: int, b: int) -> int:
    """Euclid on the absolute values; always non-negative."""
    a = abs(a)
    b = abs(b)
    while b != 0:
        a, b = b, a % b
    return a


def modular_multiplicative_inverse32(a: int) -> int:
    """
    For odd ``a``, the odd b with a * b == 1 modulo 2**32, as a signed int32.

    The seed is ``2 ^ (a * 3)`` (XOR, not subtraction), which is already correct
    in its low 5 bits; each Newton step doubles the number of correct bits.
    """
    x = to_int32(2 ^ to_int32(a * 3))
    x = to_int32(x * (2 - a * x))
    x = to_int32(x * (2 - a * x))
    x = to_int32(x * (2 - a * x))
    return x


def modular_multiplicative_inverse64(a: int) -> int:
    """For odd ``a``, the odd b with a * b == 1 modulo 2**64, as a signed int64."""
    x = to_int64(2 ^ to_int64(a * 3))
    for _ in range(4):
        x = to_int64(x * (2 - a * x))
    return x


def next_power_of_two(n: int) -> int:
    """Smallest power of two >= n; 2 for anything below 2. Wraps like an int32."""
    n = max(2, to_int32(n))
    return to_int32(1 << ((-leading_zeros32(n - 1)) & 31))


def is_power_of_two(value: int) -> bool:
    """True for powers of two, and for -2**31 (a power of two when unsigned)."""
    value = to_int32(value)
    return value != 0 and (value & to_int32(value - 1)) == 0


def fibonacci(n: int) -> int:
    """
    Binet's formula; exact for 0 <= n <= 46 (the largest int32 result).

    The constants are nudged from their exact values so accumulated rounding
    cancels out for a few more inputs.
    """
    return saturate_int32(_pow(1.618033988749895, n) / 2.236067977499795 + 0.49999999999999917)


def fibonacci64(n: int) -> int:
    return saturate_int64(_pow(1.618033988749895, n) / 2.236067977499795 + 0.49999999999999917)


# ============================================================
# Powers of a single value
# ============================================================

def square(n: float) -> float:
    return n * n


def cube(n: float) -> float:
    return n * n * n


# ============================================================
# Rounding to integers
# ============================================================

def floor(t: float) -> int:
    """Floor into the int32 range (saturating); NaN is 0."""
    z = saturate_int32(t)
    return z - 1 if t < z and z > INT32_MIN else z


def ceil(t: float) -> int:
    z = saturate_int32(t)
    return z + 1 if t > z and z < INT32_MAX else z


def long_floor(t: float) -> int:
    z = saturate_int64(t)
    return z - 1 if t < z and z > INT64_MIN else z


def fast_floor(t: float) -> int:
    """Floor by offsetting into the positive range; valid for t > -16384."""
    return saturate_int32(t + _BIG_ENOUGH_FLOOR) - _BIG_ENOUGH_INT


def fast_ceil(t: float) -> int:
    """Ceiling by offsetting into the positive range; valid for t < 16384."""
    return _BIG_ENOUGH_INT - saturate_int32(_BIG_ENOUGH_FLOOR - t)


def floor_positive(value: float) -> int:
    return saturate_int32(value)


def ceil_positive(value: float) -> int:
    return saturate_int32(value + _CEIL)


def round_f32(value: float) -> int:
    """Round half up; valid for values > -16384."""
    return saturate_int32(f32(value) + _BIG_ENOUGH_ROUND) - _BIG_ENOUGH_INT


def round_positive(value: float) -> int:
    return saturate_int32(f32(f32(value) + 0.5))


def truncate(n: float) -> float:
    """Drop the bits of ``n`` below 2**-42, toward zero."""
    return saturate_int64(n * 2.0 ** 42) * 2.0 ** -42


def truncate_f32(n: float) -> float:
    """Drop the bits of ``n`` below 2**-13, toward zero."""
    return f32(saturate_int64(f32(f32(n) * 2.0 ** 13)) * 2.0 ** -13)
