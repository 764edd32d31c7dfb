# tests/test_bits.py

import math
import random

import pytest

from digital.core import bits, ieee


def test_f32_values_survive_the_bit_round_trip():
    random.seed(42)
    for _ in range(5000):
        x = random.uniform(-1e6, 1e6) * 10.0 ** random.randint(-30, 30)
        v = bits.f32(x)
        assert bits.int_bits_to_float(bits.float_to_int_bits(v)) == v


def test_f32_overflow_and_nan():
    assert bits.f32(3.5e38) == math.inf
    assert bits.f32(-3.5e38) == -math.inf
    assert math.isnan(bits.f32(math.nan))
    assert bits.f32(0.1) != 0.1
    assert bits.f32(0.5) == 0.5


def test_float_bit_patterns():
    assert bits.float_to_int_bits(1.0) == 0x3F800000
    assert bits.float_to_int_bits(-0.0) == -(1 << 31)
    assert bits.float_to_int_bits(-2.0) >> 31 == -1
    assert bits.float_to_int_bits(2.0) >> 31 == 0
    assert bits.int_bits_to_float(0x7F800000) == math.inf
    # subnormals
    assert bits.int_bits_to_float(1) == 2.0 ** -149
    assert bits.float_to_int_bits(2.0 ** -149) == 1
    assert math.isnan(bits.int_bits_to_float(0x7FC00000))


def test_double_bit_patterns():
    assert bits.double_to_long_bits(1.0) == 0x3FF0000000000000
    assert bits.double_to_long_bits(-1.0) == bits.to_int64(0xBFF0000000000000)
    assert bits.long_bits_to_double(1) == 5e-324
    assert bits.double_to_high_int_bits(-2.0) >> 31 == -1
    assert bits.double_to_high_int_bits(2.0) >> 31 == 0
    assert bits.double_to_high_int_bits(-0.0) >> 31 == -1

    random.seed(7)
    for _ in range(2000):
        pattern = random.getrandbits(64)
        d = bits.long_bits_to_double(pattern)
        assert bits.double_to_long_bits(d) == bits.to_int64(pattern)


@pytest.mark.parametrize("pattern", [
    0x7FF8000000000001,
    0x7FF0000000000001,
    0xFFF8000000000000,
    0x7FFFFFFFFFFFFFFF,
])
def test_double_nan_payloads_survive(pattern):
    d = bits.long_bits_to_double(pattern)
    assert math.isnan(d)
    assert bits.double_to_long_bits(d) == bits.to_int64(pattern)


@pytest.mark.parametrize("pattern, expected", [
    (0x7FC00000, 0x7FC00000),
    (0x7FC00001, 0x7FC00001),
    (0x7FFFFFFF, 0x7FFFFFFF),
    (0xFFC00000, 0xFFC00000),
    # signalling NaNs come back quiet, payload intact
    (0x7F800001, 0x7FC00001),
    (0xFF800001, 0xFFC00001),
    (0x7FBFFFFF, 0x7FFFFFFF),
])
def test_float_nan_bit_patterns(pattern, expected):
    v = bits.int_bits_to_float(pattern)
    assert math.isnan(v)
    assert bits.float_to_int_bits(v) == bits.to_int32(expected)


def test_float_bit_round_trip_all_exponents():
    random.seed(11)
    for _ in range(5000):
        pattern = random.getrandbits(32)
        # skip signalling NaNs (exponent all ones, quiet bit clear, payload set)
        if (pattern & 0x7FC00000) == 0x7F800000 and pattern & 0x3FFFFF:
            continue
        v = bits.int_bits_to_float(pattern)
        assert bits.float_to_int_bits(v) == bits.to_int32(pattern)


def test_integer_wrapping():
    assert bits.to_int32(0x80000000) == -(1 << 31)
    assert bits.to_int32(0xFFFFFFFF) == -1
    assert bits.to_int32(1 << 32) == 0
    assert bits.to_int64(1 << 63) == -(1 << 63)
    assert bits.to_int64(-1) == -1


def test_leading_zeros():
    assert bits.leading_zeros32(0) == 32
    assert bits.leading_zeros32(1) == 31
    assert bits.leading_zeros32(-1) == 0
    assert bits.leading_zeros64(0) == 64
    assert bits.leading_zeros64(1 << 63) == 0
    assert bits.leading_zeros64(-1) == 0


def test_ieee_division_never_raises():
    assert ieee.div(1.0, 0.0) == math.inf
    assert ieee.div(-1.0, 0.0) == -math.inf
    assert ieee.div(1.0, -0.0) == -math.inf
    assert math.isnan(ieee.div(0.0, 0.0))
    assert math.isnan(ieee.div(math.nan, 0.0))
    assert ieee.div(3.0, 2.0) == 1.5


def test_ieee_elementary_functions():
    assert math.isnan(ieee.sqrt(-1.0))
    assert ieee.sqrt(4.0) == 2.0
    assert ieee.exp(1000.0) == math.inf
    assert ieee.log(0.0) == -math.inf
    assert math.isnan(ieee.log(-1.0))
    assert math.isnan(ieee.fmod(math.inf, 1.0))
    assert math.isnan(ieee.fmod(1.0, 0.0))
    assert ieee.fmod(-5.5, 2.0) == -1.5


def test_ieee_pow_special_cases():
    assert ieee.pow(0.0, -1.0) == math.inf
    assert ieee.pow(-0.0, -1.0) == -math.inf
    assert ieee.pow(-0.0, -2.0) == math.inf
    assert math.isnan(ieee.pow(-8.0, 1.0 / 3.0))
    assert ieee.pow(10.0, 400.0) == math.inf
    assert ieee.pow(-10.0, 401.0) == -math.inf
    assert ieee.pow(2.0, 10.0) == 1024.0


def test_ieee_signum():
    assert ieee.signum(3.0) == 1.0
    assert ieee.signum(-0.1) == -1.0
    assert math.copysign(1.0, ieee.signum(-0.0)) == -1.0
    assert math.isnan(ieee.signum(math.nan))


@pytest.mark.parametrize(
    "x, expected",
    [
        (math.nan, 0),
        (math.inf, 2 ** 31 - 1),
        (-math.inf, -(2 ** 31)),
        (-0.5, -1),
        (0.5, 0),
        (-3.0, -3),
        (1e20, 2 ** 31 - 1),
    ],
)
def test_floor_int32(x, expected):
    assert ieee.floor_int32(x) == expected


def test_saturating_truncation():
    assert ieee.saturate_int32(-0.5) == 0
    assert ieee.saturate_int32(-1.5) == -1
    assert ieee.saturate_int32(math.nan) == 0
    assert ieee.saturate_int64(1e30) == 2 ** 63 - 1
    assert ieee.saturate_int64(-1e30) == -(2 ** 63)
