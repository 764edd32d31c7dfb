# tests/test_helpers.py

import math
import random

import pytest

from digital.core.bits import MASK32, MASK64, f32
from digital.numeric import helpers as h


def test_constants():
    assert h.FLOAT_ROUNDING_ERROR == 2.0 ** -20
    assert h.EPSILON == 2.0 ** -24
    assert h.ROOT2 == f32(math.sqrt(2.0))
    assert h.GOLDEN_RATIO_D == pytest.approx((1.0 + math.sqrt(5.0)) / 2.0, abs=1e-15)
    assert h.PSI_D == pytest.approx(1.0 - h.GOLDEN_RATIO_D, abs=1e-15)
    assert h.PHI is h.GOLDEN_RATIO


def test_raise_to_power():
    assert h.raise_to_power(3, 4) == 81
    assert h.raise_to_power(7, 0) == 1
    assert h.raise_to_power(2, 63) == -(2 ** 63)
    assert h.raise_to_power(2, 64) == 0
    with pytest.raises(ValueError):
        h.raise_to_power(2, -1)


def test_logarithms():
    assert h.log(2.0, 8.0) == pytest.approx(3.0)
    assert h.log(10.0, 0.001) == pytest.approx(-3.0)
    assert h.log_f32(3.0, 81.0) == pytest.approx(4.0, rel=1e-6)
    assert h.log2_f32(1024.0) == pytest.approx(10.0, rel=1e-6)
    assert math.isnan(h.log(2.0, -1.0))
    assert h.log(2.0, 0.0) == -math.inf


def test_comparisons_and_clamp():
    assert h.is_equal(1.0, 1.0 + 2.0 ** -21)
    assert not h.is_equal(1.0, 1.001)
    assert h.is_equal(1.0, 1.001, 0.01)
    assert h.is_zero(1e-7)
    assert not h.is_zero(0.1)
    assert h.clamp(5, 0, 3) == 3
    assert h.clamp(-1.5, -1.0, 1.0) == -1.0
    assert h.clamp(0.25, 0.0, 1.0) == 0.25


def test_remainder_takes_the_sign_of_the_divisor():
    assert h.remainder(-1.0, 3.0) == 2.0
    assert h.remainder(5.5, 2.0) == 1.5
    assert h.remainder(-5.5, 2.0) == 0.5
    assert math.isnan(h.remainder(1.0, 0.0))


def test_greatest_common_divisor():
    assert h.greatest_common_divisor(12, 18) == 6
    assert h.greatest_common_divisor(-12, 18) == 6
    assert h.greatest_common_divisor(0, 7) == 7
    assert h.greatest_common_divisor(0, 0) == 0


def test_modular_multiplicative_inverse():
    random.seed(42)
    for _ in range(5000):
        a32 = random.getrandbits(32) | 1
        assert (a32 * h.modular_multiplicative_inverse32(a32)) & MASK32 == 1
        a64 = random.getrandbits(64) | 1
        assert (a64 * h.modular_multiplicative_inverse64(a64)) & MASK64 == 1
    assert h.modular_multiplicative_inverse32(1) == 1
    assert h.modular_multiplicative_inverse32(-1) == -1


def test_powers_of_two():
    assert h.next_power_of_two(0) == 2
    assert h.next_power_of_two(2) == 2
    assert h.next_power_of_two(5) == 8
    assert h.next_power_of_two(16) == 16
    assert h.next_power_of_two(17) == 32
    assert h.is_power_of_two(1)
    assert h.is_power_of_two(1024)
    assert h.is_power_of_two(-(2 ** 31))
    assert not h.is_power_of_two(0)
    assert not h.is_power_of_two(6)


def test_fibonacci():
    a, b = 0, 1
    for n in range(41):
        assert h.fibonacci(n) == a
        assert h.fibonacci64(n) == a
        a, b = b, a + b
    assert h.fibonacci(10) == 55


def test_small_powers():
    assert h.square(3.0) == 9.0
    assert h.cube(-2.0) == -8.0


@pytest.mark.parametrize(
    "fn, x, expected",
    [
        (h.floor, -0.5, -1),
        (h.floor, 2.0, 2),
        (h.floor, 2.7, 2),
        (h.ceil, 0.5, 1),
        (h.ceil, -0.5, 0),
        (h.ceil, 3.0, 3),
        (h.long_floor, -1e12 - 0.5, -1000000000001),
        (h.fast_floor, -1.5, -2),
        (h.fast_floor, 1.5, 1),
        (h.fast_ceil, 1.2, 2),
        (h.fast_ceil, -1.2, -1),
        (h.floor_positive, 2.7, 2),
        (h.ceil_positive, 2.0, 2),
        (h.ceil_positive, 2.1, 3),
        (h.round_f32, 2.5, 3),
        (h.round_f32, -2.5, -2),
        (h.round_f32, 2.4, 2),
        (h.round_positive, 2.5, 3),
    ],
)
def test_rounding(fn, x, expected):
    assert fn(x) == expected


def test_rounding_saturates():
    assert h.floor(math.inf) == 2 ** 31 - 1
    assert h.floor(math.nan) == 0
    assert h.floor(-math.inf) == -(2 ** 31)
    assert h.ceil(math.inf) == 2 ** 31 - 1
    assert h.long_floor(-math.inf) == -(2 ** 63)


def test_truncate():
    assert h.truncate(1.0 + 2.0 ** -50) == 1.0
    assert h.truncate(-1.0 - 2.0 ** -50) == -1.0
    assert h.truncate(0.75) == 0.75
    assert h.truncate_f32(1.0 + 2.0 ** -20) == 1.0
    assert h.truncate_f32(0.5) == 0.5


def test_truncation_grid_and_ceil_offset():
    assert h.truncate(1.0 / 3.0) == math.floor((1.0 / 3.0) * 2.0 ** 42) * 2.0 ** -42
    assert h.truncate(-0.3) == -math.floor(0.3 * 2.0 ** 42) * 2.0 ** -42
    assert h.truncate(2.0 ** -42) == 2.0 ** -42
    assert h.truncate(2.0 ** -43) == 0.0
    assert h.truncate_f32(1.0 / 3.0) == 2730 * 2.0 ** -13
    assert h.truncate_f32(2.0 ** -14) == 0.0
    # the offset is just below 1, so integers stay put and anything above moves up
    assert h.ceil_positive(0.0) == 0
    assert h.ceil_positive(1.0) == 1
    assert h.ceil_positive(1.0 + 2.0 ** -23) == 2
    assert h.ceil_positive(1000.0) == 1000
