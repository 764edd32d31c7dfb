# tests/test_roots.py

import math
import random

import pytest

from digital.core.bits import f32
from digital.numeric import roots


def test_inv_sqrt_relative_error():
    random.seed(42)
    for _ in range(20000):
        x = 10.0 ** random.uniform(-6.0, 6.0)
        want = 1.0 / math.sqrt(x)
        assert abs(roots.inv_sqrt(x) - want) / want < 0.01
        xf = f32(x)
        want_f = 1.0 / math.sqrt(xf)
        assert abs(roots.inv_sqrt_f32(xf) - want_f) / want_f < 0.01


def test_inv_sqrt_known_values():
    assert roots.inv_sqrt(4.0) == pytest.approx(0.5, rel=2e-3)
    assert roots.inv_sqrt_f32(0.25) == pytest.approx(2.0, rel=2e-3)
    assert f32(roots.inv_sqrt_f32(3.0)) == roots.inv_sqrt_f32(3.0)


def test_inv_sqrt_garbage_in_does_not_raise():
    for x in (-1.0, 0.0, math.inf, math.nan):
        roots.inv_sqrt(x)
        roots.inv_sqrt_f32(x)


@pytest.mark.parametrize("x", [-512.0, -8.0, -1.0, 1.0, 8.0, 512.0])
def test_cbrt_round_trip(x):
    y = roots.cbrt_f32(x)
    assert y ** 3 == pytest.approx(x, rel=1e-6)


def test_cbrt_of_zero_is_tiny():
    assert roots.cbrt_f32(0.0) ** 3 == pytest.approx(0.0, abs=1e-30)


def _cbrt_reference(x):
    # the plain branching version of the sign handling
    if x < 0.0:
        return -(abs(x) ** (1.0 / 3.0))
    return x ** (1.0 / 3.0)


def test_cbrt_matches_branching_reference():
    random.seed(43)
    for _ in range(20000):
        x = f32(random.uniform(-512.0, 512.0))
        y = roots.cbrt_f32(x)
        assert y == pytest.approx(_cbrt_reference(x), rel=5e-6)
        assert roots.cbrt_f32(-x) == -y
        assert f32(y) == y


def test_cbrt_sign_is_preserved():
    for x in (1e-20, 3.0, 27.0, 1e20):
        assert roots.cbrt_f32(x) > 0.0
        assert roots.cbrt_f32(-x) < 0.0
    assert roots.cbrt_f32(27.0) == pytest.approx(3.0, rel=1e-6)


@pytest.mark.parametrize(
    "n, expected",
    [(0, 0), (1, 1), (2, 1), (3, 1), (4, 2), (15, 3), (16, 4), (17, 4), (99, 9), (100, 10)],
)
def test_isqrt_small(n, expected):
    assert roots.isqrt(n) == expected


def test_isqrt_matches_math_isqrt():
    for n in range(5000):
        assert roots.isqrt(n) == math.isqrt(n)
    random.seed(44)
    for _ in range(20000):
        bits = random.randint(1, 64)
        n = random.getrandbits(bits)
        r = roots.isqrt(n)
        assert r == math.isqrt(n)
        assert r * r <= n < (r + 1) * (r + 1)


def test_isqrt_around_perfect_squares():
    random.seed(45)
    for _ in range(5000):
        k = random.randrange(1, 1 << 32)
        assert roots.isqrt(k * k) == k
        assert roots.isqrt(k * k - 1) == k - 1


def test_isqrt_reads_negative_inputs_as_unsigned():
    assert roots.isqrt(2 ** 63) == math.isqrt(2 ** 63)
    assert roots.isqrt(-(2 ** 63)) == math.isqrt(2 ** 63)
    assert roots.isqrt(-1) == 2 ** 32 - 1
    assert roots.isqrt(-5) == math.isqrt(2 ** 64 - 5)
    assert roots.isqrt(2 ** 62) == 2 ** 31


def test_nthrt_snaps_to_integers():
    assert roots.nthrt_f32(27.0, 3.0) == 3.0
    assert roots.nthrt_f32(1024.0, 10.0) == 2.0
    assert roots.nthrt_f32(2.0, 2.0) == pytest.approx(math.sqrt(2.0), rel=1e-6)
    assert math.isnan(roots.nthrt_f32(-8.0, 3.0))
