from __future__ import annotations

from ..core.bits import double_to_high_int_bits, f32, float_to_int_bits
from ..core.ieee import div

FLOAT_MIN_NORMAL = 2.0 ** -126
DOUBLE_MIN_NORMAL = 2.0 ** -1022


def barron_spline(x: float, shape: float, turning: float) -> float:
    """
    Jon Barron's generalized bias/gain curve (arXiv:2010.09714), branch-free.

    For x <= turning this is turning*x / (x + shape*(turning - x)); past the
    turning point it is the mirrored curve, so the two halves meet at x == turning.
    shape > 1 eases in and out like smoothstep, shape < 1 does the opposite.
    Expects x and turning in [0, 1] and shape >= 0; the result is then in [0, 1].

    The side is chosen by the sign bit of turning - x (f is 0 or -1, n is 1 or -1)
    rather than by a comparison.
    """
    d = turning - x
    f = double_to_high_int_bits(d) >> 31
    n = f | 1
    return div((turning * n - f) * (x + f), DOUBLE_MIN_NORMAL - f + (x + shape * d) * n) - f


def barron_spline_f32(x: float, shape: float, turning: float) -> float:
    x = f32(x)
    shape = f32(shape)
    turning = f32(turning)
    d = f32(turning - x)
    f = float_to_int_bits(d) >> 31
    n = f | 1
    num = f32(f32(turning * n - f) * f32(x + f))
    den = f32(f32(FLOAT_MIN_NORMAL - f) + f32(f32(x + f32(shape * d)) * n))
    return f32(f32(div(num, den)) - f)
