"""
Polynomial arctangent, arcsine and arccosine in radians, degrees and turns.

atan family: sheet 11 of "Approximations for Digital Computers" (RAND, 1955).
With n = |x| and the "equally good" substitution c = (n - 1) / (n + 1), which
maps n in [0, inf) onto c in [-1, 1),
    atan(x) = signum(x) * (pi/4 + k1*c + k3*c^3 + ... + k11*c^11)
Average error of atan2 is about 1.06e-6 rad, max about 1.92e-6 rad.

asin/acos family: a cubic in a times sqrt(1 - |a|) (Abramowitz & Stegun
4.4.45 form), evaluated on either side of zero. Average error about 2.8e-5 rad,
max about 6.8e-5 rad. Degree and turn variants carry their own fitted
coefficients rather than scaling the radian result.

Nothing here raises. NaN propagates; |a| > 1 for asin/acos feeds a negative
number to the square root and yields NaN.
"""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from typing import Callable

from ..core.bits import f32
from ..core.ieee import div, signum, sqrt
from .constants import HALF_PI, HALF_PI_D, QUARTER_PI_D

_DBL_MAX = sys.float_info.max


@dataclass(frozen=True)
class AtanCoefficients:
    """Offset (the value at x = 1) and the six odd-power coefficients in c."""
    offset: float
    k1: float
    k3: float
    k5: float
    k7: float
    k9: float
    k11: float

    def eval(self, i: float) -> float:
        n = abs(i)
        c = (n - 1.0) / (n + 1.0)
        c2 = c * c
        c3 = c * c2
        c5 = c3 * c2
        c7 = c5 * c2
        c9 = c7 * c2
        c11 = c9 * c2
        return signum(i) * (self.offset
                            + (self.k1 * c + self.k3 * c3 + self.k5 * c5
                               + self.k7 * c7 + self.k9 * c9 + self.k11 * c11))


@dataclass(frozen=True)
class AsinCoefficients:
    """
    half: the value of asin(1) in the target unit; full: acos(-1).
    k0..k3: cubic multiplying sqrt(1 - |a|).
    """
    half: float
    full: float
    k0: float
    k1: float
    k2: float
    k3: float

    def asin(self, a: float) -> float:
        a2 = a * a
        a3 = a * a2
        if a >= 0.0:
            return self.half - sqrt(1.0 - a) * (self.k0 - self.k1 * a + self.k2 * a2 - self.k3 * a3)
        return sqrt(1.0 + a) * (self.k0 + self.k1 * a + self.k2 * a2 + self.k3 * a3) - self.half

    def acos(self, a: float) -> float:
        a2 = a * a
        a3 = a * a2
        if a >= 0.0:
            return sqrt(1.0 - a) * (self.k0 - self.k1 * a + self.k2 * a2 - self.k3 * a3)
        return self.full - sqrt(1.0 + a) * (self.k0 + self.k1 * a + self.k2 * a2 + self.k3 * a3)

    def narrowed(self) -> "AsinCoefficients":
        """The same set with every coefficient rounded to binary32."""
        return AsinCoefficients(*(f32(v) for v in (self.half, self.full, self.k0, self.k1, self.k2, self.k3)))


ATAN_RADIANS = AtanCoefficients(
    QUARTER_PI_D, 0.99997726, -0.33262347, 0.19354346, -0.11643287, 0.05265332, -0.0117212)
ATAN_DEGREES = AtanCoefficients(
    45.0, 57.2944766070562, -19.05792099799635, 11.089223410359068,
    -6.6711120475953765, 3.016813013351768, -0.6715752908287405)
ATAN_TURNS = AtanCoefficients(
    0.125, 0.15915132390848943, -0.052938669438878753, 0.030803398362108523,
    -0.01853086679887605, 0.008380036148199356, -0.0018654869189687236)

ASIN_RADIANS = AsinCoefficients(HALF_PI_D, math.pi, 1.5707288, 0.2121144, 0.0742610, 0.0187293)
ASIN_DEGREES = AsinCoefficients(
    90.0, 180.0, 89.99613099964837, 12.153259893949748, 4.2548418824210055, 1.0731098432343729)
ACOS_DEGREES = AsinCoefficients(
    90.0, 180.0, 89.99613099964837, 12.153259533621753, 4.254842010910525, 1.0731098035209208)
ASIN_TURNS = AsinCoefficients(
    0.25, 0.5, 0.24998925277680104, 0.033759055260971525, 0.011819005228947238, 0.0029808606756510357)

_ASIN_RADIANS_F = ASIN_RADIANS.narrowed()
_ASIN_DEGREES_F = ASIN_DEGREES.narrowed()
_ACOS_DEGREES_F = ACOS_DEGREES.narrowed()


def _identity(v: float) -> float:
    return v


# ============================================================
# atan
# ============================================================

def atan_unchecked(i: float) -> float:
    """atan in radians for finite input; used by the atan2 family."""
    return ATAN_RADIANS.eval(i)


def atan_unchecked_deg(i: float) -> float:
    return ATAN_DEGREES.eval(i)


def atan_unchecked_turns(i: float) -> float:
    return ATAN_TURNS.eval(i)


def _clip(i: float) -> float:
    # infinite input is clipped to the largest double so c = (n-1)/(n+1) is 1, not NaN
    if i > _DBL_MAX:
        return _DBL_MAX
    if i < -_DBL_MAX:
        return -_DBL_MAX
    return i


def atan(i: float) -> float:
    """Inverse tangent in radians, from -pi/2 to pi/2 inclusive; accepts infinities."""
    return ATAN_RADIANS.eval(_clip(i))


def atan_deg(i: float) -> float:
    """Inverse tangent in degrees, from -90 to 90 inclusive."""
    return ATAN_DEGREES.eval(_clip(i))


def atan_turns(i: float) -> float:
    """Inverse tangent in turns, from -0.25 to 0.25 inclusive."""
    return ATAN_TURNS.eval(_clip(i))


def atan_f32(i: float) -> float:
    return f32(ATAN_RADIANS.eval(_clip(f32(i))))


def atan_deg_f32(i: float) -> float:
    return f32(ATAN_DEGREES.eval(_clip(f32(i))))


def atan_turns_f32(i: float) -> float:
    return f32(ATAN_TURNS.eval(_clip(f32(i))))


# ============================================================
# atan2
# ============================================================

def _ratio(y: float, x: float, narrow: Callable[[float], float]):
    """
    n = y / x with the two degenerate ratios resolved; returns (n, x).

    Both infinite: n is NaN, replaced by 1 when y == x and -1 otherwise.
    n infinite: y dominates x, so x is treated as 0 for the quadrant choice.
    """
    n = narrow(div(y, x))
    if n != n:
        n = 1.0 if y == x else -1.0
    elif math.isinf(n):
        x = 0.0
    return n, x


def _atan2_signed(y: float, x: float, atan_fn: Callable[[float], float],
                  half_turn: float, quarter_turn: float,
                  narrow: Callable[[float], float]) -> float:
    n, x = _ratio(y, x, narrow)
    if x > 0:
        return narrow(atan_fn(n))
    if x < 0:
        if y >= 0:
            return narrow(atan_fn(n) + half_turn)
        return narrow(atan_fn(n) - half_turn)
    if y > 0:
        return narrow(x + quarter_turn)
    if y < 0:
        return narrow(x - quarter_turn)
    # 0 for (0, 0); NaN if either input is NaN
    return narrow(x + y)


def _atan2_positive(y: float, x: float, atan_fn: Callable[[float], float],
                    full_turn: float, narrow: Callable[[float], float]) -> float:
    n, x = _ratio(y, x, narrow)
    if x > 0:
        if y >= 0:
            return narrow(atan_fn(n))
        return narrow(atan_fn(n) + full_turn)
    if x < 0:
        return narrow(atan_fn(n) + full_turn * 0.5)
    if y > 0:
        return narrow(x + full_turn * 0.25)
    if y < 0:
        return narrow(x + full_turn * 0.75)
    return narrow(x + y)


def atan2(y: float, x: float) -> float:
    """
    Angle from the origin to (x, y) in radians, from -pi to pi.

    Note the (y, x) argument order. atan2(0, 0) is 0.
    """
    return _atan2_signed(y, x, atan_unchecked, math.pi, HALF_PI_D, _identity)


def atan2_deg(y: float, x: float) -> float:
    """Angle to (x, y) in degrees, from -180 to 180."""
    return _atan2_signed(y, x, atan_unchecked_deg, 180.0, 90.0, _identity)


def atan2_deg360(y: float, x: float) -> float:
    """Angle to (x, y) in degrees, from 0 (inclusive) to 360 (exclusive)."""
    return _atan2_positive(y, x, atan_unchecked_deg, 360.0, _identity)


def atan2_turns(y: float, x: float) -> float:
    """Angle to (x, y) in turns, from 0 (inclusive) to 1 (exclusive)."""
    return _atan2_positive(y, x, atan_unchecked_turns, 1.0, _identity)


def atan2_f32(y: float, x: float) -> float:
    return _atan2_signed(f32(y), f32(x), atan_unchecked, math.pi, HALF_PI, f32)


def atan2_deg_f32(y: float, x: float) -> float:
    return _atan2_signed(f32(y), f32(x), atan_unchecked_deg, 180.0, 90.0, f32)


def atan2_deg360_f32(y: float, x: float) -> float:
    return _atan2_positive(f32(y), f32(x), atan_unchecked_deg, 360.0, f32)


def atan2_turns_f32(y: float, x: float) -> float:
    return _atan2_positive(f32(y), f32(x), atan_unchecked_turns, 1.0, f32)


# ============================================================
# asin / acos
# ============================================================

def asin(a: float) -> float:
    """Inverse sine in radians, from -pi/2 to pi/2; a should be in [-1, 1]."""
    return ASIN_RADIANS.asin(a)


def asin_deg(a: float) -> float:
    return ASIN_DEGREES.asin(a)


def asin_turns(a: float) -> float:
    return ASIN_TURNS.asin(a)


def acos(a: float) -> float:
    """Inverse cosine in radians, from 0 to pi; a should be in [-1, 1]."""
    return ASIN_RADIANS.acos(a)


def acos_deg(a: float) -> float:
    return ACOS_DEGREES.acos(a)


def acos_turns(a: float) -> float:
    return ASIN_TURNS.acos(a)


def asin_f32(a: float) -> float:
    return f32(_ASIN_RADIANS_F.asin(f32(a)))


def asin_deg_f32(a: float) -> float:
    return f32(_ASIN_DEGREES_F.asin(f32(a)))


def asin_turns_f32(a: float) -> float:
    return f32(ASIN_TURNS.asin(f32(a)))


def acos_f32(a: float) -> float:
    return f32(_ASIN_RADIANS_F.acos(f32(a)))


def acos_deg_f32(a: float) -> float:
    return f32(_ACOS_DEGREES_F.acos(f32(a)))


def acos_turns_f32(a: float) -> float:
    return f32(ASIN_TURNS.acos(f32(a)))
