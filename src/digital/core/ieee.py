"""Non-raising IEEE-754 arithmetic.

Python's float operations raise where IEEE-754 produces a special value
(``1.0 / 0.0``, ``math.sqrt(-1.0)``, ``math.exp(1000.0)``, ``math.fmod(inf, 1.0)``).
The numeric core routes those operations through here so every public function
stays total over its input type.
"""

from __future__ import annotations

import math

from .bits import INT32_MAX, INT32_MIN, INT64_MAX, INT64_MIN


def div(a: float, b: float) -> float:
    try:
        return a / b
    except ZeroDivisionError:
        if a != a or a == 0.0:
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


def sqrt(x: float) -> float:
    if x < 0.0:
        return math.nan
    return math.sqrt(x)


def exp(x: float) -> float:
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf


def log(x: float) -> float:
    if x == 0.0:
        return -math.inf
    if x < 0.0:
        return math.nan
    return math.log(x)


def _is_odd_integer(y: float) -> bool:
    return math.isfinite(y) and y == math.floor(y) and math.fmod(y, 2.0) != 0.0


def pow(x: float, y: float) -> float:
    try:
        return math.pow(x, y)
    except ValueError:
        # 0 to a negative power; a finite negative base to a non-integer power
        if x == 0.0:
            return math.copysign(math.inf, x) if _is_odd_integer(y) else math.inf
        return math.nan
    except OverflowError:
        if x < 0.0 and _is_odd_integer(y):
            return -math.inf
        return math.inf


def fmod(a: float, b: float) -> float:
    """C ``fmod``: the result takes the sign of ``a``."""
    if math.isinf(a) or b == 0.0 or a != a or b != b:
        return math.nan
    return math.fmod(a, b)


def signum(x: float) -> float:
    """-1.0, 1.0, or ``x`` itself for signed zeros and NaN."""
    if x > 0.0:
        return 1.0
    if x < 0.0:
        return -1.0
    return x


def saturate_int32(x: float) -> int:
    """Truncate toward zero into the signed 32-bit range; NaN becomes 0."""
    if x != x:
        return 0
    if x >= INT32_MAX:
        return INT32_MAX
    if x <= INT32_MIN:
        return INT32_MIN
    return int(x)


def floor_int32(x: float) -> int:
    """Floor into the signed 32-bit range; NaN becomes 0."""
    if x != x:
        return 0
    if x >= INT32_MAX:
        return INT32_MAX
    if x <= INT32_MIN:
        return INT32_MIN
    return math.floor(x)


def saturate_int64(x: float) -> int:
    """Truncate toward zero into the signed 64-bit range; NaN becomes 0."""
    if x != x:
        return 0
    if x >= INT64_MAX:
        return INT64_MAX
    if x <= INT64_MIN:
        return INT64_MIN
    return int(x)
