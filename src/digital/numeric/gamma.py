"""
Factorial and gamma for real arguments, after T. J. Stieltjes
(http://www.luschny.de/math/factorial/approx/SimpleCases.html).

The continued-fraction correction is accurate once the argument reaches 7, so
smaller arguments are first shifted up, multiplying the shifted-over terms
into p, and the result is divided by p afterwards. That costs one
multiplication per unit below 6: factorial(-1000.0) needs about 1006 of them.
Once x is so negative that adding 1 no longer changes it (below about -2**53,
including -inf) the shift could never finish, and the result is NaN.
"""

from __future__ import annotations

import math

from ..core.bits import f32
from ..core.ieee import div, exp, log, sqrt
from ..trig.constants import PI2_D


def factorial(x: float) -> float:
    """Generalized factorial, x! = gamma(x + 1)."""
    y = x + 1.0
    p = 1.0
    if y < 7 and y + 1.0 == y:
        return math.nan
    while y < 7:
        p *= y
        y += 1.0
    r = exp(y * log(y) - y + 1.0 / (12.0 * y + 2.0 / (5.0 * y + 53.0 / (42.0 * y))))
    if x < 7.0:
        r = div(r, p)
    return r * sqrt(PI2_D / y)


def gamma(x: float) -> float:
    """Gamma function; exactly factorial(x - 1)."""
    return factorial(x - 1.0)


def factorial_f32(x: float) -> float:
    """factorial() of a float argument; computed in doubles, narrowed once."""
    return f32(factorial(f32(x)))


def gamma_f32(x: float) -> float:
    return f32(factorial(f32(x) - 1.0))
