"""
Periodic wave shapes with period 2.

zigzag is a triangle wave between -1 and 1 (zigzag(0) = -1, zigzag(1) = 1);
sway and sway_cubic follow the same path but ease in and out with the quintic
and cubic smoothstep. sway_tight goes between 0 and 1 instead (0 at even
integers, 1 at odd ones). All of them pick the rising or falling half from
the parity of floor(value) instead of branching on it.
"""

from __future__ import annotations

from ..core.bits import f32
from ..core.ieee import saturate_int32


def _split(value: float):
    # truncate, then step down for negatives; exact negative integers land one below their floor
    z = saturate_int32(value)
    fl = z if value >= 0.0 else z - 1
    return value - fl, fl


def zigzag(value: float) -> float:
    value, fl = _split(value)
    fl = -(fl & 1) | 1
    return value * (fl << 1) - fl


def sway(value: float) -> float:
    value, fl = _split(value)
    fl = -(fl & 1) | 1
    return value * value * value * (value * (value * 6.0 - 15.0) + 10.0) * (fl << 1) - fl


def sway_cubic(value: float) -> float:
    value, fl = _split(value)
    fl = -(fl & 1) | 1
    return value * value * (3.0 - value * 2.0) * (fl << 1) - fl


def sway_tight(value: float) -> float:
    value, fl = _split(value)
    fl &= 1
    return value * value * value * (value * (value * 6.0 - 15.0) + 10.0) * (-fl | 1) + fl


def zigzag_f32(value: float) -> float:
    return f32(zigzag(f32(value)))


def sway_f32(value: float) -> float:
    return f32(sway(f32(value)))


def sway_cubic_f32(value: float) -> float:
    return f32(sway_cubic(f32(value)))


def sway_tight_f32(value: float) -> float:
    return f32(sway_tight(f32(value)))
