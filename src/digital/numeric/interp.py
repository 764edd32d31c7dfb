from __future__ import annotations

from ..core.bits import f32
from ..core.ieee import div, fmod
from ..trig.constants import PI, PI2, PI2_D, PI_D
from .helpers import fast_floor, floor


def lerp(from_value: float, to_value: float, progress: float) -> float:
    return from_value + (to_value - from_value) * progress


def lerp_f32(from_value: float, to_value: float, progress: float) -> float:
    return f32(f32(from_value) + f32(f32(f32(to_value) - f32(from_value)) * f32(progress)))


def norm(range_start: float, range_end: float, value: float) -> float:
    """Where ``value`` sits between the two ends: 0 at range_start, 1 at range_end."""
    return div(value - range_start, range_end - range_start)


def map_range(in_start: float, in_end: float, out_start: float, out_end: float, value: float) -> float:
    """Linearly map ``value`` from [in_start, in_end] onto [out_start, out_end]."""
    return out_start + div((value - in_start) * (out_end - out_start), in_end - in_start)


# ============================================================
# Angles: shortest-arc interpolation, result wrapped to one turn
# ============================================================

def lerp_angle(from_radians: float, to_radians: float, progress: float) -> float:
    """
    Interpolate along the shorter arc between two angles in radians.

    The result lies in [0, 2pi) for inputs within one turn of zero.
    """
    delta = fmod(to_radians - from_radians + PI2_D + PI_D, PI2_D) - PI_D
    return fmod(from_radians + delta * progress + PI2_D, PI2_D)


def lerp_angle_deg(from_degrees: float, to_degrees: float, progress: float) -> float:
    delta = fmod(to_degrees - from_degrees + 360.0 + 180.0, 360.0) - 180.0
    return fmod(from_degrees + delta * progress + 360.0, 360.0)


def lerp_angle_turns(from_turns: float, to_turns: float, progress: float) -> float:
    d = to_turns - from_turns + 0.5
    d = from_turns + progress * (d - floor(d) - 0.5)
    return d - floor(d)


def lerp_angle_f32(from_radians: float, to_radians: float, progress: float) -> float:
    a = f32(from_radians)
    s = f32(f32(f32(f32(to_radians) - a) + PI2) + PI)
    delta = f32(fmod(s, PI2) - PI)
    return f32(fmod(f32(f32(a + f32(delta * f32(progress))) + PI2), PI2))


def lerp_angle_deg_f32(from_degrees: float, to_degrees: float, progress: float) -> float:
    a = f32(from_degrees)
    s = f32(f32(f32(f32(to_degrees) - a) + 360.0) + 180.0)
    delta = f32(fmod(s, 360.0) - 180.0)
    return f32(fmod(f32(f32(a + f32(delta * f32(progress))) + 360.0), 360.0))


def lerp_angle_turns_f32(from_turns: float, to_turns: float, progress: float) -> float:
    a = f32(from_turns)
    d = f32(f32(f32(to_turns) - a) + 0.5)
    d = f32(a + f32(f32(progress) * f32(f32(d - fast_floor(d)) - 0.5)))
    return f32(d - fast_floor(d))
