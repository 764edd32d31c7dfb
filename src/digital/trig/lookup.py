# trig/lookup.py

"""
Table-driven sin/cos/tan in radians, degrees and turns.

Each call is one or two reads from the precomputed sine table:
    sin(a) = table[floor(a * unit_to_index) & TABLE_MASK]
    cos(a) = table[floor(a * unit_to_index) + SIN_TO_COS & TABLE_MASK]
For best precision keep angles within one turn of zero (|radians| <= 2pi,
|degrees| <= 360, |turns| <= 1); farther out, the product a * unit_to_index
loses fractional bits and results degrade gradually.

Functions without a suffix take and return doubles; ``_f32`` variants narrow
their argument to binary32, form the index with binary32 arithmetic and return
entries of the float table.
"""

from __future__ import annotations

from ..core.bits import f32
from ..core.ieee import div, floor_int32
from .constants import (
    DEG_TO_INDEX,
    DEG_TO_INDEX_D,
    RAD_TO_INDEX,
    RAD_TO_INDEX_D,
    SIN_TO_COS,
    TABLE_MASK,
    TURN_TO_INDEX,
    TURN_TO_INDEX_D,
)
from .sin_table import SIN_TABLE, SIN_TABLE_D


def _index(angle: float, to_index: float) -> int:
    return floor_int32(angle * to_index)


def _index_f32(angle: float, to_index: float) -> int:
    return floor_int32(f32(f32(angle) * to_index))


def _tan_d(idx: int) -> float:
    idx &= TABLE_MASK
    return div(SIN_TABLE_D[idx], SIN_TABLE_D[(idx + SIN_TO_COS) & TABLE_MASK])


def _tan_f(idx: int) -> float:
    idx &= TABLE_MASK
    return f32(div(SIN_TABLE[idx], SIN_TABLE[(idx + SIN_TO_COS) & TABLE_MASK]))


# ============================================================
# Double precision
# ============================================================

def sin(radians: float) -> float:
    """Sine from the lookup table; 0 to 2pi is one rotation."""
    return SIN_TABLE_D[_index(radians, RAD_TO_INDEX_D) & TABLE_MASK]


def cos(radians: float) -> float:
    """Cosine from the lookup table; 0 to 2pi is one rotation."""
    return SIN_TABLE_D[(_index(radians, RAD_TO_INDEX_D) + SIN_TO_COS) & TABLE_MASK]


def tan(radians: float) -> float:
    """
    Tangent as the ratio of two table entries.

    Where the cosine entry is exactly zero (90 and 270 degrees) this is a signed
    infinity, as IEEE-754 division gives.
    """
    return _tan_d(_index(radians, RAD_TO_INDEX_D))


def sin_deg(degrees: float) -> float:
    return SIN_TABLE_D[_index(degrees, DEG_TO_INDEX_D) & TABLE_MASK]


def cos_deg(degrees: float) -> float:
    return SIN_TABLE_D[(_index(degrees, DEG_TO_INDEX_D) + SIN_TO_COS) & TABLE_MASK]


def tan_deg(degrees: float) -> float:
    return _tan_d(_index(degrees, DEG_TO_INDEX_D))


def sin_turns(turns: float) -> float:
    return SIN_TABLE_D[_index(turns, TURN_TO_INDEX_D) & TABLE_MASK]


def cos_turns(turns: float) -> float:
    return SIN_TABLE_D[(_index(turns, TURN_TO_INDEX_D) + SIN_TO_COS) & TABLE_MASK]


def tan_turns(turns: float) -> float:
    return _tan_d(_index(turns, TURN_TO_INDEX_D))


# ============================================================
# Single precision
# ============================================================

def sin_f32(radians: float) -> float:
    return SIN_TABLE[_index_f32(radians, RAD_TO_INDEX) & TABLE_MASK]


def cos_f32(radians: float) -> float:
    return SIN_TABLE[(_index_f32(radians, RAD_TO_INDEX) + SIN_TO_COS) & TABLE_MASK]


def tan_f32(radians: float) -> float:
    return _tan_f(_index_f32(radians, RAD_TO_INDEX))


def sin_deg_f32(degrees: float) -> float:
    return SIN_TABLE[_index_f32(degrees, DEG_TO_INDEX) & TABLE_MASK]


def cos_deg_f32(degrees: float) -> float:
    return SIN_TABLE[(_index_f32(degrees, DEG_TO_INDEX) + SIN_TO_COS) & TABLE_MASK]


def tan_deg_f32(degrees: float) -> float:
    return _tan_f(_index_f32(degrees, DEG_TO_INDEX))


def sin_turns_f32(turns: float) -> float:
    return SIN_TABLE[_index_f32(turns, TURN_TO_INDEX) & TABLE_MASK]


def cos_turns_f32(turns: float) -> float:
    return SIN_TABLE[(_index_f32(turns, TURN_TO_INDEX) + SIN_TO_COS) & TABLE_MASK]


def tan_turns_f32(turns: float) -> float:
    return _tan_f(_index_f32(turns, TURN_TO_INDEX))
