from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Tuple

from ..core.bits import f32
from ..core.ieee import floor_int32
from .constants import RAD_FULL, SIN_BITS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SineTable:
    """
    Full-turn sine lookup table sampled at slice centres.

    Entry i holds sin((i + 0.5) / size * 2pi), the sine at the centre of the i-th
    of ``size`` equal slices of one turn. The sampled angle is formed in float32
    (as the float table's consumers index it) and the sine itself is taken in
    double precision; ``values_d`` keeps the double, ``values_f`` its binary32
    narrowing. Index 0 and the indices nearest 90, 180 and 270 degrees are then
    overwritten with exactly 0, 1, 0, -1.

    Since sin(t + pi/2) = cos(t), ``values[(i + size // 4) & mask]`` is the cosine
    at slice i. Every lookup masks its index, so any int is a valid index.
    """
    bits: int
    values_f: Tuple[float, ...]
    values_d: Tuple[float, ...]

    def __post_init__(self) -> None:
        if not 2 <= self.bits <= 24:
            raise ValueError("bits must be between 2 and 24")
        if len(self.values_f) != self.size or len(self.values_d) != self.size:
            raise ValueError("values must have length 2**bits")

    @property
    def size(self) -> int:
        return 1 << self.bits

    @property
    def mask(self) -> int:
        return self.size - 1

    @property
    def sin_to_cos(self) -> int:
        return self.size >> 2

    @classmethod
    def build(cls, bits: int = SIN_BITS) -> "SineTable":
        if not 2 <= bits <= 24:
            raise ValueError("bits must be between 2 and 24")
        size = 1 << bits
        mask = size - 1
        values_d = [0.0] * size
        for i in range(size):
            values_d[i] = math.sin(f32(((i + 0.5) / size) * RAD_FULL))
        values_f = [f32(v) for v in values_d]

        # The right angles get exact values; they are the most likely to need them.
        deg_to_index = f32(size / 360.0)
        for deg, exact in ((0.0, 0.0), (90.0, 1.0), (180.0, 0.0), (270.0, -1.0)):
            idx = floor_int32(f32(deg * deg_to_index)) & mask
            values_d[idx] = exact
            values_f[idx] = exact

        logger.debug("built %d-entry sine table (bits=%d)", size, bits)
        return cls(bits=bits, values_f=tuple(values_f), values_d=tuple(values_d))

    def sin_at(self, index: int) -> float:
        return self.values_d[index & self.mask]

    def cos_at(self, index: int) -> float:
        return self.values_d[(index + self.sin_to_cos) & self.mask]

    def sin_at_f32(self, index: int) -> float:
        return self.values_f[index & self.mask]

    def cos_at_f32(self, index: int) -> float:
        return self.values_f[(index + self.sin_to_cos) & self.mask]


# Built once, when the module is first imported; the import lock guarantees no
# reader sees a partially built table.
DEFAULT_TABLE = SineTable.build(SIN_BITS)

SIN_TABLE: Tuple[float, ...] = DEFAULT_TABLE.values_f
SIN_TABLE_D: Tuple[float, ...] = DEFAULT_TABLE.values_d


def sin_cos_at(index: int) -> Tuple[float, float]:
    """
    (sin, cos) for a raw table index, wrapped into range.

    With a uniformly random 14-bit index this is a random unit vector (y, x).
    """
    return DEFAULT_TABLE.sin_at(index), DEFAULT_TABLE.cos_at(index)


def sin_cos_at_f32(index: int) -> Tuple[float, float]:
    return DEFAULT_TABLE.sin_at_f32(index), DEFAULT_TABLE.cos_at_f32(index)
