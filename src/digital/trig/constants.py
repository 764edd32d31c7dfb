# trig/constants.py

from __future__ import annotations

import math

from ..core.bits import f32

# Float (binary32) constants are stored as the Python float holding the exact
# binary32 value; *_D constants are full double precision.
PI = f32(math.pi)
PI_D = math.pi
PI_INVERSE = f32(1.0 / math.pi)
PI_INVERSE_D = 1.0 / math.pi
PI2 = f32(PI * 2.0)
TAU = PI2
PI2_D = math.pi * 2.0
TAU_D = PI2_D
HALF_PI = f32(PI * 0.5)
ETA = HALF_PI
HALF_PI_D = math.pi * 0.5
ETA_D = HALF_PI_D
QUARTER_PI = f32(PI * 0.25)
QUARTER_PI_D = math.pi * 0.25

radians_to_degrees = f32(180.0 / PI)
degrees_to_radians = f32(PI / 180.0)
radians_to_degrees_d = 180.0 / math.pi
degrees_to_radians_d = math.pi / 180.0

# 2^14 entries; 64KB per table in a packed float32 array.
SIN_BITS = 14
TABLE_SIZE = 1 << SIN_BITS
# Adding this to a table index turns a sine lookup into a cosine lookup.
SIN_TO_COS = TABLE_SIZE >> 2
TABLE_MASK = TABLE_SIZE - 1

RAD_FULL = PI2
DEG_FULL = 360.0
TURN_FULL = 1.0

RAD_TO_INDEX = f32(TABLE_SIZE / RAD_FULL)
DEG_TO_INDEX = f32(TABLE_SIZE / DEG_FULL)
TURN_TO_INDEX = float(TABLE_SIZE)

RAD_TO_INDEX_D = TABLE_SIZE / PI2_D
DEG_TO_INDEX_D = TABLE_SIZE / 360.0
TURN_TO_INDEX_D = float(TABLE_SIZE)
