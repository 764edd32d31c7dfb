# design/sine_tables.py

from __future__ import annotations

import argparse
import math
import sys
from dataclasses import dataclass
from typing import List, Optional

from digital.core.ieee import floor_int32
from digital.trig.sin_table import SineTable


@dataclass(frozen=True)
class TableError:
    bits: int
    max_sin_error: float
    max_cos_error: float
    mean_sin_error: float
    bound: float  # half a slice, in radians


def lookup_index(table: SineTable, radians: float) -> int:
    return floor_int32(radians * (table.size / (2.0 * math.pi))) & table.mask


def evaluate_table_error(table: SineTable, num_samples: int = 100000, turns: float = 1.0) -> TableError:
    """
    Compares sin/cos lookups through ``table`` with math.sin/math.cos on an even
    grid over [-turns, turns] full rotations.
    """
    span = 2.0 * math.pi * turns
    max_sin = 0.0
    max_cos = 0.0
    total = 0.0
    for k in range(num_samples + 1):
        theta = -span + (2.0 * span) * k / num_samples
        idx = lookup_index(table, theta)
        err_s = abs(table.sin_at(idx) - math.sin(theta))
        err_c = abs(table.cos_at(idx) - math.cos(theta))
        total += err_s
        if err_s > max_sin:
            max_sin = err_s
        if err_c > max_cos:
            max_cos = err_c
    return TableError(
        bits=table.bits,
        max_sin_error=max_sin,
        max_cos_error=max_cos,
        mean_sin_error=total / (num_samples + 1),
        bound=math.pi / table.size,
    )


def cos_offset_mismatch(table: SineTable) -> float:
    """
    Largest |table[(i + size/4) & mask] - cos(centre of slice i)| over all i,
    i.e. how well the quarter-turn offset reproduces cosine.
    """
    worst = 0.0
    for i in range(table.size):
        centre = (i + 0.5) / table.size * 2.0 * math.pi
        worst = max(worst, abs(table.cos_at(i) - math.cos(centre)))
    return worst


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Measure sine lookup table error for a given table size.")
    p.add_argument("--bits", type=int, default=14, help="log2 of the table size (default: 14).")
    p.add_argument("--samples", type=int, default=100000, help="Grid points per measurement (default: 100000).")
    p.add_argument("--turns", type=float, default=1.0, help="Measure over [-turns, turns] rotations (default: 1).")
    p.add_argument("--out-txt", type=str, default="", help="Optional text file to save the output.")
    args = p.parse_args(argv)

    if not 2 <= args.bits <= 24:
        print("Error: bits must be between 2 and 24.", file=sys.stderr)
        return 1
    if args.samples < 1:
        print("Error: samples must be at least 1.", file=sys.stderr)
        return 1

    table = SineTable.build(args.bits)
    err = evaluate_table_error(table, args.samples, args.turns)
    offset = cos_offset_mismatch(table)

    lines = []
    lines.append(f"Sine table: {table.size} entries (bits={table.bits}), SIN_TO_COS={table.sin_to_cos}, mask={table.mask}")
    lines.append("=" * 95)
    lines.append(f"Half-slice bound (rad)     : {err.bound:.8e}")
    lines.append(f"Max sin error              : {err.max_sin_error:.8e}")
    lines.append(f"Mean sin error             : {err.mean_sin_error:.8e}")
    lines.append(f"Max cos error              : {err.max_cos_error:.8e}")
    lines.append(f"Max cos offset mismatch    : {offset:.8e}")
    cardinals = [(d, floor_int32(d * (table.size / 360.0)) & table.mask) for d in (0, 90, 180, 270)]
    lines.append("Cardinal entries           : " + ", ".join(
        f"{d}deg->[{i}]={table.sin_at(i):+.1f}" for d, i in cardinals))

    output_text = "\n".join(lines)
    print(output_text)

    if args.out_txt:
        with open(args.out_txt, "w", encoding="utf-8") as f:
            f.write(output_text + "\n")
        print(f"\nSaved results to {args.out_txt}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
