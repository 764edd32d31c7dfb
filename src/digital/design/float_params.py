# design/float_params.py

from __future__ import annotations

import argparse
import sys
from dataclasses import fields
from typing import List, Optional

from digital.numeric import roots, spline
from digital.trig import constants as tc
from digital.trig import inverse


class FloatParam:
    def __init__(self, category: str, name: str, value: float, unit: str):
        self.category = category
        self.name = name
        self.value = value
        self.unit = unit
        self.hex_str = float(value).hex()


def build_float_parameters() -> List[FloatParam]:
    """Collects every constant the approximations depend on, grouped for display."""
    params = []

    # ---------------------------------------------------------
    # 1. Angle constants (float32 values shown widened)
    # ---------------------------------------------------------
    for name in ("PI", "PI2", "HALF_PI", "QUARTER_PI", "PI_INVERSE",
                 "radians_to_degrees", "degrees_to_radians"):
        params.append(FloatParam("Angle Constants (float32)", name, getattr(tc, name), ""))
    for name in ("PI_D", "PI2_D", "HALF_PI_D", "QUARTER_PI_D", "PI_INVERSE_D",
                 "radians_to_degrees_d", "degrees_to_radians_d"):
        params.append(FloatParam("Angle Constants (float64)", name, getattr(tc, name), ""))

    # ---------------------------------------------------------
    # 2. Table indexing
    # ---------------------------------------------------------
    params.append(FloatParam("Table Indexing", "TABLE_SIZE", float(tc.TABLE_SIZE), "entries"))
    params.append(FloatParam("Table Indexing", "SIN_TO_COS", float(tc.SIN_TO_COS), "entries"))
    for name in ("RAD_TO_INDEX", "DEG_TO_INDEX", "TURN_TO_INDEX",
                 "RAD_TO_INDEX_D", "DEG_TO_INDEX_D", "TURN_TO_INDEX_D"):
        params.append(FloatParam("Table Indexing", name, getattr(tc, name), "index/unit"))

    # ---------------------------------------------------------
    # 3. Polynomial coefficients
    # ---------------------------------------------------------
    for label, coeffs in (("atan radians", inverse.ATAN_RADIANS),
                          ("atan degrees", inverse.ATAN_DEGREES),
                          ("atan turns", inverse.ATAN_TURNS),
                          ("asin radians", inverse.ASIN_RADIANS),
                          ("asin degrees", inverse.ASIN_DEGREES),
                          ("acos degrees", inverse.ACOS_DEGREES),
                          ("asin turns", inverse.ASIN_TURNS)):
        for fld in fields(coeffs):
            params.append(FloatParam("Polynomial Coefficients", f"{label} [{fld.name}]",
                                     getattr(coeffs, fld.name), ""))

    # ---------------------------------------------------------
    # 4. Bit-trick magic numbers
    # ---------------------------------------------------------
    params.append(FloatParam("Magic Numbers", "inv_sqrt 32-bit", float(roots.INV_SQRT_MAGIC_32), "int"))
    params.append(FloatParam("Magic Numbers", "inv_sqrt 64-bit", float(roots.INV_SQRT_MAGIC_64), "int"))
    params.append(FloatParam("Magic Numbers", "cbrt 32-bit", float(roots.CBRT_MAGIC), "int"))
    params.append(FloatParam("Magic Numbers", "barron float bias", spline.FLOAT_MIN_NORMAL, ""))
    params.append(FloatParam("Magic Numbers", "barron double bias", spline.DOUBLE_MIN_NORMAL, ""))

    return params


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Print every approximation constant as hex-float and decimal.")
    p.add_argument("--category", type=str, default="", help="Only print categories containing this text.")
    p.add_argument("--out-txt", type=str, default="", help="Optional file to save the output table.")
    args = p.parse_args(argv)

    params = build_float_parameters()
    if args.category:
        params = [q for q in params if args.category.lower() in q.category.lower()]

    lines = []
    lines.append("Approximation constants")
    lines.append("=" * 110)

    current_category = ""
    for p_obj in params:
        if p_obj.category != current_category:
            lines.append(f"\n--- {p_obj.category} ---")
            lines.append(f"{'Parameter Name':<35} | {'Hex-Float (IEEE 754)':<25} | {'Decimal Value'}")
            lines.append("-" * 110)
            current_category = p_obj.category
        lines.append(f"{p_obj.name:<35} | {p_obj.hex_str:<25} | {p_obj.value:<25.17g} {p_obj.unit}")

    output_text = "\n".join(lines)
    print(output_text)

    if args.out_txt:
        with open(args.out_txt, "w", encoding="utf-8") as f:
            f.write(output_text)
        print(f"\nSaved results to {args.out_txt}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
