# design/minimax_polys.py

from __future__ import annotations

import argparse
import math
import sys
from typing import List, Optional, Tuple

from digital.core.errors import MissingDependencyError
from digital.trig.inverse import (
    ASIN_RADIANS,
    ATAN_RADIANS,
    AsinCoefficients,
    AtanCoefficients,
)


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise MissingDependencyError('Need numpy. Install: pip install "digital[design]"') from e


def _need_scipy():
    try:
        import scipy.optimize as opt
        return opt
    except ImportError as e:
        raise MissingDependencyError('Need scipy. Install: pip install "digital[design]"') from e


# ============================================================
# Error of the shipped coefficient sets (pure Python)
# ============================================================

def atan_error(coeffs: AtanCoefficients = ATAN_RADIANS, scale: float = 1.0,
               num_points: int = 20000, x_max: float = 64.0) -> Tuple[float, float]:
    """
    (max, mean) absolute error of ``coeffs`` against math.atan * scale for x on
    a grid over [0, x_max], plus the limit x -> inf.
    """
    worst = 0.0
    total = 0.0
    for k in range(num_points + 1):
        x = x_max * k / num_points
        err = abs(coeffs.eval(x) - math.atan(x) * scale)
        total += err
        worst = max(worst, err)
    worst = max(worst, abs(coeffs.eval(sys.float_info.max) - (math.pi / 2.0) * scale))
    return worst, total / (num_points + 1)


def asin_error(coeffs: AsinCoefficients = ASIN_RADIANS, scale: float = 1.0,
               num_points: int = 20000) -> Tuple[float, float]:
    """(max, mean) absolute error of ``coeffs.asin`` against math.asin * scale over [-1, 1]."""
    worst = 0.0
    total = 0.0
    for k in range(num_points + 1):
        a = -1.0 + 2.0 * k / num_points
        err = abs(coeffs.asin(a) - math.asin(a) * scale)
        total += err
        worst = max(worst, err)
    return worst, total / (num_points + 1)


# ============================================================
# Refits (numpy / scipy)
# ============================================================

def optimize_minimax_atan(degree: int = 11, num_points: int = 10000) -> Tuple[List[float], List[int], float]:
    """
    Refit the odd polynomial in c = (n - 1) / (n + 1).

    atan(n) = pi/4 + atan(c), so the polynomial approximates atan(c) on [-1, 1].
    Returns (coefficients, powers, max_error).
    """
    np = _need_numpy()
    opt = _need_scipy()

    n_terms = (degree + 1) // 2
    powers = [2 * i + 1 for i in range(n_terms)]

    c = np.linspace(-1.0, 1.0, num_points)
    y = np.arctan(c)
    A = np.vstack([c**p for p in powers]).T

    # 1. Initial Guess: Least Squares Fit
    k_init, _, _, _ = np.linalg.lstsq(A, y, rcond=None)

    # 2. Objective Function: Maximum Absolute Error (L-infinity norm)
    def cost(k) -> float:
        return float(np.max(np.abs(y - A @ k)))

    # 3. Optimize to find the Minimax coefficients
    res = opt.minimize(
        cost,
        k_init,
        method='Powell',
        options={'xtol': 1e-12, 'ftol': 1e-12, 'maxiter': 5000}
    )
    return list(res.x), powers, cost(res.x)


def optimize_minimax_asin(num_points: int = 10000) -> Tuple[List[float], float]:
    """
    Refit the cubic k0 - k1*a + k2*a^2 - k3*a^3 with
    asin(a) = pi/2 - sqrt(1 - a) * cubic(a) on [0, 1].
    Returns ([k0, k1, k2, k3], max_error).
    """
    np = _need_numpy()
    opt = _need_scipy()

    a = np.linspace(0.0, 1.0, num_points)
    y = np.arcsin(a)
    s = np.sqrt(1.0 - a)
    # columns give the contribution of k0..k3 to pi/2 - asin(a)
    A = np.vstack([s, -s * a, s * a**2, -s * a**3]).T
    target = math.pi / 2.0 - y

    k_init, _, _, _ = np.linalg.lstsq(A, target, rcond=None)

    def cost(k) -> float:
        return float(np.max(np.abs(target - A @ k)))

    res = opt.minimize(
        cost,
        k_init,
        method='Powell',
        options={'xtol': 1e-12, 'ftol': 1e-12, 'maxiter': 5000}
    )
    return list(res.x), cost(res.x)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Check and refit the atan/asin polynomial approximations.")
    p.add_argument("--degree", type=int, default=11, help="Maximum odd degree for the atan refit (default: 11).")
    p.add_argument("--unit", choices=["radians", "degrees", "turns"], default="radians",
                   help="Scale refit coefficients to this unit (default: radians).")
    p.add_argument("--check-only", action="store_true", help="Only report the shipped coefficients' error.")
    p.add_argument("--out-txt", type=str, default="", help="Optional text file to save the output.")
    args = p.parse_args(argv)

    max_degree = args.degree if args.degree % 2 != 0 else args.degree - 1
    if max_degree < 1:
        print("Error: Degree must be at least 1.", file=sys.stderr)
        return 1

    scale = {"radians": 1.0, "degrees": 180.0 / math.pi, "turns": 0.5 / math.pi}[args.unit]

    lines = []
    lines.append("Shipped coefficient sets (radians)")
    lines.append("=" * 95)
    at_max, at_mean = atan_error()
    as_max, as_mean = asin_error()
    lines.append(f"atan : max {at_max:.8e}  mean {at_mean:.8e}")
    lines.append(f"asin : max {as_max:.8e}  mean {as_mean:.8e}")

    if not args.check_only:
        k, powers, err = optimize_minimax_atan(max_degree)
        lines.append(f"\n--- Refit: atan(n) = {math.pi / 4.0 * scale:.17g} + P(c), c = (n-1)/(n+1), {args.unit} ---")
        lines.append(f"Maximum Absolute Error (radians): {err:.8e}")
        lines.append("-" * 95)
        lines.append(f"{'Power':<8} | {'Hex-Float (IEEE 754)':<25} | {'Decimal Coefficient'}")
        lines.append("-" * 95)
        for coef, pw in zip(k, powers):
            v = coef * scale
            lines.append(f"c^{pw:<6} | {float(v).hex():<25} | {v:+.18f}")

        ks, err_s = optimize_minimax_asin()
        lines.append(f"\n--- Refit: asin(a) = {math.pi / 2.0 * scale:.17g} - sqrt(1-a) * Q(a), {args.unit} ---")
        lines.append(f"Maximum Absolute Error (radians): {err_s:.8e}")
        lines.append("-" * 95)
        for name, coef in zip(("k0", "k1", "k2", "k3"), ks):
            v = coef * scale
            lines.append(f"{name:<8} | {float(v).hex():<25} | {v:+.18f}")

    output_text = "\n".join(lines)
    print(output_text)

    if args.out_txt:
        with open(args.out_txt, "w", encoding="utf-8") as f:
            f.write(output_text + "\n")
        print(f"\nSaved results to {args.out_txt}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
