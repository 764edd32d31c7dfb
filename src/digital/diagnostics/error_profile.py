#!/usr/bin/env python3
from __future__ import annotations

import argparse
import math
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from digital.core.errors import MissingDependencyError
from digital.numeric import gamma, roots
from digital.trig import inverse, lookup


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise MissingDependencyError('Need numpy. Install: pip install "digital[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise MissingDependencyError('Need matplotlib. Install: pip install "digital[diagnostics]"') from e


@dataclass(frozen=True)
class Case:
    name: str
    fn: Callable[[float], float]
    reference: Callable[[float], float]
    lo: float
    hi: float
    relative: bool = False


@dataclass(frozen=True)
class ProfileRow:
    name: str
    lo: float
    hi: float
    max_error: float
    mean_error: float
    worst_x: float
    relative: bool


def _cbrt_reference(x: float) -> float:
    return math.copysign(abs(x) ** (1.0 / 3.0), x)


def _angle_atan2(fn: Callable[[float, float], float]) -> Callable[[float], float]:
    return lambda t: fn(math.sin(t), math.cos(t))


CASES: Sequence[Case] = (
    Case("sin", lookup.sin, math.sin, -2.0 * math.pi, 2.0 * math.pi),
    Case("cos", lookup.cos, math.cos, -2.0 * math.pi, 2.0 * math.pi),
    Case("tan", lookup.tan, math.tan, -1.4, 1.4),
    Case("sin_f32", lookup.sin_f32, math.sin, -2.0 * math.pi, 2.0 * math.pi),
    Case("sin_deg", lookup.sin_deg, lambda d: math.sin(math.radians(d)), -360.0, 360.0),
    Case("sin_turns", lookup.sin_turns, lambda t: math.sin(2.0 * math.pi * t), -1.0, 1.0),
    Case("atan", inverse.atan, math.atan, -50.0, 50.0),
    Case("atan_f32", inverse.atan_f32, math.atan, -50.0, 50.0),
    Case("atan_deg", inverse.atan_deg, lambda x: math.degrees(math.atan(x)), -50.0, 50.0),
    Case("atan2 (unit circle)", _angle_atan2(inverse.atan2),
         _angle_atan2(math.atan2), -math.pi + 1e-9, math.pi - 1e-9),
    Case("asin", inverse.asin, math.asin, -1.0, 1.0),
    Case("acos", inverse.acos, math.acos, -1.0, 1.0),
    Case("asin_deg", inverse.asin_deg, lambda a: math.degrees(math.asin(a)), -1.0, 1.0),
    Case("inv_sqrt", roots.inv_sqrt, lambda x: 1.0 / math.sqrt(x), 1e-3, 1e3, relative=True),
    Case("inv_sqrt_f32", roots.inv_sqrt_f32, lambda x: 1.0 / math.sqrt(x), 1e-3, 1e3, relative=True),
    Case("cbrt_f32", roots.cbrt_f32, _cbrt_reference, -1000.0, 1000.0, relative=True),
    Case("factorial", gamma.factorial, lambda x: math.gamma(x + 1.0), 0.0, 20.0, relative=True),
    Case("gamma", gamma.gamma, math.gamma, 0.5, 20.0, relative=True),
)


def _error(got: float, want: float, relative: bool) -> float:
    err = abs(got - want)
    if relative and want != 0.0:
        return err / abs(want)
    return err


def profile_case(case: Case, num_points: int = 10000) -> ProfileRow:
    worst = 0.0
    worst_x = case.lo
    total = 0.0
    for k in range(num_points + 1):
        x = case.lo + (case.hi - case.lo) * k / num_points
        err = _error(case.fn(x), case.reference(x), case.relative)
        total += err
        if err > worst:
            worst = err
            worst_x = x
    return ProfileRow(case.name, case.lo, case.hi, worst, total / (num_points + 1), worst_x, case.relative)


def profile_all(num_points: int = 10000, only: Optional[Sequence[str]] = None) -> List[ProfileRow]:
    cases = [c for c in CASES if not only or c.name in only]
    return [profile_case(c, num_points) for c in cases]


def plot_profile(rows: Sequence[ProfileRow], outbase: str, num_points: int = 2000) -> str:
    np = _need_numpy()
    plt = _need_matplotlib()

    by_name = {c.name: c for c in CASES}
    n = len(rows)
    ncols = 3
    nrows = max(1, (n + ncols - 1) // ncols)

    fig, axes = plt.subplots(nrows, ncols, figsize=(4.0 * ncols, 2.8 * nrows), constrained_layout=True, squeeze=False)
    for ax in axes.flat[n:]:
        ax.set_visible(False)

    for ax, row in zip(axes.flat, rows):
        case = by_name[row.name]
        xs = np.linspace(case.lo, case.hi, num_points)
        errs = np.array([_error(case.fn(float(x)), case.reference(float(x)), case.relative) for x in xs])
        ax.plot(xs, errs, linewidth=0.7, color="tab:blue")
        ax.set_title(row.name, fontsize=10)
        ax.set_ylabel("rel. error" if case.relative else "abs. error", fontsize=8)
        ax.grid(True, color="0.88", linewidth=0.7)
        ax.tick_params(labelsize=7)

    path = outbase + ".png"
    fig.savefig(path, dpi=200)
    plt.close(fig)
    return path


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Error profile of each approximation against the math module.")
    p.add_argument("--points", type=int, default=10000, help="Grid points per function (default: 10000).")
    p.add_argument("--only", action="append", default=[], help="Restrict to this function (repeatable).")
    p.add_argument("--out-png", default="", help="Output base name for an error plot (needs matplotlib).")
    args = p.parse_args(argv)

    if args.points < 1:
        print("Error: points must be at least 1.")
        return 1

    rows = profile_all(args.points, args.only)
    if not rows:
        print("No matching functions. Known: " + ", ".join(c.name for c in CASES))
        return 1

    print(f"{'Function':<22} | {'Domain':<24} | {'Kind':<4} | {'Max error':<12} | {'Mean error':<12} | Worst x")
    print("-" * 100)
    for r in rows:
        domain = f"[{r.lo:.4g}, {r.hi:.4g}]"
        kind = "rel" if r.relative else "abs"
        print(f"{r.name:<22} | {domain:<24} | {kind:<4} | {r.max_error:<12.4e} | {r.mean_error:<12.4e} | {r.worst_x:.6g}")

    if args.out_png:
        path = plot_profile(rows, args.out_png)
        print(f"Saved: {path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
