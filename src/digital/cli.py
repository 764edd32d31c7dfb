from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import sys


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _format_value(v, as_hex: bool) -> str:
    if isinstance(v, int):
        return f"{v}  ({v & 0xFFFFFFFFFFFFFFFF:#018x})" if as_hex else str(v)
    if as_hex:
        return f"{v!r}  ({float(v).hex()})"
    return repr(v)


def cmd_eval(argv: list[str]) -> int:
    import digital

    p = argparse.ArgumentParser(prog="digital eval", description="Evaluate a registered function.")
    p.add_argument("name", help="function name (see `digital list`)")
    p.add_argument("args", nargs="*", help="numeric arguments (nan, inf and hex-floats accepted)")
    p.add_argument("--hex", action="store_true", help="also print the result as a hex-float")
    args = p.parse_args(argv)

    info = digital.function_info(args.name)
    values = []
    for s in args.args:
        try:
            if info["precision"] == "int64":
                values.append(int(s, 0))
            elif s.lower().lstrip("+-").startswith("0x"):
                values.append(float.fromhex(s))
            else:
                values.append(float(s))
        except ValueError:
            p.error(f"not a number: {s!r}")
    if len(values) != info["arity"]:
        p.error(f"{args.name} takes {info['arity']} argument(s), got {len(values)}")

    result = digital.evaluate(args.name, *values)
    print(_format_value(result, args.hex))
    return 0


def cmd_list(argv: list[str]) -> int:
    import digital

    p = argparse.ArgumentParser(prog="digital list", description="List registered functions.")
    p.add_argument("--precision", choices=["float32", "float64", "int64"], default=None)
    p.add_argument("--unit", choices=["radians", "degrees", "turns"], default=None)
    args = p.parse_args(argv)

    for name in digital.list_functions():
        info = digital.function_info(name)
        if args.precision and info["precision"] != args.precision:
            continue
        if args.unit and info["unit"] != args.unit:
            continue
        unit = info["unit"] or "-"
        print(f"{name:<20} {info['arity']}  {info['precision']:<8} {unit:<8} {info['summary']}")
    return 0


def cmd_table(argv: list[str]) -> int:
    from digital.trig import constants as tc
    from digital.trig.sin_table import DEFAULT_TABLE, SineTable

    p = argparse.ArgumentParser(prog="digital table", description="Print sine table constants and entries.")
    p.add_argument("--index", type=int, action="append", default=[], help="table index (repeatable)")
    p.add_argument("--bits", type=int, default=tc.SIN_BITS, help="build a table of 2**bits entries instead")
    args = p.parse_args(argv)

    if args.bits == tc.SIN_BITS:
        table = DEFAULT_TABLE
    else:
        try:
            table = SineTable.build(args.bits)
        except ValueError as e:
            p.error(str(e))

    print(f"bits        = {table.bits}")
    print(f"size        = {table.size}")
    print(f"mask        = {table.mask}")
    print(f"sin_to_cos  = {table.sin_to_cos}")
    if table is DEFAULT_TABLE:
        print(f"rad->index  = {tc.RAD_TO_INDEX_D!r}  (float32 {tc.RAD_TO_INDEX!r})")
        print(f"deg->index  = {tc.DEG_TO_INDEX_D!r}  (float32 {tc.DEG_TO_INDEX!r})")
        print(f"turn->index = {tc.TURN_TO_INDEX_D!r}  (float32 {tc.TURN_TO_INDEX!r})")
    print()

    indices = args.index or [0, table.sin_to_cos, table.size >> 1, 3 * table.sin_to_cos]
    print(f"{'index':>8} | {'sin (double)':<22} | {'cos (double)':<22} | {'sin (float32)':<15} | cos (float32)")
    print("-" * 95)
    for i in indices:
        print(f"{i & table.mask:>8} | {table.sin_at(i)!r:<22} | {table.cos_at(i)!r:<22} | "
              f"{table.sin_at_f32(i)!r:<15} | {table.cos_at_f32(i)!r}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="digital", description="Table-driven trigonometry and numeric approximations.")
    p.add_argument("-v", "--verbose", action="store_true", help="log debug messages to stderr")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("eval", help="Evaluate a registered function, e.g. `digital eval atan2_deg 1 -1`.")
    sub.add_parser("list", help="List registered functions.")
    sub.add_parser("table", help="Print sine table constants and selected entries.")

    # diagnostics
    sub.add_parser("profile", help="Error profile of every approximation against math (plot needs matplotlib).")

    # design tools
    sub.add_parser("sine-table", help="Measure sine lookup table error for a given table size.")
    sub.add_parser("minimax", help="Check and refit the atan/asin polynomials (refit needs numpy + scipy).")
    sub.add_parser("float-params", help="Print every approximation constant as hex-float.")

    args, rest = p.parse_known_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )

    from digital.core.errors import DigitalError

    try:
        if args.cmd == "eval":
            return cmd_eval(rest)

        if args.cmd == "list":
            return cmd_list(rest)

        if args.cmd == "table":
            return cmd_table(rest)

        if args.cmd == "profile":
            return _run_module_main("digital.diagnostics.error_profile", rest)

        if args.cmd == "sine-table":
            return _run_module_main("digital.design.sine_tables", rest)

        if args.cmd == "minimax":
            return _run_module_main("digital.design.minimax_polys", rest)

        if args.cmd == "float-params":
            return _run_module_main("digital.design.float_params", rest)
    except DigitalError as e:
        msg = e.args[0] if e.args else str(e)
        print(f"digital: error: {msg}", file=sys.stderr)
        return 2

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
