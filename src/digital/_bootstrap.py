from __future__ import annotations

from .core.registry import FunctionRegistry, FunctionSpec
from .numeric import gamma, helpers, interp, roots, spline, waves
from .trig import inverse, lookup

_UNIT_SUFFIXES = (("", "radians"), ("_deg", "degrees"), ("_turns", "turns"))


def _trig_specs():
    for base in ("sin", "cos", "tan"):
        for suffix, unit in _UNIT_SUFFIXES:
            for precision, tail in (("float64", ""), ("float32", "_f32")):
                name = f"{base}{suffix}{tail}"
                yield FunctionSpec(name, getattr(lookup, name), 1, precision, unit,
                                   f"table lookup {base} in {unit}")

    for base in ("atan", "asin", "acos"):
        for suffix, unit in _UNIT_SUFFIXES:
            for precision, tail in (("float64", ""), ("float32", "_f32")):
                name = f"{base}{suffix}{tail}"
                yield FunctionSpec(name, getattr(inverse, name), 1, precision, unit,
                                   f"polynomial {base} in {unit}")

    for suffix, unit in (("", "radians"), ("_deg", "degrees"), ("_deg360", "degrees"), ("_turns", "turns")):
        for precision, tail in (("float64", ""), ("float32", "_f32")):
            name = f"atan2{suffix}{tail}"
            yield FunctionSpec(name, getattr(inverse, name), 2, precision, unit,
                               f"quadrant-aware arctangent of y/x in {unit}")


def _numeric_specs():
    yield FunctionSpec("inv_sqrt", roots.inv_sqrt, 1, "float64", summary="fast inverse square root")
    yield FunctionSpec("inv_sqrt_f32", roots.inv_sqrt_f32, 1, "float32", summary="fast inverse square root")
    yield FunctionSpec("cbrt_f32", roots.cbrt_f32, 1, "float32", summary="bit-trick cube root")
    yield FunctionSpec("nthrt_f32", roots.nthrt_f32, 2, "float32", summary="x ** (1/n), integer-snapped")
    yield FunctionSpec("isqrt", roots.isqrt, 1, "int64", summary="unsigned 64-bit integer square root")
    yield FunctionSpec("barron_spline", spline.barron_spline, 3, "float64", summary="bias/gain spline")
    yield FunctionSpec("barron_spline_f32", spline.barron_spline_f32, 3, "float32", summary="bias/gain spline")
    yield FunctionSpec("factorial", gamma.factorial, 1, "float64", summary="Stieltjes factorial")
    yield FunctionSpec("factorial_f32", gamma.factorial_f32, 1, "float32", summary="Stieltjes factorial")
    yield FunctionSpec("gamma", gamma.gamma, 1, "float64", summary="Stieltjes gamma")
    yield FunctionSpec("gamma_f32", gamma.gamma_f32, 1, "float32", summary="Stieltjes gamma")


def _helper_specs():
    for name, arity, summary in (
        ("raise_to_power", 2, "value ** power, wrapping at 64 bits"),
        ("greatest_common_divisor", 2, "gcd of the absolute values"),
        ("modular_multiplicative_inverse32", 1, "inverse of an odd number mod 2**32"),
        ("modular_multiplicative_inverse64", 1, "inverse of an odd number mod 2**64"),
        ("next_power_of_two", 1, "smallest power of two >= n"),
        ("is_power_of_two", 1, "power of two as an unsigned int32"),
        ("fibonacci", 1, "n-th Fibonacci number (int32)"),
        ("fibonacci64", 1, "n-th Fibonacci number (int64)"),
    ):
        yield FunctionSpec(name, getattr(helpers, name), arity, "int64", summary=summary)

    for name, arity, summary in (
        ("log", 2, "logarithm of value in base"),
        ("is_equal", 2, "equal within 2**-20"),
        ("is_zero", 1, "zero within 2**-20"),
        ("clamp", 3, "value limited to [lo, hi]"),
        ("remainder", 2, "modulus taking the divisor's sign"),
        ("square", 1, "n * n"),
        ("cube", 1, "n * n * n"),
        ("floor", 1, "floor to int32, saturating"),
        ("ceil", 1, "ceiling to int32, saturating"),
        ("long_floor", 1, "floor to int64, saturating"),
        ("fast_floor", 1, "floor for t > -16384"),
        ("fast_ceil", 1, "ceiling for t < 16384"),
        ("floor_positive", 1, "floor of a non-negative value"),
        ("ceil_positive", 1, "ceiling of a non-negative value"),
        ("round_positive", 1, "round half up of a non-negative value"),
        ("truncate", 1, "drop the bits below 2**-42"),
    ):
        yield FunctionSpec(name, getattr(helpers, name), arity, "float64", summary=summary)

    for name, arity, summary in (
        ("log_f32", 2, "logarithm of value in base"),
        ("log2_f32", 1, "base-2 logarithm"),
        ("round_f32", 1, "round half up for values > -16384"),
        ("truncate_f32", 1, "drop the bits below 2**-13"),
    ):
        yield FunctionSpec(name, getattr(helpers, name), arity, "float32", summary=summary)

    for precision, tail in (("float64", ""), ("float32", "_f32")):
        yield FunctionSpec(f"lerp{tail}", getattr(interp, f"lerp{tail}"), 3, precision,
                           summary="linear interpolation")
        for suffix, unit in _UNIT_SUFFIXES:
            name = f"lerp_angle{suffix}{tail}"
            yield FunctionSpec(name, getattr(interp, name), 3, precision, unit,
                               f"shortest-arc interpolation in {unit}")
        for base, summary in (("zigzag", "triangle wave, period 2"),
                              ("sway", "quintic-eased triangle wave"),
                              ("sway_cubic", "cubic-eased triangle wave"),
                              ("sway_tight", "eased wave between 0 and 1")):
            yield FunctionSpec(f"{base}{tail}", getattr(waves, f"{base}{tail}"), 1, precision,
                               summary=summary)
    yield FunctionSpec("norm", interp.norm, 3, "float64", summary="position of value within a range")
    yield FunctionSpec("map_range", interp.map_range, 5, "float64", summary="map value between two ranges")


def build_registry() -> FunctionRegistry:
    reg = FunctionRegistry(_functions={})
    for spec in _trig_specs():
        reg.register(spec)
    for spec in _numeric_specs():
        reg.register(spec)
    for spec in _helper_specs():
        reg.register(spec)
    return reg
