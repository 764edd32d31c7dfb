"""digital public API.

Table-driven trigonometry and bit-level numeric approximations. Plain names
work on doubles; ``_f32`` names round their inputs and results to binary32.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import evaluate, function_info, list_functions, register_function
from .numeric.gamma import factorial, factorial_f32, gamma, gamma_f32
from .numeric.roots import cbrt_f32, inv_sqrt, inv_sqrt_f32, isqrt, nthrt_f32
from .numeric.spline import barron_spline, barron_spline_f32
from .trig.constants import SIN_TO_COS, TABLE_MASK, TABLE_SIZE
from .trig.inverse import (
    acos,
    acos_deg,
    acos_deg_f32,
    acos_f32,
    acos_turns,
    acos_turns_f32,
    asin,
    asin_deg,
    asin_deg_f32,
    asin_f32,
    asin_turns,
    asin_turns_f32,
    atan,
    atan2,
    atan2_deg,
    atan2_deg360,
    atan2_deg360_f32,
    atan2_deg_f32,
    atan2_f32,
    atan2_turns,
    atan2_turns_f32,
    atan_deg,
    atan_deg_f32,
    atan_f32,
    atan_turns,
    atan_turns_f32,
)
from .trig.lookup import (
    cos,
    cos_deg,
    cos_deg_f32,
    cos_f32,
    cos_turns,
    cos_turns_f32,
    sin,
    sin_deg,
    sin_deg_f32,
    sin_f32,
    sin_turns,
    sin_turns_f32,
    tan,
    tan_deg,
    tan_deg_f32,
    tan_f32,
    tan_turns,
    tan_turns_f32,
)
from .trig.sin_table import SIN_TABLE, SIN_TABLE_D, sin_cos_at, sin_cos_at_f32

__all__ = [
    "evaluate",
    "function_info",
    "list_functions",
    "register_function",
    "TABLE_SIZE",
    "TABLE_MASK",
    "SIN_TO_COS",
    "SIN_TABLE",
    "SIN_TABLE_D",
    "sin_cos_at",
    "sin_cos_at_f32",
    "sin", "cos", "tan",
    "sin_deg", "cos_deg", "tan_deg",
    "sin_turns", "cos_turns", "tan_turns",
    "sin_f32", "cos_f32", "tan_f32",
    "sin_deg_f32", "cos_deg_f32", "tan_deg_f32",
    "sin_turns_f32", "cos_turns_f32", "tan_turns_f32",
    "atan", "atan_deg", "atan_turns",
    "atan_f32", "atan_deg_f32", "atan_turns_f32",
    "atan2", "atan2_deg", "atan2_deg360", "atan2_turns",
    "atan2_f32", "atan2_deg_f32", "atan2_deg360_f32", "atan2_turns_f32",
    "asin", "asin_deg", "asin_turns",
    "asin_f32", "asin_deg_f32", "asin_turns_f32",
    "acos", "acos_deg", "acos_turns",
    "acos_f32", "acos_deg_f32", "acos_turns_f32",
    "inv_sqrt",
    "inv_sqrt_f32",
    "cbrt_f32",
    "nthrt_f32",
    "isqrt",
    "barron_spline",
    "barron_spline_f32",
    "factorial",
    "factorial_f32",
    "gamma",
    "gamma_f32",
]
