from __future__ import annotations

from typing import Any, Dict, List, Optional

from .core.registry import FunctionRegistry, FunctionSpec

_registry: Optional[FunctionRegistry] = None


def set_registry(reg: FunctionRegistry) -> None:
    global _registry
    _registry = reg


def _reg() -> FunctionRegistry:
    if _registry is None:
        raise RuntimeError("Function registry not initialized")
    return _registry


def list_functions() -> List[str]:
    return _reg().list()


def function_info(name: str) -> Dict[str, Any]:
    spec = _reg().get(name)
    return {
        "name": spec.name,
        "arity": spec.arity,
        "precision": spec.precision,
        "unit": spec.unit,
        "summary": spec.summary,
    }


def evaluate(name: str, *args):
    """Call a registered function by name, e.g. ``evaluate("atan2_deg", 1.0, -1.0)``."""
    spec = _reg().get(name)
    if len(args) != spec.arity:
        raise TypeError(f"{name}() takes {spec.arity} argument(s), got {len(args)}")
    return spec(*args)


def register_function(spec: FunctionSpec, *, overwrite: bool = False) -> None:
    _reg().register(spec, overwrite=overwrite)
