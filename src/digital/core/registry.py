from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Literal, Optional

from .errors import UnknownFunctionError


@dataclass(frozen=True)
class FunctionSpec:
    """A named public function together with what it expects."""
    name: str
    fn: Callable[..., float]
    arity: int
    precision: Literal["float32", "float64", "int64"]
    unit: Optional[Literal["radians", "degrees", "turns"]] = None
    summary: str = ""

    def __call__(self, *args):
        return self.fn(*args)


@dataclass
class FunctionRegistry:
    _functions: Dict[str, FunctionSpec]

    def get(self, name: str) -> FunctionSpec:
        if name not in self._functions:
            raise UnknownFunctionError(f"Unknown function '{name}'. Available: {sorted(self._functions)}")
        return self._functions[name]

    def list(self) -> List[str]:
        return sorted(self._functions.keys())

    def register(self, spec: FunctionSpec, *, overwrite: bool = False) -> None:
        if (not overwrite) and (spec.name in self._functions):
            raise KeyError(f"Function '{spec.name}' already exists. Use overwrite=True to replace.")
        self._functions[spec.name] = spec
