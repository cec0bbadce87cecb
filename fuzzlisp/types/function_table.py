from __future__ import annotations

from types import MappingProxyType
from typing import Iterator, Mapping, Optional, Protocol

from fuzzlisp.errors import FuzzlispInvalidKey, FuzzlispTypeError
from fuzzlisp.types.environment import Environment
from fuzzlisp.types.value import Value


class Handler(Protocol):
    """A built-in: receives the live table, the environment and the
    unevaluated argument expressions, and decides which arguments to
    evaluate."""

    def __call__(
        self, funcs: FunctionTable, env: Environment, args: tuple[Value, ...]
    ) -> Value: ...


class FunctionTable:
    """Immutable registry of built-in handlers keyed by function name.

    Tables are combined with `|` or `with_functions`, which return a new
    table; neither operand is modified. On a name clash the right-hand
    side wins.
    """

    __slots__ = ("_funcs",)

    def __init__(self, functions: Optional[Mapping[str, Handler]] = None):
        funcs: dict[str, Handler] = {}
        for name, handler in (functions or {}).items():
            if not isinstance(name, str):
                raise FuzzlispInvalidKey(f"Cannot register {name!r}: function names are strings")
            if not callable(handler):
                raise FuzzlispTypeError(f"Handler for {name} is not callable")
            funcs[name] = handler
        self._funcs: Mapping[str, Handler] = MappingProxyType(funcs)

    def get(self, name: str) -> Optional[Handler]:
        return self._funcs.get(name)

    def with_functions(self, functions: Mapping[str, Handler]) -> FunctionTable:
        merged = dict(self._funcs)
        merged.update(functions)
        return FunctionTable(merged)

    def __or__(self, other: FunctionTable) -> FunctionTable:
        if not isinstance(other, FunctionTable):
            return NotImplemented
        return self.with_functions(other._funcs)

    def __contains__(self, name: object) -> bool:
        return name in self._funcs

    def __iter__(self) -> Iterator[str]:
        return iter(self._funcs)

    def __len__(self) -> int:
        return len(self._funcs)

    def __repr__(self) -> str:
        return f"<FunctionTable {sorted(self._funcs)}>"
