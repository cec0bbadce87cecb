"""Variable environment for fuzzlisp.

An Environment is a flat mapping from string keys to Values, built by the
host before evaluation. The evaluator only reads it (through the `env`
special form); there are no nested scopes.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator, Mapping, Optional

from fuzzlisp.errors import FuzzlispInvalidKey, FuzzlispTypeError
from fuzzlisp.types.value import Value


class Environment:
    """Mapping from string keys to Values; last write wins."""

    __slots__ = ("vars",)

    def __init__(self, bindings: Optional[Mapping[str, Value]] = None):
        self.vars: dict[str, Value] = {}
        if bindings:
            self.update(bindings)

    def define(self, key: str, value: Value) -> None:
        """Bind `key` to `value`, replacing any earlier binding.

        Raises FuzzlispInvalidKey if `key` is not a string and
        FuzzlispTypeError if `value` is not a Value.
        """
        if not isinstance(key, str):
            raise FuzzlispInvalidKey(f"Cannot bind {key!r}: environment keys are strings")
        if not isinstance(value, Value):
            raise FuzzlispTypeError(f"Cannot bind {key}: {value!r} is not a Value")
        self.vars[key] = value

    def get(self, key: str) -> Optional[Value]:
        """Return the value bound to `key`, or None when unbound."""
        return self.vars.get(key)

    def update(self, mapping: Mapping[str, Value]) -> None:
        """Bulk-define a mapping of key -> value."""
        for k, v in mapping.items():
            self.define(k, v)

    def __contains__(self, key: object) -> bool:
        return key in self.vars

    def __iter__(self) -> Iterator[str]:
        return iter(self.vars)

    def __len__(self) -> int:
        return len(self.vars)

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("{")
            first = True
            for k, v in self.vars.items():
                if not first:
                    buffer.write(", ")
                buffer.write(f"{k}: {v}")
                first = False
            buffer.write("}")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Environment {self}>"
