"""Tagged value model for fuzzlisp.

Every runtime value, including the parsed program itself, is a `Value`:
exactly one of expression, string, int, float, bool, fuzzy set or error.
Accessors never raise on a tag mismatch; they return a zero value instead
(empty string, 0, 0.0, False, empty tuple, empty message), so built-ins
can read a value first and check its tag afterwards.

Values are immutable. Expression children and fuzzy elements are stored
as tuples, which makes a parsed AST safe to share read-only.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from io import StringIO
from typing import Iterable

from fuzzlisp.errors import FuzzlispTypeError


class ValueType(IntEnum):
    EXPRESSION = 0
    STRING = 1
    INT = 2
    FLOAT = 3
    BOOL = 4
    FUZZY = 5
    ERROR = 6


@dataclass(frozen=True)
class FuzzyElement:
    """A member of a fuzzy set and its degree of membership."""

    value: Value
    weight: float


class Value:
    """A single tagged fuzzlisp value."""

    __slots__ = ("type", "_data")

    def __init__(self, vtype: ValueType, data):
        self.type: ValueType = vtype
        self._data = data

    # --- Accessors (permissive) ---
    def as_expression(self) -> tuple[Value, ...]:
        if self.type is ValueType.EXPRESSION:
            return self._data
        return ()

    def as_string(self) -> str:
        if self.type is ValueType.STRING:
            return self._data
        return ""

    def as_int(self) -> int:
        if self.type is ValueType.INT:
            return self._data
        return 0

    def as_float(self) -> float:
        if self.type is ValueType.FLOAT:
            return self._data
        if self.type is ValueType.INT:
            return float(self._data)
        return 0.0

    def as_bool(self) -> bool:
        if self.type is ValueType.BOOL:
            return self._data
        return False

    def as_fuzzy_set(self) -> tuple[FuzzyElement, ...]:
        if self.type is ValueType.FUZZY:
            return self._data
        return ()

    def as_error(self) -> str:
        if self.type is ValueType.ERROR:
            return self._data
        return ""

    def is_error(self) -> bool:
        return self.type is ValueType.ERROR

    def depth(self) -> int:
        """Nesting depth of an expression tree; scalars have depth 0."""
        deepest = 0
        for d in self._expression_depths():
            deepest = max(deepest, d)
        return deepest

    def depth_exceeds(self, limit: int) -> bool:
        """True as soon as any expression is nested deeper than `limit`."""
        return any(d > limit for d in self._expression_depths())

    def _expression_depths(self):
        # explicit stack: trees may be deeper than the recursion limit
        stack = [(self, 1)]
        while stack:
            node, d = stack.pop()
            if node.type is ValueType.EXPRESSION:
                yield d
                stack.extend((child, d + 1) for child in node._data)

    # --- Equality ---
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return is_equal(self, other)

    def __hash__(self) -> int:
        return hash((self.type, self._data))

    # --- Rendering ---
    def _write(self, buffer: StringIO) -> None:
        t = self.type
        if t is ValueType.EXPRESSION:
            buffer.write("(")
            for i, child in enumerate(self._data):
                if i:
                    buffer.write(" ")
                child._write(buffer)
            buffer.write(")")
        elif t is ValueType.BOOL:
            buffer.write("true" if self._data else "false")
        elif t is ValueType.FUZZY:
            buffer.write("{")
            for i, elem in enumerate(self._data):
                if i:
                    buffer.write(" ")
                elem.value._write(buffer)
                buffer.write(f":{elem.weight!r}")
            buffer.write("}")
        elif t is ValueType.ERROR:
            buffer.write(f"#<error: {self._data}>")
        elif t is ValueType.FLOAT:
            buffer.write(repr(self._data))
        else:
            buffer.write(str(self._data))

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write(buffer)
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"Value({self.type.name}, {self._data!r})"


# -------------------------------
# Constructors
# -------------------------------
def new_expression(items: Iterable[Value]) -> Value:
    children = tuple(items)
    for child in children:
        if not isinstance(child, Value):
            raise FuzzlispTypeError(f"Expression element {child!r} is not a Value")
    return Value(ValueType.EXPRESSION, children)


def new_string(s: str) -> Value:
    if not isinstance(s, str):
        raise FuzzlispTypeError(f"Expected str, got {type(s).__name__}")
    return Value(ValueType.STRING, s)


def new_int(i: int) -> Value:
    if isinstance(i, bool) or not isinstance(i, int):
        raise FuzzlispTypeError(f"Expected int, got {type(i).__name__}")
    return Value(ValueType.INT, i)


def new_float(f: float) -> Value:
    if isinstance(f, bool) or not isinstance(f, (int, float)):
        raise FuzzlispTypeError(f"Expected float, got {type(f).__name__}")
    return Value(ValueType.FLOAT, float(f))


def new_bool(b: bool) -> Value:
    if not isinstance(b, bool):
        raise FuzzlispTypeError(f"Expected bool, got {type(b).__name__}")
    return Value(ValueType.BOOL, b)


def new_fuzzy(elements: Iterable[FuzzyElement]) -> Value:
    elems = tuple(elements)
    for e in elems:
        if not isinstance(e, FuzzyElement):
            raise FuzzlispTypeError(f"Fuzzy set member {e!r} is not a FuzzyElement")
    return Value(ValueType.FUZZY, elems)


def new_error(message: str | BaseException) -> Value:
    return Value(ValueType.ERROR, str(message))


# -------------------------------
# Structural equality
# -------------------------------
def is_equal(a: Value, b: Value) -> bool:
    """Deep equality: tags must match, then compare by underlying value.

    Expressions and fuzzy sets compare element-wise, in order, with equal
    length. Fuzzy elements match when their values are structurally equal
    and their weights are equal.
    """
    if a is b:
        return True
    if a.type is not b.type:
        return False
    t = a.type
    if t is ValueType.EXPRESSION:
        exp1, exp2 = a.as_expression(), b.as_expression()
        if len(exp1) != len(exp2):
            return False
        return all(is_equal(x, y) for x, y in zip(exp1, exp2))
    if t is ValueType.FUZZY:
        set1, set2 = a.as_fuzzy_set(), b.as_fuzzy_set()
        if len(set1) != len(set2):
            return False
        return all(
            x.weight == y.weight and is_equal(x.value, y.value)
            for x, y in zip(set1, set2)
        )
    return a._data == b._data
