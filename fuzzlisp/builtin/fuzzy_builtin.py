"""Fuzzy logic built-ins.

Truth values are floats, nominally in [0, 1]; the range is not enforced.
`fand` is the minimum and `for` the maximum of their operands; `fnot`
is the complement. Operands are evaluated left to right until an error
or a non-float stops evaluation.
"""
from __future__ import annotations

from fuzzlisp.evaluation.evaluator import evaluate
from fuzzlisp.types.environment import Environment
from fuzzlisp.types.function_table import FunctionTable
from fuzzlisp.types.fuzzy_set import fuzzy_equals_many
from fuzzlisp.types.value import Value, ValueType, new_error, new_float


def fuzzy_not(funcs: FunctionTable, env: Environment, args: tuple[Value, ...]) -> Value:
    if len(args) != 1:
        return new_error("Function `fnot' required one param")
    v = evaluate(funcs, env, args[0])
    if v.is_error():
        return v
    if v.type is not ValueType.FLOAT:
        return new_error("Function `fnot' expect float param")
    return new_float(1.0 - v.as_float())


def fuzzy_and(funcs: FunctionTable, env: Environment, args: tuple[Value, ...]) -> Value:
    if not args:
        return new_error("Function `fand' required at least one param")
    res = 1.0
    for arg in args:
        v = evaluate(funcs, env, arg)
        if v.is_error():
            return v
        if v.type is not ValueType.FLOAT:
            return new_error("Function `fand' expect float param")
        res = min(res, v.as_float())
    return new_float(res)


def fuzzy_or(funcs: FunctionTable, env: Environment, args: tuple[Value, ...]) -> Value:
    if not args:
        return new_error("Function `for' required at least one param")
    res = 0.0
    for arg in args:
        v = evaluate(funcs, env, arg)
        if v.is_error():
            return v
        if v.type is not ValueType.FLOAT:
            return new_error("Function `for' expect float param")
        res = max(res, v.as_float())
    return new_float(res)


def fuzzy_eq(funcs: FunctionTable, env: Environment, args: tuple[Value, ...]) -> Value:
    """(feq set v1 ... vn): summed membership of v1..vn in a fuzzy set."""
    if len(args) < 2:
        return new_error("Function `feq' required at least two params")
    fset = evaluate(funcs, env, args[0])
    if fset.is_error():
        return fset
    if fset.type is not ValueType.FUZZY:
        return new_error("Function `feq' expect fuzzy set param")
    find: list[Value] = []
    for arg in args[1:]:
        v = evaluate(funcs, env, arg)
        if v.is_error():
            return v
        find.append(v)
    return fuzzy_equals_many(fset.as_fuzzy_set(), find)


FUZZY_LOGIC_FUNCTIONS = FunctionTable({
    "fnot": fuzzy_not,
    "fand": fuzzy_and,
    "for": fuzzy_or,
    "feq": fuzzy_eq,
})
