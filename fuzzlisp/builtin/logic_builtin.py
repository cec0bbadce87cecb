"""Standard (two-valued) logic built-ins with lazy argument evaluation.

`and` and `or` stop at the first decisive operand, and `if` evaluates
only the branch it selects.
"""
from __future__ import annotations

from fuzzlisp.evaluation.evaluator import evaluate
from fuzzlisp.types.environment import Environment
from fuzzlisp.types.function_table import FunctionTable
from fuzzlisp.types.value import Value, ValueType, new_bool, new_error


def logical_not(funcs: FunctionTable, env: Environment, args: tuple[Value, ...]) -> Value:
    if len(args) != 1:
        return new_error("Function `not' required one param")
    v = evaluate(funcs, env, args[0])
    if v.is_error():
        return v
    if v.type is not ValueType.BOOL:
        return new_error("Function `not' expect bool param")
    return new_bool(not v.as_bool())


def logical_and(funcs: FunctionTable, env: Environment, args: tuple[Value, ...]) -> Value:
    """True when every operand is true; stops at the first false."""
    if not args:
        return new_error("Function `and' required at least one param")
    for arg in args:
        v = evaluate(funcs, env, arg)
        if v.is_error():
            return v
        if v.type is not ValueType.BOOL:
            return new_error("Function `and' expect bool param")
        if not v.as_bool():
            return new_bool(False)
    return new_bool(True)


def logical_or(funcs: FunctionTable, env: Environment, args: tuple[Value, ...]) -> Value:
    """True as soon as one operand is true; false when all are false."""
    if not args:
        return new_error("Function `or' required at least one param")
    for arg in args:
        v = evaluate(funcs, env, arg)
        if v.is_error():
            return v
        if v.type is not ValueType.BOOL:
            return new_error("Function `or' expect bool param")
        if v.as_bool():
            return new_bool(True)
    return new_bool(False)


def if_form(funcs: FunctionTable, env: Environment, args: tuple[Value, ...]) -> Value:
    if len(args) != 3:
        return new_error("Function `if' required 3 param")
    cond = evaluate(funcs, env, args[0])
    if cond.is_error():
        return cond
    if cond.type is not ValueType.BOOL:
        return new_error("Function `if' expect bool param in condition")
    if cond.as_bool():
        return evaluate(funcs, env, args[1])
    return evaluate(funcs, env, args[2])


STANDARD_LOGIC_FUNCTIONS = FunctionTable({
    "not": logical_not,
    "and": logical_and,
    "or": logical_or,
    "if": if_form,
})
