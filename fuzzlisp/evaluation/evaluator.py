"""Core evaluator for fuzzlisp.

Walks the AST recursively. Scalars evaluate to themselves; an expression
dispatches on its head, first to the special forms, then to the host
function table. Handlers receive their arguments unevaluated and call
back into `evaluate` as needed.

Failures are returned as Error values, never raised.
"""

from __future__ import annotations

import logging

from fuzzlisp.evaluation.special_forms import SPECIAL_FORMS
from fuzzlisp.types.environment import Environment
from fuzzlisp.types.function_table import FunctionTable
from fuzzlisp.types.value import Value, ValueType, new_error

logger = logging.getLogger(__name__)


def evaluate(funcs: FunctionTable, env: Environment, node: Value) -> Value:
    if node.type is not ValueType.EXPRESSION:
        return node

    expr = node.as_expression()
    if not expr:
        return new_error("expression without function name")

    head, tail = expr[0].as_string(), expr[1:]

    form = SPECIAL_FORMS.get(head)
    if form is not None:
        return form(tail, funcs, env, evaluate)

    handler = funcs.get(head)
    if handler is None:
        logger.debug("function %r not found", head)
        return new_error(f"function {head} not found")
    logger.debug("apply %s to %d args", head, len(tail))
    return handler(funcs, env, tail)
