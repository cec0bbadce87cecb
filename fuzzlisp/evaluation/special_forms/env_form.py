import logging

from fuzzlisp import EvaluatorFn
from fuzzlisp.types.environment import Environment
from fuzzlisp.types.function_table import FunctionTable
from fuzzlisp.types.value import Value, ValueType, new_error

logger = logging.getLogger(__name__)


def env_form(
    tail: tuple[Value, ...],
    funcs: FunctionTable,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Value:
    """(env key) looks `key` up in the environment.

    A sub-expression key is evaluated first and must produce a string.
    """
    if len(tail) != 1:
        return new_error("Function `env' expect 1 param")

    key = tail[0]
    if key.type is ValueType.EXPRESSION:
        key = evaluate_fn(funcs, env, key)
        if key.is_error():
            return key
    if key.type is not ValueType.STRING:
        return new_error("Function `env' expect 1 param is string")

    name = key.as_string()
    val = env.get(name)
    if val is None:
        logger.debug("env: key %r not found", name)
        return new_error(f"Environment key `{name}' not found")
    return val
