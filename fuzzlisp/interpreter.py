from __future__ import annotations

import logging
from typing import Mapping, Optional

from fuzzlisp.builtin import DEFAULT_FUNCTIONS
from fuzzlisp.config import get_log_level, get_max_depth
from fuzzlisp.evaluation.evaluator import evaluate
from fuzzlisp.reader.parser import parse
from fuzzlisp.types.environment import Environment
from fuzzlisp.types.function_table import FunctionTable
from fuzzlisp.types.value import Value, new_error


def configure_logging(level: str | int | None = None) -> None:
    """Attach a stderr handler to the package logger.

    `level` defaults to FUZZLISP_LOG_LEVEL (WARNING when unset).
    """
    if level is None:
        level = get_log_level()
    logger = logging.getLogger("fuzzlisp")
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(name)s %(levelname)s: %(message)s"))
        logger.addHandler(handler)
    logger.setLevel(level)


class Interpreter:
    """
    Evaluates fuzzlisp programs against a fixed function table and a host
    environment. Neither is modified by evaluation.
    """

    def __init__(
        self,
        functions: FunctionTable = DEFAULT_FUNCTIONS,
        environment: Environment | Mapping[str, Value] | None = None,
        max_depth: Optional[int] = None,
    ):
        self.functions: FunctionTable = functions
        if environment is None:
            environment = Environment()
        elif not isinstance(environment, Environment):
            environment = Environment(environment)
        self.env: Environment = environment
        # explicit argument wins over FUZZLISP_MAX_DEPTH; non-positive means no limit
        if max_depth is None:
            max_depth = get_max_depth()
        elif max_depth <= 0:
            max_depth = None
        self.max_depth: Optional[int] = max_depth

    def eval_ast(self, node: Value) -> Value:
        if self.max_depth is not None and node.depth_exceeds(self.max_depth):
            return new_error(
                f"expression depth {node.depth()} exceeds limit {self.max_depth}"
            )
        return evaluate(self.functions, self.env, node)

    def eval(self, code: str) -> Value:
        """Parse and evaluate one program. Parse errors are raised."""
        return self.eval_ast(parse(code))
