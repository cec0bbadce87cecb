# Core type aliases for fuzzlisp.
# EvaluatorFn is the signature built-ins and special forms use to evaluate
# their (unevaluated) arguments: (functions, environment, node) -> Value.

from typing import Callable

from fuzzlisp.types.value import Value
from fuzzlisp.types.environment import Environment

EvaluatorFn = Callable[..., Value]

from fuzzlisp.types.function_table import FunctionTable  # noqa: E402
from fuzzlisp.reader.lexer import Token, TokenKind, tokenize  # noqa: E402
from fuzzlisp.reader.parser import parse, parse_tokens  # noqa: E402
from fuzzlisp.evaluation.evaluator import evaluate  # noqa: E402
from fuzzlisp.builtin import (  # noqa: E402
    DEFAULT_FUNCTIONS,
    FUZZY_LOGIC_FUNCTIONS,
    STANDARD_LOGIC_FUNCTIONS,
)
from fuzzlisp.interpreter import Interpreter, configure_logging  # noqa: E402
