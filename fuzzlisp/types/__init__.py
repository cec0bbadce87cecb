from fuzzlisp.types.value import (
    FuzzyElement,
    Value,
    ValueType,
    is_equal,
    new_bool,
    new_error,
    new_expression,
    new_float,
    new_fuzzy,
    new_int,
    new_string,
)
from fuzzlisp.types.environment import Environment
