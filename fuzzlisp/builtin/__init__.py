"""Reference function libraries.

Each library is an immutable FunctionTable built once at import time;
hosts pass one (or a combination made with `|`) to the evaluator.
"""

from fuzzlisp.builtin.logic_builtin import STANDARD_LOGIC_FUNCTIONS
from fuzzlisp.builtin.fuzzy_builtin import FUZZY_LOGIC_FUNCTIONS

DEFAULT_FUNCTIONS = STANDARD_LOGIC_FUNCTIONS | FUZZY_LOGIC_FUNCTIONS

__all__ = ["STANDARD_LOGIC_FUNCTIONS", "FUZZY_LOGIC_FUNCTIONS", "DEFAULT_FUNCTIONS"]
