import pytest

from fuzzlisp.types.environment import Environment
from fuzzlisp.types.function_table import FunctionTable
from fuzzlisp.types.value import new_bool, new_float, new_string


# Shared fixtures. Each test gets a fresh environment; function tables are
# immutable so the library tables are shared directly.


@pytest.fixture
def empty_funcs():
    return FunctionTable()


@pytest.fixture
def env():
    """Environment with one binding of each scalar kind."""
    return Environment({
        "somekey": new_string("somevalue"),
        "yes": new_bool(True),
        "no": new_bool(False),
        "half": new_float(0.5),
    })
