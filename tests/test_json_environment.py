import pytest

from fuzzlisp.adapters.json_env import json_map_to_environment, load_environment
from fuzzlisp.errors import FuzzlispTypeError
from fuzzlisp.types.fuzzy_set import make_fuzzy_set
from fuzzlisp.types.value import (
    FuzzyElement,
    new_bool,
    new_float,
    new_fuzzy,
    new_int,
    new_string,
)


def test_json_to_env():
    inp = {
        "a": "abc",
        "b": True,
        "c": 10,
        "d": 5.0,
        "e": {"x": 0.1, "y": 0.9},
        "f": None,  # skipped
        "g": [1, 2, 3, "u"],  # skipped
    }
    out = {
        "a": new_string("abc"),
        "b": new_bool(True),
        "c": new_int(10),
        "d": new_float(5.0),
        "e": new_fuzzy(make_fuzzy_set(False,
                                      FuzzyElement(new_string("x"), 0.1),
                                      FuzzyElement(new_string("y"), 0.9))),
    }
    env = json_map_to_environment(inp)
    assert dict(env.vars) == out


def test_nested_non_numeric_members_are_skipped():
    env = json_map_to_environment({"s": {"x": 0.5, "y": "tall", "z": True, "w": 1}})
    members = [(e.value.as_string(), e.weight) for e in env.get("s").as_fuzzy_set()]
    assert members == [("x", 0.5), ("w", 1.0)]


def test_load_environment_from_text():
    env = load_environment('{"temp": 21.5, "heating": false, "mood": {"calm": 0.8}}')
    assert env.get("temp") == new_float(21.5)
    assert env.get("heating") == new_bool(False)
    assert len(env.get("mood").as_fuzzy_set()) == 1


def test_load_environment_rejects_non_object():
    with pytest.raises(FuzzlispTypeError):
        load_environment("[1, 2]")
