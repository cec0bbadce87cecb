"""Build an Environment from a decoded JSON object.

    - str               -> String
    - bool              -> Bool
    - int               -> Int
    - float             -> Float
    - object            -> FuzzySet of (String(subkey), weight) for each
                           numeric subvalue; other subvalues are skipped
    - null, list, ...   -> skipped
"""

from __future__ import annotations

import json
import logging
from typing import Any, Mapping

from fuzzlisp.errors import FuzzlispTypeError
from fuzzlisp.types.environment import Environment
from fuzzlisp.types.fuzzy_set import make_fuzzy_set
from fuzzlisp.types.value import (
    FuzzyElement,
    Value,
    new_bool,
    new_float,
    new_fuzzy,
    new_int,
    new_string,
)

logger = logging.getLogger(__name__)


def _is_number(v: Any) -> bool:
    return isinstance(v, (int, float)) and not isinstance(v, bool)


def json_value_to_value(v: Any) -> Value | None:
    """Convert one decoded JSON value; None when it has no Value form."""
    # bool before int: bool is an int subclass
    if isinstance(v, bool):
        return new_bool(v)
    if isinstance(v, str):
        return new_string(v)
    if isinstance(v, int):
        return new_int(v)
    if isinstance(v, float):
        return new_float(v)
    if isinstance(v, Mapping):
        elems = [
            FuzzyElement(new_string(str(k)), float(w))
            for k, w in v.items()
            if _is_number(w)
        ]
        return new_fuzzy(make_fuzzy_set(False, *elems))
    return None


def json_map_to_environment(mapping: Mapping[str, Any]) -> Environment:
    env = Environment()
    for key, v in mapping.items():
        val = json_value_to_value(v)
        if val is None:
            logger.debug("skipping key %r: unsupported %s", key, type(v).__name__)
            continue
        env.define(str(key), val)
    return env


def load_environment(text: str) -> Environment:
    """Decode a JSON document and convert its top-level object."""
    doc = json.loads(text)
    if not isinstance(doc, Mapping):
        raise FuzzlispTypeError(
            f"Expected a JSON object, got {type(doc).__name__}"
        )
    return json_map_to_environment(doc)
