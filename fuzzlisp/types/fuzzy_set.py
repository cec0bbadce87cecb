"""Fuzzy set construction and membership queries."""

from __future__ import annotations

from typing import Iterable

from fuzzlisp.types.value import FuzzyElement, Value, is_equal, new_float

FuzzySet = tuple[FuzzyElement, ...]


def make_fuzzy_set(normalize: bool, *elements: FuzzyElement) -> FuzzySet:
    """Copy `elements` into a fuzzy set, optionally scaling weights to sum to 1.

    Normalizing a set whose weights sum to exactly zero leaves it unchanged.
    """
    elems = tuple(elements)
    if normalize:
        total = sum(e.weight for e in elems)
        if total != 0.0:
            elems = tuple(FuzzyElement(e.value, e.weight / total) for e in elems)
    return elems


def fuzzy_equals(fuzzy_set: Iterable[FuzzyElement], find: Value) -> Value:
    # sets may hold duplicates; the first match wins
    for e in fuzzy_set:
        if is_equal(e.value, find):
            return new_float(e.weight)
    return new_float(0.0)


def fuzzy_equals_many(fuzzy_set: Iterable[FuzzyElement], find: Iterable[Value]) -> Value:
    """Sum the membership of every value in `find`, in order."""
    elems = tuple(fuzzy_set)
    res = 0.0
    for f in find:
        res += fuzzy_equals(elems, f).as_float()
    return new_float(res)
