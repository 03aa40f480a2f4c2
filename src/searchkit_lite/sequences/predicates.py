"""Quantifier predicates over sequences.

Thin, early-exit scans. The *_equal variants compare every element
against a fixed value instead of calling a predicate, which is handy
when the "predicate" is just equality with a sentinel.

    none_of([1, 3, 5], is_even)      # True
    none_of_equal(b"abc", ord("z"))  # True
    all_of_equal("aaaa", "a")        # True
    one_of([1, 2, 3], is_even)       # True, exactly one match

Empty inputs follow the usual logic conventions: none_of and all_of
are True, any_of and one_of are False.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

Predicate = Callable[[Any], bool]


def none_of(items: Iterable, pred: Predicate) -> bool:
    for item in items:
        if pred(item):
            return False
    return True


def none_of_equal(items: Iterable, value: Any) -> bool:
    for item in items:
        if value == item:
            return False
    return True


def any_of(items: Iterable, pred: Predicate) -> bool:
    return not none_of(items, pred)


def any_of_equal(items: Iterable, value: Any) -> bool:
    return not none_of_equal(items, value)


def all_of(items: Iterable, pred: Predicate) -> bool:
    for item in items:
        if not pred(item):
            return False
    return True


def all_of_equal(items: Iterable, value: Any) -> bool:
    for item in items:
        if value != item:
            return False
    return True


def one_of(items: Iterable, pred: Predicate) -> bool:
    """True if exactly one element satisfies `pred`. Stops at the second hit."""
    found = False
    for item in items:
        if pred(item):
            if found:
                return False
            found = True
    return found


def one_of_equal(items: Iterable, value: Any) -> bool:
    return one_of(items, lambda item: value == item)
