"""Sequence predicates (none_of / any_of / all_of / one_of)."""

from searchkit_lite.sequences.predicates import (
    all_of,
    all_of_equal,
    any_of,
    any_of_equal,
    none_of,
    none_of_equal,
    one_of,
    one_of_equal,
)

__all__ = [
    "all_of",
    "all_of_equal",
    "any_of",
    "any_of_equal",
    "none_of",
    "none_of_equal",
    "one_of",
    "one_of_equal",
]
