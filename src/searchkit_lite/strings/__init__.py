"""Single-pattern substring search: Boyer-Moore, Horspool and KMP."""

from searchkit_lite.strings.border import border_table
from searchkit_lite.strings.boyer_moore import BoyerMoore
from searchkit_lite.strings.horspool import BoyerMooreHorspool
from searchkit_lite.strings.kmp import KnuthMorrisPratt
from searchkit_lite.strings.matcher import NOT_FOUND, Matcher
from searchkit_lite.strings.search import (
    ALGORITHMS,
    NaiveMatcher,
    boyer_moore_horspool_search,
    boyer_moore_search,
    knuth_morris_pratt_search,
    make_matcher,
    naive_search,
)
from searchkit_lite.strings.skip_table import (
    ArraySkipTable,
    MapSkipTable,
    SkipTable,
    make_skip_table,
)

__all__ = [
    "ALGORITHMS",
    "ArraySkipTable",
    "BoyerMoore",
    "BoyerMooreHorspool",
    "KnuthMorrisPratt",
    "MapSkipTable",
    "Matcher",
    "NOT_FOUND",
    "NaiveMatcher",
    "SkipTable",
    "border_table",
    "boyer_moore_horspool_search",
    "boyer_moore_search",
    "knuth_morris_pratt_search",
    "make_matcher",
    "make_skip_table",
    "naive_search",
]
